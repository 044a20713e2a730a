"""
Processing layer: face-analysis models, descriptor extraction and matching.
"""
