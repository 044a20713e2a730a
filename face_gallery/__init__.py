"""
Face Gallery Application - root package.

This package contains the FastAPI app entry point (main.py), API routes,
the comparison widgets, image loading and the face-matching pipeline.
"""
