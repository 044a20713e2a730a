"""
API layer for Face Gallery.

Exposes HTTP endpoints under /api/v1 (models, comparisons, widgets) and the
server-rendered widget pages.
"""
