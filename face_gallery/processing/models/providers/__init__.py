"""
Model providers
---------------

Concrete face-analysis providers. DeepFaceProvider is the only one shipped.
"""

# -----------------------------------------------------------------------------
# Public API
# -----------------------------------------------------------------------------
from face_gallery.processing.models.providers.deepface_provider import DeepFaceProvider

__all__ = ["DeepFaceProvider"]
