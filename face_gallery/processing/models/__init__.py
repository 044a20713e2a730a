"""
Models (load and run inference)
------------------------------

- ModelLoader: load the three face-analysis capabilities once, concurrently.
- ModelManager: cache loaded models by capability kind + model ID.
- ModelReadiness: explicit readiness gate handed to consumers.
- Providers: DeepFaceProvider.
"""

# -----------------------------------------------------------------------------
# Public API
# -----------------------------------------------------------------------------
from .contracts import FaceAnalysisProvider
from .manager import ModelManager
from .model_loader import ModelLoader
from .readiness import ModelReadiness, ReadinessState

__all__ = [
    "FaceAnalysisProvider",
    "ModelManager",
    "ModelLoader",
    "ModelReadiness",
    "ReadinessState",
]
