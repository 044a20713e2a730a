from typing import Optional, TYPE_CHECKING
from ...core.config import get_settings
from ...processing.models import FaceAnalysisProvider, ModelLoader, ModelReadiness
from ...processing.models.providers import DeepFaceProvider

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class ModelProvider:
    """Face model provider - registers the face-analysis backend, readiness gate and loader"""

    @staticmethod
    def register(container: "BaseContainer", face_provider: Optional[FaceAnalysisProvider] = None) -> None:
        """
        Register model singletons.
        One readiness gate per container; everything that must wait for the
        models receives this gate.
        """
        if face_provider is None:
            settings = get_settings()
            face_provider = DeepFaceProvider(
                recognition_model=settings.face_recognition_model,
                detector_backend=settings.face_detector_backend,
                models_dir=settings.models_dir,
            )
        readiness = ModelReadiness()

        container.register_singleton(FaceAnalysisProvider, face_provider)
        container.register_singleton(ModelReadiness, readiness)
        container.register_singleton(ModelLoader, ModelLoader(face_provider, readiness))
