"""
Model Loader
------------

Initializes the three face-analysis capabilities (face detector, landmark
predictor, descriptor extractor) before any comparison runs, and publishes the
outcome on a ModelReadiness gate.
"""

import asyncio
import logging
from typing import Dict, Optional

from face_gallery.domain.constants import MODEL_CAPABILITIES
from face_gallery.processing.models.contracts import FaceAnalysisProvider
from face_gallery.processing.models.manager import ModelManager
from face_gallery.processing.models.readiness import ModelReadiness, ReadinessState

logger = logging.getLogger(__name__)


class ModelLoader:
    """
    Loads every capability model concurrently, once.

    There is no automatic retry: after a failure the gate stays FAILED until
    someone calls load() again.
    """

    def __init__(
        self,
        provider: FaceAnalysisProvider,
        readiness: ModelReadiness,
        manager: Optional[ModelManager] = None,
    ):
        self._provider = provider
        self._readiness = readiness
        self._manager = manager or ModelManager(provider)

    @property
    def readiness(self) -> ModelReadiness:
        return self._readiness

    def capabilities(self) -> Dict[str, str]:
        """Capability name -> model id, in the canonical capability order."""
        model_ids = self._provider.model_ids()
        return {capability: model_ids[capability] for capability in MODEL_CAPABILITIES}

    async def load(self) -> ReadinessState:
        """
        Load all capabilities and update the readiness gate.

        Returns:
            Readiness state after the attempt
        """
        if self._readiness.is_ready:
            return self._readiness.state
        if self._readiness.is_loading:
            logger.info("Model loading already in progress")
            return self._readiness.state

        self._readiness.mark_loading()
        try:
            capabilities = self.capabilities()
            logger.info(f"Loading face models: {capabilities}")
            await asyncio.gather(
                *(
                    asyncio.to_thread(self._manager.load_model, capability, model_id)
                    for capability, model_id in capabilities.items()
                )
            )
        except Exception as e:
            logger.error(f"Error loading face models: {e}", exc_info=True)
            self._readiness.mark_failed(str(e))
            return self._readiness.state

        self._readiness.mark_ready()
        logger.info("Face models loaded")
        return self._readiness.state
