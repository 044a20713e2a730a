"""
Descriptor Extractor
--------------------

Turns a decoded image into one face descriptor per detected face.
Every failure is contained here: callers always get a (possibly empty) list.
Image loading runs concurrently; inference is serialized.
"""

import asyncio
import logging
import threading
from typing import List

import numpy as np

from face_gallery.infrastructure.images import ImageLoader, ImageLoadError
from face_gallery.processing.models.contracts import FaceAnalysisProvider
from face_gallery.processing.models.readiness import ModelReadiness

logger = logging.getLogger(__name__)


class DescriptorExtractor:
    """Runs detection + alignment + embedding through the face-analysis provider."""

    def __init__(
        self,
        provider: FaceAnalysisProvider,
        readiness: ModelReadiness,
        image_loader: ImageLoader,
    ):
        self._provider = provider
        self._readiness = readiness
        self._image_loader = image_loader
        # Backend models are shared and not thread-safe; one inference at a time
        self._inference_lock = threading.Lock()

    def _describe_faces(self, image: np.ndarray) -> List[np.ndarray]:
        with self._inference_lock:
            return self._provider.describe_faces(image)

    async def extract(self, image: np.ndarray, label: str = "image") -> List[np.ndarray]:
        """
        Detect all faces in a decoded image and return their descriptors.

        Args:
            image: Decoded BGR image
            label: Name used in log messages (usually the image reference)

        Returns:
            Descriptors in detector order; empty if no face, models not ready, or on error
        """
        if not self._readiness.is_ready:
            logger.warning(f"Models not ready ({self._readiness.state.value}); skipping face detection for {label}")
            return []
        try:
            descriptors = await asyncio.to_thread(self._describe_faces, image)
        except Exception as e:
            logger.error(f"Error processing image {label}: {e}", exc_info=True)
            return []
        logger.debug(f"Found {len(descriptors)} face(s) in {label}")
        return list(descriptors)

    async def describe(self, reference: str) -> List[np.ndarray]:
        """
        Load an image reference and extract its descriptors.

        Image-load failures are logged and treated as "no faces found".
        """
        if not self._readiness.is_ready:
            logger.warning(f"Models not ready ({self._readiness.state.value}); skipping {reference}")
            return []
        try:
            image = await self._image_loader.load(reference)
        except ImageLoadError as e:
            logger.error(f"Error loading image: {e}")
            return []
        return await self.extract(image, label=reference)
