# Standard library imports
import asyncio
import logging
from typing import Optional, Sequence

# External package imports
import numpy as np

# Local application imports
from ...domain.models import ComparisonResult, ComparisonStatus, ImageMatch
from ...processing.descriptors import DescriptorExtractor
from ...processing.matching import MatchEvaluator
from ...processing.models import ModelReadiness

logger = logging.getLogger(__name__)


class ComparisonService:
    """
    Runs one face comparison: main image vs. every gallery image.

    Flow:
    1. Skip (with a warning) unless the models are ready
    2. Load the main image and take its first detected face as the anchor
    3. Load + extract + score every gallery image concurrently
    4. After all of them settle, apply threshold and fallback

    Nothing is cached between runs.
    """

    def __init__(
        self,
        readiness: ModelReadiness,
        extractor: DescriptorExtractor,
        evaluator: MatchEvaluator,
    ) -> None:
        self.readiness = readiness
        self.extractor = extractor
        self.evaluator = evaluator

    def _empty(self, status: ComparisonStatus) -> ComparisonResult:
        policy = self.evaluator.policy
        return ComparisonResult.empty(status, policy=policy.name, threshold=policy.threshold)

    async def compare(self, main_image: str, gallery: Sequence[str]) -> ComparisonResult:
        """
        Compare the main image's first face against every gallery image.

        Args:
            main_image: Main image reference
            gallery: Gallery image references

        Returns:
            ComparisonResult (never raises; failures give an empty result)
        """
        if not self.readiness.is_ready:
            logger.warning(f"Models not loaded ({self.readiness.state.value}); skipping comparison")
            return self._empty(ComparisonStatus.SKIPPED_NOT_READY)

        try:
            main_descriptors = await self.extractor.describe(main_image)
            if not main_descriptors:
                logger.warning(f"No face found in main image {main_image}")
                return self._empty(ComparisonStatus.NO_FACE_IN_MAIN)

            # First detected face in the main image
            anchor = main_descriptors[0]

            scores = await asyncio.gather(
                *(self._score_gallery_image(anchor, image_ref) for image_ref in gallery)
            )
            result = self.evaluator.evaluate(scores)
            logger.info(
                f"Compared {main_image} against {len(gallery)} image(s): "
                f"{len(result.matched)} matched (fallback={result.fallback_used})"
            )
            return result
        except Exception as e:
            logger.error(f"Error comparing faces: {e}", exc_info=True)
            return self._empty(ComparisonStatus.FAILED)

    async def _score_gallery_image(self, anchor: np.ndarray, image_ref: str) -> Optional[ImageMatch]:
        descriptors = await self.extractor.describe(image_ref)
        if not descriptors:
            return None
        try:
            return self.evaluator.score_image(anchor, image_ref, descriptors)
        except ValueError as e:
            logger.error(f"Error scoring image {image_ref}: {e}")
            return None
