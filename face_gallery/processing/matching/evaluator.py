"""
Match Evaluator
---------------

Applies the threshold and the best-match fallback to a finished set of
per-image scores. Runs only after every gallery image has been scored.
"""

import logging
from typing import List, Optional, Sequence

import numpy as np

from face_gallery.domain.models import BestMatchTracker, ComparisonResult, ComparisonStatus, ImageMatch
from face_gallery.processing.matching.policies import MatchPolicy

logger = logging.getLogger(__name__)


class MatchEvaluator:
    """Scores gallery images with one policy and assembles the matched set."""

    def __init__(self, policy: MatchPolicy):
        self.policy = policy

    def score_image(
        self,
        anchor: np.ndarray,
        image_ref: str,
        descriptors: Sequence[np.ndarray],
    ) -> Optional[ImageMatch]:
        """Score one gallery image; None when it produced no descriptors."""
        match = self.policy.score(anchor, image_ref, descriptors)
        if match is not None:
            logger.info(f"Best match for {image_ref}: {match.distance:.4f}")
        return match

    def evaluate(self, scores: Sequence[Optional[ImageMatch]]) -> ComparisonResult:
        """
        Build the comparison result from per-image scores.

        Args:
            scores: One entry per gallery image in gallery order (None = no descriptors)

        Returns:
            ComparisonResult; when nothing passed the threshold, the globally
            closest image (if any beat the tracker sentinel) is added as a fallback
        """
        valid: List[ImageMatch] = [s for s in scores if s is not None]
        tracker = BestMatchTracker()
        matched: List[str] = []

        for score in valid:
            tracker.offer(score.image_ref, score.distance)
            if score.matched:
                matched.append(score.image_ref)

        fallback_used = False
        if not matched and tracker.has_match:
            logger.info(
                f"No image passed threshold {self.policy.threshold}; "
                f"falling back to closest {tracker.image_ref} ({tracker.distance:.4f})"
            )
            matched.append(tracker.image_ref)
            fallback_used = True

        return ComparisonResult(
            status=ComparisonStatus.COMPLETED,
            matched=matched,
            scores=valid,
            best_image=tracker.image_ref,
            best_distance=tracker.distance if tracker.has_match else None,
            fallback_used=fallback_used,
            policy=self.policy.name,
            threshold=self.policy.threshold,
        )
