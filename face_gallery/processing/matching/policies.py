"""
Match Policies
--------------

A policy scores one gallery image (all of its face descriptors) against the
anchor descriptor of the main image. Two interchangeable policies exist; one
is chosen per process via MATCH_POLICY and they are never mixed in a run.

- pairwise: closest Euclidean distance, matched below 0.45
- matcher:  FaceMatcher best match, matched when labeled and below 0.5
"""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

import numpy as np

from face_gallery.domain.constants import (
    ANCHOR_LABEL,
    MATCHER_DISTANCE_THRESHOLD,
    PAIRWISE_DISTANCE_THRESHOLD,
    POLICY_MATCHER,
    POLICY_PAIRWISE,
)
from face_gallery.domain.models import ImageMatch
from face_gallery.processing.matching.distance import euclidean_distance
from face_gallery.processing.matching.face_matcher import FaceMatcher, LabeledFaceDescriptors


class MatchPolicy(ABC):
    """Base class for gallery-image scoring policies."""

    name: str = ""

    def __init__(self, threshold: float):
        self.threshold = float(threshold)

    @abstractmethod
    def score(
        self,
        anchor: np.ndarray,
        image_ref: str,
        descriptors: Sequence[np.ndarray],
    ) -> Optional[ImageMatch]:
        """
        Score one gallery image.

        Args:
            anchor: Anchor descriptor from the main image
            image_ref: Gallery image reference
            descriptors: Descriptors found in the gallery image

        Returns:
            ImageMatch with the image's best distance, or None when it has no descriptors
        """


class PairwiseDistancePolicy(MatchPolicy):
    """Closest descriptor by Euclidean distance; matched when strictly below the threshold."""

    name = POLICY_PAIRWISE

    def __init__(self, threshold: float = PAIRWISE_DISTANCE_THRESHOLD):
        super().__init__(threshold)

    def score(self, anchor, image_ref, descriptors):
        if not descriptors:
            return None
        closest = min(euclidean_distance(anchor, d) for d in descriptors)
        return ImageMatch(
            image_ref=image_ref,
            distance=closest,
            matched=closest < self.threshold,
        )


class MatcherObjectPolicy(MatchPolicy):
    """
    FaceMatcher keyed on the anchor; the lowest-distance result among the
    image's descriptors is kept. Matched when its label is not "unknown" and
    its distance is strictly below the threshold.
    """

    name = POLICY_MATCHER

    def __init__(self, threshold: float = MATCHER_DISTANCE_THRESHOLD):
        super().__init__(threshold)

    def build_matcher(self, anchor: np.ndarray) -> FaceMatcher:
        return FaceMatcher(LabeledFaceDescriptors(ANCHOR_LABEL, (anchor,)), self.threshold)

    def score(self, anchor, image_ref, descriptors):
        if not descriptors:
            return None
        matcher = self.build_matcher(anchor)
        best = min((matcher.find_best_match(d) for d in descriptors), key=lambda m: m.distance)
        return ImageMatch(
            image_ref=image_ref,
            distance=best.distance,
            matched=(not best.is_unknown) and best.distance < self.threshold,
            label=best.label,
        )


def build_policy(
    name: str,
    pairwise_threshold: float = PAIRWISE_DISTANCE_THRESHOLD,
    matcher_threshold: float = MATCHER_DISTANCE_THRESHOLD,
) -> MatchPolicy:
    """
    Create the policy named by MATCH_POLICY.

    Raises:
        ValueError: If the name is not a known policy
    """
    key = (name or "").strip().lower()
    if key == POLICY_PAIRWISE:
        return PairwiseDistancePolicy(pairwise_threshold)
    if key == POLICY_MATCHER:
        return MatcherObjectPolicy(matcher_threshold)
    raise ValueError(f"Unknown match policy: {name!r} (expected '{POLICY_PAIRWISE}' or '{POLICY_MATCHER}')")
