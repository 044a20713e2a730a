from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple, Union

import numpy as np

from face_gallery.domain.constants import MATCHER_DISTANCE_THRESHOLD, UNKNOWN_LABEL
from face_gallery.processing.matching.distance import euclidean_distance


@dataclass(frozen=True)
class LabeledFaceDescriptors:
    """One identity: a label plus one or more reference descriptors."""

    label: str
    descriptors: Tuple[np.ndarray, ...]

    def __post_init__(self) -> None:
        if not self.label:
            raise ValueError("LabeledFaceDescriptors requires a label")
        if not self.descriptors:
            raise ValueError(f"LabeledFaceDescriptors '{self.label}' has no descriptors")


@dataclass(frozen=True)
class FaceMatch:
    label: str
    distance: float

    @property
    def is_unknown(self) -> bool:
        return self.label == UNKNOWN_LABEL


ReferenceInput = Union[
    LabeledFaceDescriptors,
    np.ndarray,
    Sequence[Union[LabeledFaceDescriptors, np.ndarray]],
]


class FaceMatcher:
    """Nearest-identity matcher over labeled reference descriptors.

    The distance of a query to an identity is the mean Euclidean distance to
    that identity's descriptors. The best identity is reported under its label
    when that distance is below `distance_threshold`, otherwise as "unknown"
    (still carrying the distance).
    """

    def __init__(self, references: ReferenceInput, distance_threshold: float = MATCHER_DISTANCE_THRESHOLD):
        self.distance_threshold = float(distance_threshold)
        self.labeled_descriptors = self._normalize(references)
        if not self.labeled_descriptors:
            raise ValueError("FaceMatcher requires at least one reference descriptor")

    @staticmethod
    def _normalize(references: ReferenceInput) -> List[LabeledFaceDescriptors]:
        # Bare descriptors get generated labels "person 1", "person 2", ...
        if isinstance(references, LabeledFaceDescriptors):
            return [references]
        if isinstance(references, np.ndarray) and references.ndim == 1:
            return [LabeledFaceDescriptors("person 1", (references,))]

        out: List[LabeledFaceDescriptors] = []
        for i, ref in enumerate(references):
            if isinstance(ref, LabeledFaceDescriptors):
                out.append(ref)
            else:
                out.append(LabeledFaceDescriptors(f"person {i + 1}", (np.asarray(ref, dtype=np.float32),)))
        return out

    def compute_mean_distance(self, query: np.ndarray, descriptors: Sequence[np.ndarray]) -> float:
        distances = [euclidean_distance(d, query) for d in descriptors]
        return float(sum(distances) / len(distances))

    def match_descriptor(self, query: np.ndarray) -> List[FaceMatch]:
        """Distance of `query` to every identity, in reference order."""
        return [
            FaceMatch(ld.label, self.compute_mean_distance(query, ld.descriptors))
            for ld in self.labeled_descriptors
        ]

    def find_best_match(self, query: np.ndarray) -> FaceMatch:
        best = min(self.match_descriptor(query), key=lambda m: m.distance)
        if best.distance < self.distance_threshold:
            return best
        return FaceMatch(UNKNOWN_LABEL, best.distance)
