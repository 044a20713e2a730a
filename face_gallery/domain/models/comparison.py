# Standard library imports
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import List, Optional

# Local application imports
from ..constants import BEST_MATCH_SENTINEL_DISTANCE


class ComparisonStatus(str, Enum):
    """Outcome of one comparison run"""
    COMPLETED = "completed"
    SKIPPED_NOT_READY = "skipped_not_ready"
    NO_FACE_IN_MAIN = "no_face_in_main"
    FAILED = "failed"
    SUPERSEDED = "superseded"


@dataclass(frozen=True)
class ImageMatch:
    """
    Score of one gallery image against the anchor descriptor.

    Only gallery images that produced at least one descriptor get a score.
    `label` is set by the matcher policy; the pairwise policy leaves it empty.
    """
    image_ref: str
    distance: float
    matched: bool
    label: Optional[str] = None


@dataclass
class BestMatchTracker:
    """
    Running (distance, image) pair over one comparison pass.

    Starts at the sentinel distance with no image and only moves on strictly
    smaller distances, so the first image wins a tie.
    """
    distance: float = BEST_MATCH_SENTINEL_DISTANCE
    image_ref: Optional[str] = None

    def offer(self, image_ref: str, distance: float) -> None:
        """Record `image_ref` if it beats the current best."""
        if distance < self.distance:
            self.distance = distance
            self.image_ref = image_ref

    @property
    def has_match(self) -> bool:
        return self.image_ref is not None


@dataclass
class ComparisonResult:
    """
    Pure domain model for the outcome of one comparison run.

    `matched` keeps gallery order; a fallback image is appended last.
    """
    status: ComparisonStatus
    matched: List[str] = field(default_factory=list)
    scores: List[ImageMatch] = field(default_factory=list)
    best_image: Optional[str] = None
    best_distance: Optional[float] = None
    fallback_used: bool = False
    policy: Optional[str] = None
    threshold: Optional[float] = None

    @classmethod
    def empty(
        cls,
        status: ComparisonStatus,
        policy: Optional[str] = None,
        threshold: Optional[float] = None,
    ) -> "ComparisonResult":
        """Result with no matches, used for every non-completed outcome"""
        return cls(status=status, policy=policy, threshold=threshold)

    def with_status(self, status: ComparisonStatus) -> "ComparisonResult":
        return replace(self, status=status)
