# Standard library imports
from dataclasses import dataclass, field
from typing import List, Optional

# Local application imports
from .comparison import ComparisonResult


@dataclass
class ComparisonWidget:
    """
    Pure domain model for one comparison widget - no external dependencies.

    A widget owns its inputs (main image + gallery) and the matched set of its
    most recent committed run. Every run takes a new generation number; only
    the run holding the latest generation may commit.
    """
    id: str
    main_image: str
    gallery: List[str] = field(default_factory=list)
    matched: List[str] = field(default_factory=list)
    last_result: Optional[ComparisonResult] = None
    generation: int = 0

    def __post_init__(self) -> None:
        """Business validations"""
        if not self.id or len(self.id.strip()) < 1:
            raise ValueError("Widget ID is required")
        if not self.main_image or len(self.main_image.strip()) < 1:
            raise ValueError("Main image is required")
        self.gallery = [ref for ref in self.gallery if ref and ref.strip()]

    @property
    def can_compare(self) -> bool:
        """A run is only triggered with a main image and a non-empty gallery"""
        return bool(self.main_image) and len(self.gallery) > 0

    def next_generation(self) -> int:
        self.generation += 1
        return self.generation

    def is_current(self, generation: int) -> bool:
        return generation == self.generation

    def commit(self, generation: int, result: ComparisonResult) -> bool:
        """
        Store `result` if `generation` is still the latest one.

        Returns:
            True if the result was committed, False if the run was superseded
        """
        if not self.is_current(generation):
            return False
        self.matched = list(result.matched)
        self.last_result = result
        return True
