
from .comparison import BestMatchTracker, ComparisonResult, ComparisonStatus, ImageMatch
from .widget import ComparisonWidget

__all__ = [
    "BestMatchTracker",
    "ComparisonResult",
    "ComparisonStatus",
    "ImageMatch",
    "ComparisonWidget",
]
