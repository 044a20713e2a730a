"""
Matching
--------

- euclidean_distance: descriptor distance.
- FaceMatcher: labeled nearest-identity matcher.
- MatchPolicy: pairwise-distance or matcher-object scoring of one gallery image.
- MatchEvaluator: threshold + best-match fallback over a finished run.
"""

# -----------------------------------------------------------------------------
# Public API
# -----------------------------------------------------------------------------
from .distance import euclidean_distance
from .evaluator import MatchEvaluator
from .face_matcher import FaceMatch, FaceMatcher, LabeledFaceDescriptors
from .policies import MatcherObjectPolicy, MatchPolicy, PairwiseDistancePolicy, build_policy

__all__ = [
    "euclidean_distance",
    "MatchEvaluator",
    "FaceMatch",
    "FaceMatcher",
    "LabeledFaceDescriptors",
    "MatcherObjectPolicy",
    "MatchPolicy",
    "PairwiseDistancePolicy",
    "build_policy",
]
