"""Constants shared across layers"""

from .match_constants import (
    ANCHOR_LABEL,
    BEST_MATCH_SENTINEL_DISTANCE,
    CAPABILITY_DESCRIPTOR_EXTRACTOR,
    CAPABILITY_FACE_DETECTOR,
    CAPABILITY_LANDMARK_PREDICTOR,
    MATCH_POLICIES,
    MATCHER_DISTANCE_THRESHOLD,
    MODEL_CAPABILITIES,
    PAIRWISE_DISTANCE_THRESHOLD,
    POLICY_MATCHER,
    POLICY_PAIRWISE,
    UNKNOWN_LABEL,
)
from .media_constants import (
    IMAGE_URL_PREFIX,
    MODELS_URL_PREFIX,
    REMOTE_SCHEMES,
)

__all__ = [
    "ANCHOR_LABEL",
    "BEST_MATCH_SENTINEL_DISTANCE",
    "CAPABILITY_DESCRIPTOR_EXTRACTOR",
    "CAPABILITY_FACE_DETECTOR",
    "CAPABILITY_LANDMARK_PREDICTOR",
    "MATCH_POLICIES",
    "MATCHER_DISTANCE_THRESHOLD",
    "MODEL_CAPABILITIES",
    "PAIRWISE_DISTANCE_THRESHOLD",
    "POLICY_MATCHER",
    "POLICY_PAIRWISE",
    "UNKNOWN_LABEL",
    "IMAGE_URL_PREFIX",
    "MODELS_URL_PREFIX",
    "REMOTE_SCHEMES",
]
