"""
Shared constants for face matching.

Used by the match policies, the evaluator and the configuration layer.
Single place for easier updates.
"""

# -----------------------------------------------------------------------------
# Match policies
# -----------------------------------------------------------------------------
POLICY_PAIRWISE = "pairwise"
POLICY_MATCHER = "matcher"
MATCH_POLICIES = frozenset({POLICY_PAIRWISE, POLICY_MATCHER})

# Strict "<" thresholds on Euclidean descriptor distance
PAIRWISE_DISTANCE_THRESHOLD = 0.45
MATCHER_DISTANCE_THRESHOLD = 0.5

# Starting distance of the best-match tracker; only strictly smaller distances move it
BEST_MATCH_SENTINEL_DISTANCE = 1.0

# Label reported by the matcher when nothing is within its threshold
UNKNOWN_LABEL = "unknown"
# Label given to the anchor descriptor of the main image
ANCHOR_LABEL = "main"

# -----------------------------------------------------------------------------
# Model capabilities
# -----------------------------------------------------------------------------
CAPABILITY_FACE_DETECTOR = "face_detector"
CAPABILITY_LANDMARK_PREDICTOR = "landmark_predictor"
CAPABILITY_DESCRIPTOR_EXTRACTOR = "descriptor_extractor"
MODEL_CAPABILITIES = (
    CAPABILITY_FACE_DETECTOR,
    CAPABILITY_LANDMARK_PREDICTOR,
    CAPABILITY_DESCRIPTOR_EXTRACTOR,
)
