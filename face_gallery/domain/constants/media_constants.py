"""
Shared constants for image references.

Used by the image loader and the static mounts in main.py.
"""

# URL prefix under which the configured IMAGE_ROOT is served
IMAGE_URL_PREFIX = "/imgs"
# URL prefix under which the models directory is served
MODELS_URL_PREFIX = "/models"

REMOTE_SCHEMES = frozenset({"http", "https"})
