"""Logging configuration."""

# Standard library imports
import logging

# Local application imports
from .config import get_settings


def configure_logging() -> None:
    """Configure the root logger from LOG_LEVEL."""
    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    # DeepFace and TensorFlow are chatty at INFO
    logging.getLogger("deepface").setLevel(logging.WARNING)
    logging.getLogger("tensorflow").setLevel(logging.ERROR)
