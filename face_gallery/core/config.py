# Standard library imports
import os
from typing import Final, List, Optional


# Sample set the widget shows when no gallery is configured
DEFAULT_MAIN_IMAGE = "/imgs/Screenshot 2025-03-30 231705.png"
DEFAULT_GALLERY_IMAGES = (
    "/imgs/DSC_8477 - Copy - Copy.jpg",
    "/imgs/DSC01265.JPG",
    "/imgs/DSC01489.JPG",
    "/imgs/DSC01497.JPG",
    "/imgs/DSC01644.JPG",
    "/imgs/DSC01649.JPG",
    "/imgs/DSC01698.JPG",
    "/imgs/IMG-20240506-WA0024.jpg",
    "/imgs/IMG-20241206-WA0063.jpg",
    "/imgs/IMG-20241207-WA0047.jpg",
)


def parse_list(value: Optional[str]) -> List[str]:
    """
    Split a comma-separated environment value into a list of stripped items.

    Empty items are dropped, so "a, ,b" gives ["a", "b"].
    """
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """

    def __init__(self) -> None:
        # Logging
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO")

        # Face analysis models (DeepFace)
        self.models_dir: Final[str] = os.getenv("DEEPFACE_HOME", "models")
        self.face_detector_backend: Final[str] = os.getenv("FACE_DETECTOR_BACKEND", "ssd")
        self.face_recognition_model: Final[str] = os.getenv("FACE_RECOGNITION_MODEL", "Dlib")

        # Matching policy
        self.match_policy: Final[str] = os.getenv("MATCH_POLICY", "pairwise").strip().lower()
        self.pairwise_threshold: Final[float] = float(os.getenv("PAIRWISE_THRESHOLD", "0.45"))
        self.matcher_threshold: Final[float] = float(os.getenv("MATCHER_THRESHOLD", "0.5"))

        # Image loading
        self.image_root: Final[str] = os.getenv("IMAGE_ROOT", "public/imgs")
        self.image_fetch_timeout: Final[float] = float(os.getenv("IMAGE_FETCH_TIMEOUT", "30"))

        # Default widget
        self.main_image: Final[str] = os.getenv("MAIN_IMAGE", DEFAULT_MAIN_IMAGE)
        self.gallery_images: Final[List[str]] = (
            parse_list(os.getenv("GALLERY_IMAGES")) or list(DEFAULT_GALLERY_IMAGES)
        )

        # HTTP
        self.cors_origins: Final[List[str]] = parse_list(
            os.getenv("CORS_ORIGINS", "http://localhost:3000,http://localhost:5173")
        )


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)

    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
