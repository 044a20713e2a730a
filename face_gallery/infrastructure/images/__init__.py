"""Image loading (local static files and remote URLs)."""
from .image_loader import ImageLoader, ImageLoadError, decode_image, is_remote_reference

__all__ = ["ImageLoader", "ImageLoadError", "decode_image", "is_remote_reference"]
