# Standard library imports
import asyncio
import logging
from pathlib import Path
from typing import Optional
from urllib.parse import unquote, urlparse

# External package imports
import cv2
import httpx
import numpy as np

# Local application imports
from ...domain.constants import IMAGE_URL_PREFIX, REMOTE_SCHEMES
from ..http_client_factory import build_timeout, get_shared_http_client

logger = logging.getLogger(__name__)


class ImageLoadError(Exception):
    """Raised when an image reference cannot be fetched or decoded"""


def decode_image(data: bytes) -> np.ndarray:
    """
    Decode encoded image bytes (JPEG, PNG, ...) into a BGR pixel array.

    Args:
        data: Encoded image bytes

    Returns:
        HxWx3 uint8 array in OpenCV's BGR order

    Raises:
        ImageLoadError: If the bytes are empty or not a decodable image
    """
    if not data:
        raise ImageLoadError("Image data is empty")
    buffer = np.frombuffer(data, dtype=np.uint8)
    image = cv2.imdecode(buffer, cv2.IMREAD_COLOR)
    if image is None:
        raise ImageLoadError("Image data could not be decoded")
    return image


def is_remote_reference(reference: str) -> bool:
    return urlparse(reference).scheme.lower() in REMOTE_SCHEMES


class ImageLoader:
    """
    Loads image references into decoded pixel arrays.

    - http(s) URLs are fetched with the shared HTTP client, anonymously.
    - "/imgs/..." URL paths and relative paths resolve against the image root.
    - Absolute filesystem paths are read only when they lie inside the image root.
    """

    def __init__(
        self,
        image_root: str,
        timeout: float = 30.0,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize image loader.

        Args:
            image_root: Directory that "/imgs/..." references are served from
            timeout: Fetch timeout in seconds; 0 disables it
            http_client: Optional client to use instead of the shared one
        """
        self.image_root = Path(image_root)
        self.timeout = timeout
        self._http_client = http_client

    def _get_client(self) -> httpx.AsyncClient:
        if self._http_client is not None:
            return self._http_client
        return get_shared_http_client(self.timeout)

    def resolve_path(self, reference: str) -> Path:
        """
        Map a local image reference to a filesystem path under the image root.

        "/imgs/..." and relative references are joined onto the root; an
        absolute path is accepted only if it already lies inside the root.

        Raises:
            ImageLoadError: If the reference resolves outside the image root
        """
        decoded = unquote(reference)
        prefix = IMAGE_URL_PREFIX.rstrip("/") + "/"
        root = self.image_root.resolve()

        if decoded.startswith(prefix):
            candidate = root / decoded[len(prefix):]
        else:
            candidate = Path(decoded)
            if not candidate.is_absolute():
                candidate = root / candidate

        path = candidate.resolve()
        if root not in path.parents:
            raise ImageLoadError(f"Image reference outside image root: {reference}")
        return path

    async def fetch_bytes(self, reference: str) -> bytes:
        """
        Fetch the raw bytes behind an image reference.

        Raises:
            ImageLoadError: On HTTP errors, timeouts or missing files
        """
        if is_remote_reference(reference):
            client = self._get_client()
            try:
                response = await client.get(reference, timeout=build_timeout(self.timeout))
                response.raise_for_status()
            except httpx.TimeoutException as e:
                raise ImageLoadError(f"Timeout while fetching image {reference}") from e
            except httpx.HTTPError as e:
                raise ImageLoadError(f"Failed to fetch image {reference}: {e}") from e
            return response.content

        path = self.resolve_path(reference)
        try:
            return await asyncio.to_thread(path.read_bytes)
        except OSError as e:
            raise ImageLoadError(f"Failed to read image {reference} ({path}): {e}") from e

    async def load(self, reference: str) -> np.ndarray:
        """
        Load and decode an image reference.

        Args:
            reference: URL or path of the image

        Returns:
            Decoded BGR image

        Raises:
            ImageLoadError: If the image cannot be fetched or decoded
        """
        data = await self.fetch_bytes(reference)
        try:
            image = decode_image(data)
        except ImageLoadError as e:
            raise ImageLoadError(f"{e}: {reference}") from e
        logger.debug(f"Loaded image {reference} ({image.shape[1]}x{image.shape[0]})")
        return image
