"""HTTP client factory for connection pooling."""
import httpx
import logging
from typing import Optional

logger = logging.getLogger(__name__)

# Global shared HTTP client instance
_shared_client: Optional[httpx.AsyncClient] = None


def build_timeout(seconds: float) -> Optional[httpx.Timeout]:
    """
    Build the image fetch timeout.

    Args:
        seconds: Timeout in seconds; 0 or less disables it (wait indefinitely)

    Returns:
        httpx.Timeout, or None for no timeout
    """
    if seconds <= 0:
        return None
    return httpx.Timeout(seconds)


def get_shared_http_client(timeout_seconds: float = 30.0) -> httpx.AsyncClient:
    """
    Get or create shared async HTTP client for image fetching.

    The client carries no auth, so remote images are fetched anonymously
    whatever their origin.

    Args:
        timeout_seconds: Used only when the client is first created

    Returns:
        Shared AsyncClient instance
    """
    global _shared_client

    if _shared_client is None or _shared_client.is_closed:
        _shared_client = httpx.AsyncClient(
            timeout=build_timeout(timeout_seconds),
            follow_redirects=True,
            limits=httpx.Limits(
                max_keepalive_connections=20,
                max_connections=100,
                keepalive_expiry=30.0,
            ),
        )
        logger.info("Created shared HTTP client for image fetching")

    return _shared_client


async def close_shared_http_client() -> None:
    """
    Close shared HTTP client (call on application shutdown).
    """
    global _shared_client

    if _shared_client is not None:
        await _shared_client.aclose()
        _shared_client = None
        logger.info("Closed shared HTTP client")
