"""
Shared HTTP client for GitHub API operations.

Provides a lazily created AsyncClient configured from settings. The CLI makes
a single request per run and closes the client before the event loop exits.
"""

import logging

import httpx

from github_activity.config import settings

logger = logging.getLogger(__name__)

# Module-level singleton client
_client: httpx.AsyncClient | None = None


def get_github_client() -> httpx.AsyncClient:
    """
    Get or create the shared HTTP client for GitHub API calls.

    Headers are passed per-request, not stored on the client.

    Returns:
        Shared httpx.AsyncClient configured for GitHub API
    """
    global _client
    if _client is None or _client.is_closed:
        _client = httpx.AsyncClient(
            timeout=httpx.Timeout(settings.request_timeout, connect=settings.connect_timeout),
            http2=True,
        )
        logger.debug("Created new GitHub HTTP client")
    return _client


async def close_github_client() -> None:
    """
    Close the shared HTTP client.

    Must run inside the event loop that used the client.
    """
    global _client
    if _client is not None and not _client.is_closed:
        await _client.aclose()
        _client = None
        logger.debug("Closed GitHub HTTP client")
