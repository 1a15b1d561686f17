"""
GitHub API read operations.

Fetches the public event stream of a user: one unauthenticated GET, first
page only.
"""

import logging

import httpx

from github_activity.config import settings
from github_activity.services.github.constants import USER_PUBLIC_EVENTS_PATH
from github_activity.services.github.exceptions import GitHubTransportError
from github_activity.services.github.helpers import RateLimitInfo, handle_error_response
from github_activity.services.github.http_client import get_github_client
from github_activity.services.github.types import GitHubEvent, parse_event

logger = logging.getLogger(__name__)


def build_headers() -> dict[str, str]:
    """Request headers for the events API (no authentication)."""
    return {
        "Accept": settings.accept_header,
        "User-Agent": settings.user_agent,
    }


def public_events_url(username: str) -> str:
    """URL of a user's public events feed."""
    return settings.events_base_url + USER_PUBLIC_EVENTS_PATH.format(username=username)


async def fetch_public_events(username: str) -> list[GitHubEvent]:
    """
    Fetch the most recent public events for a GitHub user.

    Args:
        username: GitHub handle

    Returns:
        Events in the order GitHub returned them (newest first)

    Raises:
        UserNotFoundError: If GitHub answers 404
        GitHubAPIError: For any other non-success status
        GitHubTransportError: If the URL is invalid, the request fails or the body
            is not a JSON array
    """
    url = public_events_url(username)
    logger.debug(f"GET {url}")

    try:
        client = get_github_client()
        response = await client.get(url, headers=build_headers())
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        raise GitHubTransportError(str(e)) from e

    rate_info = RateLimitInfo(response)
    if rate_info.remaining is not None:
        logger.debug(f"GitHub rate limit remaining: {rate_info.remaining}")

    handle_error_response(response, username)

    try:
        data = response.json()
    except ValueError as e:
        raise GitHubTransportError(str(e)) from e

    if not isinstance(data, list):
        raise GitHubTransportError("Unexpected response from GitHub API")

    logger.debug(f"Received {len(data)} events for {username}")
    return [parse_event(item) for item in data]
