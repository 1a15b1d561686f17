"""
GitHub API helper utilities.

Provides rate limit header parsing and error response processing for
GitHub API calls.
"""

import logging

import httpx

from github_activity.services.github.constants import (
    RATE_LIMIT_REMAINING_HEADER,
    RATE_LIMIT_RESET_HEADER,
)
from github_activity.services.github.exceptions import GitHubAPIError, UserNotFoundError

logger = logging.getLogger(__name__)


class RateLimitInfo:
    """Rate limit information from GitHub API response."""

    def __init__(self, response: httpx.Response) -> None:
        self.remaining = response.headers.get(RATE_LIMIT_REMAINING_HEADER)
        self.reset = response.headers.get(RATE_LIMIT_RESET_HEADER)

    @property
    def reset_timestamp(self) -> int | None:
        """Get reset timestamp as integer, or None if missing or malformed."""
        return int(self.reset) if self.reset and self.reset.isdigit() else None

    @property
    def is_exhausted(self) -> bool:
        """Check if rate limit is exhausted. Malformed headers count as not exhausted."""
        return self.remaining is not None and self.remaining.isdigit() and int(self.remaining) == 0


def status_text(response: httpx.Response) -> str:
    """Reason phrase of a response, or the bare status code when there is none.

    HTTP/2 responses carry no reason phrase, so httpx reports an empty string.
    """
    return response.reason_phrase or str(response.status_code)


def handle_error_response(response: httpx.Response, username: str) -> None:
    """
    Handle error responses from the GitHub events API.

    Args:
        response: The HTTP response from GitHub API
        username: GitHub handle the request was made for

    Raises:
        UserNotFoundError: If the user does not exist (404)
        GitHubAPIError: For any other non-success status
    """
    if response.is_success:
        return

    if response.status_code == 404:
        raise UserNotFoundError(username)

    rate_info = RateLimitInfo(response)
    if rate_info.is_exhausted:
        logger.warning(
            f"GitHub API rate limit exhausted while fetching events for {username}, "
            f"resets at {rate_info.reset_timestamp}"
        )

    raise GitHubAPIError(
        f"GitHub API error: {status_text(response)}", response.status_code
    )
