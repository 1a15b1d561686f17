"""
GitHub service package.

Usage: `from github_activity.services.github import fetch_public_events`

Module structure:
- read_operations.py: the public events request
- http_client.py: shared httpx client lifecycle
- helpers.py: rate limit headers and error response handling
- types.py: event variants and parsing
- exceptions.py: custom exceptions
- constants.py: API paths and event type tags
"""

from github_activity.services.github.exceptions import (
    GitHubAPIError,
    GitHubTransportError,
    UserNotFoundError,
)
from github_activity.services.github.helpers import RateLimitInfo, handle_error_response
from github_activity.services.github.http_client import close_github_client, get_github_client
from github_activity.services.github.read_operations import fetch_public_events
from github_activity.services.github.types import (
    BaseEvent,
    CreateEvent,
    GitHubEvent,
    PullRequestEvent,
    PushEvent,
    UnknownEvent,
    WatchEvent,
    parse_event,
)

__all__ = [
    # Operations
    "fetch_public_events",
    # HTTP client lifecycle
    "get_github_client",
    "close_github_client",
    # Utilities
    "handle_error_response",
    "RateLimitInfo",
    # Exceptions
    "GitHubAPIError",
    "GitHubTransportError",
    "UserNotFoundError",
    # Types
    "BaseEvent",
    "CreateEvent",
    "GitHubEvent",
    "PullRequestEvent",
    "PushEvent",
    "UnknownEvent",
    "WatchEvent",
    "parse_event",
]
