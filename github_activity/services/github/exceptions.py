"""Exceptions for GitHub service."""


class GitHubAPIError(Exception):
    """Error from GitHub API."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
    ):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class UserNotFoundError(GitHubAPIError):
    """The requested GitHub user does not exist (404)."""

    def __init__(self, username: str):
        self.username = username
        super().__init__(f"User {username} not found", status_code=404)


class GitHubTransportError(GitHubAPIError):
    """The request never produced a usable response.

    Covers connection failures, timeouts and response bodies that could not
    be decoded as a JSON array of events.
    """

    def __init__(self, message: str | None = None):
        super().__init__(message or "Unknown error")
