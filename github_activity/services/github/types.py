"""Data types for GitHub events API responses.

Each event type the CLI knows how to describe gets its own variant; anything
else is kept as an UnknownEvent so the raw type tag can still be shown.
Payload fields that GitHub may omit are modelled as ``None`` here and given
display fallbacks by the formatter.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

from github_activity.services.github.constants import (
    CREATE_EVENT,
    PULL_REQUEST_EVENT,
    PUSH_EVENT,
    WATCH_EVENT,
)

logger = logging.getLogger(__name__)

UNKNOWN_EVENT_TYPE = "UnknownEvent"
UNKNOWN_REPO = "unknown"


@dataclass(frozen=True)
class BaseEvent:
    """Fields shared by every event variant."""

    type: str
    repo_name: str
    created_at: datetime | None  # None when GitHub sent no parseable timestamp


@dataclass(frozen=True)
class PushEvent(BaseEvent):
    """Commits pushed to a branch."""

    commit_messages: tuple[str | None, ...] = ()

    @property
    def commit_count(self) -> int:
        return len(self.commit_messages)

    @property
    def first_commit_message(self) -> str | None:
        return self.commit_messages[0] if self.commit_messages else None


@dataclass(frozen=True)
class CreateEvent(BaseEvent):
    """A branch, tag or repository was created."""

    ref_type: str | None = None
    ref: str | None = None  # None for ref_type "repository"


@dataclass(frozen=True)
class PullRequestEvent(BaseEvent):
    """Activity on a pull request."""

    action: str | None = None
    title: str | None = None
    url: str | None = None


@dataclass(frozen=True)
class WatchEvent(BaseEvent):
    """A repository was starred."""


@dataclass(frozen=True)
class UnknownEvent(BaseEvent):
    """Any event type without a dedicated rendering; its payload is ignored."""


GitHubEvent = PushEvent | CreateEvent | PullRequestEvent | WatchEvent | UnknownEvent


def _get_object(data: dict[str, Any], key: str) -> dict[str, Any]:
    value = data.get(key)
    return value if isinstance(value, dict) else {}


def _get_str(data: dict[str, Any], key: str) -> str | None:
    value = data.get(key)
    return value if isinstance(value, str) else None


def parse_timestamp(value: str | None) -> datetime | None:
    """Parse an ISO 8601 timestamp as sent by GitHub (``2024-01-01T00:00:00Z``).

    Naive timestamps are taken to be UTC. Returns None if the value is missing
    or malformed.
    """
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        logger.debug(f"Unparseable event timestamp: {value!r}")
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def parse_event(data: Any) -> GitHubEvent:
    """Convert one raw event from the GitHub API into its typed variant.

    Never raises: missing or mistyped fields fall back to None or empty values.
    """
    if not isinstance(data, dict):
        data = {}
    event_type = _get_str(data, "type") or UNKNOWN_EVENT_TYPE
    repo_name = _get_str(_get_object(data, "repo"), "name") or UNKNOWN_REPO
    created_at = parse_timestamp(_get_str(data, "created_at"))
    payload = _get_object(data, "payload")

    if event_type == PUSH_EVENT:
        commits = payload.get("commits")
        if not isinstance(commits, list):
            commits = []
        return PushEvent(
            type=event_type,
            repo_name=repo_name,
            created_at=created_at,
            commit_messages=tuple(
                _get_str(commit, "message") if isinstance(commit, dict) else None
                for commit in commits
            ),
        )

    if event_type == CREATE_EVENT:
        return CreateEvent(
            type=event_type,
            repo_name=repo_name,
            created_at=created_at,
            ref_type=_get_str(payload, "ref_type"),
            ref=_get_str(payload, "ref"),
        )

    if event_type == PULL_REQUEST_EVENT:
        pull_request = _get_object(payload, "pull_request")
        return PullRequestEvent(
            type=event_type,
            repo_name=repo_name,
            created_at=created_at,
            action=_get_str(payload, "action"),
            title=_get_str(pull_request, "title"),
            url=_get_str(pull_request, "html_url"),
        )

    if event_type == WATCH_EVENT:
        return WatchEvent(type=event_type, repo_name=repo_name, created_at=created_at)

    return UnknownEvent(
        type=event_type,
        repo_name=repo_name,
        created_at=created_at,
    )
