"""
Human-readable descriptions of GitHub events.

Every field an event variant may lack has an explicit fallback below, so
formatting cannot fail on sparse payloads.
"""

from collections.abc import Sequence
from datetime import datetime

from github_activity.services.github.types import (
    CreateEvent,
    GitHubEvent,
    PullRequestEvent,
    PushEvent,
    WatchEvent,
)

# Only the newest events are shown
MAX_EVENTS = 10

# Display fallbacks for missing fields
NO_COMMIT_MESSAGE = "No commit message"
INVALID_DATE = "Invalid Date"
MISSING_VALUE = "unknown"


def format_date(value: datetime | None) -> str:
    """Render a timestamp as a date in the local timezone and locale."""
    if value is None:
        return INVALID_DATE
    return value.astimezone().strftime("%x")


def format_event(event: GitHubEvent) -> str:
    """Describe one event in a line or short paragraph, with an emoji per type."""
    date = format_date(event.created_at)
    repo = event.repo_name

    if isinstance(event, PushEvent):
        message = event.first_commit_message or NO_COMMIT_MESSAGE
        return (
            f"{date} - 📦 Pushed {event.commit_count} commit(s) to {repo}\n"
            f"   First commit: {message}"
        )

    if isinstance(event, CreateEvent):
        ref_type = event.ref_type or MISSING_VALUE
        # Repository creation carries no ref
        target = f"{ref_type} {event.ref}" if event.ref else ref_type
        return f"{date} - 🎉 Created {target} in {repo}"

    if isinstance(event, PullRequestEvent):
        return (
            f"{date} - 🔄 {event.action or MISSING_VALUE} pull request in {repo}\n"
            f"   Title: {event.title or MISSING_VALUE}\n"
            f"   URL: {event.url or MISSING_VALUE}"
        )

    if isinstance(event, WatchEvent):
        return f"{date} - ⭐ Starred {repo}"

    return f"{date} - {event.type} in {repo}"


def render_activity(events: Sequence[GitHubEvent]) -> str | None:
    """
    Build the activity listing.

    Args:
        events: Events in the order received from GitHub

    Returns:
        The first MAX_EVENTS events, formatted and separated by blank lines,
        or None when there is no activity
    """
    if not events:
        return None
    return "\n\n".join(format_event(event) for event in events[:MAX_EVENTS])
