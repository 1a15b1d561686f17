"""Activity formatting for terminal output."""

from github_activity.services.activity.formatter import (
    MAX_EVENTS,
    format_date,
    format_event,
    render_activity,
)

__all__ = [
    "MAX_EVENTS",
    "format_date",
    "format_event",
    "render_activity",
]
