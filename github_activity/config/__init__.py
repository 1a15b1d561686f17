"""Configuration package."""

from github_activity.config.settings import Settings, settings

__all__ = [
    "Settings",
    "settings",
]
