"""Command-line entry point: github-activity <username>."""

import argparse
import asyncio
import locale
import logging
import sys
from collections.abc import Sequence

from rich.markup import escape
from rich.text import Text

from github_activity import __version__
from github_activity.config import settings
from github_activity.core import terminal
from github_activity.services.activity import render_activity
from github_activity.services.github import (
    GitHubAPIError,
    close_github_client,
    fetch_public_events,
)

PROG = "github-activity"

logger = logging.getLogger(__name__)


def setup_logging() -> None:
    """Configure application logging."""
    # Format: timestamp - level - logger name - message
    log_format = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"
    date_format = "%H:%M:%S"

    logging.basicConfig(
        level=settings.log_level.upper(),
        format=log_format,
        datefmt=date_format,
        stream=sys.stderr,
        force=True,
    )

    # Reduce noise from third-party libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("hpack").setLevel(logging.WARNING)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="CLI to display recent GitHub activity for a user",
    )
    parser.add_argument("username", help="GitHub username")
    parser.add_argument("--version", action="version", version=f"{PROG} {__version__}")
    return parser


async def show_activity(username: str) -> int:
    """
    Fetch a user's public events and print them.

    Returns:
        Process exit code: 0 on success (including no activity), 1 on any
        fetch failure
    """
    spinner = terminal.ProgressIndicator(
        f"Fetching activity for {escape(username)}...", output=terminal.err_console
    ).start()

    try:
        events = await fetch_public_events(username)
    except GitHubAPIError as e:
        logger.debug(f"Fetching events for {username} failed: {e!r}")
        spinner.fail(f"[red]Error: {escape(e.message)}[/red]")
        return 1
    finally:
        await close_github_client()

    spinner.succeed(f"Recent activity for [green]{escape(username)}[/green]:")

    listing = render_activity(events)
    if listing is None:
        terminal.console.print()
        terminal.console.print("No recent public activity found.", style="yellow")
        return 0

    terminal.console.print()
    terminal.console.print(Text(listing), soft_wrap=True)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.username:
        parser.error("username must not be empty")

    setup_logging()
    # Dates are shown in the user's locale
    try:
        locale.setlocale(locale.LC_TIME, "")
    except locale.Error:
        logger.debug("Could not apply the environment locale, using the default")

    return asyncio.run(show_activity(args.username))
