"""Root conftest — shared fixtures for the CLI test suite.

Provides:
- anyio backend pinned to asyncio
- Reset of the shared GitHub HTTP client and the LC_TIME locale between tests
- Plain (colourless) consoles capturing terminal output
"""

from __future__ import annotations

import io
import locale

import pytest
from rich.console import Console

import github_activity.services.github.http_client as http_client_mod
from github_activity.core import terminal


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture(autouse=True)
def _reset_github_client():
    """Each test starts without a cached HTTP client."""
    original = http_client_mod._client
    http_client_mod._client = None
    yield
    http_client_mod._client = original


@pytest.fixture(autouse=True)
def _restore_time_locale():
    """main() applies the environment locale; undo it after each test."""
    saved = locale.setlocale(locale.LC_TIME)
    yield
    locale.setlocale(locale.LC_TIME, saved)


class CapturedConsoles:
    """stdout/stderr consoles writing into in-memory buffers."""

    def __init__(self, **console_kwargs: object) -> None:
        self._out = io.StringIO()
        self._err = io.StringIO()
        options = {"width": 200, "color_system": None, "highlight": False, **console_kwargs}
        self.console = Console(file=self._out, **options)
        self.err_console = Console(file=self._err, **options)

    @property
    def out(self) -> str:
        return self._out.getvalue()

    @property
    def err(self) -> str:
        return self._err.getvalue()


@pytest.fixture
def consoles(monkeypatch: pytest.MonkeyPatch) -> CapturedConsoles:
    """Replace the terminal consoles with plain-text buffers."""
    captured = CapturedConsoles()
    monkeypatch.setattr(terminal, "console", captured.console)
    monkeypatch.setattr(terminal, "err_console", captured.err_console)
    return captured


@pytest.fixture
def color_consoles(monkeypatch: pytest.MonkeyPatch) -> CapturedConsoles:
    """Replace the terminal consoles with ANSI-colour buffers."""
    captured = CapturedConsoles(force_terminal=True, color_system="standard")
    monkeypatch.setattr(terminal, "console", captured.console)
    monkeypatch.setattr(terminal, "err_console", captured.err_console)
    return captured
