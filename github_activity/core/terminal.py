"""
Terminal presentation: a progress spinner and coloured output.

Status lines (spinner, success banner, errors) go to stderr; the activity
listing is printed on stdout so it can be piped on its own.
"""

from rich.console import Console
from rich.status import Status

# Consoles resolve sys.stdout/sys.stderr at write time
console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)

SUCCESS_SYMBOL = "[green]✔[/green]"
FAILURE_SYMBOL = "[red]✖[/red]"


class ProgressIndicator:
    """Spinner with a label that resolves to a success or failure line."""

    def __init__(self, label: str, output: Console | None = None) -> None:
        self.label = label
        self._console = output or err_console
        self._status: Status | None = None

    @property
    def is_spinning(self) -> bool:
        return self._status is not None

    def start(self) -> "ProgressIndicator":
        self._status = self._console.status(self.label, spinner="dots")
        self._status.start()
        return self

    def _stop(self) -> None:
        if self._status is not None:
            self._status.stop()
            self._status = None

    def succeed(self, message: str) -> None:
        """Stop spinning and print a success line (rich markup allowed)."""
        self._stop()
        self._console.print(f"{SUCCESS_SYMBOL} {message}")

    def fail(self, message: str) -> None:
        """Stop spinning and print a failure line (rich markup allowed)."""
        self._stop()
        self._console.print(f"{FAILURE_SYMBOL} {message}")
