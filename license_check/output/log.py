"""Line-oriented run log using Rich."""
from __future__ import annotations

from typing import Optional

from rich.console import Console

INFO = "INFO"
ERROR = "ERROR"


class RunLog:
    """Receive progress and error lines from a validation run.

    Info lines go to the standard console, error lines to a stderr console.
    Every line is also recorded in ``lines`` as ``(level, message)`` so the
    narration of a run can be inspected after the fact.
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        error_console: Optional[Console] = None,
        quiet: bool = False,
    ) -> None:
        """Initialize the log with Rich consoles.

        Args:
            console: Console for info lines. Defaults to a new stdout Console.
            error_console: Console for error lines. Defaults to a new
                stderr Console.
            quiet: Record info lines without printing them.
        """
        self._console = console if console is not None else Console(emoji=False)
        self._error_console = (
            error_console
            if error_console is not None
            else Console(stderr=True, emoji=False)
        )
        self._quiet = quiet
        self.lines: list[tuple[str, str]] = []

    def info(self, message: str) -> None:
        """Log an informational line."""
        self.lines.append((INFO, message))
        if not self._quiet:
            self._console.print(
                f"[{INFO}] {message}",
                markup=False,
                emoji=False,
                highlight=False,
                soft_wrap=True,
            )

    def error(self, message: str) -> None:
        """Log an error line."""
        self.lines.append((ERROR, message))
        self._error_console.print(
            f"[{ERROR}] {message}",
            style="bold red",
            markup=False,
            emoji=False,
            highlight=False,
            soft_wrap=True,
        )

    def messages(self, level: Optional[str] = None) -> list[str]:
        """Return recorded messages, optionally filtered by level."""
        return [msg for lvl, msg in self.lines if level is None or lvl == level]
