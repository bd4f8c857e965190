"""Console reporting for the generator.

The generator never prints directly.  It reports through a ``Reporter``,
which is either a Rich-backed ``ConsoleReporter`` for interactive use or a
``SilentReporter`` for tests and quiet runs.
"""

from __future__ import annotations

from typing import Protocol

from rich.console import Console
from rich.markup import escape

# Messages carry user text: no :emoji: codes and no wrapping inside a line.
_PRINT_OPTS = {"emoji": False, "soft_wrap": True}


class Reporter(Protocol):
    """Anything that can show progress and error lines to the user."""

    def info(self, message: str) -> None: ...

    def success(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def banner(self, message: str) -> None: ...


class ConsoleReporter:
    """Rich console reporter.

    Regular output goes to stdout; errors go to stderr.  Messages are
    escaped before printing so a project name containing ``[...]`` is shown
    literally instead of being parsed as Rich markup.  Emoji codes such as
    ``:rocket:`` are printed as typed and long lines are never wrapped.
    """

    def __init__(
        self,
        console: Console | None = None,
        err_console: Console | None = None,
    ) -> None:
        self.console = console or Console(highlight=False, emoji=False)
        self.err_console = err_console or Console(stderr=True, highlight=False, emoji=False)

    def info(self, message: str) -> None:
        self.console.print(escape(message), **_PRINT_OPTS)

    def success(self, message: str) -> None:
        self.console.print(f"[green]✔ {escape(message)}[/green]", **_PRINT_OPTS)

    def warning(self, message: str) -> None:
        self.console.print(f"[yellow]{escape(message)}[/yellow]", **_PRINT_OPTS)

    def error(self, message: str) -> None:
        self.err_console.print(f"[bold red]{escape(message)}[/bold red]", **_PRINT_OPTS)

    def banner(self, message: str) -> None:
        self.console.print()
        self.console.print(f"[bold blue]🚀 {escape(message)}[/bold blue]", **_PRINT_OPTS)


class SilentReporter:
    """Reporter that records messages instead of printing them."""

    def __init__(self) -> None:
        self.messages: list[tuple[str, str]] = []

    def info(self, message: str) -> None:
        self.messages.append(("info", message))

    def success(self, message: str) -> None:
        self.messages.append(("success", message))

    def warning(self, message: str) -> None:
        self.messages.append(("warning", message))

    def error(self, message: str) -> None:
        self.messages.append(("error", message))

    def banner(self, message: str) -> None:
        self.messages.append(("banner", message))

    def lines(self, level: str | None = None) -> list[str]:
        """Return recorded messages, optionally filtered by *level*."""
        return [msg for lvl, msg in self.messages if level is None or lvl == level]
