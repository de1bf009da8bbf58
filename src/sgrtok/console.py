"""Diagnostics for sgrtok, written to stderr.

Transformed text goes to stdout; everything here goes to a rich console on
stderr, so piping `sgrtok parse` output never mixes in log lines. Only errors
are shown unless verbose mode is on.
"""

from typing import Any

from rich.console import Console
from rich.markup import escape

_console = Console(soft_wrap=True, stderr=True)
_verbose = False


def set_verbose() -> None:
    """Turn on verbose mode, for the -v option and SGRTOK_VERBOSE."""
    global _verbose  # noqa: PLW0603
    _verbose = True


def reset_verbose() -> None:
    """Turn verbose mode off again, used between tests."""
    global _verbose  # noqa: PLW0603
    _verbose = False


def _emit(
    *args: Any,  # noqa: ANN401
    style: str,
    always: bool = False,
) -> None:
    if always or _verbose:
        _console.print(*args, style=style)
        _console.file.flush()


def print_verbose(*args: Any) -> None:  # noqa: ANN401
    """Print details, such as where input text is read from."""
    _emit(*args, style="dim")


def print_event(message: str) -> None:
    """Print a registry lifecycle event, markup in message is escaped."""
    _emit("[bold]>", escape(message), style="magenta")


def print_warning(*args: Any) -> None:  # noqa: ANN401
    """Print a warning about a likely mistake, like a no-op clear-seq."""
    _emit(*args, style="yellow")


def print_error(title: str | None, *args: Any) -> None:  # noqa: ANN401
    """Print an error, shown even in quiet mode."""
    _emit(f"[bold]{title or 'Error:'}", *args, style="red", always=True)
