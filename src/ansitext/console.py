"""Diagnostics of the ansitext command line, printed on stderr.

Formatted text goes to stdout untouched. Everything the user did not ask to
format, such as the detected color mode or an unknown style name, goes
through this console instead.
"""

from typing import Any

from rich.console import Console

_console = Console(soft_wrap=True, stderr=True)
_verbose = False


def set_verbose() -> None:
    """Show verbose and warning messages from now on.

    The flag is global for the process; the console_out test fixture clears it.
    """
    global _verbose  # noqa: PLW0603
    _verbose = True


def is_verbose() -> bool:
    """Whether -v/--verbose was given."""
    return _verbose


def print_verbose(*args: Any) -> None:  # noqa: ANN401
    """Print details of what the command is doing, dimmed."""
    if not _verbose:
        return
    _console.print(*args, style="dim")
    _console.file.flush()


def print_warning(*args: Any) -> None:  # noqa: ANN401
    """Print a warning about ignored or surprising input, verbose only."""
    if not _verbose:
        return
    _console.print(*args, style="yellow")
    _console.file.flush()


def print_error(title: str | None, *args: Any) -> None:  # noqa: ANN401
    """Print an error in red, with a bold title defaulting to "Error:"."""
    _console.print(f"[bold]{title or 'Error:'}", *args, style="red")
    _console.file.flush()
