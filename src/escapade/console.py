"""Shared console instance for escapade diagnostics."""

from typing import Any

from rich.console import Console

_console = Console(soft_wrap=True, stderr=True)
_verbose = False


def set_verbose() -> None:
    """Turn on verbose mode.

    Note: Tests use the console_out fixture, which resets it.
    """
    global _verbose  # noqa: PLW0603
    _verbose = True


def is_verbose() -> bool:
    """Check if verbose mode is enabled."""
    return _verbose


def print_verbose(*args: Any) -> None:  # noqa: ANN401
    """Print general verbose messages."""
    if _verbose:
        _console.print(*args, style="dim")
        _console.file.flush()


def print_warning(*args: Any) -> None:  # noqa: ANN401
    """Print a warning message."""
    if _verbose:
        _console.print(*args, style="yellow")
        _console.file.flush()


def print_error(title: str | None, *args: Any) -> None:  # noqa: ANN401
    """Print an error message."""
    title = title or "Error:"
    _console.print(f"[bold]{title}", *args, style="red")
    _console.file.flush()
