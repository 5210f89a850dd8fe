"""Escapade command line interface.

Explain, strip and measure the escape sequences in terminal output, and
paint text with colors and modifiers.
"""

from __future__ import annotations

import re
import sys
import typing

import typer
from rich.markup import escape

from escapade.colors import InvalidColorLiteralError
from escapade.console import (
    print_error,
    print_verbose,
    print_warning,
    set_verbose,
)
from escapade.decoder import EscapeDecoder, Text, strip_ansi, visible_length
from escapade.modifiers import Modifier
from escapade.settings import ColorMode, detect_color_mode
from escapade.style import Style

if typing.TYPE_CHECKING:
    from collections.abc import Iterable

    from escapade.decoder import Segment

app = typer.Typer()


# ruff: noqa: FBT001 FBT003 Typer API uses boolean arguments for flags
# ruff: noqa: B008 function-call-in-default-argument

BACKSLASH_ESCAPES: dict[str, str] = {
    r"\e": "\x1b",
    r"\033": "\x1b",
    r"\x1b": "\x1b",
    r"\x1B": "\x1b",
    r"\a": "\x07",
    r"\007": "\x07",
    r"\x07": "\x07",
    r"\n": "\n",
    r"\t": "\t",
    "\\\\": "\\",
}
BACKSLASH_REGEX = re.compile(
    "|".join(re.escape(key) for key in BACKSLASH_ESCAPES)
)

TEXT_ARGUMENT_HELP = "Text to process, read from stdin when omitted"
ESCAPES_OPTION_HELP = r"Interpret backslash escapes like \e, \033 and \x1b"


def unescape(text: str) -> str:
    r"""Replace backslash escapes typed on the command line, like \e[1m."""
    return BACKSLASH_REGEX.sub(lambda m: BACKSLASH_ESCAPES[m.group()], text)


def _read_input(text: str | None, *, escapes: bool) -> Iterable[str]:
    """Get input chunks, from the argument or from stdin."""
    chunks: Iterable[str] = [text] if text is not None else sys.stdin
    if escapes:
        return (unescape(chunk) for chunk in chunks)
    return chunks


def format_segment(segment: Segment) -> str:
    """Format one decoded segment as a line of explain output."""
    if isinstance(segment, Text):
        return f"text  {segment.text!r}"
    return f"{segment.raw!r}  {segment.human_readable()}"


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "-v", "--verbose", help="Show verbose output"
    ),
) -> None:
    """Escapade: explain and compose terminal escape sequences."""
    if verbose:
        set_verbose()


@app.command()
def explain(
    text: str | None = typer.Argument(None, help=TEXT_ARGUMENT_HELP),
    escapes: bool = typer.Option(
        False, "-e", "--escapes", help=ESCAPES_OPTION_HELP
    ),
) -> None:
    """Describe each text run and escape sequence of the input."""
    decoder = EscapeDecoder()
    count = 0

    def write(segments: Iterable[Segment]) -> None:
        nonlocal count
        for segment in segments:
            sys.stdout.write(format_segment(segment) + "\n")
            count += 1

    for chunk in _read_input(text, escapes=escapes):
        write(decoder.feed(chunk))
    write(decoder.finish())

    print_verbose("Segments:", count)
    if decoder.dropped:
        print_warning(
            "Dropped incomplete sequence:", escape(repr(decoder.dropped))
        )


@app.command()
def strip(
    text: str | None = typer.Argument(None, help=TEXT_ARGUMENT_HELP),
    escapes: bool = typer.Option(
        False, "-e", "--escapes", help=ESCAPES_OPTION_HELP
    ),
) -> None:
    """Remove escape sequences from the input."""
    decoder = EscapeDecoder()
    for chunk in _read_input(text, escapes=escapes):
        for segment in decoder.feed(chunk):
            if isinstance(segment, Text):
                sys.stdout.write(segment.text)
    for segment in decoder.finish():
        if isinstance(segment, Text):
            sys.stdout.write(segment.text)
    if text is not None:
        sys.stdout.write("\n")


@app.command()
def length(
    text: str | None = typer.Argument(None, help=TEXT_ARGUMENT_HELP),
    escapes: bool = typer.Option(
        False, "-e", "--escapes", help=ESCAPES_OPTION_HELP
    ),
) -> None:
    """Print the visible length of the text, or of each line of stdin."""
    for chunk in _read_input(text, escapes=escapes):
        line = chunk.removesuffix("\n")
        print_verbose("Stripped:", escape(repr(strip_ansi(line))))
        sys.stdout.write(f"{visible_length(line)}\n")


@app.command()
def paint(  # noqa: PLR0913
    text: str = typer.Argument(..., help="Text to paint"),
    fg: str | None = typer.Option(
        None, "--fg", help="Foreground: name, palette index or hex"
    ),
    bg: str | None = typer.Option(
        None, "--bg", help="Background: name, palette index or hex"
    ),
    bold: bool = typer.Option(False, "--bold"),
    dim: bool = typer.Option(False, "--dim"),
    italic: bool = typer.Option(False, "--italic"),
    underline: bool = typer.Option(False, "--underline"),
    blink: bool = typer.Option(False, "--blink"),
    reverse: bool = typer.Option(False, "--reverse"),
    hidden: bool = typer.Option(False, "--hidden"),
    strikethrough: bool = typer.Option(False, "--strikethrough"),
    overline: bool = typer.Option(False, "--overline"),
    color: ColorMode = typer.Option(
        ColorMode.AUTO, "--color", help="Emit escape sequences"
    ),
) -> None:
    """Write text styled with colors and modifiers."""
    flags = {
        Modifier.BOLD: bold,
        Modifier.DIM: dim,
        Modifier.ITALIC: italic,
        Modifier.UNDERLINE: underline,
        Modifier.BLINK: blink,
        Modifier.REVERSE: reverse,
        Modifier.HIDDEN: hidden,
        Modifier.STRIKETHROUGH: strikethrough,
        Modifier.OVERLINE: overline,
    }
    paint_style = Style().modifier(*(m for m, on in flags.items() if on))
    try:
        if fg is not None:
            paint_style = paint_style.fg(fg)
        if bg is not None:
            paint_style = paint_style.bg(bg)
    except InvalidColorLiteralError as error:
        print_error(None, error)
        raise typer.Exit(1) from error

    print_verbose("Style:", paint_style.describe())
    if detect_color_mode(color, sys.stdout) == ColorMode.NEVER:
        print_verbose("Color disabled")
        sys.stdout.write(text + "\n")
    else:
        sys.stdout.write(paint_style.apply(text) + "\n")


if __name__ == "__main__":
    app()
