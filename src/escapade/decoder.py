"""Decoder splitting terminal output into plain text and escape sequences.

The decoder is permissive: it never raises on malformed input. Numeric
parameters that cannot be read are skipped, and a sequence still incomplete
at the end of the input is dropped.
"""

from __future__ import annotations

import re
import typing
from dataclasses import dataclass
from enum import Enum, auto

from escapade.escape import Escape, EscapeKind
from escapade.sgr import describe_sgr

if typing.TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

ESC = "\x1b"
BEL = "\x07"
CSI_LEAD = "["
OSC_LEAD = "]"
STRING_TERMINATOR = "\\"  # ESC \
PRIVATE_MARKER = "?"
PARAM_CHARS = frozenset("0123456789;")

# Characters that may end an OSC string, the rest of the payload is skipped
OSC_STOP_REGEX = re.compile(f"[{BEL}{re.escape(STRING_TERMINATOR)}]")

# Parameters are unsigned 16-bit values, larger fields are skipped
MAX_PARAM = 0xFFFF
MAX_PARAM_DIGITS = len(str(MAX_PARAM))

PRIVATE_MODES: dict[str, str] = {
    "25": "cursor visibility",
    "1049": "alternate screen",
    "1000": "mouse tracking",
    "2004": "bracketed paste",
}

SCREEN_ERASE_MODES: dict[int, str] = {
    0: "clear to end of screen",
    1: "clear to start of screen",
    2: "clear entire screen",
    3: "clear screen and scrollback",
}

LINE_ERASE_MODES: dict[int, str] = {
    0: "clear to end of line",
    1: "clear to start of line",
    2: "clear entire line",
}

CURSOR_DIRECTIONS: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
}


class State(Enum):
    """Decoder states."""

    GROUND = auto()
    ESCAPE = auto()
    CSI = auto()
    OSC = auto()


@dataclass(frozen=True)
class Text:
    """A run of plain text."""

    text: str

    @property
    def raw(self) -> str:
        """The input text this segment was decoded from."""
        return self.text


type Segment = Text | Escape


def parse_params(param_text: str) -> tuple[int, ...]:
    """Extract numeric parameters from CSI parameter text.

    Empty fields and fields that are not 16-bit unsigned integers are skipped.
    A leading private marker is ignored.
    """
    params: list[int] = []
    for field in param_text.removeprefix(PRIVATE_MARKER).split(";"):
        if not (field.isdecimal() and field.isascii()):
            continue
        # Leading zeros are allowed, check the length before converting
        digits = field.lstrip("0") or "0"
        if len(digits) <= MAX_PARAM_DIGITS and int(digits) <= MAX_PARAM:
            params.append(int(digits))
    return tuple(params)


def _first(params: tuple[int, ...], index: int, default: int) -> int:
    return params[index] if len(params) > index else default


def classify_csi(param_text: str, final: str, raw: str) -> Escape:
    """Build the Escape for a complete CSI sequence.

    Args:
        param_text: Parameter characters between "ESC [" and the final char
        final: The terminating character, which selects the meaning
        raw: The whole sequence text
    """
    params = parse_params(param_text)
    match final:
        case "m":
            kind, description = EscapeKind.STYLE, describe_sgr(params)
        case "A" | "B" | "C" | "D":
            kind = EscapeKind.CURSOR_MOVEMENT
            count = _first(params, 0, 1)
            description = f"cursor {CURSOR_DIRECTIONS[final]} {count}"
        case "H" | "f":
            kind = EscapeKind.CURSOR_MOVEMENT
            row, col = _first(params, 0, 1), _first(params, 1, 1)
            description = f"cursor to ({row}, {col})"
        case "J":
            kind = EscapeKind.SCREEN_ERASE
            description = SCREEN_ERASE_MODES.get(
                _first(params, 0, 0), "clear screen (unknown mode)"
            )
        case "K":
            kind = EscapeKind.SCREEN_ERASE
            description = LINE_ERASE_MODES.get(
                _first(params, 0, 0), "clear line (unknown mode)"
            )
        case "h" | "l":
            kind = EscapeKind.MODE_TOGGLE
            description = _describe_mode(param_text, enable=final == "h")
        case "s":
            kind = EscapeKind.CURSOR_MOVEMENT
            description = "save cursor position"
        case "u":
            kind = EscapeKind.CURSOR_MOVEMENT
            description = "restore cursor position"
        case _:
            kind = EscapeKind.UNRECOGNIZED
            description = f"CSI sequence ending with '{final}'"
    return Escape(raw, kind, description, params)


def _describe_mode(param_text: str, *, enable: bool) -> str:
    action = "enable" if enable else "disable"
    if not param_text.startswith(PRIVATE_MARKER):
        return f"{action} mode {param_text}"
    mode = param_text.removeprefix(PRIVATE_MARKER)
    if mode in PRIVATE_MODES:
        return f"{action} {PRIVATE_MODES[mode]}"
    return f"{action} mode {mode}"


class EscapeDecoder:
    """State machine decoding a character stream into segments.

    Input may be fed in chunks, the state carries over between calls to
    feed(). Call finish() at the end of the input to flush the last text run.
    """

    def __init__(self) -> None:
        """Initialize the decoder."""
        self.state = State.GROUND
        self.dropped = ""
        self._text: list[str] = []
        # Pieces of the current sequence, never empty strings
        self._raw: list[str] = []
        self._param_text: list[str] = []

    def feed(self, chunk: str) -> Iterator[Segment]:
        """Decode a chunk of input and yield the completed segments."""
        pos = 0
        while pos < len(chunk):
            if self.state == State.GROUND:
                end = chunk.find(ESC, pos)
                if end == -1:
                    self._text.append(chunk[pos:])
                    return
                self._text.append(chunk[pos:end])
                yield from self._flush_text()
                self.state = State.ESCAPE
                self._raw.append(ESC)
                pos = end + 1
                continue
            if self.state == State.OSC:
                found = OSC_STOP_REGEX.search(chunk, pos)
                end = found.start() if found else len(chunk)
                if end > pos:
                    self._raw.append(chunk[pos:end])
                    pos = end
                    continue
            escape = self._process(chunk[pos])
            if escape is not None:
                yield escape
            pos += 1

    def finish(self) -> Iterator[Segment]:
        """Flush pending text and drop any incomplete escape sequence.

        The dropped text, if any, is kept in the dropped attribute.
        """
        yield from self._flush_text()
        self.dropped = "".join(self._raw)
        self._reset_state()

    def _process(self, char: str) -> Escape | None:
        """Process one character inside an escape sequence."""
        previous = self._raw[-1][-1]
        self._raw.append(char)
        if self.state == State.ESCAPE:
            if char == CSI_LEAD:
                self.state = State.CSI
                return None
            if char == OSC_LEAD:
                self.state = State.OSC
                return None
            return self._complete(
                Escape(self._raw_text(), EscapeKind.UNRECOGNIZED, "unknown")
            )
        if self.state == State.CSI:
            if char in PARAM_CHARS or (
                char == PRIVATE_MARKER and not self._param_text
            ):
                self._param_text.append(char)
                return None
            return self._complete(
                classify_csi(
                    "".join(self._param_text), char, self._raw_text()
                )
            )
        # OSC string, terminated by BEL or ESC \
        if char == BEL or (char == STRING_TERMINATOR and previous == ESC):
            return self._complete(
                Escape(
                    self._raw_text(),
                    EscapeKind.OPERATING_SYSTEM_COMMAND,
                    "operating system command",
                )
            )
        return None

    def _raw_text(self) -> str:
        return "".join(self._raw)

    def _complete(self, escape: Escape) -> Escape:
        self._reset_state()
        return escape

    def _flush_text(self) -> Iterator[Text]:
        text = "".join(self._text)
        self._text.clear()
        if text:
            yield Text(text)

    def _reset_state(self) -> None:
        self.state = State.GROUND
        self._raw.clear()
        self._param_text.clear()


def iter_decode(chunks: Iterable[str]) -> Iterator[Segment]:
    """Decode a stream of text chunks, yielding segments as they complete."""
    decoder = EscapeDecoder()
    for chunk in chunks:
        yield from decoder.feed(chunk)
    yield from decoder.finish()


def decode(text: str) -> list[Segment]:
    """Decode text into plain text runs and escape sequences.

    Joining the raw text of all segments gives back the input, unless the
    input ends with an incomplete escape sequence.
    """
    return list(iter_decode([text]))


def strip_ansi(text: str) -> str:
    """Remove escape sequences from text."""
    return "".join(
        segment.text for segment in decode(text) if isinstance(segment, Text)
    )


def visible_length(text: str) -> int:
    """Count the characters remaining once escape sequences are removed."""
    return len(strip_ansi(text))
