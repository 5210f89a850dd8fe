"""Escape sequence constants and builder."""

from __future__ import annotations

import typing
from dataclasses import dataclass, field

if typing.TYPE_CHECKING:
    from collections.abc import Iterable

CSI = "\x1b["
OSC = "\x1b]"
SGR_SUFFIX = "m"
RESET = "\x1b[0m"

# Screen and line erase
CLEAR_SCREEN = "\x1b[2J"
CLEAR_TO_END = "\x1b[0J"
CLEAR_TO_START = "\x1b[1J"
CLEAR_LINE = "\x1b[2K"
CLEAR_LINE_TO_END = "\x1b[0K"
CLEAR_LINE_TO_START = "\x1b[1K"

# Cursor
CURSOR_HOME = "\x1b[H"
CURSOR_HIDE = "\x1b[?25l"
CURSOR_SHOW = "\x1b[?25h"
CURSOR_SAVE = "\x1b[s"
CURSOR_RESTORE = "\x1b[u"

# Private modes
ALT_SCREEN_ENTER = "\x1b[?1049h"
ALT_SCREEN_EXIT = "\x1b[?1049l"
MOUSE_ENABLE = "\x1b[?1000h"
MOUSE_DISABLE = "\x1b[?1000l"
BRACKETED_PASTE_ENABLE = "\x1b[?2004h"
BRACKETED_PASTE_DISABLE = "\x1b[?2004l"


def csi(params: Iterable[int | str], final: str) -> str:
    """Format a CSI sequence, e.g. csi([1, 31], "m") -> "ESC[1;31m"."""
    return f"{CSI}{';'.join(str(p) for p in params)}{final}"


@dataclass
class SequenceBuilder:
    """Builder for a string of escape sequences.

    Every method appends a sequence and returns the builder, so calls can be
    chained. Sequences are output in call order.
    """

    sequences: list[str] = field(default_factory=list)

    def raw(self, sequence: str) -> SequenceBuilder:
        """Append a raw sequence."""
        self.sequences.append(sequence)
        return self

    def csi(self, params: Iterable[int], final: str) -> SequenceBuilder:
        """Append a CSI sequence."""
        return self.raw(csi(params, final))

    def sgr(self, params: Iterable[int]) -> SequenceBuilder:
        """Append an SGR (style) sequence."""
        return self.csi(params, SGR_SUFFIX)

    def reset(self) -> SequenceBuilder:
        """Append an attribute reset."""
        return self.sgr([0])

    def clear_screen(self) -> SequenceBuilder:
        """Append a clear entire screen sequence."""
        return self.raw(CLEAR_SCREEN)

    def cursor_to(self, row: int, col: int) -> SequenceBuilder:
        """Append a cursor move to row and col (1-indexed)."""
        return self.csi([row, col], "H")

    def build(self) -> str:
        """Concatenate the sequences."""
        return "".join(self.sequences)

    def __str__(self) -> str:
        """Same as build()."""
        return self.build()


@dataclass(frozen=True)
class Sequence:
    """A complete escape sequence string, ready to write to a terminal."""

    data: str

    @classmethod
    def from_builder(cls, builder: SequenceBuilder) -> Sequence:
        """Create from the output of a builder."""
        return cls(builder.build())

    def __str__(self) -> str:
        """The sequence data."""
        return self.data

    def __len__(self) -> int:
        """Length of the sequence data."""
        return len(self.data)
