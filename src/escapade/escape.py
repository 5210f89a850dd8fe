"""Recognized escape sequences."""

from dataclasses import dataclass
from enum import StrEnum, auto


class EscapeKind(StrEnum):
    """Kind of escape sequence."""

    STYLE = auto()
    CURSOR_MOVEMENT = auto()
    SCREEN_ERASE = auto()
    MODE_TOGGLE = auto()
    OPERATING_SYSTEM_COMMAND = auto()
    UNRECOGNIZED = auto()

    @property
    def label(self) -> str:
        """Short label used in human readable output."""
        return KIND_LABELS[self]


KIND_LABELS: dict[EscapeKind, str] = {
    EscapeKind.STYLE: "SGR (style)",
    EscapeKind.CURSOR_MOVEMENT: "cursor",
    EscapeKind.SCREEN_ERASE: "erase",
    EscapeKind.MODE_TOGGLE: "mode",
    EscapeKind.OPERATING_SYSTEM_COMMAND: "OSC",
    EscapeKind.UNRECOGNIZED: "unknown",
}


@dataclass(frozen=True)
class Escape:
    """A decoded escape sequence.

    Attributes:
        raw: The exact text consumed from the input
        kind: Classification of the sequence
        description: Human readable description
        params: Numeric parameters, for CSI sequences
    """

    raw: str
    kind: EscapeKind
    description: str
    params: tuple[int, ...] = ()

    def human_readable(self) -> str:
        """Describe the escape, e.g. "[cursor] cursor up 5"."""
        return f"[{self.kind.label}] {self.description}"

    def __str__(self) -> str:
        """Same as human_readable()."""
        return self.human_readable()
