"""Cursor movement sequences."""

from escapade.sequences import csi


def up(n: int = 1) -> str:
    """Move cursor up by n rows."""
    return csi([n], "A")


def down(n: int = 1) -> str:
    """Move cursor down by n rows."""
    return csi([n], "B")


def right(n: int = 1) -> str:
    """Move cursor right by n columns."""
    return csi([n], "C")


def left(n: int = 1) -> str:
    """Move cursor left by n columns."""
    return csi([n], "D")


def goto(row: int, col: int) -> str:
    """Move cursor to row and col (1-indexed)."""
    return csi([row, col], "H")


def column(col: int) -> str:
    """Move cursor to column col (1-indexed)."""
    return csi([col], "G")
