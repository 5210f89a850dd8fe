"""Tests for the sequence constants, builder and cursor helpers."""

import pytest

from escapade import cursor, sequences
from escapade.sequences import Sequence, SequenceBuilder, csi


def test_constants() -> None:
    """Common sequences have their standard values."""
    assert sequences.CSI == "\x1b["
    assert sequences.OSC == "\x1b]"
    assert sequences.RESET == "\x1b[0m"
    assert sequences.CLEAR_SCREEN == "\x1b[2J"
    assert sequences.CLEAR_LINE == "\x1b[2K"
    assert sequences.CURSOR_HIDE == "\x1b[?25l"
    assert sequences.CURSOR_SHOW == "\x1b[?25h"
    assert sequences.ALT_SCREEN_ENTER == "\x1b[?1049h"
    assert sequences.MOUSE_DISABLE == "\x1b[?1000l"
    assert sequences.BRACKETED_PASTE_ENABLE == "\x1b[?2004h"


def test_csi() -> None:
    """csi() joins parameters with semicolons."""
    assert csi([1, 31], "m") == "\x1b[1;31m"
    assert csi([], "H") == "\x1b[H"
    assert csi(["?25"], "l") == sequences.CURSOR_HIDE


@pytest.mark.parametrize(
    ("sequence", "expected"),
    [
        (cursor.up(5), "\x1b[5A"),
        (cursor.up(), "\x1b[1A"),
        (cursor.down(2), "\x1b[2B"),
        (cursor.right(3), "\x1b[3C"),
        (cursor.left(4), "\x1b[4D"),
        (cursor.goto(10, 20), "\x1b[10;20H"),
        (cursor.column(7), "\x1b[7G"),
    ],
)
def test_cursor(sequence: str, expected: str) -> None:
    """Cursor helpers build CSI sequences."""
    assert sequence == expected


def test_builder_sgr() -> None:
    """sgr() appends a style sequence."""
    assert SequenceBuilder().sgr([1, 31]).build() == "\x1b[1;31m"


def test_builder_chain_keeps_order() -> None:
    """Sequences are concatenated in call order, duplicates kept."""
    built = (
        SequenceBuilder()
        .clear_screen()
        .cursor_to(1, 1)
        .sgr([32])
        .raw("x")
        .reset()
        .reset()
        .build()
    )
    assert built == "\x1b[2J\x1b[1;1H\x1b[32mx\x1b[0m\x1b[0m"


def test_builder_csi() -> None:
    """csi() appends a CSI sequence with any final character."""
    assert SequenceBuilder().csi([2], "K").build() == sequences.CLEAR_LINE


def test_empty_builder() -> None:
    """An empty builder builds an empty string."""
    assert SequenceBuilder().build() == ""
    assert str(SequenceBuilder()) == ""


def test_builder_str() -> None:
    """str() builds the sequence."""
    assert str(SequenceBuilder().reset()) == sequences.RESET


def test_sequence() -> None:
    """Sequence wraps the built string."""
    sequence = Sequence.from_builder(SequenceBuilder().sgr([1]))
    assert str(sequence) == "\x1b[1m"
    assert len(sequence) == 4
    assert sequence
    assert not Sequence("")
