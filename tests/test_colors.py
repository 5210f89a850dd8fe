"""Tests for the colors module."""

import pytest

from escapade.colors import (
    Color,
    InvalidColorLiteralError,
    NamedColor,
    PaletteColor,
    RgbColor,
    ansi256,
    bg_code,
    color_name,
    fg_code,
    from_hex,
    parse_color,
    rgb,
)


@pytest.mark.parametrize(
    ("color", "fg", "bg"),
    [
        (NamedColor.BLACK, "30", "40"),
        (NamedColor.RED, "31", "41"),
        (NamedColor.WHITE, "37", "47"),
        (NamedColor.DEFAULT, "39", "49"),
        (NamedColor.BRIGHT_BLACK, "90", "100"),
        (NamedColor.BRIGHT_BLUE, "94", "104"),
        (NamedColor.BRIGHT_WHITE, "97", "107"),
        (ansi256(42), "38;5;42", "48;5;42"),
        (rgb(255, 128, 0), "38;2;255;128;0", "48;2;255;128;0"),
    ],
)
def test_codes(color: Color, fg: str, bg: str) -> None:
    """Each color maps to one foreground and one background code."""
    assert fg_code(color) == fg
    assert bg_code(color) == bg


def test_named_colors_count() -> None:
    """There are 16 ANSI colors plus the default color."""
    assert len(NamedColor) == 17


@pytest.mark.parametrize(
    ("color", "name"),
    [
        (NamedColor.RED, "red"),
        (NamedColor.BRIGHT_MAGENTA, "bright magenta"),
        (NamedColor.DEFAULT, "default"),
        (ansi256(200), "color 200"),
        (rgb(1, 2, 3), "rgb(1, 2, 3)"),
    ],
)
def test_color_name(color: Color, name: str) -> None:
    """Colors have human readable names."""
    assert color_name(color) == name


@pytest.mark.parametrize(
    "literal", ["#F97316", "F97316", "#f97316", "f97316"]
)
def test_from_hex(literal: str) -> None:
    """A 6-digit literal parses with or without the leading marker."""
    assert from_hex(literal) == RgbColor(249, 115, 22)


@pytest.mark.parametrize(
    "literal",
    [
        "",
        "#",
        "#F9731",
        "#F973166",
        "#GG0000",
        "F9 731",
        "##F97316",
        "#F97316\n",
    ],
)
def test_from_hex_invalid(literal: str) -> None:
    """Wrong length or non-hex digits raise InvalidColorLiteralError."""
    with pytest.raises(InvalidColorLiteralError) as exc_info:
        from_hex(literal)
    assert exc_info.value.literal == literal


def test_invalid_color_literal_is_value_error() -> None:
    """InvalidColorLiteralError can be caught as ValueError."""
    with pytest.raises(ValueError, match="Invalid color literal"):
        from_hex("xyz")


@pytest.mark.parametrize(
    "components", [(256, 0, 0), (0, -1, 0), (0, 0, 300)]
)
def test_rgb_out_of_range(components: tuple[int, int, int]) -> None:
    """RGB components must fit in a byte."""
    with pytest.raises(ValueError, match="must be in range 0-255"):
        rgb(*components)


def test_palette_out_of_range() -> None:
    """Palette indexes must be in range 0-255."""
    with pytest.raises(ValueError, match="palette index"):
        ansi256(256)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("red", NamedColor.RED),
        ("RED", NamedColor.RED),
        ("bright-red", NamedColor.BRIGHT_RED),
        ("bright_red", NamedColor.BRIGHT_RED),
        ("bright red", NamedColor.BRIGHT_RED),
        ("default", NamedColor.DEFAULT),
        ("0", PaletteColor(0)),
        ("208", PaletteColor(208)),
        ("#00ff00", RgbColor(0, 255, 0)),
        ("123456", RgbColor(0x12, 0x34, 0x56)),
    ],
)
def test_parse_color(value: str, expected: object) -> None:
    """Color arguments accept names, palette indexes and hex literals."""
    assert parse_color(value) == expected


@pytest.mark.parametrize("value", ["256", "purple", "", "#12345"])
def test_parse_color_invalid(value: str) -> None:
    """Unknown color arguments raise InvalidColorLiteralError."""
    with pytest.raises(InvalidColorLiteralError):
        parse_color(value)
