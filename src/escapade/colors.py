"""Terminal colors and their SGR parameter codes."""

import re
from dataclasses import dataclass
from enum import Enum


class InvalidColorLiteralError(ValueError):
    """Error when a color literal cannot be parsed."""

    def __init__(self, literal: str) -> None:
        """Initialize with the offending literal."""
        self.literal = literal
        super().__init__(f"Invalid color literal: {literal!r}")

    def __rich__(self) -> str:
        """Rich formatted error message."""
        return (
            "Invalid color literal\n"
            f"[bold]Input:[/] {self.literal!r}"
        )


class NamedColor(Enum):
    """The 16 standard ANSI colors, plus the terminal default color.

    Values are the foreground SGR codes.
    """

    DEFAULT = 39
    BLACK = 30
    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    MAGENTA = 35
    CYAN = 36
    WHITE = 37
    BRIGHT_BLACK = 90
    BRIGHT_RED = 91
    BRIGHT_GREEN = 92
    BRIGHT_YELLOW = 93
    BRIGHT_BLUE = 94
    BRIGHT_MAGENTA = 95
    BRIGHT_CYAN = 96
    BRIGHT_WHITE = 97

    @property
    def label(self) -> str:
        """Human name, e.g. "bright red"."""
        return self.name.lower().replace("_", " ")


@dataclass(frozen=True)
class PaletteColor:
    """Color from the 256-color palette."""

    index: int

    def __post_init__(self) -> None:
        """Validate the palette index."""
        _check_byte("palette index", self.index)


@dataclass(frozen=True)
class RgbColor:
    """True color (24-bit) RGB triple."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        """Validate the color components."""
        _check_byte("red", self.r)
        _check_byte("green", self.g)
        _check_byte("blue", self.b)


type Color = NamedColor | PaletteColor | RgbColor

# Background codes are the foreground codes shifted by 10
_BG_OFFSET = 10

PALETTE_SIZE = 256
INDEX_DIGITS = 3

HEX_REGEX = re.compile(
    r"#?([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})", re.IGNORECASE
)


def _check_byte(name: str, value: int) -> None:
    if not 0 <= value < PALETTE_SIZE:
        msg = f"{name} must be in range 0-255, got {value}"
        raise ValueError(msg)


def rgb(r: int, g: int, b: int) -> RgbColor:
    """Create a true color."""
    return RgbColor(r, g, b)


def ansi256(index: int) -> PaletteColor:
    """Create a 256-color palette color."""
    return PaletteColor(index)


def from_hex(literal: str) -> RgbColor:
    """Parse a hex color literal like "#F97316" or "f97316".

    Raises:
        InvalidColorLiteralError: If the literal is not exactly six hex
            digits, with an optional leading "#".
    """
    match = HEX_REGEX.fullmatch(literal)
    if match is None:
        raise InvalidColorLiteralError(literal)
    r, g, b = (int(part, 16) for part in match.groups())
    return RgbColor(r, g, b)


def parse_color(value: str) -> Color:
    """Parse a color argument: a color name, a palette index or a hex literal.

    Names are case insensitive and accept "-", "_" or " " between words, like
    "bright-red". Numbers of up to three digits are palette indexes.

    Raises:
        InvalidColorLiteralError: If value is none of the above.
    """
    key = re.sub(r"[-\s]+", "_", value.strip()).upper()
    if key in NamedColor.__members__:
        return NamedColor[key]
    if value.isdecimal() and value.isascii() and len(value) <= INDEX_DIGITS:
        if int(value) >= PALETTE_SIZE:
            raise InvalidColorLiteralError(value)
        return PaletteColor(int(value))
    return from_hex(value)


def fg_code(color: Color) -> str:
    """Get the SGR parameter string selecting color as foreground."""
    match color:
        case NamedColor():
            return str(color.value)
        case PaletteColor(index):
            return f"38;5;{index}"
        case RgbColor(r, g, b):
            return f"38;2;{r};{g};{b}"


def bg_code(color: Color) -> str:
    """Get the SGR parameter string selecting color as background."""
    match color:
        case NamedColor():
            return str(color.value + _BG_OFFSET)
        case PaletteColor(index):
            return f"48;5;{index}"
        case RgbColor(r, g, b):
            return f"48;2;{r};{g};{b}"


def color_name(color: Color) -> str:
    """Get a human-readable name for the color."""
    match color:
        case NamedColor():
            return color.label
        case PaletteColor(index):
            return f"color {index}"
        case RgbColor(r, g, b):
            return f"rgb({r}, {g}, {b})"
