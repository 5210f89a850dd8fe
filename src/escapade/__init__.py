"""Escapade: encode and decode terminal escape sequences.

Compose styled text with style() or Style, and decode terminal output into
text runs and described escape sequences with decode().
"""

from escapade import cursor, sequences
from escapade.colors import (
    Color,
    InvalidColorLiteralError,
    NamedColor,
    PaletteColor,
    RgbColor,
    ansi256,
    from_hex,
    parse_color,
    rgb,
)
from escapade.decoder import (
    EscapeDecoder,
    Segment,
    Text,
    decode,
    iter_decode,
    strip_ansi,
    visible_length,
)
from escapade.escape import Escape, EscapeKind
from escapade.modifiers import Modifier, ModifierSet
from escapade.sequences import RESET, Sequence, SequenceBuilder
from escapade.sgr import describe_sgr
from escapade.style import Style, Styled, style

__all__ = [
    "RESET",
    "Color",
    "Escape",
    "EscapeDecoder",
    "EscapeKind",
    "InvalidColorLiteralError",
    "Modifier",
    "ModifierSet",
    "NamedColor",
    "PaletteColor",
    "RgbColor",
    "Segment",
    "Sequence",
    "SequenceBuilder",
    "Style",
    "Styled",
    "Text",
    "ansi256",
    "cursor",
    "decode",
    "describe_sgr",
    "from_hex",
    "iter_decode",
    "parse_color",
    "rgb",
    "sequences",
    "strip_ansi",
    "style",
    "visible_length",
]
