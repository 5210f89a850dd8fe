"""Select Graphic Rendition (SGR) parameter interpreter."""

from __future__ import annotations

import typing

if typing.TYPE_CHECKING:
    from collections.abc import Sequence

EXTENDED_FG = 38
EXTENDED_BG = 48
PALETTE_SELECTOR = 5
RGB_SELECTOR = 2

SGR_PHRASES: dict[int, str] = {
    0: "reset",
    1: "bold",
    2: "dim",
    3: "italic",
    4: "underline",
    5: "blink",
    7: "reverse",
    8: "hidden",
    9: "strikethrough",
    22: "normal intensity",
    23: "not italic",
    24: "not underlined",
    25: "not blinking",
    27: "not reversed",
    28: "not hidden",
    29: "not strikethrough",
    39: "default fg",
    49: "default bg",
}

_BASE_COLORS = (
    "black", "red", "green", "yellow", "blue", "magenta", "cyan", "white",
)  # fmt: skip

for _offset, _color in enumerate(_BASE_COLORS):
    SGR_PHRASES[30 + _offset] = f"{_color} fg"
    SGR_PHRASES[40 + _offset] = f"{_color} bg"
    SGR_PHRASES[90 + _offset] = f"bright {_color} fg"
    SGR_PHRASES[100 + _offset] = f"bright {_color} bg"


def describe_sgr(params: Sequence[int]) -> str:
    """Describe SGR parameters, e.g. [1, 31] -> "bold, red fg".

    Extended colors span several parameters: 38;5;N and 38;2;R;G;B (48 for
    background). When the trailing parameters are missing, the selector is
    described as "extended fg" or "extended bg" and consumes one parameter.
    """
    if not params or list(params) == [0]:
        return "reset"

    phrases: list[str] = []
    i = 0
    while i < len(params):
        code = params[i]
        if code in (EXTENDED_FG, EXTENDED_BG):
            phrase, width = _describe_extended(params, i)
        elif code in SGR_PHRASES:
            phrase, width = SGR_PHRASES[code], 1
        else:
            phrase, width = f"code {code}", 1
        phrases.append(phrase)
        i += width
    return ", ".join(phrases)


def _describe_extended(params: Sequence[int], i: int) -> tuple[str, int]:
    """Describe the extended color starting at params[i].

    Returns:
        The phrase and the number of parameters it consumes.
    """
    target = "fg" if params[i] == EXTENDED_FG else "bg"
    remaining = len(params) - i - 1
    if remaining >= 2 and params[i + 1] == PALETTE_SELECTOR:  # noqa: PLR2004
        return f"{target}: color {params[i + 2]}", 3
    if remaining >= 4 and params[i + 1] == RGB_SELECTOR:  # noqa: PLR2004
        r, g, b = params[i + 2 : i + 5]
        return f"{target}: rgb({r}, {g}, {b})", 5
    return f"extended {target}", 1
