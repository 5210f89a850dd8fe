"""Color output configuration."""

import os
import typing
from enum import StrEnum, auto


class ColorMode(StrEnum):
    """Whether to emit escape sequences for styled output."""

    AUTO = auto()
    ALWAYS = auto()
    NEVER = auto()


def detect_color_mode(option: ColorMode, stream: typing.TextIO) -> ColorMode:
    """Resolve the color mode to ALWAYS or NEVER.

    Priority:
    1. CLI option if not "auto"
    2. NO_COLOR environment variable (if defined and not empty)
    3. FORCE_COLOR environment variable (if defined and not empty)
    4. Whether stream is a terminal
    """
    if option != ColorMode.AUTO:
        return option

    if os.getenv("NO_COLOR"):
        return ColorMode.NEVER

    if os.getenv("FORCE_COLOR"):
        return ColorMode.ALWAYS

    try:
        is_terminal = stream.isatty()
    except ValueError:
        # Closed stream
        is_terminal = False
    return ColorMode.ALWAYS if is_terminal else ColorMode.NEVER
