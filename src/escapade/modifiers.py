"""Text modifiers (bold, italic, underline, etc.)."""

from __future__ import annotations

import typing
from dataclasses import dataclass
from enum import Enum

if typing.TYPE_CHECKING:
    from collections.abc import Iterator


class Modifier(Enum):
    """Text style modifier.

    Values are stable bit indexes, used by ModifierSet. Declaration order is
    the order in which modifier codes are emitted.
    """

    BOLD = 0
    DIM = 1
    ITALIC = 2
    UNDERLINE = 3
    BLINK = 4
    RAPID_BLINK = 5
    REVERSE = 6
    HIDDEN = 7
    STRIKETHROUGH = 8
    DOUBLE_UNDERLINE = 9
    OVERLINE = 10

    @property
    def on_code(self) -> int:
        """SGR code enabling this modifier."""
        return ON_CODES[self]

    @property
    def off_code(self) -> int:
        """SGR code disabling this modifier."""
        return OFF_CODES[self]

    @property
    def label(self) -> str:
        """Human name, e.g. "double underline"."""
        return self.name.lower().replace("_", " ")


ON_CODES: dict[Modifier, int] = {
    Modifier.BOLD: 1,
    Modifier.DIM: 2,
    Modifier.ITALIC: 3,
    Modifier.UNDERLINE: 4,
    Modifier.BLINK: 5,
    Modifier.RAPID_BLINK: 6,
    Modifier.REVERSE: 7,
    Modifier.HIDDEN: 8,
    Modifier.STRIKETHROUGH: 9,
    Modifier.DOUBLE_UNDERLINE: 21,
    Modifier.OVERLINE: 53,
}

# Several modifiers share a reset code: 22 clears both bold and dim
OFF_CODES: dict[Modifier, int] = {
    Modifier.BOLD: 22,
    Modifier.DIM: 22,
    Modifier.ITALIC: 23,
    Modifier.UNDERLINE: 24,
    Modifier.DOUBLE_UNDERLINE: 24,
    Modifier.BLINK: 25,
    Modifier.RAPID_BLINK: 25,
    Modifier.REVERSE: 27,
    Modifier.HIDDEN: 28,
    Modifier.STRIKETHROUGH: 29,
    Modifier.OVERLINE: 55,
}


@dataclass(frozen=True)
class ModifierSet:
    """Set of modifiers, stored as a bitmask."""

    bits: int = 0

    @classmethod
    def of(cls, *modifiers: Modifier) -> ModifierSet:
        """Create a set holding the given modifiers."""
        result = cls()
        for modifier in modifiers:
            result = result.with_(modifier)
        return result

    def with_(self, modifier: Modifier) -> ModifierSet:
        """Return a copy of the set with modifier added."""
        return ModifierSet(self.bits | (1 << modifier.value))

    def __contains__(self, modifier: object) -> bool:
        """Check if a modifier is in the set."""
        if not isinstance(modifier, Modifier):
            return False
        return bool(self.bits & (1 << modifier.value))

    def __or__(self, other: ModifierSet) -> ModifierSet:
        """Union of two sets."""
        return ModifierSet(self.bits | other.bits)

    def __iter__(self) -> Iterator[Modifier]:
        """Iterate over the modifiers in the set, in declaration order."""
        return (modifier for modifier in Modifier if modifier in self)

    def __len__(self) -> int:
        """Count the modifiers in the set."""
        return self.bits.bit_count()

    def codes(self) -> list[int]:
        """SGR codes enabling every modifier in the set."""
        return [modifier.on_code for modifier in self]
