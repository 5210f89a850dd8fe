"""Text styling.

Style holds a style definition, applicable to any number of strings. Styled
couples a style with one string, for fluent one-off use:

    >>> str(style("Hello").fg("red").bold())
    '\\x1b[1;31mHello\\x1b[0m'
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from escapade.colors import Color, bg_code, color_name, fg_code, parse_color
from escapade.modifiers import Modifier, ModifierSet
from escapade.sequences import CSI, RESET, SGR_SUFFIX


def _as_color(color: Color | str) -> Color:
    """Accept color names and hex literals where a Color is expected."""
    if isinstance(color, str):
        return parse_color(color)
    return color


@dataclass(frozen=True)
class Style:
    """Foreground color, background color and modifiers."""

    foreground: Color | None = None
    background: Color | None = None
    modifiers: ModifierSet = field(default_factory=ModifierSet)

    def fg(self, color: Color | str) -> Style:
        """Return a copy with the foreground color set."""
        return replace(self, foreground=_as_color(color))

    def bg(self, color: Color | str) -> Style:
        """Return a copy with the background color set."""
        return replace(self, background=_as_color(color))

    def modifier(self, *modifiers: Modifier) -> Style:
        """Return a copy with modifiers added."""
        return replace(
            self, modifiers=self.modifiers | ModifierSet.of(*modifiers)
        )

    def codes(self) -> list[str]:
        """SGR parameters: modifiers, then foreground, then background."""
        codes = [str(code) for code in self.modifiers.codes()]
        if self.foreground is not None:
            codes.append(fg_code(self.foreground))
        if self.background is not None:
            codes.append(bg_code(self.background))
        return codes

    def apply(self, text: str) -> str:
        """Wrap text in this style, followed by a full reset.

        Text is returned unchanged when the style is empty.
        """
        codes = self.codes()
        if not codes:
            return text
        return f"{CSI}{';'.join(codes)}{SGR_SUFFIX}{text}{RESET}"

    def describe(self) -> str:
        """Describe the style, e.g. "bold, fg: red"."""
        parts = [modifier.label for modifier in self.modifiers]
        if self.foreground is not None:
            parts.append(f"fg: {color_name(self.foreground)}")
        if self.background is not None:
            parts.append(f"bg: {color_name(self.background)}")
        return ", ".join(parts) if parts else "no style"


@dataclass(frozen=True)
class Styled:
    """A string with a style, built by chaining calls."""

    text: str
    style: Style = field(default_factory=Style)

    def fg(self, color: Color | str) -> Styled:
        """Set the foreground color."""
        return replace(self, style=self.style.fg(color))

    def bg(self, color: Color | str) -> Styled:
        """Set the background color."""
        return replace(self, style=self.style.bg(color))

    def modifier(self, *modifiers: Modifier) -> Styled:
        """Add modifiers."""
        return replace(self, style=self.style.modifier(*modifiers))

    def bold(self) -> Styled:  # noqa: D102
        return self.modifier(Modifier.BOLD)

    def dim(self) -> Styled:  # noqa: D102
        return self.modifier(Modifier.DIM)

    def italic(self) -> Styled:  # noqa: D102
        return self.modifier(Modifier.ITALIC)

    def underline(self) -> Styled:  # noqa: D102
        return self.modifier(Modifier.UNDERLINE)

    def blink(self) -> Styled:  # noqa: D102
        return self.modifier(Modifier.BLINK)

    def reverse(self) -> Styled:  # noqa: D102
        return self.modifier(Modifier.REVERSE)

    def hidden(self) -> Styled:  # noqa: D102
        return self.modifier(Modifier.HIDDEN)

    def strikethrough(self) -> Styled:  # noqa: D102
        return self.modifier(Modifier.STRIKETHROUGH)

    def overline(self) -> Styled:  # noqa: D102
        return self.modifier(Modifier.OVERLINE)

    def render(self) -> str:
        """Render the text with escape sequences."""
        return self.style.apply(self.text)

    def __str__(self) -> str:
        """Same as render()."""
        return self.render()


def style(text: str) -> Styled:
    """Start styling text, e.g. style("Hello").fg("red").bold()."""
    return Styled(text)
