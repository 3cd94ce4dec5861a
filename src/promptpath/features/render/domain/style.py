"""Style descriptor: the foreground/background pair applied around a render."""

from __future__ import annotations

from dataclasses import dataclass

from rich.color import Color, ColorParseError


class InvalidStyleError(ValueError):
    """Raised when a color definition cannot be parsed."""

    def __init__(self, value: str, reason: str) -> None:
        super().__init__(f"Invalid color {value!r}: {reason}")
        self.value: str = value


def parse_color(value: str | None) -> Color | None:
    """Parse a rich color definition, treating empty input as no color.

    Args:
        value: Color name, ``color(N)``, ``#rrggbb`` or ``rgb(r,g,b)``.

    Returns:
        Color | None: Parsed color, or ``None`` for an empty value.

    Raises:
        InvalidStyleError: If rich cannot parse the definition.
    """
    if value is None or not value.strip():
        return None
    try:
        return Color.parse(value.strip())
    except ColorParseError as exc:
        raise InvalidStyleError(value, str(exc)) from exc


@dataclass(slots=True, frozen=True)
class StyleDescriptor:
    """Foreground and background colors. Consumed only by style sinks."""

    foreground: Color | None = None
    background: Color | None = None

    @classmethod
    def from_colors(cls, foreground: str | None, background: str | None) -> StyleDescriptor:
        """Build a descriptor from two rich color definitions."""
        return cls(foreground=parse_color(foreground), background=parse_color(background))

    @property
    def is_plain(self) -> bool:
        return self.foreground is None and self.background is None
