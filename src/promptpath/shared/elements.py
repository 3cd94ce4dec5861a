"""Shared display element value objects (segment sources <-> renderers).

This module centralizes the Element dataclass so segment sources and the
joiner rely on a single definition, keeping what a segment means apart from
how it is drawn.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Final


HOME_MARKER: Final[str] = "~"


class ElementKind(str, Enum):
    """Origin of a display element."""

    COMPONENT = "component"
    HOME = "home"
    TIMESTAMP = "timestamp"


@dataclass(slots=True, frozen=True)
class Element:
    """Single unit of displayable text."""

    text: str
    kind: ElementKind = ElementKind.COMPONENT

    def __str__(self) -> str:
        return self.text

    @classmethod
    def home(cls) -> "Element":
        """Return the synthetic marker standing for the home directory."""
        return cls(text=HOME_MARKER, kind=ElementKind.HOME)
