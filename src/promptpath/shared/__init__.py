"""Shared value objects used across feature packages."""

from .elements import HOME_MARKER, Element, ElementKind

__all__ = ["HOME_MARKER", "Element", "ElementKind"]
