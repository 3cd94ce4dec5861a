"""Ports for render use cases.

Where: features/render/usecases.
What: Protocols for the two sink capabilities a render needs: writing text and setting a style.
Why: Let the joiner work against any text stream while only the styled wrapper requires color support.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from promptpath.features.render.domain.style import StyleDescriptor


@runtime_checkable
class TextSink(Protocol):
    """Destination for rendered text. Any ``TextIO`` satisfies it."""

    def write(self, text: str, /) -> object:
        """Write text; raise ``OSError`` on failure."""
        ...


@runtime_checkable
class StyleSink(TextSink, Protocol):
    """Text sink that can also switch its output style."""

    def set_style(self, style: StyleDescriptor) -> None:
        """Apply the style to subsequent writes."""
        ...

    def reset(self) -> None:
        """Return the sink to its default style."""
        ...
