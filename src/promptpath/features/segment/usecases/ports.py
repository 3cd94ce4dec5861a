"""Ports for segment use cases.

Where: features/segment/usecases.
What: Protocol describing anything that can produce display elements.
Why: Let renderers consume path, timestamp or test sources without knowing their concrete types.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol, runtime_checkable

from promptpath.shared.elements import Element


@runtime_checkable
class SegmentSource(Protocol):
    """Producer of an ordered, finite, re-iterable element sequence."""

    def elements(self) -> Iterator[Element]:
        """Return a fresh iterator over the elements, first to last."""
        ...
