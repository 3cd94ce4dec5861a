"""Timestamp segment source."""

from __future__ import annotations

from collections.abc import Iterator
from datetime import datetime
from typing import Final, final

from promptpath.shared.elements import Element, ElementKind

DEFAULT_TIME_FORMAT: Final[str] = "%H:%M:%S"


@final
class TimestampSource:
    """Yield a single element holding a formatted local timestamp.

    The moment is captured at construction so every traversal renders the
    same text.
    """

    __slots__ = ("_format", "_now")

    def __init__(self, format: str = DEFAULT_TIME_FORMAT, now: datetime | None = None) -> None:
        self._format: str = format
        self._now: datetime = now if now is not None else datetime.now().astimezone()

    @property
    def format(self) -> str:
        return self._format

    @property
    def now(self) -> datetime:
        return self._now

    def elements(self) -> Iterator[Element]:
        yield Element(text=self._now.strftime(self._format), kind=ElementKind.TIMESTAMP)

    def __iter__(self) -> Iterator[Element]:
        return self.elements()
