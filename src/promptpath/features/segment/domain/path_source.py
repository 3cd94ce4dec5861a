"""
Summary: Split a filesystem path into display elements with home substitution.
Why: Keep path segmentation free of terminal, environment and styling concerns.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import PurePath
from typing import TypeAlias, final

from promptpath.shared.elements import Element, ElementKind

PathInput: TypeAlias = "str | bytes | os.PathLike[str] | os.PathLike[bytes]"


def _as_pure_path(value: PathInput) -> PurePath:
    if isinstance(value, PurePath):
        return value
    return PurePath(os.fsdecode(value))


def component_to_text(component: str) -> str:
    """Convert a path component into displayable text.

    Undecodable bytes smuggled in as surrogate escapes, and lone surrogates
    that did not come from a filename, are replaced with U+FFFD instead of
    raising.

    Args:
        component: Raw component as produced by ``PurePath.parts``.

    Returns:
        str: Text safe to write to any UTF-8 sink.
    """
    try:
        raw = component.encode("utf-8", errors="surrogateescape")
    except UnicodeEncodeError:
        raw = component.encode("utf-8", errors="surrogatepass")
    return raw.decode("utf-8", errors="replace")


@final
class PathSegmentSource:
    """Read-only view over a path that yields its display elements."""

    __slots__ = ("_path", "_show_home", "_home")

    def __init__(
        self,
        path: PathInput,
        show_home: bool = True,
        home: PathInput | None = None,
    ) -> None:
        """Initialize the source.

        Args:
            path: Absolute or relative path to display.
            show_home: Whether to collapse the home directory into ``~``.
            home: Home directory of the current user, or ``None`` when it
                could not be resolved.
        """
        self._path: PurePath = _as_pure_path(path)
        self._show_home: bool = show_home
        self._home: PurePath | None = _as_pure_path(home) if home is not None else None

    @property
    def path(self) -> PurePath:
        return self._path

    @property
    def show_home(self) -> bool:
        return self._show_home

    @property
    def home(self) -> PurePath | None:
        return self._home

    def home_subdir(self) -> PurePath | None:
        """Return the path relative to home, or ``None`` when it lies outside.

        The match is done on whole components, so ``/home/alice2`` is not
        inside ``/home/alice``. A path equal to home yields ``PurePath(".")``.
        """
        if self._home is None:
            return None
        if not self._path.is_relative_to(self._home):
            return None
        return self._path.relative_to(self._home)

    def elements(self) -> Iterator[Element]:
        """Yield the display elements from root to leaf.

        Each call starts a new traversal.
        """
        if self._show_home:
            subdir = self.home_subdir()
            if subdir is not None:
                yield Element.home()
                yield from self._components(subdir)
                return

        yield from self._components(self._path)

    @staticmethod
    def _components(path: PurePath) -> Iterator[Element]:
        for part in path.parts:
            yield Element(text=component_to_text(part), kind=ElementKind.COMPONENT)

    def __iter__(self) -> Iterator[Element]:
        return self.elements()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(path={str(self._path)!r}, "
            f"show_home={self._show_home!r}, home={None if self._home is None else str(self._home)!r})"
        )
