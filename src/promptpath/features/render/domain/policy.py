"""
Summary: Joiner policy describing how elements are combined into one line.
Why: Keep separator, visible-element bound and truncation marker in one validated value.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

DEFAULT_SEPARATOR: Final[str] = " / "
DEFAULT_MAX_ELEMS: Final[int] = 5
DEFAULT_ELLIPSIS: Final[str] = "..."


class InvalidJoinerPolicyError(ValueError):
    """Raised when a joiner policy is constructed with an impossible bound."""

    def __init__(self, max_elems: int) -> None:
        super().__init__(f"max_elems must be >= 0 or None; received {max_elems}")
        self.max_elems: int = max_elems


@dataclass(slots=True, frozen=True)
class JoinerPolicy:
    """Separator, visible-element bound and ellipsis marker.

    ``max_elems=None`` means no bound. The ellipsis is carried for callers
    but the joiner does not write it when elements are dropped.
    """

    separator: str = DEFAULT_SEPARATOR
    max_elems: int | None = DEFAULT_MAX_ELEMS
    ellipsis: str = DEFAULT_ELLIPSIS

    def __post_init__(self) -> None:
        if self.max_elems is not None and self.max_elems < 0:
            raise InvalidJoinerPolicyError(self.max_elems)

    @classmethod
    def unbounded(cls, separator: str = DEFAULT_SEPARATOR) -> JoinerPolicy:
        """Return a policy that shows every element."""
        return cls(separator=separator, max_elems=None)
