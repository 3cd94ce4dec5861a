# Path: `src/promptpath/features/render/__init__.py`
# Summary: Export joiner policy, style descriptor, sink ports and render use cases.
# Why: Provide a stable import surface for adapters, services and tests.

from .domain.policy import (
    DEFAULT_ELLIPSIS,
    DEFAULT_MAX_ELEMS,
    DEFAULT_SEPARATOR,
    InvalidJoinerPolicyError,
    JoinerPolicy,
)
from .domain.style import InvalidStyleError, StyleDescriptor, parse_color
from .usecases.joiner import join_elements, write_multi_segment
from .usecases.ports import StyleSink, TextSink
from .usecases.styled import write_styled

__all__ = [
    "DEFAULT_ELLIPSIS",
    "DEFAULT_MAX_ELEMS",
    "DEFAULT_SEPARATOR",
    "InvalidJoinerPolicyError",
    "InvalidStyleError",
    "JoinerPolicy",
    "StyleDescriptor",
    "StyleSink",
    "TextSink",
    "join_elements",
    "parse_color",
    "write_multi_segment",
    "write_styled",
]
