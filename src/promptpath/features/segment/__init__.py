# Path: `src/promptpath/features/segment/__init__.py`
# Summary: Export segment sources and the element protocol they satisfy.
# Why: Provide a stable import surface for the renderer, services and tests.

from promptpath.shared.elements import HOME_MARKER, Element, ElementKind

from .domain.path_source import PathInput, PathSegmentSource, component_to_text
from .domain.timestamp_source import DEFAULT_TIME_FORMAT, TimestampSource
from .usecases.ports import SegmentSource

__all__ = [
    "DEFAULT_TIME_FORMAT",
    "HOME_MARKER",
    "Element",
    "ElementKind",
    "PathInput",
    "PathSegmentSource",
    "SegmentSource",
    "TimestampSource",
    "component_to_text",
]
