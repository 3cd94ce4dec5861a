"""promptpath: render a filesystem path as a compact, styled prompt segment."""

from promptpath.application.services import (
    PromptRenderRequest,
    PromptRenderService,
)
from promptpath.features.render import JoinerPolicy, StyleDescriptor, join_elements, write_multi_segment, write_styled
from promptpath.features.segment import Element, ElementKind, PathSegmentSource, TimestampSource

__version__ = "0.1.0"

__all__ = [
    "Element",
    "ElementKind",
    "JoinerPolicy",
    "PathSegmentSource",
    "PromptRenderRequest",
    "PromptRenderService",
    "StyleDescriptor",
    "TimestampSource",
    "join_elements",
    "write_multi_segment",
    "write_styled",
]
