"""Application service composing segment sources, joiner policy, style and sink."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import Logger, getLogger
from typing import final

from promptpath.features.render import (
    JoinerPolicy,
    StyleDescriptor,
    StyleSink,
    TextSink,
    join_elements,
    write_multi_segment,
    write_styled,
)
from promptpath.features.segment import PathInput, PathSegmentSource, SegmentSource


@dataclass(slots=True)
class PromptRenderRequest:
    """Parameters describing a single render."""

    source: SegmentSource
    policy: JoinerPolicy = field(default_factory=JoinerPolicy)
    style: StyleDescriptor | None = None

    @classmethod
    def for_path(
        cls,
        path: PathInput,
        *,
        show_home: bool = True,
        home: PathInput | None = None,
        policy: JoinerPolicy | None = None,
        style: StyleDescriptor | None = None,
    ) -> PromptRenderRequest:
        """Build a request rendering ``path`` with an explicit home directory."""

        return cls(
            source=PathSegmentSource(path, show_home=show_home, home=home),
            policy=policy if policy is not None else JoinerPolicy(),
            style=style,
        )


def reference_request(path: PathInput, home: PathInput | None) -> PromptRenderRequest:
    """Styled prompt: " / " separator, five elements, blue on color 19."""

    return PromptRenderRequest.for_path(
        path,
        show_home=True,
        home=home,
        policy=JoinerPolicy(separator=" / ", max_elems=5, ellipsis="..."),
        style=StyleDescriptor.from_colors("blue", "color(19)"),
    )


def alternate_request(path: PathInput, home: PathInput | None) -> PromptRenderRequest:
    """Plain breadcrumb: " > " separator and no element bound."""

    return PromptRenderRequest.for_path(
        path,
        show_home=True,
        home=home,
        policy=JoinerPolicy.unbounded(separator=" > "),
    )


@final
class PromptRenderService:
    """Application façade running a render request against a sink."""

    _logger: Logger

    def __init__(self, *, logger: Logger | None = None) -> None:
        self._logger = logger or getLogger(__name__)

    def render(self, request: PromptRenderRequest, sink: TextSink) -> int:
        """Write the request to the sink, styled when both sides allow it.

        Returns:
            int: Number of elements written.

        Raises:
            OSError: Propagated from the sink.
        """

        style = request.style
        if style is not None and not style.is_plain and isinstance(sink, StyleSink):
            written = write_styled(sink, request.source.elements(), request.policy, style)
        else:
            written = write_multi_segment(sink, request.source.elements(), request.policy)

        self._logger.debug("Rendered %d element(s) from %r", written, request.source)
        return written

    def render_to_string(self, request: PromptRenderRequest) -> str:
        """Return the unstyled text of the request."""

        return join_elements(request.source.elements(), request.policy)
