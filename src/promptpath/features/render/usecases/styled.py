"""
Summary: Bracket a bounded render with style set and reset calls on a style sink.
Why: Guarantee the sink never stays colored after a render, including failed ones.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from promptpath.features.render.domain.policy import JoinerPolicy
from promptpath.features.render.domain.style import StyleDescriptor
from promptpath.features.render.usecases.joiner import write_multi_segment
from promptpath.features.render.usecases.ports import StyleSink
from promptpath.shared.elements import Element

logger = logging.getLogger(__name__)


def write_styled(
    sink: StyleSink,
    elements: Iterable[Element],
    policy: JoinerPolicy,
    style: StyleDescriptor,
) -> int:
    """Render elements between ``set_style`` and ``reset`` on the sink.

    The reset is attempted on every exit path once the style was applied. A
    render error wins over a reset error; the latter is logged and attached
    to the render error as a note.

    Args:
        sink: Color capable destination.
        elements: Elements in display order.
        policy: Separator and bound to apply.
        style: Colors to apply for the duration of the render.

    Returns:
        int: Number of elements written.

    Raises:
        OSError: Propagated from the sink. A reset failure of any kind never
            masks the render error.
    """
    sink.set_style(style)
    try:
        written = write_multi_segment(sink, elements, policy)
    except BaseException as render_error:
        try:
            sink.reset()
        except Exception as reset_error:
            logger.warning("Failed to reset sink style after render error: %s", reset_error)
            render_error.add_note(f"style reset also failed: {reset_error!r}")
        raise

    sink.reset()
    return written
