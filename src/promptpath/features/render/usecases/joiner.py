"""
Summary: Bounded multi-segment joiner writing elements to a text sink.
Why: Bound consumption of lazy element sources and keep separator placement in one place.
"""

from __future__ import annotations

import io
import logging
from collections.abc import Iterable
from itertools import islice

from promptpath.features.render.domain.policy import JoinerPolicy
from promptpath.features.render.usecases.ports import TextSink
from promptpath.shared.elements import Element

logger = logging.getLogger(__name__)


def write_multi_segment(
    sink: TextSink,
    elements: Iterable[Element],
    policy: JoinerPolicy,
) -> int:
    """Write at most ``policy.max_elems`` elements joined by the separator.

    Elements beyond the bound are never pulled from the iterable. No leading
    or trailing separator is written, and nothing at all when no element is
    taken. Errors raised by ``sink.write`` propagate unchanged.

    Args:
        sink: Destination for the text.
        elements: Elements in display order.
        policy: Separator and bound to apply.

    Returns:
        int: Number of elements written.
    """
    written = 0
    for element in islice(elements, policy.max_elems):
        if written:
            _ = sink.write(policy.separator)
        _ = sink.write(str(element))
        written += 1

    logger.debug("Wrote %d element(s) with bound %s", written, policy.max_elems)
    return written


def join_elements(elements: Iterable[Element], policy: JoinerPolicy) -> str:
    """Return the text ``write_multi_segment`` would write."""
    buffer = io.StringIO()
    _ = write_multi_segment(buffer, elements, policy)
    return buffer.getvalue()
