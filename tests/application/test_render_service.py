"""Tests for the prompt render application service."""

from __future__ import annotations

import io
import logging
from pathlib import PurePosixPath

from pytest_mock import MockerFixture
from rich.color import ColorSystem

from promptpath.application.services import PromptRenderRequest, PromptRenderService
from promptpath.application.services.render_service import alternate_request, reference_request
from promptpath.features.render import JoinerPolicy, StyleDescriptor
from promptpath.features.segment import PathSegmentSource
from promptpath.platform.terminal import RESET_SEQUENCE, AnsiStyleSink

HOME = PurePosixPath("/home/alice")


def test_reference_request_renders_styled_prompt() -> None:
    stream = io.StringIO()
    sink = AnsiStyleSink(stream, ColorSystem.TRUECOLOR)

    written = PromptRenderService().render(
        reference_request(PurePosixPath("/home/alice/proj/src"), HOME), sink
    )

    assert written == 3
    assert stream.getvalue() == "\x1b[34;48;5;19m~ / proj / src" + RESET_SEQUENCE


def test_reference_request_bounds_deep_paths() -> None:
    request = reference_request(PurePosixPath("/home/alice/a/b/c/d/e/f/g"), HOME)

    assert PromptRenderService().render_to_string(request) == "~ / a / b / c / d"


def test_alternate_request_is_unbounded_and_plain() -> None:
    request = alternate_request(PurePosixPath("this/dir/is/long"), None)

    assert request.style is None
    assert request.policy.max_elems is None
    assert PromptRenderService().render_to_string(request) == "this > dir > is > long"


def test_plain_sink_receives_unstyled_text() -> None:
    """A sink without style support still gets the text when a style is requested."""

    stream = io.StringIO()
    request = PromptRenderRequest.for_path(
        PurePosixPath("/etc/nginx"),
        home=HOME,
        style=StyleDescriptor.from_colors("red", None),
    )

    _ = PromptRenderService().render(request, stream)

    assert stream.getvalue() == "/ / etc / nginx"


def test_plain_style_skips_style_calls(mocker: MockerFixture) -> None:
    sink = mocker.Mock()
    request = PromptRenderRequest.for_path(PurePosixPath("/etc"), style=StyleDescriptor())

    _ = PromptRenderService().render(request, sink)

    sink.set_style.assert_not_called()
    sink.reset.assert_not_called()


def test_for_path_builds_path_source() -> None:
    request = PromptRenderRequest.for_path(
        PurePosixPath("/home/alice/x"), show_home=False, home=HOME, policy=JoinerPolicy(max_elems=1)
    )

    assert isinstance(request.source, PathSegmentSource)
    assert request.source.show_home is False
    assert PromptRenderService().render_to_string(request) == "/"


def test_render_logs_element_count(mocker: MockerFixture) -> None:
    logger = mocker.Mock(spec=logging.Logger)
    service = PromptRenderService(logger=logger)

    _ = service.render(PromptRenderRequest.for_path(PurePosixPath("/etc")), io.StringIO())

    assert logger.debug.call_args.args[1] == 2
