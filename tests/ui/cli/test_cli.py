"""Tests for CLI functionality."""

import io
import os
from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from promptpath.platform.terminal import RESET_SEQUENCE
from promptpath.ui.cli import CommandProcessor


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch, mocker: MockerFixture) -> None:
    """Isolate the CLI from the caller's environment and logger setup."""

    for name in list(os.environ):
        if name.startswith("PROMPTPATH_") or name in {"NO_COLOR", "FORCE_COLOR"}:
            monkeypatch.delenv(name)
    _ = mocker.patch("promptpath.ui.cli.args.parser.setup_logger")
    _ = mocker.patch(
        "promptpath.ui.cli.args.parser.resolve_home", return_value=Path("/home/alice")
    )


def test_path_command_plain_output(capsys: pytest.CaptureFixture[str]) -> None:
    CommandProcessor.process_command(["path", "/home/alice/proj/src", "--color", "never"])

    assert capsys.readouterr().out == "~ / proj / src\n"


def test_path_command_outside_home(capsys: pytest.CaptureFixture[str]) -> None:
    CommandProcessor.process_command(["path", "/etc/nginx", "--plain"])

    assert capsys.readouterr().out == "/ / etc / nginx\n"


def test_path_command_alternate_composition(capsys: pytest.CaptureFixture[str]) -> None:
    CommandProcessor.process_command(
        ["path", "this/dir/is/long", "--separator", " > ", "--unbounded", "--plain"]
    )

    assert capsys.readouterr().out == "this > dir > is > long\n"


def test_path_command_truncates_silently(capsys: pytest.CaptureFixture[str]) -> None:
    CommandProcessor.process_command(["path", "/a/b/c", "--max-elems", "2", "--plain"])

    assert capsys.readouterr().out == "/ / a\n"


def test_path_command_color_always_emits_escapes(
    capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("TERM", "xterm-256color")
    CommandProcessor.process_command(["path", "/home/alice/proj", "--color", "always"])

    out = capsys.readouterr().out
    assert out.startswith("\x1b[")
    assert "~ / proj" in out
    assert out.endswith(RESET_SEQUENCE + "\n")


def test_time_command(capsys: pytest.CaptureFixture[str]) -> None:
    CommandProcessor.process_command(["time", "--format", "[fixed]", "--plain"])

    assert capsys.readouterr().out == "[fixed]\n"


def test_write_failure_exits_with_error(mocker: MockerFixture) -> None:
    stream = mocker.Mock(spec=io.StringIO)
    stream.write.side_effect = BrokenPipeError(32, "Broken pipe")
    _ = mocker.patch("promptpath.ui.cli.commands.output.sys.stdout", stream)
    mock_logger = mocker.patch("promptpath.ui.cli.cli.logger")

    with pytest.raises(SystemExit) as excinfo:
        CommandProcessor.process_command(["path", "/etc", "--color", "never"])

    assert excinfo.value.code == 1
    mock_logger.error.assert_called_once()


def test_keyboard_interrupt_exits_130(mocker: MockerFixture) -> None:
    _ = mocker.patch(
        "promptpath.ui.cli.cli.ArgumentParser.process_args", side_effect=KeyboardInterrupt
    )

    with pytest.raises(SystemExit) as excinfo:
        CommandProcessor.process_command(["path"])

    assert excinfo.value.code == 130
