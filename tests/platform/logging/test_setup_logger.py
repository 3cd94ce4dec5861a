"""Tests for the application logger bootstrap."""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from rich.logging import RichHandler

from promptpath.platform.logging import LOGGER_NAME, setup_logger


def test_setup_logger_attaches_rich_console_handler() -> None:
    logger = setup_logger(console_level=logging.ERROR)

    assert logger.name == LOGGER_NAME
    handlers = [h for h in logger.handlers if isinstance(h, RichHandler)]
    assert len(handlers) == 1
    assert handlers[0].level == logging.ERROR
    assert handlers[0].console.stderr


def test_setup_logger_replaces_previous_handlers() -> None:
    _ = setup_logger()
    logger = setup_logger()

    assert len(logger.handlers) == 1


def test_setup_logger_adds_rotating_file_handler(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "promptpath.log"

    logger = setup_logger(log_file=log_file)
    try:
        file_handlers = [
            h for h in logger.handlers if isinstance(h, logging.handlers.RotatingFileHandler)
        ]
        assert len(file_handlers) == 1
        assert file_handlers[0].level == logging.DEBUG
        assert log_file.parent.is_dir()

        logging.getLogger(f"{LOGGER_NAME}.tests").debug("hello from tests")
        file_handlers[0].flush()
        assert "hello from tests" in log_file.read_text(encoding="utf-8")
    finally:
        _ = setup_logger()
