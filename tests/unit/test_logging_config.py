"""
Unit tests for root logger setup.
"""
import logging
from pathlib import Path

import pytest

from user_admin_api.app.core.logging_config import setup_logging


@pytest.fixture
def bare_root_logger():
    """Root logger with its handlers and level temporarily removed."""
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    root.handlers = []
    yield root
    for handler in root.handlers:
        handler.close()
    root.handlers = saved_handlers
    root.setLevel(saved_level)


def test_console_and_file_handlers(bare_root_logger: logging.Logger, tmp_path: Path):
    log_file = tmp_path / "app.log"

    setup_logging("debug", str(log_file))
    logging.getLogger("user_admin_api.test").debug("hello file")
    for handler in bare_root_logger.handlers:
        handler.flush()

    assert bare_root_logger.level == logging.DEBUG
    assert len(bare_root_logger.handlers) == 2
    assert "[DEBUG] user_admin_api.test: hello file" in log_file.read_text(encoding="utf-8")


def test_unknown_level_falls_back_to_info(bare_root_logger: logging.Logger):
    setup_logging("chatty")

    assert bare_root_logger.level == logging.INFO
    assert len(bare_root_logger.handlers) == 1


def test_second_call_adds_nothing(bare_root_logger: logging.Logger):
    setup_logging("INFO")
    setup_logging("DEBUG")

    assert len(bare_root_logger.handlers) == 1
    assert bare_root_logger.level == logging.INFO
