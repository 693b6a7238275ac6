# File: tests/utils/test_logging_config.py

"""Tests for logging configuration."""

import logging
import os
import pytest

from floorplan_editor.utils.logging_config import FloorplanLogger, get_logger


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers and level after configure()."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestFloorplanLogger:
    """Tests for FloorplanLogger."""

    def test_trace_level_registered(self):
        assert logging.getLevelName(FloorplanLogger.TRACE_LEVEL) == "TRACE"

    def test_get_logger_adds_trace_method(self):
        logger = get_logger("floorplan_editor.test", logging.DEBUG)
        assert hasattr(logger, "trace")
        assert logger.level == logging.DEBUG

    def test_configure_without_log_dir(self, restore_root_logger):
        log_file = FloorplanLogger.configure(debug_mode=True)
        assert log_file is None
        assert restore_root_logger.level == logging.DEBUG
        assert len(restore_root_logger.handlers) == 1

    def test_configure_writes_log_file(self, restore_root_logger, tmp_path):
        log_file = FloorplanLogger.configure(log_dir=str(tmp_path), console_format="full")
        logging.getLogger("floorplan_editor.test").info("hello")
        for handler in restore_root_logger.handlers:
            handler.flush()

        assert os.path.exists(log_file)
        with open(log_file) as f:
            assert "hello" in f.read()
