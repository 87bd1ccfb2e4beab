"""
Tests for filter_viz/utils/logger.py

Tests:
- Component tag and details layout
- Console threshold via set_log_level
- Optional file output
- Qt signal mirror for the status bar
"""

import logging

import pytest
from unittest.mock import MagicMock

from filter_viz.utils.logger import logger, LogLevel, format_message, set_log_level


@pytest.fixture
def restore_console_level():
    """Put the console threshold back after a test changes it."""
    level = logger.console_level
    yield
    logger.set_level(level)


@pytest.fixture
def mirror(qapp):
    """MagicMock connected to the status bar signal."""
    handler = MagicMock()
    logger.signal_emitter.log_message.connect(handler)
    yield handler
    logger.signal_emitter.log_message.disconnect(handler)


class TestFormatMessage:
    """Component tag and details layout."""

    def test_plain(self):
        """No tag, no details."""
        assert format_message("hello") == "hello"

    def test_component(self):
        """Component renders as a bracketed prefix."""
        assert format_message("started", component="ANIM") == "[ANIM] started"

    def test_details(self):
        """Details follow after a dash."""
        msg = format_message("stall", component="ANIM", details="dt=0.5s")
        assert msg == "[ANIM] stall - dt=0.5s"


class TestConsoleLevel:
    """set_log_level drives the stdout handler."""

    def test_default_is_info(self):
        """Console starts at INFO so per-frame DEBUG stays quiet."""
        assert logger.console_level == logging.INFO

    def test_set_debug(self, restore_console_level):
        """DEBUG opens the console to frame events."""
        set_log_level(LogLevel.DEBUG)
        assert logger.console_level == logging.DEBUG

    def test_set_warning(self, restore_console_level):
        """WARNING silences lifecycle lines."""
        set_log_level(LogLevel.WARNING)
        assert logger.console_level == logging.WARNING


class TestFileLogging:
    """enable_file_logging / disable_file_logging."""

    def test_writes_tagged_lines(self, tmp_path):
        """File output captures DEBUG lines with their tag."""
        path = tmp_path / "viz.log"
        logger.enable_file_logging(path)
        try:
            logger.debug("frame stall clamped", component="ANIM", details="dt=0.500s")
        finally:
            logger.disable_file_logging()

        text = path.read_text()
        assert "[DEBUG] [ANIM] frame stall clamped - dt=0.500s" in text

    def test_disable_closes_handler(self, tmp_path):
        """After disabling, nothing more reaches the file."""
        path = tmp_path / "viz.log"
        logger.enable_file_logging(path)
        assert logger.file_path == str(path)

        logger.disable_file_logging()
        logger.info("after close", component="APP")

        assert logger.file_path is None
        assert "after close" not in path.read_text()

    def test_enable_replaces_previous_file(self, tmp_path):
        """Only the most recent file receives output."""
        first = tmp_path / "first.log"
        second = tmp_path / "second.log"
        logger.enable_file_logging(first)
        logger.enable_file_logging(second)
        try:
            logger.info("to second", component="APP")
        finally:
            logger.disable_file_logging()

        assert "to second" not in first.read_text()
        assert "to second" in second.read_text()

    def test_disable_when_off_is_safe(self):
        """Disabling twice does nothing."""
        logger.disable_file_logging()
        logger.disable_file_logging()
        assert logger.file_path is None


class TestSignalMirror:
    """Qt signal feeding the status bar."""

    def test_info_is_emitted(self, mirror):
        """INFO lines reach the GUI with their level."""
        logger.info("Modulation source: ENVELOPE", component="MOD")
        mirror.assert_called_once()
        text, level, stamp = mirror.call_args.args
        assert text == "[MOD] Modulation source: ENVELOPE"
        assert level == logging.INFO
        assert len(stamp) == 8  # HH:MM:SS

    def test_debug_is_not_emitted(self, mirror):
        """DEBUG stays out of the status bar."""
        logger.debug("frame stall clamped", component="ANIM")
        mirror.assert_not_called()
