"""
Logger - Tagged logging for the Filter Visualizer

    from filter_viz.utils.logger import logger

    logger.info("Modulation source: ENVELOPE", component="MOD")
    logger.debug("frame stall clamped", component="ANIM", details="dt=5.00s")

Lines read "[COMP] message - details". Three sinks hang off the
"filter_viz" logger: stdout (INFO by default), a Qt signal the main
window mirrors in its status bar (INFO and up), and an optional file
that captures everything down to DEBUG.
"""

import logging
import sys
import time
from enum import IntEnum
from typing import Optional
from PyQt5.QtCore import QObject, pyqtSignal

LINE_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
CLOCK_FORMAT = "%H:%M:%S"


class LogLevel(IntEnum):
    """Thresholds accepted by set_log_level."""
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING


def format_message(msg: str, component: Optional[str] = None,
                   details: Optional[str] = None) -> str:
    """Build '[COMP] msg - details', skipping the parts that are empty."""
    text = f"[{component}] {msg}" if component else msg
    if details:
        text = f"{text} - {details}"
    return text


class LogSignalEmitter(QObject):
    """Carries log lines to the GUI thread."""
    log_message = pyqtSignal(str, int, str)  # text, levelno, HH:MM:SS


class QtSignalHandler(logging.Handler):
    """Forwards each record to LogSignalEmitter.log_message."""

    def __init__(self, emitter: LogSignalEmitter):
        super().__init__(level=logging.INFO)
        self.emitter = emitter
        self.setFormatter(logging.Formatter("%(message)s"))

    def emit(self, record: logging.LogRecord):
        try:
            stamp = time.strftime(CLOCK_FORMAT, time.localtime(record.created))
            self.emitter.log_message.emit(self.format(record), record.levelno, stamp)
        except Exception:
            self.handleError(record)


class FilterVizLogger:
    """Wraps the "filter_viz" stdlib logger with component tagging."""

    def __init__(self):
        self._logger = logging.getLogger("filter_viz")
        self._logger.setLevel(logging.DEBUG)  # handlers do the filtering
        self._logger.propagate = False

        self.signal_emitter = LogSignalEmitter()

        self._console_handler = logging.StreamHandler(sys.stdout)
        self._console_handler.setLevel(logging.INFO)
        self._console_handler.setFormatter(logging.Formatter(LINE_FORMAT, datefmt=CLOCK_FORMAT))

        self._qt_handler = QtSignalHandler(self.signal_emitter)
        self._file_handler: Optional[logging.FileHandler] = None

        for handler in (self._console_handler, self._qt_handler):
            self._logger.addHandler(handler)

    @property
    def console_level(self) -> int:
        return self._console_handler.level

    @property
    def file_path(self) -> Optional[str]:
        """Path of the active log file, None when file logging is off."""
        if self._file_handler is None:
            return None
        return self._file_handler.baseFilename

    def set_level(self, level: LogLevel):
        self._console_handler.setLevel(level)

    # =========================================================================
    # FILE OUTPUT
    # =========================================================================

    def enable_file_logging(self, filepath):
        """Append DEBUG and up to filepath, replacing any previous file."""
        self.disable_file_logging()
        handler = logging.FileHandler(str(filepath))
        handler.setLevel(logging.DEBUG)
        handler.setFormatter(logging.Formatter(LINE_FORMAT))
        self._logger.addHandler(handler)
        self._file_handler = handler

    def disable_file_logging(self):
        if self._file_handler is None:
            return
        self._logger.removeHandler(self._file_handler)
        self._file_handler.close()
        self._file_handler = None

    # =========================================================================
    # LOGGING
    # =========================================================================

    def debug(self, msg: str, component: Optional[str] = None,
              details: Optional[str] = None):
        """State changes and frame events, file/console-debug only."""
        self._logger.debug(format_message(msg, component, details))

    def info(self, msg: str, component: Optional[str] = None,
             details: Optional[str] = None):
        """Lifecycle and user actions, also shown in the status bar."""
        self._logger.info(format_message(msg, component, details))


# Global logger instance
logger = FilterVizLogger()


def set_log_level(level: LogLevel):
    """Set the console log level."""
    logger.set_level(level)
