"""
Console Sink - Mirrors log messages to standard output.

Messages are rendered through the standard logging machinery with the same
format the rest of the process uses. The mirror is not synchronized with the
CSV file, and a failing stream never affects the file write.
"""

import sys
import logging

from log_config import CONSOLE_FORMAT, get_console_level
from log_utils import INFO, DEBUG, WARN, ERROR, FATAL

from .base_sink import BaseSink

# Row level -> logging level
LEVEL_MAP = {
    INFO: logging.INFO,
    DEBUG: logging.DEBUG,
    WARN: logging.WARNING,
    ERROR: logging.ERROR,
    FATAL: logging.CRITICAL,
}


class _QuietStreamHandler(logging.StreamHandler):
    """Stream handler that drops emit failures instead of reporting them."""

    def handleError(self, record: logging.LogRecord) -> None:
        pass


class ConsoleSink(BaseSink):
    """Console mirror for one component.

    Each sink owns its handler and feeds it records directly, so several
    writers for the same component never duplicate console lines.
    """

    def __init__(self, component: str, stream=None, level: int | None = None):
        self.logger = logging.getLogger(f"csvlog.{component}")
        self.handler = _QuietStreamHandler(stream if stream is not None else sys.stdout)
        self.handler.setLevel(level if level is not None else get_console_level())
        self.handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))

    def write(self, level: str, message: str) -> None:
        levelno = LEVEL_MAP.get(level, logging.INFO)
        if levelno < self.handler.level:
            return
        record = self.logger.makeRecord(
            self.logger.name, levelno, __file__, 0, message, None, None
        )
        self.handler.handle(record)

    def close(self) -> None:
        self.handler.close()
