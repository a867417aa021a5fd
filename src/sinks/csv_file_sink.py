"""
CSV File Sink - Appends log rows to the daily CSV file.

Each call writes exactly one row:

    Time,Component,Level,Message,ID

under the lock shared by every sink on the same file, and flushes before the
lock is released. Time is UTC in RFC 3339 form (2026-01-31T09:15:00Z).
"""

import csv
import logging
from pathlib import Path
from datetime import datetime, timezone

from log_utils import LogSetupError, LogWriteError, lock_for

from .base_sink import BaseSink

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def utc_timestamp(now: datetime | None = None) -> str:
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).strftime(TIMESTAMP_FORMAT)


class CsvFileSink(BaseSink):
    """Append-only CSV sink bound to one file for its whole lifetime.

    The file must already exist with its header (see log_files.ensure_log_file).
    """

    def __init__(self, path: Path, component: str, component_id: str):
        self.path = Path(path)
        self.component = component
        self.component_id = component_id
        self.lock = lock_for(self.path)
        try:
            self._stream = open(self.path, "a", newline="", encoding="utf-8")
        except OSError as e:
            raise LogSetupError(f"failed to open log file {self.path}: {e}") from e
        self._writer = csv.writer(self._stream, lineterminator="\n")
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def write(self, level: str, message: str) -> None:
        """Append one row and flush it to the OS.

        Raises LogWriteError if the row cannot be written or flushed.
        """
        with self.lock:
            if self._closed:
                raise LogWriteError(f"log file {self.path.name} is closed")
            row = [utc_timestamp(), self.component, level, message, self.component_id]
            try:
                self._writer.writerow(row)
                self._stream.flush()
            except (OSError, ValueError) as e:
                raise LogWriteError(f"error writing to log file {self.path}: {e}") from e

    def close(self) -> None:
        with self.lock:
            if self._closed:
                return
            self._closed = True
            try:
                self._stream.close()
            except OSError as e:
                logger.warning(f"Failed to close log file {self.path.name}: {e}")
