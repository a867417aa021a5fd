"""Shared logging utilities for thread-safe log file writes.

Every writer appending to a CSV log file must hold the lock returned by
``lock_for`` for that file, so writers sharing a path never interleave rows.
"""

import threading
from pathlib import Path

# Log levels written to the Level column
INFO = "INFO"
DEBUG = "DEBUG"
WARN = "WARN"
ERROR = "ERROR"
FATAL = "FATAL"

LEVELS = (INFO, DEBUG, WARN, ERROR, FATAL)

HEADER = ["Time", "Component", "Level", "Message", "ID"]


class LogWriterError(Exception):
    """Base class for log writer failures."""


class LogSetupError(LogWriterError):
    """The log directory or file could not be created or opened."""


class LogWriteError(LogWriterError):
    """A row could not be written or flushed to the log file."""


# Guards the registry itself, not the files
_registry_lock = threading.Lock()
_path_locks: dict[str, threading.Lock] = {}


def lock_for(path) -> threading.Lock:
    """Return the process-wide lock for a log file path.

    Paths are resolved first, so two spellings of the same file share a lock.
    Entries are never evicted: the registry grows by one lock per distinct
    path, which is one per log directory per day.
    """
    key = str(Path(path).resolve())
    with _registry_lock:
        lock = _path_locks.get(key)
        if lock is None:
            lock = threading.Lock()
            _path_locks[key] = lock
        return lock
