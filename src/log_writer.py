"""
Log Writer - Thread-safe leveled logger backed by a daily CSV file.

Components obtain a writer with LogWriter.create() and emit leveled messages:

    log = LogWriter.create("Auth", "id-1")
    log.info("user %s logged in", "alice")

Each message is mirrored to stdout and appended as one row to
log-DD-MM-YYYY.csv in LOG_DIR (or the current directory). The file is chosen
at construction and kept for the writer's lifetime, even past midnight.

Setup and write failures follow the LOG_ON_ERROR policy: "exit" logs the
failure and terminates the process with status 1, "raise" propagates a
LogSetupError or LogWriteError to the caller.
"""

import os
import logging
from pathlib import Path

from log_config import POLICY_RAISE, ERROR_POLICIES, get_error_policy
from log_files import ensure_log_file, log_file_name, resolve_log_dir
from log_utils import (
    INFO, DEBUG, WARN, ERROR, FATAL, LEVELS,
    LogWriterError, LogSetupError, LogWriteError,
)
from sinks import BaseSink, ConsoleSink, CsvFileSink

logger = logging.getLogger(__name__)

__all__ = [
    "LogWriter",
    "INFO", "DEBUG", "WARN", "ERROR", "FATAL",
    "LogWriterError", "LogSetupError", "LogWriteError",
]


def _resolve_policy(on_error: str | None) -> str:
    if on_error is None:
        return get_error_policy()
    if on_error not in ERROR_POLICIES:
        raise ValueError(f"Unknown error policy: {on_error!r}")
    return on_error


def _handle_failure(error: LogWriterError, policy: str) -> None:
    """Apply the error policy to a setup or write failure."""
    if policy == POLICY_RAISE:
        raise error
    logger.critical(f"{error}; terminating process")
    os._exit(1)


def _interpolate(fmt: str, args: tuple) -> str:
    """printf-style interpolation that never raises on a bad format.

    A format that does not match its args is kept verbatim with the args
    appended, so the row is still written.
    """
    if not args:
        return fmt
    try:
        return fmt % args
    except (TypeError, ValueError) as e:
        logger.debug(f"Bad log format {fmt!r}: {e}")
        return f"{fmt} {args!r}"


class LogWriter:
    """Leveled logger for one component instance.

    Writes on the same file are serialized by a lock shared across all
    writers on that path, so concurrent callers never interleave rows.
    """

    def __init__(
        self,
        component: str,
        component_id: str,
        file_sink: BaseSink,
        console_sink: BaseSink,
        file_path: Path,
        on_error: str | None = None,
    ):
        self._component = component
        self._component_id = component_id
        self._file_path = Path(file_path)
        self.file_sink = file_sink
        self.console_sink = console_sink
        self.on_error = _resolve_policy(on_error)

    @classmethod
    def create(
        cls,
        component: str,
        instance_id: str,
        log_dir=None,
        on_error: str | None = None,
        console_stream=None,
    ) -> "LogWriter":
        """Create a writer bound to today's log file.

        Args:
            component: Name of the owning subsystem (Component column)
            instance_id: Identifier of this instance (ID column), not validated
            log_dir: Directory override; defaults to LOG_DIR, then the cwd
            on_error: "exit" or "raise"; defaults to LOG_ON_ERROR
            console_stream: Stream for the console mirror; defaults to stdout
        """
        policy = _resolve_policy(on_error)
        try:
            directory = resolve_log_dir(log_dir)
            file_path = directory / log_file_name()
            ensure_log_file(file_path)
            file_sink = CsvFileSink(file_path, component, instance_id)
        except LogSetupError as e:
            _handle_failure(e, policy)
            raise

        return cls(
            component,
            instance_id,
            file_sink=file_sink,
            console_sink=ConsoleSink(component, stream=console_stream),
            file_path=file_path,
            on_error=policy,
        )

    @property
    def component(self) -> str:
        return self._component

    @property
    def component_id(self) -> str:
        return self._component_id

    @property
    def file_path(self) -> Path:
        return self._file_path

    def info(self, fmt: str, *args) -> None:
        self._emit(INFO, fmt, args)

    def debug(self, fmt: str, *args) -> None:
        self._emit(DEBUG, fmt, args)

    def warn(self, fmt: str, *args) -> None:
        self._emit(WARN, fmt, args)

    def error(self, fmt: str, *args) -> None:
        self._emit(ERROR, fmt, args)

    def _emit(self, level: str, fmt: str, args: tuple) -> None:
        message = _interpolate(fmt, args)
        try:
            self.console_sink.write(level, message)
        except Exception as e:
            logger.debug(f"Console mirror failed for {self._component}: {e}")
        self.log(level, message)

    def log(self, level: str, message: str) -> None:
        """Append one row to the CSV file without mirroring it to the console.

        Returns only after the row has been flushed to the OS.
        """
        if level not in LEVELS:
            raise ValueError(f"Unknown log level: {level!r}")
        try:
            self.file_sink.write(level, message)
        except LogWriteError as e:
            _handle_failure(e, self.on_error)

    def close(self) -> None:
        """Release the file handle. Later writes fail under the error policy."""
        self.file_sink.close()
        self.console_sink.close()

    def __enter__(self) -> "LogWriter":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
