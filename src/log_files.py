"""
Log Files - Locating and bootstrapping the daily CSV log file.

One file per calendar day per directory, named log-DD-MM-YYYY.csv from the
local date. A new file starts with the header row.
"""

import csv
import os
import logging
from pathlib import Path
from datetime import datetime

from log_config import LOG_DIR_MODE, LOG_FILE_MODE, get_log_dir
from log_utils import HEADER, LogSetupError, lock_for

logger = logging.getLogger(__name__)


def current_date(now: datetime | None = None) -> str:
    """Return the local date as dd-mm-yyyy."""
    now = now or datetime.now()
    return f"{now.day:02d}-{now.month:02d}-{now.year:04d}"


def log_file_name(now: datetime | None = None) -> str:
    return f"log-{current_date(now)}.csv"


def resolve_log_dir(override: str | os.PathLike | None = None) -> Path:
    """Return the absolute log directory, creating it if absent.

    Precedence: explicit override, then LOG_DIR, then the current directory.
    """
    if override is not None:
        log_dir = Path(override)
    else:
        log_dir = get_log_dir() or Path.cwd()
    log_dir = log_dir.absolute()

    try:
        log_dir.mkdir(mode=LOG_DIR_MODE, parents=True, exist_ok=True)
    except OSError as e:
        raise LogSetupError(f"failed to create log directory {log_dir}: {e}") from e

    if not log_dir.is_dir():
        raise LogSetupError(f"log directory {log_dir} is not a directory")
    return log_dir


def ensure_log_file(path: Path) -> bool:
    """Create the log file with its header row if it is missing or empty.

    Returns True when the header was written. Existing rows are never
    truncated.
    """
    with lock_for(path):
        try:
            fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_APPEND, LOG_FILE_MODE)
        except OSError as e:
            raise LogSetupError(f"failed to create log file {path}: {e}") from e

        with os.fdopen(fd, "a", newline="", encoding="utf-8") as f:
            if os.fstat(f.fileno()).st_size > 0:
                return False
            try:
                os.chmod(path, LOG_FILE_MODE)
                csv.writer(f, lineterminator="\n").writerow(HEADER)
                f.flush()
            except OSError as e:
                raise LogSetupError(f"failed to write header to {path}: {e}") from e

    logger.debug(f"Created log file {path.name}")
    return True
