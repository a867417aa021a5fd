"""
Log Config - Environment-driven settings for the CSV log writer.

Settings come from the process environment, optionally seeded from a .env
file:

    LOG_DIR       base directory for log-DD-MM-YYYY.csv files (default: cwd)
    LOG_LEVEL     console mirror threshold (default: INFO)
    LOG_ON_ERROR  "exit" to terminate on setup/write failure, "raise" to
                  propagate the error to the caller (default: exit)

Accessors read the environment at call time so a writer created later in the
process picks up changes.
"""

import os
import logging
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

DEFAULT_LOG_LEVEL = "INFO"

POLICY_EXIT = "exit"
POLICY_RAISE = "raise"
ERROR_POLICIES = (POLICY_EXIT, POLICY_RAISE)

CONSOLE_FORMAT = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"

# Directory and file modes used when bootstrapping a log location
LOG_DIR_MODE = 0o755
LOG_FILE_MODE = 0o644


def get_log_dir() -> Path | None:
    """Return the LOG_DIR override, or None when unset or empty."""
    value = os.getenv("LOG_DIR", "")
    if not value:
        return None
    return Path(value)


def get_console_level() -> int:
    """Return the numeric console level from LOG_LEVEL, defaulting to INFO."""
    name = os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
    level = getattr(logging, name, None)
    if not isinstance(level, int):
        return getattr(logging, DEFAULT_LOG_LEVEL)
    return level


def get_error_policy() -> str:
    policy = os.getenv("LOG_ON_ERROR", POLICY_EXIT).strip().lower()
    if policy not in ERROR_POLICIES:
        return POLICY_EXIT
    return policy
