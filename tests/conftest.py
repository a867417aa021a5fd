import csv

import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep host LOG_* settings out of the tests."""
    for var in ("LOG_DIR", "LOG_LEVEL", "LOG_ON_ERROR"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def log_dir(tmp_path):
    """A log directory that does not exist yet."""
    return tmp_path / "logs"


@pytest.fixture
def read_rows():
    """Return a function parsing a CSV log file into a list of rows."""

    def _read(path):
        with open(path, newline="", encoding="utf-8") as f:
            return list(csv.reader(f))

    return _read
