"""Shared test fixtures."""
import sys
from pathlib import Path

import pytest

# Ensure project root is on sys.path so `vxd.*` and `main` import
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture
def log_records():
    """A LogFn that collects (level, message) pairs."""
    records: list[tuple[str, str]] = []

    def log(level: str, message: str) -> None:
        records.append((level, message))

    log.records = records
    return log


@pytest.fixture
def vxd_file(tmp_path):
    """Write text to a .vxd file and return its path."""
    def write(text: str, name: str = "config.vxd") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return write
