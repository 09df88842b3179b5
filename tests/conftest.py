"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest

SAMPLE_ENV = b"DB_HOST=localhost\nDB_PORT=5432\nDB_USER=admin\nDEBUG=true\n"


@pytest.fixture
def write_env(tmp_path):
    """Write bytes to a file under tmp_path and return its path."""

    def _write(content: bytes, relative: str = ".env") -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)
        return path

    return _write


@pytest.fixture
def sample_env(write_env):
    return write_env(SAMPLE_ENV)


@pytest.fixture
def in_tmp_cwd(tmp_path, monkeypatch):
    """Run the test with tmp_path as the working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
