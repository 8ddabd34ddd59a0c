"""
Pytest configuration and shared fixtures for tailog tests.
"""

import logging

import pytest


@pytest.fixture
def write_file(tmp_path):
    """Return a helper that writes bytes (or text) to a file under tmp_path."""
    def _write(content, name="test.txt"):
        path = tmp_path / name
        if isinstance(content, str):
            content = content.encode("utf-8")
        path.write_bytes(content)
        return path
    return _write


@pytest.fixture
def numbered_file(write_file):
    """Create a temp file with 20 numbered lines."""
    return write_file("".join(f"line {i}\n" for i in range(1, 21)))


@pytest.fixture
def empty_file(write_file):
    """Create an empty temp file."""
    return write_file(b"", name="empty.txt")


@pytest.fixture
def clean_env(monkeypatch):
    """Remove TAILOG_* variables so config defaults apply."""
    monkeypatch.delenv("TAILOG_LOG_LEVEL", raising=False)
    monkeypatch.delenv("TAILOG_OUTFILE", raising=False)


@pytest.fixture
def reset_logging():
    """Close and remove root handlers installed by setup_logging()."""
    yield
    root = logging.getLogger()
    for handler in root.handlers[:]:
        handler.close()
        root.removeHandler(handler)
