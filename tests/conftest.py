"""Root pytest configuration for posixfs tests."""
import pytest

from posixfs import Path


# Set up test environment variables
@pytest.fixture(autouse=True)
def test_env(monkeypatch):
    """Pin the home directory and clear posixfs settings for every test."""
    monkeypatch.setenv("HOME", "/home/tester")
    for var in ("POSIXFS_DIR_MODE", "POSIXFS_TEMP_PREFIX", "POSIXFS_TEMP_NAME_BYTES"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def root(tmp_path):
    """Path object for a fresh, empty temporary directory."""
    return Path(tmp_path)
