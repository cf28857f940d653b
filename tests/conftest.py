"""Root pytest configuration for path-ratchet tests."""
from pathlib import PurePosixPath

import pytest
from typer.testing import CliRunner


# Keep developer environment out of settings-dependent tests
@pytest.fixture(autouse=True)
def test_env(monkeypatch):
    """Remove PATH_RATCHET_* variables for every test."""
    for name in ("PATH_RATCHET_PLATFORM", "PATH_RATCHET_SANITIZE_REPLACEMENT", "PATH_RATCHET_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def non_existing_absolute():
    """Absolute POSIX destination that exists on no real machine."""
    return PurePosixPath("/23271d44-a599-4423-bb43-29b89b371ed0")


@pytest.fixture
def runner():
    return CliRunner()
