"""Pytest configuration and shared fixtures."""

import io

import pytest

# ============================================================================
# Environment Isolation
# ============================================================================
# Detection reads these variables on every call. Clearing them keeps tests
# deterministic regardless of the terminal the suite is run from.

DETECTION_ENV_VARS = (
    "OSC94_DISABLE",
    "OSC94_FORCE",
    "TERM",
    "WT_SESSION",
    "ConEmuANSI",
    "VTE_VERSION",
    "TERM_PROGRAM",
)


@pytest.fixture(autouse=True)
def clean_terminal_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove every environment variable the detector looks at."""
    for name in DETECTION_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def buffer() -> io.StringIO:
    """In-memory text stream standing in for stdout/stderr."""
    return io.StringIO()
