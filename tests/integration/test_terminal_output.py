"""Integration tests against a real pseudo-terminal.

These exercise the default TTY check and the full writer path without
mocks. Skipped on platforms without pty support.
"""

import io
import os

import pytest

from osc94 import ProgressWriter, detect, is_tty, progress_context, with_auto_enable

pytestmark = pytest.mark.skipif(not hasattr(os, "openpty"), reason="requires pty support")


@pytest.fixture
def pty_stream():
    """Yield a writable text stream backed by a pty, plus the reading end fd."""
    master_fd, slave_fd = os.openpty()
    stream = os.fdopen(slave_fd, "w", encoding="ascii")
    try:
        yield stream, master_fd
    finally:
        stream.close()
        os.close(master_fd)


def read_available(fd: int) -> bytes:
    return os.read(fd, 4096)


class TestRealTerminal:
    """End-to-end behaviour on a pty."""

    def test_pty_is_tty(self, pty_stream) -> None:
        stream, _ = pty_stream
        assert is_tty(stream) is True

    def test_detect_needs_hint_on_pty(self, pty_stream, monkeypatch: pytest.MonkeyPatch) -> None:
        stream, _ = pty_stream
        monkeypatch.setenv("TERM", "xterm-256color")
        assert detect(stream) is False
        monkeypatch.setenv("TERM_PROGRAM", "ghostty")
        assert detect(stream) is True

    def test_auto_enabled_writer_reaches_terminal(
        self, pty_stream, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        stream, master_fd = pty_stream
        monkeypatch.setenv("VTE_VERSION", "7600")

        writer = ProgressWriter(stream, with_auto_enable())
        assert writer.enabled is True
        writer.set_percent(64)

        # Default pty output processing only rewrites newlines
        assert read_available(master_fd) == b"\x1b]9;4;1;64\x07"

    def test_auto_enable_stays_off_when_piped(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("WT_SESSION", "abc")
        stream = io.StringIO()
        writer = ProgressWriter(stream, with_auto_enable())
        with progress_context(quiet_mode=True, taskbar=writer) as cb:
            cb.on_start(3, "Work")
            cb.on_progress(3)
        assert stream.getvalue() == ""
