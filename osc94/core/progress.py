"""Progress writer for OSC 9;4 sequences.

ProgressWriter pairs the sequence encoder with an output stream and an
on/off switch. Configuration happens once, at construction, through option
functions applied in order:

    writer = ProgressWriter(sys.stderr, with_auto_enable(), with_terminator_st())
    writer.set_percent(40)
    ...
    writer.clear()
"""

import io
from collections.abc import Callable
from dataclasses import replace
from typing import IO, Any

from osc94.core.detect import detect
from osc94.core.sequence import escape_with_terminator
from osc94.domain.config import Option, WriterConfig
from osc94.domain.value_objects import ProgressState, Terminator


def with_enabled(enabled: bool) -> Option:
    """Force progress output on or off."""

    def apply(config: WriterConfig) -> WriterConfig:
        return replace(config, enabled=enabled)

    return apply


def with_auto_enable() -> Option:
    """Enable output only when detect() reports support for the stream."""

    def apply(config: WriterConfig) -> WriterConfig:
        return replace(config, enabled=detect(config.stream))

    return apply


def with_detector(detector: Callable[[IO[Any]], bool]) -> Option:
    """Use a custom detector to decide enablement.

    Args:
        detector: Called with the writer's stream; its result becomes the
            enabled flag.
    """

    def apply(config: WriterConfig) -> WriterConfig:
        return replace(config, enabled=bool(detector(config.stream)))

    return apply


def with_terminator_bel() -> Option:
    """Terminate sequences with BEL (\\a)."""

    def apply(config: WriterConfig) -> WriterConfig:
        return replace(config, terminator=Terminator.BEL)

    return apply


def with_terminator_st() -> Option:
    """Terminate sequences with ST (ESC \\)."""

    def apply(config: WriterConfig) -> WriterConfig:
        return replace(config, terminator=Terminator.ST)

    return apply


class ProgressWriter:
    """Writes OSC 9;4 sequences to an output stream.

    Defaults to enabled output with a BEL terminator. The stream belongs to
    the caller and is never closed. No locking is done; callers sharing a
    stream across threads must serialize writes themselves.
    """

    def __init__(self, stream: IO[Any], *options: Option) -> None:
        """Initialize the writer.

        Args:
            stream: Text or binary stream to write sequences to.
            *options: Option functions, applied in order.
        """
        config = WriterConfig(stream=stream)
        for option in options:
            config = option(config)

        self._config = config

    @property
    def stream(self) -> IO[Any]:
        return self._config.stream

    @property
    def enabled(self) -> bool:
        return self._config.enabled

    @property
    def terminator(self) -> Terminator:
        return self._config.terminator

    def set(self, state: ProgressState | int, percent: int) -> None:
        """Write a progress update for the given state and percentage.

        Percent must be 0-100 unless state is INDETERMINATE. Does nothing
        when the writer is disabled.

        Raises:
            ValidationError: If the inputs are invalid; nothing is written.
            OSError: If the underlying stream fails.
        """
        if not self._config.enabled:
            return

        sequence = escape_with_terminator(state, percent, self._config.terminator)
        self._write(sequence)

    def set_percent(self, percent: int) -> None:
        """Update progress using the normal state."""
        self.set(ProgressState.NORMAL, percent)

    def indeterminate(self) -> None:
        """Switch to the indeterminate (busy) state."""
        self.set(ProgressState.INDETERMINATE, 0)

    def error(self, percent: int) -> None:
        """Update progress using the error state."""
        self.set(ProgressState.ERROR, percent)

    def warning(self, percent: int) -> None:
        """Update progress using the warning state."""
        self.set(ProgressState.WARNING, percent)

    def clear(self) -> None:
        """Hide any active progress indicator."""
        self.set(ProgressState.CLEAR, 0)

    def _write(self, sequence: str) -> None:
        stream = self._config.stream
        if isinstance(stream, (io.RawIOBase, io.BufferedIOBase)):
            _write_bytes(stream, sequence)
        else:
            try:
                stream.write(sequence)
            except TypeError:
                # Binary sinks that only wrap a buffered file (tempfile, custom writers)
                _write_bytes(stream, sequence)

        # Buffered stdout/stderr would otherwise hold the update back
        flush = getattr(stream, "flush", None)
        if flush is not None:
            flush()


def _write_bytes(stream: IO[Any], sequence: str) -> None:
    """Write the ASCII-encoded sequence in a single call.

    Raises:
        OSError: If the stream reports writing fewer bytes than the sequence.
    """
    data = sequence.encode("ascii")
    written = stream.write(data)
    # Raw streams report partial writes only through the return value
    if written is not None and written < len(data):
        raise OSError(f"osc94: short write ({written} of {len(data)} bytes)")
