"""Progress callbacks that drive the terminal taskbar indicator.

Provides ProgressCallback implementations for the OSC 9;4 taskbar indicator
and for Rich progress bars, plus a context manager that wires them up for a
long-running operation.
"""

import logging
from collections.abc import Callable, Generator
from contextlib import ExitStack, contextmanager

from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskID,
    TaskProgressColumn,
    TextColumn,
)

from osc94.core.progress import ProgressWriter
from osc94.domain.value_objects import MAX_PERCENT, MIN_PERCENT
from osc94.ports.progress import ProgressCallback

logger = logging.getLogger(__name__)


def percent_complete(current: int, total: int | None) -> int:
    """Convert a completed/total count into a whole percentage.

    Args:
        current: Number of items completed.
        total: Total number of items, or None if unknown.

    Returns:
        Percentage clamped to 0-100. Unknown or non-positive totals give 0.
    """
    if not total or total <= 0:
        return MIN_PERCENT
    return max(MIN_PERCENT, min(MAX_PERCENT, current * 100 // total))


class TaskbarProgressCallback:
    """Progress callback that mirrors progress in the terminal taskbar.

    Unknown totals show the indeterminate indicator. Updates are only written
    when the whole percentage changes. If the stream fails, the failure is
    logged once and the indicator stops updating; the operation being
    reported on carries on.
    """

    def __init__(self, writer: ProgressWriter) -> None:
        self.writer = writer
        self.total: int | None = None
        self.percent: int | None = None
        self._shown = False
        self._failed = False

    def on_start(self, total: int | None, description: str) -> None:
        """Show the indicator at 0%, or indeterminate if total is unknown."""
        self.total = total
        if total:
            self.percent = MIN_PERCENT
            self._emit(self.writer.set_percent, MIN_PERCENT)
        else:
            self.percent = None
            self._emit(self.writer.indeterminate)

    def on_progress(self, current: int, item_description: str | None = None) -> None:
        """Advance the indicator to the current percentage."""
        if not self.total:
            return

        percent = percent_complete(current, self.total)
        if percent == self.percent:
            return

        self.percent = percent
        self._emit(self.writer.set_percent, percent)

    def on_complete(self) -> None:
        """Hide the indicator."""
        if self._shown:
            self._emit(self.writer.clear)
            self._shown = False
        self.total = None
        self.percent = None

    def on_error(self) -> None:
        """Switch the indicator to the error state at the last percentage."""
        self._emit(self.writer.error, self.percent or MIN_PERCENT)

    def _emit(self, action: Callable[..., None], *args: int) -> None:
        if self._failed:
            return
        try:
            action(*args)
        except OSError:
            self._failed = True
            logger.warning("Taskbar progress disabled after write failure", exc_info=True)
            return
        self._shown = True


class RichProgressCallback:
    """Rich-based progress callback for visual progress reporting.

    Uses Rich library to display a progress bar that updates as the
    operation progresses.
    """

    def __init__(self, progress: Progress) -> None:
        """Initialize with a Rich Progress instance.

        Args:
            progress: Rich Progress instance to use for display.
        """
        self.progress = progress
        self.task_id: TaskID | None = None

    def on_start(self, total: int | None, description: str) -> None:
        """Create progress bar when operation starts."""
        # total=None renders as a pulsing bar
        self.task_id = self.progress.add_task(description, total=total, current_item="")

    def on_progress(self, current: int, item_description: str | None = None) -> None:
        """Update progress bar with current item."""
        if self.task_id is not None:
            self.progress.update(
                self.task_id, completed=current, current_item=item_description or ""
            )

    def on_complete(self) -> None:
        """Mark progress as complete and hide it."""
        if self.task_id is not None:
            self.progress.remove_task(self.task_id)
            self.task_id = None


class FanoutProgressCallback:
    """Forwards every progress event to each wrapped callback, in order."""

    def __init__(self, *callbacks: ProgressCallback) -> None:
        self.callbacks = callbacks

    def on_start(self, total: int | None, description: str) -> None:
        for callback in self.callbacks:
            callback.on_start(total, description)

    def on_progress(self, current: int, item_description: str | None = None) -> None:
        for callback in self.callbacks:
            callback.on_progress(current, item_description)

    def on_complete(self) -> None:
        for callback in self.callbacks:
            callback.on_complete()


@contextmanager
def progress_context(
    quiet_mode: bool = False,
    taskbar: ProgressWriter | None = None,
) -> Generator[ProgressCallback | None, None, None]:
    """Context manager for reporting progress of an operation.

    Args:
        quiet_mode: If True, no Rich progress bar is shown.
        taskbar: Optional writer for the terminal taskbar indicator.

    Yields:
        A callback driving the progress bar and/or the taskbar indicator, or
        None when there is nothing to report to.

    If an exception escapes the block, the taskbar indicator switches to the
    error state and the exception propagates. Otherwise the indicator is
    cleared on exit.

    Example:
        writer = ProgressWriter(sys.stderr, with_auto_enable())
        with progress_context(taskbar=writer) as progress:
            if progress:
                progress.on_start(len(files), "Copying")
    """
    taskbar_callback = TaskbarProgressCallback(taskbar) if taskbar is not None else None

    with ExitStack() as stack:
        callbacks: list[ProgressCallback] = []
        if not quiet_mode:
            progress = stack.enter_context(
                Progress(
                    SpinnerColumn(),
                    TextColumn("[progress.description]{task.description}"),
                    BarColumn(),
                    TaskProgressColumn(),
                    TextColumn("[cyan]{task.fields[current_item]}"),
                    transient=True,
                )
            )
            callbacks.append(RichProgressCallback(progress))
        if taskbar_callback is not None:
            callbacks.append(taskbar_callback)

        if not callbacks:
            yield None
            return

        callback = callbacks[0] if len(callbacks) == 1 else FanoutProgressCallback(*callbacks)

        try:
            yield callback
        except Exception:
            if taskbar_callback is not None:
                taskbar_callback.on_error()
            raise
        except BaseException:
            # KeyboardInterrupt/SystemExit: leave the terminal clean
            if taskbar_callback is not None:
                taskbar_callback.on_complete()
            raise
        else:
            if taskbar_callback is not None:
                taskbar_callback.on_complete()
