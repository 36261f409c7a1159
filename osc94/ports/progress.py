"""Progress reporting protocol for long-running operations.

Operations report item counts through a ProgressCallback. Implementations
turn those counts into a terminal taskbar percentage, a progress bar, or
both, so the operation never deals with escape sequences itself.
"""

from typing import Protocol


class ProgressCallback(Protocol):
    """Receives item counts from an operation and renders them as progress.

    The taskbar implementation maps counts to a whole percentage; an
    operation that cannot count its work shows the busy (indeterminate)
    indicator instead.
    """

    def on_start(self, total: int | None, description: str) -> None:
        """Begin reporting an operation.

        Args:
            total: Number of items the operation will process. None or 0
                means the amount of work is unknown and the indicator shows
                as indeterminate until completion.
            description: Short label, shown by renderers that display text.
        """
        ...

    def on_progress(self, current: int, item_description: str | None = None) -> None:
        """Report how many items are done.

        Args:
            current: Items completed so far, out of the on_start total. Values
                past the total are reported as 100%.
            item_description: Optional label for the item just finished.
        """
        ...

    def on_complete(self) -> None:
        """Finish reporting and hide the indicator."""
        ...
