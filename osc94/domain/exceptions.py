"""Domain exceptions for osc94.

Validation errors are raised before anything is written to the output
stream. Write failures from the stream itself are never wrapped; callers
see the OSError unchanged.
"""

from typing import Any


class Osc94Error(Exception):
    """Base exception for all osc94 errors.

    Attributes:
        message: User-facing error message.
        hint: Optional actionable suggestion.
    """

    def __init__(self, message: str, hint: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.hint = hint


class ValidationError(Osc94Error, ValueError):
    """Raised when a progress update carries invalid inputs."""

    pass


class PercentOutOfRangeError(ValidationError):
    """Raised when percent is outside 0-100 for a bounded state.

    Attributes:
        percent: The offending percent value.
    """

    def __init__(self, percent: int) -> None:
        super().__init__(
            f"osc94: percent {percent} out of range",
            hint="Use a value between 0 and 100, or the indeterminate state",
        )
        self.percent = percent


class InvalidStateError(ValidationError):
    """Raised when the state is not one of the five OSC 9;4 states.

    Attributes:
        state: The offending state value.
    """

    def __init__(self, state: Any) -> None:
        super().__init__(f"osc94: invalid state {state!r}")
        self.state = state


class UnknownTerminatorError(Osc94Error):
    """Raised when an unsupported terminator reaches the encoder."""

    def __init__(self, terminator: Any) -> None:
        super().__init__(f"osc94: unknown terminator {terminator!r}")
        self.terminator = terminator
