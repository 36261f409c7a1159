"""OSC 9;4 sequence encoding.

Builds the escape sequence ``ESC ] 9 ; 4 ; <state> ; <percent> <terminator>``
after validating the inputs. Pure functions with no side effects.
"""

from typing import Any

from osc94.domain.exceptions import (
    InvalidStateError,
    PercentOutOfRangeError,
    UnknownTerminatorError,
    ValidationError,
)
from osc94.domain.value_objects import (
    MAX_PERCENT,
    MIN_PERCENT,
    ProgressState,
    Terminator,
)

OSC_PREFIX = "\x1b]9;4;"


def escape(state: ProgressState | int, percent: int) -> str:
    """Return an OSC 9;4 sequence terminated with BEL.

    Args:
        state: Progress state (or its integer wire code).
        percent: Percentage 0-100. Ignored for the indeterminate state.

    Returns:
        The escape sequence, ready to be written to a terminal.

    Raises:
        ValidationError: If state or percent is invalid.

    Example:
        >>> escape(ProgressState.NORMAL, 42)
        '\\x1b]9;4;1;42\\x07'
    """
    return escape_with_terminator(state, percent, Terminator.BEL)


def escape_with_terminator(
    state: ProgressState | int, percent: int, terminator: Terminator
) -> str:
    """Return an OSC 9;4 sequence using the given terminator.

    Args:
        state: Progress state (or its integer wire code).
        percent: Percentage 0-100. Any integer is accepted for the
            indeterminate state, which always emits 0.
        terminator: Terminator appended to the sequence.

    Returns:
        The escape sequence.

    Raises:
        InvalidStateError: If state is not one of the five progress states.
        PercentOutOfRangeError: If percent is outside 0-100 for a bounded state.
        ValidationError: If percent is not an integer.
        UnknownTerminatorError: If terminator is not a Terminator.
    """
    progress_state = _coerce_state(state)

    if isinstance(percent, bool) or not isinstance(percent, int):
        raise ValidationError(f"osc94: percent must be an integer, got {percent!r}")

    if progress_state.takes_percent:
        if percent < MIN_PERCENT or percent > MAX_PERCENT:
            raise PercentOutOfRangeError(percent)
    else:
        percent = 0

    suffix = terminator_sequence(terminator)
    return f"{OSC_PREFIX}{progress_state.value};{percent}{suffix}"


def terminator_sequence(terminator: Terminator) -> str:
    """Return the bytes (as text) that end a sequence.

    Raises:
        UnknownTerminatorError: If terminator is not a Terminator member.
    """
    if not isinstance(terminator, Terminator):
        raise UnknownTerminatorError(terminator)
    return terminator.value


def _coerce_state(state: Any) -> ProgressState:
    """Map a state or wire code onto ProgressState."""
    # bool is an int subclass; True would otherwise alias NORMAL
    if isinstance(state, bool) or not isinstance(state, int):
        raise InvalidStateError(state)
    try:
        return ProgressState(state)
    except ValueError as e:
        raise InvalidStateError(state) from e
