"""Domain value objects for OSC 9;4 progress sequences.

Closed enumerations for the progress state and the sequence terminator,
plus the percent bounds shared by the encoder and the callbacks.
"""

from enum import Enum, IntEnum

MIN_PERCENT = 0
MAX_PERCENT = 100


class ProgressState(IntEnum):
    """OSC 9;4 progress state.

    Values are the wire codes used by Windows Terminal and other compatible
    emulators.
    """

    CLEAR = 0
    NORMAL = 1
    ERROR = 2
    INDETERMINATE = 3
    WARNING = 4

    @property
    def takes_percent(self) -> bool:
        """Whether the percent field is meaningful (and bounded) for this state."""
        return self is not ProgressState.INDETERMINATE


class Terminator(Enum):
    """Sequence terminator choice.

    BEL is the widely supported single control byte; ST is the two-byte
    ``ESC \\`` string terminator some terminals prefer.
    """

    BEL = "\x07"
    ST = "\x1b\\"
