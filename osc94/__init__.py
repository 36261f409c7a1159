"""OSC 9;4 progress reporting helpers.

The OSC 9;4 sequence lets terminals show a progress indicator in tabs or
taskbars. This package focuses on safe, opt-in output for CLI apps.

Components:
- escape / escape_with_terminator: sequence encoding
- ProgressWriter and its option functions: stateful output
- detect: terminal capability detection
- progress_context and the callbacks: drive the indicator from an operation
"""

from osc94.core.callbacks import (
    FanoutProgressCallback,
    RichProgressCallback,
    TaskbarProgressCallback,
    percent_complete,
    progress_context,
)
from osc94.core.detect import detect, has_support_hint, is_dumb_term, is_tty
from osc94.core.progress import (
    ProgressWriter,
    with_auto_enable,
    with_detector,
    with_enabled,
    with_terminator_bel,
    with_terminator_st,
)
from osc94.core.sequence import escape, escape_with_terminator
from osc94.domain.config import Option, WriterConfig
from osc94.domain.exceptions import (
    InvalidStateError,
    Osc94Error,
    PercentOutOfRangeError,
    UnknownTerminatorError,
    ValidationError,
)
from osc94.domain.value_objects import ProgressState, Terminator
from osc94.ports.progress import ProgressCallback
from osc94.version import __version__

__all__ = [
    "__version__",
    # Encoding
    "escape",
    "escape_with_terminator",
    "ProgressState",
    "Terminator",
    # Writer
    "ProgressWriter",
    "Option",
    "WriterConfig",
    "with_enabled",
    "with_auto_enable",
    "with_detector",
    "with_terminator_bel",
    "with_terminator_st",
    # Detection
    "detect",
    "is_tty",
    "is_dumb_term",
    "has_support_hint",
    # Callbacks
    "ProgressCallback",
    "TaskbarProgressCallback",
    "RichProgressCallback",
    "FanoutProgressCallback",
    "percent_complete",
    "progress_context",
    # Errors
    "Osc94Error",
    "ValidationError",
    "PercentOutOfRangeError",
    "InvalidStateError",
    "UnknownTerminatorError",
]
