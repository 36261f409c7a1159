"""Writer configuration for osc94.

A ProgressWriter is configured by applying option functions, in order, to a
WriterConfig. Each option returns an updated copy, so later options override
earlier ones.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import IO, Any

from osc94.domain.value_objects import Terminator


@dataclass(frozen=True)
class WriterConfig:
    """Configuration for a ProgressWriter.

    Attributes:
        stream: Output stream the sequences are written to. Owned by the caller
                and never closed.
        enabled: Whether sequences are emitted at all.
        terminator: Terminator appended to every sequence.
    """

    stream: IO[Any]
    enabled: bool = True
    terminator: Terminator = Terminator.BEL


Option = Callable[[WriterConfig], WriterConfig]
