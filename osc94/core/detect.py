"""Terminal capability detection for OSC 9;4 progress output.

The check is conservative: it requires a TTY, excludes TERM=dumb, and
matches known terminal hints. OSC94_DISABLE=1 always disables output;
OSC94_FORCE=1 enables it unless disabled.

The environment is read on every call so callers (and tests) can change it
between checks.
"""

import logging
import os
import stat
from collections.abc import Callable, Mapping
from typing import IO, Any

logger = logging.getLogger(__name__)

DISABLE_ENV = "OSC94_DISABLE"
FORCE_ENV = "OSC94_FORCE"

# Terminal programs known to render OSC 9;4, compared case-insensitively
SUPPORTED_TERM_PROGRAMS: tuple[str, ...] = (
    "ghostty",
    "iTerm.app",
    "vscode",
    "vscode-insiders",
)

TtyCheck = Callable[[IO[Any]], bool]


def detect(stream: IO[Any], tty_check: TtyCheck | None = None) -> bool:
    """Report whether OSC 9;4 support is likely available on a stream.

    Args:
        stream: The stream progress sequences would be written to.
        tty_check: Optional replacement for is_tty, mainly for tests.

    Returns:
        True if emitting sequences is safe and likely to render.
    """
    check = tty_check if tty_check is not None else is_tty
    environ = os.environ

    if environ.get(DISABLE_ENV) == "1":
        logger.debug(f"OSC 9;4 disabled by {DISABLE_ENV}")
        return False

    if environ.get(FORCE_ENV) == "1":
        logger.debug(f"OSC 9;4 forced on by {FORCE_ENV}")
        return True

    if not check(stream):
        logger.debug("OSC 9;4 disabled: stream is not a TTY")
        return False

    if is_dumb_term(environ):
        logger.debug("OSC 9;4 disabled: TERM is dumb")
        return False

    supported = has_support_hint(environ)
    logger.debug(f"OSC 9;4 terminal hint found: {supported}")
    return supported


def is_tty(stream: IO[Any]) -> bool:
    """Return True when the stream is backed by a character device.

    Streams without a usable file descriptor (StringIO, closed files,
    wrappers) are treated as non-interactive.
    """
    try:
        fd = stream.fileno()
        mode = os.fstat(fd).st_mode
    except (AttributeError, OSError, ValueError):
        # io.UnsupportedOperation is both an OSError and a ValueError
        return False
    return stat.S_ISCHR(mode)


def is_dumb_term(environ: Mapping[str, str] | None = None) -> bool:
    """Report whether TERM indicates a basic terminal."""
    env = os.environ if environ is None else environ
    return env.get("TERM", "").strip().casefold() == "dumb"


def has_support_hint(environ: Mapping[str, str] | None = None) -> bool:
    """Check environment hints for terminals that render OSC 9;4.

    Hints:
    - Windows Terminal: WT_SESSION set
    - ConEmu: ConEmuANSI=ON
    - VTE-based terminals: VTE_VERSION set
    - TERM_PROGRAM in SUPPORTED_TERM_PROGRAMS
    """
    env = os.environ if environ is None else environ

    if env.get("WT_SESSION"):
        return True

    if env.get("ConEmuANSI", "").casefold() == "on":
        return True

    if env.get("VTE_VERSION"):
        return True

    term_program = env.get("TERM_PROGRAM", "").casefold()
    return any(term_program == candidate.casefold() for candidate in SUPPORTED_TERM_PROGRAMS)
