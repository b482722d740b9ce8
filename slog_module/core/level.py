"""
Log level flags

Levels are bit flags so that several severities can be combined,
parsed and formatted as a single value.
"""

from enum import IntFlag
from typing import Dict, Tuple


LEVEL_SEPARATOR = "|"


class Level(IntFlag):
    """
    Log level bit flags.

    Ordered from the most severe (PANIC) to the most verbose (TRACE).
    A value is a set of severities, e.g. ``Level.ERROR | Level.WARN``.
    """

    PANIC = 1 << 0
    FATAL = 1 << 1
    ERROR = 1 << 2
    WARN = 1 << 3
    INFO = 1 << 4
    DEBUG = 1 << 5
    TRACE = 1 << 6

    ALL = PANIC | FATAL | ERROR | WARN | INFO | DEBUG | TRACE

    def has(self, flag: int) -> bool:
        """Check whether any bit of ``flag`` is set."""
        return (int(self) & int(flag)) != 0

    def set(self, flag: int) -> "Level":
        """Return a copy with ``flag`` added."""
        return Level(int(self) | int(flag))

    def clear(self, flag: int) -> "Level":
        """Return a copy with ``flag`` removed."""
        return Level(int(self) & ~int(flag))

    def toggle(self, flag: int) -> "Level":
        """Return a copy with ``flag`` flipped."""
        return Level(int(self) ^ int(flag))

    def to_string(self) -> str:
        """Format as ``|`` separated names (see format_level)."""
        return format_level(self)

    @property
    def fixed_label(self) -> str:
        """Five character label, ``OTHER`` for combined or unknown values."""
        return fixed_label(self)

    @property
    def color_code(self) -> str:
        """
        Get ANSI color code for this level.

        Returns:
            ANSI escape sequence
        """
        return _COLOR_CODES.get(self, "\033[0m")

    @property
    def reset_code(self) -> str:
        """ANSI reset code."""
        return "\033[0m"

    @classmethod
    def from_string(cls, level_str: str) -> "Level":
        """
        Convert string to Level.

        Args:
            level_str: Level name, ``all``, or names joined by ``|``

        Returns:
            Level value

        Raises:
            ValueError: If no name could be recognized
        """
        return parse_level(level_str)

    def __str__(self) -> str:
        try:
            return format_level(self)
        except ValueError:
            return "unknown"


_LEVELS: Tuple[Level, ...] = (
    Level.PANIC,
    Level.FATAL,
    Level.ERROR,
    Level.WARN,
    Level.INFO,
    Level.DEBUG,
    Level.TRACE,
)

LEVEL_NAMES: Dict[Level, str] = {
    Level.PANIC: "panic",
    Level.FATAL: "fatal",
    Level.ERROR: "error",
    Level.WARN: "warn",
    Level.INFO: "info",
    Level.DEBUG: "debug",
    Level.TRACE: "trace",
}

LEVEL_FROM_NAME: Dict[str, Level] = {v: k for k, v in LEVEL_NAMES.items()}
LEVEL_FROM_NAME["all"] = Level.ALL

# Fixed width labels used as line prefixes
_FIXED_LABELS: Dict[Level, str] = {
    Level.PANIC: "PANIC",
    Level.FATAL: "FATAL",
    Level.ERROR: "ERROR",
    Level.WARN: "WARNN",
    Level.INFO: "INFOO",
    Level.DEBUG: "DEBUG",
    Level.TRACE: "TRACE",
}

_COLOR_CODES: Dict[Level, str] = {
    Level.PANIC: "\033[91m",    # Bright red
    Level.FATAL: "\033[95m",    # Bright magenta
    Level.ERROR: "\033[31m",    # Red
    Level.WARN: "\033[33m",     # Yellow
    Level.INFO: "\033[32m",     # Green
    Level.DEBUG: "\033[34m",    # Blue
    Level.TRACE: "\033[36m",    # Cyan
}


def levels() -> Tuple[Level, ...]:
    """All single-bit levels, from PANIC to TRACE."""
    return _LEVELS


def levels_count() -> int:
    """Number of single-bit levels."""
    return len(_LEVELS)


def parse_level(level_str: str) -> Level:
    """
    Parse level names into a Level.

    Unrecognized names are skipped, including names padded with
    whitespace. Parsing only fails when none of the names is recognized.

    Raises:
        ValueError: If the result would be empty
    """
    level = Level(0)
    for token in level_str.lower().split(LEVEL_SEPARATOR):
        flag = LEVEL_FROM_NAME.get(token)
        if flag is not None:
            level = level.set(flag)

    if level == 0:
        raise ValueError(f"unknown level: {level_str}")
    return level


def format_level(level: int) -> str:
    """
    Format a level as ``|`` separated names, PANIC first.

    Raises:
        ValueError: If no known bit is set
    """
    names = [LEVEL_NAMES[lv] for lv in _LEVELS if (level & lv) != 0]
    if not names:
        raise ValueError(f"not a valid logger level: {int(level)}")
    return LEVEL_SEPARATOR.join(names)


def fixed_label(level: int) -> str:
    """Fixed width label for a single level, ``OTHER`` for anything else."""
    return _FIXED_LABELS.get(level, "OTHER")


def cumulative_level(level: int) -> Level:
    """
    Expand a level into itself and every less verbose level.

    The most verbose bit present decides the threshold, so ``DEBUG``
    becomes ``PANIC|FATAL|ERROR|WARN|INFO|DEBUG``. A value without any
    known bit yields an empty level.
    """
    threshold = -1
    for idx, lv in enumerate(_LEVELS):
        if (level & lv) != 0:
            threshold = idx

    result = Level(0)
    for lv in _LEVELS[:threshold + 1]:
        result = result.set(lv)
    return result
