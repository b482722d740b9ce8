"""Logger without output, except for the fatal exit and panic raise"""

from typing import IO, Any, List, Optional, Tuple

from slog_module.core.level import Level
from slog_module.core.logger import LevelLoggerBase, Logger
from slog_module.core.options import Options
from slog_module.core.registry import Constructor, register


DISCARD_LOGGER_NAME = "discard"


class DiscardLogger(LevelLoggerBase):
    """Drop every message. Fatal calls still exit, panic calls still raise."""

    def _output(self, level: Level, text: str) -> None:
        pass

    def _output_fields(self, level: Level, msg: str, pairs: List[Tuple[str, Any]]) -> None:
        pass

    def __repr__(self) -> str:
        return f"DiscardLogger(level={self.level})"


class DiscardLoggerConstructor(Constructor):
    """Constructor registered as ``discard``; the sink is ignored."""

    def new(self, sink: IO[Any], level: Level) -> Logger:
        return DiscardLogger(level)

    def new_with_options(self, sink: IO[Any], level: Level, options: Optional[Options]) -> Logger:
        return DiscardLogger(level)


def new_discard_logger(level: Level = Level.ALL) -> Logger:
    """Create a discard logger."""
    return DiscardLogger(level)


# Shared discard logger
discard = DiscardLogger(Level.ALL)

register(DISCARD_LOGGER_NAME, DiscardLoggerConstructor())
