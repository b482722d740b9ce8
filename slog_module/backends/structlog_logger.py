"""
structlog backend

Bridges the logger interface onto a structlog processor pipeline that
renders logfmt, JSON or the structlog development console format.
"""

from __future__ import annotations
import logging
from typing import IO, Any, Dict, FrozenSet, List, Optional, Tuple

import structlog
from structlog.processors import CallsiteParameter

from slog_module.core.level import LEVEL_NAMES, Level, levels
from slog_module.core.logger import LevelLoggerBase, Logger
from slog_module.core.logger_config import StructlogConfig
from slog_module.core.options import Options
from slog_module.core.registry import Constructor, register


STRUCTLOG_LOGGER_NAME = "structlog"

TRACE = 5

# Prefix given to keyed fields whose names clash with the standard fields
FIELD_CLASH_PREFIX = "fields."

# Native (stdlib numeric) level of each slog level
_NATIVE_LEVELS: Dict[Level, int] = {
    Level.PANIC: logging.CRITICAL,
    Level.FATAL: logging.CRITICAL,
    Level.ERROR: logging.ERROR,
    Level.WARN: logging.WARNING,
    Level.INFO: logging.INFO,
    Level.DEBUG: logging.DEBUG,
    Level.TRACE: TRACE,
}


class _SinkLogger(structlog.PrintLogger):
    """PrintLogger that also accepts the trace and panic methods."""

    trace = panic = structlog.PrintLogger.msg


def to_native_level(level: Level) -> Optional[int]:
    """
    Map a slog level to a stdlib level number.

    The most verbose level present decides. Returns None when the
    value has no known level bit.
    """
    native = None
    for lv in levels():
        if level & lv:
            native = _NATIVE_LEVELS[lv]
    return native


def reserved_keys(config: StructlogConfig) -> FrozenSet[str]:
    """Event keys written by the processor chain itself."""
    keys = {"event"}
    if config.formatter == "console":
        keys.update(("level", "timestamp"))
    else:
        keys.update(config.field_map[k] for k in ("msg", "level", "time"))
    if config.report_caller:
        keys.update(("func_name", "filename", "lineno"))
        if config.formatter != "console":
            keys.update(config.field_map[k] for k in ("func", "file", "line"))
    return frozenset(keys)


def _level_adder(key: str):
    def add_level(logger, method_name: str, event_dict: Dict[str, Any]) -> Dict[str, Any]:
        event_dict[key] = method_name
        return event_dict

    return add_level


def _key_renamer(names: Dict[str, str]):
    def rename_keys(logger, method_name: str, event_dict: Dict[str, Any]) -> Dict[str, Any]:
        for old, new in names.items():
            if old in event_dict:
                event_dict[new] = event_dict.pop(old)
        return event_dict

    return rename_keys


def build_processors(config: StructlogConfig) -> List[Any]:
    """
    Build the structlog processor chain for a configuration.

    The ``text`` and ``json`` formatters write the standard fields under
    the names of ``config.field_map``; ``console`` keeps structlog's own
    keys so that ConsoleRenderer can lay them out.
    """
    structured = config.formatter != "console"
    field_map = config.field_map
    level_key = field_map["level"] if structured else "level"
    time_key = field_map["time"] if structured else "timestamp"

    processors: List[Any] = [_level_adder(level_key)]

    if not config.disable_timestamp:
        processors.append(
            structlog.processors.TimeStamper(fmt=config.timestamp_format, utc=False, key=time_key)
        )

    if config.report_caller:
        processors.append(
            structlog.processors.CallsiteParameterAdder(
                parameters=[
                    CallsiteParameter.FUNC_NAME,
                    CallsiteParameter.FILENAME,
                    CallsiteParameter.LINENO,
                ],
                additional_ignores=["slog_module"],
            )
        )
        if structured:
            processors.append(_key_renamer({
                "func_name": field_map["func"],
                "filename": field_map["file"],
                "lineno": field_map["line"],
            }))

    if config.formatter == "json":
        processors.append(structlog.processors.EventRenamer(field_map["msg"]))
        processors.append(structlog.processors.JSONRenderer(
            indent=2 if config.pretty_print else None,
            sort_keys=config.sort_keys,
        ))
    elif config.formatter == "text":
        processors.append(structlog.processors.EventRenamer(field_map["msg"]))
        processors.append(structlog.processors.LogfmtRenderer(
            sort_keys=config.sort_keys,
            key_order=[time_key, level_key, field_map["msg"]],
            drop_missing=True,
        ))
    else:
        processors.append(structlog.dev.ConsoleRenderer(
            colors=not config.disable_colors,
            sort_keys=config.sort_keys,
        ))

    return processors


class StructlogLogger(LevelLoggerBase):
    """
    Logger backed by a structlog BoundLogger.

    Keyed calls bind their fields as the event context, with duplicate
    names resolved in favour of the last one. Fields named like one of
    the standard fields are written with a ``fields.`` prefix.
    """

    def __init__(self, sink: IO[Any], level: Level, config: Optional[StructlogConfig] = None):
        """
        Initialize structlog logger.

        Args:
            sink: Text stream the rendered events are printed to
            level: Most verbose level to log
            config: Renderer configuration (default: logfmt text)

        Raises:
            ValueError: If level has no known level bit
        """
        native = to_native_level(level)
        if native is None:
            raise ValueError(f"unknown logger level: {int(level)}")

        self._native_level = native
        super().__init__(level)
        self._config = config or StructlogConfig.default()
        self._sink = _SinkLogger(file=sink)
        self._processors = build_processors(self._config)
        self._reserved = reserved_keys(self._config)
        self._logger = structlog.BoundLogger(self._sink, self._processors, {})

    @property
    def native_level(self) -> int:
        """
        Stdlib level number of the most verbose active level.

        Informational only; filtering is done by ``has_level``.
        """
        return self._native_level

    @property
    def config(self) -> StructlogConfig:
        return self._config

    def set_level(self, level: Level) -> None:
        # unmappable levels leave the current setting untouched
        native = to_native_level(level)
        if native is None:
            return
        self._native_level = native
        super().set_level(level)

    def _output(self, level: Level, text: str) -> None:
        getattr(self._logger, LEVEL_NAMES[level])(text)

    def _output_fields(self, level: Level, msg: str, pairs: List[Tuple[str, Any]]) -> None:
        context: Dict[str, Any] = {}
        for name, value in pairs:
            if name in self._reserved:
                name = FIELD_CLASH_PREFIX + name
            context[name] = value
        bound = structlog.BoundLogger(self._sink, self._processors, context)
        getattr(bound, LEVEL_NAMES[level])(msg)

    def __repr__(self) -> str:
        return f"StructlogLogger(level={self.level}, formatter={self._config.formatter!r})"


class StructlogLoggerConstructor(Constructor):
    """Constructor registered as ``structlog``."""

    def new(self, sink: IO[Any], level: Level) -> Logger:
        return new_structlog_logger(sink, level)

    def new_with_options(self, sink: IO[Any], level: Level, options: Optional[Options]) -> Logger:
        return new_structlog_logger(sink, level, options)


def new_structlog_logger(
    sink: IO[Any],
    level: Level,
    options: Optional[Options] = None,
) -> StructlogLogger:
    """
    Create a structlog logger.

    Recognized options:
        formatter: ``text`` (logfmt), ``json`` or ``console``
        timestamp_format: strftime format, or ``iso``
        disable_timestamp: Omit the timestamp field
        report_caller: Add function, file and line of the call site
        field_map: Names of the msg/level/time/func/file/line fields
        pretty_print: Indent JSON output
        sort_keys: Sort fields alphabetically
        disable_colors: Plain console output
    """
    return StructlogLogger(sink, level, StructlogConfig.from_options(options))


register(STRUCTLOG_LOGGER_NAME, StructlogLoggerConstructor())
