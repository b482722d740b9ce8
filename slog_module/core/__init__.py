"""
Core module for the logger facade

This module contains the fundamental classes:
- Level: Log level bit flags
- Logger: Logger interface and LevelLoggerBase
- Options: Backend options with typed accessors
- Registry: Backend constructor registry
- ConsoleConfig / StructlogConfig: Backend configuration
"""

from slog_module.core.errors import LoggerPanic, RegistrationError, UnknownLoggerError
from slog_module.core.fields import (
    UNKNOWN_FIELD_NAME,
    as_string,
    as_string_q,
    fields_to_map,
    pair_fields,
    separate_fields,
    simple_formatter,
)
from slog_module.core.level import (
    Level,
    cumulative_level,
    fixed_label,
    format_level,
    levels,
    levels_count,
    parse_level,
)
from slog_module.core.logger import LevelLoggerBase, Logger
from slog_module.core.logger_config import ConsoleConfig, StructlogConfig
from slog_module.core.options import Options
from slog_module.core.registry import Constructor, Registry, default_registry

__all__ = [
    "Level",
    "cumulative_level",
    "fixed_label",
    "format_level",
    "levels",
    "levels_count",
    "parse_level",
    "UNKNOWN_FIELD_NAME",
    "as_string",
    "as_string_q",
    "fields_to_map",
    "pair_fields",
    "separate_fields",
    "simple_formatter",
    "Logger",
    "LevelLoggerBase",
    "Options",
    "ConsoleConfig",
    "StructlogConfig",
    "Constructor",
    "Registry",
    "default_registry",
    "LoggerPanic",
    "RegistrationError",
    "UnknownLoggerError",
]
