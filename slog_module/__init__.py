"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

Python slog - A pluggable leveled logging facade
Backends are registered by name and share one Logger interface
"""

__version__ = "1.0.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

from slog_module.core.errors import LoggerPanic, RegistrationError, UnknownLoggerError
from slog_module.core.level import Level, parse_level, format_level, fixed_label
from slog_module.core.logger import Logger, LevelLoggerBase
from slog_module.core.options import Options
from slog_module.core.registry import (
    Constructor,
    Registry,
    default_registry,
    register,
    lookup,
    new,
    new_with_options,
)

# Import backends (registers them in the default registry)
from slog_module import backends
from slog_module.backends import (
    DISCARD_LOGGER_NAME,
    STD_LOGGER_NAME,
    STRUCTLOG_LOGGER_NAME,
    discard,
)

from slog_module.default_logger import (
    get_logger,
    set_logger,
    use,
    has_level,
    set_level,
    trace, debug, print, info, warn, error, fatal, panic,
    traceln, debugln, println, infoln, warnln, errorln, fatalln, panicln,
    tracef, debugf, printf, infof, warnf, errorf, fatalf, panicf,
    tracew, debugw, printw, infow, warnw, errorw, fatalw, panicw,
)

# print* forwarders are left out to keep star imports from shadowing print()
__all__ = [
    "Level",
    "parse_level",
    "format_level",
    "fixed_label",
    "Logger",
    "LevelLoggerBase",
    "Options",
    "Constructor",
    "Registry",
    "default_registry",
    "register",
    "lookup",
    "new",
    "new_with_options",
    "LoggerPanic",
    "RegistrationError",
    "UnknownLoggerError",
    "backends",
    "DISCARD_LOGGER_NAME",
    "STD_LOGGER_NAME",
    "STRUCTLOG_LOGGER_NAME",
    "discard",
    "get_logger",
    "set_logger",
    "use",
    "has_level",
    "set_level",
    "trace", "debug", "info", "warn", "error", "fatal", "panic",
    "traceln", "debugln", "infoln", "warnln", "errorln", "fatalln", "panicln",
    "tracef", "debugf", "infof", "warnf", "errorf", "fatalf", "panicf",
    "tracew", "debugw", "infow", "warnw", "errorw", "fatalw", "panicw",
]
