"""
Package-level logger

Module functions forward to one current logger, a StdLogger on stdout
at TRACE unless replaced with ``use`` or ``set_logger``.
"""

from __future__ import annotations
import sys
import threading
from typing import IO, Any, Optional

from slog_module.backends.discard_logger import discard
from slog_module.backends.std_logger import new_std_logger
from slog_module.core.level import Level
from slog_module.core.logger import Logger
from slog_module.core.options import Options
from slog_module.core.registry import Registry, default_registry


_lock = threading.Lock()

try:
    _current: Logger = new_std_logger(sys.stdout, Level.TRACE)
except (ValueError, OSError):
    _current = discard


def get_logger() -> Logger:
    """Return the current package logger."""
    with _lock:
        return _current


def set_logger(logger: Logger) -> Logger:
    """
    Replace the current package logger.

    Returns:
        The previous logger
    """
    global _current
    if logger is None:
        raise ValueError("logger cannot be None")
    with _lock:
        previous, _current = _current, logger
    return previous


def use(
    name: str,
    sink: IO[Any],
    level: Level,
    options: Optional[Options] = None,
    registry: Optional[Registry] = None,
) -> Logger:
    """
    Switch the package logger to a registered backend.

    Args:
        name: Backend name
        sink: Output stream
        level: Most verbose level to log
        options: Backend options, a plain mapping is wrapped in Options
        registry: Registry to resolve name in (default: default_registry)

    Returns:
        The new logger

    Raises:
        UnknownLoggerError: If no backend is registered under name
        ValueError: If the backend cannot map level
    """
    global _current
    registry = registry or default_registry
    if options is not None and not isinstance(options, Options):
        options = Options(options)
    with _lock:
        if options is None:
            logger = registry.new(name, sink, level)
        else:
            logger = registry.new_with_options(name, sink, level, options)
        _current = logger
    return logger


def has_level(level: Level) -> bool:
    return _current.has_level(level)


def set_level(level: Level) -> None:
    _current.set_level(level)


def trace(*args: Any) -> None:
    _current.trace(*args)


def debug(*args: Any) -> None:
    _current.debug(*args)


def print(*args: Any) -> None:
    _current.print(*args)


def info(*args: Any) -> None:
    _current.info(*args)


def warn(*args: Any) -> None:
    _current.warn(*args)


def error(*args: Any) -> None:
    _current.error(*args)


def fatal(*args: Any) -> None:
    _current.fatal(*args)


def panic(*args: Any) -> None:
    _current.panic(*args)


def traceln(*args: Any) -> None:
    _current.traceln(*args)


def debugln(*args: Any) -> None:
    _current.debugln(*args)


def println(*args: Any) -> None:
    _current.println(*args)


def infoln(*args: Any) -> None:
    _current.infoln(*args)


def warnln(*args: Any) -> None:
    _current.warnln(*args)


def errorln(*args: Any) -> None:
    _current.errorln(*args)


def fatalln(*args: Any) -> None:
    _current.fatalln(*args)


def panicln(*args: Any) -> None:
    _current.panicln(*args)


def tracef(fmt: str, *args: Any) -> None:
    _current.tracef(fmt, *args)


def debugf(fmt: str, *args: Any) -> None:
    _current.debugf(fmt, *args)


def printf(fmt: str, *args: Any) -> None:
    _current.printf(fmt, *args)


def infof(fmt: str, *args: Any) -> None:
    _current.infof(fmt, *args)


def warnf(fmt: str, *args: Any) -> None:
    _current.warnf(fmt, *args)


def errorf(fmt: str, *args: Any) -> None:
    _current.errorf(fmt, *args)


def fatalf(fmt: str, *args: Any) -> None:
    _current.fatalf(fmt, *args)


def panicf(fmt: str, *args: Any) -> None:
    _current.panicf(fmt, *args)


def tracew(msg: str, /, *key_vals: Any, **fields: Any) -> None:
    _current.tracew(msg, *key_vals, **fields)


def debugw(msg: str, /, *key_vals: Any, **fields: Any) -> None:
    _current.debugw(msg, *key_vals, **fields)


def printw(msg: str, /, *key_vals: Any, **fields: Any) -> None:
    _current.printw(msg, *key_vals, **fields)


def infow(msg: str, /, *key_vals: Any, **fields: Any) -> None:
    _current.infow(msg, *key_vals, **fields)


def warnw(msg: str, /, *key_vals: Any, **fields: Any) -> None:
    _current.warnw(msg, *key_vals, **fields)


def errorw(msg: str, /, *key_vals: Any, **fields: Any) -> None:
    _current.errorw(msg, *key_vals, **fields)


def fatalw(msg: str, /, *key_vals: Any, **fields: Any) -> None:
    _current.fatalw(msg, *key_vals, **fields)


def panicw(msg: str, /, *key_vals: Any, **fields: Any) -> None:
    _current.panicw(msg, *key_vals, **fields)
