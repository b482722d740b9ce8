"""
Logger interface and shared level handling

Every backend exposes the same four call shapes for each severity:

- ``info(*args)``: operands concatenated
- ``infoln(*args)``: operands space separated, newline terminated
- ``infof(format, *args)``: printf-style
- ``infow(msg, *key_vals, **fields)``: message plus structured fields

``fatal*`` calls exit the process with status 1 and ``panic*`` calls
raise LoggerPanic, whether or not the level is active.
"""

from __future__ import annotations
import sys
from abc import ABC, abstractmethod
from typing import Any, Callable, List, Tuple

from slog_module.core.errors import LoggerPanic
from slog_module.core.fields import format_pairs, pair_fields, sprint, sprintf, sprintln
from slog_module.core.level import Level, cumulative_level


class Logger(ABC):
    """Abstract base class for leveled loggers."""

    @abstractmethod
    def has_level(self, level: Level) -> bool:
        """Check whether ``level`` is active."""
        pass

    @abstractmethod
    def set_level(self, level: Level) -> None:
        """Change the active levels."""
        pass

    @abstractmethod
    def log(self, level: Level, *args: Any) -> None:
        """Log operands at ``level``."""
        pass

    @abstractmethod
    def logln(self, level: Level, *args: Any) -> None:
        """Log space separated operands at ``level``."""
        pass

    @abstractmethod
    def logf(self, level: Level, fmt: str, *args: Any) -> None:
        """Log a printf-style message at ``level``."""
        pass

    @abstractmethod
    def logw(self, level: Level, msg: str, /, *key_vals: Any, **fields: Any) -> None:
        """
        Log a message with structured fields at ``level``.

        Args:
            level: Severity
            msg: The log message
            *key_vals: Alternating field names and values
            **fields: Named fields, appended after ``key_vals``
        """
        pass

    def trace(self, *args: Any) -> None:
        self.log(Level.TRACE, *args)

    def debug(self, *args: Any) -> None:
        self.log(Level.DEBUG, *args)

    def print(self, *args: Any) -> None:
        self.log(Level.INFO, *args)

    def info(self, *args: Any) -> None:
        self.log(Level.INFO, *args)

    def warn(self, *args: Any) -> None:
        self.log(Level.WARN, *args)

    def error(self, *args: Any) -> None:
        self.log(Level.ERROR, *args)

    def fatal(self, *args: Any) -> None:
        self.log(Level.FATAL, *args)

    def panic(self, *args: Any) -> None:
        self.log(Level.PANIC, *args)

    def traceln(self, *args: Any) -> None:
        self.logln(Level.TRACE, *args)

    def debugln(self, *args: Any) -> None:
        self.logln(Level.DEBUG, *args)

    def println(self, *args: Any) -> None:
        self.logln(Level.INFO, *args)

    def infoln(self, *args: Any) -> None:
        self.logln(Level.INFO, *args)

    def warnln(self, *args: Any) -> None:
        self.logln(Level.WARN, *args)

    def errorln(self, *args: Any) -> None:
        self.logln(Level.ERROR, *args)

    def fatalln(self, *args: Any) -> None:
        self.logln(Level.FATAL, *args)

    def panicln(self, *args: Any) -> None:
        self.logln(Level.PANIC, *args)

    def tracef(self, fmt: str, *args: Any) -> None:
        self.logf(Level.TRACE, fmt, *args)

    def debugf(self, fmt: str, *args: Any) -> None:
        self.logf(Level.DEBUG, fmt, *args)

    def printf(self, fmt: str, *args: Any) -> None:
        self.logf(Level.INFO, fmt, *args)

    def infof(self, fmt: str, *args: Any) -> None:
        self.logf(Level.INFO, fmt, *args)

    def warnf(self, fmt: str, *args: Any) -> None:
        self.logf(Level.WARN, fmt, *args)

    def errorf(self, fmt: str, *args: Any) -> None:
        self.logf(Level.ERROR, fmt, *args)

    def fatalf(self, fmt: str, *args: Any) -> None:
        self.logf(Level.FATAL, fmt, *args)

    def panicf(self, fmt: str, *args: Any) -> None:
        self.logf(Level.PANIC, fmt, *args)

    def tracew(self, msg: str, /, *key_vals: Any, **fields: Any) -> None:
        self.logw(Level.TRACE, msg, *key_vals, **fields)

    def debugw(self, msg: str, /, *key_vals: Any, **fields: Any) -> None:
        self.logw(Level.DEBUG, msg, *key_vals, **fields)

    def printw(self, msg: str, /, *key_vals: Any, **fields: Any) -> None:
        self.logw(Level.INFO, msg, *key_vals, **fields)

    def infow(self, msg: str, /, *key_vals: Any, **fields: Any) -> None:
        self.logw(Level.INFO, msg, *key_vals, **fields)

    def warnw(self, msg: str, /, *key_vals: Any, **fields: Any) -> None:
        self.logw(Level.WARN, msg, *key_vals, **fields)

    def errorw(self, msg: str, /, *key_vals: Any, **fields: Any) -> None:
        self.logw(Level.ERROR, msg, *key_vals, **fields)

    def fatalw(self, msg: str, /, *key_vals: Any, **fields: Any) -> None:
        self.logw(Level.FATAL, msg, *key_vals, **fields)

    def panicw(self, msg: str, /, *key_vals: Any, **fields: Any) -> None:
        self.logw(Level.PANIC, msg, *key_vals, **fields)


class LevelLoggerBase(Logger):
    """
    Base class handling active levels and fatal/panic termination.

    Setting a level activates it together with every less verbose level.
    Subclasses only implement the two output hooks.
    """

    def __init__(self, level: Level):
        self._level = Level(0)
        self.set_level(level)

    @property
    def level(self) -> Level:
        """Currently active levels."""
        return self._level

    def has_level(self, level: Level) -> bool:
        return self._level.has(level)

    def set_level(self, level: Level) -> None:
        self._level = cumulative_level(level)

    def log(self, level: Level, *args: Any) -> None:
        self._emit(level, sprint, args)

    def logln(self, level: Level, *args: Any) -> None:
        self._emit(level, sprintln, args)

    def logf(self, level: Level, fmt: str, *args: Any) -> None:
        self._emit(level, sprintf, (fmt,) + args)

    def logw(self, level: Level, msg: str, /, *key_vals: Any, **fields: Any) -> None:
        active = self.has_level(level)
        if active or level == Level.PANIC:
            pairs = pair_fields(key_vals, fields)
            if active:
                self._output_fields(level, msg, pairs)
            if level == Level.PANIC:
                raise LoggerPanic(format_pairs(msg, pairs))
        self._exit_if_fatal(level)

    def _emit(self, level: Level, render: Callable[..., str], args: Tuple[Any, ...]) -> None:
        # operands are only rendered when something consumes the text
        active = self.has_level(level)
        if active or level == Level.PANIC:
            text = render(*args)
            if active:
                self._output(level, text)
            if level == Level.PANIC:
                raise LoggerPanic(text)
        self._exit_if_fatal(level)

    def _exit_if_fatal(self, level: Level) -> None:
        if level == Level.FATAL:
            sys.exit(1)

    @abstractmethod
    def _output(self, level: Level, text: str) -> None:
        """Write a rendered message."""
        pass

    @abstractmethod
    def _output_fields(self, level: Level, msg: str, pairs: List[Tuple[str, Any]]) -> None:
        """Write a message with its paired fields."""
        pass
