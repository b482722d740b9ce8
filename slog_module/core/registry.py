"""
Logger constructor registry

Backends register a Constructor under a unique name; loggers are then
created by name. A process-wide ``default_registry`` is filled by the
bundled backends at import, and independent Registry instances can be
created where isolation is needed (e.g. tests).
"""

from __future__ import annotations
import threading
from abc import ABC, abstractmethod
from typing import IO, Any, Dict, List, Optional

from slog_module.core.errors import RegistrationError, UnknownLoggerError
from slog_module.core.level import Level
from slog_module.core.logger import Logger
from slog_module.core.options import Options


class Constructor(ABC):
    """Factory for one logger backend."""

    @abstractmethod
    def new(self, sink: IO[Any], level: Level) -> Logger:
        """
        Create a logger writing to ``sink``.

        Raises:
            ValueError: If ``level`` cannot be mapped by the backend
        """
        pass

    @abstractmethod
    def new_with_options(self, sink: IO[Any], level: Level, options: Optional[Options]) -> Logger:
        """Create a logger with backend specific options."""
        pass


class Registry:
    """
    Mapping of backend names to constructors.

    Thread Safety:
        All methods are thread-safe for concurrent access.

    Example:
        registry = Registry()
        registry.register("stdlog", StdLoggerConstructor())
        logger = registry.new("stdlog", sys.stderr, Level.INFO)
    """

    def __init__(self):
        """Initialize an empty registry."""
        self._constructors: Dict[str, Constructor] = {}
        self._lock = threading.RLock()

    def register(self, name: str, constructor: Constructor) -> None:
        """
        Register a constructor with a name.

        Args:
            name: Unique backend name
            constructor: Constructor instance

        Raises:
            RegistrationError: If constructor is None or name is already registered
        """
        with self._lock:
            if constructor is None:
                raise RegistrationError("logger: Register constructor is None")
            if name in self._constructors:
                raise RegistrationError(f"logger: Register called twice for constructor {name}")
            self._constructors[name] = constructor

    def lookup(self, name: str) -> Optional[Constructor]:
        """
        Get a registered constructor by name.

        Returns:
            Constructor or None if not found
        """
        with self._lock:
            return self._constructors.get(name)

    def names(self) -> List[str]:
        """Get all registered backend names."""
        with self._lock:
            return list(self._constructors.keys())

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._constructors

    def new(self, name: str, sink: IO[Any], level: Level) -> Logger:
        """
        Create a logger with the named backend.

        Raises:
            UnknownLoggerError: If no backend is registered under name
        """
        return self._require(name).new(sink, level)

    def new_with_options(
        self,
        name: str,
        sink: IO[Any],
        level: Level,
        options: Optional[Options] = None,
    ) -> Logger:
        """
        Create a logger with the named backend and its options.

        Raises:
            UnknownLoggerError: If no backend is registered under name
        """
        return self._require(name).new_with_options(sink, level, options)

    def _require(self, name: str) -> Constructor:
        constructor = self.lookup(name)
        if constructor is None:
            raise UnknownLoggerError(name)
        return constructor

    def __repr__(self) -> str:
        return f"Registry(backends={self.names()})"


default_registry = Registry()


def register(name: str, constructor: Constructor) -> None:
    """Register a constructor in the default registry."""
    default_registry.register(name, constructor)


def lookup(name: str) -> Optional[Constructor]:
    """Find a constructor in the default registry."""
    return default_registry.lookup(name)


def new(name: str, sink: IO[Any], level: Level) -> Logger:
    """Create a logger from the default registry."""
    return default_registry.new(name, sink, level)


def new_with_options(
    name: str,
    sink: IO[Any],
    level: Level,
    options: Optional[Options] = None,
) -> Logger:
    """Create a logger with options from the default registry."""
    return default_registry.new_with_options(name, sink, level, options)
