"""
Logger backends

Importing this module registers every bundled backend in the
default registry:

- ``discard``: DiscardLogger, no output
- ``stdlog``: StdLogger, colored console lines
- ``structlog``: StructlogLogger, logfmt/JSON/console via structlog
"""

from slog_module.backends.discard_logger import (
    DISCARD_LOGGER_NAME,
    DiscardLogger,
    DiscardLoggerConstructor,
    discard,
    new_discard_logger,
)
from slog_module.backends.std_logger import (
    STD_LOGGER_NAME,
    StdLogger,
    StdLoggerConstructor,
    new_std_logger,
)
from slog_module.backends.structlog_logger import (
    STRUCTLOG_LOGGER_NAME,
    StructlogLogger,
    StructlogLoggerConstructor,
    new_structlog_logger,
)

__all__ = [
    "DISCARD_LOGGER_NAME",
    "DiscardLogger",
    "DiscardLoggerConstructor",
    "discard",
    "new_discard_logger",
    "STD_LOGGER_NAME",
    "StdLogger",
    "StdLoggerConstructor",
    "new_std_logger",
    "STRUCTLOG_LOGGER_NAME",
    "StructlogLogger",
    "StructlogLoggerConstructor",
    "new_structlog_logger",
]
