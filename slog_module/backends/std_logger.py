"""Console logger with ANSI colors"""

import io
import sys
import threading
from datetime import datetime
from typing import IO, Any, Dict, List, Optional, Tuple

from slog_module.core.fields import as_string, as_string_q
from slog_module.core.level import Level, fixed_label, levels
from slog_module.core.logger import LevelLoggerBase, Logger
from slog_module.core.logger_config import ConsoleConfig
from slog_module.core.options import Options
from slog_module.core.registry import Constructor, register


STD_LOGGER_NAME = "stdlog"


class StdLogger(LevelLoggerBase):
    """
    Write one line per call to a stream.

    Line layout::

        INFOO [2021/01/02 15:04:05 UTC] message\tkey="value" count=3

    Each line is assembled in a private buffer and written to the sink
    in a single call under a lock, so concurrent callers never interleave
    within a line.
    """

    def __init__(self, sink: IO[Any], level: Level, config: Optional[ConsoleConfig] = None):
        """
        Initialize console logger.

        Args:
            sink: Output stream, text or binary
            level: Most verbose level to log
            config: Console configuration (default: colored output)
        """
        super().__init__(level)
        self._config = config or ConsoleConfig.default()
        self._out = sink
        self._binary = isinstance(sink, (io.RawIOBase, io.BufferedIOBase))
        self._buf = io.StringIO()
        self._lock = threading.Lock()
        self._prefixes: Dict[Level, str] = {}

        for lv in levels():
            prefix = fixed_label(lv) + " "
            if self.colored:
                prefix = f"{lv.color_code}{prefix}{lv.reset_code}"
            self._prefixes[lv] = prefix

    @property
    def colored(self) -> bool:
        """Whether ANSI colors are written."""
        return not self._config.disable_color

    @property
    def config(self) -> ConsoleConfig:
        return self._config

    def _write_header(self, level: Level) -> None:
        self._buf.write(self._prefixes.get(level, "OTHER "))
        self._buf.write("[")
        self._buf.write(datetime.now().astimezone().strftime(self._config.timestamp_format))
        self._buf.write("] ")

    def _output(self, level: Level, text: str) -> None:
        with self._lock:
            self._write_header(level)
            self._buf.write(text)
            self._flush_line()

    def _output_fields(self, level: Level, msg: str, pairs: List[Tuple[str, Any]]) -> None:
        with self._lock:
            self._write_header(level)
            self._buf.write(msg)
            self._buf.write("\t")

            rendered = []
            for name, value in pairs:
                field, _ = as_string(name)
                if self.colored and level in self._prefixes:
                    field = f"{level.color_code}{field}{level.reset_code}"
                rendered.append(f"{field}={as_string_q(value)}")
            self._buf.write(" ".join(rendered))
            self._flush_line()

    def _flush_line(self) -> None:
        """Terminate the buffered line, copy it to the sink and reset the buffer."""
        line = self._buf.getvalue()
        if not line.endswith("\n"):
            line += "\n"
        self._buf.seek(0)
        self._buf.truncate(0)

        try:
            self._out.write(line.encode("utf-8") if self._binary else line)
            if hasattr(self._out, "flush"):
                self._out.flush()
        except (OSError, ValueError) as e:
            print(f"Writer error: {e}", file=sys.stderr)

    def __repr__(self) -> str:
        return f"StdLogger(level={self.level}, colored={self.colored})"


class StdLoggerConstructor(Constructor):
    """Constructor registered as ``stdlog``."""

    def new(self, sink: IO[Any], level: Level) -> Logger:
        return new_std_logger(sink, level)

    def new_with_options(self, sink: IO[Any], level: Level, options: Optional[Options]) -> Logger:
        return new_std_logger(sink, level, options)


def new_std_logger(sink: IO[Any], level: Level, options: Optional[Options] = None) -> StdLogger:
    """
    Create a console logger.

    Recognized options:
        timestamp_format: strftime format of the line timestamp
        disable_color: Write plain text without ANSI colors
    """
    return StdLogger(sink, level, ConsoleConfig.from_options(options))


register(STD_LOGGER_NAME, StdLoggerConstructor())
