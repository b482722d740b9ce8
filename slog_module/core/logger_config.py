"""
Backend configuration

Typed views over the Options passed to backend constructors.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional

from slog_module.core.options import Options


DEFAULT_TIMESTAMP_FORMAT = "%Y/%m/%d %H:%M:%S %Z"

FORMATTERS = ("text", "json", "console")

# Default names of the standard fields written by the structlog backend
DEFAULT_FIELD_MAP: Dict[str, str] = {
    "msg": "@msg",
    "level": "@level",
    "time": "@time",
    "func": "@func",
    "file": "@file",
    "line": "@line",
}


@dataclass
class ConsoleConfig:
    """Configuration of the console (stdlog) backend."""

    timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT
    disable_color: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        if not self.timestamp_format:
            raise ValueError("timestamp_format cannot be empty")

    @classmethod
    def default(cls) -> "ConsoleConfig":
        """Create default configuration."""
        return cls()

    @classmethod
    def plain(cls) -> "ConsoleConfig":
        """Create configuration without ANSI colors."""
        return cls(disable_color=True)

    @classmethod
    def from_options(cls, options: Optional[Options]) -> "ConsoleConfig":
        """Build configuration from backend options."""
        if not options:
            return cls.default()
        return cls(
            timestamp_format=options.get_string("timestamp_format", DEFAULT_TIMESTAMP_FORMAT),
            disable_color=options.get_bool("disable_color", False),
        )


@dataclass
class StructlogConfig:
    """Configuration of the structlog backend."""

    # Renderer: "text" (logfmt), "json" or "console"
    formatter: str = "text"
    timestamp_format: str = "%Y/%m/%d %H:%M:%S"
    disable_timestamp: bool = False
    report_caller: bool = False
    field_map: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_FIELD_MAP))

    # JSON settings
    pretty_print: bool = False

    sort_keys: bool = False
    disable_colors: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.formatter not in FORMATTERS:
            raise ValueError(f"unknown formatter: {self.formatter}")
        if not self.timestamp_format:
            raise ValueError("timestamp_format cannot be empty")

        # Missing keys keep their default names
        self.field_map = {**DEFAULT_FIELD_MAP, **self.field_map}

    @classmethod
    def default(cls) -> "StructlogConfig":
        """Create default configuration."""
        return cls()

    @classmethod
    def json_config(cls) -> "StructlogConfig":
        """Create configuration for JSON lines output."""
        return cls(formatter="json", timestamp_format="iso")

    @classmethod
    def from_options(cls, options: Optional[Options]) -> "StructlogConfig":
        """Build configuration from backend options."""
        if not options:
            return cls.default()

        formatter = options.get_string("formatter", "text")
        default_ts = "iso" if formatter == "json" else cls.timestamp_format

        field_map: Dict[str, str] = {}
        mapped = options.get_options("field_map")
        if mapped is not None:
            for key, name in DEFAULT_FIELD_MAP.items():
                field_map[key] = mapped.get_string(key, name)

        return cls(
            formatter=formatter,
            timestamp_format=options.get_string("timestamp_format", default_ts),
            disable_timestamp=options.get_bool("disable_timestamp", False),
            report_caller=options.get_bool("report_caller", False),
            field_map=field_map,
            pretty_print=options.get_bool("pretty_print", False),
            sort_keys=options.get_bool("sort_keys", False),
            disable_colors=options.get_bool("disable_colors", False),
        )
