"""
Backend options

Free-form configuration passed to backend constructors, with typed
accessors that fall back to a default on missing or mistyped values.
"""

import numbers
from typing import Any, Dict, Mapping, Optional

from slog_module.core.fields import is_stringer


_INT32_MIN = -(1 << 31)
_UINT32_MAX = (1 << 32) - 1


class Options(dict):
    """
    Backend configuration mapping.

    Example:
        op = Options(timestamp_format="%H:%M:%S", disable_color=True)
        op.get_bool("disable_color", False)  # True
    """

    def get_string(self, key: str, default: str) -> str:
        """Get a string value (or a stringer's text)."""
        if key not in self:
            return default

        value = self[key]
        if isinstance(value, str):
            return value
        if is_stringer(value):
            return str(value)
        return default

    def get_int(self, key: str, default: int) -> int:
        """Get an integer value that fits in 32 bits."""
        if key not in self:
            return default

        value = self[key]
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            return default
        if _INT32_MIN <= value <= _UINT32_MAX:
            return int(value)
        return default

    def get_bool(self, key: str, default: bool) -> bool:
        """
        Get a boolean value.

        Integers are true when non-zero, strings when they read
        ``true`` or ``yes`` (case-insensitive).
        """
        if key not in self:
            return default

        value = self[key]
        if isinstance(value, bool):
            return value
        if isinstance(value, numbers.Integral):
            return value != 0
        if isinstance(value, str):
            return value.lower() in ("true", "yes")
        return default

    def get_options(self, key: str) -> Optional["Options"]:
        """Get a nested mapping as Options, None if missing or not a mapping."""
        value = self.get(key)
        if isinstance(value, Options):
            return value
        if isinstance(value, Mapping):
            return Options(value)
        return None

    def get_map(self, key: str) -> Optional[Dict[str, Any]]:
        """Get a nested mapping as a plain dict."""
        value = self.get(key)
        if isinstance(value, dict):
            return value
        if isinstance(value, Mapping):
            return dict(value)
        return None
