"""
Field and message formatting helpers

Shared by every backend so that keyed calls render the same way
regardless of where they end up.
"""

import json
import numbers
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple


# Prefix of generated names for missing or unpaired field keys
UNKNOWN_FIELD_NAME = "@logfield"


def unknown_field_name(index: int) -> str:
    """Generated name for the pair at 1-based ``index``."""
    return f"{UNKNOWN_FIELD_NAME}-{index:02d}"


def is_stringer(value: Any) -> bool:
    """
    Check whether a value carries its own string representation.

    Enum members and objects whose class defines ``__str__`` outside the
    builtins qualify. Numbers never do, so they stay unquoted.
    """
    if isinstance(value, Enum):
        return True
    if isinstance(value, numbers.Number):
        return False
    for klass in type(value).__mro__:
        if "__str__" in vars(klass):
            return klass.__module__ != "builtins"
    return False


def _format_timestamp(value: datetime) -> str:
    text = value.isoformat(timespec="seconds")
    if value.utcoffset() == timezone.utc.utcoffset(None):
        text = text[:-6] + "Z"
    return text


def as_string(value: Any) -> Tuple[str, bool]:
    """
    Convert a value to text.

    Returns:
        Tuple of the text and whether the value should be treated as a
        string (and therefore quoted by consumers that quote strings)
    """
    if value is None:
        return "", True
    if isinstance(value, str):
        return value, True
    if isinstance(value, datetime):
        return _format_timestamp(value), True
    if is_stringer(value):
        return str(value), True
    return str(value), False


def as_string_q(value: Any) -> str:
    """Convert a value to text, double-quoted if it is string-like."""
    text, is_str = as_string(value)
    if is_str:
        return json.dumps(text, ensure_ascii=False)
    return text


def pair_fields(
    key_vals: Sequence[Any],
    fields: Optional[Mapping[str, Any]] = None,
) -> List[Tuple[str, Any]]:
    """
    Pair a flat ``key, value, key, value, ...`` sequence.

    A ``None`` key is replaced by a generated name using its pair index,
    and a trailing unpaired element becomes the value of a generated field.
    Explicit ``fields`` are appended after the positional pairs.

    Args:
        key_vals: Alternating names and values
        fields: Already named fields

    Returns:
        Ordered list of (name, value) pairs
    """
    pairs: List[Tuple[str, Any]] = []
    n = len(key_vals)
    paired = n - (n % 2)

    for i in range(0, paired, 2):
        key = key_vals[i]
        if key is None:
            name = unknown_field_name(i // 2 + 1)
        else:
            name, _ = as_string(key)
        pairs.append((name, key_vals[i + 1]))

    # odd count: last element is a value without a name
    if paired != n:
        pairs.append((unknown_field_name((n + 1) // 2), key_vals[paired]))

    if fields:
        pairs.extend(fields.items())
    return pairs


def format_pairs(msg: str, pairs: Sequence[Tuple[str, Any]], sep: str = "=") -> str:
    """Render ``msg`` followed by ``name<sep>quoted-value`` pairs."""
    parts = [msg]
    parts.extend(f"{name}{sep}{as_string_q(value)}" for name, value in pairs)
    return " ".join(parts)


def simple_formatter(msg: str, key_vals: Sequence[Any], sep: str = "=") -> str:
    """
    Format a message and its key/value fields on one line.

    Example:
        >>> simple_formatter("saved", ["id", 7, "name", "a b"])
        'saved id=7 name="a b"'
    """
    return format_pairs(msg, pair_fields(key_vals), sep)


def fields_to_map(key_vals: Sequence[Any]) -> Dict[str, Any]:
    """Convert key/value fields to a dict, later duplicates win."""
    return dict(pair_fields(key_vals))


def separate_fields(key_vals: Sequence[Any]) -> Tuple[List[str], List[Any]]:
    """Split key/value fields into parallel name and value lists."""
    pairs = pair_fields(key_vals)
    return [name for name, _ in pairs], [value for _, value in pairs]


def sprint(*args: Any) -> str:
    """Concatenate operands, adding a space between two non-strings."""
    parts: List[str] = []
    for i, arg in enumerate(args):
        if i > 0 and not isinstance(arg, str) and not isinstance(args[i - 1], str):
            parts.append(" ")
        parts.append(str(arg))
    return "".join(parts)


def sprintln(*args: Any) -> str:
    """Join operands with spaces and terminate with a newline."""
    return " ".join(str(arg) for arg in args) + "\n"


def sprintf(fmt: str, *args: Any) -> str:
    """Printf-style formatting; ``fmt`` is returned as-is without args."""
    if not args:
        return fmt
    return fmt % args
