"""Scalar conversions used by the typed accessors.

Each converter accepts a native value of its type or a string in the
matching grammar and raises ``ValueError`` for anything else. Booleans are
never accepted as numbers even though ``bool`` subclasses ``int``.
"""

from __future__ import annotations

import re
from typing import Any

__all__ = [
    "to_string",
    "to_int",
    "to_bool",
    "to_float",
]

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")

_TRUE_STRINGS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_STRINGS = frozenset({"0", "f", "F", "FALSE", "false", "False"})


def to_string(value: Any) -> str:
    if isinstance(value, str):
        return value
    raise ValueError(f"{type(value).__name__} is not a string")


def to_int(value: Any) -> int:
    if isinstance(value, bool):
        raise ValueError("bool is not an int")
    if isinstance(value, int):
        return value
    if isinstance(value, str) and _INT_PATTERN.fullmatch(value):
        return int(value)
    raise ValueError(f"{value!r} is not an int")


def to_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        if value in _TRUE_STRINGS:
            return True
        if value in _FALSE_STRINGS:
            return False
    raise ValueError(f"{value!r} is not a bool")


def to_float(value: Any) -> float:
    """Convert to float, widening native ints.

    Strings go through ``float()``, but non-ASCII digits, surrounding
    whitespace and digit separators (``1_000``) are rejected. Ints too
    large for a float are rejected as well.
    """
    if isinstance(value, bool):
        raise ValueError("bool is not a float")
    if isinstance(value, (int, float)):
        try:
            return float(value)
        except OverflowError as e:
            raise ValueError("int is too large for a float") from e
    if isinstance(value, str) and value.isascii() and value == value.strip() and "_" not in value:
        return float(value)
    raise ValueError(f"{value!r} is not a float")

