"""Closed classification of configuration tree nodes."""

from __future__ import annotations

from enum import Enum
from typing import Any

__all__ = ["NodeKind", "classify"]


class NodeKind(str, Enum):
    """The shape of a value held in a configuration tree.

    ``MISSING`` stands for an explicit YAML null, which lookups treat the
    same as an absent key.
    """

    SCALAR = "scalar"
    MAPPING = "mapping"
    SEQUENCE = "sequence"
    MISSING = "missing"


def classify(value: Any) -> NodeKind:
    """Return the NodeKind of a value produced by the YAML loader."""
    if value is None:
        return NodeKind.MISSING
    if isinstance(value, dict):
        return NodeKind.MAPPING
    if isinstance(value, list):
        return NodeKind.SEQUENCE
    return NodeKind.SCALAR
