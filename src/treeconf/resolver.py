"""Walk a configuration tree along a parsed path."""

from __future__ import annotations

from typing import Any, Sequence

from treeconf.errors import (
    IndexOutOfRangeError,
    KeyNotFoundError,
    NotAContainerError,
    NotAMappingError,
    NotASequenceError,
)
from treeconf.nodes import NodeKind, classify
from treeconf.path import Index, MapKey, Step, join_step

__all__ = ["resolve"]


def resolve(root: dict[str, Any], steps: Sequence[Step], delimiter: str = ".") -> Any:
    """Resolve ``steps`` against ``root`` and return the node they address.

    The walk is linear and stops at the first failing step. Errors name the
    partial path where the walk stopped: a step applied to the wrong kind of
    container reports the path consumed so far, a missing key or index
    reports the path including the offending step.

    Raises:
        KeyNotFoundError: A key is absent, or the addressed value is null.
        NotAMappingError: A map key is applied to a non-mapping.
        NotASequenceError: An index is applied to a non-sequence.
        IndexOutOfRangeError: An index is past the end of its sequence.
        NotAContainerError: A scalar is reached before the last step.
    """
    current: Any = root
    consumed = ""
    last = len(steps) - 1

    for i, step in enumerate(steps):
        key = join_step(consumed, step, delimiter)

        if isinstance(step, MapKey):
            if classify(current) is not NodeKind.MAPPING:
                raise NotAMappingError(key=consumed)
            value = current.get(step.name)
        elif isinstance(step, Index):
            if classify(current) is not NodeKind.SEQUENCE:
                raise NotASequenceError(key=consumed)
            if step.index >= len(current):
                raise IndexOutOfRangeError(key=key, index=step.index, length=len(current))
            value = current[step.index]
        else:
            raise TypeError(f"Unknown path step: {step!r}")

        kind = classify(value)
        if kind is NodeKind.MISSING:
            raise KeyNotFoundError(key=key)
        if kind is NodeKind.SCALAR:
            if i == last:
                return value
            raise NotAContainerError(key=key)

        current = value
        consumed = key

    return current
