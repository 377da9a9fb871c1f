"""Path expression parsing.

A path such as ``servers[0].ports[1]`` is split on the delimiter into
segments, and every segment may carry trailing ``[N]`` index suffixes::

    >>> parse_path("servers[0].ports[1]")
    (MapKey(name='servers'), Index(index=0), MapKey(name='ports'), Index(index=1))

Parsing is pure syntax and never looks at a tree.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Union

from treeconf.errors import EmptyPathError, InvalidPathError

__all__ = [
    "MAX_INDEX",
    "MapKey",
    "Index",
    "Step",
    "parse_path",
    "format_path",
    "join_step",
]

MAX_INDEX = 65535

_INDEX_DIGITS = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class MapKey:
    """Look up ``name`` in a mapping."""

    name: str


@dataclass(frozen=True)
class Index:
    """Select element ``index`` of a sequence."""

    index: int

    def __post_init__(self) -> None:
        if not 0 <= self.index <= MAX_INDEX:
            raise ValueError(f"Index must be between 0 and {MAX_INDEX}, got {self.index}")


Step = Union[MapKey, Index]


def _parse_index(text: str) -> int | None:
    """Return the integer in ``text`` if it is an unsigned 16-bit decimal, else None."""
    if not _INDEX_DIGITS.fullmatch(text):
        return None
    value = int(text)
    if value > MAX_INDEX:
        return None
    return value


def _split_segment(segment: str) -> list[Step]:
    # Suffixes are discovered right to left.
    indices: list[int] = []
    while segment.endswith("]"):
        start = segment.rfind("[")
        if start == -1:
            break
        index = _parse_index(segment[start + 1 : -1])
        if index is None:
            break
        indices.append(index)
        segment = segment[:start]

    steps: list[Step] = [MapKey(segment)]
    steps.extend(Index(i) for i in reversed(indices))
    return steps


def parse_path(path: str, delimiter: str = ".") -> tuple[Step, ...]:
    """Parse a path expression into an ordered tuple of steps.

    Malformed bracket suffixes are not errors: the segment is kept as a
    literal key including the bracket text, so ``a[x]`` looks up the key
    ``"a[x]"``. Doubled delimiters produce an empty key.

    Args:
        path: The path expression, e.g. ``"db.hosts[0]"``.
        delimiter: Separator between map keys.

    Returns:
        The steps in textual order. Never empty.

    Raises:
        EmptyPathError: If ``path`` is empty.
        InvalidPathError: If ``path`` starts with ``[``.
    """
    if not path:
        raise EmptyPathError()
    if path.startswith("["):
        raise InvalidPathError(key=path)

    steps: list[Step] = []
    for segment in path.split(delimiter):
        steps.extend(_split_segment(segment))
    return tuple(steps)


def join_step(prefix: str, step: Step, delimiter: str = ".") -> str:
    """Append the text of one step to an already rendered path."""
    if isinstance(step, Index):
        return f"{prefix}[{step.index}]"
    if not prefix:
        return step.name
    return f"{prefix}{delimiter}{step.name}"


def format_path(steps: Iterable[Step], delimiter: str = ".") -> str:
    """Render steps back into path text, e.g. ``a.b[0][1]``."""
    text = ""
    for step in steps:
        text = join_step(text, step, delimiter)
    return text
