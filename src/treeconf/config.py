"""Path-addressed, typed access to a loaded configuration tree."""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Any, Callable, TypeVar

from pydantic import TypeAdapter, ValidationError

from treeconf.coerce import to_bool, to_float, to_int, to_string
from treeconf.errors import CoercionError, ConfigError
from treeconf.loader import load_document, load_file
from treeconf.path import parse_path
from treeconf.resolver import resolve

__all__ = ["Config"]

T = TypeVar("T")


class Config:
    """Configuration accessor with dotted/bracketed path support.

    Paths look like ``db.hosts[0].port``. Every ``get_*`` method raises a
    :class:`~treeconf.errors.ConfigError` subclass on failure, and every
    ``get_default_*`` method returns the given default instead.

    Thread safety:
        The tree is complete once the constructor returns and is only read
        afterwards, so lookups are safe to call concurrently.
    """

    def __init__(self, data: dict[str, Any] | None = None, delimiter: str = ".") -> None:
        """Wrap an already loaded tree.

        Args:
            data: Root mapping. ``None`` means an empty configuration.
            delimiter: Separator between map keys in path expressions.
        """
        if not delimiter:
            raise ValueError("delimiter must be a non-empty string")
        self._data: dict[str, Any] = data if data is not None else {}
        self.delimiter: str = delimiter

    # === Construction ===

    @classmethod
    def from_file(
        cls,
        config_file: str | Path,
        *,
        delimiter: str = ".",
        include_suffix: str = ".yaml",
    ) -> Config:
        """Load a YAML file, merging the documents named by its ``include`` key."""
        return cls(load_file(config_file, include_suffix=include_suffix), delimiter=delimiter)

    @classmethod
    def from_string(cls, text: str, *, delimiter: str = ".") -> Config:
        """Build a configuration from YAML text. Includes are not expanded."""
        return cls(load_document(text), delimiter=delimiter)

    @classmethod
    def from_bytes(cls, data: bytes, *, delimiter: str = ".") -> Config:
        """Build a configuration from raw YAML bytes. Includes are not expanded."""
        return cls(load_document(data, source="<bytes>"), delimiter=delimiter)

    # === Raw lookups ===

    def get(self, key: str) -> Any:
        """Return the node at ``key``: a scalar, a dict or a list.

        Containers are the stored nodes, not copies, and must be treated as
        read-only; use ``get_map`` or ``to_dict`` for a copy that may be changed.
        """
        return resolve(self._data, parse_path(key, self.delimiter), self.delimiter)

    def has(self, key: str) -> bool:
        """Return True if ``key`` resolves to a value."""
        try:
            self.get(key)
        except ConfigError:
            return False
        return True

    def get_sub_keys(self, key: str) -> list[str]:
        """Return the string keys of the mapping at ``key``.

        A value that is not a mapping yields an empty list.
        """
        value = self.get(key)
        if not isinstance(value, dict):
            return []
        return [k for k in value if isinstance(k, str)]

    def len(self, key: str) -> int:
        """Return the number of entries of the mapping or list at ``key``, 0 for scalars."""
        value = self.get(key)
        if isinstance(value, (dict, list)):
            return len(value)
        return 0

    def to_dict(self) -> dict[str, Any]:
        """Return a deep copy of the whole tree."""
        return copy.deepcopy(self._data)

    # === Typed lookups ===

    def _get_scalar(self, key: str, convert: Callable[[Any], T], expected: str) -> T:
        value = self.get(key)
        try:
            return convert(value)
        except ValueError as e:
            raise CoercionError(key=key, expected=expected, cause=e) from e

    def _get_array(self, key: str, convert: Callable[[Any], T], expected: str) -> list[T]:
        value = self.get(key)
        if not isinstance(value, list):
            raise CoercionError(key=key, expected=f"a list of {expected}")

        result: list[T] = []
        for position, item in enumerate(value):
            try:
                result.append(convert(item))
            except ValueError as e:
                raise CoercionError(key=key, expected=expected, position=position, cause=e) from e
        return result

    def get_string(self, key: str) -> str:
        """Return a string; other scalar types are not converted."""
        return self._get_scalar(key, to_string, "string")

    def get_int(self, key: str) -> int:
        """Return an int; decimal strings such as ``"8080"`` are converted."""
        return self._get_scalar(key, to_int, "int")

    def get_bool(self, key: str) -> bool:
        """Return a bool; ``1/0``, ``t/f`` and ``true/false`` strings are converted."""
        return self._get_scalar(key, to_bool, "bool")

    def get_float(self, key: str) -> float:
        """Return a float; ints and numeric strings are converted."""
        return self._get_scalar(key, to_float, "float")

    def get_string_array(self, key: str) -> list[str]:
        """Return the list at ``key``; every element must be a string."""
        return self._get_array(key, to_string, "string")

    def get_int_array(self, key: str) -> list[int]:
        """Return the list at ``key`` with every element converted as by ``get_int``."""
        return self._get_array(key, to_int, "int")

    def get_bool_array(self, key: str) -> list[bool]:
        """Return the list at ``key`` with every element converted as by ``get_bool``."""
        return self._get_array(key, to_bool, "bool")

    def get_float_array(self, key: str) -> list[float]:
        """Return the list at ``key`` with every element converted as by ``get_float``."""
        return self._get_array(key, to_float, "float")

    def get_map(self, key: str) -> dict[str, Any]:
        """Return a new one-level dict for the mapping at ``key``.

        Nested values are returned as they are stored.

        Raises:
            CoercionError: If the value is not a mapping or has non-string keys.
        """
        value = self.get(key)
        if not isinstance(value, dict) or not all(isinstance(k, str) for k in value):
            raise CoercionError(key=key, expected="a map")
        return dict(value)

    def get_model(self, key: str, model_type: type[T]) -> T:
        """Validate the node at ``key`` into ``model_type`` with pydantic.

        ``model_type`` may be a ``BaseModel`` subclass, a dataclass, or any
        type a ``TypeAdapter`` accepts, e.g. ``list[int]``.
        """
        value = self.get(key)
        try:
            return TypeAdapter(model_type).validate_python(value)
        except ValidationError as e:
            raise CoercionError(key=key, expected=_type_name(model_type), cause=e) from e

    # === Lookups with defaults ===

    def _or_default(self, getter: Callable[..., T], default: T, *args: Any) -> T:
        try:
            return getter(*args)
        except ConfigError:
            return default

    def get_default_string(self, key: str, default: str) -> str:
        """Like ``get_string``, returning ``default`` on any error."""
        return self._or_default(self.get_string, default, key)

    def get_default_int(self, key: str, default: int) -> int:
        """Like ``get_int``, returning ``default`` on any error."""
        return self._or_default(self.get_int, default, key)

    def get_default_bool(self, key: str, default: bool) -> bool:
        """Like ``get_bool``, returning ``default`` on any error."""
        return self._or_default(self.get_bool, default, key)

    def get_default_float(self, key: str, default: float) -> float:
        """Like ``get_float``, returning ``default`` on any error."""
        return self._or_default(self.get_float, default, key)

    def get_default_string_array(self, key: str, default: list[str]) -> list[str]:
        """Like ``get_string_array``, returning ``default`` on any error."""
        return self._or_default(self.get_string_array, default, key)

    def get_default_int_array(self, key: str, default: list[int]) -> list[int]:
        """Like ``get_int_array``, returning ``default`` on any error."""
        return self._or_default(self.get_int_array, default, key)

    def get_default_bool_array(self, key: str, default: list[bool]) -> list[bool]:
        """Like ``get_bool_array``, returning ``default`` on any error."""
        return self._or_default(self.get_bool_array, default, key)

    def get_default_float_array(self, key: str, default: list[float]) -> list[float]:
        """Like ``get_float_array``, returning ``default`` on any error."""
        return self._or_default(self.get_float_array, default, key)

    def get_default_map(self, key: str, default: dict[str, Any]) -> dict[str, Any]:
        """Like ``get_map``, returning ``default`` on any error."""
        return self._or_default(self.get_map, default, key)

    def get_default_model(self, key: str, model_type: type[T], default: T) -> T:
        """Like ``get_model``, returning ``default`` on any error."""
        return self._or_default(self.get_model, default, key, model_type)

    def __repr__(self) -> str:
        return f"Config(keys={sorted(map(str, self._data))!r}, delimiter={self.delimiter!r})"


def _type_name(model_type: Any) -> str:
    return getattr(model_type, "__name__", None) or repr(model_type)
