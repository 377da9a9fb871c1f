"""Error hierarchy for treeconf."""

from __future__ import annotations

from typing import Any

__all__ = [
    "ConfigError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "IncludeError",
    "PathParseError",
    "EmptyPathError",
    "InvalidPathError",
    "PathResolutionError",
    "KeyNotFoundError",
    "NotAMappingError",
    "NotASequenceError",
    "NotAContainerError",
    "IndexOutOfRangeError",
    "CoercionError",
    "ErrorCodes",
]


class ConfigError(Exception):
    """Base error for all treeconf errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


# === Load-time errors ===


class ConfigNotFoundError(ConfigError):
    """Raised when a configuration or include file cannot be read."""

    def __init__(self, config_path: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_NOT_FOUND",
            message=f"Configuration file not found: {config_path}",
            details={"config_path": config_path},
            **kwargs,
        )

    @property
    def config_path(self) -> str:
        return self.details["config_path"]


class ConfigParseError(ConfigError):
    """Raised when a document is not valid YAML or its root is not a mapping."""

    def __init__(self, source: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_PARSE_ERROR",
            message=f"Cannot parse configuration '{source}': {reason}",
            details={"source": source, "reason": reason},
            **kwargs,
        )

    @property
    def source(self) -> str:
        return self.details["source"]


class IncludeError(ConfigError):
    """Raised when the top-level `include` value is neither a string nor a list of strings."""

    def __init__(self, value: Any, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_INCLUDE_INVALID",
            message=f"Unrecognized value of `include`: {value!r}",
            details={"value": value},
            **kwargs,
        )


# === Path syntax errors ===


class PathParseError(ConfigError):
    """Base for malformed path expressions."""

    @property
    def key(self) -> str:
        return self.details["key"]


class EmptyPathError(PathParseError):
    """Raised when an empty path is looked up."""

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(
            code="PATH_EMPTY",
            message="Key should not be empty",
            details={"key": ""},
            **kwargs,
        )


class InvalidPathError(PathParseError):
    """Raised when a path cannot start a lookup, e.g. it begins with '['."""

    def __init__(self, key: str, reason: str = "path cannot start with an index", **kwargs: Any) -> None:
        super().__init__(
            code="PATH_INVALID",
            message=f"Wrong key format `{key}`: {reason}",
            details={"key": key, "reason": reason},
            **kwargs,
        )


# === Resolution errors ===


class PathResolutionError(ConfigError):
    """Base for failures while walking the tree.

    ``key`` is the partial path at which the walk stopped.
    """

    @property
    def key(self) -> str:
        return self.details["key"]


class KeyNotFoundError(PathResolutionError):
    """Raised when a key is absent or explicitly null."""

    def __init__(self, key: str, **kwargs: Any) -> None:
        super().__init__(
            code="KEY_NOT_FOUND",
            message=f"Key `{key}` does not exist",
            details={"key": key},
            **kwargs,
        )


class NotAMappingError(PathResolutionError):
    """Raised when a map key is applied to a node that is not a mapping."""

    def __init__(self, key: str, **kwargs: Any) -> None:
        super().__init__(
            code="NOT_A_MAPPING",
            message=f"Key `{key}` is not a map",
            details={"key": key},
            **kwargs,
        )


class NotASequenceError(PathResolutionError):
    """Raised when an index is applied to a node that is not a sequence."""

    def __init__(self, key: str, **kwargs: Any) -> None:
        super().__init__(
            code="NOT_A_SEQUENCE",
            message=f"Key `{key}` is not a list",
            details={"key": key},
            **kwargs,
        )


class NotAContainerError(PathResolutionError):
    """Raised when further steps follow a scalar."""

    def __init__(self, key: str, **kwargs: Any) -> None:
        super().__init__(
            code="NOT_A_CONTAINER",
            message=f"Key `{key}` is not a map or list",
            details={"key": key},
            **kwargs,
        )


class IndexOutOfRangeError(PathResolutionError):
    """Raised when an index step is past the end of a sequence."""

    def __init__(self, key: str, index: int, length: int, **kwargs: Any) -> None:
        super().__init__(
            code="INDEX_OUT_OF_RANGE",
            message=f"Index {index} of `{key}` is out of range (length {length})",
            details={"key": key, "index": index, "length": length},
            **kwargs,
        )

    @property
    def index(self) -> int:
        return self.details["index"]

    @property
    def length(self) -> int:
        return self.details["length"]


# === Conversion errors ===


class CoercionError(ConfigError):
    """Raised when a resolved value cannot be converted to the requested type."""

    def __init__(
        self,
        key: str,
        expected: str,
        position: int | None = None,
        **kwargs: Any,
    ) -> None:
        if position is None:
            message = f"Value of `{key}` is not {expected}"
        else:
            message = f"Value at position {position} of `{key}` is not {expected}"
        super().__init__(
            code="COERCION_FAILED",
            message=message,
            details={"key": key, "expected": expected, "position": position},
            **kwargs,
        )

    @property
    def key(self) -> str:
        return self.details["key"]

    @property
    def expected(self) -> str:
        """Name of the requested type, e.g. 'int' or 'a list of bool'."""
        return self.details["expected"]

    @property
    def position(self) -> int | None:
        """Failing element position for array getters, otherwise None."""
        return self.details["position"]


class ErrorCodes:
    """All treeconf error codes as constants.

    Example:
        if error.code == ErrorCodes.KEY_NOT_FOUND:
            use_fallback()
    """

    CONFIG_NOT_FOUND = "CONFIG_NOT_FOUND"
    CONFIG_PARSE_ERROR = "CONFIG_PARSE_ERROR"
    CONFIG_INCLUDE_INVALID = "CONFIG_INCLUDE_INVALID"
    PATH_EMPTY = "PATH_EMPTY"
    PATH_INVALID = "PATH_INVALID"
    KEY_NOT_FOUND = "KEY_NOT_FOUND"
    NOT_A_MAPPING = "NOT_A_MAPPING"
    NOT_A_SEQUENCE = "NOT_A_SEQUENCE"
    NOT_A_CONTAINER = "NOT_A_CONTAINER"
    INDEX_OUT_OF_RANGE = "INDEX_OUT_OF_RANGE"
    COERCION_FAILED = "COERCION_FAILED"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
