"""treeconf - hierarchical YAML configuration with path-addressed typed lookups."""

from __future__ import annotations

# Accessor
from treeconf.config import Config

# Loading
from treeconf.loader import load_document, load_file
from treeconf.merge import deep_merge

# Paths
from treeconf.nodes import NodeKind, classify
from treeconf.path import Index, MapKey, Step, format_path, parse_path
from treeconf.resolver import resolve

# Errors
from treeconf.errors import (
    CoercionError,
    ConfigError,
    ConfigNotFoundError,
    ConfigParseError,
    EmptyPathError,
    ErrorCodes,
    IncludeError,
    IndexOutOfRangeError,
    InvalidPathError,
    KeyNotFoundError,
    NotAContainerError,
    NotAMappingError,
    NotASequenceError,
    PathParseError,
    PathResolutionError,
)

__version__ = "0.1.0"

__all__ = [
    # Accessor
    "Config",
    # Loading
    "load_document",
    "load_file",
    "deep_merge",
    # Paths
    "NodeKind",
    "classify",
    "MapKey",
    "Index",
    "Step",
    "parse_path",
    "format_path",
    "resolve",
    # Errors
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
