"""YAML document loading and include expansion."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from treeconf.errors import ConfigNotFoundError, ConfigParseError, IncludeError
from treeconf.merge import deep_merge

__all__ = ["INCLUDE_KEY", "load_document", "load_file", "include_names"]

logger = logging.getLogger(__name__)

INCLUDE_KEY = "include"

_UTF8_BOM = b"\xef\xbb\xbf"


class _ConfigLoader(yaml.SafeLoader):
    """SafeLoader that keeps timestamp-looking scalars as plain strings."""


_ConfigLoader.add_constructor("tag:yaml.org,2002:timestamp", yaml.SafeLoader.construct_yaml_str)


def load_document(data: bytes | str, source: str = "<string>") -> dict[str, Any]:
    """Parse one YAML document into a mapping.

    A leading UTF-8 byte-order mark is stripped and an empty document
    yields an empty mapping. Dates and timestamps stay strings, so scalars
    are only ever str, int, float or bool.

    Raises:
        ConfigParseError: If the text is not valid YAML or its root is not a mapping.
    """
    if isinstance(data, bytes):
        if data.startswith(_UTF8_BOM):
            data = data[len(_UTF8_BOM) :]
        try:
            text = data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ConfigParseError(source=source, reason=str(e), cause=e) from e
    else:
        text = data.removeprefix("\ufeff")

    try:
        parsed = yaml.load(text, Loader=_ConfigLoader)
    except yaml.YAMLError as e:
        raise ConfigParseError(source=source, reason=f"invalid YAML: {e}", cause=e) from e
    except ValueError as e:
        # Raised while building values, e.g. integers past the digit limit.
        raise ConfigParseError(source=source, reason=str(e), cause=e) from e

    if parsed is None:
        return {}
    if not isinstance(parsed, dict):
        raise ConfigParseError(
            source=source,
            reason=f"document root must be a mapping, got {type(parsed).__name__}",
        )
    return parsed


def include_names(document: dict[str, Any]) -> list[str]:
    """Return the include entries declared at the top of ``document``.

    Raises:
        IncludeError: If ``include`` is neither a string nor a list of strings.
    """
    if INCLUDE_KEY not in document:
        return []

    value = document[INCLUDE_KEY]
    if isinstance(value, str):
        return [value]
    if isinstance(value, list) and all(isinstance(item, str) for item in value):
        return list(value)
    raise IncludeError(value=value)


def _read_bytes(path: Path) -> bytes:
    try:
        return path.read_bytes()
    except OSError as e:
        raise ConfigNotFoundError(config_path=str(path), cause=e) from e


def load_file(path: str | Path, include_suffix: str = ".yaml") -> dict[str, Any]:
    """Load a YAML file and merge its includes into it.

    Each entry of the top-level ``include`` key names a document in the same
    directory as ``path``, with ``include_suffix`` appended. Includes are
    merged in the order they are declared, so later entries override earlier
    ones. Included documents are not expanded further, and the ``include``
    key itself is kept in the returned tree.

    Raises:
        ConfigNotFoundError: If the file or one of its includes cannot be read.
        ConfigParseError: If a document cannot be parsed.
        IncludeError: If the ``include`` value is malformed.
    """
    path = Path(path)
    logger.debug("Loading configuration from %s", path)
    document = load_document(_read_bytes(path), source=str(path))

    for name in include_names(document):
        include_path = path.parent / f"{name}{include_suffix}"
        included = load_document(_read_bytes(include_path), source=str(include_path))
        if not included:
            logger.warning("Included configuration %s is empty", include_path)
        logger.debug("Merging include %s into %s", include_path, path)
        deep_merge(document, included)

    return document
