"""Tests for the treeconf public API surface.

Verifies that the expected names are importable from the top-level
``treeconf`` package and that ``__all__`` is consistent.
"""

import re

import treeconf


class TestPublicAPIImports:
    def test_config_importable(self):
        from treeconf import Config

        assert Config is not None

    def test_path_helpers_importable(self):
        from treeconf import Index, MapKey, format_path, parse_path, resolve

        assert parse_path("a[0]") == (MapKey("a"), Index(0))
        assert format_path(parse_path("a[0]")) == "a[0]"
        assert resolve({"a": [1]}, parse_path("a[0]")) == 1

    def test_loading_helpers_importable(self):
        from treeconf import deep_merge, load_document, load_file

        assert callable(deep_merge)
        assert callable(load_document)
        assert callable(load_file)

    def test_errors_importable(self):
        from treeconf import ConfigError, KeyNotFoundError

        assert issubclass(KeyNotFoundError, ConfigError)


class TestAllList:
    def test_every_name_in_all_exists(self):
        for name in treeconf.__all__:
            assert hasattr(treeconf, name), f"{name} listed in __all__ but missing"

    def test_no_duplicates(self):
        assert len(treeconf.__all__) == len(set(treeconf.__all__))


class TestVersion:
    def test_version_is_semver(self):
        assert re.match(r"^\d+\.\d+\.\d+", treeconf.__version__)
