"""Tests for the override deep-merge."""

from __future__ import annotations

import copy
from typing import Any

from treeconf.merge import deep_merge


class TestDeepMerge:
    def test_leaf_values_from_include_win(self) -> None:
        dst: dict[str, Any] = {"a": {"x": 1, "y": 2}}
        deep_merge(dst, {"a": {"y": 3, "z": 4}})
        assert dst == {"a": {"x": 1, "y": 3, "z": 4}}

    def test_new_keys_inserted(self) -> None:
        dst: dict[str, Any] = {"a": 1}
        deep_merge(dst, {"b": {"c": 2}})
        assert dst == {"a": 1, "b": {"c": 2}}

    def test_inserted_subtree_is_shared(self) -> None:
        sub = {"c": 2}
        dst: dict[str, Any] = {}
        deep_merge(dst, {"b": sub})
        assert dst["b"] is sub

    def test_sequence_replaced_by_mapping(self) -> None:
        dst: dict[str, Any] = {"a": [1, 2, 3]}
        deep_merge(dst, {"a": {"x": 1}})
        assert dst == {"a": {"x": 1}}

    def test_mapping_replaced_by_scalar(self) -> None:
        dst: dict[str, Any] = {"a": {"x": 1}}
        deep_merge(dst, {"a": "flat"})
        assert dst == {"a": "flat"}

    def test_sequences_replaced_wholesale(self) -> None:
        dst: dict[str, Any] = {"a": [1, 2, 3]}
        deep_merge(dst, {"a": [9]})
        assert dst == {"a": [9]}

    def test_scalar_replaced_by_mapping(self) -> None:
        dst: dict[str, Any] = {"a": 1}
        deep_merge(dst, {"a": {"b": 2}})
        assert dst == {"a": {"b": 2}}

    def test_null_in_include_overrides(self) -> None:
        dst: dict[str, Any] = {"a": {"b": 1}}
        deep_merge(dst, {"a": None})
        assert dst == {"a": None}

    def test_deeply_nested_merge_keeps_siblings(self) -> None:
        dst: dict[str, Any] = {"a": {"b": {"c": 1, "d": 2}, "e": 3}}
        deep_merge(dst, {"a": {"b": {"d": 20, "f": 30}}})
        assert dst == {"a": {"b": {"c": 1, "d": 20, "f": 30}, "e": 3}}

    def test_source_not_modified(self) -> None:
        src = {"a": {"y": 3}, "b": [1]}
        snapshot = copy.deepcopy(src)
        deep_merge({"a": {"x": 1}, "b": [0]}, src)
        assert src == snapshot

    def test_successive_merges_apply_in_order(self) -> None:
        dst: dict[str, Any] = {"a": {"x": 1}}
        deep_merge(dst, {"a": {"x": 2, "y": 2}})
        deep_merge(dst, {"a": {"x": 3}})
        assert dst == {"a": {"x": 3, "y": 2}}

    def test_empty_source_is_noop(self) -> None:
        dst: dict[str, Any] = {"a": 1}
        deep_merge(dst, {})
        assert dst == {"a": 1}
