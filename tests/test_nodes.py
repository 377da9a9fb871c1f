"""Tests for node classification."""

from __future__ import annotations

import datetime
from typing import Any

import pytest

from treeconf.nodes import NodeKind, classify


class TestClassify:
    @pytest.mark.parametrize(
        ("value", "kind"),
        [
            ({}, NodeKind.MAPPING),
            ({"a": 1}, NodeKind.MAPPING),
            ([], NodeKind.SEQUENCE),
            ([1, 2], NodeKind.SEQUENCE),
            (None, NodeKind.MISSING),
            ("", NodeKind.SCALAR),
            (0, NodeKind.SCALAR),
            (1.5, NodeKind.SCALAR),
            (False, NodeKind.SCALAR),
            (datetime.date(2024, 1, 1), NodeKind.SCALAR),
        ],
    )
    def test_kinds(self, value: Any, kind: NodeKind) -> None:
        assert classify(value) is kind

    def test_kind_values(self) -> None:
        assert NodeKind("mapping") is NodeKind.MAPPING
