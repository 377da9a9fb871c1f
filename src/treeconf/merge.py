"""Override deep-merge of configuration mappings."""

from __future__ import annotations

from typing import Any

from treeconf.nodes import NodeKind, classify

__all__ = ["deep_merge"]


def deep_merge(dst: dict[Any, Any], src: dict[Any, Any]) -> None:
    """Overlay ``src`` onto ``dst`` in place.

    Only mapping-vs-mapping pairs merge key by key. Any other pair is
    replaced by the value from ``src``; sequences are never merged element
    by element. Values inserted from ``src`` are shared, not copied, and
    ``src`` itself is left untouched.
    """
    for key, value in src.items():
        if key not in dst:
            dst[key] = value
            continue

        target = dst[key]
        if classify(target) is not NodeKind.MAPPING or classify(value) is not NodeKind.MAPPING:
            dst[key] = value
            continue

        deep_merge(target, value)
