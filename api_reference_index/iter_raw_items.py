"""Utility for iterating over the raw items of a content export."""

from collections.abc import Iterable
from typing import Any


def iter_raw_items(doc: dict[str, Any]) -> Iterable[tuple[str, dict[str, Any]]]:
    """Yield ``(codename, raw_item)`` pairs from an export document.

    ``items`` may be a mapping keyed by codename or a list of items that carry
    their own ``codename``.
    """
    items = doc.get("items") or []
    if isinstance(items, dict):
        for codename, it in items.items():
            if isinstance(it, dict):
                yield str(it.get("codename") or codename), it
        return
    for it in items:
        if isinstance(it, dict) and it.get("codename"):
            yield str(it["codename"]), it
