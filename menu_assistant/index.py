from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from .models import MenuItem
from .phrases import POPULAR_FALLBACK_COUNT, POPULAR_TAG
from .utils import _trace, normalize_text


def item_matches(item: MenuItem, norm_query: str) -> bool:
    """
    Single combined predicate (no ranking):
      name == query, name in query, query in name, or any tag in query.
    `norm_query` must already be normalized.
    """
    name = normalize_text(item.name)
    if name == norm_query or name in norm_query or norm_query in name:
        return True
    return any(normalize_text(t) in norm_query for t in item.tags)


def find_item(query: str, items: Iterable[MenuItem], *, debug: bool = False) -> Optional[MenuItem]:
    """
    First item in collection order that matches the query, else None.
    Short queries can hit unintended items through substring containment;
    the first match still wins.
    """
    q = normalize_text(query)
    found = next((it for it in items if item_matches(it, q)), None)
    _trace(
        debug,
        "resolver.item",
        {
            "query": query,
            "normalized_query": q,
            "ok": found is not None,
            "resolved_id": found.id if found else None,
            "resolved_display": found.name if found else None,
        },
    )
    return found


def list_by_category(category: str, items: Iterable[MenuItem]) -> List[MenuItem]:
    """Items whose normalized category equals or contains the normalized label, in collection order."""
    q = normalize_text(category)
    out: List[MenuItem] = []
    for it in items:
        cat = normalize_text(it.category)
        if cat == q or q in cat:
            out.append(it)
    return out


def popular_items(items: Sequence[MenuItem]) -> List[MenuItem]:
    tagged = [it for it in items if POPULAR_TAG in it.tags]
    if tagged:
        return tagged
    return list(items[:POPULAR_FALLBACK_COUNT])
