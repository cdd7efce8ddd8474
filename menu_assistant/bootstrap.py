from __future__ import annotations

import json
from typing import Any, Dict, Iterable, Tuple

from .config import DEFAULT_MENU_PATH
from .index import list_by_category
from .ingest import load_dataset
from .models import MenuIndex, MenuItem
from .normalize import normalize_menu
from .phrases import POPULAR_TAG, REQUIRED_CATEGORIES
from .utils import _trace


def missing_categories(items: Iterable[MenuItem]) -> list[str]:
    items = list(items)
    return [c for c in REQUIRED_CATEGORIES if not list_by_category(c, items)]


def load_index(dataset_path: str = DEFAULT_MENU_PATH, *, debug: bool = False) -> MenuIndex:
    """
    Load dataset JSON, validate items, and return the read-only MenuIndex.
    Must raise clear, actionable errors for invalid input files.
    """
    try:
        dataset = load_dataset(dataset_path)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in dataset file: {dataset_path}") from e

    items = normalize_menu(dataset)
    if not items:
        raise ValueError("No menu items found after normalization.")

    missing = missing_categories(items)
    if missing:
        raise ValueError(f"Menu is missing required categories: {', '.join(missing)}")

    index = MenuIndex(items=tuple(items))
    _trace(debug, "menu.loaded", {"path": dataset_path, "items": len(index.items)})
    return index


def summarize(index: MenuIndex) -> Dict[str, Any]:
    counts: Dict[str, int] = {}
    for item in index.items:
        counts[item.category] = counts.get(item.category, 0) + 1
    return {
        "total_items": len(index.items),
        "total_categories": len(counts),
        "items_per_category": counts,
        "tagged_items": sum(1 for it in index.items if it.tags),
        "has_popular_tag": any(POPULAR_TAG in it.tags for it in index.items),
    }


def load_index_with_summary(dataset_path: str = DEFAULT_MENU_PATH) -> Tuple[MenuIndex, Dict[str, Any]]:
    """
    Same as load_index, but also returns a small summary dict for debug / demo.
    """
    index = load_index(dataset_path)
    return index, summarize(index)
