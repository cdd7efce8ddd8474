from __future__ import annotations

from typing import Any, Dict, List

from .bootstrap import summarize
from .index import list_by_category
from .models import MenuIndex
from .phrases import REQUIRED_CATEGORIES


def _comma_list(values: List[Any]) -> str:
    vals = [v for v in values if v is not None and str(v).strip() != ""]
    return ", ".join(str(v) for v in vals)


def items_rows(index: MenuIndex) -> list[dict]:
    rows: List[Dict[str, Any]] = []
    for item in index.items:
        rows.append(
            {
                "id": item.id,
                "name": item.name,
                "category": item.category,
                "calories": item.calories,
                "price_usd": round(item.price_usd, 2),
                "num_allergens": len(item.allergens),
                "allergens": _comma_list(list(item.allergens)),
                "tags": _comma_list(list(item.tags)),
            }
        )
    return rows


def categories_rows(index: MenuIndex) -> list[dict]:
    rows: List[Dict[str, Any]] = []
    for category in index.categories():
        items = list_by_category(category, index.items)
        prices = [it.price_usd for it in items]
        rows.append(
            {
                "category": category,
                "required": category in REQUIRED_CATEGORIES,
                "num_items": len(items),
                "min_price": min(prices) if prices else None,
                "max_price": max(prices) if prices else None,
                "max_calories": max((it.calories for it in items), default=None),
            }
        )
    rows.sort(key=lambda r: str(r["category"]).casefold())
    return rows


def summary(index: MenuIndex) -> dict:
    out = summarize(index)
    out["items_without_allergens"] = sum(1 for it in index.items if not it.allergens)
    return out
