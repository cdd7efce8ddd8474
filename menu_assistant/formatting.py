from __future__ import annotations

from typing import Any, Iterable, List, Sequence

from .models import Action, MenuItem
from .phrases import (
    BURGERS_PHRASE,
    DEALS_PHRASE,
    NEAREST_STORE_PHRASE,
    POPULAR_PHRASE,
    QUICK_ACTIONS,
    allergens_phrase,
    calories_phrase,
)


def format_money(value: Any) -> str:
    try:
        return f"${float(value):.2f}"
    except (TypeError, ValueError):
        return str(value)


def format_item_line(item: MenuItem) -> str:
    return f"{item.name} — {format_money(item.price_usd)} — {item.calories} cal"


def format_items(items: Iterable[MenuItem]) -> str:
    return "\n".join(format_item_line(it) for it in items)


def format_item_list(title: str, items: Iterable[MenuItem]) -> str:
    return f"{title}:\n{format_items(items)}"


def format_category_menu(categories: Sequence[str]) -> str:
    lines = "\n".join(f"• {c}" for c in categories)
    return f"I can show:\n{lines}\n\nAsk for a category or an item."


def format_allergens(item: MenuItem) -> str:
    return ", ".join(item.allergens) if item.allergens else "None listed"


def format_nutrition(item: MenuItem) -> str:
    return (
        f"{item.name}: {item.calories} calories. Allergens: {format_allergens(item)}. "
        f"Price ~ {format_money(item.price_usd)} (varies)."
    )


def format_item_info(item: MenuItem) -> str:
    return (
        f"{item.name}: about {format_money(item.price_usd)} — {item.calories} cal. "
        f"Category: {item.category}."
    )


def base_actions() -> List[Action]:
    return [
        Action(label="Show popular items", value=POPULAR_PHRASE),
        Action(label="View burgers", value=BURGERS_PHRASE),
        Action(label="Find nearest McDonald's", value=NEAREST_STORE_PHRASE),
    ]


def quick_actions() -> List[Action]:
    return [Action(label=label, value=value) for label, value in QUICK_ACTIONS]


def item_actions(item: MenuItem) -> List[Action]:
    return [
        Action(label=f"Calories for {item.name}", value=calories_phrase(item.name)),
        Action(label=f"Allergens in {item.name}", value=allergens_phrase(item.name)),
        Action(label="Any deals?", value=DEALS_PHRASE),
    ]


def link_actions(link_label: str, url: str, popular_label: str) -> List[Action]:
    return [
        Action(label=link_label, value=url),
        Action(label=popular_label, value=POPULAR_PHRASE),
    ]
