from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from .formatting import (
    base_actions,
    format_category_menu,
    format_item_info,
    format_item_list,
    format_nutrition,
    item_actions,
    link_actions,
)
from .index import find_item, list_by_category, popular_items
from .models import AgentResult, MenuIndex
from .phrases import (
    AVAILABILITY_NOTICE,
    CATEGORY_RULES,
    DEAL_KEYWORDS,
    DEALS_NOTICE,
    DEALS_URL,
    FALLBACK_TEXT,
    GREETING_TEXT,
    GREETING_WORDS,
    HELP_TEXT,
    LOCATION_KEYWORDS,
    LOCATOR_NOTICE,
    MENU_WORD,
    NUTRITION_KEYWORDS,
    NUTRITION_NOTICE,
    POPULAR_KEYWORDS,
    REQUIRED_CATEGORIES,
    STORE_LOCATOR_URL,
)
from .router_schema import RouteResult
from .utils import _trace, contains_any, normalize_text


_GREETING_RE = re.compile(r"^(?:%s)\b" % "|".join(GREETING_WORDS))
_MENU_RE = re.compile(r"\b%s\b" % MENU_WORD)


@dataclass(frozen=True)
class RouteContext:
    message: str  # raw text, used for item resolution
    norm: str  # normalized text, used for every keyword check
    index: MenuIndex
    debug: bool = False


Predicate = Callable[[RouteContext], bool]
# A handler may return None to let later rules try.
Handler = Callable[[RouteContext], Optional[RouteResult]]


@dataclass(frozen=True)
class Rule:
    name: str
    matches: Predicate
    handle: Handler


# --- predicates ---------------------------------------------------------


def is_empty(ctx: RouteContext) -> bool:
    return not ctx.message.strip()


def is_greeting(ctx: RouteContext) -> bool:
    return _GREETING_RE.match(ctx.norm) is not None


def is_location(ctx: RouteContext) -> bool:
    return contains_any(ctx.norm, LOCATION_KEYWORDS)


def is_deals(ctx: RouteContext) -> bool:
    return contains_any(ctx.norm, DEAL_KEYWORDS)


def is_menu(ctx: RouteContext) -> bool:
    return _MENU_RE.search(ctx.norm) is not None


def is_nutrition(ctx: RouteContext) -> bool:
    return contains_any(ctx.norm, NUTRITION_KEYWORDS)


def is_popular(ctx: RouteContext) -> bool:
    return contains_any(ctx.norm, POPULAR_KEYWORDS)


def has_text(ctx: RouteContext) -> bool:
    # "" is a substring of every name, so text that normalizes away skips item lookup
    return bool(ctx.norm)


# --- handlers -----------------------------------------------------------


def handle_help(ctx: RouteContext) -> RouteResult:
    return RouteResult(intent="help", result=AgentResult(text=HELP_TEXT, actions=base_actions()))


def handle_greeting(ctx: RouteContext) -> RouteResult:
    return RouteResult(intent="greeting", result=AgentResult(text=GREETING_TEXT, actions=base_actions()))


def handle_location(ctx: RouteContext) -> RouteResult:
    return RouteResult(
        intent="location",
        result=AgentResult(
            text=f"Use the official store locator to find hours and the closest restaurant: {STORE_LOCATOR_URL}",
            actions=link_actions("Open Store Locator", STORE_LOCATOR_URL, "Show popular items"),
            notice=LOCATOR_NOTICE,
        ),
    )


def handle_deals(ctx: RouteContext) -> RouteResult:
    return RouteResult(
        intent="deals",
        result=AgentResult(
            text=f"You can view current deals on the official deals page: {DEALS_URL}",
            actions=link_actions("View Deals", DEALS_URL, "Popular items"),
            notice=DEALS_NOTICE,
        ),
    )


def _category_rule(label: str, keywords: Tuple[str, ...]) -> Rule:
    def matches(ctx: RouteContext) -> bool:
        return contains_any(ctx.norm, keywords)

    def handle(ctx: RouteContext) -> RouteResult:
        items = list_by_category(label, ctx.index.items)
        return RouteResult(
            intent="category",
            category=label,
            result=AgentResult(text=format_item_list(label, items), actions=base_actions()),
        )

    return Rule(name=f"category:{label.lower()}", matches=matches, handle=handle)


def handle_menu(ctx: RouteContext) -> RouteResult:
    return RouteResult(
        intent="menu",
        result=AgentResult(text=format_category_menu(REQUIRED_CATEGORIES), actions=base_actions()),
    )


def try_nutrition(ctx: RouteContext) -> Optional[RouteResult]:
    if not is_nutrition(ctx):
        return None
    found = find_item(ctx.message, ctx.index.items, debug=ctx.debug)
    if found is None:
        return None
    return RouteResult(
        intent="nutrition",
        item_id=found.id,
        result=AgentResult(text=format_nutrition(found), actions=item_actions(found), notice=NUTRITION_NOTICE),
    )


def try_item(ctx: RouteContext) -> Optional[RouteResult]:
    found = find_item(ctx.message, ctx.index.items, debug=ctx.debug)
    if found is None:
        return None
    return RouteResult(
        intent="item",
        item_id=found.id,
        result=AgentResult(text=format_item_info(found), actions=item_actions(found), notice=AVAILABILITY_NOTICE),
    )


def handle_item_lookup(ctx: RouteContext) -> Optional[RouteResult]:
    """
    Nutrition lookup, then plain item lookup, as one slot in the rule order.
    An unresolved nutrition question still gets the plain lookup.
    """
    out = try_nutrition(ctx)
    if out is not None:
        return out
    return try_item(ctx)


def handle_popular(ctx: RouteContext) -> RouteResult:
    items = popular_items(ctx.index.items)
    return RouteResult(
        intent="popular",
        result=AgentResult(text=format_item_list("Popular picks", items), actions=base_actions()),
    )


def handle_fallback(ctx: RouteContext) -> RouteResult:
    return RouteResult(intent="fallback", result=AgentResult(text=FALLBACK_TEXT, actions=base_actions()))


def build_rules() -> List[Rule]:
    """Rule priority order; the first rule whose handler returns a result wins."""
    rules = [
        Rule("help", is_empty, handle_help),
        Rule("greeting", is_greeting, handle_greeting),
        Rule("location", is_location, handle_location),
        Rule("deals", is_deals, handle_deals),
    ]
    rules.extend(_category_rule(label, keywords) for label, keywords in CATEGORY_RULES)
    rules.extend(
        [
            Rule("menu", is_menu, handle_menu),
            Rule("item_lookup", has_text, handle_item_lookup),
            Rule("popular", is_popular, handle_popular),
        ]
    )
    return rules


RULES: Tuple[Rule, ...] = tuple(build_rules())


def route(question: str, index: MenuIndex, *, debug: bool = False) -> RouteResult:
    """
    Single dispatch step: evaluate RULES in order, first match wins.
    Falls back to the capability summary when nothing matches.
    """
    message = "" if question is None else str(question)
    ctx = RouteContext(message=message, norm=normalize_text(message), index=index, debug=debug)

    for rule in RULES:
        if not rule.matches(ctx):
            continue
        out = rule.handle(ctx)
        if out is None:
            continue
        _trace(debug, "router.rule", {"rule": rule.name, "intent": out.intent, "normalized": ctx.norm})
        return out

    _trace(debug, "router.rule", {"rule": "fallback", "intent": "fallback", "normalized": ctx.norm})
    return handle_fallback(ctx)
