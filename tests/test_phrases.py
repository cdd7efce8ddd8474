import pytest

from menu_assistant.formatting import base_actions, item_actions, quick_actions
from menu_assistant.phrases import (
    BURGERS_PHRASE,
    DEALS_PHRASE,
    NEAREST_STORE_PHRASE,
    POPULAR_PHRASE,
    allergens_phrase,
    calories_phrase,
)
from menu_assistant.router import route


def test_base_actions_use_canonical_phrases():
    values = [a.value for a in base_actions()]
    assert values == [POPULAR_PHRASE, BURGERS_PHRASE, NEAREST_STORE_PHRASE]


@pytest.mark.parametrize(
    "phrase, intent",
    [
        (BURGERS_PHRASE, "category"),
        (NEAREST_STORE_PHRASE, "location"),
        (DEALS_PHRASE, "deals"),
    ],
)
def test_action_values_reenter_their_rule(index, phrase, intent):
    assert route(phrase, index).intent == intent


def test_popular_phrase_reaches_popular_rule_on_shipped_menu(menu_path):
    from menu_assistant.bootstrap import load_index

    out = route(POPULAR_PHRASE, load_index(menu_path))
    assert out.intent == "popular"
    assert out.result.text.startswith("Popular picks:\n")


@pytest.mark.parametrize("item_id", ["big-mac", "egg-mcmuffin", "hash-browns"])
def test_item_action_values_reenter_nutrition(index, item_id):
    item = next(i for i in index.items if i.id == item_id)
    for phrase in (calories_phrase(item.name), allergens_phrase(item.name)):
        out = route(phrase, index)
        assert out.intent == "nutrition"
        assert out.item_id == item_id


def test_item_actions_values(index):
    item = index.items[0]
    assert [a.value for a in item_actions(item)] == [
        calories_phrase(item.name),
        allergens_phrase(item.name),
        DEALS_PHRASE,
    ]


def test_quick_actions_reenter_their_rule_on_shipped_menu(menu_path):
    from menu_assistant.bootstrap import load_index

    idx = load_index(menu_path)
    intents = [route(a.value, idx).intent for a in quick_actions()]
    assert intents == ["popular", "menu", "nutrition", "location", "deals"]


def test_calories_phrase_for_category_named_items_lands_on_category_list(menu_path):
    # Category rules come before item lookup, so these items get their category list.
    from menu_assistant.bootstrap import load_index

    idx = load_index(menu_path)
    captured = {item.name for item in idx.items if route(calories_phrase(item.name), idx).intent == "category"}
    assert captured == {
        "Double Cheeseburger",
        "Cheeseburger",
        "Hamburger",
        "10 pc. Chicken McNuggets",
        "McChicken",
        "McFlurry with OREO Cookies",
        "Baked Apple Pie",
        "Iced Coffee",
        "Caramel Latte",
    }
