import pytest

from menu_assistant.models import MenuIndex, MenuItem


def _item(id, name, category, calories, price, allergens=(), tags=()):
    return MenuItem(
        id=id,
        name=name,
        category=category,
        calories=calories,
        priceUSD=price,
        allergens=tuple(allergens),
        tags=tuple(tags),
    )


@pytest.fixture
def fixture_items():
    return (
        _item("big-mac", "Big Mac", "Burgers", 550, 5.99, ["Wheat", "Milk"], ["popular"]),
        _item("cheeseburger", "Cheeseburger", "Burgers", 300, 2.29, ["Wheat", "Milk"]),
        _item("mcchicken", "McChicken", "Chicken", 400, 2.49, ["Wheat", "Egg"]),
        _item("egg-mcmuffin", "Egg McMuffin", "Breakfast", 310, 4.29, ["Wheat", "Egg"]),
        _item("hash-browns", "Hash Browns", "Breakfast", 140, 1.89, [], ["hashbrown"]),
        _item("sundae", "Hot Fudge Sundae", "Desserts", 330, 2.59, ["Milk"], ["popular"]),
        _item("iced-coffee", "Iced Coffee", "Drinks", 140, 2.19, ["Milk"]),
        _item("fries", "World Famous Fries", "Sides", 320, 2.79, []),
    )


@pytest.fixture
def index(fixture_items):
    return MenuIndex(items=fixture_items)


@pytest.fixture
def menu_path():
    return "data/menu.json"
