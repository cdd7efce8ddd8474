import pytest

from menu_assistant.index import find_item, item_matches, list_by_category, popular_items
from menu_assistant.models import MenuItem
from menu_assistant.utils import normalize_text


def _item(id, name, category="Burgers", tags=()):
    return MenuItem(id=id, name=name, category=category, calories=100, priceUSD=1.0, tags=tuple(tags))


class TestFindItem:
    def test_exact_name(self, fixture_items):
        assert find_item("Big Mac", fixture_items).id == "big-mac"

    def test_name_inside_query(self, fixture_items):
        assert find_item("How many calories are in a Big Mac?", fixture_items).id == "big-mac"

    def test_query_inside_name(self, fixture_items):
        assert find_item("fudge", fixture_items).id == "sundae"

    def test_tag_inside_query(self, fixture_items):
        assert find_item("one hashbrown please", fixture_items).id == "hash-browns"

    def test_case_and_punctuation_insensitive(self, fixture_items):
        assert find_item("MCCHICKEN!!!", fixture_items).id == "mcchicken"

    def test_not_found_is_none(self, fixture_items):
        assert find_item("asdkjhasd", fixture_items) is None

    def test_empty_collection(self):
        assert find_item("Big Mac", ()) is None

    def test_first_match_in_collection_order_wins(self):
        items = (_item("a", "Mac Snack"), _item("b", "Big Mac"))
        # "mac" is contained in both names; no ranking, first one wins.
        assert find_item("mac", items).id == "a"

    def test_result_satisfies_a_match_condition(self, fixture_items):
        for query in ["Big Mac", "coffee", "hashbrown", "egg", "world famous fries please"]:
            found = find_item(query, fixture_items)
            assert found is not None
            assert item_matches(found, normalize_text(query))

    def test_trace(self, capsys, fixture_items):
        find_item("Big Mac", fixture_items, debug=True)
        err = capsys.readouterr().err
        assert "[trace] resolver.item" in err
        assert "big-mac" in err


class TestListByCategory:
    def test_burgers_is_ordered_subsequence(self, fixture_items):
        burgers = list_by_category("Burgers", fixture_items)
        assert [b.id for b in burgers] == ["big-mac", "cheeseburger"]
        positions = [fixture_items.index(b) for b in burgers]
        assert positions == sorted(positions)

    def test_label_contained_in_category(self, fixture_items):
        assert [i.id for i in list_by_category("burger", fixture_items)] == ["big-mac", "cheeseburger"]

    def test_case_insensitive(self, fixture_items):
        assert len(list_by_category("BREAKFAST", fixture_items)) == 2

    def test_no_match_is_empty(self, fixture_items):
        assert list_by_category("Salads", fixture_items) == []

    def test_no_burgers_is_empty(self):
        items = (_item("c", "McChicken", "Chicken"),)
        assert list_by_category("Burgers", items) == []


class TestPopularItems:
    def test_tagged_items(self, fixture_items):
        assert [i.id for i in popular_items(fixture_items)] == ["big-mac", "sundae"]

    def test_falls_back_to_first_six(self):
        items = tuple(_item(str(n), f"Item {n}") for n in range(10))
        assert [i.id for i in popular_items(items)] == ["0", "1", "2", "3", "4", "5"]

    def test_fewer_than_six_untagged(self):
        items = (_item("a", "A"), _item("b", "B"))
        assert [i.id for i in popular_items(items)] == ["a", "b"]

    @pytest.mark.parametrize("tag", ["Popular", "most popular"])
    def test_tag_must_be_exact(self, tag):
        items = (_item("a", "A", tags=[tag]), _item("b", "B"))
        # no exact "popular" tag, so the fallback applies
        assert [i.id for i in popular_items(items)] == ["a", "b"]
