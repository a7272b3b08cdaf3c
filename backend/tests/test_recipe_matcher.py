"""Tests for ingredient overlap matching and ranking."""

import pytest

from recipe_finder.schemas.recipe import Recipe
from recipe_finder.services.catalog import RECIPES
from recipe_finder.services.matching.recipe_matcher import count_matches, match_recipes


def _recipe(recipe_id, ingredient_ids):
    return Recipe(
        id=recipe_id,
        name=recipe_id.upper(),
        image=f"/img/{recipe_id}.jpg",
        ingredients=[{"id": i, "amount": "1"} for i in ingredient_ids],
        steps=["cook"],
        difficulty="easy",
        time=10,
    )


RECIPE_A = _recipe("a", ["tofu", "mushroom"])
RECIPE_B = _recipe("b", ["tofu", "salt", "sugar"])


def test_match_tofu_mushroom_scenario():
    result = match_recipes({"tofu", "mushroom"}, [RECIPE_B, RECIPE_A])
    assert [r.id for r in result] == ["a", "b"]
    assert result[0].match_count == 2
    assert result[0].match_percentage == 1.0
    assert result[1].match_count == 1
    assert result[1].match_percentage == pytest.approx(1 / 3)


def test_empty_selection_returns_catalog_in_order():
    result = match_recipes(set(), RECIPES)
    assert [r.id for r in result] == [r.id for r in RECIPES]
    assert all(r.match_count == 0 for r in result)
    assert all(r.match_percentage == 0 for r in result)


def test_no_overlap_returns_empty():
    assert match_recipes({"durian"}, [RECIPE_A, RECIPE_B]) == []


def test_unknown_ids_do_not_break_matching():
    result = match_recipes({"durian", "mushroom"}, [RECIPE_A, RECIPE_B])
    assert [r.id for r in result] == ["a"]
    assert result[0].match_count == 1
    assert result[0].match_percentage == 0.5


def test_empty_ingredient_recipe_never_matches():
    empty = _recipe("empty", [])
    assert match_recipes({"tofu"}, [empty]) == []
    browse = match_recipes(set(), [empty])
    assert browse[0].match_percentage == 0


def test_duplicate_recipe_ingredients_counted_once():
    dup = _recipe("dup", ["tofu", "tofu", "salt"])
    assert count_matches({"tofu"}, dup) == 1
    result = match_recipes({"tofu"}, [dup])
    assert result[0].match_count == 1
    assert result[0].match_percentage == pytest.approx(1 / 3)


def test_ties_keep_catalog_order():
    first = _recipe("first", ["tofu", "salt"])
    second = _recipe("second", ["tofu", "sugar"])
    result = match_recipes({"tofu"}, [first, second])
    assert [r.id for r in result] == ["first", "second"]
    result = match_recipes({"tofu"}, [second, first])
    assert [r.id for r in result] == ["second", "first"]


def test_equal_percentage_sorted_by_count():
    small = _recipe("small", ["tofu", "salt"])
    large = _recipe("large", ["tofu", "mushroom", "salt", "sugar"])
    result = match_recipes({"tofu", "mushroom"}, [small, large])
    assert [r.id for r in result] == ["large", "small"]
    assert result[0].match_percentage == result[1].match_percentage == 0.5


def test_properties_over_catalog():
    selected = {"tofu", "garlic", "egg", "spring-onion", "not-a-thing"}
    result = match_recipes(selected, RECIPES)
    assert result
    for r in result:
        ids = {ref.id for ref in r.ingredients}
        assert r.match_count == len(selected & ids)
        assert r.match_count > 0
        assert r.match_percentage == r.match_count / len(r.ingredients)
    keys = [(r.match_percentage, r.match_count) for r in result]
    assert keys == sorted(keys, reverse=True)


def test_match_is_idempotent():
    selected = ["tofu", "garlic", "chili"]
    assert match_recipes(selected, RECIPES) == match_recipes(selected, RECIPES)


def test_match_does_not_mutate_catalog():
    before = [r.model_dump() for r in RECIPES]
    match_recipes({"tofu"}, RECIPES)
    assert [r.model_dump() for r in RECIPES] == before
