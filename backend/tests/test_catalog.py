"""Tests for the static catalogs and name lookup."""

from recipe_finder.services.catalog import (
    INGREDIENTS,
    RECIPES,
    display_name,
    get_ingredient_name,
    get_recipe,
)


def test_ingredient_ids_unique():
    ids = [ing.id for ing in INGREDIENTS]
    assert len(ids) == len(set(ids))


def test_recipe_ids_unique():
    ids = [r.id for r in RECIPES]
    assert len(ids) == len(set(ids))


def test_recipes_reference_known_ingredients():
    known = {ing.id for ing in INGREDIENTS}
    for recipe in RECIPES:
        assert recipe.ingredients
        assert recipe.steps
        for ref in recipe.ingredients:
            assert ref.id in known, f"{recipe.id} uses unknown ingredient {ref.id}"


def test_name_lookup():
    assert get_ingredient_name("tofu") == "Tofu"
    assert get_ingredient_name("durian") is None


def test_display_name_echoes_unknown_id():
    assert display_name("spring-onion") == "Spring onion"
    assert display_name("durian") == "durian"


def test_get_recipe():
    assert get_recipe("kung-pao-chicken").difficulty == "medium"
    assert get_recipe("missing") is None
