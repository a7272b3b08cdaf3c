from fastapi import APIRouter, HTTPException

from recipe_finder.logging import get_logger
from recipe_finder.schemas.api import RecipeSearchResponse
from recipe_finder.schemas.recipe import Ingredient, Recipe
from recipe_finder.services.catalog import RECIPES, display_name, get_recipe
from recipe_finder.services.matching.recipe_matcher import match_recipes

router = APIRouter()
logger = get_logger(__name__)


def parse_ingredient_param(raw: str | None) -> list[str]:
    """Split the comma-separated ?ingredients= value, dropping blanks and repeats (order kept)."""
    ids: list[str] = []
    for part in (raw or "").split(","):
        part = part.strip()
        if part and part not in ids:
            ids.append(part)
    return ids


@router.get("/recipes", response_model=RecipeSearchResponse)
def search_recipes(ingredients: str | None = None) -> RecipeSearchResponse:
    """
    Recipes ranked by overlap with ?ingredients=tofu,mushroom.
    Without ingredients every recipe is returned in catalog order.
    """
    selected_ids = parse_ingredient_param(ingredients)
    matched = match_recipes(selected_ids, RECIPES)
    logger.info("recipes.match selected=%s results=%s", len(selected_ids), len(matched))
    return RecipeSearchResponse(
        selected=[Ingredient(id=i, name=display_name(i)) for i in selected_ids],
        recipes=matched,
    )


@router.get("/recipes/{recipe_id}", response_model=Recipe)
def get_recipe_detail(recipe_id: str) -> Recipe:
    recipe = get_recipe(recipe_id)
    if recipe is None:
        raise HTTPException(status_code=404, detail=f"recipe not found: {recipe_id}")
    return recipe
