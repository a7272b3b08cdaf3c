"""AI creative recipe endpoint."""

from fastapi import APIRouter, Depends, HTTPException

from recipe_finder.config import settings
from recipe_finder.logging import get_logger
from recipe_finder.schemas.api import GenerateRecipeRequest
from recipe_finder.schemas.recipe import GeneratedRecipe
from recipe_finder.services.catalog import display_name
from recipe_finder.services.llm.chat_client import LLMConfig
from recipe_finder.services.llm.recipe_generator import RecipeGenerator

router = APIRouter()
logger = get_logger(__name__)


def get_recipe_generator() -> RecipeGenerator:
    return RecipeGenerator(LLMConfig.from_settings(settings))


@router.post("/recipes/generate", response_model=GeneratedRecipe)
async def generate_recipe(
    body: GenerateRecipeRequest,
    generator: RecipeGenerator = Depends(get_recipe_generator),
) -> GeneratedRecipe:
    """
    Generate one creative recipe from the selected ingredients.
    Always 200 for a non-empty selection: provider failures come back as the fallback recipe.
    """
    if not body.ingredient_ids:
        raise HTTPException(status_code=400, detail="ingredient_ids is required and must not be empty")
    names = body.ingredient_names or [display_name(i) for i in body.ingredient_ids]
    logger.info("recipes.generate selected=%s", len(body.ingredient_ids))
    return await generator.generate(body.ingredient_ids, names)
