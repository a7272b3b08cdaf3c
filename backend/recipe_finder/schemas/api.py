from pydantic import BaseModel

from recipe_finder.schemas.recipe import Ingredient, MatchedRecipe


class RecipeSearchResponse(BaseModel):
    selected: list[Ingredient]
    recipes: list[MatchedRecipe]


class GenerateRecipeRequest(BaseModel):
    ingredient_ids: list[str]
    ingredient_names: list[str] | None = None  # defaults to catalog display names
