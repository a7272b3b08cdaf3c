from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Difficulty = Literal["easy", "medium", "hard"]
DIFFICULTIES: tuple[str, ...] = ("easy", "medium", "hard")


class Ingredient(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str


class RecipeIngredientRef(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    amount: str


class Recipe(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    image: str
    ingredients: list[RecipeIngredientRef]
    steps: list[str]
    difficulty: Difficulty
    time: int  # minutes
    tips: list[str] | None = None


class MatchedRecipe(Recipe):
    match_count: int = Field(ge=0)
    match_percentage: float = Field(ge=0.0, le=1.0)


class GeneratedIngredient(BaseModel):
    id: str  # catalog id, or other-<index> when the provider named something unknown
    amount: str
    name: str | None = None


class GeneratedRecipe(BaseModel):
    name: str
    ingredients: list[GeneratedIngredient]
    steps: list[str]
    difficulty: Difficulty = "medium"
    time: int = 30
    tips: list[str] = []
