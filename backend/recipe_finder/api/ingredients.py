from fastapi import APIRouter

from recipe_finder.schemas.recipe import Ingredient
from recipe_finder.services.catalog import INGREDIENTS

router = APIRouter()


@router.get("/ingredients", response_model=list[Ingredient])
def list_ingredients() -> list[Ingredient]:
    return list(INGREDIENTS)
