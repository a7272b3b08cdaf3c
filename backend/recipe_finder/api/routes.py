from fastapi import APIRouter

from recipe_finder.api.generate import router as generate_router
from recipe_finder.api.health import router as health_router
from recipe_finder.api.ingredients import router as ingredients_router
from recipe_finder.api.recipes import router as recipes_router

router = APIRouter(prefix="/api")
router.include_router(health_router)
router.include_router(ingredients_router)
router.include_router(generate_router)
router.include_router(recipes_router)
