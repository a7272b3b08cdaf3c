from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from recipe_finder.api.routes import router as api_router
from recipe_finder.config import settings
from recipe_finder.logging import configure_logging, get_logger
from recipe_finder.services.catalog import INGREDIENTS, RECIPES

app = FastAPI(title="Recipe Finder API")
logger = get_logger(__name__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
def on_startup() -> None:
    configure_logging(settings.log_level)
    logger.info(
        "startup: catalog ingredients=%s recipes=%s model=%s",
        len(INGREDIENTS),
        len(RECIPES),
        settings.llm_model,
    )


app.include_router(api_router)
