"""
AI creative recipe generation.
One chat-completion call per request; every failure resolves to a deterministic fallback recipe.
"""

import json
import math
import re
from typing import Any, Callable, Optional, Sequence

import httpx

from recipe_finder.logging import get_logger
from recipe_finder.schemas.recipe import DIFFICULTIES, GeneratedIngredient, GeneratedRecipe
from recipe_finder.services.catalog import get_ingredient_name
from recipe_finder.services.llm.chat_client import ChatCompletionClient, ChatCompletionError, LLMConfig
from recipe_finder.services.llm.prompts import RECIPE_GENERATION_PROMPT_VERSION, RECIPE_GENERATION_TEMPLATE

logger = get_logger(__name__)

DEFAULT_DIFFICULTY = "medium"
DEFAULT_TIME_MINUTES = 30
DEFAULT_AMOUNT = "to taste"

FALLBACK_STEPS = ["Prepare all ingredients", "Cook to taste", "Plate and serve"]
FALLBACK_TIPS = ["Adjust the seasoning to your taste", "Try different cooking methods"]

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")

NameLookup = Callable[[str], Optional[str]]


class RecipeParseError(ValueError):
    """Completion was valid JSON but not a usable recipe."""


def build_prompt(ingredient_names: Sequence[str]) -> str:
    return RECIPE_GENERATION_TEMPLATE.format(ingredient_list=", ".join(ingredient_names))


def fallback_name(ingredient_names: Sequence[str]) -> str:
    """'AI creative dish: <first>' plus ' mixed' when more than one ingredient was selected."""
    first = ingredient_names[0] if ingredient_names else "chef's choice"
    suffix = " mixed" if len(ingredient_names) > 1 else ""
    return f"AI creative dish: {first}{suffix}"


def fallback_recipe(ingredient_ids: Sequence[str], ingredient_names: Sequence[str]) -> GeneratedRecipe:
    return GeneratedRecipe(
        name=fallback_name(ingredient_names),
        ingredients=[GeneratedIngredient(id=i, amount=DEFAULT_AMOUNT) for i in ingredient_ids],
        steps=list(FALLBACK_STEPS),
        difficulty=DEFAULT_DIFFICULTY,
        time=DEFAULT_TIME_MINUTES,
        tips=list(FALLBACK_TIPS),
    )


def resolve_ingredient_id(
    returned_name: str,
    selected_ids: Sequence[str],
    lookup: NameLookup = get_ingredient_name,
) -> str | None:
    """
    Map a provider ingredient name back to a selected catalog id.
    Matches when either the returned name or the catalog display name contains the other.
    Unknown ids are compared by the raw id.
    """
    returned = returned_name.strip()
    if not returned:
        return None
    returned_lower = returned.lower()
    for ingredient_id in selected_ids:
        catalog_name = (lookup(ingredient_id) or ingredient_id).lower()
        if not catalog_name:
            continue
        if catalog_name in returned_lower or returned_lower in catalog_name:
            return ingredient_id
    return None


def _parse_time(value: Any) -> int:
    """Leading integer of the value (e.g. '25 minutes' -> 25); 30 when missing or not positive."""
    if isinstance(value, bool) or value is None:
        return DEFAULT_TIME_MINUTES
    if isinstance(value, (int, float)):
        if not math.isfinite(value):
            return DEFAULT_TIME_MINUTES
        minutes = int(value)
    else:
        match = _LEADING_INT.match(str(value))
        if not match:
            return DEFAULT_TIME_MINUTES
        minutes = int(match.group(1))
    return minutes if minutes > 0 else DEFAULT_TIME_MINUTES


def _parse_difficulty(value: Any) -> str:
    text = str(value or "").strip().lower()
    return text if text in DIFFICULTIES else DEFAULT_DIFFICULTY


def _as_list(data: dict, key: str, required: bool = False) -> list:
    value = data.get(key)
    if value is None:
        if required:
            raise RecipeParseError(f"missing '{key}'")
        return []
    if not isinstance(value, list):
        raise RecipeParseError(f"'{key}' is {type(value).__name__}, expected list")
    return value


def parse_generated_recipe(
    content: str,
    ingredient_ids: Sequence[str],
    ingredient_names: Sequence[str],
    lookup: NameLookup = get_ingredient_name,
) -> GeneratedRecipe:
    """Turn the completion text into a GeneratedRecipe. Raises ValueError on malformed content."""
    data = json.loads(content)
    if not isinstance(data, dict):
        raise RecipeParseError(f"completion is {type(data).__name__}, expected object")

    ingredients: list[GeneratedIngredient] = []
    for index, item in enumerate(_as_list(data, "ingredients")):
        if not isinstance(item, dict):
            raise RecipeParseError(f"ingredient {index} is {type(item).__name__}, expected object")
        candidates = [str(item.get(key) or "") for key in ("name", "ingredient")]
        returned_name = next((c for c in candidates if c), "")
        matched_id = next(
            (m for m in (resolve_ingredient_id(c, ingredient_ids, lookup) for c in candidates) if m),
            None,
        )
        ingredients.append(
            GeneratedIngredient(
                id=matched_id or f"other-{index}",
                amount=str(item.get("amount") or item.get("quantity") or DEFAULT_AMOUNT),
                name=returned_name or None,
            )
        )

    return GeneratedRecipe(
        name=str(data.get("name") or "").strip() or fallback_name(ingredient_names),
        ingredients=ingredients,
        steps=[str(s) for s in _as_list(data, "steps", required=True)],
        difficulty=_parse_difficulty(data.get("difficulty")),
        time=_parse_time(data.get("time")),
        tips=[str(t) for t in _as_list(data, "tips")],
    )


class RecipeGenerator:
    def __init__(
        self,
        config: LLMConfig,
        client: ChatCompletionClient | None = None,
        lookup: NameLookup = get_ingredient_name,
    ) -> None:
        self._client = client or ChatCompletionClient(config)
        self._lookup = lookup

    async def generate(self, ingredient_ids: Sequence[str], ingredient_names: Sequence[str]) -> GeneratedRecipe:
        """Generate one recipe from the selection. Never raises; failures return fallback_recipe()."""
        try:
            prompt = build_prompt(ingredient_names)
            content = await self._client.complete(
                prompt, prompt_name=f"recipe_generation.{RECIPE_GENERATION_PROMPT_VERSION}"
            )
            recipe = parse_generated_recipe(content, ingredient_ids, ingredient_names, self._lookup)
        except httpx.HTTPStatusError as e:
            logger.warning("generator.http_status status=%s error=%s", e.response.status_code, e)
        except httpx.HTTPError as e:
            logger.warning("generator.transport_failed error=%s", e)
        except ChatCompletionError as e:
            logger.warning("generator.bad_response error=%s", e)
        except ValueError as e:
            logger.warning("generator.parse_failed error=%s", e)
        except Exception as e:  # noqa: BLE001 - callers always get a renderable recipe
            logger.exception("generator.unexpected_error error=%s", e)
        else:
            logger.info(
                "generator.done name=%s ingredients=%s steps=%s",
                recipe.name,
                len(recipe.ingredients),
                len(recipe.steps),
            )
            return recipe
        logger.info("generator.fallback selected=%s", len(ingredient_ids))
        return fallback_recipe(ingredient_ids, ingredient_names)
