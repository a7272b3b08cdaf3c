from typing import Iterable, Sequence

from recipe_finder.logging import get_logger
from recipe_finder.schemas.recipe import MatchedRecipe, Recipe

logger = get_logger(__name__)


def _annotate(recipe: Recipe, match_count: int) -> MatchedRecipe:
    total = len(recipe.ingredients)
    percentage = match_count / total if total else 0.0
    return MatchedRecipe(
        **recipe.model_dump(),
        match_count=match_count,
        match_percentage=percentage,
    )


def count_matches(selected: set[str], recipe: Recipe) -> int:
    """Number of distinct recipe ingredient ids present in the selection."""
    return len(selected & {ref.id for ref in recipe.ingredients})


def match_recipes(selected_ids: Iterable[str], catalog: Sequence[Recipe]) -> list[MatchedRecipe]:
    """
    Rank catalog recipes by ingredient overlap with the selection.
    Empty selection: the whole catalog in catalog order, all scored 0.
    Otherwise: only recipes sharing an ingredient, by percentage then count (stable).
    """
    selected = set(selected_ids)
    if not selected:
        return [_annotate(recipe, 0) for recipe in catalog]

    matched = []
    for recipe in catalog:
        count = count_matches(selected, recipe)
        if count == 0:
            continue
        matched.append(_annotate(recipe, count))

    # sorted() is stable, so equal keys keep catalog order
    matched = sorted(matched, key=lambda r: (-r.match_percentage, -r.match_count))
    logger.debug("matcher.done selected=%s candidates=%s", len(selected), len(matched))
    return matched
