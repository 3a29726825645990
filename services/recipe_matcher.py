"""
Recipe Matcher - search, filter and rank the recipe catalog.

This service is pure Python with no Streamlit dependencies.

Ranking puts the recipes the user can most fully cook with the pantry at
the top. Matching is lexical: a recipe ingredient counts as available
when its lowercase text equals the lowercase name of a pantry ingredient.
No pluralisation, diacritic folding or unit stripping is applied.

Inputs are either immutable (criteria, pantry frozenset) or read-only, so
search_recipes is safe to memoize on (catalog, pantry, criteria).
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence

from models.entities import Ingredient, Recipe
from models.options import ANY_OPTION

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IngredientMatch:
    """How much of a recipe the pantry covers."""
    matches: int
    total: int
    percentage: int
    available: tuple[str, ...] = ()
    missing: tuple[str, ...] = ()


@dataclass(frozen=True)
class RecipeCriteria:
    """Search text plus filter settings for the recipe browser."""
    search_text: str = ""
    category: str = ANY_OPTION
    difficulty: str = ANY_OPTION
    max_cooking_time: Optional[int] = None  # Minutes, inclusive
    dietary: frozenset[str] = field(default_factory=frozenset)

    def is_active(self) -> bool:
        """Check if any filter (search text aside) narrows the results."""
        return (
            self.category != ANY_OPTION
            or self.difficulty != ANY_OPTION
            or bool(self.max_cooking_time)
            or bool(self.dietary)
        )

    def cleared(self) -> "RecipeCriteria":
        """Reset all filters but keep the search text."""
        return RecipeCriteria(search_text=self.search_text)


@dataclass(frozen=True)
class RankedRecipe:
    """A recipe with its pantry match, as shown in the browser."""
    recipe: Recipe
    match: IngredientMatch


def pantry_names(ingredients: Iterable[Ingredient]) -> frozenset[str]:
    """Build the case-insensitive pantry name set."""
    return frozenset(i.name.lower() for i in ingredients)


def _percentage(matches: int, total: int) -> int:
    """Round matches/total to a whole percent, halves rounding up."""
    if total == 0:
        return 0
    return (200 * matches + total) // (2 * total)


def ingredient_match(recipe: Recipe, pantry: frozenset[str]) -> IngredientMatch:
    """
    Match a recipe's ingredients against the pantry.

    Args:
        recipe: Recipe to check
        pantry: Lowercase pantry names (see pantry_names)

    Returns:
        IngredientMatch; a recipe without ingredients matches 0 of 0 at 0%
    """
    available = tuple(i for i in recipe.ingredients if i.lower() in pantry)
    missing = tuple(i for i in recipe.ingredients if i.lower() not in pantry)
    total = len(recipe.ingredients)
    return IngredientMatch(
        matches=len(available),
        total=total,
        percentage=_percentage(len(available), total),
        available=available,
        missing=missing,
    )


# ==========================================
# Filter predicates (applied in this order)
# ==========================================

def matches_search(recipe: Recipe, search_text: str) -> bool:
    """Case-insensitive substring match on title or description."""
    needle = search_text.lower()
    return needle in recipe.title.lower() or needle in recipe.description.lower()


def matches_category(recipe: Recipe, category: str) -> bool:
    return category == ANY_OPTION or recipe.category == category


def matches_difficulty(recipe: Recipe, difficulty: str) -> bool:
    return difficulty == ANY_OPTION or recipe.difficulty == difficulty


def matches_cooking_time(recipe: Recipe, max_cooking_time: Optional[int]) -> bool:
    # 0 and None both mean "no limit"
    return not max_cooking_time or recipe.cooking_time <= max_cooking_time


def matches_dietary(recipe: Recipe, dietary: frozenset[str]) -> bool:
    """Recipe must carry every required tag."""
    return dietary.issubset(recipe.dietary)


def matches_criteria(recipe: Recipe, criteria: RecipeCriteria) -> bool:
    """Check a recipe against every filter."""
    return (
        matches_search(recipe, criteria.search_text)
        and matches_category(recipe, criteria.category)
        and matches_difficulty(recipe, criteria.difficulty)
        and matches_cooking_time(recipe, criteria.max_cooking_time)
        and matches_dietary(recipe, criteria.dietary)
    )


def filter_recipes(catalog: Sequence[Recipe], criteria: RecipeCriteria) -> list[Recipe]:
    """Keep the recipes passing every filter, in catalog order."""
    return [r for r in catalog if matches_criteria(r, criteria)]


def rank_recipes(recipes: Sequence[Recipe], pantry: frozenset[str]) -> list[RankedRecipe]:
    """
    Sort recipes by number of pantry matches, most first.

    The sort is stable: recipes with equal match counts keep their order.
    """
    ranked = [RankedRecipe(recipe=r, match=ingredient_match(r, pantry)) for r in recipes]
    return sorted(ranked, key=lambda rr: -rr.match.matches)


def search_recipes(
    catalog: Sequence[Recipe],
    pantry: frozenset[str],
    criteria: RecipeCriteria,
) -> list[RankedRecipe]:
    """
    Filter the catalog by the criteria, then rank by pantry coverage.

    Args:
        catalog: All browsable recipes, in display order
        pantry: Lowercase pantry names (see pantry_names)
        criteria: Search text and filters

    Returns:
        Ranked recipes with their match details
    """
    results = rank_recipes(filter_recipes(catalog, criteria), pantry)
    logger.debug(f"Recipe search kept {len(results)} of {len(catalog)} recipes")
    return results
