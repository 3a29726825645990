"""
Services layer - pure business logic, no Streamlit dependencies.
"""

from services.recipe_matcher import (
    IngredientMatch,
    RankedRecipe,
    RecipeCriteria,
    ingredient_match,
    pantry_names,
    search_recipes,
)
from services.recipe_service import RecipeDraft, RecipeService, RecipeValidationError
from services.pantry_service import group_by_category

__all__ = [
    "IngredientMatch",
    "RankedRecipe",
    "RecipeCriteria",
    "ingredient_match",
    "pantry_names",
    "search_recipes",
    "RecipeDraft",
    "RecipeService",
    "RecipeValidationError",
    "group_by_category",
]
