"""
Recipe Service - handles recipe authoring and formatting.

This service is pure Python with no Streamlit dependencies.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from pydantic import ValidationError

from models.entities import Recipe
from models.options import DEFAULT_DIFFICULTY, DEFAULT_RECIPE_CATEGORY

logger = logging.getLogger(__name__)

FIELD_LABELS = {
    "title": "Titel",
    "description": "Beschreibung",
    "cooking_time": "Zubereitungszeit",
    "difficulty": "Schwierigkeit",
    "category": "Kategorie",
    "calories": "Kalorien",
    "dietary": "Ernährung",
}


class RecipeValidationError(ValueError):
    """Raised when a recipe draft cannot become a recipe."""


@dataclass
class RecipeDraft:
    """Form contents of the recipe author view."""
    title: str = ""
    description: str = ""
    cooking_time: int = 30
    difficulty: str = DEFAULT_DIFFICULTY
    category: str = DEFAULT_RECIPE_CATEGORY
    calories: Optional[int] = None
    dietary: list[str] = field(default_factory=list)
    ingredients: list[str] = field(default_factory=lambda: [""])
    instructions: list[str] = field(default_factory=lambda: [""])


def non_blank(values: list[str]) -> list[str]:
    """Drop entries that are empty or whitespace only."""
    return [v for v in values if v.strip()]


def describe_validation_error(error: ValidationError) -> str:
    """User-facing message naming the first rejected field."""
    first = error.errors()[0]
    name = str(first["loc"][0]) if first.get("loc") else ""
    return f"Ungültiger Wert für {FIELD_LABELS.get(name, name)}."


class RecipeService:
    """Service for recipe authoring and formatting."""

    def build_recipe(self, draft: RecipeDraft) -> Recipe:
        """
        Turn a form draft into a new user-created recipe.

        Blank ingredient and instruction rows are dropped; the remaining
        rows keep their text and order.

        Raises:
            RecipeValidationError: If the title is blank, no ingredient or
                no instruction remains, or a field is out of range
                (negative time or calories, unknown difficulty)
        """
        title = draft.title.strip()
        ingredients = non_blank(draft.ingredients)
        instructions = non_blank(draft.instructions)

        if not title:
            raise RecipeValidationError("Bitte gib einen Titel ein.")
        if not ingredients:
            raise RecipeValidationError("Bitte füge mindestens eine Zutat hinzu.")
        if not instructions:
            raise RecipeValidationError("Bitte füge mindestens einen Zubereitungsschritt hinzu.")

        try:
            return Recipe(
                title=title,
                description=draft.description.strip(),
                ingredients=ingredients,
                instructions=instructions,
                cooking_time=draft.cooking_time,
                difficulty=draft.difficulty,
                category=draft.category,
                dietary=list(draft.dietary),
                calories=draft.calories,
                is_user_created=True,
            )
        except ValidationError as e:
            logger.debug(f"Recipe draft failed model validation: {e}")
            raise RecipeValidationError(describe_validation_error(e)) from e

    def format_meta(self, recipe: Recipe) -> str:
        """One-line summary: time, difficulty, category and calories."""
        parts = [f"{recipe.cooking_time} min", recipe.difficulty, recipe.category]
        if recipe.calories:
            parts.append(f"{recipe.calories} kcal")
        return " | ".join(parts)
