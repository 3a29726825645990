"""
Pantry Service - grouping and formatting of pantry ingredients.

This service is pure Python with no Streamlit dependencies.
"""

from typing import Iterable

from models.entities import Ingredient


def group_by_category(ingredients: Iterable[Ingredient]) -> dict[str, list[Ingredient]]:
    """
    Group ingredients by category.

    Categories appear in the order their first ingredient was added,
    ingredients in insertion order within each category.
    """
    grouped: dict[str, list[Ingredient]] = {}
    for ingredient in ingredients:
        grouped.setdefault(ingredient.category, []).append(ingredient)
    return grouped


def format_group_heading(category: str, ingredients: list[Ingredient]) -> str:
    """Heading for a category group, e.g. 'Gemüse (2)'."""
    return f"{category} ({len(ingredients)})"
