"""
Pantry Repository - Data access for the user's ingredients.

Operates on the pantry list of an AppState in insertion order.
"""

from typing import Optional

from models.entities import Ingredient
from models.state import AppState


class PantryRepository:
    """Repository for pantry ingredient operations."""

    def __init__(self, state: AppState):
        """Initialize with the session's application state."""
        self.state = state

    def add(
        self,
        name: str,
        category: str,
        quantity: Optional[str] = None,
        unit: Optional[str] = None,
    ) -> Ingredient:
        """
        Add an ingredient to the pantry.

        Args:
            name: Ingredient name (required, trimmed)
            category: One of the pantry categories
            quantity: Optional free-text amount; blank becomes None
            unit: Optional free-text unit; blank becomes None

        Raises:
            ValueError: If the name is blank
        """
        name = (name or "").strip()
        if not name:
            raise ValueError("Bitte gib einen Namen für die Zutat ein.")

        ingredient = Ingredient(
            name=name,
            category=category,
            quantity=(quantity or "").strip() or None,
            unit=(unit or "").strip() or None,
        )
        self.state.ingredients.append(ingredient)
        return ingredient

    def get(self, ingredient_id: str) -> Optional[Ingredient]:
        """Get an ingredient by ID."""
        return next((i for i in self.state.ingredients if i.id == ingredient_id), None)

    def get_all(self) -> list[Ingredient]:
        """Get all ingredients in insertion order."""
        return list(self.state.ingredients)

    def names(self) -> list[str]:
        """Get the names of all ingredients."""
        return [i.name for i in self.state.ingredients]

    def update(self, ingredient: Ingredient) -> bool:
        """Replace the ingredient with the same ID. Returns True if found."""
        found = False
        updated = []
        for existing in self.state.ingredients:
            if existing.id == ingredient.id:
                updated.append(ingredient)
                found = True
            else:
                updated.append(existing)
        self.state.ingredients = updated
        return found

    def remove(self, ingredient_id: str) -> bool:
        """Remove an ingredient by ID. Returns True if something was removed."""
        before = len(self.state.ingredients)
        self.state.ingredients = [i for i in self.state.ingredients if i.id != ingredient_id]
        return len(self.state.ingredients) < before
