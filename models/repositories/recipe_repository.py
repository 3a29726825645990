"""
Recipe Repository - Data access for the catalog and saved recipes.

The catalog holds every browsable recipe (seeded and user-authored).
The saved collection ("my recipes") holds copies of catalog recipes,
each optionally assigned to a folder.
"""

from typing import Optional

from models.entities import Recipe
from models.state import AppState


def _replace(recipes: list[Recipe], recipe: Recipe) -> tuple[list[Recipe], bool]:
    """Replace the recipe with the same ID, returning the new list and whether it was found."""
    found = False
    updated = []
    for existing in recipes:
        if existing.id == recipe.id:
            updated.append(recipe)
            found = True
        else:
            updated.append(existing)
    return updated, found


class RecipeRepository:
    """Repository for catalog and saved-recipe operations."""

    def __init__(self, state: AppState):
        """Initialize with the session's application state."""
        self.state = state

    # ==========================================
    # Catalog
    # ==========================================

    def add(self, recipe: Recipe) -> Recipe:
        """Append a recipe to the catalog."""
        self.state.recipes.append(recipe)
        return recipe

    def get(self, recipe_id: str) -> Optional[Recipe]:
        """Get a catalog recipe by ID."""
        return next((r for r in self.state.recipes if r.id == recipe_id), None)

    def get_all(self) -> list[Recipe]:
        """Get the full catalog in insertion order."""
        return list(self.state.recipes)

    # ==========================================
    # Saved Recipes
    # ==========================================

    def save(self, recipe: Recipe) -> bool:
        """
        Add a recipe to the saved collection.

        Saving an ID that is already present is a no-op.

        Returns:
            True if the recipe was added, False if it was already saved
        """
        if self.is_saved(recipe.id):
            return False
        self.state.my_recipes.append(recipe.model_copy(deep=True))
        return True

    def is_saved(self, recipe_id: str) -> bool:
        """Check if a recipe ID is in the saved collection."""
        return any(r.id == recipe_id for r in self.state.my_recipes)

    def get_saved(self, recipe_id: str) -> Optional[Recipe]:
        """Get a saved recipe by ID."""
        return next((r for r in self.state.my_recipes if r.id == recipe_id), None)

    def get_all_saved(self) -> list[Recipe]:
        """Get all saved recipes in the order they were saved."""
        return list(self.state.my_recipes)

    def remove_saved(self, recipe_id: str) -> bool:
        """Remove a recipe from the saved collection. Returns True if removed."""
        before = len(self.state.my_recipes)
        self.state.my_recipes = [r for r in self.state.my_recipes if r.id != recipe_id]
        return len(self.state.my_recipes) < before

    def assign_folder(self, recipe_id: str, folder_id: Optional[str]) -> bool:
        """
        Move a saved recipe into a folder, or out of any folder with None.

        Returns:
            True if the saved recipe exists
        """
        recipe = self.get_saved(recipe_id)
        if not recipe:
            return False
        self.state.my_recipes, _ = _replace(
            self.state.my_recipes,
            recipe.model_copy(update={"folder_id": folder_id}),
        )
        return True

    def in_folder(self, folder_id: Optional[str]) -> list[Recipe]:
        """
        Get saved recipes in a folder.

        Args:
            folder_id: Folder ID, or None for recipes without a folder
        """
        if folder_id is None:
            return [r for r in self.state.my_recipes if not r.folder_id]
        return [r for r in self.state.my_recipes if r.folder_id == folder_id]

    def count_in_folder(self, folder_id: Optional[str]) -> int:
        """Count saved recipes in a folder (None = without folder)."""
        return len(self.in_folder(folder_id))

    def clear_folder(self, folder_id: str) -> int:
        """
        Remove a folder assignment from every saved recipe pointing at it.

        Returns:
            Number of recipes that were unassigned
        """
        cleared = 0
        updated = []
        for recipe in self.state.my_recipes:
            if recipe.folder_id == folder_id:
                updated.append(recipe.model_copy(update={"folder_id": None}))
                cleared += 1
            else:
                updated.append(recipe)
        self.state.my_recipes = updated
        return cleared
