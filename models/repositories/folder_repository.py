"""
Folder Repository - Data access for saved-recipe folders.
"""

from typing import Optional

from models.entities import Folder
from models.repositories.recipe_repository import RecipeRepository
from models.state import AppState


class FolderRepository:
    """Repository for folder operations."""

    def __init__(self, state: AppState):
        """Initialize with the session's application state."""
        self.state = state
        self.recipes = RecipeRepository(state)

    def add(self, name: str) -> Folder:
        """
        Create a folder.

        Raises:
            ValueError: If the name is blank
        """
        name = (name or "").strip()
        if not name:
            raise ValueError("Bitte gib einen Ordnernamen ein.")
        folder = Folder(name=name)
        self.state.folders.append(folder)
        return folder

    def get(self, folder_id: str) -> Optional[Folder]:
        """Get a folder by ID."""
        return next((f for f in self.state.folders if f.id == folder_id), None)

    def get_all(self) -> list[Folder]:
        """Get all folders in creation order."""
        return list(self.state.folders)

    def rename(self, folder_id: str, name: str) -> bool:
        """
        Rename a folder. Returns True if the folder exists.

        Raises:
            ValueError: If the new name is blank
        """
        name = (name or "").strip()
        if not name:
            raise ValueError("Bitte gib einen Ordnernamen ein.")
        found = False
        updated = []
        for folder in self.state.folders:
            if folder.id == folder_id:
                updated.append(folder.model_copy(update={"name": name}))
                found = True
            else:
                updated.append(folder)
        self.state.folders = updated
        return found

    def remove(self, folder_id: str) -> int:
        """
        Delete a folder and clear it from every saved recipe.

        Recipes in the folder are kept, just without a folder.

        Returns:
            Number of recipes that were unassigned
        """
        self.state.folders = [f for f in self.state.folders if f.id != folder_id]
        return self.recipes.clear_folder(folder_id)
