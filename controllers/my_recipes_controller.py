"""
My Recipes Controller - manages saved recipes and folders.

This controller handles:
- Folder creation, renaming, deletion and selection
- Listing saved recipes for the selected folder (or those without one)
- Moving saved recipes between folders and removing them
"""

import logging
from typing import Optional

from controllers.session import Session, get_app_state, resolve_session
from models.entities import Folder, Recipe
from models.repositories import FolderRepository, RecipeRepository

logger = logging.getLogger(__name__)


class MyRecipesController:
    """Controller for the saved-recipes view."""

    def __init__(self, session: Optional[Session] = None):
        self.session = resolve_session(session)
        state = get_app_state(self.session)
        self.recipes = RecipeRepository(state)
        self.folders = FolderRepository(state)
        self._init_session_state()

    def _init_session_state(self):
        """Initialize session state if not already set."""
        if "my_recipes" not in self.session:
            self.session["my_recipes"] = {
                "selected_folder_id": None,  # None = recipes without a folder
                "selected_recipe_id": None,
                "show_folder_form": False,
            }

    # ==========================================
    # Folders
    # ==========================================

    def get_folders(self) -> list[Folder]:
        return self.folders.get_all()

    def get_folder_count(self, folder_id: Optional[str]) -> int:
        """Number of saved recipes in a folder (None = without folder)."""
        return self.recipes.count_in_folder(folder_id)

    def get_selected_folder_id(self) -> Optional[str]:
        return self.session["my_recipes"]["selected_folder_id"]

    def get_selected_folder(self) -> Optional[Folder]:
        folder_id = self.get_selected_folder_id()
        return self.folders.get(folder_id) if folder_id else None

    def select_folder(self, folder_id: Optional[str]):
        """Show a folder's recipes, or recipes without a folder with None."""
        self.session["my_recipes"]["selected_folder_id"] = folder_id

    def is_folder_form_open(self) -> bool:
        return self.session["my_recipes"]["show_folder_form"]

    def open_folder_form(self):
        self.session["my_recipes"]["show_folder_form"] = True

    def close_folder_form(self):
        self.session["my_recipes"]["show_folder_form"] = False

    def add_folder(self, name: str) -> tuple[bool, Optional[str]]:
        """
        Create a folder and close the form.

        Returns (success, error_message)
        """
        try:
            folder = self.folders.add(name)
        except ValueError as e:
            logger.warning(f"Rejected folder: {e}")
            return False, str(e)

        logger.info(f"Created folder '{folder.name}'")
        self.close_folder_form()
        return True, None

    def rename_folder(self, folder_id: str, name: str) -> tuple[bool, Optional[str]]:
        """
        Give a folder a new name.

        Returns (success, error_message)
        """
        try:
            found = self.folders.rename(folder_id, name)
        except ValueError as e:
            logger.warning(f"Rejected folder rename: {e}")
            return False, str(e)

        if not found:
            return False, "Ordner nicht gefunden."
        logger.info(f"Renamed folder {folder_id} to '{name.strip()}'")
        return True, None

    def delete_folder(self, folder_id: str):
        """Delete a folder; its recipes stay saved without a folder."""
        unassigned = self.folders.remove(folder_id)
        logger.info(f"Deleted folder {folder_id}, unassigned {unassigned} recipe(s)")
        if self.get_selected_folder_id() == folder_id:
            self.select_folder(None)

    # ==========================================
    # Saved recipes
    # ==========================================

    def get_recipes(self) -> list[Recipe]:
        """Get saved recipes in the selected folder."""
        return self.recipes.in_folder(self.get_selected_folder_id())

    def get_total_saved(self) -> int:
        return len(self.recipes.get_all_saved())

    def move_recipe(self, recipe_id: str, folder_id: Optional[str]):
        """Assign a saved recipe to a folder, or to none."""
        if folder_id and not self.folders.get(folder_id):
            logger.warning(f"Ignored move of {recipe_id} to unknown folder {folder_id}")
            return
        self.recipes.assign_folder(recipe_id, folder_id)

    def remove_recipe(self, recipe_id: str):
        """Remove a recipe from the saved collection."""
        if self.recipes.remove_saved(recipe_id):
            logger.info(f"Removed saved recipe {recipe_id}")
        if self.session["my_recipes"]["selected_recipe_id"] == recipe_id:
            self.select_recipe(None)

    def select_recipe(self, recipe_id: Optional[str]):
        """Open the detail view for a saved recipe, or close it with None."""
        self.session["my_recipes"]["selected_recipe_id"] = recipe_id

    def get_selected_recipe(self) -> Optional[Recipe]:
        recipe_id = self.session["my_recipes"]["selected_recipe_id"]
        return self.recipes.get_saved(recipe_id) if recipe_id else None
