"""
Repositories - Data access layer over the in-memory session state.
"""

from models.repositories.pantry_repository import PantryRepository
from models.repositories.recipe_repository import RecipeRepository
from models.repositories.folder_repository import FolderRepository

__all__ = ["PantryRepository", "RecipeRepository", "FolderRepository"]
