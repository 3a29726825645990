"""
Application State - everything one browser session owns.

A single AppState instance is stored in Streamlit session state and
shared by all pages. Views never touch its lists directly; mutations go
through the repositories in models.repositories.
"""

from pydantic import BaseModel, Field

from models.entities import Folder, Ingredient, Recipe
from models.seed import seed_folders, seed_ingredients, seed_recipes


class AppState(BaseModel):
    """Root state container for a session."""
    ingredients: list[Ingredient] = Field(default_factory=list)  # Pantry
    recipes: list[Recipe] = Field(default_factory=list)  # Catalog
    my_recipes: list[Recipe] = Field(default_factory=list)  # Saved copies
    folders: list[Folder] = Field(default_factory=list)

    @classmethod
    def seeded(cls) -> "AppState":
        """Create a state pre-filled with the demo pantry, catalog and folders."""
        return cls(
            ingredients=seed_ingredients(),
            recipes=seed_recipes(),
            folders=seed_folders(),
        )
