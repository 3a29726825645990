"""
Domain Entities

Pydantic models for everything the app keeps in a browser session.

Entity Relationships:
    Pantry (*) Ingredient          (matched to recipes by name only)
    Catalog (*) Recipe
    My Recipes (*) Recipe ──> (0..1) Folder

Recipe ingredients are free-text names, never references to pantry
Ingredient entities. A saved recipe points at a folder by id, and that
reference is cleared when the folder is deleted.
"""

import uuid
from typing import Literal, Optional

from pydantic import BaseModel, Field

from models.options import DEFAULT_DIFFICULTY, DEFAULT_INGREDIENT_CATEGORY, DEFAULT_RECIPE_CATEGORY

Difficulty = Literal["Einfach", "Mittel", "Schwer"]


def new_id() -> str:
    """Generate a collision-free identifier."""
    return uuid.uuid4().hex


class Ingredient(BaseModel):
    """
    An ingredient the user owns.

    Quantity and unit are free text ("1/2", "2-3", "Stück") and only
    shown together when both are present.
    """
    id: str = Field(default_factory=new_id)
    name: str
    category: str = DEFAULT_INGREDIENT_CATEGORY
    quantity: Optional[str] = None
    unit: Optional[str] = None

    @property
    def amount(self) -> Optional[str]:
        """Display amount, e.g. '500 g'."""
        if self.quantity and self.unit:
            return f"{self.quantity} {self.unit}"
        return None


class Recipe(BaseModel):
    """
    A recipe in the catalog or in the saved collection.

    The saved collection holds copies, so folder_id is only ever set on
    saved recipes.
    """
    id: str = Field(default_factory=new_id)
    title: str
    description: str = ""
    ingredients: list[str] = Field(default_factory=list)
    instructions: list[str] = Field(default_factory=list)
    cooking_time: int = Field(default=30, ge=0)  # Minutes
    difficulty: Difficulty = DEFAULT_DIFFICULTY
    category: str = DEFAULT_RECIPE_CATEGORY
    dietary: list[str] = Field(default_factory=list)
    calories: Optional[int] = Field(default=None, ge=0)
    is_user_created: bool = False
    folder_id: Optional[str] = None


class Folder(BaseModel):
    """A user-defined grouping for saved recipes."""
    id: str = Field(default_factory=new_id)
    name: str
