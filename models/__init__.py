"""
Models Package - Domain Entities and Session State

This package contains the pydantic models the app keeps in memory for
the lifetime of a browser session.
"""

from models.entities import Folder, Ingredient, Recipe, new_id
from models.state import AppState

__all__ = [
    # Entities
    "Folder",
    "Ingredient",
    "Recipe",
    "new_id",
    # State
    "AppState",
]
