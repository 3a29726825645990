"""
Controllers layer - orchestration and session state management.
"""

from controllers.pantry_controller import PantryController
from controllers.recipe_search_controller import RecipeSearchController
from controllers.recipe_creator_controller import RecipeCreatorController
from controllers.my_recipes_controller import MyRecipesController

__all__ = [
    "PantryController",
    "RecipeSearchController",
    "RecipeCreatorController",
    "MyRecipesController",
]
