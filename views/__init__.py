"""
Views layer - UI presentation components.
"""

from views.home_view import HomeView
from views.pantry_view import PantryView
from views.recipe_search_view import RecipeSearchView
from views.recipe_creator_view import RecipeCreatorView
from views.my_recipes_view import MyRecipesView

__all__ = ["HomeView", "PantryView", "RecipeSearchView", "RecipeCreatorView", "MyRecipesView"]
