"""
Reusable UI components.
"""

from views.components.recipe_card import (
    render_difficulty_badge,
    render_match_summary,
    render_recipe_card,
    render_recipe_detail,
)
from views.components.filter_panel import render_filter_panel
from views.components.ingredient_group import render_ingredient_group

# Sidebar components
from views.components.sidebar import render_folder_sidebar

__all__ = [
    # Recipes
    "render_difficulty_badge",
    "render_match_summary",
    "render_recipe_card",
    "render_recipe_detail",
    "render_filter_panel",
    # Pantry
    "render_ingredient_group",
    # Sidebar
    "render_folder_sidebar",
]
