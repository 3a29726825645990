"""
Recipe Search Controller - manages the recipe browser.

This controller handles:
- Search text and filter criteria (kept in session state)
- Running the matcher against the current catalog and pantry
- The selected recipe for the detail view
- Saving recipes to "my recipes"
"""

import logging
from dataclasses import replace
from typing import Optional

from controllers.session import Session, get_app_state, resolve_session
from models.options import ANY_OPTION, DIETARY_OPTIONS, DIFFICULTIES, RECIPE_CATEGORIES
from models.repositories import PantryRepository, RecipeRepository
from services.recipe_matcher import (
    RankedRecipe,
    RecipeCriteria,
    ingredient_match,
    pantry_names,
    search_recipes,
)

logger = logging.getLogger(__name__)


class RecipeSearchController:
    """Controller for searching, filtering and saving recipes."""

    def __init__(self, session: Optional[Session] = None):
        self.session = resolve_session(session)
        state = get_app_state(self.session)
        self.recipes = RecipeRepository(state)
        self.pantry = PantryRepository(state)
        self._init_session_state()

    def _init_session_state(self):
        """Initialize session state if not already set."""
        if "recipe_search" not in self.session:
            self.session["recipe_search"] = {
                "criteria": RecipeCriteria(),
                "show_filters": False,
                "selected_recipe_id": None,
            }

    # ==========================================
    # Options
    # ==========================================

    def get_category_options(self) -> list[str]:
        """Category filter options, 'any' first."""
        return [ANY_OPTION] + RECIPE_CATEGORIES

    def get_difficulty_options(self) -> list[str]:
        """Difficulty filter options, 'any' first."""
        return [ANY_OPTION] + DIFFICULTIES

    def get_dietary_options(self) -> list[str]:
        return DIETARY_OPTIONS

    # ==========================================
    # Criteria
    # ==========================================

    def get_criteria(self) -> RecipeCriteria:
        """Get the current search text and filters."""
        return self.session["recipe_search"]["criteria"]

    def _set_criteria(self, criteria: RecipeCriteria):
        self.session["recipe_search"]["criteria"] = criteria

    def set_search_text(self, text: str):
        self._set_criteria(replace(self.get_criteria(), search_text=text or ""))

    def set_category(self, category: str):
        self._set_criteria(replace(self.get_criteria(), category=category))

    def set_difficulty(self, difficulty: str):
        self._set_criteria(replace(self.get_criteria(), difficulty=difficulty))

    def set_max_cooking_time(self, minutes: Optional[int]):
        """Set the inclusive time limit; None or 0 removes it."""
        self._set_criteria(replace(self.get_criteria(), max_cooking_time=minutes or None))

    def set_dietary(self, tags: list[str]):
        self._set_criteria(replace(self.get_criteria(), dietary=frozenset(tags)))

    def clear_filters(self):
        """Reset all filters, keeping the search text."""
        self._set_criteria(self.get_criteria().cleared())

    def has_active_filters(self) -> bool:
        """Check if any filter is applied or the filter panel is open."""
        return self.is_filter_panel_open() or self.get_criteria().is_active()

    # ==========================================
    # Filter panel
    # ==========================================

    def is_filter_panel_open(self) -> bool:
        return self.session["recipe_search"]["show_filters"]

    def toggle_filter_panel(self):
        state = self.session["recipe_search"]
        state["show_filters"] = not state["show_filters"]

    # ==========================================
    # Results
    # ==========================================

    def get_results(self) -> list[RankedRecipe]:
        """Get the filtered catalog, ranked by pantry coverage."""
        return search_recipes(
            self.recipes.get_all(),
            pantry_names(self.pantry.get_all()),
            self.get_criteria(),
        )

    def get_pantry_size(self) -> int:
        return len(self.pantry.get_all())

    # ==========================================
    # Detail view
    # ==========================================

    def select_recipe(self, recipe_id: Optional[str]):
        """Open the detail view for a recipe, or close it with None."""
        self.session["recipe_search"]["selected_recipe_id"] = recipe_id

    def get_selected(self) -> Optional[RankedRecipe]:
        """Get the recipe shown in the detail view with its pantry match."""
        recipe_id = self.session["recipe_search"]["selected_recipe_id"]
        if not recipe_id:
            return None
        recipe = self.recipes.get(recipe_id)
        if not recipe:
            return None
        return RankedRecipe(
            recipe=recipe,
            match=ingredient_match(recipe, pantry_names(self.pantry.get_all())),
        )

    # ==========================================
    # Saving
    # ==========================================

    def save_recipe(self, recipe_id: str) -> bool:
        """
        Add a catalog recipe to "my recipes".

        Returns True if newly saved; saving twice is a no-op.
        """
        recipe = self.recipes.get(recipe_id)
        if not recipe:
            return False
        saved = self.recipes.save(recipe)
        if saved:
            logger.info(f"Saved recipe '{recipe.title}' to my recipes")
        return saved

    def is_saved(self, recipe_id: str) -> bool:
        return self.recipes.is_saved(recipe_id)
