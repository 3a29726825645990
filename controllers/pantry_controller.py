"""
Pantry Controller - manages the user's ingredients.

This controller handles:
- Adding, editing and removing pantry ingredients
- Grouping the pantry by category for display
- The open/closed state of the add-ingredient form
"""

import logging
from typing import Optional

from controllers.session import Session, get_app_state, resolve_session
from models.entities import Ingredient
from models.options import DEFAULT_INGREDIENT_CATEGORY, INGREDIENT_CATEGORIES
from models.repositories import PantryRepository
from services.pantry_service import group_by_category

logger = logging.getLogger(__name__)


class PantryController:
    """Controller for pantry management."""

    def __init__(self, session: Optional[Session] = None):
        self.session = resolve_session(session)
        self.pantry = PantryRepository(get_app_state(self.session))
        self._init_session_state()

    def _init_session_state(self):
        """Initialize session state if not already set."""
        if "pantry" not in self.session:
            self.session["pantry"] = {
                "show_form": False,
            }

    # Form state
    def is_form_open(self) -> bool:
        """Check if the add-ingredient form is shown."""
        return self.session["pantry"]["show_form"]

    def open_form(self):
        self.session["pantry"]["show_form"] = True

    def close_form(self):
        self.session["pantry"]["show_form"] = False

    # Queries
    def get_categories(self) -> list[str]:
        """Get the selectable pantry categories."""
        return INGREDIENT_CATEGORIES

    def get_default_category(self) -> str:
        return DEFAULT_INGREDIENT_CATEGORY

    def get_ingredients(self) -> list[Ingredient]:
        """Get all pantry ingredients."""
        return self.pantry.get_all()

    def get_grouped_ingredients(self) -> dict[str, list[Ingredient]]:
        """Get pantry ingredients grouped by category."""
        return group_by_category(self.pantry.get_all())

    # Mutations
    def add_ingredient(
        self,
        name: str,
        category: str,
        quantity: str = "",
        unit: str = "",
    ) -> tuple[bool, Optional[str]]:
        """
        Add an ingredient and close the form.

        Returns (success, error_message)
        """
        try:
            ingredient = self.pantry.add(name, category, quantity, unit)
        except ValueError as e:
            logger.warning(f"Rejected pantry ingredient: {e}")
            return False, str(e)

        logger.info(f"Added pantry ingredient '{ingredient.name}' ({ingredient.category})")
        self.close_form()
        return True, None

    def update_ingredient(
        self,
        ingredient_id: str,
        category: str,
        quantity: str = "",
        unit: str = "",
    ) -> bool:
        """
        Change the category and amount of an existing ingredient.

        The name stays as it is. Blank quantity or unit clears it.

        Returns True if the ingredient exists.
        """
        ingredient = self.pantry.get(ingredient_id)
        if not ingredient:
            logger.warning(f"Ignored update of unknown pantry ingredient {ingredient_id}")
            return False

        updated = ingredient.model_copy(update={
            "category": category,
            "quantity": (quantity or "").strip() or None,
            "unit": (unit or "").strip() or None,
        })
        self.pantry.update(updated)
        logger.info(f"Updated pantry ingredient '{updated.name}' ({updated.category})")
        return True

    def remove_ingredient(self, ingredient_id: str):
        """Remove an ingredient from the pantry."""
        if self.pantry.remove(ingredient_id):
            logger.info(f"Removed pantry ingredient {ingredient_id}")
