"""
Recipe Creator Controller - manages the recipe author form.

This controller handles:
- The form draft, including the dynamic ingredient and instruction rows
- Picking ingredients from the pantry
- Validating and submitting new recipes to the catalog
- The one-shot success notice after a submission
"""

import logging
from typing import Optional

from config.settings import get_settings
from controllers.session import Session, get_app_state, resolve_session
from models.options import DIETARY_OPTIONS, DIFFICULTIES, RECIPE_CATEGORIES
from models.repositories import PantryRepository, RecipeRepository
from services.recipe_service import RecipeDraft, RecipeService, RecipeValidationError

logger = logging.getLogger(__name__)

DRAFT_FIELDS = {"title", "description", "cooking_time", "difficulty", "category", "calories"}


class RecipeCreatorController:
    """Controller for authoring new recipes."""

    def __init__(self, session: Optional[Session] = None):
        self.session = resolve_session(session)
        state = get_app_state(self.session)
        self.recipes = RecipeRepository(state)
        self.pantry = PantryRepository(state)
        self.service = RecipeService()
        self._init_session_state()

    def _new_draft(self) -> RecipeDraft:
        return RecipeDraft(cooking_time=get_settings().default_cooking_time)

    def _init_session_state(self):
        """Initialize session state if not already set."""
        if "recipe_creator" not in self.session:
            self.session["recipe_creator"] = {
                "draft": self._new_draft(),
                "form_key": 0,
                "show_success": False,
            }

    # ==========================================
    # Options
    # ==========================================

    def get_difficulties(self) -> list[str]:
        return DIFFICULTIES

    def get_categories(self) -> list[str]:
        return RECIPE_CATEGORIES

    def get_dietary_options(self) -> list[str]:
        return DIETARY_OPTIONS

    def get_pantry_names(self) -> list[str]:
        """Names offered by the 'from your pantry' picker."""
        return self.pantry.names()

    # ==========================================
    # Draft state
    # ==========================================

    def get_draft(self) -> RecipeDraft:
        return self.session["recipe_creator"]["draft"]

    def get_form_key(self) -> int:
        """Get current form key for widget uniqueness."""
        return self.session["recipe_creator"]["form_key"]

    def _bump_form_key(self):
        """Increment form key so row widgets are rebuilt from the draft."""
        self.session["recipe_creator"]["form_key"] += 1

    def update_details(self, **fields):
        """
        Update scalar draft fields (title, description, cooking_time,
        difficulty, category, calories).

        Raises:
            ValueError: For an unknown field name
        """
        unknown = set(fields) - DRAFT_FIELDS
        if unknown:
            raise ValueError(f"Unknown draft fields: {', '.join(sorted(unknown))}")
        draft = self.get_draft()
        for name, value in fields.items():
            setattr(draft, name, value)

    def toggle_dietary(self, tag: str):
        draft = self.get_draft()
        if tag in draft.dietary:
            draft.dietary = [d for d in draft.dietary if d != tag]
        else:
            draft.dietary = draft.dietary + [tag]

    # Ingredient rows
    def add_ingredient_row(self):
        self.get_draft().ingredients.append("")

    def remove_ingredient_row(self, index: int):
        draft = self.get_draft()
        draft.ingredients = [v for i, v in enumerate(draft.ingredients) if i != index]
        self._bump_form_key()

    def update_ingredient(self, index: int, value: str):
        self.get_draft().ingredients[index] = value

    def add_ingredient_from_pantry(self, name: str):
        """Put a pantry ingredient into the first blank row, or a new row."""
        draft = self.get_draft()
        for index, value in enumerate(draft.ingredients):
            if not value.strip():
                draft.ingredients[index] = name
                break
        else:
            draft.ingredients.append(name)
        self._bump_form_key()

    # Instruction rows
    def add_instruction_row(self):
        self.get_draft().instructions.append("")

    def remove_instruction_row(self, index: int):
        draft = self.get_draft()
        draft.instructions = [v for i, v in enumerate(draft.instructions) if i != index]
        self._bump_form_key()

    def update_instruction(self, index: int, value: str):
        self.get_draft().instructions[index] = value

    # ==========================================
    # Submission
    # ==========================================

    def submit(self) -> tuple[bool, Optional[str]]:
        """
        Create a recipe from the draft and add it to the catalog.

        On success the draft is reset and a success notice is queued.

        Returns (success, error_message)
        """
        try:
            recipe = self.service.build_recipe(self.get_draft())
        except RecipeValidationError as e:
            logger.warning(f"Rejected recipe submission: {e}")
            return False, str(e)

        self.recipes.add(recipe)
        logger.info(f"Created recipe '{recipe.title}' with {len(recipe.ingredients)} ingredients")

        state = self.session["recipe_creator"]
        state["draft"] = self._new_draft()
        state["show_success"] = True
        self._bump_form_key()
        return True, None

    def pop_success(self) -> bool:
        """Get the pending success notice and clear it."""
        state = self.session["recipe_creator"]
        shown = state["show_success"]
        state["show_success"] = False
        return shown
