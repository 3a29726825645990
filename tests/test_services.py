"""
Tests for recipe authoring and pantry grouping.
"""

import pytest

from models.entities import Ingredient, Recipe
from services.pantry_service import format_group_heading, group_by_category
from services.recipe_service import RecipeDraft, RecipeService, RecipeValidationError


@pytest.fixture
def service():
    return RecipeService()


@pytest.fixture
def draft():
    return RecipeDraft(
        title="  Omelett ",
        description=" Schnell gemacht ",
        cooking_time=10,
        difficulty="Einfach",
        category="Hauptgericht",
        calories=250,
        dietary=["Vegetarisch"],
        ingredients=["Eier", "", "Butter", "   "],
        instructions=["", "Eier verquirlen", "In Butter braten"],
    )


class TestBuildRecipe:
    """Test RecipeService.build_recipe."""

    def test_valid_draft(self, service, draft):
        recipe = service.build_recipe(draft)
        assert recipe.title == "Omelett"
        assert recipe.description == "Schnell gemacht"
        assert recipe.ingredients == ["Eier", "Butter"]
        assert recipe.instructions == ["Eier verquirlen", "In Butter braten"]
        assert recipe.is_user_created is True
        assert recipe.folder_id is None
        assert recipe.calories == 250

    def test_blank_title(self, service, draft):
        draft.title = "   "
        with pytest.raises(RecipeValidationError):
            service.build_recipe(draft)

    def test_no_ingredients(self, service, draft):
        draft.ingredients = ["", " "]
        with pytest.raises(RecipeValidationError):
            service.build_recipe(draft)

    def test_no_instructions(self, service, draft):
        draft.instructions = [""]
        with pytest.raises(RecipeValidationError):
            service.build_recipe(draft)

    def test_validation_error_is_value_error(self):
        assert issubclass(RecipeValidationError, ValueError)

    def test_unknown_difficulty_rejected(self, service, draft):
        draft.difficulty = "Extrem"
        with pytest.raises(RecipeValidationError, match="Schwierigkeit"):
            service.build_recipe(draft)

    def test_negative_cooking_time_rejected(self, service, draft):
        draft.cooking_time = -5
        with pytest.raises(RecipeValidationError, match="Zubereitungszeit"):
            service.build_recipe(draft)

    def test_negative_calories_rejected(self, service, draft):
        draft.calories = -1
        with pytest.raises(RecipeValidationError, match="Kalorien"):
            service.build_recipe(draft)

    def test_new_ids(self, service, draft):
        assert service.build_recipe(draft).id != service.build_recipe(draft).id


class TestFormatting:
    """Test recipe formatting helpers."""

    def test_format_meta(self, service):
        recipe = Recipe(title="Suppe", cooking_time=25, difficulty="Mittel", category="Suppe", calories=300)
        assert service.format_meta(recipe) == "25 min | Mittel | Suppe | 300 kcal"

    def test_format_meta_without_calories(self, service):
        recipe = Recipe(title="Suppe", cooking_time=25, category="Suppe")
        assert service.format_meta(recipe) == "25 min | Einfach | Suppe"


class TestPantryGrouping:
    """Test group_by_category."""

    def test_groups_in_first_seen_order(self):
        ingredients = [
            Ingredient(name="Tomaten", category="Gemüse"),
            Ingredient(name="Knoblauch", category="Gewürze"),
            Ingredient(name="Zwiebeln", category="Gemüse"),
        ]
        grouped = group_by_category(ingredients)
        assert list(grouped) == ["Gemüse", "Gewürze"]
        assert [i.name for i in grouped["Gemüse"]] == ["Tomaten", "Zwiebeln"]

    def test_empty(self):
        assert group_by_category([]) == {}

    def test_heading(self):
        assert format_group_heading("Obst", [Ingredient(name="Äpfel", category="Obst")]) == "Obst (1)"
