"""
Tests for the controllers, driven with a plain dict as session state.
"""

import pytest

from controllers.my_recipes_controller import MyRecipesController
from controllers.pantry_controller import PantryController
from controllers.recipe_creator_controller import RecipeCreatorController
from controllers.recipe_search_controller import RecipeSearchController
from controllers.session import APP_STATE_KEY, get_app_state
from models.options import ANY_OPTION


class TestSession:
    """Test shared state creation."""

    def test_state_created_once(self, session):
        state = get_app_state(session)
        assert get_app_state(session) is state
        assert session[APP_STATE_KEY] is state

    def test_seeded_by_default(self, session):
        assert len(get_app_state(session).recipes) == 2

    def test_unseeded(self, session, monkeypatch):
        monkeypatch.setenv("SEED_DEMO_DATA", "false")
        state = get_app_state(session)
        assert state.recipes == []
        assert state.ingredients == []

    def test_controllers_share_state(self, session):
        PantryController(session).add_ingredient("Mehl", "Getreide")
        assert "Mehl" in RecipeCreatorController(session).get_pantry_names()


class TestPantryController:
    """Test PantryController."""

    def test_add_closes_form(self, session):
        controller = PantryController(session)
        controller.open_form()
        assert controller.add_ingredient("Mehl", "Getreide", "1", "kg") == (True, None)
        assert controller.is_form_open() is False
        assert controller.get_ingredients()[-1].name == "Mehl"

    def test_add_blank_name(self, session):
        controller = PantryController(session)
        controller.open_form()
        success, error = controller.add_ingredient("  ", "Gemüse")
        assert success is False
        assert error
        assert controller.is_form_open() is True
        assert len(controller.get_ingredients()) == 4

    def test_remove(self, session):
        controller = PantryController(session)
        first = controller.get_ingredients()[0]
        controller.remove_ingredient(first.id)
        assert first.id not in [i.id for i in controller.get_ingredients()]

    def test_grouped(self, session):
        grouped = PantryController(session).get_grouped_ingredients()
        assert list(grouped) == ["Gemüse", "Gewürze", "Öle & Essig"]

    def test_update_ingredient(self, session):
        controller = PantryController(session)
        first = controller.get_ingredients()[0]
        assert controller.update_ingredient(first.id, "Sonstiges", " 2 ", "Dosen") is True

        updated = controller.get_ingredients()[0]
        assert updated.id == first.id
        assert updated.name == first.name
        assert updated.category == "Sonstiges"
        assert updated.amount == "2 Dosen"

    def test_update_clears_blank_amount(self, session):
        controller = PantryController(session)
        first = controller.get_ingredients()[0]
        controller.update_ingredient(first.id, first.category, "", "")
        updated = controller.get_ingredients()[0]
        assert updated.quantity is None
        assert updated.unit is None

    def test_update_unknown_ingredient(self, session):
        controller = PantryController(session)
        assert controller.update_ingredient("missing", "Gemüse") is False
        assert len(controller.get_ingredients()) == 4


class TestRecipeSearchController:
    """Test RecipeSearchController."""

    def test_results_ranked(self, session):
        results = RecipeSearchController(session).get_results()
        assert [(r.recipe.title, r.match.percentage) for r in results] == [
            ("Mediterrane Tomatenpfanne", 100),
            ("Knoblauch-Öl Pasta", 100),
        ]

    def test_pantry_change_reranks(self, session):
        pantry = PantryController(session)
        search = RecipeSearchController(session)
        for ingredient in pantry.get_ingredients():
            if ingredient.name in ("Tomaten", "Zwiebeln"):
                pantry.remove_ingredient(ingredient.id)
        results = search.get_results()
        assert [r.match.matches for r in results] == [2, 2]
        assert results[0].match.percentage == 50

    def test_max_time_filter(self, session):
        controller = RecipeSearchController(session)
        controller.set_max_cooking_time(15)
        assert [r.recipe.cooking_time for r in controller.get_results()] == [15]

    def test_zero_max_time_means_unset(self, session):
        controller = RecipeSearchController(session)
        controller.set_max_cooking_time(0)
        assert controller.get_criteria().max_cooking_time is None

    def test_search_text(self, session):
        controller = RecipeSearchController(session)
        controller.set_search_text("italienische")
        assert [r.recipe.title for r in controller.get_results()] == ["Knoblauch-Öl Pasta"]

    def test_clear_filters(self, session):
        controller = RecipeSearchController(session)
        controller.set_search_text("pasta")
        controller.set_category("Suppe")
        controller.set_difficulty("Schwer")
        controller.set_dietary(["Vegan"])
        assert controller.has_active_filters() is True

        controller.clear_filters()
        criteria = controller.get_criteria()
        assert criteria.category == ANY_OPTION
        assert criteria.difficulty == ANY_OPTION
        assert criteria.dietary == frozenset()
        assert criteria.search_text == "pasta"
        assert controller.has_active_filters() is False

    def test_filter_panel_highlights_button(self, session):
        controller = RecipeSearchController(session)
        controller.toggle_filter_panel()
        assert controller.is_filter_panel_open() is True
        assert controller.has_active_filters() is True

    def test_dietary_filter(self, session):
        controller = RecipeSearchController(session)
        controller.set_dietary(["Glutenfrei"])
        assert controller.get_results() == []

    def test_criteria_survive_new_controller(self, session):
        RecipeSearchController(session).set_category("Dessert")
        assert RecipeSearchController(session).get_criteria().category == "Dessert"

    def test_save_twice(self, session):
        controller = RecipeSearchController(session)
        recipe_id = controller.get_results()[0].recipe.id
        assert controller.save_recipe(recipe_id) is True
        assert controller.save_recipe(recipe_id) is False
        assert controller.is_saved(recipe_id) is True
        assert len(get_app_state(session).my_recipes) == 1

    def test_save_unknown(self, session):
        assert RecipeSearchController(session).save_recipe("missing") is False

    def test_selected_detail(self, session):
        controller = RecipeSearchController(session)
        recipe_id = controller.get_results()[1].recipe.id
        controller.select_recipe(recipe_id)
        selected = controller.get_selected()
        assert selected.recipe.id == recipe_id
        assert selected.match.total == 2
        controller.select_recipe(None)
        assert controller.get_selected() is None


class TestRecipeCreatorController:
    """Test RecipeCreatorController."""

    @pytest.fixture
    def controller(self, session):
        return RecipeCreatorController(session)

    def test_initial_draft(self, controller):
        draft = controller.get_draft()
        assert draft.cooking_time == 30
        assert draft.difficulty == "Einfach"
        assert draft.category == "Hauptgericht"
        assert draft.ingredients == [""]
        assert draft.instructions == [""]

    def test_default_cooking_time_from_settings(self, session, monkeypatch):
        monkeypatch.setenv("DEFAULT_COOKING_TIME", "45")
        assert RecipeCreatorController(session).get_draft().cooking_time == 45

    def test_submit_adds_user_recipe(self, controller, session):
        controller.update_details(title="Bruschetta", cooking_time=10, category="Vorspeise")
        controller.update_ingredient(0, "Tomaten")
        controller.add_ingredient_row()
        controller.update_ingredient(1, "Brot")
        controller.add_ingredient_row()
        controller.update_instruction(0, "Brot rösten")
        controller.toggle_dietary("Vegan")
        form_key = controller.get_form_key()

        assert controller.submit() == (True, None)

        recipe = get_app_state(session).recipes[-1]
        assert recipe.title == "Bruschetta"
        assert recipe.ingredients == ["Tomaten", "Brot"]
        assert recipe.dietary == ["Vegan"]
        assert recipe.is_user_created is True
        assert controller.get_draft().title == ""
        assert controller.get_form_key() == form_key + 1
        assert controller.pop_success() is True
        assert controller.pop_success() is False

    def test_submit_rejected(self, controller, session):
        controller.update_details(title="Nur Titel")
        success, error = controller.submit()
        assert success is False
        assert error
        assert len(get_app_state(session).recipes) == 2
        assert controller.get_draft().title == "Nur Titel"
        assert controller.pop_success() is False

    def test_submit_out_of_range_time_rejected(self, controller, session):
        controller.update_details(title="Suppe", cooking_time=-5)
        controller.update_ingredient(0, "Zwiebeln")
        controller.update_instruction(0, "Kochen")
        success, error = controller.submit()
        assert success is False
        assert "Zubereitungszeit" in error
        assert len(get_app_state(session).recipes) == 2
        assert controller.pop_success() is False

    def test_unknown_field(self, controller):
        with pytest.raises(ValueError):
            controller.update_details(servings=4)

    def test_remove_rows(self, controller):
        controller.update_ingredient(0, "A")
        controller.add_ingredient_row()
        controller.update_ingredient(1, "B")
        controller.remove_ingredient_row(0)
        assert controller.get_draft().ingredients == ["B"]

        controller.add_instruction_row()
        controller.remove_instruction_row(0)
        assert controller.get_draft().instructions == [""]

    def test_add_from_pantry_fills_blank_row(self, controller):
        controller.add_ingredient_from_pantry("Tomaten")
        assert controller.get_draft().ingredients == ["Tomaten"]
        controller.add_ingredient_from_pantry("Knoblauch")
        assert controller.get_draft().ingredients == ["Tomaten", "Knoblauch"]

    def test_toggle_dietary(self, controller):
        controller.toggle_dietary("Vegan")
        controller.toggle_dietary("Low-Carb")
        controller.toggle_dietary("Vegan")
        assert controller.get_draft().dietary == ["Low-Carb"]

    def test_new_recipe_is_searchable(self, controller, session):
        controller.update_details(title="Knoblauchbrot")
        controller.update_ingredient(0, "knoblauch")
        controller.update_instruction(0, "Backen")
        controller.submit()
        results = RecipeSearchController(session).get_results()
        titles = [r.recipe.title for r in results]
        assert "Knoblauchbrot" in titles
        assert results[-1].recipe.title == "Knoblauchbrot"


class TestMyRecipesController:
    """Test MyRecipesController."""

    @pytest.fixture
    def saved(self, session):
        """Save both demo recipes and return their IDs."""
        search = RecipeSearchController(session)
        ids = [r.recipe.id for r in search.get_results()]
        for recipe_id in ids:
            search.save_recipe(recipe_id)
        return ids

    def test_unfiled_by_default(self, session, saved):
        controller = MyRecipesController(session)
        assert controller.get_selected_folder_id() is None
        assert [r.id for r in controller.get_recipes()] == saved
        assert controller.get_folder_count(None) == 2

    def test_move_and_select(self, session, saved):
        controller = MyRecipesController(session)
        folder = controller.get_folders()[0]
        controller.move_recipe(saved[0], folder.id)

        assert [r.id for r in controller.get_recipes()] == [saved[1]]
        controller.select_folder(folder.id)
        assert [r.id for r in controller.get_recipes()] == [saved[0]]
        assert controller.get_selected_folder().name == "Lieblingsrezepte"
        assert controller.get_folder_count(folder.id) == 1

    def test_move_to_unknown_folder_ignored(self, session, saved):
        controller = MyRecipesController(session)
        controller.move_recipe(saved[0], "missing")
        assert controller.get_folder_count(None) == 2

    def test_delete_folder(self, session, saved):
        controller = MyRecipesController(session)
        folder = controller.get_folders()[0]
        for recipe_id in saved:
            controller.move_recipe(recipe_id, folder.id)
        controller.select_folder(folder.id)

        controller.delete_folder(folder.id)

        assert folder.id not in [f.id for f in controller.get_folders()]
        assert controller.get_selected_folder_id() is None
        assert [r.id for r in controller.get_recipes()] == saved

    def test_add_folder(self, session):
        controller = MyRecipesController(session)
        controller.open_folder_form()
        assert controller.add_folder("Backen") == (True, None)
        assert controller.is_folder_form_open() is False
        assert controller.get_folders()[-1].name == "Backen"

    def test_add_blank_folder(self, session):
        controller = MyRecipesController(session)
        success, error = controller.add_folder("  ")
        assert success is False
        assert error
        assert len(controller.get_folders()) == 2

    def test_rename_folder(self, session):
        controller = MyRecipesController(session)
        folder = controller.get_folders()[0]
        assert controller.rename_folder(folder.id, "  Favoriten ") == (True, None)
        assert controller.get_folders()[0].name == "Favoriten"

    def test_rename_folder_rejected(self, session):
        controller = MyRecipesController(session)
        folder = controller.get_folders()[0]
        success, error = controller.rename_folder(folder.id, " ")
        assert success is False
        assert error
        assert controller.get_folders()[0].name == "Lieblingsrezepte"

        success, error = controller.rename_folder("missing", "Neu")
        assert success is False
        assert error

    def test_remove_recipe_closes_detail(self, session, saved):
        controller = MyRecipesController(session)
        controller.select_recipe(saved[0])
        assert controller.get_selected_recipe().id == saved[0]
        controller.remove_recipe(saved[0])
        assert controller.get_selected_recipe() is None
        assert controller.get_total_saved() == 1
