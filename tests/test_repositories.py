"""
Tests for the in-memory repositories.
"""

import pytest

from models.entities import Ingredient
from models.repositories import FolderRepository, PantryRepository, RecipeRepository
from models.state import AppState


class TestAppState:
    """Test AppState construction."""

    def test_seeded(self, state):
        assert [i.name for i in state.ingredients] == ["Tomaten", "Zwiebeln", "Knoblauch", "Olivenöl"]
        assert [r.title for r in state.recipes] == ["Mediterrane Tomatenpfanne", "Knoblauch-Öl Pasta"]
        assert [f.name for f in state.folders] == ["Lieblingsrezepte", "Schnelle Gerichte"]
        assert state.my_recipes == []

    def test_seeded_ids_unique(self, state):
        ids = [e.id for e in state.ingredients + state.recipes + state.folders]
        assert len(ids) == len(set(ids))

    def test_empty(self):
        assert AppState().recipes == []


class TestPantryRepository:
    """Test PantryRepository operations."""

    def test_add_appends(self, state):
        repo = PantryRepository(state)
        ingredient = repo.add("  Mehl ", "Getreide", "1", "kg")
        assert repo.get_all()[-1] == ingredient
        assert ingredient.name == "Mehl"
        assert ingredient.amount == "1 kg"

    def test_blank_quantity_and_unit_become_none(self, state):
        ingredient = PantryRepository(state).add("Salz", "Gewürze", "  ", "")
        assert ingredient.quantity is None
        assert ingredient.unit is None
        assert ingredient.amount is None

    def test_blank_name_rejected(self, state):
        repo = PantryRepository(state)
        with pytest.raises(ValueError):
            repo.add("   ", "Gemüse")
        assert len(repo.get_all()) == 4

    def test_generated_ids_unique(self, state):
        repo = PantryRepository(state)
        ids = {repo.add(f"Zutat {n}", "Sonstiges").id for n in range(200)}
        assert len(ids) == 200

    def test_remove(self, state):
        repo = PantryRepository(state)
        target = repo.get_all()[1]
        assert repo.remove(target.id) is True
        assert repo.get(target.id) is None
        assert repo.names() == ["Tomaten", "Knoblauch", "Olivenöl"]

    def test_remove_unknown_is_noop(self, state):
        assert PantryRepository(state).remove("missing") is False
        assert len(state.ingredients) == 4

    def test_update_replaces(self, state):
        repo = PantryRepository(state)
        original = repo.get_all()[0]
        assert repo.update(Ingredient(id=original.id, name="Kirschtomaten", category="Gemüse")) is True
        assert repo.names()[0] == "Kirschtomaten"

    def test_update_unknown(self, state):
        assert PantryRepository(state).update(Ingredient(name="Neu")) is False


class TestRecipeRepository:
    """Test catalog and saved-recipe operations."""

    def test_add_and_get(self, state, make_recipe):
        repo = RecipeRepository(state)
        recipe = repo.add(make_recipe("Neu"))
        assert repo.get(recipe.id) == recipe
        assert repo.get_all()[-1].title == "Neu"

    def test_save_deduplicates(self, state):
        repo = RecipeRepository(state)
        recipe = repo.get_all()[0]
        assert repo.save(recipe) is True
        assert repo.save(recipe) is False
        assert [r.id for r in repo.get_all_saved()] == [recipe.id]

    def test_saved_is_copy(self, state):
        repo = RecipeRepository(state)
        recipe = repo.get_all()[0]
        repo.save(recipe)
        folder_id = state.folders[0].id
        repo.assign_folder(recipe.id, folder_id)
        assert repo.get_saved(recipe.id).folder_id == folder_id
        assert repo.get(recipe.id).folder_id is None

    def test_remove_saved(self, state):
        repo = RecipeRepository(state)
        recipe = repo.get_all()[0]
        repo.save(recipe)
        assert repo.remove_saved(recipe.id) is True
        assert repo.is_saved(recipe.id) is False
        assert repo.remove_saved(recipe.id) is False

    def test_assign_unknown_recipe(self, state):
        assert RecipeRepository(state).assign_folder("missing", None) is False

    def test_in_folder(self, state):
        repo = RecipeRepository(state)
        first, second = repo.get_all()
        repo.save(first)
        repo.save(second)
        folder_id = state.folders[0].id
        repo.assign_folder(second.id, folder_id)

        assert [r.id for r in repo.in_folder(None)] == [first.id]
        assert [r.id for r in repo.in_folder(folder_id)] == [second.id]
        assert repo.count_in_folder(state.folders[1].id) == 0


class TestFolderRepository:
    """Test folder operations."""

    def test_add_trims(self, state):
        folder = FolderRepository(state).add("  Backen  ")
        assert folder.name == "Backen"
        assert state.folders[-1] == folder

    def test_add_blank_rejected(self, state):
        with pytest.raises(ValueError):
            FolderRepository(state).add("   ")

    def test_rename(self, state):
        repo = FolderRepository(state)
        folder = repo.get_all()[0]
        assert repo.rename(folder.id, "Favoriten") is True
        assert repo.get(folder.id).name == "Favoriten"

    def test_remove_clears_assignments(self, state):
        recipes = RecipeRepository(state)
        folders = FolderRepository(state)
        x, y = recipes.get_all()
        recipes.save(x)
        recipes.save(y)
        folder = folders.get_all()[0]
        recipes.assign_folder(x.id, folder.id)
        recipes.assign_folder(y.id, folder.id)

        assert folders.remove(folder.id) == 2
        assert folders.get(folder.id) is None
        assert all(r.folder_id is None for r in recipes.get_all_saved())
        assert len(recipes.get_all_saved()) == 2

    def test_remove_leaves_other_folders(self, state):
        recipes = RecipeRepository(state)
        folders = FolderRepository(state)
        x = recipes.get_all()[0]
        recipes.save(x)
        keep, drop = folders.get_all()
        recipes.assign_folder(x.id, keep.id)

        assert folders.remove(drop.id) == 0
        assert recipes.get_saved(x.id).folder_id == keep.id
