"""
My Recipes View - UI for saved recipes and folders.

It delegates business logic to the MyRecipesController.
"""

import streamlit as st

from controllers.my_recipes_controller import MyRecipesController
from models.entities import Recipe
from views.components.recipe_card import render_recipe_card, render_recipe_detail
from views.components.sidebar import NO_FOLDER_LABEL, render_folder_sidebar


class MyRecipesView:
    """View for saved recipes."""

    def __init__(self):
        self.controller = MyRecipesController()

    def render(self):
        """Main render method."""
        st.title("Meine Rezepte")
        st.markdown("Deine gespeicherten Lieblingsrezepte, sortiert in Ordnern")

        self._render_sidebar()

        selected = self.controller.get_selected_recipe()
        if selected:
            render_recipe_detail(
                recipe=selected,
                match=None,
                on_close=lambda: self.controller.select_recipe(None),
                key_prefix="mine",
            )
            st.markdown("---")

        folder = self.controller.get_selected_folder()
        st.markdown(f"### {folder.name if folder else NO_FOLDER_LABEL}")

        recipes = self.controller.get_recipes()
        if not recipes:
            if self.controller.get_total_saved() == 0:
                st.info("Noch keine gespeicherten Rezepte. Speichere welche unter **Rezepte finden**!")
            else:
                st.info("Dieser Ordner ist leer.")
            return

        columns = st.columns(2)
        for index, recipe in enumerate(recipes):
            with columns[index % 2]:
                render_recipe_card(
                    recipe=recipe,
                    match=None,
                    key_prefix="mine",
                    on_select=self.controller.select_recipe,
                )
                self._render_recipe_actions(recipe)

    def _render_sidebar(self):
        render_folder_sidebar(
            folders=self.controller.get_folders(),
            selected_folder_id=self.controller.get_selected_folder_id(),
            unfiled_count=self.controller.get_folder_count(None),
            count_for=self.controller.get_folder_count,
            is_form_open=self.controller.is_folder_form_open(),
            on_select=self.controller.select_folder,
            on_rename=self.controller.rename_folder,
            on_delete=self.controller.delete_folder,
            on_open_form=self.controller.open_folder_form,
            on_close_form=self.controller.close_folder_form,
            on_create=self.controller.add_folder,
        )

    def _render_recipe_actions(self, recipe: Recipe):
        """Render folder reassignment and removal for a saved recipe."""
        folders = self.controller.get_folders()
        options = [None] + [f.id for f in folders]
        names = {f.id: f.name for f in folders}

        col_folder, col_remove = st.columns([3, 1])
        with col_folder:
            target = st.selectbox(
                "Ordner",
                options=options,
                index=options.index(recipe.folder_id) if recipe.folder_id in options else 0,
                format_func=lambda folder_id: names.get(folder_id, NO_FOLDER_LABEL),
                key=f"move_{recipe.id}",
                label_visibility="collapsed",
            )
            if target != recipe.folder_id:
                self.controller.move_recipe(recipe.id, target)
                st.rerun()
        with col_remove:
            if st.button("Entfernen", key=f"remove_saved_{recipe.id}"):
                self.controller.remove_recipe(recipe.id)
                st.rerun()
