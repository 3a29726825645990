"""
Recipe Search View - UI for finding recipes.

Shows the search box, filter panel and ranked results, and the detail
view of a selected recipe. It delegates business logic to the
RecipeSearchController.
"""

import streamlit as st

from controllers.recipe_search_controller import RecipeSearchController
from views.components.filter_panel import render_filter_panel
from views.components.recipe_card import render_recipe_card, render_recipe_detail


class RecipeSearchView:
    """View for the recipe browser."""

    def __init__(self):
        self.controller = RecipeSearchController()

    def render(self):
        """Main render method."""
        st.title("Rezepte finden")
        st.markdown("Entdecke Rezepte passend zu deinen vorhandenen Zutaten")

        self._render_search_bar()

        if self.controller.is_filter_panel_open():
            criteria = self.controller.get_criteria()
            render_filter_panel(
                criteria=criteria,
                categories=self.controller.get_category_options(),
                difficulties=self.controller.get_difficulty_options(),
                dietary_options=self.controller.get_dietary_options(),
                on_category_change=self.controller.set_category,
                on_difficulty_change=self.controller.set_difficulty,
                on_max_time_change=self.controller.set_max_cooking_time,
                on_dietary_change=self.controller.set_dietary,
                on_clear=self.controller.clear_filters,
            )

        selected = self.controller.get_selected()
        if selected:
            render_recipe_detail(
                recipe=selected.recipe,
                match=selected.match,
                on_close=lambda: self.controller.select_recipe(None),
                key_prefix="search",
            )
            self._render_save_button(selected.recipe.id)
            st.markdown("---")

        self._render_results()

    def _render_search_bar(self):
        """Render search input and filter toggle."""
        col_search, col_filter = st.columns([5, 1])
        criteria = self.controller.get_criteria()

        with col_search:
            text = st.text_input(
                "Rezepte suchen",
                value=criteria.search_text,
                placeholder="Rezepte suchen...",
                label_visibility="collapsed",
            )
            if text != criteria.search_text:
                self.controller.set_search_text(text)

        with col_filter:
            if st.button(
                "Filter",
                type="primary" if self.controller.has_active_filters() else "secondary",
                use_container_width=True,
            ):
                self.controller.toggle_filter_panel()
                st.rerun()

    def _render_save_button(self, recipe_id: str):
        """Render the "save to my recipes" action for the detail view."""
        if self.controller.is_saved(recipe_id):
            st.success("In Meine Rezepte gespeichert")
            return

        if st.button("In Meine Rezepte speichern", type="primary", key=f"save_{recipe_id}"):
            self.controller.save_recipe(recipe_id)
            st.toast("Rezept gespeichert")
            st.rerun()

    def _render_results(self):
        """Render ranked recipe cards in a grid."""
        results = self.controller.get_results()

        if not results:
            st.info("Keine Rezepte gefunden. Versuche eine andere Suche oder setze die Filter zurück.")
            return

        st.caption(
            f"{len(results)} Rezept(e), sortiert nach {self.controller.get_pantry_size()} vorhandenen Zutat(en)"
        )
        columns = st.columns(2)
        for index, ranked in enumerate(results):
            with columns[index % 2]:
                render_recipe_card(
                    recipe=ranked.recipe,
                    match=ranked.match,
                    key_prefix="search",
                    on_select=self.controller.select_recipe,
                )
