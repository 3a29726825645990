"""
Pantry View - UI for managing the ingredients the user owns.

It delegates every change to the PantryController.
"""

import streamlit as st

from controllers.pantry_controller import PantryController
from views.components.ingredient_group import render_ingredient_group


class PantryView:
    """View for the pantry UI."""

    def __init__(self):
        self.controller = PantryController()

    def render(self):
        """Main render method."""
        col_title, col_add = st.columns([3, 1])
        with col_title:
            st.title("Meine Zutaten")
            st.markdown("Verwalte deine Lebensmittel und finde passende Rezepte")
        with col_add:
            st.markdown("")
            if st.button("Zutat hinzufügen", type="primary", use_container_width=True):
                self.controller.open_form()

        if self.controller.is_form_open():
            self._render_add_form()

        grouped = self.controller.get_grouped_ingredients()
        if not grouped:
            self._render_empty_state()
            return

        for category, ingredients in grouped.items():
            render_ingredient_group(
                category=category,
                ingredients=ingredients,
                categories=self.controller.get_categories(),
                on_update=self.controller.update_ingredient,
                on_remove=self.controller.remove_ingredient,
            )

    def _render_add_form(self):
        """Render the add-ingredient form."""
        categories = self.controller.get_categories()

        with st.form("add_ingredient", clear_on_submit=True, border=True):
            st.markdown("### Neue Zutat")
            name = st.text_input("Name der Zutat *", placeholder="z.B. Tomaten")
            category = st.selectbox(
                "Kategorie",
                options=categories,
                index=categories.index(self.controller.get_default_category()),
            )
            col_qty, col_unit = st.columns(2)
            with col_qty:
                quantity = st.text_input("Menge", placeholder="z.B. 500")
            with col_unit:
                unit = st.text_input("Einheit", placeholder="z.B. g, ml, Stück")

            col_submit, col_cancel = st.columns(2)
            with col_submit:
                submitted = st.form_submit_button("Hinzufügen", type="primary", use_container_width=True)
            with col_cancel:
                cancelled = st.form_submit_button("Abbrechen", use_container_width=True)

        if submitted:
            success, error = self.controller.add_ingredient(name, category, quantity, unit)
            if success:
                st.rerun()
            else:
                st.warning(error)
        elif cancelled:
            self.controller.close_form()
            st.rerun()

    def _render_empty_state(self):
        """Render the prompt shown for an empty pantry."""
        st.info("Noch keine Zutaten. Füge deine ersten Lebensmittel hinzu!")
        if st.button("Erste Zutat hinzufügen"):
            self.controller.open_form()
            st.rerun()
