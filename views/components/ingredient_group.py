"""
Pantry ingredient components.
"""

import streamlit as st
from typing import Callable

from models.entities import Ingredient
from services.pantry_service import format_group_heading


def render_ingredient_group(
    category: str,
    ingredients: list[Ingredient],
    categories: list[str],
    on_update: Callable[[str, str, str, str], bool],
    on_remove: Callable[[str], None],
):
    """
    Render one pantry category with its ingredients in a three-column grid.

    Args:
        category: Category name
        ingredients: Ingredients in this category
        categories: Selectable categories for the edit form
        on_update: Callback with (ingredient ID, category, quantity, unit)
        on_remove: Callback with the ingredient ID to remove
    """
    with st.container(border=True):
        st.markdown(f"#### {format_group_heading(category, ingredients)}")
        columns = st.columns(3)
        for index, ingredient in enumerate(ingredients):
            with columns[index % 3]:
                col_name, col_edit, col_remove = st.columns([3, 1, 1])
                with col_name:
                    st.markdown(f"**{ingredient.name}**")
                    if ingredient.amount:
                        st.caption(ingredient.amount)
                with col_edit:
                    with st.popover("✏️", help="Bearbeiten"):
                        _render_edit_form(ingredient, categories, on_update)
                with col_remove:
                    if st.button("x", key=f"remove_ingredient_{ingredient.id}", help="Entfernen"):
                        on_remove(ingredient.id)
                        st.rerun()


def _render_edit_form(
    ingredient: Ingredient,
    categories: list[str],
    on_update: Callable[[str, str, str, str], bool],
):
    """Render the edit form for one ingredient."""
    with st.form(f"edit_ingredient_{ingredient.id}", border=False):
        st.markdown(f"**{ingredient.name}**")
        category = st.selectbox(
            "Kategorie",
            options=categories,
            index=categories.index(ingredient.category) if ingredient.category in categories else 0,
        )
        quantity = st.text_input("Menge", value=ingredient.quantity or "")
        unit = st.text_input("Einheit", value=ingredient.unit or "")
        if st.form_submit_button("Speichern", type="primary"):
            on_update(ingredient.id, category, quantity, unit)
            st.rerun()
