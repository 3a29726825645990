"""
Recipe filter panel component.
"""

import streamlit as st
from typing import Callable, Optional

from services.recipe_matcher import RecipeCriteria


def render_filter_panel(
    criteria: RecipeCriteria,
    categories: list[str],
    difficulties: list[str],
    dietary_options: list[str],
    on_category_change: Callable[[str], None],
    on_difficulty_change: Callable[[str], None],
    on_max_time_change: Callable[[Optional[int]], None],
    on_dietary_change: Callable[[list[str]], None],
    on_clear: Callable[[], None],
):
    """
    Render the filter controls for the recipe browser.

    Args:
        criteria: Current criteria (used for widget defaults)
        categories: Category options including the 'any' sentinel
        difficulties: Difficulty options including the 'any' sentinel
        dietary_options: Selectable dietary tags
        on_*_change: Callbacks invoked when a control changes
        on_clear: Callback to reset every filter
    """
    with st.container(border=True):
        col_cat, col_diff, col_time, col_diet = st.columns(4)

        with col_cat:
            category = st.selectbox(
                "Kategorie",
                options=categories,
                index=categories.index(criteria.category) if criteria.category in categories else 0,
            )
            if category != criteria.category:
                on_category_change(category)
                st.rerun()

        with col_diff:
            difficulty = st.selectbox(
                "Schwierigkeit",
                options=difficulties,
                index=difficulties.index(criteria.difficulty) if criteria.difficulty in difficulties else 0,
            )
            if difficulty != criteria.difficulty:
                on_difficulty_change(difficulty)
                st.rerun()

        with col_time:
            max_time = st.number_input(
                "Max. Zeit (Min.)",
                min_value=0,
                step=5,
                value=criteria.max_cooking_time,
                placeholder="beliebig",
            )
            if (max_time or None) != criteria.max_cooking_time:
                on_max_time_change(int(max_time) if max_time else None)
                st.rerun()

        with col_diet:
            dietary = st.multiselect(
                "Ernährung",
                options=dietary_options,
                default=[d for d in dietary_options if d in criteria.dietary],
            )
            if frozenset(dietary) != criteria.dietary:
                on_dietary_change(dietary)
                st.rerun()

        if st.button("Filter zurücksetzen"):
            on_clear()
            st.rerun()
