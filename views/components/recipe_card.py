"""
Recipe display components.
"""

import streamlit as st
from typing import Callable, Optional

from models.entities import Recipe
from models.options import difficulty_color
from services.recipe_matcher import IngredientMatch
from services.recipe_service import RecipeService

_formatter = RecipeService()


def render_difficulty_badge(difficulty: str) -> str:
    """Markdown for a colored difficulty label."""
    return f":{difficulty_color(difficulty)}[{difficulty}]"


def render_match_summary(match: IngredientMatch):
    """
    Render how much of a recipe the pantry covers.

    Args:
        match: IngredientMatch from the recipe matcher
    """
    st.caption(f"{match.matches}/{match.total} Zutaten vorhanden ({match.percentage}%)")
    st.progress(match.percentage / 100)


def render_recipe_card(
    recipe: Recipe,
    match: Optional[IngredientMatch],
    key_prefix: str,
    on_select: Callable[[str], None],
):
    """
    Render a compact recipe card.

    Args:
        recipe: Recipe to show
        match: Pantry match, or None to hide the match summary
        key_prefix: Prefix for widget keys (unique per view)
        on_select: Callback with the recipe ID when details are requested
    """
    with st.container(border=True):
        st.markdown(f"#### {recipe.title}")
        if recipe.is_user_created:
            st.caption("Dein Rezept")
        st.markdown(recipe.description or "*Keine Beschreibung*")
        st.markdown(
            f"{recipe.cooking_time} min · {render_difficulty_badge(recipe.difficulty)} · {recipe.category}"
        )
        if recipe.dietary:
            st.caption(" · ".join(recipe.dietary))

        if match is not None:
            render_match_summary(match)

        if st.button("Details", key=f"{key_prefix}_details_{recipe.id}", use_container_width=True):
            on_select(recipe.id)
            st.rerun()


def render_recipe_detail(
    recipe: Recipe,
    match: Optional[IngredientMatch],
    on_close: Callable[[], None],
    key_prefix: str,
):
    """
    Render the full recipe with ingredients and instructions.

    Ingredients are ticked when the pantry has them (if a match is given).
    """
    with st.container(border=True):
        col_title, col_close = st.columns([5, 1])
        with col_title:
            st.markdown(f"## {recipe.title}")
        with col_close:
            if st.button("Schließen", key=f"{key_prefix}_close_{recipe.id}"):
                on_close()
                st.rerun()

        st.markdown(recipe.description or "*Keine Beschreibung*")
        st.markdown(f"**{_formatter.format_meta(recipe)}** · {render_difficulty_badge(recipe.difficulty)}")
        if recipe.dietary:
            st.caption(" · ".join(recipe.dietary))

        col_ing, col_steps = st.columns([1, 2])

        with col_ing:
            st.markdown("### Zutaten")
            available = set(match.available) if match else set()
            for ingredient in recipe.ingredients:
                mark = "✅" if ingredient in available else "⚪"
                st.markdown(f"{mark} {ingredient}" if match else f"- {ingredient}")
            if match:
                render_match_summary(match)

        with col_steps:
            st.markdown("### Zubereitung")
            for index, step in enumerate(recipe.instructions, start=1):
                st.markdown(f"{index}. {step}")
