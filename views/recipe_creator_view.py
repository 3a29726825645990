"""
Recipe Creator View - UI for authoring a new recipe.

The form is built from plain widgets rather than st.form because the
ingredient and instruction lists grow and shrink with buttons. The draft
lives in the RecipeCreatorController; widget keys include the form key
so rows are rebuilt whenever the draft changes shape.
"""

import streamlit as st

from controllers.recipe_creator_controller import RecipeCreatorController


class RecipeCreatorView:
    """View for creating recipes."""

    def __init__(self):
        self.controller = RecipeCreatorController()

    def render(self):
        """Main render method."""
        st.title("Rezept erstellen")
        st.markdown("Teile dein Lieblingsrezept")

        if self.controller.pop_success():
            st.toast("Rezept erfolgreich erstellt!", icon="✅")

        form_col, pantry_col = st.columns([2, 1])

        with form_col:
            self._render_details()
            self._render_ingredients()
            self._render_instructions()
            self._render_submit()

        with pantry_col:
            self._render_pantry_picker()

    def _key(self, name: str) -> str:
        return f"creator_{name}_{self.controller.get_form_key()}"

    def _render_details(self):
        """Render title, description and metadata fields."""
        draft = self.controller.get_draft()

        title = st.text_input("Titel *", value=draft.title, key=self._key("title"))
        description = st.text_area("Beschreibung", value=draft.description, key=self._key("description"))

        col_time, col_diff, col_cat, col_cal = st.columns(4)
        with col_time:
            cooking_time = st.number_input(
                "Zeit (Min.)",
                min_value=1,
                step=5,
                value=draft.cooking_time,
                key=self._key("time"),
            )
        with col_diff:
            difficulties = self.controller.get_difficulties()
            difficulty = st.selectbox(
                "Schwierigkeit",
                options=difficulties,
                index=difficulties.index(draft.difficulty),
                key=self._key("difficulty"),
            )
        with col_cat:
            categories = self.controller.get_categories()
            category = st.selectbox(
                "Kategorie",
                options=categories,
                index=categories.index(draft.category),
                key=self._key("category"),
            )
        with col_cal:
            calories = st.number_input(
                "Kalorien (optional)",
                min_value=0,
                step=10,
                value=draft.calories,
                placeholder="kcal",
                key=self._key("calories"),
            )

        self.controller.update_details(
            title=title,
            description=description,
            cooking_time=int(cooking_time),
            difficulty=difficulty,
            category=category,
            calories=int(calories) if calories is not None else None,
        )

        st.markdown("**Ernährung**")
        diet_cols = st.columns(len(self.controller.get_dietary_options()))
        for col, tag in zip(diet_cols, self.controller.get_dietary_options()):
            with col:
                checked = st.checkbox(tag, value=tag in draft.dietary, key=self._key(f"diet_{tag}"))
                if checked != (tag in draft.dietary):
                    self.controller.toggle_dietary(tag)

    def _render_ingredients(self):
        """Render the dynamic ingredient rows."""
        st.markdown("### Zutaten *")
        draft = self.controller.get_draft()

        for index, value in enumerate(draft.ingredients):
            col_input, col_remove = st.columns([6, 1])
            with col_input:
                text = st.text_input(
                    f"Zutat {index + 1}",
                    value=value,
                    placeholder="z.B. Tomaten",
                    label_visibility="collapsed",
                    key=self._key(f"ingredient_{index}"),
                )
                if text != value:
                    self.controller.update_ingredient(index, text)
            with col_remove:
                if len(draft.ingredients) > 1 and st.button("x", key=self._key(f"remove_ingredient_{index}")):
                    self.controller.remove_ingredient_row(index)
                    st.rerun()

        if st.button("Zutat hinzufügen", key=self._key("add_ingredient")):
            self.controller.add_ingredient_row()
            st.rerun()

    def _render_instructions(self):
        """Render the dynamic instruction rows."""
        st.markdown("### Zubereitung *")
        draft = self.controller.get_draft()

        for index, value in enumerate(draft.instructions):
            col_input, col_remove = st.columns([6, 1])
            with col_input:
                text = st.text_area(
                    f"Schritt {index + 1}",
                    value=value,
                    placeholder=f"Schritt {index + 1}...",
                    key=self._key(f"instruction_{index}"),
                )
                if text != value:
                    self.controller.update_instruction(index, text)
            with col_remove:
                if len(draft.instructions) > 1 and st.button("x", key=self._key(f"remove_instruction_{index}")):
                    self.controller.remove_instruction_row(index)
                    st.rerun()

        if st.button("Schritt hinzufügen", key=self._key("add_instruction")):
            self.controller.add_instruction_row()
            st.rerun()

    def _render_submit(self):
        """Render the submit button."""
        st.markdown("---")
        if st.button("Rezept erstellen", type="primary", use_container_width=True):
            success, error = self.controller.submit()
            if success:
                st.rerun()
            else:
                st.warning(error)

    def _render_pantry_picker(self):
        """Render the 'from your pantry' list."""
        with st.container(border=True):
            st.markdown("### Aus deinen Zutaten")
            names = self.controller.get_pantry_names()
            if not names:
                st.caption("Du hast noch keine Zutaten.")
                return

            for index, name in enumerate(names):
                if st.button(f"+ {name}", key=self._key(f"pantry_{index}"), use_container_width=True):
                    self.controller.add_ingredient_from_pantry(name)
                    st.rerun()
