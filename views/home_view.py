"""
Home View - Landing page for Küchenheld.

Displays navigation options and feature descriptions.
"""

import streamlit as st

from config.settings import get_settings
from controllers.session import get_app_state


class HomeView:
    """View for the home/landing page."""

    def render(self) -> None:
        """Render the home page."""
        settings = get_settings()
        st.title(settings.app_title)
        st.markdown(settings.app_tagline)

        self._render_stats()

        st.markdown("---")

        col1, col2 = st.columns(2)

        with col1:
            self._render_card(
                "Meine Zutaten",
                "Halte fest, welche Lebensmittel du zu Hause hast.",
                "Zu den Zutaten →",
                "pages/1_🥫_Zutaten.py",
            )
            self._render_card(
                "Rezept erstellen",
                "Schreib dein eigenes Rezept auf und nimm es in die Sammlung auf.",
                "Rezept erstellen →",
                "pages/3_➕_Rezept_erstellen.py",
            )

        with col2:
            self._render_card(
                "Rezepte finden",
                "Suche und filtere Rezepte, sortiert nach deinen vorhandenen Zutaten.",
                "Rezepte finden →",
                "pages/2_🔍_Rezepte_finden.py",
            )
            self._render_card(
                "Meine Rezepte",
                "Bewahre deine Lieblingsrezepte auf und sortiere sie in Ordner.",
                "Meine Rezepte →",
                "pages/4_📚_Meine_Rezepte.py",
            )

        st.markdown("---")
        st.markdown("*Über die Seitenleiste wechselst du zwischen den Seiten.*")

    def _render_stats(self) -> None:
        """Render session totals."""
        state = get_app_state()
        col1, col2, col3 = st.columns(3)
        with col1:
            st.metric("Zutaten", len(state.ingredients))
        with col2:
            st.metric("Rezepte", len(state.recipes))
        with col3:
            st.metric("Gespeichert", len(state.my_recipes))

    def _render_card(self, title: str, text: str, button_label: str, page: str) -> None:
        """Render a navigation card."""
        st.markdown(f"### {title}")
        st.markdown(text)
        if st.button(button_label, type="primary", use_container_width=True, key=f"nav_{page}"):
            st.switch_page(page)
