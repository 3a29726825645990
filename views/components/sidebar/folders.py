"""
Saved-recipe folder sidebar component.
"""

import streamlit as st
from typing import Any, Callable, Optional

NO_FOLDER_LABEL = "Ohne Ordner"


def render_folder_sidebar(
    folders: list[Any],
    selected_folder_id: Optional[str],
    unfiled_count: int,
    count_for: Callable[[str], int],
    is_form_open: bool,
    on_select: Callable[[Optional[str]], None],
    on_rename: Callable[[str, str], tuple[bool, Optional[str]]],
    on_delete: Callable[[str], None],
    on_open_form: Callable[[], None],
    on_close_form: Callable[[], None],
    on_create: Callable[[str], tuple[bool, Optional[str]]],
):
    """
    Render the folder selection sidebar.

    Args:
        folders: Folder objects (need .id, .name)
        selected_folder_id: Selected folder, None for recipes without folder
        unfiled_count: Number of saved recipes without a folder
        count_for: Returns the number of recipes in a folder
        is_form_open: Whether the new-folder form is shown
        on_select: Callback with a folder ID, or None for "no folder"
        on_rename: Callback with folder ID and new name, returns (success, error)
        on_delete: Callback with the folder ID to delete
        on_open_form / on_close_form: Toggle the new-folder form
        on_create: Callback with the new folder name, returns (success, error)
    """
    with st.sidebar:
        st.markdown("### Ordner")
        st.markdown("---")

        if st.button(
            f"{NO_FOLDER_LABEL} ({unfiled_count})",
            key="folder_none",
            type="primary" if selected_folder_id is None else "secondary",
            use_container_width=True,
        ):
            on_select(None)
            st.rerun()

        for folder in folders:
            col1, col2, col3 = st.columns([4, 1, 1])
            with col1:
                if st.button(
                    f"{folder.name} ({count_for(folder.id)})",
                    key=f"folder_{folder.id}",
                    type="primary" if folder.id == selected_folder_id else "secondary",
                    use_container_width=True,
                ):
                    on_select(folder.id)
                    st.rerun()
            with col2:
                with st.popover("✏️", help="Umbenennen"):
                    _render_rename_form(folder, on_rename)
            with col3:
                if st.button("x", key=f"delete_folder_{folder.id}", help="Ordner löschen"):
                    on_delete(folder.id)
                    st.rerun()

        st.markdown("---")

        if not is_form_open:
            if st.button("Neuer Ordner", use_container_width=True):
                on_open_form()
                st.rerun()
            return

        with st.form("new_folder", clear_on_submit=True):
            name = st.text_input("Ordnername", placeholder="z.B. Sonntagsessen")
            col_create, col_cancel = st.columns(2)
            with col_create:
                submitted = st.form_submit_button("Erstellen", type="primary")
            with col_cancel:
                cancelled = st.form_submit_button("Abbrechen")

        if submitted:
            success, error = on_create(name)
            if success:
                st.rerun()
            else:
                st.warning(error)
        elif cancelled:
            on_close_form()
            st.rerun()


def _render_rename_form(folder: Any, on_rename: Callable[[str, str], tuple[bool, Optional[str]]]):
    with st.form(f"rename_folder_{folder.id}", border=False):
        name = st.text_input("Neuer Name", value=folder.name)
        submitted = st.form_submit_button("Umbenennen", type="primary")

    if submitted:
        success, error = on_rename(folder.id, name)
        if success:
            st.rerun()
        else:
            st.warning(error)
