"""
Sidebar components for different views.
"""

from views.components.sidebar.folders import NO_FOLDER_LABEL, render_folder_sidebar

__all__ = [
    "NO_FOLDER_LABEL",
    "render_folder_sidebar",
]
