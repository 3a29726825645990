"""
Küchenheld - Home Page

A pantry and recipe manager: record what you have, find recipes that
use it, save favourites into folders and write your own recipes.
"""

import streamlit as st

# Page configuration (must be first Streamlit command)
st.set_page_config(
    page_title="Küchenheld",
    page_icon="👨‍🍳",
    layout="wide"
)

from config import configure_logging, get_settings
from views.home_view import HomeView

configure_logging(get_settings().log_level)

HomeView().render()
