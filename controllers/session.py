"""
Session helpers - access to the shared application state.

Every controller accepts an optional session mapping. In the running app
this is st.session_state; tests pass a plain dict.
"""

import logging
from typing import Any, MutableMapping, Optional

import streamlit as st

from config.settings import get_settings
from models.state import AppState

logger = logging.getLogger(__name__)

APP_STATE_KEY = "app_state"

Session = MutableMapping[str, Any]


def resolve_session(session: Optional[Session] = None) -> Session:
    """Return the given session, or Streamlit's session state."""
    return session if session is not None else st.session_state


def get_app_state(session: Optional[Session] = None) -> AppState:
    """Get the session's AppState, creating it on first access."""
    session = resolve_session(session)
    if APP_STATE_KEY not in session:
        if get_settings().seed_demo_data:
            session[APP_STATE_KEY] = AppState.seeded()
        else:
            session[APP_STATE_KEY] = AppState()
        logger.info("Initialized application state for new session")
    return session[APP_STATE_KEY]
