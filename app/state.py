"""
Streamlit session state and database initialization helpers.
"""

from __future__ import annotations

import logging
import os

import streamlit as st
from sqlalchemy.exc import SQLAlchemyError

import srs

logger = logging.getLogger(__name__)


def default_session_limit() -> int:
    """
    Initial session size from DEFAULT_SESSION_LIMIT, if it is an offered option.
    """
    raw = os.getenv("DEFAULT_SESSION_LIMIT")
    if raw is None:
        return srs.DEFAULT_SESSION_LIMIT
    try:
        value = int(raw)
    except ValueError:
        value = None
    if value not in srs.SESSION_LIMIT_OPTIONS:
        logger.warning("Ignoring DEFAULT_SESSION_LIMIT=%r (expected one of %s)", raw, srs.SESSION_LIMIT_OPTIONS)
        return srs.DEFAULT_SESSION_LIMIT
    return value


def get_store() -> srs.ItemStore:
    """
    Shared Item Store (created once per Streamlit server process).
    """
    @st.cache_resource
    def _init_store() -> srs.ItemStore:
        store = srs.ItemStore()
        try:
            srs.init_db(store.engine)
        except SQLAlchemyError:
            # load() degrades to an in-memory deck when the schema is missing
            logger.exception("Could not initialize SRS schema")
        return store

    return _init_store()


def ensure_session_state() -> None:
    """
    Populate Streamlit session_state with defaults.
    """
    if "deck_id" not in st.session_state:
        st.session_state.deck_id = "hiragana"
    if "game_mode" not in st.session_state:
        st.session_state.game_mode = srs.GameMode.CHARACTER
    if "input_mode" not in st.session_state:
        st.session_state.input_mode = "buttons"
    if "session_limit" not in st.session_state:
        st.session_state.session_limit = default_session_limit()
    if "controller" not in st.session_state:
        st.session_state.controller = None
    if "session_view" not in st.session_state:
        st.session_state.session_view = None
    if "show_answer" not in st.session_state:
        st.session_state.show_answer = False
    if "last_answer" not in st.session_state:
        st.session_state.last_answer = None
    if "deck_persistent" not in st.session_state:
        st.session_state.deck_persistent = True
