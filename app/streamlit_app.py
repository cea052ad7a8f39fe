"""
Kana Trainer - Main App

Streamlit UI for the kana spaced-repetition game.

Run with:
    streamlit run app/streamlit_app.py
"""

import logging
import os

import streamlit as st

from app.router import PAGES
from app.state import ensure_session_state, get_store


# ---- Logging ----

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)


# ---- Page Setup ----

st.set_page_config(
    page_title="Kana Trainer",
    page_icon="🎌",
    layout="centered"
)


# ---- Database & Session State ----

get_store()
ensure_session_state()


# ---- Main App ----

def main():
    """Main app entry point."""
    tabs = st.tabs([page.title for page in PAGES])
    for tab, page in zip(tabs, PAGES):
        with tab:
            page.render()


main()
