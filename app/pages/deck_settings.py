"""
Deck settings page: deck, game mode, input mode, session size, reset.
"""

from __future__ import annotations

import streamlit as st

import srs
from app.session_controller import end_session, reset_progress


DECK_LABELS = {
    "hiragana": "Hiragana (ひらがな)",
    "katakana": "Katakana (カタカナ)",
    "both": "Both",
}

MODE_LABELS = {
    srs.GameMode.CHARACTER: "Kana → Romaji",
    srs.GameMode.ROMAJI: "Romaji → Kana",
}


def render_deck_settings_page() -> None:
    st.title("⚙️ Settings")

    deck_ids = srs.deck_ids()
    deck_id = st.selectbox(
        "Deck",
        deck_ids,
        index=deck_ids.index(st.session_state.deck_id),
        format_func=lambda d: DECK_LABELS.get(d, d),
    )
    if deck_id != st.session_state.deck_id:
        st.session_state.deck_id = deck_id
        end_session()

    modes = list(MODE_LABELS)
    st.session_state.game_mode = st.radio(
        "Game mode",
        modes,
        index=modes.index(st.session_state.game_mode),
        format_func=MODE_LABELS.get,
        horizontal=True,
    )

    input_modes = ["buttons", "typing"]
    st.session_state.input_mode = st.radio(
        "Answer with",
        input_modes,
        index=input_modes.index(st.session_state.input_mode),
        format_func=lambda m: "Self-graded buttons" if m == "buttons" else "Typed answer",
        horizontal=True,
    )

    limits = list(srs.SESSION_LIMIT_OPTIONS)
    st.session_state.session_limit = st.selectbox(
        "Cards per session",
        limits,
        index=limits.index(st.session_state.session_limit),
    )

    st.divider()
    st.markdown("### Reset progress")
    st.caption("Returns every card in this deck to new. This cannot be undone.")
    confirmed = st.checkbox(f"I want to erase all progress for {DECK_LABELS.get(deck_id, deck_id)}")
    if st.button("Reset deck", disabled=not confirmed):
        if reset_progress():
            st.success("Deck reset.")
        else:
            st.error("Could not reset the deck. Storage is unavailable.")
