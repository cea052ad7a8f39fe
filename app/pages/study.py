"""
Study page rendering.
"""

from __future__ import annotations

import streamlit as st

import srs
from app.session_controller import (
    end_session,
    load_current_deck,
    process_feedback,
    restart_session,
    start_new_session,
    submit_typed_answer,
)
from app.ui import (
    render_card_back,
    render_card_front,
    render_deck_summary,
    render_feedback_buttons,
    render_nothing_due,
    render_session_complete,
    render_session_stats,
    render_typed_answer,
)


def render_study_page() -> None:
    """
    Render the study flow (intro, active session, or end screen).
    """
    view: srs.SessionState | None = st.session_state.session_view

    if view is None:
        _render_intro_screen()
    elif view.status == srs.SessionStatus.IN_PROGRESS:
        _render_active_session(view)
    elif view.status == srs.SessionStatus.NOTHING_DUE:
        render_nothing_due()
        if st.button("Back", use_container_width=True):
            end_session()
            st.rerun()
    else:
        _render_complete_screen(view)


def _render_intro_screen() -> None:
    st.title("🎌 Kana Trainer")
    if srs.is_test_mode():
        st.warning("⚠️ **TEST MODE** - Using test_kana_trainer (set TEST_MODE=false in .env for production)")

    deck = load_current_deck()
    st.markdown(f"### {deck.deck_id.capitalize()}")
    render_deck_summary(deck)

    st.markdown("<br>", unsafe_allow_html=True)
    if st.button("Start session", type="primary", use_container_width=True):
        start_new_session()
        st.rerun()


def _render_active_session(view: srs.SessionState) -> None:
    if render_session_stats(view):
        end_session()
        st.rerun()

    item = view.current_item
    mode = st.session_state.game_mode
    key_suffix = f"{view.session_id}_{view.position}"

    last = st.session_state.last_answer
    if last is not None:
        if last["correct"]:
            st.success(f"✅ {last['prompt']} = {last['expected']}")
        else:
            st.error(f"❌ {last['prompt']} = {last['expected']} (you typed “{last['typed']}”)")

    if st.session_state.input_mode == "typing":
        render_card_front(item, mode)
        st.markdown("<br>", unsafe_allow_html=True)
        typed = render_typed_answer(mode, key_suffix=key_suffix)
        if typed is not None:
            submit_typed_answer(typed)
        return

    if not st.session_state.show_answer:
        render_card_front(item, mode)
        st.markdown("<br>", unsafe_allow_html=True)
        if st.button("Reveal Answer", use_container_width=True, type="primary"):
            st.session_state.show_answer = True
            st.rerun()
    else:
        render_card_back(item, mode)
        st.markdown("<br>", unsafe_allow_html=True)
        quality = render_feedback_buttons(key_suffix=key_suffix)
        if quality is not None:
            process_feedback(quality)


def _render_complete_screen(view: srs.SessionState) -> None:
    render_session_complete(view)

    col1, col2 = st.columns(2)
    with col1:
        if st.button("🔁 Practice Again", type="primary", use_container_width=True):
            restart_session()
            st.rerun()
    with col2:
        if st.button("Back to deck", use_container_width=True):
            end_session()
            st.rerun()
