"""
Session Statistics UI

Renders progress metrics, deck summary, and end-of-session screens.
"""

from __future__ import annotations

import streamlit as st

import srs


def render_session_stats(view: srs.SessionState) -> bool:
    """
    Render session progress metrics and exit button.

    Returns:
        True if quit button was clicked, False otherwise
    """
    st.progress(view.progress)

    col1, col2, col3, col4 = st.columns([2, 2, 2, 1])

    with col1:
        st.metric("Progress", f"{view.position}/{view.total}")

    with col2:
        st.metric("Correct", f"{view.stats.correct}/{view.stats.reviewed}")

    with col3:
        st.metric("Streak", f"🔥 {view.stats.current_streak}")

    with col4:
        st.markdown("<br>", unsafe_allow_html=True)  # Align with metrics
        if st.button("❌", help="Quit session", use_container_width=True):
            return True

    if not view.progress_saved:
        st.warning("Some answers in this session could not be saved.")

    st.divider()
    return False


def render_session_complete(view: srs.SessionState) -> None:
    """Render session completion message."""
    st.success("🏆 Session complete! Well done.")

    col1, col2, col3 = st.columns(3)
    col1.metric("Reviewed", view.stats.reviewed)
    col2.metric("Correct", view.stats.correct)
    col3.metric("Best Streak", view.stats.best_streak)

    if view.stats.reviewed > 0:
        st.info(f"Accuracy: {view.stats.accuracy * 100:.1f}%")
    if not view.progress_saved:
        st.warning("Some answers in this session could not be saved.")


def render_nothing_due() -> None:
    st.info("🌙 Nothing to review right now. Come back later!")


def render_deck_summary(deck: srs.Deck) -> None:
    summary = deck.summary()
    col1, col2, col3, col4 = st.columns(4)
    col1.metric("New", summary.new)
    col2.metric("Learning", summary.learning)
    col3.metric("Mastered", summary.mastered)
    col4.metric("Due now", deck.due_count())

    if not deck.persistent:
        st.warning("Progress storage is unavailable. This session will not be saved.")
