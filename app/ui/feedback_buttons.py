"""
Feedback Button UI

Renders grading buttons and the typed-answer form.
"""

from __future__ import annotations

from typing import Optional

import streamlit as st

import srs


GRADE_LABELS = {
    "❌ Again": srs.ReviewQuality.AGAIN,
    "😰 Hard": srs.ReviewQuality.HARD,
    "👍 Good": srs.ReviewQuality.GOOD,
    "✨ Easy": srs.ReviewQuality.EASY,
}


def render_feedback_buttons(key_suffix: str = "") -> Optional[srs.ReviewQuality]:
    """
    Render feedback grading buttons.

    Returns:
        ReviewQuality selected by user, or None if no button clicked
    """
    st.markdown("**How well did you remember this character?**")

    columns = st.columns(len(GRADE_LABELS))
    for column, (label, quality) in zip(columns, GRADE_LABELS.items()):
        with column:
            if st.button(label, key=f"grade_{int(quality)}_{key_suffix}", use_container_width=True):
                return quality
    return None


def render_typed_answer(mode: srs.GameMode, key_suffix: str = "") -> Optional[str]:
    """
    Render the typed-answer form.

    Returns:
        Submitted text, or None until the user submits something non-blank
    """
    placeholder = "Type the romaji..." if mode == srs.GameMode.CHARACTER else "Type the kana..."
    with st.form(key=f"typed_answer_{key_suffix}", clear_on_submit=True):
        typed = st.text_input("Your answer", placeholder=placeholder, label_visibility="collapsed")
        submitted = st.form_submit_button("Check", type="primary", use_container_width=True)

    if submitted and typed.strip():
        return typed
    return None
