"""UI Components for Kana Trainer"""

from app.ui.flashcard import render_flashcard, render_card_front, render_card_back
from app.ui.session_stats import (
    render_session_stats,
    render_session_complete,
    render_nothing_due,
    render_deck_summary,
)
from app.ui.feedback_buttons import render_feedback_buttons, render_typed_answer

__all__ = [
    "render_flashcard",
    "render_card_front",
    "render_card_back",
    "render_session_stats",
    "render_session_complete",
    "render_nothing_due",
    "render_deck_summary",
    "render_feedback_buttons",
    "render_typed_answer",
]
