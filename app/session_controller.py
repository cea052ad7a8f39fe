"""
Session lifecycle helpers for Streamlit app.

Thin glue between widgets and srs.SessionController; all scheduling
decisions stay in the engine.
"""

from __future__ import annotations

import logging

import streamlit as st

import srs
from app.state import get_store

logger = logging.getLogger(__name__)


def load_current_deck() -> srs.Deck:
    deck = get_store().load(st.session_state.deck_id)
    st.session_state.deck_persistent = deck.persistent
    return deck


def start_new_session() -> None:
    """
    Build a fresh session from the selected deck and start it.
    """
    deck = load_current_deck()
    items = srs.build_session(deck.items, st.session_state.session_limit)

    controller = srs.SessionController(get_store(), deck.deck_id)
    st.session_state.controller = controller
    st.session_state.session_view = controller.start(items)
    st.session_state.show_answer = False
    st.session_state.last_answer = None
    st.session_state.pop("answer_choice", None)


def process_feedback(quality: srs.ReviewQuality) -> None:
    """
    Grade the current card and move to the next one.
    """
    controller: srs.SessionController = st.session_state.controller
    st.session_state.session_view = controller.grade_current(quality)
    st.session_state.show_answer = False
    st.session_state.pop("answer_choice", None)
    st.rerun()


def submit_typed_answer(typed: str) -> None:
    """
    Check a typed answer, grade it right -> GOOD / wrong -> AGAIN, and advance.
    """
    controller: srs.SessionController = st.session_state.controller
    item = controller.current_item()
    mode = st.session_state.game_mode
    correct = srs.check_answer(item, typed, mode)

    st.session_state.last_answer = {
        "prompt": srs.prompt_for(item, mode),
        "expected": srs.expected_answer(item, mode),
        "typed": typed.strip(),
        "correct": correct,
    }
    process_feedback(srs.quality_for_answer(correct))


def restart_session() -> None:
    controller: srs.SessionController = st.session_state.controller
    st.session_state.session_view = controller.restart()
    st.session_state.show_answer = False
    st.session_state.last_answer = None


def end_session() -> None:
    """
    Abandon the current session; ungraded cards keep their stored state.
    """
    st.session_state.controller = None
    st.session_state.session_view = None
    st.session_state.show_answer = False
    st.session_state.last_answer = None


def reset_progress() -> bool:
    """
    Reset the selected deck. Returns False if the reset could not be saved.
    """
    end_session()
    try:
        get_store().reset_deck(st.session_state.deck_id)
    except srs.PersistenceError:
        logger.exception("Reset of deck %r failed", st.session_state.deck_id)
        return False
    return True
