"""
SRS - Kana Review Scheduler

Main API for the character flashcard game.

This package implements a small spaced-repetition engine with:
- Item Store: durable per-deck item state (SQLAlchemy)
- Session Builder: due-first, new-capped, shuffled review sessions
- Scheduler: simplified SM-2 grading (retention level 0-4, ease factor)
- Session Controller: IDLE -> IN_PROGRESS -> COMPLETE / NOTHING_DUE

Quick start:
    from srs import ItemStore, ReviewQuality, SessionController, build_session, init_db

    init_db()
    store = ItemStore()
    deck = store.load("hiragana")

    controller = SessionController(store, deck.deck_id)
    state = controller.start(build_session(deck.items, session_limit=20))
    state = controller.grade_current(ReviewQuality.GOOD)
"""

# Core scheduler API (algorithm logic)
from srs.scheduler import process_review, schedule_review, coerce_quality

# Sessions
from srs.session_builder import build_session
from srs.session_controller import SessionController
from srs.session_types import SessionItem, SessionState, SessionStats, SessionStatus

# Persistence
from srs.database import init_db, reset_db, is_test_mode
from srs.item_store import ItemStore

# Decks and items
from srs.decks import Deck, DeckSummary, build_initial_items, deck_ids
from srs.memory_state import LearnableItem, ReviewState, initialize_new_item, now_ms

# Answer policy
from srs.answers import GameMode, check_answer, expected_answer, prompt_for, quality_for_answer

# Constants
from srs.constants import (
    ReviewQuality,
    DEFAULT_SESSION_LIMIT,
    SESSION_LIMIT_OPTIONS,
)

# Errors
from srs.errors import (
    SRSError,
    InvalidQuality,
    InvalidSessionLimit,
    InvalidTransition,
    NoCurrentItem,
    PersistenceError,
    UnknownDeck,
)


__all__ = [
    # Core algorithm
    "process_review",
    "schedule_review",
    "coerce_quality",

    # Sessions
    "build_session",
    "SessionController",
    "SessionItem",
    "SessionState",
    "SessionStats",
    "SessionStatus",

    # Persistence
    "init_db",
    "reset_db",
    "is_test_mode",
    "ItemStore",

    # Decks and items
    "Deck",
    "DeckSummary",
    "build_initial_items",
    "deck_ids",
    "LearnableItem",
    "ReviewState",
    "initialize_new_item",
    "now_ms",

    # Answer policy
    "GameMode",
    "check_answer",
    "expected_answer",
    "prompt_for",
    "quality_for_answer",

    # Constants
    "ReviewQuality",
    "DEFAULT_SESSION_LIMIT",
    "SESSION_LIMIT_OPTIONS",

    # Errors
    "SRSError",
    "InvalidQuality",
    "InvalidSessionLimit",
    "InvalidTransition",
    "NoCurrentItem",
    "PersistenceError",
    "UnknownDeck",
]
