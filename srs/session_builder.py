"""
Session Builder - Due/New Session Creation

Creates a review session from two pools:
1. Due pool: items with next_review_at <= now, earliest-due first
2. New pool: never-reviewed items, capped at MAX_NEW_PER_SESSION

Session Logic:
- Due items first, then new items not already due
- Shuffle the whole pool
- Keep the first session_limit items

A linear scan per build is fine at deck sizes of a few hundred items.
"""

from __future__ import annotations
import random
from typing import Iterable, Optional

from srs.constants import MAX_NEW_PER_SESSION
from srs.errors import InvalidSessionLimit
from srs.memory_state import LearnableItem, now_ms
from srs.session_types import SessionItem


def validate_session_limit(session_limit: object) -> int:
    if isinstance(session_limit, bool) or not isinstance(session_limit, int) or session_limit <= 0:
        raise InvalidSessionLimit(session_limit)
    return session_limit


def due_items(items: Iterable[LearnableItem], now: int) -> list[LearnableItem]:
    """
    Filter and sort due items, most overdue first.
    """
    due = [item for item in items if item.is_due(now)]
    due.sort(key=lambda item: item.state.next_review_at)
    return due


def new_items(items: Iterable[LearnableItem], count: int) -> list[LearnableItem]:
    """
    First `count` never-reviewed items in deck order.
    """
    if count <= 0:
        return []
    return [item for item in items if item.is_new][:count]


def build_session(
    items: list[LearnableItem],
    session_limit: int,
    now: Optional[int] = None,
    rng: Optional[random.Random] = None
) -> list[SessionItem]:
    """
    Build the ordered list of items to review in one sitting.

    Args:
        items: Every item of the deck
        session_limit: Maximum session size (positive integer)
        now: Time of the build in epoch millis (default: now)
        rng: Random source for the pool shuffle (default: module random)

    Returns:
        Shuffled list of at most session_limit SessionItems (may be empty)
    """
    session_limit = validate_session_limit(session_limit)
    if now is None:
        now = now_ms()
    rng = rng or random.Random()

    due = due_items(items, now)
    due_ids = {item.item_id for item in due}

    # An item that is both due and new counts once, as due
    fresh = [
        item for item in new_items(items, min(MAX_NEW_PER_SESSION, session_limit))
        if item.item_id not in due_ids
    ]

    pool = due + fresh
    rng.shuffle(pool)
    return [SessionItem(item=item) for item in pool[:session_limit]]
