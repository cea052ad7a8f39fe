"""
Scheduler - Grading Engine

Pure scheduling logic (no database calls), a simplified SM-2 variant:

- AGAIN / HARD: demote one level, come back in one minute
- GOOD / EASY: promote one level, wait base_interval(level) * ease
- EASY also raises the ease factor (capped at MAX_EASE)

Main workflow:
1. Caller loads the item (Item Store)
2. schedule_review() computes the next ReviewState
3. process_review() applies it and builds the review event
4. Caller persists item + event

This module handles ONLY the algorithm logic.
"""

from __future__ import annotations
from typing import Optional, Tuple

from srs.constants import (
    BASE_INTERVALS_MS,
    EASY_BONUS,
    MAX_EASE,
    MAX_LEVEL,
    MIN_EASE,
    MIN_LEVEL,
    PASSING_QUALITY,
    RELEARN_DELAY_MS,
    ReviewQuality,
)
from srs.errors import InvalidQuality
from srs.memory_state import LearnableItem, ReviewState, now_ms


def coerce_quality(value: object) -> ReviewQuality:
    """
    Validate a caller-supplied grade.

    Raises:
        InvalidQuality: if value is not one of 0, 1, 2, 3
    """
    if isinstance(value, bool):
        raise InvalidQuality(value)
    try:
        return ReviewQuality(value)
    except (ValueError, TypeError):
        raise InvalidQuality(value) from None


def is_success(quality: ReviewQuality) -> bool:
    return quality >= PASSING_QUALITY


def base_interval_ms(level: int) -> int:
    """Base interval for a retention level; out-of-range levels use the top entry."""
    if 0 <= level < len(BASE_INTERVALS_MS):
        return BASE_INTERVALS_MS[level]
    return BASE_INTERVALS_MS[MAX_LEVEL]


def _clamp_level(level: int) -> int:
    return max(MIN_LEVEL, min(MAX_LEVEL, level))


def _clamp_ease(ease: float) -> float:
    return max(MIN_EASE, min(MAX_EASE, ease))


def schedule_review(
    state: ReviewState,
    quality: object,
    now: int
) -> ReviewState:
    """
    Compute the state that follows one review.

    Args:
        state: Current review state (not modified)
        quality: AGAIN=0, HARD=1, GOOD=2, EASY=3
        now: Review time in epoch millis

    Returns:
        New ReviewState
    """
    quality = coerce_quality(quality)
    level = _clamp_level(state.retention_level)
    ease = _clamp_ease(state.ease_factor)

    if not is_success(quality):
        return ReviewState(
            retention_level=max(MIN_LEVEL, level - 1),
            ease_factor=ease,
            interval_ms=0.0,
            next_review_at=now + RELEARN_DELAY_MS,
            review_count=state.review_count + 1,
        )

    new_level = min(MAX_LEVEL, level + 1)
    if quality == ReviewQuality.EASY:
        ease = min(MAX_EASE, ease + EASY_BONUS)

    interval = base_interval_ms(new_level) * ease
    return ReviewState(
        retention_level=new_level,
        ease_factor=ease,
        interval_ms=interval,
        next_review_at=now + int(round(interval)),
        review_count=state.review_count + 1,
    )


def process_review(
    item: LearnableItem,
    quality: object,
    timestamp: Optional[int] = None
) -> Tuple[LearnableItem, dict]:
    """
    Grade an item and return it along with the review event data.

    The item's state is replaced in place. Event data is ready to pass to
    ItemStore.save_item().

    Args:
        item: Item that was just reviewed
        quality: User judgment (AGAIN, HARD, GOOD, EASY)
        timestamp: Review time in epoch millis (defaults to now)

    Returns:
        Tuple of (item, event_data_dict)
    """
    quality = coerce_quality(quality)
    if timestamp is None:
        timestamp = now_ms()

    before = item.state
    after = schedule_review(before, quality, timestamp)
    item.state = after

    event_data = {
        "item_id": item.item_id,
        "timestamp_ms": timestamp,
        "quality": int(quality),
        "level_before": before.retention_level,
        "level_after": after.retention_level,
        "ease_before": before.ease_factor,
        "ease_after": after.ease_factor,
        "interval_ms": after.interval_ms,
        "next_review_at": after.next_review_at,
        "session_id": None,  # Set by caller if needed
        "session_position": None,  # Set by caller if needed
    }

    return item, event_data
