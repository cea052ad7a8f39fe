"""
Memory State - Learnable Items and Review State

Defines the per-item scheduling state and the derived status buckets.

Key concepts:
- Retention level (0-4): coarse bucket for how durably an item is learned
- Ease factor (1.3-3.0): per-item multiplier on the base interval curve
- Next review (epoch millis): item is due once now >= next_review_at
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Literal, Optional
import time

from srs.constants import DEFAULT_EASE, MAX_LEVEL


ItemStatus = Literal["new", "learning", "mastered"]


def now_ms() -> int:
    """Current wall-clock time as epoch milliseconds."""
    return int(time.time() * 1000)


@dataclass
class ReviewState:
    """
    Mutable scheduling state for one item.
    """
    retention_level: int = 0
    ease_factor: float = DEFAULT_EASE
    interval_ms: float = 0.0
    next_review_at: int = 0  # epoch millis
    review_count: int = 0


@dataclass
class LearnableItem:
    """
    A kana to memorize plus its scheduling state.

    Identity (item_id, character, romaji) never changes after creation;
    only `state` is replaced by grading.
    """
    item_id: str
    character: str
    romaji: str
    kind: str = ""
    row: str = ""
    state: ReviewState = field(default_factory=ReviewState)

    @property
    def is_new(self) -> bool:
        return self.state.review_count == 0

    def is_due(self, now: int) -> bool:
        return now >= self.state.next_review_at

    @property
    def status(self) -> ItemStatus:
        """Bucket used for deck summaries. Level 0 is "new", reviewed or not."""
        if self.state.retention_level <= 0:
            return "new"
        if self.state.retention_level >= MAX_LEVEL:
            return "mastered"
        return "learning"


def initialize_new_item(
    item_id: str,
    character: str,
    romaji: str,
    kind: str = "",
    row: str = "",
    created_at: Optional[int] = None
) -> LearnableItem:
    """
    Initialize an item that has never been reviewed.

    New items are due immediately at their creation time.

    Args:
        item_id: Stable identifier within the deck
        character: Symbol shown to the learner
        romaji: Expected transliteration
        kind: Character class (vowel, dakuten, ...)
        row: Gojūon row the character belongs to
        created_at: Creation timestamp in epoch millis (default: now)

    Returns:
        LearnableItem in its creation state
    """
    if created_at is None:
        created_at = now_ms()

    return LearnableItem(
        item_id=item_id,
        character=character,
        romaji=romaji,
        kind=kind,
        row=row,
        state=ReviewState(
            retention_level=0,
            ease_factor=DEFAULT_EASE,
            interval_ms=0.0,
            next_review_at=created_at,
            review_count=0,
        ),
    )
