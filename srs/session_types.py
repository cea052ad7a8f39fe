"""
Session types shared by the session builder and controller.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from srs.memory_state import LearnableItem


@dataclass(frozen=True, eq=False)
class SessionItem:
    """
    A single step within a session batch.

    Holds a reference to the deck's item, not a copy: grading the item
    mid-session is visible through it.
    """
    item: LearnableItem

    @property
    def item_id(self) -> str:
        return self.item.item_id


class SessionStatus(str, Enum):
    IDLE = "idle"
    IN_PROGRESS = "in_progress"
    COMPLETE = "complete"
    NOTHING_DUE = "nothing_due"


@dataclass
class SessionStats:
    """
    Running statistics for one session (never persisted).
    """
    reviewed: int = 0
    correct: int = 0
    current_streak: int = 0
    best_streak: int = 0

    def record(self, success: bool) -> None:
        self.reviewed += 1
        if success:
            self.correct += 1
            self.current_streak += 1
            self.best_streak = max(self.best_streak, self.current_streak)
        else:
            self.current_streak = 0

    @property
    def accuracy(self) -> float:
        if self.reviewed == 0:
            return 0.0
        return self.correct / self.reviewed


@dataclass(frozen=True)
class SessionState:
    """
    Snapshot of the controller for the presentation layer to render.
    """
    status: SessionStatus
    current_item: Optional[LearnableItem]
    stats: SessionStats
    position: int
    total: int
    session_id: Optional[str] = None
    progress_saved: bool = True  # False once any grade failed to persist

    @property
    def progress(self) -> float:
        """Fraction of the session reviewed so far (0-1)."""
        if self.total == 0:
            return 0.0
        return min(1.0, self.stats.reviewed / self.total)

    @property
    def is_finished(self) -> bool:
        return self.status in (SessionStatus.COMPLETE, SessionStatus.NOTHING_DUE)
