"""
Session Controller - Review Session Lifecycle

State machine:

    IDLE --start(items)--> IN_PROGRESS --last grade--> COMPLETE
    IDLE --start([])-----> NOTHING_DUE
    COMPLETE --restart()-> IN_PROGRESS (same items, reshuffled)

start() may be called from any state; an abandoned session leaves the
ungraded current item untouched in the store.
"""

from __future__ import annotations
import logging
import random
import uuid
from typing import Callable, Optional

from srs.errors import InvalidTransition, NoCurrentItem, PersistenceError
from srs.item_store import ItemStore
from srs.memory_state import LearnableItem, now_ms
from srs.scheduler import coerce_quality, is_success, process_review
from srs.session_types import SessionItem, SessionState, SessionStats, SessionStatus

logger = logging.getLogger(__name__)


class SessionController:
    """
    Drives one review session over a deck.

    Args:
        store: Item Store that persists each graded item
        deck_id: Deck the session items belong to
        rng: Random source used by restart() (default: new Random)
        clock: Returns "now" in epoch millis (default: wall clock)
    """

    def __init__(
        self,
        store: ItemStore,
        deck_id: str,
        rng: Optional[random.Random] = None,
        clock: Callable[[], int] = now_ms
    ):
        self.store = store
        self.deck_id = deck_id
        self.rng = rng or random.Random()
        self.clock = clock

        self.status = SessionStatus.IDLE
        self.items: list[SessionItem] = []
        self.position = 0
        self.stats = SessionStats()
        self.session_id: Optional[str] = None
        self.progress_saved = True

    def _reset(self, items: list[SessionItem]) -> None:
        self.items = items
        self.position = 0
        self.stats = SessionStats()
        self.session_id = str(uuid.uuid4())
        self.progress_saved = True

    def start(self, items: list[SessionItem]) -> SessionState:
        """
        Start a session over the given items.

        An empty batch is not an error: the controller moves to NOTHING_DUE.
        """
        self._reset(list(items))
        if not self.items:
            self.status = SessionStatus.NOTHING_DUE
            logger.debug("Nothing due in deck %r", self.deck_id)
        else:
            self.status = SessionStatus.IN_PROGRESS
            logger.debug("Started session %s with %d items", self.session_id, len(self.items))
        return self.snapshot()

    def current_item(self) -> LearnableItem:
        if self.status != SessionStatus.IN_PROGRESS:
            raise NoCurrentItem(f"No current item (session is {self.status.value})")
        return self.items[self.position].item

    def grade_current(self, quality: object) -> SessionState:
        """
        Grade the current item, persist it, and advance.

        A failed save is logged and reported through progress_saved; the
        session continues in memory.

        Raises:
            InvalidQuality: quality outside 0-3 (nothing is changed)
            NoCurrentItem: no session in progress
        """
        quality = coerce_quality(quality)
        item = self.current_item()

        _, event_data = process_review(item, quality, self.clock())
        event_data["session_id"] = self.session_id
        event_data["session_position"] = self.position

        try:
            self.store.save_item(self.deck_id, item, event_data)
        except PersistenceError:
            self.progress_saved = False
            logger.warning(
                "Grade for %r not saved; continuing session in memory",
                item.item_id,
                exc_info=True
            )

        self.stats.record(is_success(quality))
        self.position += 1

        if self.position >= len(self.items):
            self.status = SessionStatus.COMPLETE
            logger.debug(
                "Session %s complete: %d/%d correct",
                self.session_id,
                self.stats.correct,
                self.stats.reviewed
            )
        return self.snapshot()

    def restart(self) -> SessionState:
        """
        Practice the same items again in a fresh random order.

        Raises:
            InvalidTransition: session is not COMPLETE
        """
        if self.status != SessionStatus.COMPLETE:
            raise InvalidTransition(f"Cannot restart a session that is {self.status.value}")

        items = list(self.items)
        self.rng.shuffle(items)
        self._reset(items)
        self.status = SessionStatus.IN_PROGRESS
        return self.snapshot()

    def snapshot(self) -> SessionState:
        current = None
        if self.status == SessionStatus.IN_PROGRESS:
            current = self.items[self.position].item

        return SessionState(
            status=self.status,
            current_item=current,
            stats=SessionStats(
                reviewed=self.stats.reviewed,
                correct=self.stats.correct,
                current_streak=self.stats.current_streak,
                best_streak=self.stats.best_streak,
            ),
            position=self.position,
            total=len(self.items),
            session_id=self.session_id,
            progress_saved=self.progress_saved,
        )
