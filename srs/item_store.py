"""
Item Store - Deck Persistence

The only component that touches the database. Each deck is addressed by its
id; writes to one deck are serialized by a per-deck lock, and the weak
consistency model is last-writer-wins per item.

Failure policy:
- load() never fails on storage errors: it returns a usable in-memory deck
  (Deck.persistent = False).
- replace_all(), save_item() and reset_deck() raise PersistenceError.
"""

from __future__ import annotations
import logging
import threading
from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy import delete, func
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from srs import database
from srs.decks import Deck, build_initial_items
from srs.errors import PersistenceError
from srs.memory_state import LearnableItem, ReviewState, now_ms
from srs.models import ItemStateRow, ReviewEventRow

logger = logging.getLogger(__name__)


def _row_to_item(row: ItemStateRow) -> LearnableItem:
    return LearnableItem(
        item_id=row.item_id,
        character=row.character,
        romaji=row.romaji,
        kind=row.kind,
        row=row.row,
        state=ReviewState(
            retention_level=row.retention_level,
            ease_factor=row.ease_factor,
            interval_ms=row.interval_ms,
            next_review_at=row.next_review_at,
            review_count=row.review_count,
        ),
    )


def _item_to_row(deck_id: str, position: int, item: LearnableItem) -> ItemStateRow:
    row = ItemStateRow(
        deck_id=deck_id,
        item_id=item.item_id,
        position=position,
        character=item.character,
        romaji=item.romaji,
        kind=item.kind,
        row=item.row,
    )
    _copy_state(row, item.state)
    return row


def _copy_state(row: ItemStateRow, state: ReviewState) -> None:
    row.retention_level = state.retention_level
    row.ease_factor = state.ease_factor
    row.interval_ms = state.interval_ms
    row.next_review_at = state.next_review_at
    row.review_count = state.review_count


class ItemStore:
    """
    Durable collection of decks keyed by deck id.
    """

    def __init__(self, engine: Optional[Engine] = None):
        self.engine = engine or database.get_engine()
        self._session_factory = database.make_session_factory(self.engine)
        self._locks: dict[str, threading.Lock] = {}
        self._locks_guard = threading.Lock()

    @contextmanager
    def _deck_lock(self, deck_id: str) -> Iterator[None]:
        with self._locks_guard:
            lock = self._locks.setdefault(deck_id, threading.Lock())
        with lock:
            yield

    # ---- Reads ----

    def load(self, deck_id: str, now: Optional[int] = None) -> Deck:
        """
        Load a deck, creating and persisting its baseline on first use.

        Items defined by the deck's source data but missing from storage are
        initialized and persisted too.

        Args:
            deck_id: Deck identifier (hiragana, katakana, both)
            now: Creation time for new items in epoch millis (default: now)

        Returns:
            Deck in source order; persistent=False if storage was unavailable
        """
        fresh_items = build_initial_items(deck_id, now)

        with self._deck_lock(deck_id):
            session = self._session_factory()
            try:
                rows = session.query(ItemStateRow).filter(
                    ItemStateRow.deck_id == deck_id
                ).all()
            except SQLAlchemyError:
                logger.warning(
                    "Item store unavailable, deck %r will not be saved this session",
                    deck_id,
                    exc_info=True
                )
                session.close()
                return Deck(deck_id=deck_id, items=fresh_items, persistent=False)

            stored = {row.item_id: row for row in rows}
            items: list[LearnableItem] = []
            missing_rows: list[ItemStateRow] = []
            for position, fresh in enumerate(fresh_items):
                row = stored.get(fresh.item_id)
                if row is None:
                    missing_rows.append(_item_to_row(deck_id, position, fresh))
                    items.append(fresh)
                else:
                    items.append(_row_to_item(row))

            if not missing_rows:
                session.close()
                return Deck(deck_id=deck_id, items=items)

            try:
                session.add_all(missing_rows)
                session.commit()
            except SQLAlchemyError:
                session.rollback()
                logger.warning(
                    "Could not persist %d new items for deck %r",
                    len(missing_rows),
                    deck_id,
                    exc_info=True
                )
                return Deck(deck_id=deck_id, items=items, persistent=False)
            finally:
                session.close()

            logger.info("Initialized %d items for deck %r", len(missing_rows), deck_id)
            return Deck(deck_id=deck_id, items=items)

    def get_review_events(self, deck_id: str, limit: int = 10) -> list[dict]:
        """
        Get recent review events for a deck (newest first).
        """
        session = self._session_factory()
        try:
            events = session.query(ReviewEventRow).filter(
                ReviewEventRow.deck_id == deck_id
            ).order_by(
                ReviewEventRow.timestamp_ms.desc(),
                ReviewEventRow.id.desc()
            ).limit(limit).all()
        except SQLAlchemyError as exc:
            raise PersistenceError(f"Could not read review events for deck {deck_id!r}") from exc
        finally:
            session.close()

        return [
            {
                "id": event.id,
                "deck_id": event.deck_id,
                "item_id": event.item_id,
                "session_id": event.session_id,
                "session_position": event.session_position,
                "timestamp_ms": event.timestamp_ms,
                "quality": event.quality,
                "level_before": event.level_before,
                "level_after": event.level_after,
                "ease_before": event.ease_before,
                "ease_after": event.ease_after,
                "interval_ms": event.interval_ms,
                "next_review_at": event.next_review_at,
            }
            for event in events
        ]

    # ---- Writes ----

    def replace_all(self, deck_id: str, items: list[LearnableItem]) -> None:
        """
        Atomically overwrite the stored deck with the given items.

        Raises:
            PersistenceError: if the write failed (nothing is changed)
        """
        with self._deck_lock(deck_id):
            self._write_deck(deck_id, items, clear_events=False)

    def save_item(self, deck_id: str, item: LearnableItem, event: Optional[dict] = None) -> None:
        """
        Persist one item's state, plus its review event if given, in one transaction.

        Raises:
            PersistenceError: if the write failed
        """
        with self._deck_lock(deck_id):
            session = self._session_factory()
            try:
                row = session.get(ItemStateRow, (deck_id, item.item_id))
                if row is None:
                    max_position = session.query(func.max(ItemStateRow.position)).filter(
                        ItemStateRow.deck_id == deck_id
                    ).scalar()
                    position = 0 if max_position is None else max_position + 1
                    session.add(_item_to_row(deck_id, position, item))
                else:
                    _copy_state(row, item.state)

                if event is not None:
                    session.add(ReviewEventRow(
                        deck_id=deck_id,
                        item_id=event["item_id"],
                        session_id=event.get("session_id"),
                        session_position=event.get("session_position"),
                        timestamp_ms=event["timestamp_ms"],
                        quality=int(event["quality"]),
                        level_before=event["level_before"],
                        level_after=event["level_after"],
                        ease_before=event["ease_before"],
                        ease_after=event["ease_after"],
                        interval_ms=event["interval_ms"],
                        next_review_at=event["next_review_at"],
                    ))
                session.commit()
            except SQLAlchemyError as exc:
                session.rollback()
                logger.error("Failed to save item %r of deck %r", item.item_id, deck_id)
                raise PersistenceError(
                    f"Could not save item {item.item_id!r} of deck {deck_id!r}"
                ) from exc
            finally:
                session.close()

    def reset_deck(self, deck_id: str, now: Optional[int] = None) -> Deck:
        """
        DESTRUCTIVE: Return every item of the deck to its creation state.

        All progress and review history for the deck is discarded. Callers
        must confirm intent with the user first.

        Raises:
            PersistenceError: if the write failed
        """
        items = build_initial_items(deck_id, now if now is not None else now_ms())
        with self._deck_lock(deck_id):
            self._write_deck(deck_id, items, clear_events=True)
        logger.info("Reset deck %r (%d items)", deck_id, len(items))
        return Deck(deck_id=deck_id, items=items)

    def _write_deck(self, deck_id: str, items: list[LearnableItem], clear_events: bool) -> None:
        # Caller holds the deck lock
        session = self._session_factory()
        try:
            session.execute(delete(ItemStateRow).where(ItemStateRow.deck_id == deck_id))
            if clear_events:
                session.execute(delete(ReviewEventRow).where(ReviewEventRow.deck_id == deck_id))
            session.add_all(
                _item_to_row(deck_id, position, item)
                for position, item in enumerate(items)
            )
            session.commit()
        except SQLAlchemyError as exc:
            session.rollback()
            logger.error("Failed to write deck %r", deck_id)
            raise PersistenceError(f"Could not write deck {deck_id!r}") from exc
        finally:
            session.close()
