"""
Deck definitions and the Deck value returned by the Item Store.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional

from srs.errors import UnknownDeck
from srs.kana_data import HIRAGANA, KATAKANA, KanaCharacter
from srs.memory_state import LearnableItem, initialize_new_item, now_ms


DECK_SOURCES: dict[str, tuple[KanaCharacter, ...]] = {
    "hiragana": HIRAGANA,
    "katakana": KATAKANA,
    "both": HIRAGANA + KATAKANA,
}


def deck_ids() -> list[str]:
    return list(DECK_SOURCES)


def get_deck_source(deck_id: str) -> tuple[KanaCharacter, ...]:
    try:
        return DECK_SOURCES[deck_id]
    except KeyError:
        raise UnknownDeck(deck_id) from None


def build_initial_items(deck_id: str, created_at: Optional[int] = None) -> list[LearnableItem]:
    """
    Build every item of a deck in its creation state.

    Item ids are "{deck_id}-{index}", so they stay stable as long as the
    source list is only appended to.
    """
    source = get_deck_source(deck_id)
    if created_at is None:
        created_at = now_ms()

    return [
        initialize_new_item(
            item_id=f"{deck_id}-{index}",
            character=kana.character,
            romaji=kana.romaji,
            kind=kana.kind,
            row=kana.row,
            created_at=created_at,
        )
        for index, kana in enumerate(source)
    ]


@dataclass(frozen=True)
class DeckSummary:
    new: int
    learning: int
    mastered: int
    total: int


@dataclass
class Deck:
    """
    All items of one deck as loaded from the Item Store.

    persistent is False when the store was unavailable and the deck lives
    only in memory for this session.
    """
    deck_id: str
    items: list[LearnableItem] = field(default_factory=list)
    persistent: bool = True

    def summary(self) -> DeckSummary:
        counts = {"new": 0, "learning": 0, "mastered": 0}
        for item in self.items:
            counts[item.status] += 1
        return DeckSummary(total=len(self.items), **counts)

    def find(self, item_id: str) -> Optional[LearnableItem]:
        for item in self.items:
            if item.item_id == item_id:
                return item
        return None

    def due_count(self, now: Optional[int] = None) -> int:
        if now is None:
            now = now_ms()
        return sum(1 for item in self.items if item.is_due(now))
