"""
Answer policy for typed answers and game modes.

The engine only understands review qualities. This module decides what a
typed answer is worth: right -> GOOD, wrong -> AGAIN.
"""

from __future__ import annotations
from enum import Enum

from srs.constants import ReviewQuality
from srs.memory_state import LearnableItem


class GameMode(str, Enum):
    CHARACTER = "character"  # Show the kana, answer with romaji
    ROMAJI = "romaji"        # Show romaji, answer with the kana


def prompt_for(item: LearnableItem, mode: GameMode) -> str:
    """Text shown on the front of the card."""
    if mode == GameMode.ROMAJI:
        return item.romaji
    return item.character


def expected_answer(item: LearnableItem, mode: GameMode) -> str:
    """Text shown on the back of the card and compared against typed input."""
    if mode == GameMode.ROMAJI:
        return item.character
    return item.romaji


def check_answer(item: LearnableItem, typed: str, mode: GameMode = GameMode.CHARACTER) -> bool:
    """
    Compare a typed answer with the expected one.

    Surrounding whitespace and letter case are ignored; blank input is
    never correct.
    """
    answer = (typed or "").strip().lower()
    if not answer:
        return False
    return answer == expected_answer(item, mode).lower()


def quality_for_answer(correct: bool) -> ReviewQuality:
    return ReviewQuality.GOOD if correct else ReviewQuality.AGAIN
