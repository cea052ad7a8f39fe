"""
Flashcard style presets and constants.
"""

from __future__ import annotations

from dataclasses import dataclass


# ---- Shared Card Layout ----

CARD_PADDING = "35px 24px"
CARD_MIN_HEIGHT = "230px"
FRONT_BG_COLOR = "#f0f2f6"
BACK_BG_COLOR = "#e8f4f8"


# ---- Retention Level Badges ----
# Indexed by retention level 0-4

LEVEL_COLORS = ("#6b7280", "#ef4444", "#f97316", "#eab308", "#22c55e")


@dataclass(frozen=True)
class FlashcardStyle:
    """
    Visual style preset for flashcards.
    """
    main_font_size: str = "3em"
    main_color: str = "#1f1f1f"
    subtitle_font_size: str = "1.2em"
    subtitle_color: str = "#666"
    corner_font_size: str = "0.9em"
    corner_color: str = "#666"
    bg_color: str = FRONT_BG_COLOR


# ---- Presets ----

KANA_STYLE = FlashcardStyle(main_font_size="5em")
ROMAJI_STYLE = FlashcardStyle(main_font_size="3.5em")
ANSWER_STYLE = FlashcardStyle(main_font_size="3.5em", bg_color=BACK_BG_COLOR)


def level_color(level: int) -> str:
    if 0 <= level < len(LEVEL_COLORS):
        return LEVEL_COLORS[level]
    return LEVEL_COLORS[0]
