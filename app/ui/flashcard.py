"""
Flashcard UI Component

Renders the front and back of a kana card.
"""

from __future__ import annotations

import html

import streamlit as st

import srs
from app.ui.flashcard_style import (
    ANSWER_STYLE,
    CARD_MIN_HEIGHT,
    CARD_PADDING,
    KANA_STYLE,
    ROMAJI_STYLE,
    FlashcardStyle,
    level_color,
)


def render_flashcard(
    main_text: str,
    subtitle: str = "",
    corner_text: str = "",
    corner_color: str | None = None,
    style: FlashcardStyle | None = None,
) -> None:
    """
    Render a flashcard.

    Args:
        main_text: Primary text (center, large)
        subtitle: Optional secondary text (below main, smaller)
        corner_text: Optional text in top-right corner
        corner_color: CSS color for corner text (overrides style)
        style: Style preset
    """
    style = style or FlashcardStyle()
    corner_color = corner_color or style.corner_color

    corner_html = ""
    if corner_text:
        corner_html = (
            f'<div style="position: absolute; top: 15px; right: 20px; '
            f'font-size: {style.corner_font_size}; color: {corner_color}; '
            f'font-weight: 600;">{html.escape(corner_text)}</div>'
        )

    main_html = (
        f'<h1 style="font-size: {style.main_font_size}; color: {style.main_color}; '
        'margin: 0; text-align: center; line-height: 1.3;">'
        f"{html.escape(main_text)}</h1>"
    )

    subtitle_html = ""
    if subtitle:
        subtitle_html = (
            f'<p style="font-size: {style.subtitle_font_size}; color: {style.subtitle_color}; '
            f'font-style: italic; margin: 15px 0 0 0; text-align: center;">{html.escape(subtitle)}</p>'
        )

    card_html = (
        f'<div style="background-color: {style.bg_color}; padding: {CARD_PADDING}; '
        'border-radius: 15px; text-align: center; box-shadow: 0 4px 6px '
        f'rgba(0, 0, 0, 0.1); min-height: {CARD_MIN_HEIGHT}; display: flex; '
        'flex-direction: column; align-items: center; justify-content: center; '
        f'position: relative;">{corner_html}{main_html}{subtitle_html}</div>'
    )

    st.markdown(card_html, unsafe_allow_html=True)


def render_card_front(item: srs.LearnableItem, mode: srs.GameMode) -> None:
    style = ROMAJI_STYLE if mode == srs.GameMode.ROMAJI else KANA_STYLE
    render_flashcard(
        srs.prompt_for(item, mode),
        corner_text=f"Lv {item.state.retention_level}",
        corner_color=level_color(item.state.retention_level),
        style=style,
    )


def render_card_back(item: srs.LearnableItem, mode: srs.GameMode) -> None:
    render_flashcard(
        srs.expected_answer(item, mode),
        subtitle=f"{item.character} · {item.romaji} · {item.kind}",
        corner_text=f"Lv {item.state.retention_level}",
        corner_color=level_color(item.state.retention_level),
        style=ANSWER_STYLE,
    )
