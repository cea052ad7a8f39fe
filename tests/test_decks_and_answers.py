"""Tests for deck data, deck summaries, and the typed-answer policy."""

import pytest

from srs.answers import GameMode, check_answer, expected_answer, prompt_for, quality_for_answer
from srs.constants import DAY_MS, ReviewQuality
from srs.decks import Deck, build_initial_items, deck_ids
from srs.errors import UnknownDeck
from srs.kana_data import HIRAGANA, KATAKANA
from srs.scheduler import process_review


class TestDecks:

    def test_deck_ids(self):
        assert deck_ids() == ["hiragana", "katakana", "both"]

    def test_source_sizes(self):
        assert len(HIRAGANA) == 104
        assert len(KATAKANA) == 104
        assert len(build_initial_items("both", 0)) == 208

    def test_item_ids_follow_source_position(self, now):
        items = build_initial_items("katakana", now)
        assert items[0].item_id == "katakana-0"
        assert items[0].character == "ア"
        assert items[-1].item_id == "katakana-103"

    def test_both_deck_puts_hiragana_first(self, now):
        items = build_initial_items("both", now)
        assert items[0].character == HIRAGANA[0].character
        assert items[104].character == KATAKANA[0].character
        assert items[104].item_id == "both-104"

    def test_unknown_deck_is_key_error(self):
        with pytest.raises(KeyError):
            build_initial_items("cyrillic")
        with pytest.raises(UnknownDeck, match="cyrillic"):
            build_initial_items("cyrillic")

    def test_summary_buckets(self, now):
        items = build_initial_items("hiragana", now)
        items[1].state.review_count = 3
        items[1].state.retention_level = 2
        items[2].state.review_count = 6
        items[2].state.retention_level = 4

        summary = Deck("hiragana", items).summary()
        assert summary.new == 102
        assert summary.learning == 1
        assert summary.mastered == 1
        assert summary.total == 104

    def test_item_failed_at_level_zero_counts_as_new(self, now):
        items = build_initial_items("hiragana", now)
        item, _ = process_review(items[0], ReviewQuality.AGAIN, now)

        assert item.state.review_count == 1
        assert item.state.retention_level == 0
        assert item.status == "new"
        assert not item.is_new
        assert Deck("hiragana", items).summary().learning == 0

    def test_find_and_due_count(self, now):
        items = build_initial_items("hiragana", now)
        items[0].state.next_review_at = now + DAY_MS
        deck = Deck("hiragana", items)

        assert deck.find("hiragana-7") is items[7]
        assert deck.find("hiragana-999") is None
        assert deck.due_count(now) == 103


class TestAnswers:

    @pytest.fixture
    def shi(self, make_item):
        return make_item(item_id="hiragana-11", character="し", romaji="shi")

    @pytest.mark.parametrize("typed", ["shi", "SHI", "  Shi ", "shi\n"])
    def test_romaji_answer_is_normalized(self, shi, typed):
        assert check_answer(shi, typed)

    @pytest.mark.parametrize("typed", ["si", "", "   ", None, "し"])
    def test_wrong_or_blank_romaji(self, shi, typed):
        assert not check_answer(shi, typed)

    def test_romaji_mode_expects_kana(self, shi):
        assert prompt_for(shi, GameMode.ROMAJI) == "shi"
        assert expected_answer(shi, GameMode.ROMAJI) == "し"
        assert check_answer(shi, " し ", GameMode.ROMAJI)
        assert not check_answer(shi, "shi", GameMode.ROMAJI)

    def test_character_mode_is_default(self, shi):
        assert prompt_for(shi, GameMode.CHARACTER) == "し"
        assert expected_answer(shi, GameMode.CHARACTER) == "shi"

    def test_quality_policy(self):
        assert quality_for_answer(True) is ReviewQuality.GOOD
        assert quality_for_answer(False) is ReviewQuality.AGAIN
