"""Tests for due/new session selection."""

import random

import pytest

from srs.constants import DAY_MS, MINUTE_MS
from srs.decks import build_initial_items
from srs.errors import InvalidSessionLimit
from srs.session_builder import build_session, due_items, new_items


@pytest.fixture
def deck_items(now):
    return build_initial_items("hiragana", now)


def _schedule(item, next_review_at, review_count=1, level=1):
    item.state.next_review_at = next_review_at
    item.state.review_count = review_count
    item.state.retention_level = level
    return item


class TestBuildSession:

    def test_single_fresh_item(self, make_item, now, rng):
        item = make_item()
        session = build_session([item], 20, now=now, rng=rng)

        assert len(session) == 1
        assert session[0].item is item

    def test_session_holds_references_not_copies(self, make_item, now, rng):
        item = make_item()
        session = build_session([item], 20, now=now, rng=rng)
        item.state.review_count = 7
        assert session[0].item.state.review_count == 7

    @pytest.mark.parametrize("limit", [1, 5, 10, 20, 50, 100, 500])
    def test_session_never_exceeds_limit(self, deck_items, now, limit):
        session = build_session(deck_items, limit, now=now, rng=random.Random(limit))
        assert len(session) <= limit
        assert len(session) == min(limit, len(deck_items))

    def test_no_duplicates(self, deck_items, now, rng):
        session = build_session(deck_items, 100, now=now, rng=rng)
        ids = [s.item_id for s in session]
        assert len(ids) == len(set(ids))

    def test_nothing_due_and_nothing_new_is_empty(self, deck_items, now, rng):
        for item in deck_items:
            _schedule(item, now + DAY_MS)
        assert build_session(deck_items, 20, now=now, rng=rng) == []

    def test_selection_varies_when_more_items_are_due_than_fit(self, deck_items, now):
        for item in deck_items:
            _schedule(item, now + DAY_MS)
        overdue = deck_items[:30]
        for offset, item in enumerate(overdue):
            _schedule(item, now - (offset + 1) * MINUTE_MS)
        overdue_ids = {item.item_id for item in overdue}

        seen = set()
        for seed in range(50):
            session = build_session(deck_items, 10, now=now, rng=random.Random(seed))
            ids = {s.item_id for s in session}
            assert len(ids) == 10
            assert ids <= overdue_ids
            seen |= ids

        assert len(seen) > 10

    def test_new_items_capped_at_ten(self, now, rng):
        items = build_initial_items("katakana", now + DAY_MS)  # new but not yet due
        session = build_session(items, 50, now=now, rng=rng)

        assert len(session) == 10
        assert [s.item_id for s in sorted(session, key=lambda s: int(s.item_id.split("-")[1]))] == \
            [item.item_id for item in items[:10]]

    def test_new_cap_follows_small_limit(self, now, rng):
        items = build_initial_items("katakana", now + DAY_MS)
        assert len(build_session(items, 4, now=now, rng=rng)) == 4

    def test_due_and_new_item_counted_once(self, make_item, now, rng):
        item = make_item()  # due at creation time and never reviewed
        session = build_session([item], 20, now=now, rng=rng)
        assert len(session) == 1

    def test_new_items_can_displace_due_items(self, now):
        items = build_initial_items("hiragana", now + DAY_MS)[:12]
        reviewed = [_schedule(item, now - MINUTE_MS) for item in items[:2]]
        reviewed_ids = {item.item_id for item in reviewed}

        selections = [
            {s.item_id for s in build_session(items, 2, now=now, rng=random.Random(seed))}
            for seed in range(50)
        ]
        assert all(len(ids) == 2 for ids in selections)
        assert any(ids - reviewed_ids for ids in selections)
        assert any(ids & reviewed_ids for ids in selections)

    def test_shuffle_is_seedable(self, deck_items, now):
        first = build_session(deck_items, 20, now=now, rng=random.Random(7))
        second = build_session(deck_items, 20, now=now, rng=random.Random(7))
        assert [s.item_id for s in first] == [s.item_id for s in second]

    @pytest.mark.parametrize("limit", [0, -3, 2.5, "20", None, True])
    def test_invalid_limit(self, deck_items, now, limit):
        with pytest.raises(InvalidSessionLimit):
            build_session(deck_items, limit, now=now)


def test_due_items_sorted_earliest_first(deck_items, now):
    _schedule(deck_items[0], now - MINUTE_MS)
    _schedule(deck_items[1], now - DAY_MS)
    _schedule(deck_items[2], now)

    due = due_items(deck_items[:3], now)
    assert [item.item_id for item in due] == ["hiragana-1", "hiragana-0", "hiragana-2"]


def test_new_items_in_deck_order(deck_items, now):
    _schedule(deck_items[0], now)
    assert [item.item_id for item in new_items(deck_items, 2)] == ["hiragana-1", "hiragana-2"]
    assert new_items(deck_items, 0) == []
