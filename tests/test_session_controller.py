"""Tests for the session lifecycle."""

from unittest.mock import MagicMock

import pytest

from srs.constants import ReviewQuality
from srs.errors import InvalidQuality, InvalidTransition, NoCurrentItem, PersistenceError
from srs.item_store import ItemStore
from srs.session_builder import build_session
from srs.session_controller import SessionController
from srs.session_types import SessionStatus


@pytest.fixture
def deck(store, now):
    return store.load("hiragana", now=now)


@pytest.fixture
def controller(store, rng, now):
    return SessionController(store, "hiragana", rng=rng, clock=lambda: now)


@pytest.fixture
def session_items(deck, now, rng):
    return build_session(deck.items, 3, now=now, rng=rng)


class TestStart:

    def test_starts_idle(self, controller):
        assert controller.status == SessionStatus.IDLE
        with pytest.raises(NoCurrentItem):
            controller.current_item()

    def test_start_enters_in_progress(self, controller, session_items):
        state = controller.start(session_items)

        assert state.status == SessionStatus.IN_PROGRESS
        assert state.current_item is session_items[0].item
        assert state.total == 3
        assert state.position == 0
        assert state.session_id is not None
        assert state.stats.reviewed == 0

    def test_empty_session_is_nothing_due(self, controller):
        state = controller.start([])

        assert state.status == SessionStatus.NOTHING_DUE
        assert state.is_finished
        assert state.current_item is None
        with pytest.raises(NoCurrentItem):
            controller.current_item()

    def test_start_again_abandons_current_session(self, controller, session_items, store, now):
        controller.start(session_items)
        abandoned = controller.current_item()

        controller.start(session_items[1:])
        assert controller.current_item() is session_items[1].item

        reloaded = store.load("hiragana", now=now).find(abandoned.item_id)
        assert reloaded.state.review_count == 0


class TestGrading:

    def test_grade_updates_stats_and_advances(self, controller, session_items):
        controller.start(session_items)

        state = controller.grade_current(ReviewQuality.GOOD)
        assert state.stats.reviewed == 1
        assert state.stats.correct == 1
        assert state.stats.current_streak == 1
        assert state.position == 1
        assert state.current_item is session_items[1].item

    def test_failure_resets_streak_but_keeps_best(self, controller, session_items):
        controller.start(session_items)
        controller.grade_current(ReviewQuality.EASY)
        controller.grade_current(ReviewQuality.GOOD)
        state = controller.grade_current(ReviewQuality.HARD)

        assert state.stats.reviewed == 3
        assert state.stats.correct == 2
        assert state.stats.current_streak == 0
        assert state.stats.best_streak == 2
        assert state.stats.accuracy == pytest.approx(2 / 3)

    def test_last_grade_completes_session(self, controller, session_items):
        controller.start(session_items)
        for _ in range(3):
            state = controller.grade_current(ReviewQuality.GOOD)

        assert state.status == SessionStatus.COMPLETE
        assert state.progress == 1.0
        assert state.current_item is None
        with pytest.raises(NoCurrentItem):
            controller.grade_current(ReviewQuality.GOOD)

    def test_grade_is_persisted_with_event(self, controller, session_items, store, now):
        controller.start(session_items)
        graded = controller.current_item()
        controller.grade_current(ReviewQuality.GOOD)

        reloaded = store.load("hiragana", now=now).find(graded.item_id)
        assert reloaded.state == graded.state
        assert reloaded.state.retention_level == 1

        events = store.get_review_events("hiragana")
        assert len(events) == 1
        assert events[0]["item_id"] == graded.item_id
        assert events[0]["session_id"] == controller.session_id
        assert events[0]["session_position"] == 0

    def test_invalid_quality_changes_nothing(self, controller, session_items):
        controller.start(session_items)
        item = controller.current_item()

        with pytest.raises(InvalidQuality):
            controller.grade_current(5)

        assert item.state.review_count == 0
        assert controller.position == 0
        assert controller.stats.reviewed == 0

    def test_persistence_failure_keeps_session_going(self, session_items, rng, now):
        failing_store = MagicMock(spec=ItemStore)
        failing_store.save_item.side_effect = PersistenceError("disk full")
        controller = SessionController(failing_store, "hiragana", rng=rng, clock=lambda: now)

        controller.start(session_items)
        item = controller.current_item()
        state = controller.grade_current(ReviewQuality.GOOD)

        assert state.progress_saved is False
        assert state.position == 1
        assert item.state.retention_level == 1
        failing_store.save_item.assert_called_once()


class TestRestart:

    def test_restart_requires_complete(self, controller, session_items):
        with pytest.raises(InvalidTransition):
            controller.restart()
        controller.start(session_items)
        with pytest.raises(InvalidTransition):
            controller.restart()

    def test_restart_from_nothing_due_is_rejected(self, controller):
        controller.start([])
        with pytest.raises(InvalidTransition):
            controller.restart()

    def test_restart_reuses_items_with_fresh_stats(self, controller, session_items):
        controller.start(session_items)
        first_session_id = controller.session_id
        for _ in range(3):
            controller.grade_current(ReviewQuality.AGAIN)

        state = controller.restart()

        assert state.status == SessionStatus.IN_PROGRESS
        assert state.stats.reviewed == 0
        assert state.stats.best_streak == 0
        assert state.position == 0
        assert state.session_id != first_session_id
        assert {s.item_id for s in controller.items} == {s.item_id for s in session_items}


def test_snapshot_stats_are_copies(controller, session_items):
    controller.start(session_items)
    state = controller.grade_current(ReviewQuality.GOOD)
    controller.grade_current(ReviewQuality.GOOD)
    assert state.stats.reviewed == 1
