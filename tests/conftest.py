"""
Shared fixtures: in-memory database, fixed clock, seeded randomness.
"""

import random

import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from srs.database import init_db
from srs.item_store import ItemStore
from srs.memory_state import initialize_new_item

NOW = 1_700_000_000_000  # Fixed "now" in epoch millis


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False
    )
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def store(engine):
    return ItemStore(engine)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def make_item(now):
    """Factory for a fresh item, optionally with state overrides."""
    def _make(item_id="hiragana-0", character="あ", romaji="a", **state):
        item = initialize_new_item(item_id, character, romaji, kind="vowel", row="a", created_at=now)
        for key, value in state.items():
            setattr(item.state, key, value)
        return item
    return _make
