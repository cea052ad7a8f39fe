"""
SQLAlchemy ORM Models for the Item Store

Defines ItemStateRow and ReviewEventRow.
Timestamps are stored as epoch milliseconds so round-trips are exact.
"""

from sqlalchemy import BigInteger, Column, Float, Integer, String
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class ItemStateRow(Base):
    """
    Persistent scheduling state for a single item of a deck.
    """
    __tablename__ = 'item_state'

    # Primary key: composite of deck_id and item_id
    deck_id = Column(String(50), primary_key=True, nullable=False)
    item_id = Column(String(100), primary_key=True, nullable=False)

    # Position within the deck's source list (keeps load order stable)
    position = Column(Integer, nullable=False)

    # Identity
    character = Column(String(20), nullable=False)
    romaji = Column(String(20), nullable=False)
    kind = Column(String(20), nullable=False, default="")
    row = Column(String(20), nullable=False, default="")

    # Review state
    retention_level = Column(Integer, nullable=False)
    ease_factor = Column(Float, nullable=False)
    interval_ms = Column(Float, nullable=False)
    next_review_at = Column(BigInteger, nullable=False)
    review_count = Column(Integer, nullable=False)

    def __repr__(self):
        return f"<ItemStateRow({self.deck_id}, {self.item_id}, level={self.retention_level})>"


class ReviewEventRow(Base):
    """
    Log entry for a single grading of an item.
    """
    __tablename__ = 'review_events'

    id = Column(Integer, primary_key=True, autoincrement=True)

    deck_id = Column(String(50), nullable=False, index=True)
    item_id = Column(String(100), nullable=False)

    # Session context (optional, for reporting)
    session_id = Column(String(64), nullable=True)
    session_position = Column(Integer, nullable=True)

    # Timing and feedback
    timestamp_ms = Column(BigInteger, nullable=False)
    quality = Column(Integer, nullable=False)  # 0=AGAIN, 1=HARD, 2=GOOD, 3=EASY

    # State before/after
    level_before = Column(Integer, nullable=False)
    level_after = Column(Integer, nullable=False)
    ease_before = Column(Float, nullable=False)
    ease_after = Column(Float, nullable=False)
    interval_ms = Column(Float, nullable=False)
    next_review_at = Column(BigInteger, nullable=False)

    def __repr__(self):
        return f"<ReviewEventRow(id={self.id}, {self.deck_id}/{self.item_id}, quality={self.quality})>"
