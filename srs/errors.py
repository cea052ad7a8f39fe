"""
Exceptions raised by the SRS engine.

Caller defects (bad quality, bad limit, wrong lifecycle state) subclass the
matching builtin so they fail loudly. PersistenceError is an environment
failure that callers log and survive.
"""


class SRSError(Exception):
    """Base class for all engine errors."""


class InvalidQuality(SRSError, ValueError):
    """A grade outside AGAIN/HARD/GOOD/EASY was supplied."""

    def __init__(self, value: object):
        super().__init__(f"Invalid review quality: {value!r} (expected 0-3)")
        self.value = value


class InvalidSessionLimit(SRSError, ValueError):
    """Session limit was not a positive integer."""

    def __init__(self, value: object):
        super().__init__(f"Session limit must be a positive integer, got {value!r}")
        self.value = value


class UnknownDeck(SRSError, KeyError):
    """No static source data exists for the requested deck id."""

    def __init__(self, deck_id: str):
        super().__init__(deck_id)
        self.deck_id = deck_id

    def __str__(self) -> str:
        return f"Unknown deck: {self.deck_id!r}"


class NoCurrentItem(SRSError):
    """An item was read or graded while no session was in progress."""


class InvalidTransition(SRSError):
    """The session controller cannot move to the requested state."""


class PersistenceError(SRSError):
    """The durable store could not be read or written."""
