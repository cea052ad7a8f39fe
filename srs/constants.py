"""
SRS Constants and Parameters

All tunable values for the kana review scheduler in one place:
the interval curve, ease factor bounds, and session sizing.
"""

from enum import IntEnum


# ---- Review Quality ----

class ReviewQuality(IntEnum):
    """User judgment of a single recall attempt."""
    AGAIN = 0   # Not recalled
    HARD = 1    # Recalled only with a struggle (still counts as a miss)
    GOOD = 2    # Recalled normally
    EASY = 3    # Recalled instantly


# Lowest quality that counts as a successful recall
PASSING_QUALITY = ReviewQuality.GOOD


# ---- Time Units (milliseconds) ----

MINUTE_MS = 60 * 1000
DAY_MS = 24 * 60 * MINUTE_MS


# ---- Retention Levels ----

MIN_LEVEL = 0   # Never recalled, or just failed
MAX_LEVEL = 4   # Mastered


# ---- Ease Factor ----

DEFAULT_EASE = 2.5
MIN_EASE = 1.3
MAX_EASE = 3.0
EASY_BONUS = 0.15  # Added to ease on every EASY grade


# ---- Interval Curve ----
# Base interval per retention level, scaled by the item's ease factor.
# Indexed by the level an item reaches after a successful review.

BASE_INTERVALS_MS = (
    1 * MINUTE_MS,    # Level 0
    10 * MINUTE_MS,   # Level 1
    1 * DAY_MS,       # Level 2
    3 * DAY_MS,       # Level 3
    7 * DAY_MS,       # Level 4
)

# Delay before a failed item comes back
RELEARN_DELAY_MS = 1 * MINUTE_MS


# ---- Session Sizing ----

MAX_NEW_PER_SESSION = 10
SESSION_LIMIT_OPTIONS = (10, 20, 50, 100)
DEFAULT_SESSION_LIMIT = 20
