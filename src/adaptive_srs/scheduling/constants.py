"""
Scheduling Constants and Enums
==============================
Shared constants and enums for the spaced repetition engine.
"""

import math
import time
from enum import Enum, IntEnum


# ------------------------------------------------------------------ #
#  Constants                                                          #
# ------------------------------------------------------------------ #

# SM-2 grade bounds
GRADE_MIN: int = 0  # Worst recall quality
GRADE_MAX: int = 5  # Perfect recall
PASSING_GRADE: int = 3  # Lowest grade that counts as a success

DAY_MS: int = 86_400_000  # One day in epoch milliseconds
NEVER_REVIEWED: int = 0  # last_review_date sentinel

# Maturity boundaries (days, lower bound inclusive)
YOUNG_INTERVAL_DAYS: int = 21
MATURE_INTERVAL_DAYS: int = 100


# ------------------------------------------------------------------ #
#  Enums                                                              #
# ------------------------------------------------------------------ #

class Grade(IntEnum):
    """SM-2 grades for a single review. 0-2 are lapses, 3-5 are passes."""
    BLACKOUT = 0  # Total failure
    INCORRECT = 1  # Wrong but familiar
    INCORRECT_FAMILIAR = 2  # Wrong but easily remembered once shown
    HARD = 3  # Correct with serious difficulty
    GOOD = 4  # Correct after hesitation
    EASY = 5  # Perfect, instant recall


class Maturity(Enum):
    """Coarse learning stage, derived from interval and review count."""
    NEW = "new"
    LEARNING = "learning"
    YOUNG = "young"
    MATURE = "mature"


# ------------------------------------------------------------------ #
#  Helpers                                                            #
# ------------------------------------------------------------------ #

def now_ms() -> int:
    """Current wall-clock time in epoch milliseconds."""
    return int(time.time() * 1000)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return int(math.floor(value + 0.5))


__all__ = [
    "GRADE_MIN",
    "GRADE_MAX",
    "PASSING_GRADE",
    "DAY_MS",
    "NEVER_REVIEWED",
    "YOUNG_INTERVAL_DAYS",
    "MATURE_INTERVAL_DAYS",
    "Grade",
    "Maturity",
    "now_ms",
    "round_half_up",
]
