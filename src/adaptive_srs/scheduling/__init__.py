"""
Scheduling Package
==================
SM-2 based spaced repetition scheduling for learnable items.

Core Components:
    - ReviewItem: Immutable scheduling state for one item
    - SRSEngine: Configured facade over every scheduling operation
    - Grade / Maturity: Review grades and learning stages

Queue and Forecast:
    - SessionQueue / QueueStats: Capped, priority-ordered session
    - ForecastDay: Due counts per upcoming day

Analytics:
    - ItemStats: Success rate, streak, grade trend for one item
    - CollectionStats: Maturity and type distribution for a collection

Convenience Functions:
    - create_default_engine: Factory with stock tuning
    - grade_from_confidence: Convert a [0, 1] confidence to a grade

Usage:
    from adaptive_srs.scheduling import create_default_engine, Grade

    engine = create_default_engine()
    item = engine.create_item("aleph", "letter", now=t0)
    item = engine.process_review(item, Grade.GOOD, timestamp=t0)
    session = engine.get_daily_queue(items, include_new=True)
"""

from .constants import (
    # Constants
    GRADE_MIN,
    GRADE_MAX,
    PASSING_GRADE,
    DAY_MS,
    NEVER_REVIEWED,
    YOUNG_INTERVAL_DAYS,
    MATURE_INTERVAL_DAYS,
    # Enums
    Grade,
    Maturity,
    now_ms,
)
from .item import ReviewItem
from .priority import Priority
from .queue import QueueStats, SessionQueue
from .forecast import ForecastDay
from .analytics import CollectionStats, ItemStats
from .engine import SRSEngine, create_default_engine


def grade_from_confidence(confidence: float) -> Grade:
    """
    Convert a recall confidence score to an SM-2 grade.

    Args:
        confidence: Confidence in [0.0, 1.0]; values outside are clamped.

    Returns:
        Grade between BLACKOUT and EASY
    """
    confidence = max(0.0, min(1.0, confidence))
    if confidence >= 0.95:
        return Grade.EASY  # Perfect recall
    elif confidence >= 0.8:
        return Grade.GOOD  # Correct with hesitation
    elif confidence >= 0.6:
        return Grade.HARD  # Correct but difficult
    elif confidence >= 0.4:
        return Grade.INCORRECT_FAMILIAR  # Wrong but easy once shown
    elif confidence >= 0.2:
        return Grade.INCORRECT  # Wrong but recognized
    else:
        return Grade.BLACKOUT


__all__ = [
    # Constants
    "GRADE_MIN",
    "GRADE_MAX",
    "PASSING_GRADE",
    "DAY_MS",
    "NEVER_REVIEWED",
    "YOUNG_INTERVAL_DAYS",
    "MATURE_INTERVAL_DAYS",
    # Enums
    "Grade",
    "Maturity",
    # Core components
    "ReviewItem",
    "Priority",
    "SRSEngine",
    "QueueStats",
    "SessionQueue",
    "ForecastDay",
    "ItemStats",
    "CollectionStats",
    # Convenience functions
    "create_default_engine",
    "grade_from_confidence",
    "now_ms",
]
