"""
SM-2 Arithmetic – Ease Factor and Interval
==========================================
Pure SuperMemo-2 style calculations. No clock, no state.

Interval steps:
    fail (grade < 3)      -> 0, due again immediately
    first pass            -> 1 day
    second pass           -> graduating interval (6), or 1 * hard multiplier on HARD
    later passes          -> interval * EF (GOOD), * EF * easy bonus (EASY),
                             * hard multiplier (HARD, EF not applied)
"""

from __future__ import annotations

from typing import Any

from ..core.config import EngineConfig
from ..core.exceptions import InvalidGradeError
from .constants import GRADE_MAX, GRADE_MIN, PASSING_GRADE, round_half_up
from .item import ReviewItem


def validate_grade(grade: Any) -> int:
    """
    Return ``grade`` as a plain int, or raise if it is not a valid grade.

    Booleans and non-integers are rejected rather than coerced.
    """
    if isinstance(grade, bool) or not isinstance(grade, int):
        raise InvalidGradeError(grade)
    if grade < GRADE_MIN or grade > GRADE_MAX:
        raise InvalidGradeError(grade)
    return int(grade)


def calculate_ease_factor(current_ease: float, grade: int, min_ease: float) -> float:
    """
    EF' = EF + (0.1 - (5 - q) * (0.08 + (5 - q) * 0.02)), floored at ``min_ease``.

    There is no upper clamp.
    """
    q = validate_grade(grade)
    new_ef = current_ease + (0.1 - (5 - q) * (0.08 + (5 - q) * 0.02))
    return max(min_ease, new_ef)


def calculate_interval(item: ReviewItem, grade: int, config: EngineConfig) -> int:
    """Next review interval in whole days for ``item`` graded ``grade``."""
    q = validate_grade(grade)

    if q < PASSING_GRADE:
        return 0

    # New, or relearning after a lapse
    if item.interval <= 0:
        return 1

    if item.interval == 1:
        if q == PASSING_GRADE:
            return round_half_up(1 * config.hard_interval_multiplier)
        return config.graduating_interval

    if q == PASSING_GRADE:
        return round_half_up(item.interval * config.hard_interval_multiplier)
    if q == GRADE_MAX:
        return round_half_up(item.interval * item.ease_factor * config.easy_bonus)
    return round_half_up(item.interval * item.ease_factor)


__all__ = ["validate_grade", "calculate_ease_factor", "calculate_interval"]
