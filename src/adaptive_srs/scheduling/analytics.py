"""
Review Analytics
================
Per-item and per-collection statistics over review records.

Provides:
1. Success rate, streak and grade trend for a single item
2. Maturity and type distribution for a whole collection
"""

from __future__ import annotations

import math
import statistics
from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Optional, Sequence

from .constants import DAY_MS, PASSING_GRADE, Maturity, round_half_up
from .item import ReviewItem
from .maturity import get_maturity


@dataclass
class ItemStats:
    """
    Summary of one item's review history.

    ``avg_recent_grade`` is None when the item has no grade history;
    treat that as "no signal", not as a grade of 0.
    """
    success_rate: int
    total_reviews: int
    lapse_count: int
    maturity: Maturity
    avg_recent_grade: Optional[float]
    current_streak: int
    next_review_in: int
    ease_factor: float
    interval: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success_rate": self.success_rate,
            "total_reviews": self.total_reviews,
            "lapse_count": self.lapse_count,
            "maturity": self.maturity.value,
            "avg_recent_grade": self.avg_recent_grade,
            "current_streak": self.current_streak,
            "next_review_in": self.next_review_in,
            "ease_factor": self.ease_factor,
            "interval": self.interval,
        }


@dataclass
class CollectionStats:
    """Aggregate view over a learner's whole item collection."""
    total_items: int = 0
    due_now: int = 0
    overdue: int = 0
    new_items: int = 0
    by_maturity: Dict[str, int] = field(default_factory=dict)
    by_type: Dict[str, int] = field(default_factory=dict)
    avg_ease_factor: Optional[float] = None
    success_rate: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_items": self.total_items,
            "due_now": self.due_now,
            "overdue": self.overdue,
            "new_items": self.new_items,
            "by_maturity": dict(self.by_maturity),
            "by_type": dict(self.by_type),
            "avg_ease_factor": self.avg_ease_factor,
            "success_rate": self.success_rate,
        }


def get_current_streak(grades: Optional[Sequence[int]]) -> int:
    """Count passing grades at the end of ``grades``, stopping at the first lapse."""
    if not grades:
        return 0
    streak = 0
    for grade in reversed(grades):
        if grade < PASSING_GRADE:
            break
        streak += 1
    return streak


def _success_rate(reviews: int, lapses: int) -> int:
    if reviews <= 0:
        return 0
    return round_half_up(100 * (reviews - lapses) / reviews)


def item_stats(item: ReviewItem, now: int) -> ItemStats:
    grades = item.recent_grades
    days_left = math.ceil((item.due_date - now) / DAY_MS)
    return ItemStats(
        success_rate=_success_rate(item.review_count, item.lapse_count),
        total_reviews=item.review_count,
        lapse_count=item.lapse_count,
        maturity=get_maturity(item),
        avg_recent_grade=float(statistics.mean(grades)) if grades else None,
        current_streak=get_current_streak(grades),
        next_review_in=max(0, days_left),
        ease_factor=item.ease_factor,
        interval=item.interval,
    )


def collection_stats(items: Iterable[ReviewItem], now: int) -> CollectionStats:
    items = list(items)
    if not items:
        return CollectionStats(by_maturity={m.value: 0 for m in Maturity})

    reviewed = [i for i in items if i.review_count > 0]
    maturity_counts = Counter(get_maturity(i).value for i in items)

    return CollectionStats(
        total_items=len(items),
        due_now=sum(1 for i in reviewed if i.due_date <= now),
        overdue=sum(1 for i in reviewed if i.due_date < now),
        new_items=len(items) - len(reviewed),
        by_maturity={m.value: maturity_counts.get(m.value, 0) for m in Maturity},
        by_type=dict(Counter(i.item_type for i in items)),
        avg_ease_factor=(
            round(statistics.mean(i.ease_factor for i in reviewed), 3) if reviewed else None
        ),
        success_rate=_success_rate(
            sum(i.review_count for i in reviewed),
            sum(i.lapse_count for i in reviewed),
        ),
    )


__all__ = [
    "ItemStats",
    "CollectionStats",
    "get_current_streak",
    "item_stats",
    "collection_stats",
]
