"""
Session Queue – Daily Review Queue Construction
===============================================
Builds the priority-ordered, capped list of items for one sitting.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List

from loguru import logger

from ..core.config import EngineConfig
from ..core.exceptions import ValidationError
from .item import ReviewItem
from .priority import calculate_priority


@dataclass
class QueueStats:
    """Counts for a built queue. Totals cover the full, unfiltered input."""
    total_due: int = 0
    total_new: int = 0
    queue_size: int = 0
    by_type: Dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_due": self.total_due,
            "total_new": self.total_new,
            "queue_size": self.queue_size,
            "by_type": dict(self.by_type),
        }


@dataclass
class SessionQueue:
    """Ordered items for one sitting, plus stats and an overflow flag."""
    queue: List[ReviewItem] = field(default_factory=list)
    stats: QueueStats = field(default_factory=QueueStats)
    has_overflow: bool = False

    def __len__(self) -> int:
        return len(self.queue)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "queue": [item.to_dict() for item in self.queue],
            "stats": self.stats.to_dict(),
            "has_overflow": self.has_overflow,
        }


def _check_cap(name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValidationError(name, "must be a non-negative integer", value=value)
    return value


def build_daily_queue(
    items: Iterable[ReviewItem],
    now: int,
    config: EngineConfig,
    *,
    include_new: bool = False,
    max_new: int,
    max_reviews: int,
) -> SessionQueue:
    """
    Compose due items and, optionally, new items into a session queue.

    1. Partition into new (never reviewed) and due (reviewed, due_date <= now).
    2. Sort due items by priority, most urgent first.
    3. Keep at most ``max_reviews`` due items.
    4. If ``include_new``, append up to ``max_new`` new items in input
       order, limited by whatever is left of ``max_reviews``.
    """
    _check_cap("max_new", max_new)
    _check_cap("max_reviews", max_reviews)

    due: List[ReviewItem] = []
    new: List[ReviewItem] = []
    for item in items:
        if item.review_count == 0:
            new.append(item)
        elif item.due_date <= now:
            due.append(item)

    # sorted() is stable, so equal priorities keep input order
    ranked = sorted(due, key=lambda i: calculate_priority(i, now, config), reverse=True)

    queue = ranked[:max_reviews]
    has_overflow = len(ranked) > max_reviews

    if include_new and new:
        budget = max_reviews - len(queue)
        wanted = new[:max_new]
        accepted = wanted[:max(budget, 0)]
        if len(accepted) < len(wanted):
            has_overflow = True
        queue.extend(accepted)

    stats = QueueStats(
        total_due=len(due),
        total_new=len(new),
        queue_size=len(queue),
        by_type=dict(Counter(item.item_type for item in queue)),
    )

    logger.debug(
        f"Built daily queue: {stats.queue_size} items "
        f"(due={stats.total_due}, new={stats.total_new}, overflow={has_overflow})"
    )
    return SessionQueue(queue=queue, stats=stats, has_overflow=has_overflow)


__all__ = ["QueueStats", "SessionQueue", "build_daily_queue"]
