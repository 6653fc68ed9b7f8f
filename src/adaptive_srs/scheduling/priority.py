"""
Priority Scoring
================
Sort key for due items. Higher means more urgent.

Priorities compare field by field, in order:

    1. overdue_ms   - now - due_date (negative when not yet due)
    2. type_weight  - item_type_weights[item_type] (0 for unknown types)
    3. stage_weight - maturity_weights[maturity]

Type and stage weights only separate items that are equally overdue; no
weight table can lift a less overdue item above a more overdue one.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ..core.config import EngineConfig
from .item import ReviewItem
from .maturity import get_maturity


@dataclass(frozen=True, order=True)
class Priority:
    """
    Urgency of one due item.

    Ordered by (overdue_ms, type_weight, stage_weight).
    """
    overdue_ms: int
    type_weight: float = 0.0
    stage_weight: float = 0.0
    item_id: str = field(compare=False, default="")


def calculate_priority(item: ReviewItem, now: int, config: EngineConfig) -> Priority:
    return Priority(
        overdue_ms=now - item.due_date,
        type_weight=config.item_type_weights.get(item.item_type, 0.0),
        stage_weight=config.maturity_weights.get(get_maturity(item).value, 0.0),
        item_id=item.item_id,
    )


__all__ = ["Priority", "calculate_priority"]
