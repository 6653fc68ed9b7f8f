"""Maturity classification: a view over interval and review count."""

from __future__ import annotations

from .constants import MATURE_INTERVAL_DAYS, YOUNG_INTERVAL_DAYS, Maturity
from .item import ReviewItem


def get_maturity(item: ReviewItem) -> Maturity:
    if item.review_count == 0 or item.interval <= 0:
        return Maturity.NEW
    if item.interval < YOUNG_INTERVAL_DAYS:
        return Maturity.LEARNING
    if item.interval < MATURE_INTERVAL_DAYS:
        return Maturity.YOUNG
    return Maturity.MATURE


__all__ = ["get_maturity"]
