"""
Review Forecast
===============
Day-by-day projection of how many items become due.

Days are UTC calendar days counted from the day containing ``now``.
Items already overdue are counted on day 0; items due beyond the
forecast window are left out.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Iterable, List

from ..core.exceptions import ValidationError
from .constants import DAY_MS
from .item import ReviewItem


@dataclass
class ForecastDay:
    """Number of items falling due on one future day."""
    day: int
    date: datetime
    due_count: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "day": self.day,
            "date": self.date.isoformat(),
            "due_count": self.due_count,
        }


def _day_start(ms: int) -> int:
    return (ms // DAY_MS) * DAY_MS


def build_forecast(items: Iterable[ReviewItem], days: int, now: int) -> List[ForecastDay]:
    if isinstance(days, bool) or not isinstance(days, int):
        raise ValidationError("days", "must be an integer", value=days)
    if days < 0:
        raise ValidationError("days", "must be >= 0", value=days)

    today = _day_start(now)
    origin = datetime.fromtimestamp(today / 1000, tz=timezone.utc)
    forecast = [
        ForecastDay(day=offset, date=origin + timedelta(days=offset))
        for offset in range(days)
    ]
    if not forecast:
        return forecast

    for item in items:
        offset = max(0, (_day_start(item.due_date) - today) // DAY_MS)
        if offset < days:
            forecast[offset].due_count += 1

    return forecast


__all__ = ["ForecastDay", "build_forecast"]
