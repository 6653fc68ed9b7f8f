"""
SRS Engine – Configured Facade Over the Scheduling Functions
============================================================
Holds an immutable ``EngineConfig`` and exposes every scheduling
operation as a method. No method keeps per-call state, so one engine
can be shared freely across threads.
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence

from loguru import logger

from ..core.config import EngineConfig, load_config
from ..core.exceptions import MissingItemError, ValidationError
from .analytics import (
    CollectionStats,
    ItemStats,
    collection_stats,
    get_current_streak,
    item_stats,
)
from .constants import DAY_MS, PASSING_GRADE, Maturity, now_ms
from .forecast import ForecastDay, build_forecast
from .item import ReviewItem
from .maturity import get_maturity
from .priority import Priority, calculate_priority
from .queue import SessionQueue, build_daily_queue
from . import sm2


class SRSEngine:
    """
    Adaptive spaced-repetition scheduler.

    Usage:
        engine = SRSEngine(max_new_per_day=10)
        item = engine.create_item("aleph", "letter", now=t0)
        item = engine.process_review(item, Grade.GOOD, timestamp=t0)
        session = engine.get_daily_queue(items, include_new=True, now=t1)
    """

    def __init__(self, config: Optional[EngineConfig] = None, **overrides: Any) -> None:
        config = config or EngineConfig()
        if overrides:
            unknown = set(overrides) - set(EngineConfig.__dataclass_fields__)
            if unknown:
                raise ValidationError(
                    "overrides", f"unknown engine settings: {sorted(unknown)}"
                )
            config = replace(config, **overrides)
        self._config = config

    @classmethod
    def from_config(cls, path: Optional[Path] = None) -> "SRSEngine":
        """Build an engine from YAML/env configuration."""
        return cls(load_config(path).engine)

    # ------------------------------------------------------------------ #
    #  Configuration                                                      #
    # ------------------------------------------------------------------ #

    @property
    def config(self) -> EngineConfig:
        return self._config

    @property
    def min_ease_factor(self) -> float:
        return self._config.min_ease_factor

    @property
    def initial_ease_factor(self) -> float:
        return self._config.initial_ease_factor

    @property
    def easy_bonus(self) -> float:
        return self._config.easy_bonus

    @property
    def max_reviews_per_day(self) -> int:
        return self._config.max_reviews_per_day

    @property
    def max_new_per_day(self) -> int:
        return self._config.max_new_per_day

    # ------------------------------------------------------------------ #
    #  Item lifecycle                                                     #
    # ------------------------------------------------------------------ #

    def create_item(
        self,
        item_id: str,
        item_type: str,
        now: Optional[int] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> ReviewItem:
        """Fresh record for an item being introduced for the first time."""
        now = now_ms() if now is None else now
        return ReviewItem(
            item_id=item_id,
            item_type=item_type,
            ease_factor=self._config.initial_ease_factor,
            interval=0,
            due_date=now,
            metadata=dict(metadata or {}),
        )

    def calculate_ease_factor(self, current_ease: float, grade: int) -> float:
        return sm2.calculate_ease_factor(current_ease, grade, self._config.min_ease_factor)

    def calculate_interval(self, item: ReviewItem, grade: int) -> int:
        return sm2.calculate_interval(item, grade, self._config)

    def process_review(
        self,
        item: Optional[ReviewItem],
        grade: int,
        timestamp: Optional[int] = None,
    ) -> ReviewItem:
        """
        Apply one graded review and return the item's next state.

        The input record is left untouched; fields not driven by the review
        (including ``metadata``) are copied over as-is.

        Raises:
            MissingItemError: If ``item`` is None.
            ValidationError: If ``item`` is not a ReviewItem.
            InvalidGradeError: If ``grade`` is not an integer in [0, 5].
        """
        if item is None:
            raise MissingItemError("process_review")
        if not isinstance(item, ReviewItem):
            raise ValidationError(
                "item", "expected a ReviewItem", value=type(item).__name__
            )
        timestamp = now_ms() if timestamp is None else timestamp

        new_ease = self.calculate_ease_factor(item.ease_factor, grade)
        new_interval = self.calculate_interval(item, grade)
        lapsed = grade < PASSING_GRADE
        limit = self._config.recent_grades_limit

        reviewed = replace(
            item,
            ease_factor=new_ease,
            interval=new_interval,
            review_count=item.review_count + 1,
            lapse_count=item.lapse_count + (1 if lapsed else 0),
            last_review_date=timestamp,
            due_date=timestamp + new_interval * DAY_MS,
            recent_grades=(item.recent_grades + (int(grade),))[-limit:],
        )

        logger.debug(
            f"Reviewed {item.item_id!r} (grade={int(grade)}) -> "
            f"ef={new_ease:.3f} interval={new_interval}d lapses={reviewed.lapse_count}"
        )
        return reviewed

    # ------------------------------------------------------------------ #
    #  Classification and ordering                                        #
    # ------------------------------------------------------------------ #

    def get_maturity(self, item: ReviewItem) -> Maturity:
        return get_maturity(item)

    def calculate_priority(self, item: ReviewItem, now: Optional[int] = None) -> Priority:
        now = now_ms() if now is None else now
        return calculate_priority(item, now, self._config)

    # ------------------------------------------------------------------ #
    #  Queue, forecast, stats                                             #
    # ------------------------------------------------------------------ #

    def get_daily_queue(
        self,
        items: Iterable[ReviewItem],
        *,
        include_new: bool = False,
        max_new: Optional[int] = None,
        max_reviews: Optional[int] = None,
        now: Optional[int] = None,
    ) -> SessionQueue:
        now = now_ms() if now is None else now
        return build_daily_queue(
            items,
            now,
            self._config,
            include_new=include_new,
            max_new=self._config.max_new_per_day if max_new is None else max_new,
            max_reviews=self._config.max_reviews_per_day if max_reviews is None else max_reviews,
        )

    def get_forecast(
        self,
        items: Iterable[ReviewItem],
        days: int = 7,
        now: Optional[int] = None,
    ) -> List[ForecastDay]:
        now = now_ms() if now is None else now
        return build_forecast(items, days, now)

    def get_item_stats(self, item: ReviewItem, now: Optional[int] = None) -> ItemStats:
        now = now_ms() if now is None else now
        return item_stats(item, now)

    def get_current_streak(self, grades: Optional[Sequence[int]]) -> int:
        return get_current_streak(grades)

    def get_collection_stats(
        self,
        items: Iterable[ReviewItem],
        now: Optional[int] = None,
    ) -> CollectionStats:
        now = now_ms() if now is None else now
        return collection_stats(items, now)

    def __repr__(self) -> str:
        return (
            f"SRSEngine(min_ease_factor={self.min_ease_factor}, "
            f"initial_ease_factor={self.initial_ease_factor}, "
            f"easy_bonus={self.easy_bonus}, "
            f"max_reviews_per_day={self.max_reviews_per_day}, "
            f"max_new_per_day={self.max_new_per_day})"
        )


def create_default_engine() -> SRSEngine:
    """Engine with the stock tuning (EF floor 1.3, start 2.5, easy bonus 1.3, 200/20 caps)."""
    return SRSEngine()


__all__ = ["SRSEngine", "create_default_engine"]
