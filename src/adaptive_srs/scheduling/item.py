"""
Review Item – Scheduling State Record
=====================================
Scheduling state for a single learnable item (letter, word, grammar point).
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Dict, Optional, Tuple

from .constants import DAY_MS, NEVER_REVIEWED, now_ms


@dataclass(frozen=True)
class ReviewItem:
    """
    Scheduling state for one learnable item.

    Records are immutable: the engine returns a new ``ReviewItem`` after
    every review instead of mutating the one it was given. Anything the
    caller wants to keep alongside the schedule (display text, sound ids,
    lesson tags) goes in ``metadata`` and is carried through untouched.

    Timestamps are epoch milliseconds.
    """
    item_id: str
    item_type: str
    ease_factor: float
    interval: int = 0  # days; 0 means new or just lapsed
    due_date: int = 0
    review_count: int = 0
    lapse_count: int = 0
    last_review_date: int = NEVER_REVIEWED
    recent_grades: Tuple[int, ...] = ()
    metadata: Dict[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self):
        if not isinstance(self.recent_grades, tuple):
            object.__setattr__(self, "recent_grades", tuple(self.recent_grades))
        # Own copy, so records never share a metadata dict
        object.__setattr__(self, "metadata", dict(self.metadata))

    @property
    def is_new(self) -> bool:
        return self.review_count == 0

    def is_due(self, now: Optional[int] = None) -> bool:
        """Check if this item is eligible for review at ``now``."""
        now = now_ms() if now is None else now
        return self.due_date <= now

    def days_until_due(self, now: Optional[int] = None) -> float:
        """Days until next review (negative if overdue)."""
        now = now_ms() if now is None else now
        return (self.due_date - now) / DAY_MS

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dictionary. Metadata keys are emitted at top level."""
        data: Dict[str, Any] = dict(self.metadata)
        data.update({
            "item_id": self.item_id,
            "item_type": self.item_type,
            "ease_factor": self.ease_factor,
            "interval": self.interval,
            "due_date": self.due_date,
            "review_count": self.review_count,
            "lapse_count": self.lapse_count,
            "last_review_date": self.last_review_date,
            "recent_grades": list(self.recent_grades),
        })
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ReviewItem":
        """Deserialize from dictionary. Unknown keys land in ``metadata``."""
        known = {f.name for f in fields(cls)} - {"metadata"}
        kwargs = {k: v for k, v in data.items() if k in known}
        metadata = dict(data.get("metadata") or {})
        metadata.update({k: v for k, v in data.items() if k not in known and k != "metadata"})
        return cls(metadata=metadata, **kwargs)


__all__ = ["ReviewItem"]
