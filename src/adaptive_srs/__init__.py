"""
Adaptive SRS
============
Deterministic spaced-repetition scheduling engine: SM-2 ease and interval
arithmetic, priority-ordered session queues, due-date forecasts and
mastery statistics over plain item records.
"""

from loguru import logger

from .core.exceptions import (
    ConfigurationError,
    InvalidGradeError,
    MissingItemError,
    SRSError,
    ValidationError,
)
from .scheduling import (
    CollectionStats,
    ForecastDay,
    Grade,
    ItemStats,
    Maturity,
    QueueStats,
    ReviewItem,
    SessionQueue,
    SRSEngine,
    create_default_engine,
    grade_from_confidence,
)

__version__ = "1.0.0"

# Silent until the host application calls configure_logging()
logger.disable("adaptive_srs")

__all__ = [
    "ConfigurationError",
    "InvalidGradeError",
    "MissingItemError",
    "SRSError",
    "ValidationError",
    "CollectionStats",
    "ForecastDay",
    "Grade",
    "ItemStats",
    "Maturity",
    "QueueStats",
    "ReviewItem",
    "SessionQueue",
    "SRSEngine",
    "create_default_engine",
    "grade_from_confidence",
]
