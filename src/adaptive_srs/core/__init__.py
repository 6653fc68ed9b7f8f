"""Shared infrastructure: configuration, exceptions and logging setup."""

from .config import (
    EngineConfig,
    ObservabilityConfig,
    SRSConfig,
    get_config,
    load_config,
    reset_config,
)
from .exceptions import (
    ConfigurationError,
    InvalidGradeError,
    IrrecoverableError,
    MissingItemError,
    SRSError,
    ValidationError,
)

__all__ = [
    "EngineConfig",
    "ObservabilityConfig",
    "SRSConfig",
    "get_config",
    "load_config",
    "reset_config",
    "ConfigurationError",
    "InvalidGradeError",
    "IrrecoverableError",
    "MissingItemError",
    "SRSError",
    "ValidationError",
]
