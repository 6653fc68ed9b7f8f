"""
Adaptive SRS Configuration System
=================================
Centralized, validated configuration with environment variable overrides.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

import yaml
from loguru import logger

from adaptive_srs.core.exceptions import ConfigurationError


DEFAULT_ITEM_TYPE_WEIGHTS: Dict[str, float] = {
    "letter": 3.0,
    "vocabulary": 2.0,
    "grammar": 1.0,
}

# Keyed by Maturity.value
DEFAULT_MATURITY_WEIGHTS: Dict[str, float] = {
    "new": 1.0,
    "learning": 2.0,
    "young": 1.0,
    "mature": 0.0,
}


@dataclass(frozen=True)
class EngineConfig:
    """Tuning knobs for the scheduling engine. Immutable once built."""
    min_ease_factor: float = 1.3
    initial_ease_factor: float = 2.5
    easy_bonus: float = 1.3
    hard_interval_multiplier: float = 1.2
    graduating_interval: int = 6
    max_reviews_per_day: int = 200
    max_new_per_day: int = 20
    recent_grades_limit: int = 10
    item_type_weights: Dict[str, float] = field(
        default_factory=lambda: dict(DEFAULT_ITEM_TYPE_WEIGHTS)
    )
    maturity_weights: Dict[str, float] = field(
        default_factory=lambda: dict(DEFAULT_MATURITY_WEIGHTS)
    )

    def __post_init__(self):
        validate_engine_config(self)


@dataclass(frozen=True)
class ObservabilityConfig:
    log_level: str = "INFO"
    json_logs: bool = False


@dataclass(frozen=True)
class SRSConfig:
    """Root configuration for the adaptive SRS engine."""

    version: str = "1.0"
    engine: EngineConfig = field(default_factory=EngineConfig)
    observability: ObservabilityConfig = field(default_factory=ObservabilityConfig)


def validate_engine_config(config: EngineConfig) -> None:
    """
    Check the invariants the engine relies on.

    Raises:
        ConfigurationError: On the first violated constraint.
    """
    if config.min_ease_factor <= 0:
        raise ConfigurationError(
            config_key="min_ease_factor",
            reason=f"must be positive, got {config.min_ease_factor}",
        )
    if config.initial_ease_factor < config.min_ease_factor:
        raise ConfigurationError(
            config_key="initial_ease_factor",
            reason=(
                f"must be >= min_ease_factor ({config.min_ease_factor}), "
                f"got {config.initial_ease_factor}"
            ),
        )
    if config.easy_bonus < 1.0:
        raise ConfigurationError(
            config_key="easy_bonus",
            reason=f"must be >= 1.0, got {config.easy_bonus}",
        )
    if config.hard_interval_multiplier <= 0:
        raise ConfigurationError(
            config_key="hard_interval_multiplier",
            reason=f"must be positive, got {config.hard_interval_multiplier}",
        )
    if config.graduating_interval < 1:
        raise ConfigurationError(
            config_key="graduating_interval",
            reason=f"must be at least 1 day, got {config.graduating_interval}",
        )
    for key in ("max_reviews_per_day", "max_new_per_day"):
        value = getattr(config, key)
        if value < 0:
            raise ConfigurationError(config_key=key, reason=f"must be >= 0, got {value}")
    if config.recent_grades_limit < 1:
        raise ConfigurationError(
            config_key="recent_grades_limit",
            reason=f"must be >= 1, got {config.recent_grades_limit}",
        )


def _env_override(key: str, default):
    """Check for SRS_<KEY> environment variable override."""
    env_key = f"SRS_{key.upper()}"
    val = os.environ.get(env_key)
    if val is None:
        return default
    # Type coercion based on the default's type
    try:
        if isinstance(default, bool):
            return val.lower() in ("true", "1", "yes")
        if isinstance(default, int):
            return int(val)
        if isinstance(default, float):
            return float(val)
    except ValueError as e:
        raise ConfigurationError(
            config_key=key.lower(),
            reason=f"environment variable {env_key}={val!r} is not a valid {type(default).__name__}",
        ) from e
    return val


def _build_weights(name: str, raw: Optional[dict], defaults: Dict[str, float]) -> Dict[str, float]:
    if raw is None:
        return dict(defaults)
    if not isinstance(raw, dict):
        raise ConfigurationError(config_key=name, reason="must be a mapping of name to weight")
    try:
        return {str(k): float(v) for k, v in raw.items()}
    except (TypeError, ValueError) as e:
        raise ConfigurationError(config_key=name, reason=f"weights must be numbers: {e}") from e


def load_config(path: Optional[Path] = None) -> SRSConfig:
    """
    Load configuration from YAML file with environment variable overrides.

    Priority: ENV > YAML > defaults.

    Args:
        path: Path to srs.yaml. If None, searches ./srs.yaml.

    Returns:
        Validated SRSConfig instance.

    Raises:
        ConfigurationError: If a value is malformed or violates an engine invariant.
    """
    if path is None:
        candidate = Path("srs.yaml")
        if candidate.exists():
            path = candidate

    raw = {}
    if path is not None and Path(path).exists():
        with open(path) as f:
            loaded = yaml.safe_load(f) or {}
            raw = loaded.get("srs") or {}
        logger.info(f"Loaded SRS configuration from {path}")

    engine_raw = raw.get("engine") or {}
    defaults = EngineConfig()
    engine = EngineConfig(
        min_ease_factor=_env_override(
            "MIN_EASE_FACTOR", float(engine_raw.get("min_ease_factor", defaults.min_ease_factor))
        ),
        initial_ease_factor=_env_override(
            "INITIAL_EASE_FACTOR", float(engine_raw.get("initial_ease_factor", defaults.initial_ease_factor))
        ),
        easy_bonus=_env_override(
            "EASY_BONUS", float(engine_raw.get("easy_bonus", defaults.easy_bonus))
        ),
        hard_interval_multiplier=_env_override(
            "HARD_INTERVAL_MULTIPLIER",
            float(engine_raw.get("hard_interval_multiplier", defaults.hard_interval_multiplier)),
        ),
        graduating_interval=_env_override(
            "GRADUATING_INTERVAL", int(engine_raw.get("graduating_interval", defaults.graduating_interval))
        ),
        max_reviews_per_day=_env_override(
            "MAX_REVIEWS_PER_DAY", int(engine_raw.get("max_reviews_per_day", defaults.max_reviews_per_day))
        ),
        max_new_per_day=_env_override(
            "MAX_NEW_PER_DAY", int(engine_raw.get("max_new_per_day", defaults.max_new_per_day))
        ),
        recent_grades_limit=_env_override(
            "RECENT_GRADES_LIMIT", int(engine_raw.get("recent_grades_limit", defaults.recent_grades_limit))
        ),
        item_type_weights=_build_weights(
            "item_type_weights", engine_raw.get("item_type_weights"), DEFAULT_ITEM_TYPE_WEIGHTS
        ),
        maturity_weights=_build_weights(
            "maturity_weights", engine_raw.get("maturity_weights"), DEFAULT_MATURITY_WEIGHTS
        ),
    )

    obs_raw = raw.get("observability") or {}
    observability = ObservabilityConfig(
        log_level=_env_override("LOG_LEVEL", obs_raw.get("log_level", "INFO")),
        json_logs=_env_override("JSON_LOGS", bool(obs_raw.get("json_logs", False))),
    )

    return SRSConfig(
        version=str(raw.get("version", "1.0")),
        engine=engine,
        observability=observability,
    )


# Module-level singleton (lazy-loaded)
_CONFIG: Optional[SRSConfig] = None


def get_config() -> SRSConfig:
    """Get or initialize the global config singleton."""
    global _CONFIG
    if _CONFIG is None:
        _CONFIG = load_config()
    return _CONFIG


def reset_config():
    """Reset the global config singleton (useful for testing)."""
    global _CONFIG
    _CONFIG = None


__all__ = [
    "DEFAULT_ITEM_TYPE_WEIGHTS",
    "DEFAULT_MATURITY_WEIGHTS",
    "EngineConfig",
    "ObservabilityConfig",
    "SRSConfig",
    "validate_engine_config",
    "load_config",
    "get_config",
    "reset_config",
]
