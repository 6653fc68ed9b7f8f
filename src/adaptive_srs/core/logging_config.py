"""
Adaptive SRS Logging Configuration
==================================
Centralized logging configuration using loguru.

The library itself only emits records through ``loguru.logger``; handlers
are installed by the host application calling ``configure_logging()``.

Provides:
  - configure_logging(): Setup function called at application startup
  - JSON log format when LOG_FORMAT=json environment variable is set
  - Routing of stdlib ``logging`` records into loguru

Usage:
    from adaptive_srs.core.logging_config import configure_logging

    configure_logging(level="DEBUG")
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional

from loguru import logger

_CONFIGURED = False


def configure_logging(
    level: Optional[str] = None,
    json_format: Optional[bool] = None,
    *,
    sink=None,
) -> int:
    """
    Configure loguru logging for the scheduling engine.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            If None, reads LOG_LEVEL (default INFO).
        json_format: If True, emit JSON lines. If None, checks LOG_FORMAT.
        sink: Optional file path or writable object. Defaults to stderr.

    Returns:
        The loguru handler id of the installed sink.
    """
    global _CONFIGURED

    if json_format is None:
        json_format = os.environ.get("LOG_FORMAT", "").lower() == "json"

    if level is None:
        level = os.environ.get("LOG_LEVEL", "INFO")

    logger.remove()
    logger.enable("adaptive_srs")

    log_sink = sink if sink is not None else sys.stderr

    if json_format:
        handler_id = logger.add(log_sink, level=level.upper(), serialize=True)
    else:
        format_str = (
            "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
            "<level>{message}</level>"
        )
        handler_id = logger.add(
            log_sink,
            level=level.upper(),
            format=format_str,
            colorize=sink is None,
            backtrace=True,
            diagnose=False,
        )

    _intercept_standard_logging()

    _CONFIGURED = True
    logger.debug(f"Logging configured: level={level}, json_format={json_format}")
    return handler_id


class InterceptHandler(logging.Handler):
    """Forward stdlib logging records to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            log_level = logger.level(record.levelname).name
        except ValueError:
            log_level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame is not None and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            log_level, record.getMessage()
        )


def _intercept_standard_logging() -> None:
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)


def is_configured() -> bool:
    return _CONFIGURED


__all__ = ["configure_logging", "InterceptHandler", "is_configured", "logger"]
