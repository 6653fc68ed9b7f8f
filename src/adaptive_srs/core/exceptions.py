"""
Adaptive SRS Domain-Specific Exceptions
========================================

This module defines a hierarchy of exceptions for consistent error handling
across the scheduling engine.

Exception Hierarchy:
    SRSError (base)
    └── IrrecoverableError (caller bug or bad setup, never retried)
        ├── ConfigurationError
        └── ValidationError
            ├── InvalidGradeError
            └── MissingItemError

Usage Guidelines:
    - The engine does no I/O, so nothing it raises is worth retrying
    - Raise for programmer errors (bad grade, missing item, bad config)
    - Degenerate inputs (empty collections, zero-day forecasts) are not errors
    - Always include context in error messages
"""

from typing import Any, Optional
from enum import Enum


class ErrorCategory(Enum):
    """Categories for error classification."""
    CONFIG = "CONFIG"
    VALIDATION = "VALIDATION"
    SCHEDULING = "SCHEDULING"


class SRSError(Exception):
    """
    Base exception for all scheduling engine errors.

    Attributes:
        message: Human-readable error message
        error_code: Machine-readable error code
        context: Additional context about the error
        recoverable: Whether the error is potentially recoverable
    """

    error_code: str = "SRS_ERROR"
    recoverable: bool = False
    category: ErrorCategory = ErrorCategory.SCHEDULING

    def __init__(
        self,
        message: str,
        context: Optional[dict] = None,
        error_code: Optional[str] = None,
        recoverable: Optional[bool] = None
    ):
        super().__init__(message)
        self.message = message
        self.context = context or {}
        if error_code is not None:
            self.error_code = error_code
        if recoverable is not None:
            self.recoverable = recoverable

    def __str__(self) -> str:
        if self.context:
            return f"{self.message} | context={self.context}"
        return self.message

    def to_dict(self) -> dict:
        """Convert exception to a plain dictionary."""
        result = {
            "error": self.message,
            "code": self.error_code,
            "category": self.category.value,
            "recoverable": self.recoverable,
        }
        if self.context:
            result["context"] = self.context
        return result


class IrrecoverableError(SRSError):
    """
    Base class for irrecoverable errors.

    These require a code or configuration fix:
    - Invalid configuration
    - Validation failures
    """
    recoverable = False


# =============================================================================
# Configuration Errors
# =============================================================================

class ConfigurationError(IrrecoverableError):
    """Raised when configuration is invalid or missing."""
    error_code = "CONFIGURATION_ERROR"
    category = ErrorCategory.CONFIG

    def __init__(self, config_key: str, reason: str, context: Optional[dict] = None):
        ctx = {"config_key": config_key}
        if context:
            ctx.update(context)
        super().__init__(f"Configuration error for '{config_key}': {reason}", ctx)
        self.config_key = config_key


# =============================================================================
# Validation Errors
# =============================================================================

class ValidationError(IrrecoverableError, ValueError):
    """Raised when input validation fails."""
    error_code = "VALIDATION_ERROR"
    category = ErrorCategory.VALIDATION

    def __init__(self, field: str, reason: str, value: Any = None, context: Optional[dict] = None):
        ctx = {"field": field}
        if value is not None:
            # Truncate large values
            value_str = str(value)
            if len(value_str) > 100:
                value_str = value_str[:100] + "..."
            ctx["value"] = value_str
        if context:
            ctx.update(context)
        super().__init__(f"Validation error for '{field}': {reason}", ctx)
        self.field = field
        self.reason = reason


class InvalidGradeError(ValidationError):
    """Raised when a review grade is not an integer in [0, 5]."""
    error_code = "INVALID_GRADE_ERROR"

    def __init__(self, grade: Any, context: Optional[dict] = None):
        super().__init__(
            "grade",
            "must be an integer between 0 and 5",
            value=repr(grade),
            context=context,
        )
        self.grade = grade


class MissingItemError(ValidationError):
    """Raised when an operation that needs a review item receives none."""
    error_code = "MISSING_ITEM_ERROR"

    def __init__(self, operation: str, context: Optional[dict] = None):
        ctx = {"operation": operation}
        if context:
            ctx.update(context)
        super().__init__("item", f"{operation} requires an existing review item", context=ctx)
        self.operation = operation


__all__ = [
    "ErrorCategory",
    "SRSError",
    "IrrecoverableError",
    "ConfigurationError",
    "ValidationError",
    "InvalidGradeError",
    "MissingItemError",
]
