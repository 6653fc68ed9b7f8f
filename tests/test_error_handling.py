"""
Tests for the exception hierarchy.
"""

import pytest

from adaptive_srs.core.exceptions import (
    ConfigurationError,
    ErrorCategory,
    InvalidGradeError,
    IrrecoverableError,
    MissingItemError,
    SRSError,
    ValidationError,
)


class TestHierarchy:
    @pytest.mark.parametrize(
        "exc",
        [
            ConfigurationError("easy_bonus", "too small"),
            ValidationError("days", "must be >= 0", value=-1),
            InvalidGradeError(9),
            MissingItemError("process_review"),
        ],
    )
    def test_all_irrecoverable(self, exc):
        assert isinstance(exc, SRSError)
        assert isinstance(exc, IrrecoverableError)
        assert exc.recoverable is False

    def test_validation_errors_are_value_errors(self):
        assert issubclass(ValidationError, ValueError)
        assert issubclass(InvalidGradeError, ValueError)
        assert issubclass(MissingItemError, ValueError)
        assert not issubclass(ConfigurationError, ValueError)

    def test_missing_item_context(self):
        err = MissingItemError("process_review")
        assert err.operation == "process_review"
        assert err.context["operation"] == "process_review"
        assert err.category is ErrorCategory.VALIDATION

    def test_str_includes_context(self):
        err = ConfigurationError("easy_bonus", "must be >= 1.0")
        assert "easy_bonus" in str(err)
        assert "context=" in str(err)

    def test_long_values_truncated(self):
        err = ValidationError("items", "bad", value="x" * 500)
        assert len(err.context["value"]) == 103

    def test_to_dict(self):
        data = InvalidGradeError(-1).to_dict()
        assert data["code"] == "INVALID_GRADE_ERROR"
        assert data["category"] == "VALIDATION"
        assert data["recoverable"] is False
        assert data["context"]["field"] == "grade"


class TestCategory:
    @pytest.mark.parametrize(
        "exc, category",
        [
            (SRSError("boom"), ErrorCategory.SCHEDULING),
            (ConfigurationError("easy_bonus", "too small"), ErrorCategory.CONFIG),
            (ValidationError("days", "must be >= 0"), ErrorCategory.VALIDATION),
            (InvalidGradeError(7), ErrorCategory.VALIDATION),
        ],
    )
    def test_category_reported_in_dict(self, exc, category):
        assert exc.category is category
        assert exc.to_dict()["category"] == category.value
