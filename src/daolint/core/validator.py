"""Classification result validation.

This module checks that a classification result is internally consistent:
the two key sets are disjoint and every key is well formed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from daolint.core.models import ClassificationResult


class ValidationErrorType(str, Enum):
    """Types of validation errors."""

    OVERLAPPING_KEY = "overlapping_key"
    MALFORMED_KEY = "malformed_key"


@dataclass
class ValidationError:
    """A single validation error."""

    error_type: ValidationErrorType
    key: str
    message: str


@dataclass
class ValidationResult:
    """Result of classification result validation."""

    is_valid: bool
    errors: list[ValidationError] = field(default_factory=list)

    def add_error(self, error_type: ValidationErrorType, key: str, message: str) -> None:
        """Add a validation error."""
        self.errors.append(ValidationError(error_type=error_type, key=key, message=message))
        self.is_valid = False


def validate_result(result: ClassificationResult) -> ValidationResult:
    """Validate a classification result.

    Args:
        result: The result snapshot to validate.

    Returns:
        ValidationResult containing validation status and any errors found.
    """
    from daolint.engine.signature import KeyFormatError, parse_key

    validation = ValidationResult(is_valid=True)

    for key in sorted(result.conforming & result.non_conforming):
        validation.add_error(
            ValidationErrorType.OVERLAPPING_KEY,
            key,
            f"Key '{key}' is both conforming and non-conforming",
        )

    for key in sorted(result.conforming | result.non_conforming):
        try:
            parse_key(key)
        except KeyFormatError as e:
            validation.add_error(ValidationErrorType.MALFORMED_KEY, key, str(e))

    return validation
