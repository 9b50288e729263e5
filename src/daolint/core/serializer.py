"""Check report serialization and deserialization.

This module provides functions to serialize check reports to JSON and
deserialize JSON back to report structures.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import ValidationError

from daolint.core.models import CheckReport


class SerializationError(Exception):
    """Error during serialization or deserialization."""

    def __init__(self, message: str, details: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details


def _format_validation_error(e: ValidationError) -> str:
    error_details = []
    for err in e.errors():
        loc = ".".join(str(x) for x in err["loc"])
        error_details.append(f"{loc}: {err['msg']}")
    return "; ".join(error_details)


def serialize(report: CheckReport) -> str:
    """Serialize a check report to a JSON string.

    Args:
        report: The report to serialize.

    Returns:
        JSON string representation of the report.

    Raises:
        SerializationError: If serialization fails.
    """
    try:
        data = report.model_dump(mode="json")
        return json.dumps(data, indent=2, ensure_ascii=False)
    except (TypeError, ValueError) as e:
        raise SerializationError(
            message="Failed to serialize report",
            details=str(e),
        ) from e


def deserialize(json_str: str) -> CheckReport:
    """Deserialize a JSON string to a check report.

    Args:
        json_str: JSON string representation of a report.

    Returns:
        The deserialized report.

    Raises:
        SerializationError: If deserialization fails with detailed error info.
    """
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise SerializationError(
            message="Invalid JSON format",
            details=f"Line {e.lineno}, column {e.colno}: {e.msg}",
        ) from e
    return deserialize_from_dict(data)


def serialize_to_dict(report: CheckReport) -> dict[str, Any]:
    """Serialize a check report to a dictionary."""
    return report.model_dump(mode="json")


def deserialize_from_dict(data: dict[str, Any]) -> CheckReport:
    """Deserialize a dictionary to a check report.

    Args:
        data: Dictionary representation of a report.

    Returns:
        The deserialized report.

    Raises:
        SerializationError: If the data does not describe a valid report.
    """
    try:
        return CheckReport.model_validate(data)
    except ValidationError as e:
        raise SerializationError(
            message="Report validation failed",
            details=_format_validation_error(e),
        ) from e
