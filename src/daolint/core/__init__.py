"""Core module containing data models, configuration, serializer, and validator."""

from daolint.core.models import (
    CheckReport,
    ClassClosed,
    ClassificationResult,
    ClassOpened,
    ClassScope,
    DaoReport,
    DeclarationEvent,
    LanguageType,
    MethodDeclaration,
    MethodDeclared,
    TypeMatch,
    TypeReference,
    Verdict,
    Visibility,
)
from daolint.core.serializer import (
    SerializationError,
    deserialize,
    deserialize_from_dict,
    serialize,
    serialize_to_dict,
)
from daolint.core.validator import (
    ValidationError,
    ValidationErrorType,
    ValidationResult,
    validate_result,
)

__all__ = [
    "CheckReport",
    "ClassClosed",
    "ClassificationResult",
    "ClassOpened",
    "ClassScope",
    "DaoReport",
    "DeclarationEvent",
    "LanguageType",
    "MethodDeclaration",
    "MethodDeclared",
    "SerializationError",
    "TypeMatch",
    "TypeReference",
    "ValidationError",
    "ValidationErrorType",
    "ValidationResult",
    "Verdict",
    "Visibility",
    "deserialize",
    "deserialize_from_dict",
    "serialize",
    "serialize_to_dict",
    "validate_result",
]
