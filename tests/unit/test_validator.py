"""Unit tests for classification result validation."""

from daolint.core.models import ClassificationResult
from daolint.core.validator import ValidationErrorType, validate_result


class TestValidateResult:
    """Tests for validate_result()."""

    def test_valid_result(self) -> None:
        result = ClassificationResult(
            conforming=frozenset({"getAll/0", "find/2[int,List<Invoice>]"}),
            non_conforming=frozenset({"getCar/0"}),
        )
        validation = validate_result(result)
        assert validation.is_valid
        assert validation.errors == []

    def test_overlapping_key(self) -> None:
        result = ClassificationResult(
            conforming=frozenset({"getAll/0"}),
            non_conforming=frozenset({"getAll/0"}),
        )
        validation = validate_result(result)
        assert not validation.is_valid
        assert [e.error_type for e in validation.errors] == [ValidationErrorType.OVERLAPPING_KEY]

    def test_malformed_key(self) -> None:
        result = ClassificationResult(conforming=frozenset({"getAll/2[int]"}))
        validation = validate_result(result)
        assert not validation.is_valid
        assert validation.errors[0].error_type == ValidationErrorType.MALFORMED_KEY
        assert validation.errors[0].key == "getAll/2[int]"
