"""
Tests for the shared domain validation rules.
"""
import pytest

from shared.domain import EntityValidationError
from shared.domain import validation


class TestNotNull:

    @pytest.mark.parametrize("value", ["Smart TV", "", 0, False, []])
    def test_accepts_non_null(self, value):
        validation.not_null(value, "Value")

    def test_rejects_none(self):
        with pytest.raises(EntityValidationError) as exc_info:
            validation.not_null(None, "Title")

        assert exc_info.value.message == "Title should not be null"
        assert exc_info.value.field == "Title"


class TestNotNullOrEmpty:

    @pytest.mark.parametrize("value", [" ", "", "\t", None])
    def test_rejects_empty(self, value):
        with pytest.raises(EntityValidationError) as exc_info:
            validation.not_null_or_empty(value, "Title")

        assert exc_info.value.message == "Title should not be empty or null"

    def test_accepts_text(self):
        validation.not_null_or_empty("Ergonomic Chair", "Title")


class TestMinLength:

    @pytest.mark.parametrize(
        "value, minimum",
        [("123456", 10), ("Chair", 6), ("Small Steel Keyboard", 39)],
    )
    def test_rejects_shorter(self, value, minimum):
        with pytest.raises(EntityValidationError) as exc_info:
            validation.min_length(value, minimum, "Title")

        assert exc_info.value.message == (
            f"Title should be at least {minimum} characters long"
        )

    @pytest.mark.parametrize(
        "value, minimum",
        [("123456", 5), ("123456", 6), ("Small Steel Keyboard", 16)],
    )
    def test_accepts_longer_or_equal(self, value, minimum):
        validation.min_length(value, minimum, "Title")


class TestMaxLength:

    @pytest.mark.parametrize(
        "value, maximum",
        [("123456", 5), ("Small Steel Keyboard", 17)],
    )
    def test_rejects_longer(self, value, maximum):
        with pytest.raises(EntityValidationError) as exc_info:
            validation.max_length(value, maximum, "Title")

        assert exc_info.value.message == (
            f"Title should be less than or equal to {maximum} characters long"
        )

    @pytest.mark.parametrize(
        "value, maximum",
        [("1234", 5), ("12345", 5), ("Small Steel Keyboard", 23)],
    )
    def test_accepts_shorter_or_equal(self, value, maximum):
        validation.max_length(value, maximum, "Title")

    def test_large_limits_use_thousands_separator(self):
        with pytest.raises(EntityValidationError) as exc_info:
            validation.max_length("x" * 10_001, 10_000, "Body")

        assert exc_info.value.message == (
            "Body should be less than or equal to 10,000 characters long"
        )
