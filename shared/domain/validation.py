"""
Reusable domain validation rules.

Every rule raises EntityValidationError naming the offending field, so the
first failing rule decides the message the caller sees.
"""
from typing import Any, Optional

from .exceptions import EntityValidationError


def not_null(value: Any, field_name: str) -> None:
    """Reject None."""
    if value is None:
        raise EntityValidationError(f"{field_name} should not be null", field=field_name)


def not_null_or_empty(value: Optional[str], field_name: str) -> None:
    """Reject None, empty and whitespace-only strings."""
    if value is None or not value.strip():
        raise EntityValidationError(
            f"{field_name} should not be empty or null", field=field_name
        )


def min_length(value: str, minimum: int, field_name: str) -> None:
    if len(value) < minimum:
        raise EntityValidationError(
            f"{field_name} should be at least {minimum:,} characters long",
            field=field_name,
        )


def max_length(value: str, maximum: int, field_name: str) -> None:
    if len(value) > maximum:
        raise EntityValidationError(
            f"{field_name} should be less than or equal to {maximum:,} characters long",
            field=field_name,
        )
