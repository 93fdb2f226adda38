"""Validators for configuration values, raising ValidationError on bad input."""

from __future__ import annotations

from typing import Any, Iterable


class ValidationError(ValueError):
    """A configured value is outside what the API accepts."""


def validate_positive(key: str, value: int) -> int:
    """Check that an integer is strictly positive."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"expected type of {key} to be integer")
    if value <= 0:
        raise ValidationError(f'"{key}" must be positive, got: {value}')
    return value


def validate_in(key: str, value: Any, allowed: Iterable[str], ignore_case: bool = False) -> str:
    """Check that a string is one of the allowed values."""
    if not isinstance(value, str):
        raise ValidationError(f"expected type of {key} to be string")
    choices = list(allowed)
    if ignore_case:
        matched = any(value.casefold() == choice.casefold() for choice in choices)
    else:
        matched = value in choices
    if not matched:
        raise ValidationError(
            f"expected {key} to be one of [{' '.join(choices)}], got {value}"
        )
    return value


def validate_range(key: str, value: Any, low: int, high: int | None = None) -> int:
    """Check that an integer lies between low and high inclusive; no upper bound if high is None."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"expected type of {key} to be integer")
    if high is None:
        if value < low:
            raise ValidationError(f"expected {key} to be at least ({low}), got {value}")
    elif not low <= value <= high:
        raise ValidationError(
            f"expected {key} to be in the range ({low} - {high}), got {value}"
        )
    return value