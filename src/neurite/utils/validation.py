"""Argument checks shared by layers, initializers and learning-rate functions."""

from neurite.core import NonPositiveError, OutOfRangeError


def validate_positive(value, name: str) -> None:
    """Raise NonPositiveError if value <= 0."""
    if value <= 0:
        raise NonPositiveError(name, value)


def validate_within_range(value, low, high, name: str) -> None:
    """Raise OutOfRangeError unless low <= value <= high."""
    if value < low or value > high:
        raise OutOfRangeError(name, value, low, high)
