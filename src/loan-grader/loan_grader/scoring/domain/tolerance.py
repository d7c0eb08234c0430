"""Exact decimal comparison helpers used by the rubrics."""

from decimal import Decimal


def equal_within(a: Decimal, b: Decimal, error: Decimal) -> bool:
    """Return True if *a* and *b* differ by no more than *error*."""
    return abs(a - b) <= error
