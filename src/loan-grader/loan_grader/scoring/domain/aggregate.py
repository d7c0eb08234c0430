"""Aggregation of per-case results into the final percentage."""

import math
from fractions import Fraction

from loan_grader.scoring.domain.result import CaseResult


def final_percentage(results: list[CaseResult]) -> int:
    """Average the score/max ratios with equal weight and round up to a percent.

    Exact rational arithmetic keeps a perfect run at exactly 100 and makes the
    result independent of the order of *results*.

    Raises:
        ValueError: if *results* is empty.
    """
    if not results:
        raise ValueError("cannot aggregate an empty list of case results")

    mean_ratio = sum((r.ratio for r in results), Fraction(0)) / len(results)
    return math.ceil(mean_ratio * 100)
