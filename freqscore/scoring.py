"""
turn raw word counts into difficulty scores.

higher count (more common word) means a lower score, except for
RAW_COUNT which passes the count straight through.
"""

from __future__ import annotations

import math
from typing import Callable, Union

from .config import ScoreFormula
from .errors import ZeroCount
from .freqlist import UINT32_MAX

Score = Union[float, int]


def _check_range(count: int, max_count: int) -> None:
    # max_count must come from a full scan of the list first
    if count < 0 or count > max_count:
        raise ValueError(f"count {count} outside [0, {max_count}]")


def reciprocal_float(count: int, max_count: int) -> float:
    """1 / count, bounded to [1 / max_count, 1]."""
    _check_range(count, max_count)
    if count == 0:
        raise ZeroCount("count 0 has no reciprocal score")
    return 1 / count


def reciprocal_scaled_int(count: int, max_count: int) -> int:
    """1 / count scaled onto [0, UINT32_MAX], saturating."""
    _check_range(count, max_count)
    if count == 0:
        raise ZeroCount("count 0 has no reciprocal score")
    scaled = math.floor((1 / count) * UINT32_MAX)
    return max(0, min(scaled, UINT32_MAX))


def raw_count(count: int, max_count: int) -> int:
    """the count itself, unnormalized."""
    _check_range(count, max_count)
    return count


FORMULAS: dict[ScoreFormula, Callable[[int, int], Score]] = {
    ScoreFormula.RECIPROCAL_FLOAT: reciprocal_float,
    ScoreFormula.RECIPROCAL_SCALED_INT: reciprocal_scaled_int,
    ScoreFormula.RAW_COUNT: raw_count,
}


def derive(count: int, max_count: int, formula: ScoreFormula | str = ScoreFormula.RECIPROCAL_FLOAT) -> Score:
    """
    derive one word's score from its count.

    args:
        count: the word's count from the list
        max_count: largest count over the whole accepted list
        formula: which ScoreFormula to apply

    returns:
        float for RECIPROCAL_FLOAT, int otherwise

    raises:
        ZeroCount: count is 0 under a reciprocal formula
        ValueError: count is negative or above max_count
    """
    return FORMULAS[ScoreFormula(formula)](count, max_count)
