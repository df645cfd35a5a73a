"""
collapse the per-word scores of a text into one number.

kurtosis here is the plain fourth standardized moment of the scores,
(1/n) * sum(((x - mean) / std) ** 4) with population variance. no -3
is subtracted; any two distinct values come out as 1.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np
from numpy.typing import NDArray

from .config import Aggregator
from .errors import NoWordsFound
from .scoring import Score


def _as_array(scores: Sequence[Score]) -> NDArray[np.float64]:
    return np.asarray(list(scores), dtype=np.float64)


def kurtosis(scores: Sequence[Score]) -> float:
    """
    fourth standardized moment of the scores.

    returns 0.0 when there are fewer than two scores, or when every
    score is the same (zero variance), instead of dividing by zero.
    """
    x = _as_array(scores)
    n = len(x)
    if n <= 1:
        return 0.0

    # identical values: std would be 0
    if np.all(x == x[0]):
        return 0.0

    mean = x.mean()
    deviations = x - mean

    # population variance, sum(x^2)/n - mean^2, taken over centered values
    variance = float(np.mean(deviations**2))
    if variance <= 0.0:
        return 0.0

    std = np.sqrt(variance)
    return float(np.mean((deviations / std) ** 4))


def average(scores: Sequence[Score]) -> Score:
    """
    mean of the scores.

    integer scores use floor division so the result stays an int;
    float scores give a float mean.

    raises:
        NoWordsFound: scores is empty
    """
    values = list(scores)
    n = len(values)
    if n == 0:
        raise NoWordsFound("no words of the text were found in the word map")

    if all(isinstance(v, (int, np.integer)) for v in values):
        return int(sum(int(v) for v in values) // n)
    return float(_as_array(values).mean())


def aggregate(scores: Sequence[Score], aggregator: Aggregator | str = Aggregator.KURTOSIS) -> Score:
    """dispatch to kurtosis() or average()."""
    aggregator = Aggregator(aggregator)
    if aggregator is Aggregator.KURTOSIS:
        return kurtosis(scores)
    return average(scores)
