import pytest

from freqscore.config import ScoreFormula
from freqscore.errors import InvalidCount, ZeroCount
from freqscore.scoring import derive, raw_count, reciprocal_float, reciprocal_scaled_int


def test_reciprocal_float():
    assert derive(100, 100) == pytest.approx(0.01)
    assert derive(10, 100) == pytest.approx(0.1)
    assert derive(1, 100) == 1.0


def test_reciprocal_scaled_int():
    assert reciprocal_scaled_int(1, 10) == 4294967295
    assert reciprocal_scaled_int(2, 10) == 2147483647
    assert reciprocal_scaled_int(10, 10) == 429496729
    assert isinstance(reciprocal_scaled_int(3, 10), int)


def test_raw_count_passthrough():
    assert raw_count(0, 5) == 0
    assert derive(5, 5, ScoreFormula.RAW_COUNT) == 5


@pytest.mark.parametrize("formula", [ScoreFormula.RECIPROCAL_FLOAT, ScoreFormula.RECIPROCAL_SCALED_INT])
def test_reciprocal_formulas_are_non_increasing(formula):
    max_count = 1000
    scores = [derive(c, max_count, formula) for c in range(1, max_count + 1)]
    assert all(a >= b for a, b in zip(scores, scores[1:]))


@pytest.mark.parametrize("formula", [ScoreFormula.RECIPROCAL_FLOAT, ScoreFormula.RECIPROCAL_SCALED_INT])
def test_zero_count_is_rejected(formula):
    with pytest.raises(ZeroCount):
        derive(0, 10, formula)
    # still an InvalidCount for callers catching the broader kind
    with pytest.raises(InvalidCount):
        derive(0, 10, formula)


def test_float_scores_stay_within_range():
    max_count = 250
    for c in (1, 7, 250):
        assert 1 / max_count <= reciprocal_float(c, max_count) <= 1


def test_count_above_max_is_a_caller_error():
    with pytest.raises(ValueError):
        derive(11, 10)


def test_formula_accepts_string_names():
    assert derive(4, 4, "raw_count") == 4
