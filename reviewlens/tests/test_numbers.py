import math

import pytest

from reviewlens.utils.numbers import round_half_up


@pytest.mark.parametrize(
    "value, digits, expected",
    [
        (4.25, 1, 4.3),
        (4.35, 1, 4.4),
        (0.125, 2, 0.13),
        (-0.125, 2, -0.13),
        (2.5, 0, 3.0),
        (3.5, 0, 4.0),
        (3.49, 0, 3.0),
        (66.66666, 1, 66.7),
        (0.1 + 0.2, 2, 0.3),
    ],
)
def test_halves_round_away_from_zero(value, digits, expected):
    assert round_half_up(value, digits) == expected


def test_non_finite_passes_through():
    assert math.isnan(round_half_up(math.nan, 2))
    assert round_half_up(math.inf, 1) == math.inf
