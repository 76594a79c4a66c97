"""Scalar conversion tests: every supported input type becomes an exact Fraction."""
from decimal import Decimal
from fractions import Fraction

import numpy as np
import pytest
from sympy import Rational

from exactmatrix.math import RationalMath


@pytest.mark.parametrize("value,expected", [
    (3, Fraction(3)),
    (-7, Fraction(-7)),
    (Fraction(2, 6), Fraction(1, 3)),
    ('1/3', Fraction(1, 3)),
    (' 0.25 ', Fraction(1, 4)),
    (Decimal('1.5'), Fraction(3, 2)),
    (0.1, Fraction(1, 10)),
    (-2.5, Fraction(-5, 2)),
    (Rational(2, 3), Fraction(2, 3)),
    (np.int64(4), Fraction(4)),
    (np.float64(0.2), Fraction(1, 5)),
])
def test_to_fraction(value, expected):
    """Supported numeric types convert to the exact decimal value they denote."""
    result = RationalMath.to_fraction(value)
    assert isinstance(result, Fraction)
    assert result == expected


@pytest.mark.parametrize("value", [float('nan'), float('inf'), Decimal('NaN'), 'abc'])
def test_to_fraction_rejects_invalid_values(value):
    """NaN, infinity and unparsable strings raise ValueError."""
    with pytest.raises(ValueError):
        RationalMath.to_fraction(value)


def test_to_fraction_rejects_unknown_type():
    """Values without a rational interpretation raise TypeError."""
    with pytest.raises(TypeError):
        RationalMath.to_fraction([1, 2])


def test_zero_normalization():
    """Zero test is exact and normalize_zero returns the canonical zero."""
    assert RationalMath.is_zero(Fraction(0, 5))
    assert not RationalMath.is_zero(Fraction(1, 10**30))
    assert RationalMath.normalize_zero(Fraction(0, 7)) is RationalMath.ZERO
    assert RationalMath.normalize_zero(Fraction(1, 7)) == Fraction(1, 7)


def test_sympy_round_trip():
    """Fractions convert to sympy Rationals without loss."""
    rat = RationalMath.to_sympy_rational(Fraction(-3, 8))
    assert rat == Rational(-3, 8)
    assert RationalMath.to_fraction(rat) == Fraction(-3, 8)


def test_array_conversion():
    """numpy arrays convert to object arrays of Fractions and back to floats."""
    arr = np.array([[0.5, 1], [2, 0.75]])
    fractions = RationalMath.array_to_fractions(arr)
    assert fractions.dtype == object
    assert fractions[0, 0] == Fraction(1, 2)
    assert fractions[1, 1] == Fraction(3, 4)
    floats = RationalMath.fractions_to_floats(fractions)
    assert np.array_equal(floats, arr)
