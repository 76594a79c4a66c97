"""Display tests: rounding, delimiters and printing."""
import io
from fractions import Fraction

import pytest

import exactmatrix as em


@pytest.mark.parametrize("value,digits,expected", [
    (Fraction(1, 2), 2, '0.5'),
    (Fraction(1, 3), 2, '0.33'),
    (Fraction(2, 3), 3, '0.667'),
    (Fraction(-1, 2), 2, '-0.5'),
    (2, 2, '2'),
    (Fraction(5, 2), 0, '2'),
    (Fraction(7, 2), 0, '4'),
    (Fraction(1, 8), 2, '0.12'),
    (Fraction(-1, 1000), 2, '0'),
    (Fraction(-15), 2, '-15'),
    (Fraction(1, 2**20), 20, '0.00000095367431640625'),
    (Fraction(-1, 3), 40, '-0.' + '3' * 40),
    (Fraction(10**30 + 1, 10**30), 30, '1.' + '0' * 29 + '1'),
])
def test_format_value(value, digits, expected):
    """Values are rounded half-to-even and trailing zeros are dropped."""
    assert em.format_value(value, digits) == expected


def test_format_matrix_default():
    """Default display: two decimals, every value followed by a tab."""
    mat = em.matrix([[1, '1/3'], ['-1/2', 2]])
    assert em.format_matrix(mat) == "1\t0.33\t\n-0.5\t2\t"


def test_format_matrix_options():
    """round and delimiter are configurable."""
    mat = em.matrix([['2/3', 1]])
    assert em.format_matrix(mat, round=3, delimiter=' ') == "0.667 1 "
    assert em.format_matrix(mat, **{em.ROUND: 0}) == "1\t1\t"


def test_format_matrix_invalid_options():
    """Unknown keys and non-integer rounding raise ValueError."""
    mat = em.identity(2)
    with pytest.raises(ValueError, match="Key precision is not supported."):
        em.format_matrix(mat, precision=3)
    with pytest.raises(ValueError):
        em.format_matrix(mat, round='2')


def test_format_does_not_round_storage():
    """Display rounding leaves the stored values exact."""
    mat = em.matrix([['1/3']])
    em.format_matrix(mat, round=1)
    assert mat.get_value_at(0, 0) == Fraction(1, 3)


def test_print_matrix():
    """print_matrix writes the rows and a trailing blank line."""
    out = io.StringIO()
    em.print_matrix(em.matrix([[1, 2], [3, 4]]), file=out)
    assert out.getvalue() == "1\t2\t\n3\t4\t\n\n"


def test_print_empty_matrix(capsys):
    """An empty matrix prints only the blank line, to stdout by default."""
    em.print_matrix(em.matrix([]))
    assert capsys.readouterr().out == "\n"
