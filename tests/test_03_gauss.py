"""Gauss-Jordan tests: reduced row echelon form, rank, pivots and nullspace."""
import logging
from fractions import Fraction

import numpy as np
import pytest

import exactmatrix as em
from exactmatrix.math import DenseMatrix, GaussianElimination


def assert_reduced_echelon(mat):
    """Check leading ones, cleared pivot columns, increasing pivots and zero rows at the bottom."""
    rows, cols = mat.shape
    last_lead = -1
    seen_zero_row = False
    for i in range(rows):
        row = mat.get_row(i)
        nonzero = [j for j, v in enumerate(row) if v != 0]
        if not nonzero:
            seen_zero_row = True
            continue
        assert not seen_zero_row, f"nonzero row {i} below a zero row"
        lead = nonzero[0]
        assert lead > last_lead, f"leading column of row {i} does not move right"
        assert row[lead] == 1, f"leading entry of row {i} is {row[lead]}"
        for k in range(rows):
            if k != i:
                assert mat.get_value_at(k, lead) == 0, f"pivot column {lead} not cleared in row {k}"
        last_lead = lead


def test_rref_of_linear_system(system_3x4):
    """A uniquely solvable system reduces to identity plus the solution column."""
    expected = em.matrix([[1, 0, 0, -8], [0, 1, 0, 1], [0, 0, 1, -2]])
    assert em.rref(system_3x4) == expected
    assert em.pivot_columns(system_3x4) == [0, 1, 2]
    assert em.rank(system_3x4) == 3


def test_rref_of_invertible_matrix(invertible_3x3):
    """An invertible matrix reduces to the identity."""
    assert em.rref(invertible_3x3) == em.identity(3)


def test_rref_textbook_example():
    """Free columns are skipped and stay unreduced."""
    mat = em.matrix([[0, 3, -6, 6, 4, -5], [3, -7, 8, -5, 8, 9], [3, -9, 12, -9, 6, 15]])
    expected = em.matrix([[1, 0, -2, 3, 0, -24], [0, 1, -2, 2, 0, -7], [0, 0, 0, 0, 1, 4]])
    assert em.rref(mat) == expected
    assert em.pivot_columns(mat) == [0, 1, 4]


def test_rref_free_leading_columns():
    """Leading zero columns produce no pivot."""
    assert em.rref([[0, 0, 1], [0, 0, 2]]) == em.matrix([[0, 0, 1], [0, 0, 0]])
    assert em.pivot_columns([[0, 0, 1], [0, 0, 2]]) == [2]


def test_rref_canonical_form(any_matrix):
    """The result satisfies every condition of reduced row echelon form."""
    result = em.rref(any_matrix)
    assert result.shape == any_matrix.shape
    assert_reduced_echelon(result)


def test_rref_idempotent(any_matrix):
    """Reducing a reduced matrix changes nothing."""
    once = em.rref(any_matrix)
    assert em.rref(once) == once


def test_rref_matches_sympy(any_matrix):
    """The reduced form is unique, so sympy must agree exactly."""
    expected, pivots = any_matrix.to_sympy().rref()
    assert em.rref(any_matrix).to_sympy() == expected
    assert em.pivot_columns(any_matrix) == list(pivots)


def test_rank_matches_numpy(any_matrix):
    """Rank agrees with numpy for well-conditioned integer-like inputs."""
    assert em.rank(any_matrix) == np.linalg.matrix_rank(any_matrix.to_numpy())


def test_rref_does_not_modify_input(system_3x4):
    """The argument keeps its values."""
    before = system_3x4.clone()
    em.rref(system_3x4)
    assert system_3x4 == before


def test_rref_zero_entries_are_exact():
    """Every zero of the result is an exact Fraction zero."""
    result = em.rref([['1/3', '2/3'], ['1/6', '1/3']])
    assert result == em.matrix([[1, 2], [0, 0]])
    for row in result.get_rows():
        for value in row:
            assert isinstance(value, Fraction)
    assert result.get_value_at(1, 0).denominator == 1


def test_rref_exact_with_floats():
    """Decimal floats are reduced without rounding error."""
    result = em.rref([[0.1, 0.2, 0.3], [0.4, 0.5, 0.6]])
    assert result == em.matrix([[1, 0, -1], [0, 1, 2]])


@pytest.mark.parametrize("shape", [(0, 0), (0, 3), (2, 0)])
def test_rref_empty(shape):
    """Empty matrices reduce to themselves."""
    result = em.rref(DenseMatrix(*shape))
    assert result.shape == shape
    assert em.rank(DenseMatrix(*shape)) == 0


def test_nullspace(system_3x4):
    """Nullspace columns are annihilated by the matrix."""
    kernel = em.nullspace(system_3x4)
    assert kernel == em.matrix([[8], [-1], [2], [1]])
    assert em.matmul(system_3x4, kernel) == DenseMatrix(3, 1)


def test_nullspace_dimension(any_matrix):
    """rank + nullity equals the number of columns."""
    gauss = GaussianElimination.get_instance()
    kernel = em.nullspace(any_matrix)
    assert kernel.shape == (any_matrix.get_column_count(), gauss.nullity(any_matrix))
    assert em.rank(any_matrix) + kernel.get_column_count() == any_matrix.get_column_count()
    assert em.matmul(any_matrix, kernel) == DenseMatrix(any_matrix.get_row_count(), kernel.get_column_count())


def test_rref_logs_rank(caplog, system_3x4):
    """The elimination reports its rank at debug level."""
    with caplog.at_level(logging.DEBUG, logger="exactmatrix.math.gauss"):
        em.rref(system_3x4)
    assert "rank 3" in caplog.text


def test_disable_logger(caplog, system_3x4):
    """No records are emitted inside DisableLogger."""
    with caplog.at_level(logging.DEBUG, logger="exactmatrix.math.gauss"):
        with em.DisableLogger():
            em.rref(system_3x4)
    assert caplog.text == ""
