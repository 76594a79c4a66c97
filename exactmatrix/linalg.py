#!/usr/bin/env python3
#
# Copyright 2022 Max Planck Insitute Magdeburg
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
#
#
"""Functions for exact linear algebra on dense rational matrices

All functions take matrices (or 2D literals that are converted with
matrix()) and return new objects; arguments are never modified.
"""

from fractions import Fraction
from typing import List, Union

from exactmatrix.names import *
from exactmatrix.math import DenseMatrix, GaussianElimination, MatrixOperations, ReadableMatrix

__all__ = [
    'matrix', 'identity', 'rref', 'rank', 'pivot_columns', 'nullspace', 'transpose', 'add', 'sub', 'negate',
    'scale', 'matmul', 'submatrix', 'determinant', 'inverse', 'is_inverse', 'is_linearly_independent',
    'column_space_basis', 'row_space'
]

MatrixLike = Union[ReadableMatrix, list, tuple]


def _as_matrix(value: MatrixLike) -> ReadableMatrix:
    if isinstance(value, ReadableMatrix):
        return value
    return DenseMatrix.from_grid(value)


def _gauss() -> GaussianElimination:
    return GaussianElimination.get_instance()


def _ops() -> MatrixOperations:
    return MatrixOperations.instance()


def matrix(grid) -> DenseMatrix:
    """Create a matrix from a 2D literal

    Example:
        A = matrix([[1, '1/2'], [0.25, 3]])

    Args:
        grid (list of lists, tuple of tuples or 2D numpy.ndarray):
            The rows of the matrix. Entries may be int, str ('1/3', '0.25'),
            float, decimal.Decimal, fractions.Fraction or sympy.Rational and
            are stored as exact fractions.

    Returns:
        (DenseMatrix):
        A new matrix. Raises InvalidShapeError for ragged rows.
    """
    return DenseMatrix.from_grid(grid)


def identity(n: int) -> DenseMatrix:
    """Create the n x n identity matrix"""
    return _ops().identity(n)


def rref(A: MatrixLike) -> DenseMatrix:
    """Reduced row echelon form by Gauss-Jordan elimination

    Pivots are searched column by column (first nonzero entry at or below the
    current row). Columns without a pivot candidate are left as free columns.
    Zero entries of the result are stored as canonical zeros.

    Args:
        A (DenseMatrix or 2D literal): Matrix of any shape, including empty ones.

    Returns:
        (DenseMatrix):
        A new matrix of the same shape as A in reduced row echelon form.
    """
    return _gauss().rref(_as_matrix(A))


def rank(A: MatrixLike) -> int:
    """Number of pivots in the reduced row echelon form of A"""
    return _gauss().rank(_as_matrix(A))


def pivot_columns(A: MatrixLike) -> List[int]:
    """Indices of the pivot columns of the reduced row echelon form of A"""
    return _gauss().pivot_columns(_as_matrix(A))


def nullspace(A: MatrixLike) -> DenseMatrix:
    """Basis of the nullspace of A, one basis vector per column"""
    return _gauss().nullspace(_as_matrix(A))


def transpose(A: MatrixLike) -> DenseMatrix:
    """Transpose of A (columns x rows)"""
    return _ops().transpose(_as_matrix(A))


def add(A: MatrixLike, B: MatrixLike) -> DenseMatrix:
    """Element-wise sum, raises ShapeMismatchError unless A and B have the same shape"""
    return _ops().add_matrix(_as_matrix(A), _as_matrix(B))


def sub(A: MatrixLike, B: MatrixLike) -> DenseMatrix:
    """Element-wise difference A - B, raises ShapeMismatchError unless A and B have the same shape"""
    return _ops().subtract_matrix(_as_matrix(A), _as_matrix(B))


def negate(A: MatrixLike) -> DenseMatrix:
    """Element-wise negation"""
    return _ops().negate(_as_matrix(A))


def scale(A: MatrixLike, k) -> DenseMatrix:
    """Multiply every entry of A by the scalar k"""
    return _ops().multiply_scalar(_as_matrix(A), k)


def matmul(A: MatrixLike, B: MatrixLike) -> DenseMatrix:
    """Matrix product A * B, raises ShapeMismatchError unless A has as many columns as B has rows"""
    return _ops().multiply_matrix(_as_matrix(A), _as_matrix(B))


def submatrix(A: MatrixLike, row: int, col: int) -> DenseMatrix:
    """A without the given row and column (a 1x1 matrix yields a 0x0 matrix)"""
    return _ops().submatrix(_as_matrix(A), row, col)


def determinant(A: MatrixLike, **kwargs) -> Fraction:
    """Determinant by cofactor expansion along the second row

    The cost grows factorially with the dimension. Matrices larger than
    DETERMINANT_MAX_SIZE are refused unless a different limit is given.

    Example:
        det = determinant(A, max_size=None)

    Args:
        A (DenseMatrix or 2D literal): Square, non-empty matrix.

        max_size (optional (int)): (Default: 8)
            Largest accepted dimension. None disables the limit.

    Returns:
        (Fraction):
        The exact determinant. Raises NotSquareError, EmptyMatrixError or
        MatrixTooLargeError when the preconditions are not met.
    """
    allowed_keys = {MAX_SIZE}
    for key in kwargs:
        if key not in allowed_keys:
            raise ValueError("Key " + key + " is not supported.")
    max_size = kwargs.get(MAX_SIZE, DETERMINANT_MAX_SIZE)
    return _ops().determinant(_as_matrix(A), max_size=max_size)


def inverse(A: MatrixLike) -> DenseMatrix:
    """Inverse of a square matrix via the RREF of the augmented matrix [A | I]

    The result is not validated. If A is singular, the returned block is
    meaningless; check with is_inverse(A, result) or is_linearly_independent(A).

    Args:
        A (DenseMatrix or 2D literal): Square matrix. Raises NotSquareError otherwise.

    Returns:
        (DenseMatrix):
        The right half of RREF([A | I]).
    """
    return _ops().invert(_as_matrix(A))


def is_inverse(A: MatrixLike, B: MatrixLike) -> bool:
    """True if A * B equals the identity exactly"""
    return _ops().is_inverse(_as_matrix(A), _as_matrix(B))


def is_linearly_independent(A: MatrixLike) -> bool:
    """Test whether the column vectors of A are linearly independent

    Returns False immediately if A has more columns than rows. Otherwise the
    leading columns x columns block of RREF(A) must equal the identity.
    """
    return _ops().is_linearly_independent(_as_matrix(A))


def column_space_basis(A: MatrixLike) -> DenseMatrix:
    """Columns of A at the pivot columns of its RREF"""
    return _ops().column_space_basis(_as_matrix(A))


def row_space(A: MatrixLike) -> DenseMatrix:
    """Rows of A as column vectors (the transpose)"""
    return _ops().row_space(_as_matrix(A))
