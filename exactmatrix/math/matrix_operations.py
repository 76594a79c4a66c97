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
"""
MatrixOperations - arithmetic and derived operations on rational matrices.

Every operation returns a new matrix and leaves its operands untouched.
Preconditions are checked before any work is done. Inverse, the inverse
check and the independence test are thin callers of the Gauss engine.
"""

import logging
from fractions import Fraction
from typing import Optional

from ..errors import (EmptyMatrixError, IndexOutOfBoundsError, MatrixTooLargeError, NotSquareError,
                      ShapeMismatchError, shape_str)
from ..names import COFACTOR_ROW, DETERMINANT_MAX_SIZE
from .dense_matrix import DenseMatrix
from .gauss import Gauss
from .rational_math import RationalMath, ZERO, ONE
from .readable_matrix import ReadableMatrix

LOG = logging.getLogger(__name__)


class MatrixOperations:
    """
    Concrete operations for rational matrices.

    Uses the singleton pattern, like the Gauss engine it builds on.
    """

    _instance = None

    @classmethod
    def instance(cls) -> 'MatrixOperations':
        """Get singleton instance"""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def get_gauss(self) -> Gauss:
        return Gauss.get_instance()

    # Matrix creation methods
    def create_matrix(self, rows: int, cols: int) -> DenseMatrix:
        """Create zero matrix with given dimensions"""
        return DenseMatrix(rows, cols)

    def identity(self, n: int) -> DenseMatrix:
        """n x n matrix with ones on the diagonal"""
        result = self.create_matrix(n, n)
        for i in range(n):
            result.set_value_at(i, i, ONE)
        return result

    # Basic matrix operations
    def transpose(self, matrix: ReadableMatrix) -> DenseMatrix:
        """Return transposed matrix"""
        return DenseMatrix(matrix).transpose()

    def negate(self, matrix: ReadableMatrix) -> DenseMatrix:
        """Return negated matrix"""
        result = self.create_matrix(matrix.get_row_count(), matrix.get_column_count())
        for row in range(matrix.get_row_count()):
            for col in range(matrix.get_column_count()):
                result.set_value_at(row, col, -matrix.get_value_at(row, col))
        result.normalize_zeros()
        return result

    def _check_same_shape(self, matrix_a: ReadableMatrix, matrix_b: ReadableMatrix) -> None:
        if matrix_a.shape != matrix_b.shape:
            raise ShapeMismatchError(f"Matrix dimensions don't match: {shape_str(matrix_a)} vs {shape_str(matrix_b)}")

    def add_matrix(self, matrix_a: ReadableMatrix, matrix_b: ReadableMatrix) -> DenseMatrix:
        """Add two matrices element-wise"""
        self._check_same_shape(matrix_a, matrix_b)
        result = self.create_matrix(matrix_a.get_row_count(), matrix_a.get_column_count())
        for row in range(matrix_a.get_row_count()):
            for col in range(matrix_a.get_column_count()):
                value_a = matrix_a.get_value_at(row, col)
                value_b = matrix_b.get_value_at(row, col)
                result.set_value_at(row, col, value_a + value_b)
        return result

    def subtract_matrix(self, matrix_a: ReadableMatrix, matrix_b: ReadableMatrix) -> DenseMatrix:
        """Subtract matrix_b from matrix_a element-wise"""
        self._check_same_shape(matrix_a, matrix_b)
        result = self.create_matrix(matrix_a.get_row_count(), matrix_a.get_column_count())
        for row in range(matrix_a.get_row_count()):
            for col in range(matrix_a.get_column_count()):
                value_a = matrix_a.get_value_at(row, col)
                value_b = matrix_b.get_value_at(row, col)
                result.set_value_at(row, col, value_a - value_b)
        return result

    def multiply_scalar(self, matrix: ReadableMatrix, value) -> DenseMatrix:
        """Multiply all matrix elements by scalar value"""
        factor = RationalMath.to_fraction(value)
        result = self.create_matrix(matrix.get_row_count(), matrix.get_column_count())
        for row in range(matrix.get_row_count()):
            for col in range(matrix.get_column_count()):
                result.set_value_at(row, col, matrix.get_value_at(row, col) * factor)
        return result

    def multiply_matrix(self, matrix_a: ReadableMatrix, matrix_b: ReadableMatrix) -> DenseMatrix:
        """Multiply two matrices (matrix multiplication)"""
        if matrix_a.get_column_count() != matrix_b.get_row_count():
            raise ShapeMismatchError(
                f"Matrix dimensions incompatible for multiplication: {shape_str(matrix_a)} * {shape_str(matrix_b)}")

        result = self.create_matrix(matrix_a.get_row_count(), matrix_b.get_column_count())

        # Standard matrix multiplication: C[i,j] = sum(A[i,k] * B[k,j])
        for row in range(matrix_a.get_row_count()):
            for col in range(matrix_b.get_column_count()):
                sum_value = ZERO
                for k in range(matrix_a.get_column_count()):
                    sum_value += matrix_a.get_value_at(row, k) * matrix_b.get_value_at(k, col)
                result.set_value_at(row, col, sum_value)

        return result

    def augment(self, matrix_a: ReadableMatrix, matrix_b: ReadableMatrix) -> DenseMatrix:
        """Concatenate two matrices horizontally: [A | B]"""
        if matrix_a.get_row_count() != matrix_b.get_row_count():
            raise ShapeMismatchError(
                f"Row counts don't match for augmentation: {shape_str(matrix_a)} | {shape_str(matrix_b)}")
        rows = matrix_a.get_row_count()
        cols_a = matrix_a.get_column_count()
        result = self.create_matrix(rows, cols_a + matrix_b.get_column_count())
        for row in range(rows):
            for col in range(cols_a):
                result.set_value_at(row, col, matrix_a.get_value_at(row, col))
            for col in range(matrix_b.get_column_count()):
                result.set_value_at(row, cols_a + col, matrix_b.get_value_at(row, col))
        return result

    # Derived operations
    def submatrix(self, matrix: ReadableMatrix, row: int, col: int) -> DenseMatrix:
        """
        Return the matrix without the given row and column.

        Args:
            matrix: Parent matrix with at least one row and one column
            row: Row to remove
            col: Column to remove

        Returns:
            (rows-1) x (columns-1) matrix, 0x0 for a 1x1 parent

        Raises:
            EmptyMatrixError: If the parent has no rows or no columns
            IndexOutOfBoundsError: If row or col lies outside the parent
        """
        rows = matrix.get_row_count()
        cols = matrix.get_column_count()
        if rows == 0 or cols == 0:
            raise EmptyMatrixError(f"Cannot take a submatrix of an empty {rows}x{cols} matrix")
        if not 0 <= row < rows or not 0 <= col < cols:
            raise IndexOutOfBoundsError(f"Cannot remove row {row} and column {col} from a {rows}x{cols} matrix")

        result = self.create_matrix(rows - 1, cols - 1)
        for i in range(rows - 1):
            src_row = i + 1 if i >= row else i
            for j in range(cols - 1):
                src_col = j + 1 if j >= col else j
                result.set_value_at(i, j, matrix.get_value_at(src_row, src_col))
        return result

    def determinant(self, matrix: ReadableMatrix, max_size: Optional[int] = DETERMINANT_MAX_SIZE) -> Fraction:
        """
        Compute the determinant by recursive cofactor expansion.

        The expansion runs along row index COFACTOR_ROW (the second row) with
        sign (-1)^(1+j). Cost is O(n!), so matrices larger than max_size are
        refused.

        Args:
            matrix: Square, non-empty matrix
            max_size: Largest accepted dimension, None for no limit

        Returns:
            The determinant as an exact Fraction

        Raises:
            NotSquareError: If the matrix is not square
            EmptyMatrixError: If the matrix has no rows
            MatrixTooLargeError: If the dimension exceeds max_size
        """
        n = matrix.get_row_count()
        if n != matrix.get_column_count():
            raise NotSquareError(f"Matrix must be square for the determinant: {shape_str(matrix)}")
        if n == 0:
            raise EmptyMatrixError("Matrix must not be empty for the determinant")
        if max_size is not None and n > max_size:
            raise MatrixTooLargeError(
                f"Cofactor expansion of a {n}x{n} matrix exceeds the size limit of {max_size}")
        limit = DETERMINANT_MAX_SIZE if max_size is None else max_size
        if n >= min(limit, DETERMINANT_MAX_SIZE - 1):
            LOG.warning(f"Cofactor expansion of a {n}x{n} matrix, cost grows factorially.")
        else:
            LOG.debug(f"Determinant of {n}x{n} matrix by cofactor expansion.")
        return self._cofactor_expansion(matrix)

    def _cofactor_expansion(self, matrix: ReadableMatrix) -> Fraction:
        n = matrix.get_row_count()
        if n == 1:
            return matrix.get_value_at(0, 0)

        det = ZERO
        for j in range(n):
            value = matrix.get_value_at(COFACTOR_ROW, j)
            if RationalMath.is_zero(value):
                continue
            sign = 1 if (COFACTOR_ROW + j) % 2 == 0 else -1
            det += sign * value * self._cofactor_expansion(self.submatrix(matrix, COFACTOR_ROW, j))
        return RationalMath.normalize_zero(det)

    def invert(self, matrix: ReadableMatrix) -> DenseMatrix:
        """
        Compute the inverse of a square matrix from the RREF of [A | I].

        Invertibility is not checked: for a singular matrix the left block
        of the RREF is not the identity and the returned block is meaningless.
        Use is_inverse() or is_linearly_independent() to verify.

        Args:
            matrix: Square matrix to invert

        Returns:
            The right n x n block of RREF([A | I])

        Raises:
            NotSquareError: If matrix is not square
        """
        n = matrix.get_row_count()
        if n != matrix.get_column_count():
            raise NotSquareError(f"Matrix must be square for inversion: {shape_str(matrix)}")

        augmented = self.augment(matrix, self.identity(n))
        rank = len(self.get_gauss().row_echelon(augmented))
        LOG.debug(f"Inverse of {n}x{n} matrix: augmented RREF has rank {rank}")
        return augmented.sub_matrix(0, n, n, 2 * n)

    def is_inverse(self, matrix: ReadableMatrix, candidate: ReadableMatrix) -> bool:
        """
        Check whether candidate is the inverse of matrix: A * B == I exactly.

        Returns False (instead of raising) for non-square or mismatched shapes.
        """
        n = matrix.get_row_count()
        if matrix.shape != (n, n) or candidate.shape != (n, n):
            return False
        return self.multiply_matrix(matrix, candidate) == self.identity(n)

    def is_linearly_independent(self, matrix: ReadableMatrix) -> bool:
        """
        Determine whether the column vectors of the matrix are linearly independent.

        More columns than rows means dependent. Otherwise the leading
        columns x columns block of the RREF must be the identity.
        A square matrix therefore needs a full set of pivots: a singular one such
        as [[1, 0], [0, 0]] is dependent even though its RREF has no nonzero
        off-diagonal entries.
        """
        rows = matrix.get_row_count()
        cols = matrix.get_column_count()

        # more column vectors than equations means linearly dependent
        if cols > rows:
            return False

        LOG.debug(f"Independence test of {cols} vectors in {rows} dimensions.")
        rref = self.get_gauss().rref(matrix)
        for i in range(cols):
            for j in range(cols):
                expected = ONE if i == j else ZERO
                if rref.get_value_at(i, j) != expected:
                    return False
        return True

    def column_space_basis(self, matrix: ReadableMatrix) -> DenseMatrix:
        """Columns of the matrix at the pivot columns of its RREF, as a matrix"""
        pivot_cols = self.get_gauss().pivot_columns(matrix)
        rows = matrix.get_row_count()
        result = self.create_matrix(rows, len(pivot_cols))
        for k, col in enumerate(pivot_cols):
            for row in range(rows):
                result.set_value_at(row, k, matrix.get_value_at(row, col))
        return result

    def row_space(self, matrix: ReadableMatrix) -> DenseMatrix:
        """Row vectors of the matrix as columns (the transpose)"""
        return self.transpose(matrix)
