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
Gauss-Jordan elimination for exact rational matrices.

This module provides the single elimination engine of the package. It
reduces a matrix to reduced row echelon form (RREF) and derives rank, pivot
columns and nullspace from the result. Pivots are chosen column by column as
the first nonzero entry at or below the current row; there is no
magnitude-based pivoting since all arithmetic is exact.
"""

import logging
from typing import List, Tuple

from .dense_matrix import DenseMatrix
from .rational_math import RationalMath, ONE
from .readable_matrix import ReadableMatrix, WritableMatrix

LOG = logging.getLogger(__name__)


class Gauss:
    """
    Matrix operations based on Gaussian elimination for exact rational arithmetic.

    The public methods never modify their argument: they reduce a private
    working copy. row_echelon() is the in-place primitive they share.
    """

    _instance = None

    @classmethod
    def get_instance(cls) -> 'Gauss':
        """Get singleton instance"""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    # Core operations
    def rref(self, matrix: ReadableMatrix) -> DenseMatrix:
        """
        Compute the reduced row echelon form of the given matrix.

        Args:
            matrix: Input matrix of any shape

        Returns:
            A new matrix of the same shape in reduced row echelon form
        """
        return self.rref_with_pivots(matrix)[0]

    def rref_with_pivots(self, matrix: ReadableMatrix) -> Tuple[DenseMatrix, List[int]]:
        """
        Compute the reduced row echelon form and the pivot columns.

        Args:
            matrix: Input matrix of any shape

        Returns:
            Tuple of (rref, pivot_columns), pivot column i belonging to row i
        """
        working_matrix = DenseMatrix(matrix)
        pivots = self.row_echelon(working_matrix)
        return working_matrix, pivots

    def rank(self, matrix: ReadableMatrix) -> int:
        """Compute the rank of the given matrix"""
        return len(self.rref_with_pivots(matrix)[1])

    def nullity(self, matrix: ReadableMatrix) -> int:
        """
        Compute the nullity of the given matrix (dimension of nullspace).
        By the rank-nullity theorem: rank + nullity = number of columns.
        """
        return matrix.get_column_count() - self.rank(matrix)

    def pivot_columns(self, matrix: ReadableMatrix) -> List[int]:
        """Indices of the pivot (basic) columns, in increasing order"""
        return self.rref_with_pivots(matrix)[1]

    def nullspace(self, matrix: ReadableMatrix) -> DenseMatrix:
        """
        Compute a basis for the nullspace using the RREF.

        For every free (non-pivot) column f, the basis vector has a 1 at
        position f and -RREF[i, f] at the position of the i-th pivot column.

        Args:
            matrix: Input matrix

        Returns:
            Matrix whose columns form a basis for the nullspace (columns x nullity)
        """
        cols = matrix.get_column_count()
        rref, pivot_cols = self.rref_with_pivots(matrix)
        pivot_set = set(pivot_cols)
        free_cols = [c for c in range(cols) if c not in pivot_set]

        kernel = DenseMatrix(cols, len(free_cols))
        for k, free_col in enumerate(free_cols):
            kernel.set_value_at(free_col, k, ONE)
            for i, pivot_col in enumerate(pivot_cols):
                value = rref.get_value_at(i, free_col)
                if not RationalMath.is_zero(value):
                    kernel.set_value_at(pivot_col, k, -value)
        kernel.normalize_zeros()
        return kernel

    def row_echelon(self, matrix: WritableMatrix) -> List[int]:
        """
        Reduce the matrix to reduced row echelon form in place.

        Args:
            matrix: Matrix to reduce (modified in-place)

        Returns:
            The pivot columns found, pivot i sitting in row i
        """
        rows = matrix.get_row_count()
        cols = matrix.get_column_count()
        pivots = []

        if rows == 0 or cols == 0:
            return pivots

        lead = 0
        for row in range(rows):
            if lead >= cols:
                break
            pivot_row = self._find_pivot_row(matrix, row, lead)
            while pivot_row == -1:
                # no candidate in this column, it stays a free column
                lead += 1
                if lead == cols:
                    break
                pivot_row = self._find_pivot_row(matrix, row, lead)
            if pivot_row == -1:
                break

            matrix.swap_rows(pivot_row, row)

            pivot_value = matrix.get_value_at(row, lead)
            if pivot_value != ONE:
                matrix.divide_row(row, pivot_value)

            self._eliminate_column(matrix, row, lead)
            pivots.append(lead)
            lead += 1

        matrix.normalize_zeros()
        LOG.debug(f"RREF of {rows}x{cols} matrix: rank {len(pivots)}, pivot columns {pivots}")
        return pivots

    def _find_pivot_row(self, matrix: ReadableMatrix, start_row: int, col: int) -> int:
        """
        Find the pivot row in the given column: the first non-zero element.

        Returns:
            Row index of the pivot, or -1 if rows start_row.. are all zero in col
        """
        for row in range(start_row, matrix.get_row_count()):
            if not RationalMath.is_zero(matrix.get_value_at(row, col)):
                return row
        return -1

    def _eliminate_column(self, matrix: WritableMatrix, pivot_row: int, col: int):
        """Eliminate the column above and below the pivot"""
        for row in range(matrix.get_row_count()):
            if row == pivot_row:
                continue
            multiplier = matrix.get_value_at(row, col)
            if not RationalMath.is_zero(multiplier):
                matrix.subtract_scaled_row(pivot_row, multiplier, row)
