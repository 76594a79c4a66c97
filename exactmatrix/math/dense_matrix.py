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
DenseMatrix - the concrete matrix of exact rational values.

The matrix stores its entries as fractions.Fraction in a flat list in
row-major order. Every instance owns its storage exclusively; copies are deep.
"""

from fractions import Fraction
from typing import Sequence

import numpy as np
import sympy

from ..errors import IndexOutOfBoundsError, InvalidShapeError
from .rational_math import RationalMath, ZERO
from .readable_matrix import ReadableMatrix, WritableMatrix


class DenseMatrix(WritableMatrix):
    """
    Dense rational matrix.

    Supported signatures:
    - DenseMatrix(rows, cols) - zero matrix
    - DenseMatrix(readable_matrix) - copy constructor
    - DenseMatrix(data) - from a 2D list/tuple of rows or a 2D numpy array
    """

    def __init__(self, *args):
        if len(args) == 2 and isinstance(args[0], int) and isinstance(args[1], int):
            self._init_zero_matrix(args[0], args[1])
        elif len(args) == 1 and isinstance(args[0], ReadableMatrix):
            self._init_from_readable_matrix(args[0])
        elif len(args) == 1 and isinstance(args[0], np.ndarray):
            self._init_from_numpy(args[0])
        elif len(args) == 1 and isinstance(args[0], (list, tuple)):
            self._init_from_2d_data(args[0])
        else:
            raise InvalidShapeError(f"Invalid constructor arguments: {args}")

    def _init_zero_matrix(self, row_count: int, col_count: int):
        """Initialize as zero matrix with given dimensions"""
        if row_count < 0:
            raise InvalidShapeError(f"negative row count: {row_count}")
        if col_count < 0:
            raise InvalidShapeError(f"negative column count: {col_count}")
        self._row_count = row_count
        self._column_count = col_count
        self._values = [ZERO] * (row_count * col_count)

    def _init_from_readable_matrix(self, mx: ReadableMatrix):
        """Initialize from readable matrix (copy constructor)"""
        self._init_zero_matrix(mx.get_row_count(), mx.get_column_count())
        if isinstance(mx, DenseMatrix):
            # Fractions are immutable, copying the list is a deep copy
            self._values = list(mx._values)
            return
        for row in range(mx.get_row_count()):
            for col in range(mx.get_column_count()):
                self.set_value_at(row, col, mx.get_value_at(row, col))

    def _init_from_2d_data(self, data: Sequence[Sequence]):
        """Initialize from a list of rows, rejecting ragged input"""
        rows = len(data)
        for idx, row in enumerate(data):
            if not isinstance(row, (list, tuple, np.ndarray)):
                raise InvalidShapeError(f"row {idx} is not a sequence: {row!r}")
        cols = len(data[0]) if rows > 0 else 0
        for idx, row in enumerate(data):
            if len(row) != cols:
                raise InvalidShapeError(f"row {idx} has {len(row)} entries, expected {cols}")

        self._init_zero_matrix(rows, cols)
        self._values = [RationalMath.to_fraction(value) for row in data for value in row]

    def _init_from_numpy(self, arr: np.ndarray):
        """Initialize from a 2D numpy array"""
        if arr.ndim != 2:
            raise InvalidShapeError(f"expected a 2D array, got {arr.ndim} dimension(s)")
        self._init_zero_matrix(arr.shape[0], arr.shape[1])
        self._values = list(RationalMath.array_to_fractions(arr).flat)

    @classmethod
    def from_grid(cls, grid: Sequence[Sequence]) -> 'DenseMatrix':
        """
        Create a matrix from a 2D literal (list of rows).

        Args:
            grid: list or tuple of equally long rows, or a 2D numpy array

        Returns:
            A new matrix holding Fraction copies of the values

        Raises:
            InvalidShapeError: If grid is not a sequence of rows or rows are ragged
        """
        if not isinstance(grid, (list, tuple, np.ndarray)):
            raise InvalidShapeError(f"expected a sequence of rows, got {type(grid)}")
        return cls(grid)

    @classmethod
    def from_numpy(cls, arr: np.ndarray) -> 'DenseMatrix':
        """Create a matrix from a 2D numpy array"""
        return cls(np.asarray(arr))

    # Core interface methods
    def get_row_count(self) -> int:
        """Get number of rows"""
        return self._row_count

    def get_column_count(self) -> int:
        """Get number of columns"""
        return self._column_count

    def _index(self, row: int, col: int) -> int:
        if not 0 <= row < self._row_count or not 0 <= col < self._column_count:
            raise IndexOutOfBoundsError(
                f"index ({row}, {col}) out of bounds for {self._row_count}x{self._column_count} matrix")
        return row * self._column_count + col

    def get_value_at(self, row: int, col: int) -> Fraction:
        """Get value at specified position"""
        return self._values[self._index(row, col)]

    def set_value_at(self, row: int, col: int, value) -> None:
        """Set value at specified position, converting it to Fraction"""
        self._values[self._index(row, col)] = RationalMath.to_fraction(value)

    # Row operations
    def _check_row(self, row: int) -> None:
        if not 0 <= row < self._row_count:
            raise IndexOutOfBoundsError(f"row {row} out of bounds for {self._row_count} rows")

    def swap_rows(self, row_a: int, row_b: int) -> None:
        """Swap two rows"""
        self._check_row(row_a)
        self._check_row(row_b)
        if row_a == row_b:
            return
        cols = self._column_count
        a, b = row_a * cols, row_b * cols
        self._values[a:a + cols], self._values[b:b + cols] = self._values[b:b + cols], self._values[a:a + cols]

    def divide_row(self, row: int, divisor: Fraction) -> None:
        """Divide entire row by divisor"""
        self._check_row(row)
        start = row * self._column_count
        for idx in range(start, start + self._column_count):
            self._values[idx] = self._values[idx] / divisor

    def subtract_scaled_row(self, src_row: int, factor: Fraction, dst_row: int) -> None:
        """Subtract factor times the source row from the destination row"""
        self._check_row(src_row)
        self._check_row(dst_row)
        if factor == 0:
            return
        cols = self._column_count
        src, dst = src_row * cols, dst_row * cols
        for k in range(cols):
            self._values[dst + k] = self._values[dst + k] - factor * self._values[src + k]

    def normalize_zeros(self) -> None:
        """Store every zero-valued entry as the canonical zero"""
        self._values = [RationalMath.normalize_zero(value) for value in self._values]

    # Matrix operations
    def clone(self) -> 'DenseMatrix':
        """Create deep copy of this matrix"""
        return DenseMatrix(self)

    def transpose(self) -> 'DenseMatrix':
        """Return transposed matrix"""
        rows = self._row_count
        cols = self._column_count
        result = DenseMatrix(cols, rows)
        for row in range(rows):
            for col in range(cols):
                result._values[col * rows + row] = self._values[row * cols + col]
        return result

    def sub_matrix(self, row_start: int, row_end: int, col_start: int, col_end: int) -> 'DenseMatrix':
        """Extract the block [row_start:row_end, col_start:col_end] as a new matrix"""
        if row_end < row_start:
            raise IndexOutOfBoundsError("row_end < row_start")
        if col_end < col_start:
            raise IndexOutOfBoundsError("col_end < col_start")
        if row_start < 0 or col_start < 0:
            raise IndexOutOfBoundsError("negative start index")
        if row_end > self._row_count:
            raise IndexOutOfBoundsError("row_end > get_row_count()")
        if col_end > self._column_count:
            raise IndexOutOfBoundsError("col_end > get_column_count()")

        result = DenseMatrix(row_end - row_start, col_end - col_start)
        result._values = [
            self._values[row * self._column_count + col]
            for row in range(row_start, row_end)
            for col in range(col_start, col_end)
        ]
        return result

    # Conversions
    def to_numpy(self) -> np.ndarray:
        """Convert to a float numpy array (lossy)"""
        arr = np.empty((self._row_count, self._column_count), dtype=object)
        for idx, value in enumerate(self._values):
            arr.flat[idx] = value
        return RationalMath.fractions_to_floats(arr)

    def to_sympy(self) -> sympy.Matrix:
        """Convert to an exact sympy Matrix of Rationals"""
        return sympy.Matrix(self._row_count, self._column_count,
                            [RationalMath.to_sympy_rational(value) for value in self._values])

    # Comparison
    def __eq__(self, other) -> bool:
        if not isinstance(other, ReadableMatrix):
            return NotImplemented
        if self.shape != other.shape:
            return False
        if isinstance(other, DenseMatrix):
            return self._values == other._values
        return all(self.get_value_at(row, col) == other.get_value_at(row, col)
                   for row in range(self._row_count)
                   for col in range(self._column_count))

    __hash__ = None

    # String representation
    def __str__(self) -> str:
        """Single line string representation"""
        return self._matrix_to_string("{", " }", " [", "]", "", "", "", ", ")

    def __repr__(self) -> str:
        return f"DenseMatrix({self._row_count}x{self._column_count} {self})"

    def _matrix_to_string(self, prefix: str, postfix: str, row_prefix: str,
                          row_postfix: str, row_separator: str, col_prefix: str,
                          col_postfix: str, col_separator: str) -> str:
        """Internal string formatting method"""
        result = [prefix]

        for row in range(self._row_count):
            if row > 0:
                result.append(row_separator)
            result.append(row_prefix)

            for col in range(self._column_count):
                if col > 0:
                    result.append(col_separator)
                result.append(col_prefix)
                result.append(str(self._values[row * self._column_count + col]))
                result.append(col_postfix)

            result.append(row_postfix)

        result.append(postfix)
        return ''.join(result)
