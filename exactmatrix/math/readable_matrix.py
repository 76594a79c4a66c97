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
Readable and writable matrix interfaces.

Matrices can be read through ReadableMatrix; the elementary row operations
used by Gaussian elimination are only available on WritableMatrix.
"""

from abc import ABC, abstractmethod
from fractions import Fraction
from typing import List, Tuple


class ReadableMatrix(ABC):
    """
    Base interface for readable matrices of exact rational values.

    From readable matrices, data can be read, but not written to.
    """

    @abstractmethod
    def clone(self) -> 'WritableMatrix':
        """Create a deep copy of this matrix"""
        pass

    @abstractmethod
    def get_row_count(self) -> int:
        """Get number of rows in the matrix"""
        pass

    @abstractmethod
    def get_column_count(self) -> int:
        """Get number of columns in the matrix"""
        pass

    @abstractmethod
    def get_value_at(self, row: int, col: int) -> Fraction:
        """Get the value at the specified position"""
        pass

    @abstractmethod
    def transpose(self) -> 'ReadableMatrix':
        """Return transposed version of this matrix"""
        pass

    @property
    def shape(self) -> Tuple[int, int]:
        return self.get_row_count(), self.get_column_count()

    def get_row(self, row: int) -> List[Fraction]:
        """Get the specified row as a list of values"""
        return [self.get_value_at(row, col) for col in range(self.get_column_count())]

    def get_rows(self) -> List[List[Fraction]]:
        """Get all rows as a 2D list of values"""
        return [self.get_row(row) for row in range(self.get_row_count())]


class WritableMatrix(ReadableMatrix):
    """Readable matrix that also supports element writes and row operations"""

    @abstractmethod
    def set_value_at(self, row: int, col: int, value) -> None:
        """Set the value at the specified position"""
        pass

    @abstractmethod
    def swap_rows(self, row_a: int, row_b: int) -> None:
        """Swap two rows"""
        pass

    @abstractmethod
    def divide_row(self, row: int, divisor: Fraction) -> None:
        """Divide every entry of a row by divisor"""
        pass

    @abstractmethod
    def subtract_scaled_row(self, src_row: int, factor: Fraction, dst_row: int) -> None:
        """dst_row -= factor * src_row"""
        pass

    @abstractmethod
    def normalize_zeros(self) -> None:
        """Store every zero-valued entry as the canonical zero"""
        pass
