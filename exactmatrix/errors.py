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
"""Exceptions raised by matrix construction and matrix operations"""

__all__ = [
    'MatrixError', 'ShapeMismatchError', 'NotSquareError', 'EmptyMatrixError', 'IndexOutOfBoundsError',
    'InvalidShapeError', 'MatrixTooLargeError'
]


class MatrixError(Exception):
    """Base class of all errors raised by exactmatrix"""
    pass


class ShapeMismatchError(MatrixError, ValueError):
    """Operand shapes are incompatible for the requested operation"""
    pass


class NotSquareError(MatrixError, ValueError):
    """The operation requires a square matrix"""
    pass


class EmptyMatrixError(MatrixError, ValueError):
    """The operation requires at least one row (or column)"""
    pass


class IndexOutOfBoundsError(MatrixError, IndexError):
    """Element access outside the declared shape"""
    pass


class InvalidShapeError(MatrixError, ValueError):
    """Construction from non-rectangular or otherwise malformed data"""
    pass


class MatrixTooLargeError(MatrixError, ValueError):
    """The matrix exceeds the size limit of an operation with factorial cost"""
    pass


def shape_str(matrix) -> str:
    """Format the shape of a matrix as 'rows x columns' for error messages"""
    return f"{matrix.get_row_count()}x{matrix.get_column_count()}"
