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
"""Text rendering of matrices for display

Rounding only affects the rendered text, never the stored values.
"""

import sys
from decimal import Decimal

from exactmatrix.names import *
from exactmatrix.math import ReadableMatrix, RationalMath

__all__ = ['format_value', 'format_matrix', 'print_matrix']


def format_value(value, digits: int = DEFAULT_ROUND) -> str:
    """Render a single value rounded half-to-even to the given number of decimal places

    Trailing zeros are dropped, so 1/2 renders as '0.5' and 2 as '2'.
    """
    rounded = round(RationalMath.to_fraction(value), digits)
    if rounded.denominator == 1:
        return str(rounded.numerator)
    # rounded * 10**digits is an integer, the string constructor keeps every digit
    scaled = rounded * 10**digits
    text = format(Decimal(f"{scaled.numerator}E-{digits}"), 'f')
    return text.rstrip('0').rstrip('.')


def format_matrix(matrix: ReadableMatrix, **kwargs) -> str:
    """Render a matrix as text, one line per row

    Example:
        print(format_matrix(A, round=3, delimiter=' | '))

    Args:
        matrix (ReadableMatrix): The matrix to render.

        round (optional (int)): (Default: 2)
            Number of decimal places shown.

        delimiter (optional (str)): (Default: '\\t')
            Separator between the columns of a row. Every value is followed
            by the delimiter, including the last one of a row.

    Returns:
        (str):
        The rendered rows separated by line breaks.
    """
    allowed_keys = {ROUND, DELIMITER}
    for key in kwargs:
        if key not in allowed_keys:
            raise ValueError("Key " + key + " is not supported.")
    digits = kwargs.get(ROUND, DEFAULT_ROUND)
    delimiter = kwargs.get(DELIMITER, DEFAULT_DELIMITER)
    if not isinstance(digits, int):
        raise ValueError(f"round must be an integer, got {digits!r}")

    lines = []
    for row in range(matrix.get_row_count()):
        values = [format_value(matrix.get_value_at(row, col), digits) for col in range(matrix.get_column_count())]
        lines.append(''.join(value + delimiter for value in values))
    return '\n'.join(lines)


def print_matrix(matrix: ReadableMatrix, file=None, **kwargs) -> None:
    """Write format_matrix(matrix, **kwargs) followed by a blank line to file (default: stdout)"""
    if file is None:
        file = sys.stdout
    text = format_matrix(matrix, **kwargs)
    if text:
        file.write(text + '\n')
    file.write('\n')
