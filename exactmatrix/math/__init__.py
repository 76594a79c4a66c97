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
Mathematical infrastructure of the exactmatrix package

- Exact rational arithmetic with fractions.Fraction (RationalMath)
- Dense matrices of rational values
- Gauss-Jordan elimination (RREF) and the operations derived from it

All operations maintain exact precision using rational arithmetic.
"""

from .rational_math import RationalMath
from .readable_matrix import ReadableMatrix, WritableMatrix
from .dense_matrix import DenseMatrix
from .gauss import Gauss as GaussianElimination
from .matrix_operations import MatrixOperations

__all__ = [
    'RationalMath',
    'ReadableMatrix',
    'WritableMatrix',
    'DenseMatrix',
    'GaussianElimination',
    'MatrixOperations',
]
