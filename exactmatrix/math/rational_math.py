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
Rational number mathematics for exact matrix arithmetic.

Matrix entries are stored as Python's fractions.Fraction. This module converts
the numeric types callers are likely to hand in (int, str, Decimal, float,
numpy scalars and arrays, sympy rationals) into Fractions and back.
"""

import math
from decimal import Decimal
from fractions import Fraction
from numbers import Integral
from typing import Union

import numpy as np
from sympy import Rational

# Type alias for numeric types that can be converted to Fraction
Numeric = Union[int, float, str, Decimal, Fraction, Rational, np.number]


class RationalMath:
    """Utility class for rational number operations."""

    # Commonly used constants
    ZERO = Fraction(0)
    ONE = Fraction(1)

    @staticmethod
    def to_fraction(value: Numeric) -> Fraction:
        """
        Convert a numeric value to a Fraction.

        Floats are taken at their shortest decimal representation, so 0.1
        becomes 1/10 rather than the binary approximation.

        Args:
            value: An int, float, str, Decimal, Fraction, numpy scalar or sympy.Rational

        Returns:
            Fraction representation of the value

        Raises:
            TypeError: If the value has no rational interpretation
            ValueError: If the value is NaN, infinite or an unparsable string
        """
        if isinstance(value, Fraction):
            return value
        elif isinstance(value, Rational):
            return Fraction(int(value.p), int(value.q))
        elif isinstance(value, np.integer):
            return Fraction(int(value))
        elif isinstance(value, Integral):
            return Fraction(int(value))
        elif isinstance(value, (float, np.floating)):
            value = float(value)
            if not math.isfinite(value):
                raise ValueError(f"Cannot convert non-finite value {value} to Fraction")
            return Fraction(repr(value))
        elif isinstance(value, Decimal):
            if not value.is_finite():
                raise ValueError(f"Cannot convert non-finite value {value} to Fraction")
            return Fraction(value)
        elif isinstance(value, str):
            return Fraction(value.strip())
        else:
            raise TypeError(f"Cannot convert {type(value)} to Fraction")

    @staticmethod
    def to_sympy_rational(value: Numeric) -> Rational:
        """
        Convert a Fraction (or any convertible value) to a sympy Rational.

        Args:
            value: A Fraction or numeric value

        Returns:
            sympy.Rational representation
        """
        if isinstance(value, Rational):
            return value
        frac = RationalMath.to_fraction(value)
        return Rational(frac.numerator, frac.denominator)

    @staticmethod
    def is_zero(value: Fraction) -> bool:
        """Exact zero test, no tolerance"""
        if isinstance(value, Fraction):
            return value.numerator == 0
        return value == 0

    @staticmethod
    def normalize_zero(value: Fraction) -> Fraction:
        """Return the canonical zero for any zero-valued entry, the value otherwise"""
        if RationalMath.is_zero(value):
            return RationalMath.ZERO
        return value

    @staticmethod
    def array_to_fractions(arr: np.ndarray) -> np.ndarray:
        """
        Convert a numpy array to an array of Fractions.

        Args:
            arr: Numpy array of numeric values

        Returns:
            Object array containing Fraction objects
        """
        result = np.empty(arr.shape, dtype=object)
        flat_result = result.flat

        for i, val in enumerate(arr.flat):
            flat_result[i] = RationalMath.to_fraction(val)

        return result

    @staticmethod
    def fractions_to_floats(arr: np.ndarray) -> np.ndarray:
        """
        Convert an array of Fractions to floats.

        Args:
            arr: Object array containing Fractions

        Returns:
            Float array
        """
        result = np.empty(arr.shape, dtype=float)
        flat_result = result.flat

        for i, val in enumerate(arr.flat):
            flat_result[i] = float(val)

        return result


# Module-level constants for compatibility
ZERO = RationalMath.ZERO
ONE = RationalMath.ONE
