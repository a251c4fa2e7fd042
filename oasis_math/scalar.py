################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""
Scalar element type and shared numeric helpers

Every vector and matrix stores its elements as ``Scalar.DTYPE``. The algebra
routes scalar arithmetic and epsilon comparisons through ``Scalar`` so the
element representation is defined in one place.
"""

from __future__ import annotations

import math
from typing import Iterable

import numpy as np
from numpy.typing import NDArray


class Scalar:
    """Arithmetic on the library element type."""

    DTYPE: type[np.float64] = np.float64

    # 1e-12 is the default threshold for near-zero lengths and determinants
    EPS: float = 1e-12

    @staticmethod
    def zero() -> float:
        return 0.0

    @staticmethod
    def one() -> float:
        return 1.0

    @staticmethod
    def from_value(x: float) -> float:
        """Coerce a real number to the element type."""
        return float(Scalar.DTYPE(x))

    @staticmethod
    def add(a: float, b: float) -> float:
        return a + b

    @staticmethod
    def sub(a: float, b: float) -> float:
        return a - b

    @staticmethod
    def mul(a: float, b: float) -> float:
        return a * b

    @staticmethod
    def div(a: float, b: float) -> float:
        """Divide with IEEE semantics, so division by zero yields inf or nan."""
        with np.errstate(divide="ignore", invalid="ignore"):
            return float(np.divide(Scalar.DTYPE(a), Scalar.DTYPE(b)))

    @staticmethod
    def sqrt(x: float) -> float:
        return math.sqrt(x)

    @staticmethod
    def hypot(*values: float) -> float:
        """Return the Euclidean norm of ``values`` without intermediate overflow."""
        return math.hypot(*values)

    @staticmethod
    def is_near_zero(x: float, eps: float = EPS) -> bool:
        """Return True when ``|x|`` is below ``eps``."""
        return abs(x) < eps

    @staticmethod
    def is_valid(x: float) -> bool:
        """Return True when ``x`` is neither NaN nor infinite."""
        return math.isfinite(x)

    @staticmethod
    def array(values: Iterable[float]) -> NDArray[np.float64]:
        """Return a new one-dimensional array of elements."""
        return np.fromiter(values, dtype=Scalar.DTYPE)


def is_valid(x: float) -> bool:
    """Return True when ``x`` is finite."""
    return Scalar.is_valid(x)


def sign(x: float) -> float:
    """Return 1.0 for non-negative values and -1.0 otherwise."""
    return 1.0 if x >= 0.0 else -1.0


def is_power_of_two(n: int) -> bool:
    """Return True when ``n`` is a positive power of two."""
    return n > 0 and (n & (n - 1)) == 0


def next_power_of_two(n: int) -> int:
    """Return the smallest power of two strictly greater than ``n``.

    Args:
        n: Non-negative integer below 2**31

    Returns:
        Next power of two, e.g. 1 -> 2, 2 -> 4, 5 -> 8

    Raises:
        ValueError: If ``n`` is negative or not below 2**31
    """
    if n < 0:
        raise ValueError("n must be non-negative")
    if n >= 2**31:
        raise ValueError("n must be below 2**31")
    r: int = n
    r |= r >> 1
    r |= r >> 2
    r |= r >> 4
    r |= r >> 8
    r |= r >> 16
    return r + 1
