################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Tests for scalar helpers."""

from __future__ import annotations

import math

import numpy as np
import pytest

from oasis_math.scalar import Scalar
from oasis_math.scalar import is_power_of_two
from oasis_math.scalar import is_valid
from oasis_math.scalar import next_power_of_two
from oasis_math.scalar import sign


def test_scalar_arithmetic() -> None:
    """Checks the element arithmetic helpers."""
    assert Scalar.zero() == 0.0
    assert Scalar.one() == 1.0
    assert Scalar.add(1.5, 2.0) == 3.5
    assert Scalar.sub(1.5, 2.0) == -0.5
    assert Scalar.mul(1.5, 2.0) == 3.0
    assert Scalar.div(3.0, 2.0) == 1.5
    assert Scalar.sqrt(9.0) == 3.0
    assert isinstance(Scalar.from_value(3), float)


def test_div_by_zero_follows_ieee() -> None:
    """Checks division by zero yields inf or nan instead of raising."""
    with np.errstate(divide="ignore", invalid="ignore"):
        assert Scalar.div(1.0, 0.0) == math.inf
        assert Scalar.div(-1.0, 0.0) == -math.inf
        assert math.isnan(Scalar.div(0.0, 0.0))


def test_is_near_zero() -> None:
    """Checks the epsilon comparison is strict."""
    assert Scalar.is_near_zero(0.0)
    assert Scalar.is_near_zero(1e-13)
    assert not Scalar.is_near_zero(1e-12)
    assert Scalar.is_near_zero(0.5, eps=1.0)


def test_is_valid() -> None:
    """Checks finite detection."""
    assert is_valid(1.0)
    assert not is_valid(math.nan)
    assert not is_valid(math.inf)
    assert not Scalar.is_valid(-math.inf)


def test_sign() -> None:
    """Checks sign treats zero as positive."""
    assert sign(2.5) == 1.0
    assert sign(0.0) == 1.0
    assert sign(-0.1) == -1.0


def test_power_of_two() -> None:
    """Checks power-of-two helpers."""
    assert is_power_of_two(1)
    assert is_power_of_two(64)
    assert not is_power_of_two(0)
    assert not is_power_of_two(6)
    assert next_power_of_two(0) == 1
    assert next_power_of_two(1) == 2
    assert next_power_of_two(2) == 4
    assert next_power_of_two(5) == 8
    assert next_power_of_two(1000) == 1024
    with pytest.raises(ValueError):
        next_power_of_two(-1)


def test_next_power_of_two_upper_bound() -> None:
    """Checks inputs beyond the 32-bit range are rejected."""
    assert next_power_of_two(2**31 - 1) == 2**31
    with pytest.raises(ValueError):
        next_power_of_two(2**31)
    with pytest.raises(ValueError):
        next_power_of_two(2**40)


def test_hypot_does_not_overflow() -> None:
    """Checks the norm helper survives components whose squares overflow."""
    assert Scalar.hypot(3.0, 4.0) == 5.0
    assert math.isclose(Scalar.hypot(3e200, 4e200), 5e200)
    assert Scalar.hypot() == 0.0
