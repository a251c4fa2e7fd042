################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Tests for Vector2."""

from __future__ import annotations

import math

import pytest

from oasis_math.errors import DegenerateVectorError
from oasis_math.vector import Vector2
from oasis_math.vector import Vector3


def test_construction() -> None:
    """Checks constructors and component access."""
    v: Vector2 = Vector2(1.0, 2.0)
    assert (v.x, v.y) == (1.0, 2.0)
    assert Vector2() == Vector2(0.0, 0.0)
    assert Vector2.zero() == Vector2(0.0, 0.0)
    assert Vector2.one() == Vector2(1.0, 1.0)
    assert Vector2.make(3.0, 4.0) == Vector2(3.0, 4.0)
    assert Vector2.from_iterable([5, 6]) == Vector2(5.0, 6.0)
    assert Vector2.from_vector3(Vector3(1.0, 2.0, 3.0)) == Vector2(1.0, 2.0)


def test_wrong_component_count() -> None:
    """Checks constructors reject the wrong number of components."""
    with pytest.raises(ValueError):
        Vector2(1.0)
    with pytest.raises(ValueError):
        Vector2.make(1.0, 2.0, 3.0)
    with pytest.raises(ValueError):
        Vector2.from_iterable([1.0])


def test_cross_is_scalar() -> None:
    """Checks the 2D cross product returns the z component."""
    assert Vector2(1.0, 0.0).cross(Vector2(0.0, 1.0)) == 1.0
    assert Vector2(0.0, 1.0).cross(Vector2(1.0, 0.0)) == -1.0
    assert Vector2(2.0, 3.0).cross(Vector2(4.0, 6.0)) == 0.0


def test_cross_with_scalar() -> None:
    """Checks crossing with a scalar z-axis vector."""
    v: Vector2 = Vector2(2.0, 3.0)
    assert Vector2.cross_scalar(2.0, v) == Vector2(-6.0, 4.0)
    assert Vector2.cross_vector(v, 2.0) == Vector2(6.0, -4.0)


def test_perpendicular() -> None:
    """Checks the quarter-turn rotation."""
    v: Vector2 = Vector2(3.0, 4.0)
    perp: Vector2 = v.perpendicular()
    assert perp == Vector2(-4.0, 3.0)
    assert v.dot(perp) == 0.0


def test_normalize() -> None:
    """Checks normalize returns a unit vector."""
    unit: Vector2 = Vector2(3.0, 4.0).normalize()
    assert unit.almost_equal(Vector2(0.6, 0.8))
    assert math.isclose(unit.length(), 1.0)
    with pytest.raises(DegenerateVectorError):
        Vector2().normalize()


def test_str() -> None:
    """Checks the display format."""
    assert str(Vector2(1.0, -2.5)) == "<1.0  -2.5>"
    assert repr(Vector2(1.0, -2.5)) == "Vector2(1.0, -2.5)"
