################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Tests for Matrix3."""

from __future__ import annotations

import numpy as np
import pytest

from oasis_math.errors import SingularMatrixError
from oasis_math.matrix import Matrix3
from oasis_math.vector import Vector2
from oasis_math.vector import Vector3


def _columns() -> Matrix3:
    return Matrix3.from_columns([1.0, 2.0, 3.0], [4.0, 5.0, 6.0], [7.0, 8.0, 9.0])


def test_from_columns() -> None:
    """Checks columns land in logical columns."""
    m: Matrix3 = _columns()
    assert m.column(0) == Vector3(1.0, 2.0, 3.0)
    assert m.row(0) == Vector3(1.0, 4.0, 7.0)


def test_transform_point() -> None:
    """Checks affine 2D points and plain 3D vectors."""
    m: Matrix3 = _columns()
    assert m.transform_point(Vector2(1.0, 2.0)) == Vector2(16.0, 20.0)
    assert m.transform_point(Vector3(1.0, 2.0, 3.0)) == Vector3(30.0, 36.0, 42.0)
    assert m.multiply_vector(Vector3(1.0, 2.0, 3.0)) == Vector3(30.0, 36.0, 42.0)


def test_determinant() -> None:
    """Checks the cofactor expansion against numpy."""
    m: Matrix3 = Matrix3.make([2.0, 0.0, 1.0], [1.0, 3.0, 2.0], [1.0, 1.0, 2.0])
    assert m.determinant() == 6.0
    assert np.isclose(m.determinant(), np.linalg.det(m.to_numpy()))
    assert Matrix3.identity().determinant() == 1.0


def test_inverse() -> None:
    """Checks the adjugate inverse against numpy."""
    m: Matrix3 = Matrix3.make([2.0, 0.0, 1.0], [1.0, 3.0, 2.0], [1.0, 1.0, 2.0])
    inv: Matrix3 = m.inverse()
    assert np.allclose(inv.to_numpy(), np.linalg.inv(m.to_numpy()))
    assert (m * inv).almost_equal(Matrix3.identity())
    assert (inv * m).almost_equal(Matrix3.identity())


def test_singular_inverse_raises() -> None:
    """Checks rank-deficient columns cannot be inverted."""
    with pytest.raises(SingularMatrixError):
        _columns().inverse()


def test_adjugate() -> None:
    """Checks M * adj(M) == det(M) * I."""
    m: Matrix3 = Matrix3.make([2.0, 0.0, 1.0], [1.0, 3.0, 2.0], [1.0, 1.0, 2.0])
    assert (m * m.adjugate()).almost_equal(Matrix3.identity().scale(m.determinant()))
    assert m.cofactor(0, 1) == -(1.0 * 2.0 - 2.0 * 1.0)


def test_multiply_matches_numpy() -> None:
    """Checks the product follows sum_k a(i, k) * b(k, j)."""
    a: Matrix3 = _columns()
    b: Matrix3 = Matrix3.make([2.0, 0.0, 1.0], [1.0, 3.0, 2.0], [1.0, 1.0, 2.0])
    assert np.allclose((a * b).to_numpy(), a.to_numpy() @ b.to_numpy())
