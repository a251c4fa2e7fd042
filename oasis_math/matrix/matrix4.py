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
4x4 matrix and homogeneous transform builders

Transforms follow the column-vector convention ``p' = M @ p`` in a
right-handed frame. Rotations are counter-clockwise for positive angles when
looking down the rotation axis toward the origin. Projections map view space
to OpenGL clip space, with depth in [-1, 1] and the camera looking down -Z.
"""

from __future__ import annotations

import math
from typing import ClassVar

from oasis_math.matrix.matrix_base import MatrixBase
from oasis_math.matrix.matrix_base import det3
from oasis_math.scalar import Scalar
from oasis_math.vector.vector3 import Vector3
from oasis_math.vector.vector4 import Vector4
from oasis_math.vector.vector_base import VectorBase


class Matrix4(MatrixBase):
    """4x4 matrix operating on Vector4 columns.

    ``transform_point()`` also accepts a Vector3, treated as the affine point
    (x, y, z, 1).
    """

    __slots__ = ()

    ORDER: ClassVar[int] = 4
    VECTOR: ClassVar[type[VectorBase]] = Vector4
    POINT: ClassVar[type[VectorBase] | None] = Vector3

    def determinant(self) -> float:
        """Return the determinant by expansion into four 3x3 minors."""
        total: float = Scalar.zero()
        for col in range(self.ORDER):
            term: float = Scalar.mul(self.element(0, col), det3(self._minor(0, col)))
            total = Scalar.add(total, term) if col % 2 == 0 else Scalar.sub(total, term)
        return total

    def _minor_determinant(self, row: int, col: int) -> float:
        return det3(self._minor(row, col))

    #
    # Transform builders
    #

    @classmethod
    def translation(cls, x: float, y: float, z: float) -> Matrix4:
        """Return a matrix translating points by (x, y, z)."""
        mat: Matrix4 = cls.identity()
        mat.set_element(0, 3, x)
        mat.set_element(1, 3, y)
        mat.set_element(2, 3, z)
        return mat

    @classmethod
    def scaling(cls, x: float, y: float, z: float) -> Matrix4:
        """Return a matrix scaling each axis independently."""
        mat: Matrix4 = cls.identity()
        mat.set_element(0, 0, x)
        mat.set_element(1, 1, y)
        mat.set_element(2, 2, z)
        return mat

    @classmethod
    def rotation_x(cls, angle: float) -> Matrix4:
        """Return a rotation about +X by ``angle`` radians."""
        c: float = math.cos(angle)
        s: float = math.sin(angle)
        mat: Matrix4 = cls.identity()
        mat.set_element(1, 1, c)
        mat.set_element(1, 2, -s)
        mat.set_element(2, 1, s)
        mat.set_element(2, 2, c)
        return mat

    @classmethod
    def rotation_y(cls, angle: float) -> Matrix4:
        """Return a rotation about +Y by ``angle`` radians."""
        c: float = math.cos(angle)
        s: float = math.sin(angle)
        mat: Matrix4 = cls.identity()
        mat.set_element(0, 0, c)
        mat.set_element(0, 2, s)
        mat.set_element(2, 0, -s)
        mat.set_element(2, 2, c)
        return mat

    @classmethod
    def rotation_z(cls, angle: float) -> Matrix4:
        """Return a rotation about +Z by ``angle`` radians."""
        c: float = math.cos(angle)
        s: float = math.sin(angle)
        mat: Matrix4 = cls.identity()
        mat.set_element(0, 0, c)
        mat.set_element(0, 1, -s)
        mat.set_element(1, 0, s)
        mat.set_element(1, 1, c)
        return mat

    @classmethod
    def orthographic(
        cls,
        left: float,
        right: float,
        bottom: float,
        top: float,
        near: float,
        far: float,
    ) -> Matrix4:
        """Return an orthographic projection of the given view box.

        Raises:
            ValueError: If any extent of the box is zero
        """
        width: float = right - left
        height: float = top - bottom
        depth: float = far - near
        if width == 0.0 or height == 0.0 or depth == 0.0:
            raise ValueError("orthographic view box must have non-zero extents")

        mat: Matrix4 = cls.identity()
        mat.set_element(0, 0, 2.0 / width)
        mat.set_element(1, 1, 2.0 / height)
        mat.set_element(2, 2, -2.0 / depth)
        mat.set_element(0, 3, -(right + left) / width)
        mat.set_element(1, 3, -(top + bottom) / height)
        mat.set_element(2, 3, -(far + near) / depth)
        return mat

    @classmethod
    def perspective(
        cls,
        fov_deg: float,
        aspect_ratio: float,
        near: float,
        far: float,
    ) -> Matrix4:
        """Return a perspective projection.

        Args:
            fov_deg: Vertical field of view in degrees, in (0, 180)
            aspect_ratio: Viewport width divided by height
            near: Distance to the near clip plane
            far: Distance to the far clip plane

        Raises:
            ValueError: If the parameters do not describe a valid frustum
        """
        if not 0.0 < fov_deg < 180.0:
            raise ValueError("fov_deg must be in (0, 180)")
        if aspect_ratio <= 0.0:
            raise ValueError("aspect_ratio must be positive")
        if near == far:
            raise ValueError("near and far must differ")

        half_fov: float = math.radians(fov_deg / 2.0)
        cotangent: float = math.cos(half_fov) / math.sin(half_fov)
        depth: float = far - near

        mat: Matrix4 = cls.zero()
        mat.set_element(0, 0, cotangent / aspect_ratio)
        mat.set_element(1, 1, cotangent)
        mat.set_element(2, 2, -(far + near) / depth)
        mat.set_element(2, 3, -2.0 * near * far / depth)
        mat.set_element(3, 2, -1.0)
        return mat

    @classmethod
    def look_at(cls, position: Vector3, target: Vector3, up: Vector3) -> Matrix4:
        """Return the camera-to-world transform of a camera at ``position``.

        The columns are the camera basis (right, up, -forward) and the
        position, so the camera looks down its local -Z axis toward
        ``target``. Invert the result to obtain a view matrix.

        Raises:
            DegenerateVectorError: If ``position`` equals ``target`` or ``up``
                is parallel to the viewing direction
        """
        forward: Vector3 = target.sub(position).normalize()
        right: Vector3 = forward.cross(up).normalize()
        camera_up: Vector3 = right.cross(forward)

        return cls.from_columns(
            Vector4.from_vector3(right),
            Vector4.from_vector3(camera_up),
            Vector4.from_vector3(forward.negate()),
            Vector4.from_vector3(position, 1.0),
        )
