################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Two-component vector."""

from __future__ import annotations

from typing import TYPE_CHECKING
from typing import ClassVar

from oasis_math.scalar import Scalar
from oasis_math.vector.vector_base import VectorBase


if TYPE_CHECKING:
    from oasis_math.vector.vector3 import Vector3


class Vector2(VectorBase):
    """Vector with components (x, y)."""

    __slots__ = ()

    ORDER: ClassVar[int] = 2

    @classmethod
    def from_vector3(cls, v: Vector3) -> Vector2:
        """Return (v.x, v.y), dropping z."""
        return cls(v.x, v.y)

    def cross(self, other: Vector2) -> float:
        """Return the z component of the 3D cross product of (x, y, 0) vectors."""
        if not isinstance(other, Vector2):
            raise TypeError(f"cross requires a Vector2, got {type(other).__name__}")
        return Scalar.sub(Scalar.mul(self.x, other.y), Scalar.mul(self.y, other.x))

    @staticmethod
    def cross_scalar(s: float, v: Vector2) -> Vector2:
        """Return ``s x v`` for a scalar z-axis vector ``s``: (-s*v.y, s*v.x)."""
        return Vector2(-s * v.y, s * v.x)

    @staticmethod
    def cross_vector(v: Vector2, s: float) -> Vector2:
        """Return ``v x s`` for a scalar z-axis vector ``s``: (s*v.y, -s*v.x)."""
        return Vector2(s * v.y, -s * v.x)

    def perpendicular(self) -> Vector2:
        """Return the vector rotated a quarter turn counter-clockwise."""
        return Vector2(-self.y, self.x)
