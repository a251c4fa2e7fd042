################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Three-component vector."""

from __future__ import annotations

from typing import TYPE_CHECKING
from typing import ClassVar

from oasis_math.scalar import Scalar
from oasis_math.vector.vector_base import VectorBase
from oasis_math.vector.vector_base import component


if TYPE_CHECKING:
    from oasis_math.vector.vector2 import Vector2
    from oasis_math.vector.vector4 import Vector4


class Vector3(VectorBase):
    """Vector with components (x, y, z)."""

    __slots__ = ()

    ORDER: ClassVar[int] = 3

    z = component(2, "Third component")

    @classmethod
    def right(cls) -> Vector3:
        return cls(1.0, 0.0, 0.0)

    @classmethod
    def up(cls) -> Vector3:
        return cls(0.0, 1.0, 0.0)

    @classmethod
    def forward(cls) -> Vector3:
        """Return the forward direction, -Z in a right-handed frame."""
        return cls(0.0, 0.0, -1.0)

    @classmethod
    def from_vector2(cls, v: Vector2) -> Vector3:
        """Return (v.x, v.y, 0)."""
        return cls(v.x, v.y, 0.0)

    @classmethod
    def from_vector4(cls, v: Vector4) -> Vector3:
        """Return (v.x, v.y, v.z), dropping w."""
        return cls(v.x, v.y, v.z)

    def cross(self, other: Vector3) -> Vector3:
        """Return the cross product ``self x other``.

        The result is orthogonal to both inputs. Parallel inputs, including a
        vector crossed with itself, give the zero vector.
        """
        if not isinstance(other, Vector3):
            raise TypeError(f"cross requires a Vector3, got {type(other).__name__}")
        ax: float = self.x
        ay: float = self.y
        az: float = self.z
        bx: float = other.x
        by: float = other.y
        bz: float = other.z
        return Vector3(
            Scalar.sub(Scalar.mul(ay, bz), Scalar.mul(az, by)),
            Scalar.sub(Scalar.mul(az, bx), Scalar.mul(ax, bz)),
            Scalar.sub(Scalar.mul(ax, by), Scalar.mul(ay, bx)),
        )
