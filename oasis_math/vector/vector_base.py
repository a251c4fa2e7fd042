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
Shared implementation for fixed-size vectors

Vectors are small mutable value objects. Components may be assigned in place,
but every arithmetic operation returns a new vector and leaves its operands
untouched. Use ``copy()`` when an independent value is needed.
"""

from __future__ import annotations

from typing import Any
from typing import ClassVar
from typing import Iterable
from typing import Iterator
from typing import TypeVar
from typing import Union

import numpy as np
from numpy.typing import NDArray

from oasis_math import layout_policy
from oasis_math.errors import DegenerateVectorError
from oasis_math.scalar import Scalar


_V = TypeVar("_V", bound="VectorBase")

Operand = Union["VectorBase", float, int]


def component(index: int, doc: str) -> property:
    """Return a read/write property bound to one vector slot."""

    def getter(self: VectorBase) -> float:
        return float(self._v[index])

    def setter(self: VectorBase, value: float) -> None:
        self._v[index] = Scalar.from_value(value)

    return property(getter, setter, doc=doc)


class VectorBase:
    """Vector of ``ORDER`` elements.

    Subclasses set ``ORDER`` and declare their named components with
    ``component()``.
    """

    __slots__ = ("_v",)

    # Keep numpy scalars from broadcasting over vectors in mixed operators
    __array_ufunc__ = None

    ORDER: ClassVar[int] = 0

    x = component(0, "First component")
    y = component(1, "Second component")

    def __init__(self, *components: float) -> None:
        """Create a vector from ``ORDER`` components, or the zero vector.

        Raises:
            ValueError: If a component count other than 0 or ``ORDER`` is given
        """
        self._v: NDArray[np.float64]
        if not components:
            self._v = np.zeros(self.ORDER, dtype=Scalar.DTYPE)
            return
        if len(components) != self.ORDER:
            raise ValueError(
                f"{type(self).__name__} requires {self.ORDER} components, "
                f"got {len(components)}"
            )
        self._v = Scalar.array(components)

    #
    # Construction
    #

    @classmethod
    def make(cls: type[_V], *components: float) -> _V:
        """Create a vector from explicit components."""
        if len(components) != cls.ORDER:
            raise ValueError(f"{cls.__name__}.make requires {cls.ORDER} components")
        return cls(*components)

    @classmethod
    def zero(cls: type[_V]) -> _V:
        """Return a vector with every component 0."""
        return cls()

    @classmethod
    def one(cls: type[_V]) -> _V:
        """Return a vector with every component 1."""
        return cls._from_array(np.ones(cls.ORDER, dtype=Scalar.DTYPE))

    @classmethod
    def from_iterable(cls: type[_V], values: Iterable[float]) -> _V:
        """Create a vector from an iterable of exactly ``ORDER`` values."""
        array: NDArray[np.float64] = Scalar.array(values)
        if array.shape != (cls.ORDER,):
            raise ValueError(f"{cls.__name__} requires {cls.ORDER} values")
        return cls._from_array(array)

    @classmethod
    def _from_array(cls: type[_V], array: NDArray[np.float64]) -> _V:
        vec: _V = cls.__new__(cls)
        vec._v = np.array(array, dtype=Scalar.DTYPE)
        return vec

    #
    # Component access
    #

    def __len__(self) -> int:
        return self.ORDER

    def __iter__(self) -> Iterator[float]:
        return (float(value) for value in self._v)

    def __getitem__(self, index: int) -> float:
        return float(self._v[self._check_index(index)])

    def __setitem__(self, index: int, value: float) -> None:
        self._v[self._check_index(index)] = Scalar.from_value(value)

    def _check_index(self, index: int) -> int:
        if not isinstance(index, (int, np.integer)) or isinstance(index, bool):
            raise TypeError(f"{type(self).__name__} indices must be integers")
        if index < 0 or index >= self.ORDER:
            raise IndexError(f"invalid index for {type(self).__name__}: {index}")
        return int(index)

    def to_tuple(self) -> tuple[float, ...]:
        return tuple(self)

    def as_array(self) -> NDArray[np.float64]:
        """Return a copy of the components as a numpy array."""
        return self._v.copy()

    def copy(self: _V) -> _V:
        return self._from_array(self._v)

    def __copy__(self: _V) -> _V:
        return self.copy()

    def __deepcopy__(self: _V, memo: dict[int, Any]) -> _V:
        return self.copy()

    #
    # Arithmetic
    #

    def _operand(self, other: Operand, op: str) -> NDArray[np.float64] | float:
        if isinstance(other, VectorBase):
            if type(other) is not type(self):
                raise TypeError(
                    f"cannot {op} {type(self).__name__} and {type(other).__name__}"
                )
            return other._v
        if isinstance(other, (int, float, np.floating, np.integer)) and not isinstance(
            other, bool
        ):
            return Scalar.from_value(other)
        raise TypeError(f"cannot {op} {type(self).__name__} and {type(other).__name__}")

    def add(self: _V, other: Operand) -> _V:
        """Return the component-wise sum with a vector or scalar."""
        return self._from_array(self._v + self._operand(other, "add"))

    def sub(self: _V, other: Operand) -> _V:
        """Return the component-wise difference with a vector or scalar."""
        return self._from_array(self._v - self._operand(other, "subtract"))

    def multiply(self: _V, other: Operand) -> _V:
        """Return the component-wise product with a vector or scalar."""
        return self._from_array(self._v * self._operand(other, "multiply"))

    def divide(self: _V, other: Operand) -> _V:
        """Return the component-wise quotient with a vector or scalar.

        Division by zero follows IEEE semantics and yields inf or nan.
        """
        with np.errstate(divide="ignore", invalid="ignore"):
            return self._from_array(self._v / self._operand(other, "divide"))

    def scale(self: _V, s: float) -> _V:
        """Return the vector multiplied by a scalar."""
        return self._from_array(self._v * Scalar.from_value(s))

    def negate(self: _V) -> _V:
        return self._from_array(-self._v)

    def dot(self, other: VectorBase) -> float:
        """Return the dot product with a vector of the same order."""
        if type(other) is not type(self):
            raise TypeError(
                f"dot requires two {type(self).__name__} values, "
                f"got {type(other).__name__}"
            )
        total: float = Scalar.zero()
        for a, b in zip(self, other):
            total = Scalar.add(total, Scalar.mul(a, b))
        return total

    def length_squared(self) -> float:
        """Return the squared Euclidean norm, avoiding the square root."""
        return self.dot(self)

    def length(self) -> float:
        """Return the Euclidean norm.

        Computed with a scaled hypot so large finite components do not
        overflow to inf.
        """
        return Scalar.hypot(*self)

    def normalize(self: _V) -> _V:
        """Return the unit vector in the same direction.

        Raises:
            DegenerateVectorError: If the length is below the configured
                degenerate-vector threshold
        """
        eps: float = layout_policy.active_config().degenerate_eps()
        length: float = self.length()
        if length < eps:
            raise DegenerateVectorError(
                f"cannot normalize {self!r}: length {length:g} is below {eps:g}"
            )
        return self._from_array(self._v / length)

    @classmethod
    def minimum(cls: type[_V], a: _V, b: _V) -> _V:
        """Return the component-wise minimum of two vectors."""
        return cls._from_array(np.minimum(a._operand(b, "compare"), a._v))

    @classmethod
    def maximum(cls: type[_V], a: _V, b: _V) -> _V:
        """Return the component-wise maximum of two vectors."""
        return cls._from_array(np.maximum(a._operand(b, "compare"), a._v))

    def clamp(self: _V, a: _V, b: _V) -> _V:
        """Return the vector clamped to the box spanned by ``a`` and ``b``.

        The bounds may be given in any order; each component is clamped to
        ``[min(a, b), max(a, b)]``.
        """
        low: _V = self.minimum(a, b)
        high: _V = self.maximum(a, b)
        return self.maximum(low, self.minimum(self, high))

    def abs(self: _V) -> _V:
        """Return the component-wise absolute value."""
        return self._from_array(np.abs(self._v))

    def is_valid(self) -> bool:
        """Return True when every component is finite."""
        return all(Scalar.is_valid(value) for value in self)

    def almost_equal(self, other: VectorBase, tol: float = 1e-9) -> bool:
        """Return True when every component differs by at most ``tol``."""
        if type(other) is not type(self):
            return False
        return bool(np.allclose(self._v, other._v, rtol=0.0, atol=tol))

    #
    # Operators
    #

    def __add__(self: _V, other: Operand) -> _V:
        try:
            return self.add(other)
        except TypeError:
            return NotImplemented

    def __radd__(self: _V, other: Operand) -> _V:
        return self.__add__(other)

    def __sub__(self: _V, other: Operand) -> _V:
        try:
            return self.sub(other)
        except TypeError:
            return NotImplemented

    def __rsub__(self: _V, other: Operand) -> _V:
        try:
            return self.negate().add(other)
        except TypeError:
            return NotImplemented

    def __mul__(self: _V, other: Operand) -> _V:
        try:
            return self.multiply(other)
        except TypeError:
            return NotImplemented

    def __rmul__(self: _V, other: Operand) -> _V:
        return self.__mul__(other)

    def __truediv__(self: _V, other: Operand) -> _V:
        try:
            return self.divide(other)
        except TypeError:
            return NotImplemented

    def __neg__(self: _V) -> _V:
        return self.negate()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VectorBase) or type(other) is not type(self):
            return NotImplemented
        return bool(np.array_equal(self._v, other._v))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        values: str = ", ".join(repr(value) for value in self)
        return f"{type(self).__name__}({values})"

    def __str__(self) -> str:
        return "<" + "  ".join(str(value) for value in self) + ">"
