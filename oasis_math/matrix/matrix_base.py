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
Shared implementation for square matrices

Matrices are stored as a flat array of ``ORDER * ORDER`` elements. The
process-wide ``MemoryLayout`` decides whether the array is row-major or
column-major; ``element()`` and ``set_element()`` are the only methods that
translate a logical (row, col) pair into a storage slot. Every algorithm below
is written against those accessors, so flipping the layout changes the order
of ``to_buffer()`` and nothing else.

Element-wise operations (add, sub, scale, negate) act on the whole storage
array at once. They commute with any permutation of the slots, so they are
layout-independent as well.

Conventions:
    - Vectors are columns: ``M @ v`` computes ``sum_k M(i, k) * v[k]``.
    - ``make()`` always takes logical rows.
"""

from __future__ import annotations

from typing import Any
from typing import ClassVar
from typing import Iterable
from typing import Sequence
from typing import TypeVar
from typing import Union

import numpy as np
from numpy.typing import NDArray

from oasis_math import layout_policy
from oasis_math.errors import SingularMatrixError
from oasis_math.memory_layout import MemoryLayout
from oasis_math.scalar import Scalar
from oasis_math.vector.vector_base import VectorBase


_M = TypeVar("_M", bound="MatrixBase")

Row = Union[VectorBase, Sequence[float]]


def det2(a: float, b: float, c: float, d: float) -> float:
    """Return the determinant of [[a, b], [c, d]]."""
    return Scalar.sub(Scalar.mul(a, d), Scalar.mul(b, c))


def det3(m: Sequence[Sequence[float]]) -> float:
    """Return the determinant of a 3x3 matrix by cofactor expansion on row 0.

    Args:
        m: Logical rows of a 3x3 matrix

    Returns:
        Determinant of ``m``
    """
    a00: float = m[0][0]
    a01: float = m[0][1]
    a02: float = m[0][2]
    c00: float = det2(m[1][1], m[1][2], m[2][1], m[2][2])
    c01: float = det2(m[1][0], m[1][2], m[2][0], m[2][2])
    c02: float = det2(m[1][0], m[1][1], m[2][0], m[2][1])
    return Scalar.add(
        Scalar.sub(Scalar.mul(a00, c00), Scalar.mul(a01, c01)), Scalar.mul(a02, c02)
    )


class MatrixBase:
    """Square matrix of order ``ORDER``.

    Subclasses set ``ORDER``, ``VECTOR`` and optionally ``POINT``, and provide
    ``determinant()`` and ``_minor_determinant()``.
    """

    __slots__ = ("_m",)

    # Keep numpy scalars from broadcasting over matrices in mixed operators
    __array_ufunc__ = None

    ORDER: ClassVar[int] = 0
    VECTOR: ClassVar[type[VectorBase]] = VectorBase
    POINT: ClassVar[type[VectorBase] | None] = None

    def __init__(self) -> None:
        """Create the identity matrix."""
        self._m: NDArray[np.float64] = self._identity_storage()

    #
    # Construction
    #

    @classmethod
    def _blank(cls: type[_M]) -> _M:
        layout_policy.lock_layout()
        mat: _M = cls.__new__(cls)
        mat._m = np.zeros(cls.ORDER * cls.ORDER, dtype=Scalar.DTYPE)
        return mat

    @classmethod
    def _identity_storage(cls) -> NDArray[np.float64]:
        layout: MemoryLayout = layout_policy.lock_layout()
        storage: NDArray[np.float64] = np.zeros(
            cls.ORDER * cls.ORDER, dtype=Scalar.DTYPE
        )
        for i in range(cls.ORDER):
            storage[layout.storage_index(cls.ORDER, i, i)] = Scalar.one()
        return storage

    @classmethod
    def _from_storage(cls: type[_M], storage: NDArray[np.float64]) -> _M:
        mat: _M = cls._blank()
        mat._m = np.array(storage, dtype=Scalar.DTYPE)
        return mat

    @classmethod
    def identity(cls: type[_M]) -> _M:
        """Return the multiplicative identity."""
        return cls()

    @classmethod
    def zero(cls: type[_M]) -> _M:
        """Return the additive identity, every element 0."""
        return cls._blank()

    @classmethod
    def make(cls: type[_M], *rows: Row) -> _M:
        """Create a matrix from ``ORDER`` logical rows.

        Args:
            rows: Row vectors or sequences of ``ORDER`` scalars

        Raises:
            ValueError: If the number or length of rows is wrong
        """
        return cls.from_rows(*rows)

    @classmethod
    def from_rows(cls: type[_M], *rows: Row) -> _M:
        """Create a matrix whose logical rows are ``rows``."""
        values: list[list[float]] = cls._validate_lines(rows, "rows")
        mat: _M = cls._blank()
        for r in range(cls.ORDER):
            for c in range(cls.ORDER):
                mat.set_element(r, c, values[r][c])
        return mat

    @classmethod
    def from_columns(cls: type[_M], *columns: Row) -> _M:
        """Create a matrix whose logical columns are ``columns``."""
        values: list[list[float]] = cls._validate_lines(columns, "columns")
        mat: _M = cls._blank()
        for c in range(cls.ORDER):
            for r in range(cls.ORDER):
                mat.set_element(r, c, values[c][r])
        return mat

    @classmethod
    def from_values(cls: type[_M], *values: float) -> _M:
        """Create a matrix from ``ORDER * ORDER`` scalars in logical row order."""
        n: int = cls.ORDER
        if len(values) != n * n:
            raise ValueError(f"{cls.__name__} requires {n * n} values, got {len(values)}")
        return cls.from_rows(*(values[r * n : (r + 1) * n] for r in range(n)))

    @classmethod
    def from_buffer(cls: type[_M], values: Iterable[float]) -> _M:
        """Create a matrix from scalars in the active physical storage order.

        This is the inverse of ``to_buffer()``.
        """
        storage: NDArray[np.float64] = Scalar.array(values)
        if storage.shape != (cls.ORDER * cls.ORDER,):
            raise ValueError(f"{cls.__name__} buffer must have {cls.ORDER ** 2} values")
        return cls._from_storage(storage)

    @classmethod
    def _validate_lines(cls, lines: Sequence[Row], name: str) -> list[list[float]]:
        if len(lines) != cls.ORDER:
            raise ValueError(
                f"{cls.__name__} requires {cls.ORDER} {name}, got {len(lines)}"
            )
        values: list[list[float]] = []
        for line in lines:
            if isinstance(line, VectorBase) and not isinstance(line, cls.VECTOR):
                raise TypeError(
                    f"{cls.__name__} {name} must be {cls.VECTOR.__name__}, "
                    f"got {type(line).__name__}"
                )
            floats: list[float] = [Scalar.from_value(value) for value in line]
            if len(floats) != cls.ORDER:
                raise ValueError(f"each of {name} must have {cls.ORDER} elements")
            values.append(floats)
        return values

    #
    # Element access
    #

    def _slot(self, row: int, col: int) -> int:
        for index in (row, col):
            if not isinstance(index, (int, np.integer)) or isinstance(index, bool):
                raise TypeError(f"{type(self).__name__} indices must be integers")
        return layout_policy.active_layout().storage_index(self.ORDER, row, col)

    def element(self, row: int, col: int) -> float:
        """Return logical element (row, col) regardless of storage order.

        Raises:
            IndexError: If row or col is out of range
        """
        return float(self._m[self._slot(row, col)])

    def set_element(self, row: int, col: int, value: float) -> None:
        """Assign logical element (row, col) regardless of storage order.

        Raises:
            IndexError: If row or col is out of range
        """
        self._m[self._slot(row, col)] = Scalar.from_value(value)

    def __getitem__(self, index: tuple[int, int]) -> float:
        row, col = self._split_index(index)
        return self.element(row, col)

    def __setitem__(self, index: tuple[int, int], value: float) -> None:
        row, col = self._split_index(index)
        self.set_element(row, col, value)

    def _split_index(self, index: tuple[int, int]) -> tuple[int, int]:
        if not isinstance(index, tuple) or len(index) != 2:
            raise TypeError(f"{type(self).__name__} indices must be (row, col) pairs")
        return index[0], index[1]

    def row(self, i: int) -> VectorBase:
        """Return logical row ``i`` as a vector."""
        return self.VECTOR(*(self.element(i, c) for c in range(self.ORDER)))

    def column(self, j: int) -> VectorBase:
        """Return logical column ``j`` as a vector."""
        return self.VECTOR(*(self.element(r, j) for r in range(self.ORDER)))

    def to_rows(self) -> tuple[tuple[float, ...], ...]:
        return tuple(
            tuple(self.element(r, c) for c in range(self.ORDER)) for r in range(self.ORDER)
        )

    def to_numpy(self) -> NDArray[np.float64]:
        """Return the logical ``(ORDER, ORDER)`` array."""
        return np.array(self.to_rows(), dtype=Scalar.DTYPE)

    def to_buffer(self) -> NDArray[np.float64]:
        """Return a copy of the storage in physical (layout) order."""
        return self._m.copy()

    def copy(self: _M) -> _M:
        return self._from_storage(self._m)

    def __copy__(self: _M) -> _M:
        return self.copy()

    def __deepcopy__(self: _M, memo: dict[int, Any]) -> _M:
        return self.copy()

    #
    # Algebra
    #

    def transpose(self: _M) -> _M:
        """Return the transpose, ``result(i, j) == self(j, i)``."""
        result: _M = self._blank()
        for r in range(self.ORDER):
            for c in range(self.ORDER):
                result.set_element(c, r, self.element(r, c))
        return result

    def _operand(self, other: Any, op: str) -> NDArray[np.float64] | float:
        if isinstance(other, MatrixBase):
            if type(other) is not type(self):
                raise TypeError(
                    f"cannot {op} {type(self).__name__} and {type(other).__name__}"
                )
            return other._m
        if isinstance(other, (int, float, np.floating, np.integer)) and not isinstance(
            other, bool
        ):
            return Scalar.from_value(other)
        raise TypeError(f"cannot {op} {type(self).__name__} and {type(other).__name__}")

    def add(self: _M, other: _M | float) -> _M:
        """Return the element-wise sum with a matrix or scalar."""
        return self._from_storage(self._m + self._operand(other, "add"))

    def sub(self: _M, other: _M | float) -> _M:
        """Return the element-wise difference with a matrix or scalar."""
        return self._from_storage(self._m - self._operand(other, "subtract"))

    def scale(self: _M, s: float) -> _M:
        """Return the matrix with every element multiplied by ``s``."""
        return self._from_storage(self._m * Scalar.from_value(s))

    def divide(self: _M, s: float) -> _M:
        """Return the matrix with every element divided by ``s``."""
        with np.errstate(divide="ignore", invalid="ignore"):
            return self._from_storage(self._m / Scalar.from_value(s))

    def negate(self: _M) -> _M:
        return self._from_storage(-self._m)

    def multiply(self: _M, other: _M) -> _M:
        """Return the matrix product ``self * other``.

        ``result(i, j) = sum_k self(i, k) * other(k, j)``

        Raises:
            TypeError: If ``other`` is not a matrix of the same order
        """
        if type(other) is not type(self):
            raise TypeError(
                f"cannot multiply {type(self).__name__} and {type(other).__name__}"
            )
        n: int = self.ORDER
        result: _M = self._blank()
        for i in range(n):
            for j in range(n):
                total: float = Scalar.zero()
                for k in range(n):
                    total = Scalar.add(
                        total, Scalar.mul(self.element(i, k), other.element(k, j))
                    )
                result.set_element(i, j, total)
        return result

    def multiply_vector(self, v: VectorBase) -> VectorBase:
        """Return ``self * v`` with ``v`` treated as a column vector.

        Raises:
            TypeError: If ``v`` is not a vector of the matrix order
        """
        if not isinstance(v, self.VECTOR):
            raise TypeError(
                f"{type(self).__name__} multiplies {self.VECTOR.__name__}, "
                f"got {type(v).__name__}"
            )
        n: int = self.ORDER
        out: list[float] = []
        for i in range(n):
            total: float = Scalar.zero()
            for k in range(n):
                total = Scalar.add(total, Scalar.mul(self.element(i, k), v[k]))
            out.append(total)
        return self.VECTOR(*out)

    def transform_point(self, point: VectorBase) -> VectorBase:
        """Transform a vector of the matrix order, or an affine point.

        A vector of order ``ORDER`` is multiplied directly. A point of order
        ``ORDER - 1`` (``POINT``) is extended with a homogeneous coordinate of
        1 and the last row is dropped; no perspective divide is applied.

        Raises:
            TypeError: If ``point`` has an unsupported type
        """
        if isinstance(point, self.VECTOR):
            return self.multiply_vector(point)
        if self.POINT is None or not isinstance(point, self.POINT):
            raise TypeError(
                f"{type(self).__name__} cannot transform {type(point).__name__}"
            )
        coords: list[float] = list(point) + [Scalar.one()]
        out: list[float] = []
        for i in range(self.ORDER - 1):
            total: float = Scalar.zero()
            for k in range(self.ORDER):
                total = Scalar.add(total, Scalar.mul(self.element(i, k), coords[k]))
            out.append(total)
        return self.POINT(*out)

    def determinant(self) -> float:
        raise NotImplementedError

    def _minor_determinant(self, row: int, col: int) -> float:
        """Return the determinant of the matrix with ``row`` and ``col`` removed."""
        raise NotImplementedError

    def _minor(self, row: int, col: int) -> list[list[float]]:
        """Return the logical rows of the matrix with ``row`` and ``col`` removed."""
        return [
            [self.element(r, c) for c in range(self.ORDER) if c != col]
            for r in range(self.ORDER)
            if r != row
        ]

    def cofactor(self, row: int, col: int) -> float:
        """Return the signed minor ``(-1)^(row + col) * M(row, col)``."""
        minor: float = self._minor_determinant(row, col)
        return minor if (row + col) % 2 == 0 else -minor

    def adjugate(self: _M) -> _M:
        """Return the transpose of the cofactor matrix."""
        result: _M = self._blank()
        for r in range(self.ORDER):
            for c in range(self.ORDER):
                result.set_element(c, r, self.cofactor(r, c))
        return result

    def _row_norm_product(self) -> float:
        """Return the product of the logical row norms.

        By Hadamard's inequality this bounds ``|det|`` from above, and it
        scales with the matrix the same way the determinant does.
        """
        product: float = Scalar.one()
        for row in self.to_rows():
            product = Scalar.mul(product, Scalar.hypot(*row))
        return product

    def inverse(self: _M) -> _M:
        """Return the inverse as ``adjugate / determinant``.

        The singular test is relative: the matrix is rejected when
        ``|det| < singular_eps * prod(row norms)``, so uniformly scaling a
        matrix never changes whether it inverts.

        Raises:
            SingularMatrixError: If the determinant is negligible relative to
                the row norms
        """
        eps: float = layout_policy.active_config().singular_eps()
        det: float = self.determinant()
        reference: float = self._row_norm_product()
        if reference == 0.0 or Scalar.is_near_zero(det, Scalar.mul(eps, reference)):
            raise SingularMatrixError(
                f"{type(self).__name__} is singular: determinant {det:g} is "
                f"below {eps:g} times the row norm product {reference:g}"
            )
        adj: _M = self.adjugate()
        result: _M = self._blank()
        for r in range(self.ORDER):
            for c in range(self.ORDER):
                result.set_element(r, c, Scalar.div(adj.element(r, c), det))
        return result

    def is_valid(self) -> bool:
        """Return True when every element is finite."""
        return bool(np.all(np.isfinite(self._m)))

    def almost_equal(self, other: MatrixBase, tol: float = 1e-9) -> bool:
        """Return True when every element differs by at most ``tol``."""
        if type(other) is not type(self):
            return False
        return bool(np.allclose(self._m, other._m, rtol=0.0, atol=tol))

    #
    # Operators
    #

    def __add__(self: _M, other: Any) -> _M:
        try:
            return self.add(other)
        except TypeError:
            return NotImplemented

    def __radd__(self: _M, other: Any) -> _M:
        return self.__add__(other)

    def __sub__(self: _M, other: Any) -> _M:
        try:
            return self.sub(other)
        except TypeError:
            return NotImplemented

    def __rsub__(self: _M, other: Any) -> _M:
        try:
            return self.negate().add(other)
        except TypeError:
            return NotImplemented

    def __mul__(self, other: Any) -> Any:
        if isinstance(other, MatrixBase):
            if type(other) is not type(self):
                return NotImplemented
            return self.multiply(other)
        if isinstance(other, VectorBase):
            if not isinstance(other, self.VECTOR):
                return NotImplemented
            return self.multiply_vector(other)
        try:
            return self.scale(self._operand(other, "multiply"))  # type: ignore[arg-type]
        except TypeError:
            return NotImplemented

    def __rmul__(self: _M, other: Any) -> _M:
        if isinstance(other, (MatrixBase, VectorBase)):
            return NotImplemented
        try:
            return self.scale(self._operand(other, "multiply"))  # type: ignore[arg-type]
        except TypeError:
            return NotImplemented

    def __matmul__(self, other: Any) -> Any:
        if isinstance(other, (MatrixBase, VectorBase)):
            return self.__mul__(other)
        return NotImplemented

    def __truediv__(self: _M, other: Any) -> _M:
        if isinstance(other, (MatrixBase, VectorBase)):
            return NotImplemented
        try:
            return self.divide(self._operand(other, "divide"))  # type: ignore[arg-type]
        except TypeError:
            return NotImplemented

    def __neg__(self: _M) -> _M:
        return self.negate()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MatrixBase) or type(other) is not type(self):
            return NotImplemented
        return bool(np.array_equal(self._m, other._m))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        rows: str = ", ".join(repr(list(row)) for row in self.to_rows())
        return f"{type(self).__name__}.make({rows})"

    def __str__(self) -> str:
        lines: list[str] = [
            "  " + ", ".join(str(value) for value in row) for row in self.to_rows()
        ]
        return "[\n" + "\n".join(lines) + "\n]"
