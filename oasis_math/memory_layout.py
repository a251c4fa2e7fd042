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
Mapping between logical matrix indices and physical storage slots

A square matrix of order ``n`` is stored as a flat array of ``n * n``
elements. Element (r, c) lives at:

    row-major:     data[r * n + c]
    column-major:  data[c * n + r]

Both mappings are bijections over ``[0, n) x [0, n)``.
"""

from __future__ import annotations

import enum


class MemoryLayout(enum.Enum):
    """Storage order for matrix elements."""

    ROW_MAJOR = "row_major"
    COLUMN_MAJOR = "column_major"

    def storage_index(self, order: int, row: int, col: int) -> int:
        """Return the physical slot for logical element (row, col).

        Args:
            order: Matrix order n
            row: Logical row index in [0, n)
            col: Logical column index in [0, n)

        Returns:
            Index into the flat storage array

        Raises:
            IndexError: If row or col is out of range
        """
        if row < 0 or row >= order or col < 0 or col >= order:
            raise IndexError(f"index ({row}, {col}) out of range for order {order}")
        if self is MemoryLayout.ROW_MAJOR:
            return row * order + col
        return col * order + row

    def logical_index(self, order: int, slot: int) -> tuple[int, int]:
        """Return the logical (row, col) stored at a physical slot."""
        if slot < 0 or slot >= order * order:
            raise IndexError(f"slot {slot} out of range for order {order}")
        major: int
        minor: int
        major, minor = divmod(slot, order)
        if self is MemoryLayout.ROW_MAJOR:
            return major, minor
        return minor, major
