################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Tests for logical-to-physical index mapping."""

from __future__ import annotations

import pytest

from oasis_math.memory_layout import MemoryLayout


def test_storage_index_formulas() -> None:
    """Checks both layouts place (1, 2) where expected."""
    assert MemoryLayout.ROW_MAJOR.storage_index(3, 1, 2) == 5
    assert MemoryLayout.COLUMN_MAJOR.storage_index(3, 1, 2) == 7
    assert MemoryLayout.ROW_MAJOR.storage_index(4, 0, 3) == 3
    assert MemoryLayout.COLUMN_MAJOR.storage_index(4, 0, 3) == 12


@pytest.mark.parametrize("layout", list(MemoryLayout))
@pytest.mark.parametrize("order", [2, 3, 4])
def test_storage_index_is_bijective(layout: MemoryLayout, order: int) -> None:
    """Checks every slot is hit exactly once and maps back."""
    slots: set[int] = set()
    for row in range(order):
        for col in range(order):
            slot: int = layout.storage_index(order, row, col)
            assert layout.logical_index(order, slot) == (row, col)
            slots.add(slot)
    assert slots == set(range(order * order))


@pytest.mark.parametrize("row, col", [(-1, 0), (0, -1), (3, 0), (0, 3)])
def test_storage_index_out_of_range(row: int, col: int) -> None:
    """Checks out-of-range indices raise IndexError."""
    with pytest.raises(IndexError):
        MemoryLayout.COLUMN_MAJOR.storage_index(3, row, col)


def test_logical_index_out_of_range() -> None:
    """Checks out-of-range slots raise IndexError."""
    with pytest.raises(IndexError):
        MemoryLayout.ROW_MAJOR.logical_index(2, 4)
