"""
Storage order and flat-offset arithmetic.

A matrix buffer is one flat float64 array. Row-major lists elements row by
row; column-major lists them column by column. The same logical matrix can
live in either layout.
"""

from __future__ import annotations

from enum import Enum

import numpy as np
from numpy.typing import NDArray

from litemath.core.exceptions import ValidationError


class StorageOrder(str, Enum):
    """Physical layout of a matrix buffer."""
    ROW_MAJOR = 'row'
    COLUMN_MAJOR = 'col'

    @property
    def flipped(self) -> StorageOrder:
        """The other layout."""
        if self is StorageOrder.ROW_MAJOR:
            return StorageOrder.COLUMN_MAJOR
        return StorageOrder.ROW_MAJOR

    @property
    def numpy_order(self) -> str:
        """Equivalent numpy `order=` flag ('C' or 'F')."""
        return 'C' if self is StorageOrder.ROW_MAJOR else 'F'


def as_storage_order(order: StorageOrder | str) -> StorageOrder:
    """Coerce 'row' / 'col' (or the enum itself) to StorageOrder."""
    try:
        return StorageOrder(order)
    except ValueError:
        valid = ", ".join(repr(o.value) for o in StorageOrder)
        raise ValidationError(
            f"order: unknown storage order {order!r}, expected one of {valid}"
        ) from None


def flat_offset(rows: int, cols: int, order: StorageOrder, row: int, col: int) -> int:
    """Position of logical element (row, col) in the flat buffer."""
    if order is StorageOrder.ROW_MAJOR:
        return cols * row + col
    return rows * col + row


def to_logical(data: NDArray, rows: int, cols: int, order: StorageOrder) -> NDArray:
    """View a flat buffer as its logical (rows, cols) array."""
    return data.reshape((rows, cols), order=order.numpy_order)


def to_flat(logical: NDArray, order: StorageOrder) -> NDArray[np.float64]:
    """Lay a logical 2D array out as a fresh flat buffer in `order`."""
    return np.array(logical, dtype=np.float64).ravel(order=order.numpy_order).copy()
