"""
DenseMatrix: fixed-shape dense float64 matrix with selectable storage order.

Vectors are DenseMatrix instances with one column; fixed sizes (2x2, 3x3,
4x4, 2/3/4-vectors) are shape constraints built by litemath.matrix.factories,
not subclasses.

Conventions:
    - Methods named *_in_place, set*, add_scaled, componentwise_* and
      normalize_in_place mutate the receiver and return it for chaining.
    - Every other method returning a matrix returns a new, independent one.
    - dot, componentwise_max/min and set_from_array work on the flat buffer
      and silently truncate to the shorter length. Nothing else coerces shape.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from litemath.core.compute.tolerances import CLOSED_FORM
from litemath.core.exceptions import (
    NotSquareError,
    SizeMismatchError,
    TooSmallError,
    UnsupportedSizeError,
)
from litemath.core.validation import check_array, check_index, check_positive_int
from litemath.matrix import _cofactor, _charpoly, _format
from litemath.matrix._storage import (
    StorageOrder,
    as_storage_order,
    flat_offset,
    to_flat,
    to_logical,
)


class DenseMatrix:
    """
    Dense real matrix stored as one flat float64 buffer.

    The buffer holds rows * cols elements laid out row by row
    (StorageOrder.ROW_MAJOR, 'row') or column by column
    (StorageOrder.COLUMN_MAJOR, 'col'). Storage order never changes the
    logical content: get(i, j) is the same element in either layout.

    Construction:
        DenseMatrix(3, 3)                               # zeros, row-major
        DenseMatrix(2, 2, order='col', data=[1, 2, 3, 4])
        identity(3), vector3(1, 0, 0), from_numpy(arr)  # see factories

    Attributes:
        rows: Number of rows (>= 1)
        cols: Number of columns (>= 1)
        order: StorageOrder of the buffer
        data: The live flat buffer (length rows * cols)
    """

    def __init__(
        self,
        rows: int = 1,
        cols: int = 1,
        order: StorageOrder | str = StorageOrder.ROW_MAJOR,
        data: ArrayLike | None = None,
    ):
        """
        Args:
            rows: Row count
            cols: Column count
            order: 'row' / 'col' or a StorageOrder
            data: Optional flat values in buffer order. Copied; extra values
                are ignored and missing ones stay zero.

        Raises:
            ValidationError: If rows or cols is not a positive integer, or
                order is unknown
        """
        self._rows = check_positive_int(rows, 'rows')
        self._cols = check_positive_int(cols, 'cols')
        self._order = as_storage_order(order)
        self._data = np.zeros(self._rows * self._cols, dtype=np.float64)
        if data is not None:
            self.set_from_array(data)

    @classmethod
    def _from_buffer(
        cls,
        rows: int,
        cols: int,
        order: StorageOrder,
        buffer: NDArray[np.float64],
    ) -> DenseMatrix:
        """Wrap a freshly allocated buffer without copying or validating."""
        m = cls.__new__(cls)
        m._rows = rows
        m._cols = cols
        m._order = order
        m._data = buffer
        return m

    # --- Shape and storage ---

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, cols)."""
        return (self._rows, self._cols)

    @property
    def order(self) -> StorageOrder:
        return self._order

    @property
    def size(self) -> int:
        """Number of elements, rows * cols."""
        return self._data.size

    @property
    def data(self) -> NDArray[np.float64]:
        """The flat buffer itself; writes go straight into the matrix."""
        return self._data

    @property
    def is_square(self) -> bool:
        return self._rows == self._cols

    def _logical(self) -> NDArray[np.float64]:
        return to_logical(self._data, self._rows, self._cols, self._order)

    def _require_square(self, operation: str) -> None:
        if not self.is_square:
            raise NotSquareError(
                f"{operation}: matrix is not square (shape {self.shape})",
                operation=operation,
                shape=self.shape,
            )

    def clone(self) -> DenseMatrix:
        """Deep copy with the same shape and storage order."""
        return DenseMatrix._from_buffer(
            self._rows, self._cols, self._order, self._data.copy()
        )

    def set_from_array(self, values: ArrayLike) -> DenseMatrix:
        """
        Copy values into the flat buffer, in buffer order.

        Copies min(size, len(values)) elements; excess values are ignored and
        slots past the end of values keep their current contents.
        """
        flat = check_array(values, 'values').ravel()
        num = min(self._data.size, flat.size)
        self._data[:num] = flat[:num]
        return self

    def get(self, row: int, col: int) -> float:
        """Element at logical position (row, col)."""
        row = check_index(row, self._rows, 'row')
        col = check_index(col, self._cols, 'col')
        return float(self._data[flat_offset(self._rows, self._cols, self._order, row, col)])

    def set(self, row: int, col: int, value: float) -> DenseMatrix:
        """Write the element at logical position (row, col)."""
        row = check_index(row, self._rows, 'row')
        col = check_index(col, self._cols, 'col')
        self._data[flat_offset(self._rows, self._cols, self._order, row, col)] = value
        return self

    def column(self, col: int) -> DenseMatrix:
        """Logical column `col` as a new rows x 1 vector."""
        col = check_index(col, self._cols, 'col')
        return DenseMatrix._from_buffer(
            self._rows, 1, StorageOrder.ROW_MAJOR, self._logical()[:, col].copy()
        )

    def is_zero(self, atol: float = 0.0) -> bool:
        """True if every |element| <= atol (exact zero by default)."""
        return bool(np.all(np.abs(self._data) <= atol))

    def to_numpy(self) -> NDArray[np.float64]:
        """Logical content as a new (rows, cols) array."""
        return self._logical().copy()

    def transpose(self) -> DenseMatrix:
        """
        Mathematical transpose as a new matrix.

        The buffer is copied unchanged; swapping the shape and flipping the
        storage order is exactly the transpose.
        """
        return DenseMatrix._from_buffer(
            self._cols, self._rows, self._order.flipped, self._data.copy()
        )

    def with_storage_order(self, order: StorageOrder | str) -> DenseMatrix:
        """Same logical matrix laid out in `order`; a clone if already in it."""
        order = as_storage_order(order)
        if order is self._order:
            return self.clone()
        return DenseMatrix._from_buffer(
            self._rows, self._cols, order, to_flat(self._logical(), order)
        )

    # --- Algebra ---

    def dot(self, other: DenseMatrix) -> float:
        """Sum of products over the first min(size, other.size) flat elements."""
        num = min(self._data.size, other._data.size)
        return float(np.dot(self._data[:num], other._data[:num]))

    def norm(self) -> float:
        """Euclidean (Frobenius) norm of the buffer."""
        return float(np.sqrt(np.sum(self._data ** 2)))

    def normalize_in_place(self) -> DenseMatrix:
        """Divide every element by the norm; an all-zero matrix is left alone."""
        total = np.sum(self._data ** 2)
        if total != 0:
            self._data *= 1.0 / np.sqrt(total)
        return self

    def normalized(self) -> DenseMatrix:
        return self.clone().normalize_in_place()

    def _check_product(self, left: DenseMatrix, right: DenseMatrix, operation: str) -> None:
        if left._cols != right._rows:
            raise SizeMismatchError(
                f"{operation}: inner dimensions differ "
                f"({left.shape} x {right.shape}, {left._cols} != {right._rows})",
                operation=operation,
                left_shape=left.shape,
                right_shape=right.shape,
            )

    @staticmethod
    def _product(left: DenseMatrix, right: DenseMatrix) -> DenseMatrix:
        logical = left._logical() @ right._logical()
        return DenseMatrix._from_buffer(
            left._rows, right._cols, StorageOrder.ROW_MAJOR,
            to_flat(logical, StorageOrder.ROW_MAJOR),
        )

    def multiply_right(self, other: DenseMatrix) -> DenseMatrix:
        """self @ other as a new row-major matrix."""
        self._check_product(self, other, 'multiply_right')
        return self._product(self, other)

    def multiply_left(self, other: DenseMatrix) -> DenseMatrix:
        """other @ self as a new row-major matrix."""
        self._check_product(other, self, 'multiply_left')
        return self._product(other, self)

    def multiply(self, other: DenseMatrix) -> DenseMatrix:
        """
        General product self @ other, shape (self.rows, other.cols), row-major.

        Raises:
            SizeMismatchError: If self.cols != other.rows
        """
        self._check_product(self, other, 'multiply')
        return self._product(self, other)

    def __matmul__(self, other: DenseMatrix) -> DenseMatrix:
        if not isinstance(other, DenseMatrix):
            return NotImplemented
        return self.multiply(other)

    def add_scaled(
        self,
        other: DenseMatrix,
        other_coeff: float = 1.0,
        self_coeff: float = 1.0,
    ) -> DenseMatrix:
        """
        In place: self = self * self_coeff + other * other_coeff.

        Works on logical elements, so the two operands may use different
        storage orders.

        Raises:
            SizeMismatchError: If the shapes differ
        """
        if self.shape != other.shape:
            raise SizeMismatchError(
                f"add_scaled: shapes differ ({self.shape} vs {other.shape})",
                operation='add_scaled',
                left_shape=self.shape,
                right_shape=other.shape,
            )
        if other._order is self._order:
            other_flat = other._data
        else:
            other_flat = to_flat(other._logical(), self._order)
        self._data[:] = self._data * self_coeff + other_flat * other_coeff
        return self

    def added_scaled(
        self,
        other: DenseMatrix,
        other_coeff: float = 1.0,
        self_coeff: float = 1.0,
    ) -> DenseMatrix:
        """New matrix self * self_coeff + other * other_coeff, in self's order."""
        return self.clone().add_scaled(other, other_coeff, self_coeff)

    def scale_in_place(self, k: float) -> DenseMatrix:
        self._data *= k
        return self

    def scaled(self, k: float) -> DenseMatrix:
        return self.clone().scale_in_place(k)

    def componentwise_max(self, other: DenseMatrix) -> DenseMatrix:
        """In place elementwise max over the first min(size, other.size) slots."""
        num = min(self._data.size, other._data.size)
        np.maximum(self._data[:num], other._data[:num], out=self._data[:num])
        return self

    def maxed(self, other: DenseMatrix) -> DenseMatrix:
        return self.clone().componentwise_max(other)

    def componentwise_min(self, other: DenseMatrix) -> DenseMatrix:
        """In place elementwise min over the first min(size, other.size) slots."""
        num = min(self._data.size, other._data.size)
        np.minimum(self._data[:num], other._data[:num], out=self._data[:num])
        return self

    def mined(self, other: DenseMatrix) -> DenseMatrix:
        return self.clone().componentwise_min(other)

    def abs_in_place(self) -> DenseMatrix:
        np.abs(self._data, out=self._data)
        return self

    def absolute(self) -> DenseMatrix:
        return self.clone().abs_in_place()

    def cross(self, other: DenseMatrix) -> DenseMatrix:
        """
        3-D cross product self x other as a new 3x1 vector.

        Raises:
            SizeMismatchError: If either operand does not hold exactly 3 elements
        """
        if self._data.size != 3 or other._data.size != 3:
            raise SizeMismatchError(
                f"cross: both operands need 3 elements, got {self.shape} and {other.shape}",
                operation='cross',
                left_shape=self.shape,
                right_shape=other.shape,
            )
        a, b = self._data, other._data
        out = np.array([
            a[1] * b[2] - a[2] * b[1],
            a[2] * b[0] - a[0] * b[2],
            a[0] * b[1] - a[1] * b[0],
        ])
        return DenseMatrix._from_buffer(3, 1, StorageOrder.ROW_MAJOR, out)

    # --- Cofactor / determinant / trace ---

    def trace(self) -> float:
        """
        Sum of the diagonal.

        Raises:
            NotSquareError: If rows != cols
        """
        self._require_square('trace')
        return _cofactor.trace(self._data, self._rows)

    def minor(self, row: int, col: int) -> DenseMatrix:
        """
        Submatrix with `row` and `col` removed, in the same storage order.

        Raises:
            TooSmallError: If rows <= 1 or cols <= 1
            ValidationError: If row or col is out of range
        """
        if self._rows <= 1 or self._cols <= 1:
            raise TooSmallError(
                f"minor: need at least 2 rows and 2 columns, got shape {self.shape}",
                operation='minor',
                shape=self.shape,
            )
        row = check_index(row, self._rows, 'row')
        col = check_index(col, self._cols, 'col')
        buffer = _cofactor.minor_buffer(
            self._data, self._rows, self._cols, self._order, row, col
        )
        return DenseMatrix._from_buffer(self._rows - 1, self._cols - 1, self._order, buffer)

    def determinant(self) -> float:
        """
        Determinant: closed form up to 3x3, cofactor expansion above.

        Raises:
            NotSquareError: If rows != cols
        """
        self._require_square('determinant')
        return _cofactor.determinant(self._data, self._rows, self._order)

    def cofactor(self, row: int, col: int) -> float:
        """Signed minor (-1)**(row + col) * det(minor(row, col))."""
        self._require_square('cofactor')
        sign = 1.0 if (row + col) % 2 == 0 else -1.0
        return sign * self.minor(row, col).determinant()

    def characteristic_coefficients(self) -> list[float]:
        """
        Coefficients of det(self - xI), constant term first.

        Raises:
            NotSquareError: If rows != cols
            UnsupportedSizeError: If the matrix is larger than 3x3
        """
        self._require_square('characteristic_coefficients')
        n = self._rows
        if n > _charpoly.MAX_CHARACTERISTIC_SIZE:
            raise UnsupportedSizeError(
                f"characteristic_coefficients: only implemented up to "
                f"{_charpoly.MAX_CHARACTERISTIC_SIZE}x{_charpoly.MAX_CHARACTERISTIC_SIZE}, "
                f"got {n}x{n}",
                operation='characteristic_coefficients',
                size=n,
                max_size=_charpoly.MAX_CHARACTERISTIC_SIZE,
            )
        return _charpoly.characteristic_coefficients(self._data, n, self._order)

    # --- Comparison and formatting ---

    def allclose(
        self,
        other: DenseMatrix,
        rtol: float = CLOSED_FORM.rtol,
        atol: float = CLOSED_FORM.atol,
    ) -> bool:
        """Same shape and logically equal within tolerance (order ignored)."""
        if self.shape != other.shape:
            return False
        return bool(np.allclose(self._logical(), other._logical(), rtol=rtol, atol=atol))

    def to_display_string(self) -> str:
        return _format.display_string(self._logical())

    def to_tex(self) -> str:
        return _format.tex(self._logical())

    def to_csv(self) -> str:
        return _format.csv(self._logical())

    def __str__(self) -> str:
        return self.to_display_string()

    def __repr__(self) -> str:
        return (
            f"DenseMatrix(rows={self._rows}, cols={self._cols}, "
            f"order={self._order.value!r}, data={self._data.tolist()!r})"
        )
