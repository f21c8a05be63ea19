"""
Matrix: fixed-shape dense matrix over a generic numeric element type.

Elements are stored in a flat list in row-major order. The shape is fixed
at construction; the element list may be edited in place via mut_data().

Construction:
    Matrix(row, col, values)
    Matrix.empty(row, col)
    Matrix.from_rows([[1, 2], [3, 4]])
    Matrix.from_array(np.arange(6).reshape(2, 3))
    Matrix.identity(n)
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Generic

import numpy as np
from numpy.typing import ArrayLike, NDArray

from densemat.core.exceptions import DimensionError, MalformedConstructionError
from densemat.core.protocols import T
from densemat.core.validation import (
    check_2d,
    check_array,
    check_capabilities,
    check_dimension,
    check_inner_dimension,
    check_length,
    check_same_shape,
)
from densemat.dense import _kernels
from densemat.dense._format import render


class Matrix(Generic[T]):
    """
    Dense row-major matrix.

    Arithmetic operators return new matrices and leave both operands
    untouched; `+=` and `-=` write the result back into the left operand's
    storage. Incompatible shapes raise ShapeMismatchError.

    Matrices compare equal when shape and every element are equal. They are
    mutable and therefore unhashable.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, row: int, col: int, values: Iterable[T]):
        row = check_dimension(row, "row")
        col = check_dimension(col, "col")
        data = list(values)
        check_length(len(data), (row, col), "values")
        self._row = row
        self._col = col
        self._data: list[T] = data

    @classmethod
    def empty(cls, row: int, col: int) -> Matrix[T]:
        """
        Matrix with the given intended shape and no elements yet.

        Used as an accumulator; it is incomplete until row * col elements
        have been appended through mut_data().
        """
        matrix = cls.__new__(cls)
        matrix._row = check_dimension(row, "row")
        matrix._col = check_dimension(col, "col")
        matrix._data = []
        return matrix

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[T]]) -> Matrix[T]:
        """
        Build a Matrix from a sequence of rows.

        Parameters
        ----------
        rows : iterable of iterables
            Row contents, top to bottom. All rows must have the same length.
            An empty sequence yields a (0, 0) matrix.
        """
        materialized = [list(r) for r in rows]
        n_rows = len(materialized)
        n_cols = len(materialized[0]) if materialized else 0

        for index, r in enumerate(materialized):
            if len(r) != n_cols:
                total = sum(len(x) for x in materialized)
                raise MalformedConstructionError(
                    f"rows: row {index} has {len(r)} elements, expected {n_cols}",
                    shape=(n_rows, n_cols),
                    length=total,
                )

        return cls(n_rows, n_cols, [value for r in materialized for value in r])

    @classmethod
    def from_array(cls, array: ArrayLike) -> Matrix[Any]:
        """
        Build a Matrix from a 2D numpy array or array-like.

        Elements are taken in C order and converted to Python scalars, so an
        integer array yields int elements and renders without dtype noise.

        Parameters
        ----------
        array : array-like
            2D numeric data.
        """
        arr = check_array(array, "array")
        check_2d(arr, "array")
        n_rows, n_cols = arr.shape
        return cls(n_rows, n_cols, arr.ravel(order='C').tolist())

    @classmethod
    def identity(cls, n: int, one: T = 1, zero: T = 0) -> Matrix[T]:
        """n x n matrix with `one` on the diagonal and `zero` elsewhere."""
        n = check_dimension(n, "n")
        return cls(n, n, [one if r == c else zero for r in range(n) for c in range(n)])

    # --- Accessors ---

    def data(self) -> tuple[T, ...]:
        """Read-only snapshot of the elements in row-major order."""
        return tuple(self._data)

    def mut_data(self) -> list[T]:
        """
        The live element list.

        Edits are visible to this matrix. Keeping len == row * col is the
        caller's job; an incomplete matrix is rejected as an operand.
        """
        return self._data

    def size(self) -> tuple[int, int]:
        """(row, col)."""
        return (self._row, self._col)

    @property
    def row(self) -> int:
        """Number of rows."""
        return self._row

    @property
    def col(self) -> int:
        """Number of columns."""
        return self._col

    @property
    def is_complete(self) -> bool:
        """Whether the element count equals row * col."""
        return len(self._data) == self._row * self._col

    def __getitem__(self, key: tuple[int, int]) -> T:
        r, c = key
        if not (0 <= r < self._row and 0 <= c < self._col):
            raise IndexError(
                f"index ({r}, {c}) out of range for shape ({self._row}, {self._col})"
            )
        return self._data[r * self._col + c]

    def to_array(self) -> NDArray[Any]:
        """Elements as a numpy array of shape (row, col)."""
        self._check_complete("self")
        return np.array(self._data).reshape(self._row, self._col)

    # --- Arithmetic ---

    def _check_complete(self, name: str) -> None:
        check_length(len(self._data), (self._row, self._col), name)

    def _apply(self, other: Matrix[T], operation: str) -> Matrix[T]:
        """Validate both operands, then run the kernel for `operation`."""
        self._check_complete("lhs")
        other._check_complete("rhs")
        lhs_shape, rhs_shape = self.size(), other.size()

        if operation == 'mul':
            check_inner_dimension(lhs_shape, rhs_shape, operation)
            out_shape = (lhs_shape[0], rhs_shape[1])
            if lhs_shape[1] == 0 and out_shape[0] * out_shape[1] > 0:
                raise DimensionError(
                    f"mul: inner dimension is 0 for result shape {out_shape}; "
                    "an empty dot product has no value for a generic element type"
                )
        else:
            check_same_shape(lhs_shape, rhs_shape, operation)
            out_shape = lhs_shape

        check_capabilities(self._data, operation, "lhs")
        check_capabilities(other._data, operation, "rhs")

        result: Matrix[T] = Matrix.empty(*out_shape)
        out = result.mut_data()
        if operation == 'mul':
            _kernels.matmul(out, self._data, lhs_shape, other._data, rhs_shape)
        else:
            _kernels.elementwise(out, self._data, other._data, operation)
        return result

    def __add__(self, other: object) -> Matrix[T]:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._apply(other, 'add')

    def __sub__(self, other: object) -> Matrix[T]:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._apply(other, 'sub')

    def __mul__(self, other: object) -> Matrix[T]:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._apply(other, 'mul')

    __matmul__ = __mul__

    def __iadd__(self, other: object) -> Matrix[T]:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._data[:] = self._apply(other, 'add')._data
        return self

    def __isub__(self, other: object) -> Matrix[T]:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._data[:] = self._apply(other, 'sub')._data
        return self

    # --- Comparison and display ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return (
            self._row == other._row
            and self._col == other._col
            and self._data == other._data
        )

    def __str__(self) -> str:
        return render(self._data, self._col)

    def __repr__(self) -> str:
        return f"Matrix(row={self._row}, col={self._col}, data={self._data!r})"
