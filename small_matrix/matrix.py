################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Dense fixed-extent float32 matrix value type."""

from __future__ import annotations

import logging
from typing import Any
from typing import Callable
from typing import Dict
from typing import Iterable
from typing import Iterator
from typing import List
from typing import Optional
from typing import Sequence
from typing import Tuple

import numpy as np
from numpy.typing import NDArray

from small_matrix import elementwise
from small_matrix.config.matrix_config import MatrixConfig
from small_matrix.config.matrix_params import MatrixParams
from small_matrix.config.matrix_params import ToleranceParams
from small_matrix.matrix_errors import MatrixError
from small_matrix.matrix_errors import MatrixIndexError
from small_matrix.matrix_errors import ReadOnlyMatrixError
from small_matrix.render import render_repr
from small_matrix.render import render_rows
from small_matrix.shape import Shape
from small_matrix.shape import ShapeLike
from small_matrix.shape import is_integer


_LOG: logging.Logger = logging.getLogger(__name__)


class Matrix:
    """A dense, row-major matrix of float32 entries with fixed extents.

    Responsibility:
        Own a Rows x Cols buffer of float32 entries and provide transpose,
        row swap, elementwise transforms and the arithmetic operator set.

    Construction:
        - Matrix(rows) copies a rectangular nested sequence of numbers and is
          the only entry point for caller data. Zero rows or zero columns
          raise EmptyDimensionError.
        - zeros(), fill() and identity() take a Shape, which performs the
          same extent validation.

    Operators:
        - a + b, a - b: entrywise, equal extents required
        - a + s, a - s, a * s, a / s: entrywise with a scalar
        - a += b, a -= b, a += s, a -= s, a *= s, a /= s: in place
        - a * b, a @ b: matrix product, a.cols must equal b.rows

    Errors:
        - EmptyDimensionError: construction with a zero extent
        - DimensionMismatchError: incompatible operand extents
        - MatrixIndexError: out-of-range row or column index
        - ReadOnlyMatrixError: mutation of a read-only matrix

    Scalar division by zero follows IEEE semantics and yields inf or nan.
    Matrices are mutable, so they are not hashable.
    """

    __slots__ = ("_shape", "_body")

    # Defer numpy scalar operands to the reflected operators below
    __array_ufunc__ = None

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, rows_of_entries: Iterable[Sequence[float]]) -> None:
        """Create a matrix from a rectangular sequence of rows."""
        rows: List[List[Any]] = _as_row_lists(rows_of_entries)
        cols: int = len(rows[0]) if rows else 0
        for row in rows:
            if len(row) != cols:
                raise MatrixError("rows must all have the same length")

        shape: Shape = Shape(len(rows), cols)

        for row in rows:
            for value in row:
                if not elementwise.is_scalar(value):
                    raise MatrixError(f"entries must be real numbers, got {value!r}")

        self._shape: Shape = shape
        self._body: NDArray[np.float32] = _to_float32(rows)

    @classmethod
    def new(cls, rows_of_entries: Iterable[Sequence[float]]) -> Matrix:
        """Create a matrix from a rectangular sequence of rows."""
        return cls(rows_of_entries)

    @classmethod
    def zeros(cls, shape: ShapeLike) -> Matrix:
        """Return a matrix of the given shape filled with 0.0."""
        valid: Shape = Shape.coerce(shape)
        return cls._from_body(valid, np.zeros(valid.as_tuple(), dtype=elementwise.DTYPE))

    @classmethod
    def fill(cls, shape: ShapeLike, value: float) -> Matrix:
        """Return a matrix of the given shape with every entry set to value."""
        valid: Shape = Shape.coerce(shape)
        entry: np.float32 = elementwise.to_entry(value)
        body: NDArray[np.float32] = np.full(
            valid.as_tuple(), entry, dtype=elementwise.DTYPE
        )
        return cls._from_body(valid, body)

    @classmethod
    def identity(cls, order: int) -> Matrix:
        """Return the square identity matrix of the given order."""
        valid: Shape = Shape.square(order)
        return cls._from_body(valid, np.eye(order, dtype=elementwise.DTYPE))

    @classmethod
    def from_shape_and_values(cls, shape: ShapeLike, values: Iterable[float]) -> Matrix:
        """Return a matrix from a flat, row-major sequence of entries."""
        valid: Shape = Shape.coerce(shape)
        flat: List[Any] = list(values)
        if len(flat) != valid.rows * valid.cols:
            raise MatrixError(
                f"a {valid} matrix needs {valid.rows * valid.cols} values, "
                f"got {len(flat)}"
            )
        return cls(
            [flat[r * valid.cols : (r + 1) * valid.cols] for r in range(valid.rows)]
        )

    @classmethod
    def _from_body(cls, shape: Shape, body: NDArray[np.float32]) -> Matrix:
        """Wrap a float32 buffer whose shape is already validated."""
        matrix: Matrix = cls.__new__(cls)
        matrix._shape = shape
        matrix._body = body
        return matrix

    #
    # Extents and entry access
    #

    @property
    def shape(self) -> Shape:
        return self._shape

    @property
    def rows(self) -> int:
        return self._shape.rows

    @property
    def cols(self) -> int:
        return self._shape.cols

    def size(self) -> Tuple[int, int]:
        """Return (rows, cols)."""
        return self._shape.as_tuple()

    def get(self, row: int, col: int) -> float:
        """Return the entry at (row, col).

        Raises MatrixIndexError if either index is out of range. Negative
        indices are out of range.
        """
        self._check_position(row, col)
        return float(self._body[row, col])

    def set(self, row: int, col: int, value: float) -> None:
        """Overwrite the entry at (row, col)."""
        self._check_position(row, col)
        entry: np.float32 = elementwise.to_entry(value)
        self._check_writable()
        self._body[row, col] = entry

    def row(self, index: int) -> List[float]:
        """Return a copy of one row."""
        self._check_index(index, self._shape.rows, "row")
        return [float(value) for value in self._body[index]]

    def column(self, index: int) -> List[float]:
        """Return a copy of one column."""
        self._check_index(index, self._shape.cols, "column")
        return [float(value) for value in self._body[:, index]]

    def __getitem__(self, position: Tuple[int, int]) -> float:
        row, col = _unpack_position(position)
        return self.get(row, col)

    def __setitem__(self, position: Tuple[int, int], value: float) -> None:
        row, col = _unpack_position(position)
        self.set(row, col, value)

    def __len__(self) -> int:
        return self._shape.rows

    def __iter__(self) -> Iterator[List[float]]:
        for index in range(self._shape.rows):
            yield self.row(index)

    def to_list(self) -> List[List[float]]:
        """Return the entries as nested lists of Python floats."""
        return [[float(value) for value in row] for row in self._body]

    def to_numpy(self) -> NDArray[np.float32]:
        """Return a float32 copy of the entries."""
        return self._body.copy()

    def copy(self) -> Matrix:
        """Return a writable copy of this matrix."""
        return Matrix._from_body(self._shape, self._body.copy())

    def __copy__(self) -> Matrix:
        return self.copy()

    def __deepcopy__(self, memo: Dict[int, Any]) -> Matrix:
        return self.copy()

    def is_read_only(self) -> bool:
        """Return True when in-place operations are rejected."""
        return not self._body.flags.writeable

    def _freeze(self) -> Matrix:
        """Mark the entries read-only and return self."""
        self._body.flags.writeable = False
        return self

    #
    # Structural operations
    #

    def transpose(self) -> Matrix:
        """Return a new Cols x Rows matrix with out[c][r] == self[r][c]."""
        return Matrix._from_body(
            self._shape.transposed(), elementwise.transpose(self._body)
        )

    @property
    def T(self) -> Matrix:
        return self.transpose()

    def swap_rows(self, first: int, second: int) -> None:
        """Exchange two rows in place."""
        self._check_index(first, self._shape.rows, "row")
        self._check_index(second, self._shape.rows, "row")
        self._check_writable()
        if first != second:
            self._body[[first, second]] = self._body[[second, first]]

    def for_each(self, transform: Callable[[float], float]) -> None:
        """Replace every entry with transform(entry).

        The transform is called once per entry in row-major order and must
        return a real number, otherwise MatrixError is raised. If the
        transform raises or returns a non-number, the matrix is left unchanged.
        """
        self._check_writable()
        result: NDArray[np.float32] = self._body.copy()
        for r in range(self._shape.rows):
            for c in range(self._shape.cols):
                result[r, c] = elementwise.to_entry(
                    transform(float(self._body[r, c]))
                )
        self._body[...] = result

    #
    # Comparison and rendering
    #

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._shape == other._shape and bool(
            np.array_equal(self._body, other._body)
        )

    def is_close(self, other: Matrix, params: Optional[MatrixParams] = None) -> bool:
        """Return True when extents match and entries agree within tolerance.

        Tolerances come from params.tolerance, which defaults to
        MatrixParams.defaults(). Invalid params raise MatrixConfigError.
        """
        if not isinstance(other, Matrix):
            raise TypeError("is_close expects a Matrix")
        tolerance: ToleranceParams = _config(params).tolerance()
        if self._shape != other._shape:
            return False
        return bool(
            np.allclose(
                self._body, other._body, rtol=tolerance.rtol, atol=tolerance.atol
            )
        )

    def render(self, params: Optional[MatrixParams] = None) -> str:
        """Render one bracketed line per row using params.render."""
        return render_rows(self._body, _config(params).render())

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return render_repr(self._body)

    #
    # Arithmetic
    #

    def __add__(self, other: Any) -> Matrix:
        return self._combine(other, np.add, "addition")

    def __radd__(self, other: Any) -> Matrix:
        return self._combine(other, np.add, "addition")

    def __sub__(self, other: Any) -> Matrix:
        return self._combine(other, np.subtract, "subtraction")

    def __mul__(self, other: Any) -> Matrix:
        if isinstance(other, Matrix):
            return self.__matmul__(other)
        return self._combine(other, np.multiply, "multiplication")

    def __rmul__(self, other: Any) -> Matrix:
        return self._combine(other, np.multiply, "multiplication")

    def __truediv__(self, other: Any) -> Matrix:
        if isinstance(other, Matrix):
            return NotImplemented
        return self._combine(other, np.true_divide, "division")

    def __matmul__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        elementwise.require_inner_match(self._shape, other._shape)
        return Matrix._from_body(
            Shape(self._shape.rows, other._shape.cols),
            elementwise.matmul(self._body, other._body),
        )

    def __neg__(self) -> Matrix:
        return Matrix._from_body(self._shape, np.negative(self._body))

    def __iadd__(self, other: Any) -> Matrix:
        return self._apply(other, np.add, "addition")

    def __isub__(self, other: Any) -> Matrix:
        return self._apply(other, np.subtract, "subtraction")

    def __imul__(self, other: Any) -> Matrix:
        if isinstance(other, Matrix):
            # A product can change the extents, which in-place updates never do
            raise TypeError("in-place matrix product is not supported")
        return self._apply(other, np.multiply, "multiplication")

    def __itruediv__(self, other: Any) -> Matrix:
        if isinstance(other, Matrix):
            return NotImplemented
        return self._apply(other, np.true_divide, "division")

    def _combine(self, other: Any, op: np.ufunc, op_name: str) -> Matrix:
        if isinstance(other, Matrix):
            elementwise.require_same_shape(self._shape, other._shape, op_name)
            return Matrix._from_body(
                self._shape, elementwise.combine(self._body, other._body, op)
            )
        if elementwise.is_scalar(other):
            return Matrix._from_body(
                self._shape, elementwise.combine_scalar(self._body, other, op)
            )
        return NotImplemented

    def _apply(self, other: Any, op: np.ufunc, op_name: str) -> Matrix:
        if isinstance(other, Matrix):
            elementwise.require_same_shape(self._shape, other._shape, op_name)
            self._check_writable()
            elementwise.apply(self._body, other._body, op)
            return self
        if elementwise.is_scalar(other):
            self._check_writable()
            elementwise.apply_scalar(self._body, other, op)
            return self
        return NotImplemented

    #
    # Precondition checks
    #

    def _check_position(self, row: int, col: int) -> None:
        self._check_index(row, self._shape.rows, "row")
        self._check_index(col, self._shape.cols, "column")

    @staticmethod
    def _check_index(index: int, extent: int, name: str) -> None:
        if not is_integer(index):
            raise TypeError(f"{name} index must be an int, got {index!r}")
        if not 0 <= index < extent:
            raise MatrixIndexError(
                f"{name} index {index} out of range for extent {extent}"
            )

    def _check_writable(self) -> None:
        if not self._body.flags.writeable:
            _LOG.debug("Rejected write to read-only %s matrix", self._shape)
            raise ReadOnlyMatrixError("matrix is read-only, use copy() first")


def _as_row_lists(rows_of_entries: Iterable[Sequence[float]]) -> List[List[Any]]:
    """Return the initializer as a list of row lists."""
    if isinstance(rows_of_entries, np.ndarray):
        if rows_of_entries.ndim != 2:
            if rows_of_entries.size == 0:
                return []
            raise MatrixError("initializer must be two-dimensional")
        return rows_of_entries.tolist()
    if isinstance(rows_of_entries, (str, bytes)):
        raise MatrixError("initializer must be a sequence of rows")
    rows: List[List[Any]] = []
    try:
        for row in rows_of_entries:
            if isinstance(row, (str, bytes)) or not isinstance(row, Iterable):
                raise MatrixError("initializer must be a sequence of rows")
            rows.append(list(row))
    except TypeError as exc:
        raise MatrixError("initializer must be a sequence of rows") from exc
    return rows


def _to_float32(rows: List[List[Any]]) -> NDArray[np.float32]:
    """Return validated entries as a float32 buffer."""
    try:
        exact: NDArray[np.float64] = np.array(rows, dtype=np.float64)
    except OverflowError as exc:
        raise MatrixError("entries must fit in a float") from exc
    with np.errstate(all="ignore"):
        body: NDArray[np.float32] = exact.astype(elementwise.DTYPE)
    finite: NDArray[np.bool_] = np.isfinite(exact)
    if np.any(body[finite].astype(np.float64) != exact[finite]):
        _LOG.debug("Rounded initializer entries to float32")
    return body


def _unpack_position(position: Any) -> Tuple[int, int]:
    """Return (row, col) from a subscript."""
    if not isinstance(position, tuple) or len(position) != 2:
        raise TypeError("matrix subscripts must be (row, col) pairs")
    return position[0], position[1]


def _config(params: Optional[MatrixParams]) -> MatrixConfig:
    """Return a validated configuration, using defaults when params is None."""
    if params is None:
        params = MatrixParams.defaults()
    return MatrixConfig(params)
