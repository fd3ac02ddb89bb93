################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Validated matrix extents."""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Any
from typing import Tuple
from typing import Union

import numpy as np

from small_matrix.matrix_errors import EmptyDimensionError
from small_matrix.matrix_errors import MatrixError


@dataclass(frozen=True)
class Shape:
    """Extent pair of a matrix.

    Every matrix is built from a Shape, so the non-zero extent check lives
    here and nowhere else.

    Attributes:
        rows: Number of rows, at least 1
        cols: Number of columns, at least 1
    """

    rows: int
    cols: int

    def __post_init__(self) -> None:
        """Validate both extents."""
        for name in ("rows", "cols"):
            value: int = getattr(self, name)
            if not is_integer(value):
                raise MatrixError(f"{name} must be an int")
            if value < 0:
                raise MatrixError(f"{name} must be non-negative")
            object.__setattr__(self, name, int(value))
        if self.rows == 0 or self.cols == 0:
            raise EmptyDimensionError(self.rows, self.cols)

    @classmethod
    def coerce(cls, shape: ShapeLike) -> Shape:
        """Return a Shape from a Shape or a (rows, cols) pair."""
        if isinstance(shape, Shape):
            return shape
        if len(shape) != 2:
            raise MatrixError("shape must be a (rows, cols) pair")
        return cls(shape[0], shape[1])

    @classmethod
    def square(cls, order: int) -> Shape:
        """Return the shape of a square matrix."""
        return cls(order, order)

    def as_tuple(self) -> Tuple[int, int]:
        """Return (rows, cols)."""
        return (self.rows, self.cols)

    def transposed(self) -> Shape:
        """Return the shape with rows and columns swapped."""
        return Shape(self.cols, self.rows)

    def is_square(self) -> bool:
        """Return True when rows equals cols."""
        return self.rows == self.cols

    def __str__(self) -> str:
        return f"{self.rows}x{self.cols}"


def is_integer(value: Any) -> bool:
    """Return True for integers accepted as extents and indices, bools excluded."""
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, numbers.Integral)


ShapeLike = Union[Shape, Tuple[int, int]]
