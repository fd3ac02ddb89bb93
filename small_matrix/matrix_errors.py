################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Exception types raised by small_matrix."""

from __future__ import annotations


class MatrixError(Exception):
    """Base class for matrix errors, also raised for malformed initializers."""


class EmptyDimensionError(MatrixError):
    """Raised when a matrix would be constructed with a zero extent."""

    def __init__(self, rows: int, cols: int) -> None:
        super().__init__(
            f"matrix extents must be non-zero, got {rows} rows and {cols} columns"
        )
        self.rows: int = rows
        self.cols: int = cols


class DimensionMismatchError(MatrixError, ValueError):
    """Raised when operands of a binary operation have incompatible extents."""


class MatrixIndexError(MatrixError, IndexError):
    """Raised when a row or column index is out of range."""


class ReadOnlyMatrixError(MatrixError):
    """Raised when mutating a matrix whose entries are read-only."""
