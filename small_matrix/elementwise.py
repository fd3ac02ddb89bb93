################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Float32 kernels shared by the matrix operators.

Every elementwise operator is one of four helpers parameterized by a binary
numpy ufunc, so the per-entry semantics are identical across operators:

    - combine(a, b, op)         -> new buffer, op(a[i][j], b[i][j])
    - combine_scalar(a, s, op)  -> new buffer, op(a[i][j], s)
    - apply(a, b, op)           -> a[i][j] = op(a[i][j], b[i][j])
    - apply_scalar(a, s, op)    -> a[i][j] = op(a[i][j], s)

Operands are float32 buffers of identical shape; callers check extents first.
Floating-point exceptions follow IEEE semantics and never raise.
"""

from __future__ import annotations

import logging
import numbers
from typing import Any

import numpy as np
from numpy.typing import NDArray

from small_matrix.matrix_errors import DimensionMismatchError
from small_matrix.matrix_errors import MatrixError
from small_matrix.shape import Shape


DTYPE: Any = np.float32

_LOG: logging.Logger = logging.getLogger(__name__)


def is_scalar(value: Any) -> bool:
    """Return True for real numbers accepted as scalar operands."""
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, numbers.Real)


def to_entry(value: Any) -> np.float32:
    """Return a real number as a float32 entry.

    Finite values beyond the float32 range saturate to +-inf. Values that do
    not fit in a float raise MatrixError.
    """
    if not is_scalar(value):
        raise MatrixError(f"entries must be real numbers, got {value!r}")
    try:
        exact: float = float(value)
    except OverflowError as exc:
        raise MatrixError("entries must fit in a float") from exc
    with np.errstate(all="ignore"):
        return DTYPE(exact)


def require_same_shape(left: Shape, right: Shape, op_name: str) -> None:
    """Raise DimensionMismatchError unless both shapes are equal."""
    if left != right:
        _LOG.debug("Rejected %s of %s and %s matrices", op_name, left, right)
        raise DimensionMismatchError(
            f"{op_name} requires equal extents, got {left} and {right}"
        )


def require_inner_match(left: Shape, right: Shape) -> None:
    """Raise DimensionMismatchError unless left.cols equals right.rows."""
    if left.cols != right.rows:
        _LOG.debug("Rejected product of %s and %s matrices", left, right)
        raise DimensionMismatchError(
            f"matrix product requires left columns to equal right rows, "
            f"got {left} and {right}"
        )


def combine(
    left: NDArray[np.float32], right: NDArray[np.float32], op: np.ufunc
) -> NDArray[np.float32]:
    with np.errstate(all="ignore"):
        return op(left, right, dtype=DTYPE)


def combine_scalar(
    left: NDArray[np.float32], scalar: float, op: np.ufunc
) -> NDArray[np.float32]:
    entry: np.float32 = to_entry(scalar)
    with np.errstate(all="ignore"):
        return op(left, entry, dtype=DTYPE)


def apply(left: NDArray[np.float32], right: NDArray[np.float32], op: np.ufunc) -> None:
    with np.errstate(all="ignore"):
        op(left, right, out=left, dtype=DTYPE)


def apply_scalar(left: NDArray[np.float32], scalar: float, op: np.ufunc) -> None:
    entry: np.float32 = to_entry(scalar)
    with np.errstate(all="ignore"):
        op(left, entry, out=left, dtype=DTYPE)


def transpose(body: NDArray[np.float32]) -> NDArray[np.float32]:
    """Return a new buffer with out[c][r] = body[r][c]."""
    rows: int = body.shape[0]
    cols: int = body.shape[1]
    result: NDArray[np.float32] = np.empty((cols, rows), dtype=DTYPE)
    for r in range(rows):
        for c in range(cols):
            result[c, r] = body[r, c]
    return result


def matmul(
    left: NDArray[np.float32], right: NDArray[np.float32]
) -> NDArray[np.float32]:
    """Return the matrix product of an MxL and an LxN buffer.

    The right operand is transposed first so both operands are walked
    row-major, and each output entry is the float32 dot product

        out[i][j] = sum_k left[i][k] * right_t[j][k]
    """
    right_t: NDArray[np.float32] = transpose(right)
    rows: int = left.shape[0]
    cols: int = right_t.shape[0]
    result: NDArray[np.float32] = np.zeros((rows, cols), dtype=DTYPE)
    with np.errstate(all="ignore"):
        for i in range(rows):
            left_row: NDArray[np.float32] = left[i]
            for j in range(cols):
                right_row: NDArray[np.float32] = right_t[j]
                acc: np.float32 = DTYPE(0.0)
                for s, o in zip(left_row, right_row):
                    acc = acc + s * o
                result[i, j] = acc
    return result
