################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Small dense float32 matrices with dimension-checked arithmetic."""

from small_matrix.constants import I_2
from small_matrix.constants import I_3
from small_matrix.constants import I_4
from small_matrix.constants import R90_2
from small_matrix.constants import R180_2
from small_matrix.constants import R270_2
from small_matrix.matrix import Matrix
from small_matrix.matrix_errors import DimensionMismatchError
from small_matrix.matrix_errors import EmptyDimensionError
from small_matrix.matrix_errors import MatrixError
from small_matrix.matrix_errors import MatrixIndexError
from small_matrix.matrix_errors import ReadOnlyMatrixError
from small_matrix.shape import Shape


__all__ = [
    "DimensionMismatchError",
    "EmptyDimensionError",
    "I_2",
    "I_3",
    "I_4",
    "Matrix",
    "MatrixError",
    "MatrixIndexError",
    "R180_2",
    "R270_2",
    "R90_2",
    "ReadOnlyMatrixError",
    "Shape",
]
