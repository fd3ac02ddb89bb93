################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Text rendering of matrix buffers."""

from __future__ import annotations

from typing import List
from typing import Optional

import numpy as np
from numpy.typing import NDArray

from small_matrix.config.matrix_params import MatrixParams
from small_matrix.config.matrix_params import RenderParams


def format_entry(value: np.float32) -> str:
    """Return the shortest repr of a float32 entry, e.g. 7.0 or 0.1."""
    return str(np.float32(value))


def format_row(row: NDArray[np.float32], params: Optional[RenderParams] = None) -> str:
    """Return one row as a bracketed, separated list of entries."""
    if params is None:
        params = MatrixParams.defaults().render
    entries: List[str] = [format_entry(value) for value in row]
    return params.open_bracket + params.separator.join(entries) + params.close_bracket


def render_rows(
    body: NDArray[np.float32], params: Optional[RenderParams] = None
) -> str:
    """Render one line per row, each terminated by a newline."""
    return "".join(format_row(row, params) + "\n" for row in body)


def render_repr(body: NDArray[np.float32]) -> str:
    """Return an evaluable Matrix(...) repr for finite entries."""
    rows: List[str] = [format_row(row) for row in body]
    return "Matrix([" + ", ".join(rows) + "])"
