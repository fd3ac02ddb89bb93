################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Configuration for matrix comparison and rendering."""

from small_matrix.config.matrix_config import MatrixConfig
from small_matrix.config.matrix_config import MatrixConfigError
from small_matrix.config.matrix_params import MatrixParams
from small_matrix.config.matrix_params import MatrixParamsError
from small_matrix.config.matrix_params import RenderParams
from small_matrix.config.matrix_params import ToleranceParams


__all__ = [
    "MatrixConfig",
    "MatrixConfigError",
    "MatrixParams",
    "MatrixParamsError",
    "RenderParams",
    "ToleranceParams",
]
