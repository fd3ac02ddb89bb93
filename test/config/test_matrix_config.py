################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Tests for matrix configuration wrapper."""

from __future__ import annotations

import dataclasses

import pytest

from small_matrix.config.matrix_config import MatrixConfig
from small_matrix.config.matrix_config import MatrixConfigError
from small_matrix.config.matrix_params import MatrixParams
from small_matrix.config.matrix_params import ToleranceParams
from small_matrix.matrix import Matrix


def test_defaults_construct() -> None:
    """Default parameters should construct a MatrixConfig."""
    config: MatrixConfig = MatrixConfig.defaults()
    assert config.params == MatrixParams.defaults()


def test_invalid_params_raise_config_error() -> None:
    """Parameter validation errors should surface as MatrixConfigError."""
    params: MatrixParams = MatrixParams.defaults().replace(
        tolerance=ToleranceParams(rtol=-1.0)
    )
    with pytest.raises(MatrixConfigError):
        MatrixConfig(params)


def test_unbalanced_brackets() -> None:
    """Brackets must both be set or both be empty."""
    params: MatrixParams = MatrixParams.defaults().replace(
        render=dataclasses.replace(MatrixParams.defaults().render, close_bracket="")
    )
    with pytest.raises(MatrixConfigError):
        MatrixConfig(params)


def test_accessors_drive_matrix() -> None:
    """Accessors should feed comparison and rendering."""
    params: MatrixParams = MatrixParams.defaults().replace(
        tolerance=ToleranceParams(rtol=0.0, atol=0.5),
        render=dataclasses.replace(
            MatrixParams.defaults().render, open_bracket="", close_bracket=""
        ),
    )
    config: MatrixConfig = MatrixConfig(params)
    matrix: Matrix = Matrix([[1.0, 2.0]])

    assert config.tolerance() == params.tolerance
    assert config.render() == params.render
    assert matrix.is_close(matrix + 0.25, config.params)
    assert matrix.render(config.params) == "1.0, 2.0\n"
