################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Tests for matrix parameter schema."""

from __future__ import annotations

import dataclasses
import math
from typing import Any

import pytest

from small_matrix.config.matrix_params import MatrixParams
from small_matrix.config.matrix_params import MatrixParamsError
from small_matrix.config.matrix_params import RenderParams
from small_matrix.config.matrix_params import ToleranceParams


def test_defaults_validate() -> None:
    """Default parameters should pass validation."""
    params: MatrixParams = MatrixParams.defaults()
    params.validate()
    assert params == MatrixParams()


@pytest.mark.parametrize("rtol", [-1e-3, math.inf, math.nan, "1e-5"])
def test_invalid_rtol(rtol: Any) -> None:
    """rtol must be a finite non-negative number."""
    params: MatrixParams = MatrixParams.defaults().replace(
        tolerance=ToleranceParams(rtol=rtol)
    )
    with pytest.raises(MatrixParamsError):
        params.validate()


def test_invalid_atol() -> None:
    """atol must be non-negative."""
    params: MatrixParams = MatrixParams.defaults().replace(
        tolerance=dataclasses.replace(MatrixParams.defaults().tolerance, atol=-1.0)
    )
    with pytest.raises(MatrixParamsError):
        params.validate()


def test_invalid_separator() -> None:
    """The separator must be a single-line string."""
    with pytest.raises(MatrixParamsError):
        MatrixParams(render=RenderParams(separator="\n")).validate()
    with pytest.raises(MatrixParamsError):
        MatrixParams(render=RenderParams(separator=1)).validate()  # type: ignore[arg-type]


def test_as_nested_dict() -> None:
    """as_nested_dict should flatten dataclasses into dicts."""
    nested: dict = MatrixParams.defaults().as_nested_dict()
    assert nested == {
        "tolerance": {"rtol": 1e-5, "atol": 1e-6},
        "render": {"separator": ", ", "open_bracket": "[", "close_bracket": "]"},
    }


def test_params_are_frozen() -> None:
    """Parameters should be immutable."""
    params: MatrixParams = MatrixParams.defaults()
    with pytest.raises(dataclasses.FrozenInstanceError):
        params.tolerance = ToleranceParams()  # type: ignore[misc]
