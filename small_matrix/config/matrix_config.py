################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""High-level configuration wrapper for matrix comparison and rendering."""

from __future__ import annotations

from dataclasses import dataclass

from small_matrix.config.matrix_params import MatrixParams
from small_matrix.config.matrix_params import MatrixParamsError
from small_matrix.config.matrix_params import RenderParams
from small_matrix.config.matrix_params import ToleranceParams


class MatrixConfigError(Exception):
    """Raised when matrix configuration validation fails."""


@dataclass(frozen=True)
class MatrixConfig:
    """Convenience wrapper around matrix parameters."""

    params: MatrixParams

    def __init__(self, params: MatrixParams) -> None:
        """Initialize the configuration wrapper and validate."""
        object.__setattr__(self, "params", params)
        self.validate()

    @classmethod
    def defaults(cls) -> MatrixConfig:
        """Return a configuration built from default parameters."""
        return cls(MatrixParams.defaults())

    def validate(self) -> None:
        """Validate parameter invariants and cross-field policies."""
        try:
            self.params.validate()
        except MatrixParamsError as exc:
            raise MatrixConfigError(str(exc)) from exc

        render: RenderParams = self.params.render
        if bool(render.open_bracket) != bool(render.close_bracket):
            raise MatrixConfigError(
                "render.open_bracket and render.close_bracket must both be set "
                "or both be empty"
            )

    def tolerance(self) -> ToleranceParams:
        """Return the configured comparison tolerances."""
        return self.params.tolerance

    def render(self) -> RenderParams:
        """Return the configured rendering parameters."""
        return self.params.render
