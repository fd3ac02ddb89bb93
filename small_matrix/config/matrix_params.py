################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Structured configuration schema for matrix comparison and rendering."""

from __future__ import annotations

import math
from dataclasses import dataclass
from dataclasses import field
from dataclasses import fields
from dataclasses import replace
from typing import Any


# Relative tolerance for approximate entry comparison
TOLERANCE_RTOL: float = 1e-5
# Absolute tolerance for approximate entry comparison, near float32 epsilon
TOLERANCE_ATOL: float = 1e-6

# Separator between rendered entries of a row
RENDER_SEPARATOR: str = ", "
# Opening bracket of a rendered row
RENDER_OPEN_BRACKET: str = "["
# Closing bracket of a rendered row
RENDER_CLOSE_BRACKET: str = "]"


class MatrixParamsError(Exception):
    """Raised when matrix parameter validation fails."""


def _require_finite_non_negative(value: float, name: str) -> None:
    """Require a finite, non-negative value."""
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        raise MatrixParamsError(f"{name} must be a number")
    if not math.isfinite(value):
        raise MatrixParamsError(f"{name} must be finite")
    if value < 0.0:
        raise MatrixParamsError(f"{name} must be non-negative")


def _require_str(value: Any, name: str) -> None:
    """Require a string value."""
    if not isinstance(value, str):
        raise MatrixParamsError(f"{name} must be a str")


@dataclass(frozen=True)
class ToleranceParams:
    """Tolerances used when comparing matrices approximately."""

    # Relative tolerance
    rtol: float = TOLERANCE_RTOL
    # Absolute tolerance
    atol: float = TOLERANCE_ATOL


@dataclass(frozen=True)
class RenderParams:
    """Row formatting used by the text rendering."""

    # Separator between entries
    separator: str = RENDER_SEPARATOR
    # Opening bracket of a row
    open_bracket: str = RENDER_OPEN_BRACKET
    # Closing bracket of a row
    close_bracket: str = RENDER_CLOSE_BRACKET


@dataclass(frozen=True)
class MatrixParams:
    """Complete configuration tree for matrix comparison and rendering."""

    tolerance: ToleranceParams = field(default_factory=ToleranceParams)
    render: RenderParams = field(default_factory=RenderParams)

    @classmethod
    def defaults(cls) -> MatrixParams:
        """Return the default parameter tree."""
        return cls(
            tolerance=ToleranceParams(),
            render=RenderParams(),
        )

    def validate(self) -> None:
        """Validate parameter invariants."""
        _require_finite_non_negative(self.tolerance.rtol, "tolerance.rtol")
        _require_finite_non_negative(self.tolerance.atol, "tolerance.atol")

        _require_str(self.render.separator, "render.separator")
        _require_str(self.render.open_bracket, "render.open_bracket")
        _require_str(self.render.close_bracket, "render.close_bracket")
        if "\n" in self.render.separator:
            raise MatrixParamsError("render.separator must not contain newlines")

    def replace(self, **namespace_overrides: Any) -> MatrixParams:
        """Return a modified copy of the parameters."""
        return replace(self, **namespace_overrides)

    def as_nested_dict(self) -> dict[str, Any]:
        """Return a nested dict representation for debugging."""
        return _dataclass_to_dict(self)


def _dataclass_to_dict(value: Any) -> Any:
    """Convert dataclasses into plain Python values."""
    if hasattr(value, "__dataclass_fields__"):
        return {
            field.name: _dataclass_to_dict(getattr(value, field.name))
            for field in fields(value)
        }
    return value
