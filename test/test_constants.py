################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Tests for the named identity and rotation matrices."""

from __future__ import annotations

from typing import Any

import numpy as np
import pytest

from small_matrix.constants import I_2
from small_matrix.constants import I_3
from small_matrix.constants import I_4
from small_matrix.constants import R90_2
from small_matrix.constants import R180_2
from small_matrix.constants import R270_2
from small_matrix.matrix import Matrix
from small_matrix.matrix_errors import ReadOnlyMatrixError


@pytest.mark.parametrize("identity", [I_2, I_3, I_4])
def test_identity_is_multiplicative_identity(identity: Matrix) -> None:
    """A * I == I * A == A for square A."""
    order: int = identity.rows
    matrix: Matrix = Matrix.from_shape_and_values(
        (order, order), range(1, order * order + 1)
    )
    assert matrix * identity == identity * matrix
    assert matrix * identity == matrix


@pytest.mark.parametrize("identity", [I_2, I_3, I_4])
def test_identity_random(identity: Matrix) -> None:
    """The identity law should also hold for non-integer entries."""
    rng: np.random.Generator = np.random.default_rng(identity.rows)
    matrix: Matrix = Matrix(rng.normal(size=identity.size()))
    assert matrix * identity == matrix
    assert identity * matrix == matrix


@pytest.mark.parametrize(
    "rotation,expected",
    [
        (R90_2, [[-2.0], [1.0]]),
        (R180_2, [[-1.0], [-2.0]]),
        (R270_2, [[2.0], [-1.0]]),
    ],
)
def test_rotations(rotation: Matrix, expected: Any) -> None:
    """Rotations of [1, 2] by 90, 180 and 270 degrees."""
    vector: Matrix = Matrix([[1.0], [2.0]])
    assert rotation * vector == Matrix(expected)


@pytest.mark.parametrize("x,y", [(3.0, -0.5), (0.0, 4.0), (-1.25, -7.0)])
def test_rotation_laws(x: float, y: float) -> None:
    """R90 maps (x, y) to (-y, x), R180 to (-x, -y), R270 to (y, -x)."""
    vector: Matrix = Matrix([[x], [y]])
    assert R90_2 * vector == Matrix([[-y], [x]])
    assert R180_2 * vector == Matrix([[-x], [-y]])
    assert R270_2 * vector == Matrix([[y], [-x]])


def test_rotation_composition() -> None:
    """Two quarter turns make a half turn, four make the identity."""
    assert R90_2 * R90_2 == R180_2
    assert R90_2 * R270_2 == I_2
    assert R180_2 * R180_2 == I_2


def test_constants_are_read_only() -> None:
    """In-place operations on constants should be rejected."""
    identity: Matrix = I_2
    assert identity.is_read_only()
    with pytest.raises(ReadOnlyMatrixError):
        identity += 1.0
    with pytest.raises(ReadOnlyMatrixError):
        I_3.swap_rows(0, 1)
    with pytest.raises(ReadOnlyMatrixError):
        I_4.for_each(lambda value: value * 2.0)
    with pytest.raises(ReadOnlyMatrixError):
        R90_2[0, 0] = 5.0
    assert I_2 == Matrix([[1.0, 0.0], [0.0, 1.0]])
    assert R90_2 == Matrix([[0.0, -1.0], [1.0, 0.0]])


def test_in_place_product_on_constant_raises() -> None:
    """*= with a matrix should not rebind a name bound to a constant."""
    identity: Matrix = I_2
    with pytest.raises(TypeError):
        identity *= Matrix.identity(2)
    assert identity is I_2
    assert I_2 == Matrix([[1.0, 0.0], [0.0, 1.0]])


def test_constant_copy_is_writable() -> None:
    """A copy of a constant should accept in-place operations."""
    identity: Matrix = I_2.copy()
    identity *= 3.0
    assert not identity.is_read_only()
    assert identity == Matrix([[3.0, 0.0], [0.0, 3.0]])
    assert I_2 == Matrix([[1.0, 0.0], [0.0, 1.0]])
