################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Named read-only matrices.

Rotations are counter-clockwise about the origin and act by left
multiplication on column vectors, e.g. R90_2 * [x, y]^T == [-y, x]^T.
"""

from __future__ import annotations

from small_matrix.matrix import Matrix


# Identity matrix of order 2
I_2: Matrix = Matrix.identity(2)._freeze()
# Identity matrix of order 3
I_3: Matrix = Matrix.identity(3)._freeze()
# Identity matrix of order 4
I_4: Matrix = Matrix.identity(4)._freeze()

# 90 degree rotation
R90_2: Matrix = Matrix(
    [
        [0.0, -1.0],
        [1.0, 0.0],
    ]
)._freeze()
# 180 degree rotation
R180_2: Matrix = Matrix(
    [
        [-1.0, 0.0],
        [0.0, -1.0],
    ]
)._freeze()
# 270 degree rotation
R270_2: Matrix = Matrix(
    [
        [0.0, 1.0],
        [-1.0, 0.0],
    ]
)._freeze()
