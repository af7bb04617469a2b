"""
Gradient vector tables for Perlin noise.

Hand-curated unit direction sets, one per dimension, spread evenly over the
circle, sphere and hypersphere. A hash value selects a gradient by reduction
modulo the table length. The tables are read-only numpy arrays shared by all
Perlin instances.

Author: B.G.
"""

from __future__ import annotations

import math

import numpy as np

_D2 = 1.0 / math.sqrt(2.0)
_D3 = 1.0 / math.sqrt(3.0)
_D4 = 0.5


def _frozen(rows: list) -> np.ndarray:
    arr = np.array(rows, dtype=np.float64)
    arr.flags.writeable = False
    return arr


# 8-direction 2D gradient vectors
GRADIENTS_2D = _frozen([
    [1.0, 0.0], [-1.0, 0.0], [0.0, 1.0], [0.0, -1.0],  # Axis-aligned gradients
    [_D2, _D2], [-_D2, _D2], [_D2, -_D2], [-_D2, -_D2],  # Diagonal gradients
])

_CUBE_EDGES = [
    [_D2, _D2, 0.0], [-_D2, _D2, 0.0], [_D2, -_D2, 0.0], [-_D2, -_D2, 0.0],
    [_D2, 0.0, _D2], [-_D2, 0.0, _D2], [_D2, 0.0, -_D2], [-_D2, 0.0, -_D2],
    [0.0, _D2, _D2], [0.0, -_D2, _D2], [0.0, _D2, -_D2], [0.0, -_D2, -_D2],
]

_CUBE_CORNERS = [
    [_D3, _D3, _D3], [-_D3, _D3, _D3], [_D3, -_D3, _D3], [-_D3, -_D3, _D3],
    [_D3, _D3, -_D3], [-_D3, _D3, -_D3], [_D3, -_D3, -_D3], [-_D3, -_D3, -_D3],
]

# 12 edges twice plus 8 corners: 32 entries, so a hash in [0, 255] maps evenly
GRADIENTS_3D = _frozen(_CUBE_EDGES + _CUBE_EDGES + _CUBE_CORNERS)


def _tesseract_edges():
    # Midpoints of the 32 tesseract edges: one zero component, three of +-1
    edges = []
    for zero_axis in range(4):
        for signs in range(8):
            vec = []
            bit = 0
            for axis in range(4):
                if axis == zero_axis:
                    vec.append(0.0)
                else:
                    vec.append(-_D3 if (signs >> bit) & 1 else _D3)
                    bit += 1
            edges.append(vec)
    return edges


def _tesseract_corners():
    return [
        [-_D4 if (signs >> axis) & 1 else _D4 for axis in range(4)]
        for signs in range(16)
    ]


# 32 edges plus 16 corners twice: 64 entries
GRADIENTS_4D = _frozen(_tesseract_edges() + _tesseract_corners() + _tesseract_corners())

_GRADIENTS = {2: GRADIENTS_2D, 3: GRADIENTS_3D, 4: GRADIENTS_4D}


def gradient_table(dim: int) -> np.ndarray:
    """Return the gradient table for a dimension in {2, 3, 4}."""
    try:
        return _GRADIENTS[dim]
    except KeyError:
        raise ValueError(f"Gradients exist for 2, 3 or 4 dimensions, got {dim}") from None


def get_gradient(hash_val: int | np.ndarray, dim: int) -> np.ndarray:
    """
    Select the gradient vector(s) for hash value(s).

    Args:
        hash_val: int or integer numpy array of hash values
        dim: Dimension of the gradient (2, 3 or 4)

    Returns:
        Array of shape hash_val.shape + (dim,)

    Author: B.G.
    """
    table = gradient_table(dim)
    return table[np.mod(hash_val, len(table))]
