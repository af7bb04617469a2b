"""
Lattice lookup submodule for PyFastNoise.

Seeded permutation tables hash integer lattice coordinates, and fixed
gradient sets turn those hashes into direction vectors. Both are immutable
and shared by every Perlin instance.

Author: B.G.
"""

from .permutation import PermutationTable, fisher_yates_permutation
from .gradients import (
    GRADIENTS_2D,
    GRADIENTS_3D,
    GRADIENTS_4D,
    get_gradient,
    gradient_table,
)

__all__ = [
    "PermutationTable",
    "fisher_yates_permutation",
    "GRADIENTS_2D",
    "GRADIENTS_3D",
    "GRADIENTS_4D",
    "get_gradient",
    "gradient_table",
]
