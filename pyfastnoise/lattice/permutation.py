"""
Seeded permutation tables for PyFastNoise.

A permutation table maps integer lattice coordinates to pseudo-random
indices. The table is a shuffled copy of [0, 255] built once per seed with a
Fisher-Yates shuffle and cached, so every Perlin instance with the same seed
shares the same read-only array.

Author: B.G.
"""

from __future__ import annotations

import logging
from functools import lru_cache

import numpy as np

from .. import constants as cte

logger = logging.getLogger(__name__)


def _reduce_seed(seed: int) -> int:
    """Reduce any integer seed (negative included) to an unsigned 32 bit value."""
    return int(seed) & 0xFFFFFFFF


@lru_cache(maxsize=1024)
def fisher_yates_permutation(seed: int) -> np.ndarray:
    """
    Generate a permutation table using Fisher-Yates shuffle algorithm.

    The random stream comes from a private numpy RandomState (MT19937), whose
    output numpy keeps stable across releases, so a seed maps to the same
    table on every platform and every run. The global numpy random state is
    left untouched.

    Args:
        seed: Random seed for reproducible permutation, any python int

    Returns:
        Read-only 256-element int64 permutation array

    Author: B.G.
    """
    seed = _reduce_seed(seed)
    rng = np.random.RandomState(seed)

    perm = np.arange(cte.TABLE_SIZE, dtype=np.int64)

    for i in range(cte.TABLE_SIZE - 1, 0, -1):
        j = rng.randint(0, i + 1)
        perm[i], perm[j] = perm[j], perm[i]

    perm.flags.writeable = False
    logger.debug("Built permutation table for seed %d", seed)
    return perm


class PermutationTable:
    """
    Immutable seeded lookup table used to hash lattice coordinates.

    Hashing folds the coordinates left to right: the first axis indexes the
    table directly, each further axis is XOR-ed with the previous result and
    looked up again. Coordinates are wrapped to the table size with a bit
    mask, which also handles negative coordinates.

    Author: B.G.
    """

    __slots__ = ("_seed", "_values")

    def __init__(self, seed: int = cte.DEFAULT_PERLIN_SEED):
        object.__setattr__(self, "_seed", int(seed))
        object.__setattr__(self, "_values", fisher_yates_permutation(_reduce_seed(seed)))

    @classmethod
    def build(cls, seed: int) -> PermutationTable:
        return cls(seed)

    def __setattr__(self, name, value):
        raise AttributeError("PermutationTable is immutable")

    def __repr__(self):
        return f"PermutationTable(seed={self._seed})"

    def __eq__(self, other):
        if not isinstance(other, PermutationTable):
            return NotImplemented
        return np.array_equal(self._values, other._values)

    def __hash__(self):
        return hash(self._values.tobytes())

    def __len__(self) -> int:
        return cte.TABLE_SIZE

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def values(self) -> np.ndarray:
        return self._values

    def hash(self, *coords: int | np.ndarray) -> int | np.ndarray:
        """
        Hash 1 to 4 integer lattice coordinates to an index in [0, 255].

        Args:
            *coords: Integer coordinates, python ints or integer numpy arrays
                     (arrays are hashed element-wise and must broadcast)

        Returns:
            int or numpy.ndarray of table indices

        Author: B.G.
        """
        if not coords:
            raise ValueError("hash needs at least one coordinate")

        values = self._values
        index = values[np.bitwise_and(coords[0], cte.TABLE_MASK)]
        for coord in coords[1:]:
            index = values[np.bitwise_xor(index, np.bitwise_and(coord, cte.TABLE_MASK))]
        return index
