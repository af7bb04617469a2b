"""
Perlin noise generation for PyFastNoise.

Gradient lattice noise in 2, 3 and 4 dimensions. Every corner of the lattice
cell containing the point contributes a surflet: the dot product of its
gradient with the distance to the point, attenuated by (1 - |d|^2)^4. The
falloff reaches zero at unit distance, so no separate interpolation curve is
needed and the field stays continuous across cell boundaries.

Optional periodicity reduces the lattice coordinates modulo a per-axis period
so the output tiles seamlessly every `period` units.

Author: B.G.
"""

from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass, field, replace
from typing import Sequence

import numpy as np

from .. import constants as cte
from ..lattice import PermutationTable, gradient_table
from .noise_module import NoiseModule

logger = logging.getLogger(__name__)

_SCALES = {
    2: cte.PERLIN_SCALE_2D,
    3: cte.PERLIN_SCALE_3D,
    4: cte.PERLIN_SCALE_4D,
}

# Corner selectors: 0 picks the near corner on an axis, 1 the far one
_CORNERS = {dim: tuple(itertools.product((0, 1), repeat=dim)) for dim in _SCALES}


def normalize_period(period: int | Sequence[int]) -> int | tuple[int, ...]:
    """
    Clamp a period to valid values.

    Args:
        period: int, or sequence of per-axis ints

    Returns:
        int or tuple of ints, every value >= 1
    """
    if np.ndim(period) == 0:
        value = int(period)
        if value < 1:
            logger.debug("Period %d clamped to 1", value)
            value = 1
        return value
    return tuple(normalize_period(p) for p in period)


def axis_periods(period: int | tuple[int, ...], dim: int) -> tuple[int, ...]:
    """Expand a normalized period to one value per axis of a `dim`-D point."""
    if isinstance(period, int):
        return (period,) * dim
    if len(period) < dim:
        raise ValueError(f"Period {period} has fewer axes than the {dim}D point")
    return tuple(period[:dim])


@dataclass(frozen=True)
class Perlin(NoiseModule):
    """
    Noise module that outputs 2/3/4-dimensional Perlin noise.

    Output lies roughly in [-1, 1]. Instances are immutable: `with_seed` and
    `with_period` return new instances.

    Attributes:
        seed: Seed of the permutation table
        period: Extent at which the lattice wraps around, an int for all axes
                or a tuple of per-axis values
        enable_period: Whether lattice coordinates are wrapped

    Author: B.G.
    """

    seed: int = cte.DEFAULT_PERLIN_SEED
    period: int | tuple[int, ...] = cte.DEFAULT_PERLIN_PERIOD
    enable_period: bool = False
    table: PermutationTable = field(default=None, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "period", normalize_period(self.period))
        if self.table is None or self.table.seed != self.seed:
            object.__setattr__(self, "table", PermutationTable(self.seed))

    def with_seed(self, seed: int) -> Perlin:
        if seed == self.seed:
            return self
        return replace(self, seed=seed, table=None)

    def with_period(self, period: int | tuple[int, ...]) -> Perlin:
        """Enable periodic wrap-around with the given (per-axis) period."""
        return replace(self, period=period, enable_period=True)

    def without_period(self) -> Perlin:
        return replace(self, enable_period=False)

    def _evaluate(self, point: tuple[np.ndarray, ...]) -> np.ndarray:
        dim = len(point)
        dtype = point[0].dtype
        gradients = gradient_table(dim).astype(dtype, copy=False)

        # NaN/inf coordinates give NaN distances and cast to garbage indices,
        # so the result is NaN whatever the lookup returns.
        with np.errstate(invalid="ignore", over="ignore"):
            floored = tuple(np.floor(c) for c in point)
            near_distance = tuple(c - f for c, f in zip(point, floored))
            far_distance = tuple(d - 1.0 for d in near_distance)
            near = tuple(f.astype(np.int64) for f in floored)
            far = tuple(n + 1 for n in near)

        if self.enable_period:
            periods = axis_periods(self.period, dim)
            near = tuple(np.mod(n, p) for n, p in zip(near, periods))
            far = tuple(np.mod(f, p) for f, p in zip(far, periods))

        total = None
        for corner in _CORNERS[dim]:
            coords = tuple(far[a] if c else near[a] for a, c in enumerate(corner))
            distance = tuple(far_distance[a] if c else near_distance[a] for a, c in enumerate(corner))
            contribution = _surflet(self.table, coords, distance, gradients)
            total = contribution if total is None else total + contribution

        return total * _SCALES[dim]


def _surflet(table: PermutationTable, corner: tuple, distance: tuple, gradients: np.ndarray) -> np.ndarray:
    """
    Falloff-weighted gradient contribution of one lattice corner.

    np.maximum keeps NaN, so non-finite inputs propagate instead of being
    silently zeroed by the attenuation test.
    """
    attn = 1.0 - sum(d * d for d in distance)
    grad = gradients[np.mod(table.hash(*corner), len(gradients))]
    dot = sum(d * grad[..., axis] for axis, d in enumerate(distance))
    attn = np.maximum(attn, 0.0)
    attn2 = attn * attn
    return attn2 * attn2 * dot
