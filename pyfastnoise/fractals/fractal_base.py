"""
Shared octave skeleton for the fractal noise family.

Every fractal module samples an ordered vector of independently seeded
Perlin sources ("octaves"): octave i uses seed `seed + i`, is sampled at the
point scaled by `frequency * lacunarity^i` and weighted by `persistence^i`.
Variants only differ in how an octave's signal is folded into the running
state and how the final state is normalized, which they supply through
`_initial_state`, `_accumulate` and `_finish`.

The source vector is derived state. It is rebuilt inside the builder call
that changes one of its inputs (seed, octave count, period, or lacunarity
while periodic) and reused untouched by every other builder, so an instance
never observes stale sources.

Author: B.G.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace

from .. import constants as cte
from ..noise.noise_module import NoiseModule, scale_point
from ..noise.perlin_noise import Perlin, normalize_period

logger = logging.getLogger(__name__)


def clamp_octaves(octaves: int) -> int:
    """Clamp an octave count to [1, MAX_OCTAVES]."""
    clamped = min(max(int(octaves), 1), cte.MAX_OCTAVES)
    if clamped != octaves:
        logger.debug("Octave count %s clamped to %d", octaves, clamped)
    return clamped


def scale_period(period: int | tuple[int, ...], lacunarity: float) -> int | tuple[int, ...]:
    """Period of the next octave: each axis multiplied by lacunarity, truncated."""
    if isinstance(period, int):
        return int(period * lacunarity)
    return tuple(int(p * lacunarity) for p in period)


def build_sources(
    seed: int,
    octaves: int,
    period: int | tuple[int, ...] | None = None,
    lacunarity: float = cte.DEFAULT_LACUNARITY,
) -> tuple[Perlin, ...]:
    """
    Build the per-octave Perlin sources of a fractal module.

    Args:
        seed: Seed of the first octave, octave i gets seed + i
        octaves: Number of sources to build
        period: None for non-periodic noise, otherwise the period of the
                first octave (int or per-axis tuple)
        lacunarity: Frequency multiplier between octaves, used to scale the
                    period so every octave wraps at the same world distance

    Returns:
        tuple of Perlin instances, one per octave

    Author: B.G.
    """
    sources = []
    for i in range(octaves):
        if period is None:
            sources.append(Perlin(seed=seed + i))
        else:
            sources.append(Perlin(seed=seed + i, period=period, enable_period=True))
            period = scale_period(normalize_period(period), lacunarity)
    return tuple(sources)


@dataclass(frozen=True)
class Fractal(NoiseModule):
    """
    Base class of the fractal noise modules.

    Attributes:
        seed: Seed of the first octave
        octaves: Number of octaves, clamped to [1, 32]
        frequency: Cycles per unit length of the first octave
        lacunarity: Frequency multiplier between successive octaves
        persistence: Amplitude multiplier between successive octaves
        period: Wrap-around extent of the first octave (int or per-axis tuple)
        enable_period: Whether the noise tiles every `period` units
        sources: Per-octave Perlin sources, derived from the fields above

    Author: B.G.
    """

    seed: int = cte.DEFAULT_SEED
    octaves: int = cte.DEFAULT_OCTAVE_COUNT
    frequency: float = cte.DEFAULT_FREQUENCY
    lacunarity: float = cte.DEFAULT_LACUNARITY
    persistence: float = cte.DEFAULT_FBM_PERSISTENCE
    period: int | tuple[int, ...] = cte.DEFAULT_PERIOD
    enable_period: bool = False
    sources: tuple[Perlin, ...] = field(default=None, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "octaves", clamp_octaves(self.octaves))
        object.__setattr__(self, "period", normalize_period(self.period))
        if self.sources is None or len(self.sources) != self.octaves:
            logger.debug(
                "Building %d sources for %s (seed=%d, periodic=%s)",
                self.octaves, type(self).__name__, self.seed, self.enable_period,
            )
            period = self.period if self.enable_period else None
            object.__setattr__(
                self, "sources", build_sources(self.seed, self.octaves, period, self.lacunarity)
            )

    # Builders ---------------------------------------------------------------

    def with_seed(self, seed: int) -> Fractal:
        if seed == self.seed:
            return self
        return replace(self, seed=seed, sources=None)

    def with_octaves(self, octaves: int) -> Fractal:
        """
        Set the octave count.

        Requests below 1 give 1 and above MAX_OCTAVES give MAX_OCTAVES. Asking
        for the current count returns this very instance, sources included.
        """
        if octaves == self.octaves:
            return self
        octaves = clamp_octaves(octaves)
        if octaves == self.octaves:
            return self
        return replace(self, octaves=octaves, sources=None)

    def with_frequency(self, frequency: float) -> Fractal:
        return replace(self, frequency=frequency)

    def with_lacunarity(self, lacunarity: float) -> Fractal:
        if not self.enable_period:
            return replace(self, lacunarity=lacunarity)
        # Per-octave periods depend on lacunarity
        return replace(self, lacunarity=lacunarity, sources=None)

    def with_persistence(self, persistence: float) -> Fractal:
        return replace(self, persistence=persistence)

    def with_period(self, period: int | tuple[int, ...]) -> Fractal:
        """Make the noise tile every `period` units (int or per-axis tuple)."""
        return replace(self, period=period, enable_period=True, sources=None)

    def without_period(self) -> Fractal:
        if not self.enable_period:
            return self
        return replace(self, enable_period=False, sources=None)

    # Evaluation -------------------------------------------------------------

    def _evaluate(self, point):
        point = scale_point(point, self.frequency)
        state = self._initial_state()

        for i, source in enumerate(self.sources):
            signal = source._evaluate(point)
            state = self._accumulate(state, signal, i)
            point = scale_point(point, self.lacunarity)

        return self._finish(state)

    def amplitude(self, octave: int) -> float:
        return self.persistence ** octave

    def amplitude_sum(self) -> float:
        return sum(self.amplitude(i) for i in range(self.octaves))

    def _initial_state(self):
        return 0.0

    def _accumulate(self, state, signal, octave: int):
        raise NotImplementedError

    def _finish(self, state):
        return state
