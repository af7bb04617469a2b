"""
Domain warping modifiers for PyFastNoise.

Domain warping moves the sampled point before handing it to the source:
one auxiliary module per axis gives a displacement, scaled by a strength
factor and added to that axis. Displace takes arbitrary auxiliary modules,
Turbulence builds its own fBm distortion fields and keeps their period in
step with the source so periodic pipelines still tile.

Author: B.G.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace

from .. import constants as cte
from ..fractals.fbm import Fbm
from ..fractals.fractal_base import Fractal, clamp_octaves, scale_period
from ..noise.noise_module import NoiseModule, check_module
from ..noise.perlin_noise import normalize_period

logger = logging.getLogger(__name__)


def _displace(point: tuple, source: NoiseModule, displacements: tuple, strength: float):
    dim = len(point)
    if len(displacements) < dim:
        raise ValueError(
            f"{len(displacements)} displacement modules cannot warp a {dim}D point"
        )
    displaced = tuple(
        c + module._evaluate(point) * strength
        for c, module in zip(point, displacements)
    )
    return source._evaluate(displaced)


@dataclass(frozen=True)
class Displace(NoiseModule):
    """
    Warps the input point with one auxiliary module per axis.

    evaluate(p) = source.evaluate(p_k + displacements[k].evaluate(p) * strength)

    Attributes:
        source: Module sampled at the displaced point
        displacements: 2 to 4 modules, one per axis; points with fewer axes
                       use the leading ones
        strength: Multiplier applied to every displacement

    Author: B.G.
    """

    source: NoiseModule
    displacements: tuple[NoiseModule, ...]
    strength: float = 1.0

    def __post_init__(self):
        check_module(self.source)
        displacements = tuple(self.displacements)
        if len(displacements) not in cte.SUPPORTED_DIMENSIONS:
            raise ValueError(
                f"Displace needs 2, 3 or 4 displacement modules, got {len(displacements)}"
            )
        for module in displacements:
            check_module(module, "displacement")
        object.__setattr__(self, "displacements", displacements)

    def with_strength(self, strength: float) -> Displace:
        return replace(self, strength=strength)

    def _evaluate(self, point):
        return _displace(point, self.source, self.displacements, self.strength)


def _period_for(module: NoiseModule, period: int | tuple[int, ...]) -> int | tuple[int, ...]:
    """Lattice period a module needs to wrap every `period` world units."""
    if not isinstance(module, Fractal):
        return period
    return normalize_period(scale_period(period, module.frequency))


@dataclass(frozen=True)
class Turbulence(NoiseModule):
    """
    Noise module that randomly displaces the input point before sampling the
    source, giving a turbulent, swirled look.

    Each axis is displaced by its own fBm field (seed + axis index) with
    `roughness` octaves, sampled at the undisplaced point and scaled by
    `power`.

    The period is given in world units. Modules that sample at
    `point * frequency` (the distortion fields, a fractal source) receive it
    converted to their own lattice units, so the warped pipeline wraps at
    the same world distance on every layer. Frequencies that do not divide
    the period are truncated like fractal octave periods.

    Attributes:
        source: Module sampled at the displaced point
        seed: Seed of the first distortion field
        frequency: Frequency of the distortion fields
        power: Scale of the displacement
        roughness: Octave count of the distortion fields, clamped to [1, 32]
        period: Wrap-around extent in world units (int or per-axis tuple)
        enable_period: Whether the pipeline tiles every `period`
        distortions: Per-axis Fbm fields, derived from the fields above

    Author: B.G.
    """

    source: NoiseModule
    seed: int = cte.DEFAULT_TURBULENCE_SEED
    frequency: float = cte.DEFAULT_TURBULENCE_FREQUENCY
    power: float = cte.DEFAULT_TURBULENCE_POWER
    roughness: int = cte.DEFAULT_TURBULENCE_ROUGHNESS
    period: int | tuple[int, ...] = cte.DEFAULT_PERIOD
    enable_period: bool = False
    distortions: tuple[Fbm, ...] = field(default=None, repr=False, compare=False)

    def __post_init__(self):
        check_module(self.source)
        object.__setattr__(self, "roughness", clamp_octaves(self.roughness))
        object.__setattr__(self, "period", normalize_period(self.period))
        if self.distortions is None:
            logger.debug("Building distortion fields for Turbulence (seed=%d)", self.seed)
            object.__setattr__(self, "distortions", self._build_distortions())

    def _build_distortions(self) -> tuple[Fbm, ...]:
        distortions = []
        for axis in range(max(cte.SUPPORTED_DIMENSIONS)):
            fbm = Fbm(seed=self.seed + axis, octaves=self.roughness, frequency=self.frequency)
            if self.enable_period:
                fbm = fbm.with_period(_period_for(fbm, self.period))
            distortions.append(fbm)
        return tuple(distortions)

    # Builders ---------------------------------------------------------------

    def with_seed(self, seed: int) -> Turbulence:
        if seed == self.seed:
            return self
        return replace(self, seed=seed, distortions=None)

    def with_frequency(self, frequency: float) -> Turbulence:
        return replace(self, frequency=frequency, distortions=None)

    def with_power(self, power: float) -> Turbulence:
        return replace(self, power=power)

    def with_roughness(self, roughness: int) -> Turbulence:
        return replace(self, roughness=roughness, distortions=None)

    def with_source(self, source: NoiseModule) -> Turbulence:
        if self.enable_period and hasattr(source, "with_period"):
            source = source.with_period(_period_for(source, self.period))
        return replace(self, source=source)

    def with_period(self, period: int | tuple[int, ...]) -> Turbulence:
        """
        Make the turbulence tile every `period` world units.

        The period is forwarded to the source when it supports periodicity,
        scaled by the source's frequency, so the warped pipeline wraps as a
        whole.
        """
        period = normalize_period(period)
        source = self.source
        if hasattr(source, "with_period"):
            source = source.with_period(_period_for(source, period))
        return replace(self, source=source, period=period, enable_period=True, distortions=None)

    def without_period(self) -> Turbulence:
        source = self.source
        if hasattr(source, "without_period"):
            source = source.without_period()
        return replace(self, source=source, enable_period=False, distortions=None)

    def _evaluate(self, point):
        return _displace(point, self.source, self.distortions, self.power)
