"""
Fractal noise submodule for PyFastNoise.

Fractal modules combine several independently seeded Perlin octaves. All of
them share one octave loop (fractal_base.Fractal): octave i is sampled at the
point scaled by frequency * lacunarity^i and weighted by persistence^i. They
differ in how each octave is folded into the result.

Modules:
- Fbm: Normalized sum of octaves
- Billow: Sum of 2|n| - 1 octaves, puffy cloud-like shapes
- BasicMulti: Octaves scaled by the running result
- HybridMulti: Additive sum with capped multiplicative weighting
- RidgedMulti: Ridged octaves with weight feedback, mountain ranges

Usage:
    import pyfastnoise as pn

    ridged = pn.fractals.RidgedMulti().with_seed(7).with_octaves(8)
    height = ridged.evaluate((0.25, 0.75, 0.0))

    # Every builder returns a new module
    tiling = ridged.with_period(16)

Author: B.G.
"""

from .fractal_base import Fractal, build_sources, clamp_octaves
from .fbm import Fbm
from .billow import Billow
from .basic_multi import BasicMulti
from .hybrid_multi import HybridMulti
from .ridged_multi import RidgedMulti

__all__ = [
    "Fractal",
    "build_sources",
    "clamp_octaves",
    "Fbm",
    "Billow",
    "BasicMulti",
    "HybridMulti",
    "RidgedMulti",
]
