"""
Noise generation module for PyFastNoise.

Provides the NoiseModule interface every component implements and the leaf
generators that pipelines are built from. All generators are deterministic
for a given seed and evaluate either single points or whole numpy grids.

Generators:
- Perlin: Gradient lattice noise in 2, 3 and 4 dimensions, optionally periodic
- Constant: Same value everywhere

Usage:
    import pyfastnoise as pn

    perlin = pn.noise.Perlin().with_seed(42)
    value = perlin.evaluate((0.5, 1.25))

    # Seamless tile every 8 units on x and 4 on y
    tiled = perlin.with_period((8, 4))

Author: B.G.
"""

from .noise_module import NoiseModule, as_point
from .perlin_noise import Perlin
from .constant import Constant

__all__ = ["NoiseModule", "as_point", "Perlin", "Constant"]
