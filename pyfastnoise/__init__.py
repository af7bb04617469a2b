"""
PyFastNoise: deterministic procedural noise with composable modules.

Submodules:
- lattice: Seeded permutation tables and gradient sets
- noise: NoiseModule interface, Perlin and Constant generators
- fractals: fBm, billow, basic/hybrid multifractal and ridged multifractal
- modifiers: Unary transforms, two-source combiners and domain warping
- misc: Grid sampling helpers
- cli: Command line tools (imported lazily)

Usage:
    import pyfastnoise as pn

    terrain = pn.modifiers.Add(
        pn.fractals.RidgedMulti().with_seed(3),
        pn.modifiers.ScaleBias(pn.noise.Perlin(), scale=0.25),
    )
    height = terrain.evaluate((1.5, 2.25))

Author: B.G.
"""

import importlib

from . import constants
from . import lattice
from . import noise
from . import fractals
from . import modifiers
from . import misc

__version__ = "0.0.1"

__all__ = [
    "constants",
    "lattice",
    "noise",
    "fractals",
    "modifiers",
    "misc",
    "cli",
]


def __getattr__(name):
    # The CLI pulls in click and PIL, only load it on demand
    if name == "cli":
        module = importlib.import_module(".cli", __name__)
        globals()[name] = module
        return module
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
