"""
Modifier submodule for PyFastNoise.

Modifiers wrap other noise modules without adding sampling primitives of
their own. They are noise modules themselves and nest to any depth.

Modules:
- Unary transforms: Abs, Negate, ScaleBias, Clamp, Exponent
- Combiners: Add, Multiply, Min, Max, Power
- Domain warping: Displace, Turbulence

Usage:
    import pyfastnoise as pn

    period = (9, 2, 8, 8)
    ridged = pn.fractals.RidgedMulti().with_period(period)
    warped = pn.modifiers.Turbulence(ridged).with_period(period)
    field = pn.modifiers.Add(warped, pn.noise.Perlin().with_period(period))

Author: B.G.
"""

from .unary import Abs, Clamp, Exponent, Negate, ScaleBias, Unary
from .combiners import Add, Combiner, Max, Min, Multiply, Power
from .warping import Displace, Turbulence

__all__ = [
    "Unary",
    "Abs",
    "Negate",
    "ScaleBias",
    "Clamp",
    "Exponent",
    "Combiner",
    "Add",
    "Multiply",
    "Min",
    "Max",
    "Power",
    "Displace",
    "Turbulence",
]
