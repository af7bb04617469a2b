"""
Fractal Brownian motion noise.

Plain sum of the octaves, each weighted by persistence^i, divided by the sum
of the weights so the output keeps roughly the [-1, 1] range of a single
Perlin octave whatever the octave count.

Author: B.G.
"""

from __future__ import annotations

from dataclasses import dataclass

from .. import constants as cte
from .fractal_base import Fractal


@dataclass(frozen=True)
class Fbm(Fractal):
    """
    Noise module that outputs fBm noise.

    Lower persistence gives smoother fields dominated by the first octaves,
    persistence near 1 gives rough fields where fine detail is as strong as
    the base shape.

    Author: B.G.
    """

    persistence: float = cte.DEFAULT_FBM_PERSISTENCE

    def _accumulate(self, state, signal, octave: int):
        return state + signal * self.amplitude(octave)

    def _finish(self, state):
        scale = self.amplitude_sum()
        if scale == 0.0:
            return state
        return state / scale
