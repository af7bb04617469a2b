"""
Billowy noise.

Author: B.G.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .. import constants as cte
from .fractal_base import Fractal


@dataclass(frozen=True)
class Billow(Fractal):
    """
    Noise module that outputs billowy noise.

    Same as fBm except every octave goes through 2|n| - 1 before being
    summed, which folds the negative lobes up and gives puffy, cloud-like
    shapes.

    Author: B.G.
    """

    persistence: float = cte.DEFAULT_BILLOW_PERSISTENCE

    def _accumulate(self, state, signal, octave: int):
        signal = 2.0 * np.abs(signal) - 1.0
        return state + signal * self.amplitude(octave)

    def _finish(self, state):
        scale = self.amplitude_sum()
        if scale == 0.0:
            return state
        return state / scale
