"""
Hybrid multifractal noise.

Author: B.G.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .. import constants as cte
from .fractal_base import Fractal


@dataclass(frozen=True)
class HybridMulti(Fractal):
    """
    Noise module that outputs hybrid multifractal noise.

    Mixes the additive fBm sum with multiplicative weighting: each octave's
    contribution is scaled by a weight carried from the previous octaves and
    capped at 1, giving smooth lowlands and rough highlands.

        result = weight = n_0
        weight = min(weight, 1)
        signal = n_i * persistence^i
        result += weight * signal
        weight *= signal                           (i >= 1)
        output = result * 0.75

    Author: B.G.
    """

    persistence: float = cte.DEFAULT_HYBRID_MULTI_PERSISTENCE

    def _initial_state(self):
        return (0.0, 1.0)

    def _accumulate(self, state: tuple, signal: np.ndarray, octave: int) -> tuple:
        result, weight = state
        if octave == 0:
            return (signal, signal)

        weight = np.minimum(weight, 1.0)
        signal = signal * self.amplitude(octave)
        result = result + weight * signal
        weight = weight * signal
        return (result, weight)

    def _finish(self, state):
        result, _ = state
        return result * 0.75
