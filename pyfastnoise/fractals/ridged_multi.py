"""
Ridged multifractal noise.

Each octave is folded into a ridge with (1 - |n|)^2 and multiplied by a
weight fed back from the previous octave. The feedback is what sharpens the
ridge crests: detail only survives where the coarser octaves were already
close to a ridge. The weight restarts at 1 on every evaluation.

Author: B.G.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

import numpy as np

from .. import constants as cte
from .fractal_base import Fractal


@dataclass(frozen=True)
class RidgedMulti(Fractal):
    """
    Noise module that outputs ridged-multifractal noise.

    With the default parameters the output lies in [-1, 1]: every octave
    signal is at most 1 (the weight is clamped to [0, 1]), the six default
    octaves sum to at most 6 and the result is mapped with result / 3 - 1.
    Other parameters may need rescaling afterwards.

    Often used for craggy mountain ranges or marble-like textures.

    Attributes:
        gain: Multiplier turning an octave's signal into the next octave's
              weight, higher values give sharper ridges

    Author: B.G.
    """

    persistence: float = cte.DEFAULT_RIDGED_PERSISTENCE
    gain: float = cte.DEFAULT_RIDGED_GAIN

    def with_gain(self, gain: float) -> RidgedMulti:
        return replace(self, gain=gain)

    def _initial_state(self):
        return (0.0, 1.0)

    def _accumulate(self, state: tuple, signal: np.ndarray, octave: int) -> tuple:
        result, weight = state

        # Make the ridges, squared to sharpen them
        signal = 1.0 - np.abs(signal)
        signal = signal * signal

        # Higher previous octaves give sharper points along the ridges
        signal = signal * weight
        weight = np.clip(signal * self.gain, 0.0, 1.0)

        signal = signal * self.amplitude(octave)
        return (result + signal, weight)

    def _finish(self, state):
        result, _ = state
        return result * (1.0 / 3.0) - 1.0
