"""
Basic multifractal noise.

Author: B.G.
"""

from __future__ import annotations

from dataclasses import dataclass

from .. import constants as cte
from .fractal_base import Fractal


@dataclass(frozen=True)
class BasicMulti(Fractal):
    """
    Noise module that outputs basic multifractal noise.

    The first octave is taken as is. Every later octave is scaled by
    persistence^i and by the running result, so detail is strong where the
    field is already high and damped in valleys:

        result = n_0
        result += n_i * persistence^i * result     (i >= 1)
        output = result * 0.5

    Author: B.G.
    """

    persistence: float = cte.DEFAULT_BASIC_MULTI_PERSISTENCE

    def _accumulate(self, state, signal, octave: int):
        if octave == 0:
            return signal
        return state + signal * self.amplitude(octave) * state

    def _finish(self, state):
        return state * 0.5
