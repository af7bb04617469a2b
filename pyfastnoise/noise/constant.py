"""
Constant-valued noise module.

Author: B.G.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .noise_module import NoiseModule


@dataclass(frozen=True)
class Constant(NoiseModule):
    """Outputs the same value at every point. Handy as a combiner operand."""

    value: float = 0.0

    def _evaluate(self, point: tuple[np.ndarray, ...]) -> np.ndarray:
        return np.full(point[0].shape, self.value, dtype=point[0].dtype)
