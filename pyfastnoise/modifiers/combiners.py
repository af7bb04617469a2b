"""
Two-source combiners for PyFastNoise.

A combiner samples both sources at the same point and merges the two values
with a fixed binary operation.

Author: B.G.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from ..noise.noise_module import NoiseModule, check_module


@dataclass(frozen=True)
class Combiner(NoiseModule):
    """Base class for modules combining the outputs of two sources."""

    source_a: NoiseModule
    source_b: NoiseModule

    def __post_init__(self):
        check_module(self.source_a, "source_a")
        check_module(self.source_b, "source_b")

    def _evaluate(self, point):
        return self._combine(self.source_a._evaluate(point), self.source_b._evaluate(point))

    def _combine(self, a: np.ndarray, b: np.ndarray) -> np.ndarray:
        raise NotImplementedError


@dataclass(frozen=True)
class Add(Combiner):
    """Outputs the sum of the two sources."""

    def _combine(self, a: np.ndarray, b: np.ndarray) -> np.ndarray:
        return a + b


@dataclass(frozen=True)
class Multiply(Combiner):
    """Outputs the product of the two sources."""

    def _combine(self, a: np.ndarray, b: np.ndarray) -> np.ndarray:
        return a * b


@dataclass(frozen=True)
class Min(Combiner):
    """Outputs the smaller of the two source values."""

    def _combine(self, a: np.ndarray, b: np.ndarray) -> np.ndarray:
        return np.minimum(a, b)


@dataclass(frozen=True)
class Max(Combiner):
    """Outputs the larger of the two source values."""

    def _combine(self, a: np.ndarray, b: np.ndarray) -> np.ndarray:
        return np.maximum(a, b)


@dataclass(frozen=True)
class Power(Combiner):
    """
    Outputs source_a raised to the power source_b.

    Negative bases with fractional exponents give NaN, as with numpy.
    """

    def _combine(self, a: np.ndarray, b: np.ndarray) -> np.ndarray:
        with np.errstate(invalid="ignore"):
            return np.power(a, b)
