"""
Single-source modifiers for PyFastNoise.

Each modifier holds one source module and applies a fixed scalar function to
its output: evaluate(p) = f(source.evaluate(p)). They keep no other state.

Author: B.G.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from ..noise.noise_module import NoiseModule, check_module


@dataclass(frozen=True)
class Unary(NoiseModule):
    """Base class for modifiers transforming the output of one source."""

    source: NoiseModule

    def __post_init__(self):
        check_module(self.source)

    def _evaluate(self, point):
        return self._transform(self.source._evaluate(point))

    def _transform(self, value: np.ndarray) -> np.ndarray:
        raise NotImplementedError


@dataclass(frozen=True)
class Abs(Unary):
    """Outputs the absolute value of the source."""

    def _transform(self, value: np.ndarray) -> np.ndarray:
        return np.abs(value)


@dataclass(frozen=True)
class Negate(Unary):
    """Outputs the negated source."""

    def _transform(self, value: np.ndarray) -> np.ndarray:
        return -value


@dataclass(frozen=True)
class ScaleBias(Unary):
    """Outputs source * scale + bias."""

    scale: float = 1.0
    bias: float = 0.0

    def _transform(self, value: np.ndarray) -> np.ndarray:
        return value * self.scale + self.bias


@dataclass(frozen=True)
class Clamp(Unary):
    """Clamps the source output to [lower, upper]."""

    lower: float = -1.0
    upper: float = 1.0

    def __post_init__(self):
        super().__post_init__()
        if self.lower > self.upper:
            raise ValueError(f"lower bound {self.lower} is above upper bound {self.upper}")

    def _transform(self, value: np.ndarray) -> np.ndarray:
        return np.clip(value, self.lower, self.upper)


@dataclass(frozen=True)
class Exponent(Unary):
    """
    Maps the source output from [-1, 1] to [0, 1], raises it to `exponent`
    and maps it back. Exponents above 1 push values towards -1, below 1
    towards 1.
    """

    exponent: float = 1.0

    def _transform(self, value: np.ndarray) -> np.ndarray:
        return np.abs((value + 1.0) * 0.5) ** self.exponent * 2.0 - 1.0
