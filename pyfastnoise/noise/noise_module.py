"""
Common interface for every PyFastNoise module.

A noise module is anything that turns a 2, 3 or 4 dimensional point into a
scalar. Generators, fractals and modifiers all derive from NoiseModule, which
is what lets them nest freely: a combinator only needs its sources to
implement `evaluate`.

Points are sequences of coordinates. A coordinate is a float scalar or a
numpy array; arrays broadcast against each other, so a whole grid can be
evaluated in one call.

Author: B.G.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from .. import constants as cte


def as_point(point: Sequence) -> tuple[np.ndarray, ...]:
    """
    Coerce a point to a tuple of broadcast floating-point numpy arrays.

    Integer coordinates are promoted to float64. Floating inputs keep their
    precision (float32 stays float32).

    Args:
        point: Sequence of 2, 3 or 4 coordinates (scalars or arrays)

    Returns:
        tuple of numpy arrays sharing one shape and one floating dtype

    Raises:
        ValueError: If the point dimension is not 2, 3 or 4

    Author: B.G.
    """
    coords = tuple(np.asarray(c) for c in point)
    if len(coords) not in cte.SUPPORTED_DIMENSIONS:
        raise ValueError(f"Points must have 2, 3 or 4 coordinates, got {len(coords)}")

    dtype = np.result_type(*coords)
    if not np.issubdtype(dtype, np.floating):
        dtype = np.dtype(np.float64)

    return tuple(np.broadcast_arrays(*(c.astype(dtype, copy=False) for c in coords)))


def scale_point(point: tuple[np.ndarray, ...], factor: float) -> tuple[np.ndarray, ...]:
    """Multiply every coordinate of a coerced point by a scalar factor."""
    return tuple(c * factor for c in point)


def to_output(value: np.ndarray):
    """Unwrap 0-d arrays so scalar points give numpy scalars back."""
    if isinstance(value, np.ndarray) and value.ndim == 0:
        return value[()]
    return value


def check_module(source: NoiseModule, name: str = "source") -> NoiseModule:
    if not isinstance(source, NoiseModule):
        raise TypeError(f"{name} must be a NoiseModule, got {type(source).__name__}")
    return source


class NoiseModule:
    """
    Base class of all noise modules.

    Subclasses implement `_evaluate(point)` on an already coerced point (a
    tuple of broadcast float arrays). Combinators call `_evaluate` on their
    sources directly so a point is only coerced once per evaluation.

    Author: B.G.
    """

    def evaluate(self, point: Sequence):
        """
        Sample the module at a point.

        Args:
            point: Sequence of 2, 3 or 4 coordinates, scalars or numpy arrays

        Returns:
            Scalar (numpy floating) for scalar coordinates, otherwise an array
            with the broadcast shape of the coordinates
        """
        return to_output(self._evaluate(as_point(point)))

    def __call__(self, point: Sequence):
        return self.evaluate(point)

    def _evaluate(self, point):
        raise NotImplementedError
