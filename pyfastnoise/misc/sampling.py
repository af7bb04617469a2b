"""
Grid sampling utilities for PyFastNoise.

Rasterizes a noise module over a regular 2D grid into a numpy array. The
module is evaluated once on broadcast coordinate arrays rather than point by
point, which is what makes exporting images or height maps practical.

Author: B.G.
"""

from __future__ import annotations

import numpy as np

from ..noise.noise_module import NoiseModule


def sample_grid(
    module: NoiseModule,
    nx: int,
    ny: int,
    x_range: tuple[float, float] = (0.0, 1.0),
    y_range: tuple[float, float] = (0.0, 1.0),
    extra: tuple[float, ...] = (),
    dtype: np.dtype | type = np.float64,
) -> np.ndarray:
    """
    Sample a noise module on a regular grid.

    Grid nodes sit at x_min + i * (x_max - x_min) / nx for i in [0, nx), so
    sampling one full period of a periodic module gives an image that tiles
    without a duplicated edge.

    Args:
        module: Any NoiseModule
        nx: Number of samples in x direction
        ny: Number of samples in y direction
        x_range: (x_min, x_max) covered by the grid (default: (0, 1))
        y_range: (y_min, y_max) covered by the grid (default: (0, 1))
        extra: Fixed values for the third and fourth coordinates, sampling a
               2D slice of a 3D or 4D module (default: none, 2D sampling)
        dtype: Floating type of the coordinates and the output (default: float64)

    Returns:
        numpy.ndarray: Noise values of shape (ny, nx)

    Example:
        ridged = pn.fractals.RidgedMulti().with_period(4)
        tile = sample_grid(ridged, 256, 256, x_range=(0, 4), y_range=(0, 4))

    Author: B.G.
    """
    if nx < 1 or ny < 1:
        raise ValueError(f"Grid dimensions must be positive, got ({ny}, {nx})")
    if len(extra) > 2:
        raise ValueError("At most two extra coordinates (z, w) can be fixed")

    x0, x1 = x_range
    y0, y1 = y_range
    x = x0 + np.arange(nx, dtype=dtype) * np.asarray((x1 - x0) / nx, dtype=dtype)
    y = y0 + np.arange(ny, dtype=dtype) * np.asarray((y1 - y0) / ny, dtype=dtype)
    X, Y = np.meshgrid(x, y)

    point = [X, Y] + [np.full_like(X, value) for value in extra]
    return np.asarray(module.evaluate(point), dtype=dtype)


def sample_plane(module: NoiseModule, nx: int, ny: int, scale: float = 50.0, dtype: np.dtype | type = np.float64) -> np.ndarray:
    """
    Sample a module on a grid centred on the origin.

    Pixel (j, i) is evaluated at ((i - nx/2) / scale, (j - ny/2) / scale), so
    `scale` is the number of pixels per noise unit.

    Args:
        module: Any NoiseModule
        nx: Image width in pixels
        ny: Image height in pixels
        scale: Pixels per unit length (default: 50)
        dtype: Floating type of the output (default: float64)

    Returns:
        numpy.ndarray: Noise values of shape (ny, nx)

    Author: B.G.
    """
    if scale <= 0:
        raise ValueError("scale must be > 0")
    half_w = (nx / 2.0) / scale
    half_h = (ny / 2.0) / scale
    return sample_grid(module, nx, ny, x_range=(-half_w, half_w), y_range=(-half_h, half_h), dtype=dtype)


def to_unit_range(values: np.ndarray) -> np.ndarray:
    """
    Map noise values to [0, 1].

    Values are expected roughly in [-1, 1] and are clipped after the affine
    mapping. NaN becomes 0.
    """
    unit = np.clip((np.asarray(values) + 1.0) * 0.5, 0.0, 1.0)
    return np.nan_to_num(unit, nan=0.0)
