"""
Miscellaneous Utilities for PyFastNoise

This module provides helpers that consume noise modules from the outside,
through `evaluate` only: rasterizing a module over a grid and mapping the
result to an image-friendly range.

Available Functions:
- sample_grid: Sample a module over a regular grid into a numpy array
- sample_plane: Sample a module on a grid centred on the origin
- to_unit_range: Map [-1, 1] noise values to [0, 1]

Author: B.G.
"""

from .sampling import sample_grid, sample_plane, to_unit_range

# Export public API
__all__ = [
    "sample_grid",
    "sample_plane",
    "to_unit_range",
]
