"""
Pytest configuration and fixtures for PyFastNoise test suite.

This file contains shared fixtures, test configuration, and utilities
used across the test suite.
"""
import os
import sys
import pytest
import numpy as np


def pytest_configure(config):
    """Configure pytest with custom settings."""
    # Add the package root to Python path for testing
    package_root = os.path.dirname(os.path.dirname(__file__))
    if package_root not in sys.path:
        sys.path.insert(0, package_root)

    for marker, description in (
        ("unit", "fast tests of a single module"),
        ("integration", "tests combining several modules"),
        ("importtest", "import smoke tests"),
        ("slow", "tests sampling large grids"),
    ):
        config.addinivalue_line("markers", f"{marker}: {description}")


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers and ordering."""
    for item in items:
        # Mark import tests for easy selection
        if "import" in item.name.lower() or "test_imports.py" in str(item.fspath):
            item.add_marker("importtest")


# Coordinates with few significant bits: shifting them by an integer period
# is exact in floating point, so tiling can be checked with ==.
DYADIC_COORDS = (-3.625, -1.5, -0.875, 0.0, 0.125, 0.5, 0.6875, 1.25, 2.375, 3.9375)


def _dyadic_points(dim, count=12):
    rng = np.random.RandomState(1234 + dim)
    return [tuple(rng.choice(DYADIC_COORDS, size=dim)) for _ in range(count)]


@pytest.fixture(scope="session")
def dyadic_points_2d():
    """2D points whose coordinates are exact binary fractions."""
    return _dyadic_points(2)


@pytest.fixture(scope="session")
def dyadic_points_3d():
    """3D points whose coordinates are exact binary fractions."""
    return _dyadic_points(3)


@pytest.fixture(scope="session")
def dyadic_points_4d():
    """4D points whose coordinates are exact binary fractions."""
    return _dyadic_points(4)


@pytest.fixture(scope="session")
def random_points():
    """Provide reproducible off-lattice sample points per dimension."""
    rng = np.random.RandomState(42)
    return {dim: [tuple(p) for p in rng.uniform(-20.0, 20.0, size=(50, dim))] for dim in (2, 3, 4)}


@pytest.fixture(scope="session")
def dense_grid():
    """Provide a dense 2D grid of coordinates (X, Y) covering several lattice cells."""
    x = np.linspace(-6.0, 6.0, 241)
    return np.meshgrid(x, x)


class PointHelper:
    """Helper class for shifting points along an axis."""

    @staticmethod
    def shift(point, axis, amount):
        shifted = list(point)
        shifted[axis] = shifted[axis] + amount
        return tuple(shifted)


@pytest.fixture
def point_helper():
    """Provide access to point manipulation utilities."""
    return PointHelper()
