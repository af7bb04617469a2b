"""
Command Line Interface for PyFastNoise

This module provides command line utilities for PyFastNoise, enabling
quick inspection of noise modules from the terminal without writing Python
scripts.

Available Commands:
- noise2png: Render a noise module (Perlin or any fractal) to a PNG image

Author: B.G.
"""

_CLI_SUBMODULES = {
    "noise2png": (".noise2png_commands", "noise2png"),
}

__all__ = list(_CLI_SUBMODULES.keys())


def __getattr__(name):
    info = _CLI_SUBMODULES.get(name)
    if info is None:
        raise AttributeError(name)
    pkg, attr = info
    import importlib
    mod = importlib.import_module(pkg, __package__)
    obj = getattr(mod, attr)
    globals()[name] = obj
    return obj
