"""
Noise to PNG CLI Commands for PyFastNoise

Command line interface for rendering a noise module to a PNG image.

Author: B.G.
"""

from __future__ import annotations

import logging
import sys

import click
import numpy as np
from PIL import Image

from ..fractals import BasicMulti, Billow, Fbm, HybridMulti, RidgedMulti
from ..misc import sample_plane, to_unit_range
from ..noise import NoiseModule, Perlin

logger = logging.getLogger(__name__)

MODULE_KINDS = {
    "perlin": Perlin,
    "fbm": Fbm,
    "billow": Billow,
    "basic-multi": BasicMulti,
    "hybrid-multi": HybridMulti,
    "ridged-multi": RidgedMulti,
}


def parse_period(text: str) -> int | tuple[int, ...]:
    """Parse '8' or '9,2,8,8' into an int or a tuple of ints."""
    parts = [p.strip() for p in text.split(",") if p.strip()]
    if not parts:
        raise click.BadParameter("period must not be empty")
    try:
        values = tuple(int(p) for p in parts)
    except ValueError:
        raise click.BadParameter(f"period must be integers, got '{text}'") from None
    return values[0] if len(values) == 1 else values


def build_module(
    kind: str,
    seed: int = 0,
    octaves: int | None = None,
    frequency: float | None = None,
    period: int | tuple[int, ...] | None = None,
) -> NoiseModule:
    """
    Build a configured noise module from command line values.

    Args:
        kind: One of MODULE_KINDS
        seed: Noise seed
        octaves: Octave count for fractal kinds (None keeps the default)
        frequency: Base frequency for fractal kinds (None keeps the default)
        period: None, an int or a tuple of per-axis ints

    Returns:
        NoiseModule

    Author: B.G.
    """
    module = MODULE_KINDS[kind]().with_seed(seed)
    if kind != "perlin":
        if octaves is not None:
            module = module.with_octaves(octaves)
        if frequency is not None:
            module = module.with_frequency(frequency)
    if period is not None:
        module = module.with_period(period)
    return module


@click.command()
@click.argument("output", type=click.Path())
@click.option(
    "--kind",
    type=click.Choice(sorted(MODULE_KINDS)),
    default="perlin",
    show_default=True,
    help="Noise module to render",
)
@click.option("--seed", type=int, default=0, show_default=True, help="Noise seed")
@click.option("--octaves", type=int, default=None, help="Octave count (fractal kinds only)")
@click.option("--frequency", type=float, default=None, help="Base frequency (fractal kinds only)")
@click.option(
    "--period",
    type=str,
    default=None,
    help="Make the noise tile: one integer, or per-axis integers like 9,2",
)
@click.option("--size", type=(int, int), default=(1024, 1024), show_default=True, help="Image width and height")
@click.option("--scale", type=float, default=50.0, show_default=True, help="Pixels per noise unit")
@click.option("--cmap", type=str, default=None, help="Matplotlib colormap name (grayscale if omitted)")
@click.option(
    "--uint",
    is_flag=True,
    default=False,
    help="Save grayscale as uint8 (0-255), otherwise uint16",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
def noise2png(output, kind, seed, octaves, frequency, period, size, scale, cmap, uint, verbose):
    """
    Render a noise module to a PNG image.

    Samples the module on a grid centred on the origin, maps [-1, 1] to the
    full image range and writes a single-band PNG, or an RGB PNG when a
    colormap is given.

    OUTPUT: Path of the PNG file to write

    Examples:

        # Default Perlin noise
        pfn-noise2png perlin.png

        # Seamless ridged multifractal, 8 units on x and 4 on y
        pfn-noise2png ridged.png --kind ridged-multi --period 8,4

        # Coloured terrain-like fBm
        pfn-noise2png terrain.png --kind fbm --octaves 8 --cmap terrain
    """
    try:
        if verbose:
            logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

        period_value = parse_period(period) if period is not None else None
        module = build_module(kind, seed, octaves, frequency, period_value)

        colormap = None
        if cmap is not None:
            # Import matplotlib here, it is only needed for colour output
            import matplotlib

            try:
                colormap = matplotlib.colormaps[cmap]
            except KeyError:
                click.echo(f"Error: Unknown colormap '{cmap}'", err=True)
                sys.exit(1)

        if verbose:
            click.echo(f"Sampling {module!r} on a {size[0]}x{size[1]} grid...")

        nx, ny = size
        values = sample_plane(module, nx, ny, scale=scale)
        normalized = to_unit_range(values)

        if colormap is not None:
            img_data = (colormap(normalized)[..., :3] * 255).astype(np.uint8)
            mode = "RGB"
        elif uint:
            img_data = (normalized * 255).astype(np.uint8)
            mode = "L"  # 8-bit grayscale
        else:
            img_data = (normalized * 65535).astype(np.uint16)
            mode = "I;16"  # 16-bit grayscale

        img = Image.fromarray(img_data)

        if verbose:
            click.echo(f"Saving PNG to '{output}'...")

        img.save(output)

        if verbose:
            click.echo(
                f"Rendering completed! Mode: {mode}, Range: {np.nanmin(values)}-{np.nanmax(values)}"
            )
        else:
            click.echo(f"Rendered {kind} noise -> '{output}'")

    except click.BadParameter:
        raise

    except Exception as e:
        logger.debug("noise2png failed", exc_info=True)
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    noise2png()
