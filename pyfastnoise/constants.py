"""
Global constants for PyFastNoise.

Default configuration values shared by every noise module. Builders start
from these and every `with_*` call returns a new instance, so changing a
value here changes the defaults of freshly constructed modules only.

Author: B.G.
"""

# Lookup table
TABLE_SIZE = 256
TABLE_MASK = TABLE_SIZE - 1

# Perlin base kernel
DEFAULT_PERLIN_SEED = 0
DEFAULT_PERLIN_PERIOD = 256

# Output scaling of the summed surflets, per dimension. Derived from the
# maximum magnitude reachable with the gradient sets in lattice.gradients.
PERLIN_SCALE_2D = 3.1604938271604937
PERLIN_SCALE_3D = 3.8898553255531074
PERLIN_SCALE_4D = 4.424369240215691

SUPPORTED_DIMENSIONS = (2, 3, 4)

# Fractal family
MAX_OCTAVES = 32
DEFAULT_SEED = 0
DEFAULT_OCTAVE_COUNT = 6
DEFAULT_FREQUENCY = 1.0
DEFAULT_LACUNARITY = 2.0
DEFAULT_PERIOD = 256

DEFAULT_FBM_PERSISTENCE = 0.5
DEFAULT_BILLOW_PERSISTENCE = 0.5
DEFAULT_BASIC_MULTI_PERSISTENCE = 0.5
DEFAULT_HYBRID_MULTI_PERSISTENCE = 0.25

DEFAULT_RIDGED_PERSISTENCE = 1.0
DEFAULT_RIDGED_GAIN = 2.0

# Turbulence (domain warping)
DEFAULT_TURBULENCE_SEED = 0
DEFAULT_TURBULENCE_FREQUENCY = 1.0
DEFAULT_TURBULENCE_POWER = 1.0
DEFAULT_TURBULENCE_ROUGHNESS = 3
