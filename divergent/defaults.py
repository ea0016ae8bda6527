"""Central place for divergent constants and default settings."""

from math import pi

# Reference white, Observer = 2 deg, Illuminant = D65
REFERENCE_WHITE: tuple[float, float, float] = (0.95047, 1.000, 1.08883)

# Linear sRGB -> XYZ (sRGB primaries, D65)
RGB_TO_XYZ: tuple[tuple[float, float, float], ...] = (
    (0.4124, 0.3576, 0.1805),
    (0.2126, 0.7152, 0.0722),
    (0.0193, 0.1192, 0.9505),
)

# XYZ -> linear sRGB
XYZ_TO_RGB: tuple[tuple[float, float, float], ...] = (
    (3.24063, -1.53721, -0.498629),
    (-0.968931, 1.87576, 0.0415175),
    (0.0557101, -0.204021, 1.0570),
)

# sRGB transfer function
SRGB_DECODE_THRESHOLD: float = 0.04045
SRGB_ENCODE_THRESHOLD: float = 0.0031308
SRGB_GAMMA: float = 2.4

# CIELAB nonlinearity
LAB_EPSILON: float = 0.008856
LAB_KAPPA: float = 7.787
LAB_OFFSET: float = 16.0 / 116.0

# MSH polar guards (below these, saturation/hue are reported as zero)
MSH_EPSILON: float = 0.001

# Diverging colormap tuning
SATURATION_THRESHOLD: float = 0.05  # At or below: treated as unsaturated
MIN_MID_MAGNITUDE: float = 88.0     # Lower bound for the gray midpoint magnitude
HUE_SPIN_PIVOT: float = -pi / 3.0   # Hue above this spins forward, else backward

# Sampling
DEFAULT_SAMPLES: int = 33
DEFAULT_LUT_SIZE: int = 256
