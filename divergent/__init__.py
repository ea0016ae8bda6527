"""Diverging colormaps for scientific visualization.

Colors are converted between sRGB, XYZ, CIELAB and MSH, and diverging
colormaps are interpolated in MSH following Moreland, "Diverging Color Maps
for Scientific Visualization".

Example:
    import numpy as np
    from divergent import Diverging, build_preset

    cmap = Diverging(-1.0, 1.0)
    cmap.set_low(0.23, 0.30, 0.75)
    cmap.set_high(0.71, 0.02, 0.15)
    rgb = cmap.colormap(0.3)               # RGB(r, g, b)

    lut = build_preset("coolwarm").evaluate(np.linspace(0, 1, 256))
"""

__version__ = "0.1.0"

from .colorspace import RGB, XYZ, CIELAB, MSH
from .diverging import Diverging, adjust_hue
from .errors import DivergentError, ConfigurationError, NotConfiguredError
from .presets import DivergingPreset, BUILTIN_PRESETS, get_preset, list_presets, build_preset

__all__ = [
    '__version__',
    # Colormaps
    'Diverging',
    'adjust_hue',
    # Presets
    'DivergingPreset',
    'BUILTIN_PRESETS',
    'get_preset',
    'list_presets',
    'build_preset',
    # Value types
    'RGB',
    'XYZ',
    'CIELAB',
    'MSH',
    # Errors
    'DivergentError',
    'ConfigurationError',
    'NotConfiguredError',
]
