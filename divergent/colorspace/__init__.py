"""sRGB, XYZ, CIELAB and MSH color space conversions.

This module provides:
- Array conversions along RGB <-> XYZ <-> CIELAB <-> MSH
- RGB <-> MSH composites routed through the full chain
- RGB, XYZ, CIELAB, MSH scalar value types
- Backend-agnostic: works with floats, numpy arrays or torch tensors

Example:
    from divergent.colorspace import RGB, msh_to_srgb_array

    blue = RGB(0.0, 0.0, 1.0).to_msh()
    print(blue)            # "m s h"
    rgb = msh_to_srgb_array(m_array, s_array, h_array)
"""

from .conversions import (
    srgb_to_linear,
    linear_to_srgb,
    rgb_to_xyz,
    xyz_to_rgb,
    xyz_to_lab,
    lab_to_xyz,
    lab_to_msh,
    msh_to_lab,
    rgb_to_msh,
    msh_to_rgb,
    msh_to_srgb_array,
)

from .types import RGB, XYZ, CIELAB, MSH

__all__ = [
    # Value types
    'RGB',
    'XYZ',
    'CIELAB',
    'MSH',
    # Conversions
    'srgb_to_linear',
    'linear_to_srgb',
    'rgb_to_xyz',
    'xyz_to_rgb',
    'xyz_to_lab',
    'lab_to_xyz',
    'lab_to_msh',
    'msh_to_lab',
    'rgb_to_msh',
    'msh_to_rgb',
    'msh_to_srgb_array',
]
