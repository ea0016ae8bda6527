"""Scalar color value types.

Each type is an immutable triple of floats with conversion methods along the
edges of the conversion graph. The heavy lifting lives in ``conversions``;
these wrap single colors for configuration and debugging.
"""

from __future__ import annotations

from dataclasses import astuple, dataclass
from typing import Iterator

import numpy as np

from . import conversions as conv


def _fmt(*values: float) -> str:
    return " ".join(f"{v:g}" for v in values)


def _floats(values) -> tuple[float, float, float]:
    return tuple(float(v) for v in values)


@dataclass(frozen=True)
class _Triple:
    def __iter__(self) -> Iterator[float]:
        return iter(astuple(self))

    def __str__(self) -> str:
        return _fmt(*self)

    def to_array(self) -> np.ndarray:
        """Components as a float64 array of shape (3,)."""
        return np.array(astuple(self), dtype=np.float64)


@dataclass(frozen=True)
class RGB(_Triple):
    """Gamma-encoded sRGB, nominally in [0, 1]."""
    r: float
    g: float
    b: float

    def to_xyz(self) -> XYZ:
        return XYZ(*_floats(conv.rgb_to_xyz(self.r, self.g, self.b)))

    def to_msh(self) -> MSH:
        return self.to_xyz().to_cielab().to_msh()


@dataclass(frozen=True)
class XYZ(_Triple):
    """CIE 1931 tristimulus values (2 deg observer, D65)."""
    x: float
    y: float
    z: float

    def to_rgb(self) -> RGB:
        return RGB(*_floats(conv.xyz_to_rgb(self.x, self.y, self.z)))

    def to_cielab(self) -> CIELAB:
        return CIELAB(*_floats(conv.xyz_to_lab(self.x, self.y, self.z)))


@dataclass(frozen=True)
class CIELAB(_Triple):
    l: float
    a: float
    b: float

    def to_xyz(self) -> XYZ:
        return XYZ(*_floats(conv.lab_to_xyz(self.l, self.a, self.b)))

    def to_msh(self) -> MSH:
        return MSH(*_floats(conv.lab_to_msh(self.l, self.a, self.b)))


@dataclass(frozen=True)
class MSH(_Triple):
    """Polar CIELAB: magnitude, saturation angle and hue angle (radians)."""
    m: float
    s: float
    h: float

    def to_cielab(self) -> CIELAB:
        return CIELAB(*_floats(conv.msh_to_lab(self.m, self.s, self.h)))

    def to_rgb(self) -> RGB:
        return self.to_cielab().to_xyz().to_rgb()
