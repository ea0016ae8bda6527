"""Conversion graph between sRGB, XYZ, CIELAB and MSH.

Edges: RGB <-> XYZ <-> CIELAB <-> MSH. The RGB <-> MSH composites always
route through the full chain; the piecewise nonlinearities do not commute
with the matrices, so there is no shortcut.

All functions accept Python floats, numpy arrays or torch tensors and never
raise on out-of-range input; values propagate numerically.
"""

from divergent import defaults as d
from . import _backend as B
from ._backend import Array

_XR, _YR, _ZR = d.REFERENCE_WHITE
_M = d.RGB_TO_XYZ
_M_INV = d.XYZ_TO_RGB


# === sRGB transfer function ===

def srgb_to_linear(x: Array) -> Array:
    """sRGB -> linear RGB gamma decoding (per channel)."""
    low = x / 12.92
    high = B.pow((B.clamp_min(x, d.SRGB_DECODE_THRESHOLD) + 0.055) / 1.055, d.SRGB_GAMMA)
    return B.where(x <= d.SRGB_DECODE_THRESHOLD, low, high)


def linear_to_srgb(x: Array) -> Array:
    """Linear RGB -> sRGB gamma encoding (per channel)."""
    low = x * 12.92
    high = 1.055 * B.pow(B.clamp_min(x, d.SRGB_ENCODE_THRESHOLD), 1.0 / d.SRGB_GAMMA) - 0.055
    return B.where(x <= d.SRGB_ENCODE_THRESHOLD, low, high)


# === RGB <-> XYZ ===

def rgb_to_xyz(r: Array, g: Array, b: Array) -> tuple[Array, Array, Array]:
    """Gamma-encoded sRGB -> XYZ (D65)."""
    r, g, b = srgb_to_linear(r), srgb_to_linear(g), srgb_to_linear(b)
    x = _M[0][0]*r + _M[0][1]*g + _M[0][2]*b
    y = _M[1][0]*r + _M[1][1]*g + _M[1][2]*b
    z = _M[2][0]*r + _M[2][1]*g + _M[2][2]*b
    return x, y, z


def xyz_to_rgb(x: Array, y: Array, z: Array) -> tuple[Array, Array, Array]:
    """XYZ (D65) -> gamma-encoded sRGB.

    Colors brighter than the gamut are scaled down uniformly by their largest
    channel, which keeps the hue and gives up luminance. Negative channels are
    then floored at 0.
    """
    r = _M_INV[0][0]*x + _M_INV[0][1]*y + _M_INV[0][2]*z
    g = _M_INV[1][0]*x + _M_INV[1][1]*y + _M_INV[1][2]*z
    b = _M_INV[2][0]*x + _M_INV[2][1]*y + _M_INV[2][2]*z

    r, g, b = linear_to_srgb(r), linear_to_srgb(g), linear_to_srgb(b)

    peak = B.maximum(B.maximum(r, g), b)
    scale = B.where(peak > 1.0, peak, B.ones_like(peak))
    r, g, b = r / scale, g / scale, b / scale

    return B.clamp_min(r, 0.0), B.clamp_min(g, 0.0), B.clamp_min(b, 0.0)


# === XYZ <-> CIELAB ===

def _lab_f(t: Array) -> Array:
    cube_root = B.pow(B.clamp_min(t, d.LAB_EPSILON), 1.0 / 3.0)
    return B.where(t > d.LAB_EPSILON, cube_root, d.LAB_KAPPA * t + d.LAB_OFFSET)


def _lab_f_inv(f: Array) -> Array:
    cube = B.pow(f, 3.0)
    return B.where(cube > d.LAB_EPSILON, cube, (f - d.LAB_OFFSET) / d.LAB_KAPPA)


def xyz_to_lab(x: Array, y: Array, z: Array) -> tuple[Array, Array, Array]:
    """XYZ -> CIELAB relative to the D65 reference white."""
    fx = _lab_f(x / _XR)
    fy = _lab_f(y / _YR)
    fz = _lab_f(z / _ZR)
    L = 116.0 * fy - 16.0
    a = 500.0 * (fx - fy)
    b = 200.0 * (fy - fz)
    return L, a, b


def lab_to_xyz(L: Array, a: Array, b: Array) -> tuple[Array, Array, Array]:
    """CIELAB -> XYZ, exact inverse of xyz_to_lab."""
    fy = (L + 16.0) / 116.0
    fx = a / 500.0 + fy
    fz = fy - b / 200.0
    return _lab_f_inv(fx) * _XR, _lab_f_inv(fy) * _YR, _lab_f_inv(fz) * _ZR


# === CIELAB <-> MSH ===

def lab_to_msh(L: Array, a: Array, b: Array) -> tuple[Array, Array, Array]:
    """CIELAB -> MSH (magnitude, saturation angle, hue angle; radians).

    Saturation is 0 when the magnitude is at most MSH_EPSILON, and hue is 0
    when the saturation is at most MSH_EPSILON.
    """
    m = B.sqrt(L * L + a * a + b * b)
    colorful = m > d.MSH_EPSILON
    safe_m = B.where(colorful, m, B.ones_like(m))
    s = B.where(colorful, B.acos(B.clip(L / safe_m, -1.0, 1.0)), B.zeros_like(m))
    h = B.where(s > d.MSH_EPSILON, B.atan2(b, a), B.zeros_like(m))
    return m, s, h


def msh_to_lab(m: Array, s: Array, h: Array) -> tuple[Array, Array, Array]:
    """MSH -> CIELAB."""
    L = m * B.cos(s)
    a = m * B.sin(s) * B.cos(h)
    b = m * B.sin(s) * B.sin(h)
    return L, a, b


# === Convenience Composites ===

def rgb_to_msh(r: Array, g: Array, b: Array) -> tuple[Array, Array, Array]:
    """sRGB -> XYZ -> CIELAB -> MSH."""
    return lab_to_msh(*xyz_to_lab(*rgb_to_xyz(r, g, b)))


def msh_to_rgb(m: Array, s: Array, h: Array) -> tuple[Array, Array, Array]:
    """MSH -> CIELAB -> XYZ -> sRGB."""
    return xyz_to_rgb(*lab_to_xyz(*msh_to_lab(m, s, h)))


def msh_to_srgb_array(m: Array, s: Array, h: Array) -> Array:
    """MSH -> sRGB stacked into an array with shape (..., 3)."""
    return B.stack(list(msh_to_rgb(m, s, h)), axis=-1)
