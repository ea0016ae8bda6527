"""Diverging colormaps interpolated in MSH space.

Reference: Kenneth Moreland, "Diverging Color Maps for Scientific
Visualization" (ISVC 2009).

A diverging colormap runs between two endpoint colors through a neutral
midpoint. Interpolating in MSH (polar CIELAB) keeps the transition
perceptually smooth; when both endpoints are saturated the midpoint is
forced to a bright gray so the two halves meet without a muddy band.

Example:
    from divergent import Diverging

    cmap = Diverging(0.0, 1.0)
    cmap.set_low(1.0, 1.0, 0.0)    # yellow
    cmap.set_high(0.0, 0.0, 1.0)   # blue
    rgb = cmap.colormap(0.25)      # RGB value type
    lut = cmap.evaluate(np.linspace(0, 1, 256))  # (256, 3) array
"""

from __future__ import annotations

import logging
import math
from dataclasses import replace

from divergent import defaults as d
from divergent.colorspace import _backend as B
from divergent.colorspace._backend import Array
from divergent.colorspace.conversions import msh_to_srgb_array
from divergent.colorspace.types import MSH, RGB
from divergent.errors import ConfigurationError, NotConfiguredError

logger = logging.getLogger(__name__)


def adjust_hue(msh: MSH, unsaturated_m: float) -> float:
    """Hue for an unsaturated color that ``msh`` will be blended toward.

    Interpolating from a saturated color to a gray of larger magnitude makes
    the hue appear to drift; spinning the gray's hue compensates. If the
    saturated color is already at least as bright, its hue is used as is.
    """
    if msh.m >= unsaturated_m:
        return msh.h

    spin = msh.s * math.sqrt(unsaturated_m**2 - msh.m**2) / (msh.m * math.sin(msh.s))
    if msh.h > d.HUE_SPIN_PIVOT:
        return msh.h + spin
    return msh.h - spin


def _is_saturated(msh: MSH) -> bool:
    return msh.s > d.SATURATION_THRESHOLD


def _lerp(a: float, b: float, t: Array) -> Array:
    return t * b + (1.0 - t) * a


def _checked_rgb(which: str, r: float, g: float, b: float) -> RGB:
    components = (float(r), float(g), float(b))
    for c in components:
        if not (0.0 <= c <= 1.0):
            raise ConfigurationError(
                f"{which} color components must be in [0, 1], got {components}"
            )
    return RGB(*components)


class Diverging:
    """Maps scalars in [vmin, vmax] to RGB along a diverging MSH path.

    Lifecycle: construct with the data range, then set both endpoint colors
    with set_low() and set_high() (and optionally set_midpoint()). Evaluation
    never mutates the colormap, so a configured instance can be shared for
    read-only use.

    Raises:
        ConfigurationError: On an empty or non-finite range, a midpoint
            outside (vmin, vmax), or endpoint components outside [0, 1].
        NotConfiguredError: If evaluated before both endpoints are set.
    """

    def __init__(self, vmin: float, vmax: float, midpoint: float | None = None):
        vmin, vmax = float(vmin), float(vmax)
        if not (math.isfinite(vmin) and math.isfinite(vmax)):
            raise ConfigurationError(f"Colormap range must be finite, got [{vmin}, {vmax}]")
        if vmin >= vmax:
            raise ConfigurationError(f"Colormap range is empty: min {vmin} >= max {vmax}")

        self._vmin = vmin
        self._vmax = vmax
        self._midpoint = (vmin + vmax) / 2.0
        self._low: MSH | None = None
        self._high: MSH | None = None
        self._low_rgb: RGB | None = None
        self._high_rgb: RGB | None = None

        if midpoint is not None:
            self.set_midpoint(midpoint)

    @classmethod
    def from_rgb(
        cls,
        low: tuple[float, float, float],
        high: tuple[float, float, float],
        vmin: float = 0.0,
        vmax: float = 1.0,
        midpoint: float | None = None,
    ) -> Diverging:
        """Create a fully configured colormap from two RGB triples."""
        cmap = cls(vmin, vmax, midpoint)
        cmap.set_low(*low)
        cmap.set_high(*high)
        return cmap

    @classmethod
    def from_msh(
        cls,
        low: MSH,
        high: MSH,
        vmin: float = 0.0,
        vmax: float = 1.0,
        midpoint: float | None = None,
    ) -> Diverging:
        """Create a configured colormap directly from MSH endpoints.

        The endpoints are stored as given; their RGB form is derived.
        """
        cmap = cls(vmin, vmax, midpoint)
        cmap._low, cmap._low_rgb = low, low.to_rgb()
        cmap._high, cmap._high_rgb = high, high.to_rgb()
        return cmap

    def __repr__(self) -> str:
        return (
            f"Diverging(vmin={self._vmin:g}, vmax={self._vmax:g}, "
            f"midpoint={self._midpoint:g}, low={self._low}, high={self._high})"
        )

    # === Configuration ===

    @property
    def vmin(self) -> float:
        return self._vmin

    @property
    def vmax(self) -> float:
        return self._vmax

    @property
    def midpoint(self) -> float:
        return self._midpoint

    @property
    def low(self) -> MSH | None:
        """Low endpoint in MSH, or None until set_low() is called."""
        return self._low

    @property
    def high(self) -> MSH | None:
        """High endpoint in MSH, or None until set_high() is called."""
        return self._high

    @property
    def is_configured(self) -> bool:
        return self._low is not None and self._high is not None

    def set_low(self, r: float, g: float, b: float) -> None:
        """Set the color at the low end of the range (gamma-encoded RGB)."""
        self._low_rgb = _checked_rgb("low", r, g, b)
        self._low = self._low_rgb.to_msh()
        logger.debug("Low endpoint RGB(%g, %g, %g) -> MSH(%s)", r, g, b, self._low)

    def set_high(self, r: float, g: float, b: float) -> None:
        """Set the color at the high end of the range (gamma-encoded RGB)."""
        self._high_rgb = _checked_rgb("high", r, g, b)
        self._high = self._high_rgb.to_msh()
        logger.debug("High endpoint RGB(%g, %g, %g) -> MSH(%s)", r, g, b, self._high)

    def set_midpoint(self, midpoint: float) -> None:
        """Set the data value mapped to the neutral center of the colormap."""
        midpoint = float(midpoint)
        if not (self._vmin < midpoint < self._vmax):
            raise ConfigurationError(
                f"Midpoint {midpoint} must lie strictly inside ({self._vmin}, {self._vmax})"
            )
        self._midpoint = midpoint
        logger.debug("Midpoint set to %g", midpoint)

    def endpoints(self) -> tuple[MSH, MSH]:
        """Stored (low, high) MSH endpoints; raises NotConfiguredError if unset."""
        if self._low is None or self._high is None:
            missing = [name for name, c in (("low", self._low), ("high", self._high)) if c is None]
            raise NotConfiguredError(
                f"Diverging colormap has no {' or '.join(missing)} color; "
                "call set_low() and set_high() before evaluating"
            )
        return self._low, self._high

    def endpoint_colors(self) -> tuple[RGB, RGB]:
        """(low, high) endpoints as the RGB they were configured with."""
        self.endpoints()
        return self._low_rgb, self._high_rgb

    # === Evaluation ===

    @staticmethod
    def _adjusted(low: MSH, high: MSH, below: bool) -> tuple[MSH, MSH]:
        # Two saturated ends meet at a gray midpoint
        if _is_saturated(low) and _is_saturated(high):
            gray = MSH(max(d.MIN_MID_MAGNITUDE, low.m, high.m), 0.0, 0.0)
            if below:
                high = gray
            else:
                low = gray

        if not _is_saturated(low) and _is_saturated(high):
            low = replace(low, h=adjust_hue(high, low.m))
        elif not _is_saturated(high) and _is_saturated(low):
            high = replace(high, h=adjust_hue(low, high.m))

        return low, high

    def control_points(self, value: float) -> tuple[MSH, MSH]:
        """MSH pair interpolated between for ``value``.

        The stored endpoints after saturation leveling and hue correction
        for the side of the midpoint that ``value`` falls on.
        """
        low, high = self.endpoints()
        return self._adjusted(low, high, value < self._midpoint)

    def normalize(self, values: Array) -> Array:
        """Blend factor in [0, 1] for each value.

        Below the midpoint values are scaled against [vmin, midpoint], from
        the midpoint up against [midpoint, vmax]. Values outside the range
        clamp to the nearest end.
        """
        values = B.as_array(values)
        below = values < self._midpoint
        t = B.where(
            below,
            (values - self._vmin) / (self._midpoint - self._vmin),
            (values - self._midpoint) / (self._vmax - self._midpoint),
        )
        return B.clip(t, 0.0, 1.0)

    def evaluate(self, values: Array) -> Array:
        """Map values to sRGB.

        Args:
            values: Scalar, numpy array or torch tensor of data values

        Returns:
            RGB array with shape (..., 3), values in [0, 1]
        """
        low, high = self.endpoints()
        values = B.as_array(values)
        below = values < self._midpoint
        t = self.normalize(values)

        lo_b, hi_b = self._adjusted(low, high, below=True)
        lo_a, hi_a = self._adjusted(low, high, below=False)

        m = B.where(below, _lerp(lo_b.m, hi_b.m, t), _lerp(lo_a.m, hi_a.m, t))
        s = B.where(below, _lerp(lo_b.s, hi_b.s, t), _lerp(lo_a.s, hi_a.s, t))
        h = B.where(below, _lerp(lo_b.h, hi_b.h, t), _lerp(lo_a.h, hi_a.h, t))

        return msh_to_srgb_array(m, s, h)

    def colormap(self, value: float) -> RGB:
        """Map a single value to an RGB color."""
        r, g, b = self.evaluate(float(value)).tolist()
        return RGB(r, g, b)
