"""Built-in diverging colormap presets.

Presets are named endpoint pairs that users can build directly or use as
starting points. Endpoints may be given as RGB or MSH; MSH endpoints are
converted to RGB before configuring the colormap.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from divergent.colorspace.types import MSH, RGB
from divergent.diverging import Diverging
from divergent.errors import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DivergingPreset:
    """A named pair of endpoint colors."""
    name: str
    low: RGB | MSH
    high: RGB | MSH
    description: str = ""

    def low_rgb(self) -> RGB:
        return _as_rgb(self.low)

    def high_rgb(self) -> RGB:
        return _as_rgb(self.high)

    def build(self, vmin: float = 0.0, vmax: float = 1.0, midpoint: float | None = None) -> Diverging:
        """Configure a Diverging colormap with this preset's endpoints."""
        logger.debug("Building preset %r on [%g, %g]", self.name, vmin, vmax)
        return Diverging.from_rgb(
            tuple(self.low_rgb()), tuple(self.high_rgb()), vmin, vmax, midpoint
        )


def _as_rgb(color: RGB | MSH) -> RGB:
    if isinstance(color, MSH):
        return color.to_rgb()
    return color


# Built-in presets
BUILTIN_PRESETS: dict[str, DivergingPreset] = {
    "yellowblue": DivergingPreset(
        name="yellowblue",
        low=RGB(1.0, 1.0, 0.0),
        high=RGB(0.0, 0.0, 1.0),
        description="Yellow to blue through white",
    ),
    "coolwarm": DivergingPreset(
        name="coolwarm",
        low=MSH(80.0, 1.08, -1.1),
        high=MSH(80.0, 1.08, 0.5),
        description="Moreland's cool-to-warm blue/red map",
    ),
    "redblue": DivergingPreset(
        name="redblue",
        low=RGB(1.0, 0.0, 0.0),
        high=RGB(0.0, 0.0, 1.0),
        description="Red to blue through white",
    ),
    "greenred": DivergingPreset(
        name="greenred",
        low=RGB(0.0, 1.0, 0.0),
        high=RGB(1.0, 0.0, 0.0),
        description="Green to red through white",
    ),
}


def get_preset(name: str) -> DivergingPreset:
    """Get a preset by name (case-insensitive)."""
    preset = BUILTIN_PRESETS.get(name.lower())
    if preset is None:
        raise ConfigurationError(
            f"Unknown preset {name!r}; available: {', '.join(list_presets())}"
        )
    return preset


def list_presets() -> list[str]:
    """List all available preset names."""
    return list(BUILTIN_PRESETS.keys())


def build_preset(
    name: str,
    vmin: float = 0.0,
    vmax: float = 1.0,
    midpoint: float | None = None,
) -> Diverging:
    """Build a configured Diverging colormap from a named preset."""
    return get_preset(name).build(vmin, vmax, midpoint)
