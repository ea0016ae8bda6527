"""Sample diverging colormaps and serialize them for plotting tools.

Formats:
- pgfplots: ``\\pgfplotsset{colormap={name}{rgb=(r,g,b) ...}}`` for TikZ/LaTeX
- JSON: endpoints, domain and sampled colors, reloadable with load_json()
- matplotlib: ListedColormap (matplotlib imported on demand)
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import numpy as np

from divergent import defaults
from divergent.diverging import Diverging
from divergent.errors import ConfigurationError

logger = logging.getLogger(__name__)

SCHEMA_VERSION = "1.0"


def sample(cmap: Diverging, n: int = defaults.DEFAULT_SAMPLES) -> np.ndarray:
    """Evaluate ``cmap`` at ``n`` evenly spaced values over [vmin, vmax].

    Returns:
        RGB array with shape (n, 3)
    """
    if n < 2:
        raise ConfigurationError(f"Need at least 2 samples, got {n}")
    values = np.linspace(cmap.vmin, cmap.vmax, n)
    return np.asarray(cmap.evaluate(values), dtype=np.float64)


def format_pgfplots(name: str, rgb: np.ndarray) -> str:
    """Format sampled colors as a pgfplots colormap definition."""
    lines = ["\\pgfplotsset{", f"   colormap={{{name}}}{{"]
    for r, g, b in np.asarray(rgb).reshape(-1, 3).tolist():
        lines.append(f"    rgb=({r:g},{g:g},{b:g})")
    lines.append("   }")
    lines.append("}")
    return "\n".join(lines) + "\n"


def to_pgfplots(name: str, cmap: Diverging, n: int = defaults.DEFAULT_SAMPLES) -> str:
    return format_pgfplots(name, sample(cmap, n))


# === JSON ===

def to_json(name: str, cmap: Diverging, n: int = defaults.DEFAULT_SAMPLES) -> dict[str, Any]:
    """Describe a colormap as a JSON-serializable dictionary.

    Endpoints are stored as the RGB the colormap was configured with, so
    from_json() rebuilds an identical colormap.
    """
    low, high = cmap.endpoint_colors()
    return {
        'schema_version': SCHEMA_VERSION,
        'name': name,
        'vmin': cmap.vmin,
        'vmax': cmap.vmax,
        'midpoint': cmap.midpoint,
        'low': list(low),
        'high': list(high),
        'samples': sample(cmap, n).tolist(),
    }


def save_json(path: str | Path, name: str, cmap: Diverging, n: int = defaults.DEFAULT_SAMPLES) -> Path:
    """Write a colormap description to ``path`` (``.json`` suffix enforced)."""
    path = Path(path)
    if path.suffix != '.json':
        path = path.with_suffix('.json')
    path.write_text(json.dumps(to_json(name, cmap, n), indent=2))
    logger.info("Saved colormap %r to %s", name, path)
    return path


def from_json(data: dict[str, Any]) -> tuple[str, Diverging]:
    """Rebuild a (name, colormap) pair from a to_json() dictionary."""
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Colormap description must be a JSON object, got {type(data).__name__}"
        )
    version = data.get('schema_version')
    if version != SCHEMA_VERSION:
        raise ConfigurationError(f"Unsupported colormap schema version: {version!r}")
    try:
        cmap = Diverging.from_rgb(
            tuple(data['low']),
            tuple(data['high']),
            vmin=data['vmin'],
            vmax=data['vmax'],
            midpoint=data['midpoint'],
        )
        return str(data['name']), cmap
    except (KeyError, TypeError) as e:
        raise ConfigurationError(f"Malformed colormap description: {e}") from e


def load_json(path: str | Path) -> tuple[str, Diverging] | list[tuple[str, Diverging]]:
    """Load colormaps written by save_json() or the ``divergent --format json`` tool.

    Returns:
        A (name, colormap) pair for a single document, or a list of pairs
        when the file holds a list of documents
    """
    with open(path) as f:
        data = json.load(f)
    if isinstance(data, list):
        return [from_json(doc) for doc in data]
    return from_json(data)


# === matplotlib ===

def to_matplotlib(name: str, cmap: Diverging, n: int = defaults.DEFAULT_LUT_SIZE):
    """Sample ``cmap`` into a matplotlib ListedColormap with ``n`` entries."""
    from matplotlib.colors import ListedColormap

    return ListedColormap(sample(cmap, n), name=name)
