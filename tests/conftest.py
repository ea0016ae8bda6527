"""Test configuration for divergent."""

import pytest

from divergent import Diverging


@pytest.fixture
def yellow_blue():
    """Yellow (low) to blue (high) on [0, 1]."""
    return Diverging.from_rgb((1.0, 1.0, 0.0), (0.0, 0.0, 1.0))


@pytest.fixture
def blue_white():
    """Saturated blue (low) to unsaturated white (high) on [-1, 1]."""
    return Diverging.from_rgb((0.0, 0.0, 1.0), (1.0, 1.0, 1.0), vmin=-1.0, vmax=1.0)
