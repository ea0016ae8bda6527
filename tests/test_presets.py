"""Tests for built-in diverging presets."""

import numpy as np
import pytest

from divergent import (
    BUILTIN_PRESETS,
    MSH,
    ConfigurationError,
    Diverging,
    build_preset,
    get_preset,
    list_presets,
)


class TestRegistry:

    def test_list_order(self):
        assert list_presets() == ["yellowblue", "coolwarm", "redblue", "greenred"]

    def test_get_preset_case_insensitive(self):
        assert get_preset("CoolWarm") is BUILTIN_PRESETS["coolwarm"]

    def test_unknown_preset(self):
        with pytest.raises(ConfigurationError, match="Unknown preset 'viridis'"):
            get_preset("viridis")


class TestPresetColors:

    def test_coolwarm_defined_in_msh(self):
        preset = get_preset("coolwarm")
        assert preset.low == MSH(80.0, 1.08, -1.1)
        assert preset.high == MSH(80.0, 1.08, 0.5)

    def test_coolwarm_endpoints_are_valid_rgb(self):
        preset = get_preset("coolwarm")
        for rgb in (preset.low_rgb(), preset.high_rgb()):
            arr = rgb.to_array()
            assert (arr >= 0).all() and (arr <= 1).all()
        # Blue-ish low, red-ish high
        assert preset.low_rgb().b > preset.low_rgb().r
        assert preset.high_rgb().r > preset.high_rgb().b

    @pytest.mark.parametrize("name", list(BUILTIN_PRESETS))
    def test_ends_reproduce_preset_colors(self, name):
        preset = get_preset(name)
        cmap = preset.build()
        np.testing.assert_allclose(cmap.colormap(0.0).to_array(), preset.low_rgb().to_array(), atol=1e-3)
        np.testing.assert_allclose(cmap.colormap(1.0).to_array(), preset.high_rgb().to_array(), atol=1e-3)

    @pytest.mark.parametrize("name", list(BUILTIN_PRESETS))
    def test_saturated_presets_have_neutral_center(self, name):
        center = build_preset(name).colormap(0.5).to_array()
        assert np.ptp(center) < 1e-2


class TestBuild:

    def test_build_with_range(self):
        cmap = build_preset("redblue", vmin=-10.0, vmax=30.0, midpoint=0.0)
        assert isinstance(cmap, Diverging)
        assert (cmap.vmin, cmap.vmax, cmap.midpoint) == (-10.0, 30.0, 0.0)
        np.testing.assert_allclose(cmap.colormap(-10.0).to_array(), [1, 0, 0], atol=1e-3)

    def test_invalid_range_propagates(self):
        with pytest.raises(ConfigurationError):
            build_preset("greenred", vmin=1.0, vmax=0.0)
