"""Tests for colormap sampling and serialization."""

import json

import numpy as np
import pytest

from divergent import ConfigurationError, Diverging, NotConfiguredError, build_preset
from divergent.export import (
    SCHEMA_VERSION,
    format_pgfplots,
    from_json,
    load_json,
    sample,
    save_json,
    to_json,
    to_matplotlib,
    to_pgfplots,
)


class TestSample:

    def test_default_is_33_points(self, yellow_blue):
        rgb = sample(yellow_blue)
        assert rgb.shape == (33, 3)

    def test_points_are_i_over_32(self, yellow_blue):
        rgb = sample(yellow_blue)
        for i in (0, 5, 16, 31, 32):
            np.testing.assert_allclose(rgb[i], yellow_blue.colormap(i / 32.0).to_array(), atol=1e-12)

    def test_spans_custom_range(self, blue_white):
        rgb = sample(blue_white, 5)
        np.testing.assert_allclose(rgb[0], blue_white.colormap(-1.0).to_array(), atol=1e-12)
        np.testing.assert_allclose(rgb[-1], blue_white.colormap(1.0).to_array(), atol=1e-12)

    def test_too_few_samples(self, yellow_blue):
        with pytest.raises(ConfigurationError):
            sample(yellow_blue, 1)


class TestPgfplots:

    def test_format_layout(self):
        text = format_pgfplots("demo", np.array([[1.0, 1.0, 0.0], [0.5, 0.25, 0.125]]))
        assert text == (
            "\\pgfplotsset{\n"
            "   colormap={demo}{\n"
            "    rgb=(1,1,0)\n"
            "    rgb=(0.5,0.25,0.125)\n"
            "   }\n"
            "}\n"
        )

    def test_six_significant_digits(self):
        text = format_pgfplots("x", np.array([[1 / 3, 2 / 3, 0.0]]))
        assert "rgb=(0.333333,0.666667,0)" in text

    def test_to_pgfplots(self, yellow_blue):
        text = to_pgfplots("yellowblue", yellow_blue)
        assert text.startswith("\\pgfplotsset{\n   colormap={yellowblue}{\n")
        assert text.count("rgb=(") == 33
        assert text.endswith("   }\n}\n")


class TestJson:

    def test_document_fields(self, yellow_blue):
        doc = to_json("yb", yellow_blue, 9)
        assert doc['schema_version'] == SCHEMA_VERSION
        assert doc['name'] == "yb"
        assert (doc['vmin'], doc['vmax'], doc['midpoint']) == (0.0, 1.0, 0.5)
        assert len(doc['samples']) == 9
        np.testing.assert_allclose(doc['low'], [1, 1, 0], atol=1e-3)
        json.dumps(doc)

    def test_unconfigured(self):
        with pytest.raises(NotConfiguredError):
            to_json("empty", Diverging(0.0, 1.0))

    def test_save_and_load(self, tmp_path, blue_white):
        path = save_json(tmp_path / "bw", "bluewhite", blue_white, 17)
        assert path.suffix == ".json"
        assert path.exists()

        name, cmap = load_json(path)
        assert name == "bluewhite"
        assert (cmap.vmin, cmap.vmax, cmap.midpoint) == (-1.0, 1.0, 0.0)
        np.testing.assert_array_equal(sample(cmap, 17), sample(blue_white, 17))

    @pytest.mark.parametrize("name", ["coolwarm", "yellowblue"])
    def test_reload_is_exact(self, name):
        """Stored endpoints are the configured RGB, not an MSH round trip."""
        original = build_preset(name)
        _, cmap = from_json(json.loads(json.dumps(to_json(name, original))))
        assert cmap.endpoints() == original.endpoints()
        assert cmap.endpoint_colors() == original.endpoint_colors()
        values = np.linspace(0.0, 1.0, 101)
        np.testing.assert_array_equal(cmap.evaluate(values), original.evaluate(values))

    def test_document_stores_configured_rgb(self):
        cmap = Diverging.from_rgb((0.2, 0.3, 0.9), (0.9, 0.25, 0.1))
        doc = to_json("mine", cmap)
        assert doc['low'] == [0.2, 0.3, 0.9]
        assert doc['high'] == [0.9, 0.25, 0.1]

    def test_load_list_of_documents(self, tmp_path, yellow_blue, blue_white):
        path = tmp_path / "maps.json"
        path.write_text(json.dumps([to_json("yb", yellow_blue), to_json("bw", blue_white)]))

        loaded = load_json(path)
        assert [name for name, _ in loaded] == ["yb", "bw"]
        assert loaded[1][1].endpoints() == blue_white.endpoints()

    @pytest.mark.parametrize("data", [[], "coolwarm", 3, None])
    def test_non_object_document(self, data):
        with pytest.raises(ConfigurationError, match="JSON object"):
            from_json(data)

    def test_list_with_bad_entry(self, tmp_path, yellow_blue):
        path = tmp_path / "maps.json"
        path.write_text(json.dumps([to_json("yb", yellow_blue), [1, 2, 3]]))
        with pytest.raises(ConfigurationError):
            load_json(path)

    def test_wrong_schema_version(self, yellow_blue):
        doc = to_json("yb", yellow_blue)
        doc['schema_version'] = "0.1"
        with pytest.raises(ConfigurationError, match="schema"):
            from_json(doc)

    def test_missing_field(self, yellow_blue):
        doc = to_json("yb", yellow_blue)
        del doc['high']
        with pytest.raises(ConfigurationError, match="Malformed"):
            from_json(doc)


class TestMatplotlib:

    def test_listed_colormap(self, yellow_blue):
        pytest.importorskip('matplotlib')
        cm = to_matplotlib("yellowblue", yellow_blue)
        assert cm.name == "yellowblue"
        assert cm.N == 256
        np.testing.assert_allclose(cm(0.0)[:3], sample(yellow_blue, 256)[0], atol=1e-9)
