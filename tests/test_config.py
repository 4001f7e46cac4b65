"""Unit tests for render settings."""

import json

import pytest

from lumen.config import QUALITY_PRESETS, RenderSettings, load_settings, save_settings
from lumen.core.errors import ConfigError


class TestRenderSettings:
    """Tests for the settings dataclass."""

    def test_defaults(self):
        """Defaults describe a small sky render."""
        settings = RenderSettings()
        assert (settings.width, settings.height) == (200, 100)
        assert settings.aspect == 2.0
        assert settings.max_depth == 50
        assert settings.clamp is True

    def test_overrides_skip_none(self):
        """None means keep the current value."""
        settings = RenderSettings().with_overrides(width=64, height=None, scene="cornell_box")
        assert settings.width == 64
        assert settings.height == 100
        assert settings.scene == "cornell_box"

    def test_quality_presets(self):
        """Presets replace size, samples and depth."""
        settings = RenderSettings().with_quality("preview")
        for key, value in QUALITY_PRESETS["preview"].items():
            assert getattr(settings, key) == value
        with pytest.raises(ConfigError):
            RenderSettings().with_quality("ultra")

    @pytest.mark.parametrize("field,value", [
        ("width", 0), ("height", -5), ("samples", 0), ("workers", 0),
        ("max_depth", -1), ("gamma", 0.0),
    ])
    def test_validate_rejects(self, field, value):
        """Out-of-range values raise ConfigError."""
        with pytest.raises(ConfigError):
            RenderSettings(**{field: value}).validate()

    def test_validate_accepts_zero_depth(self):
        """max_depth = 0 renders emission only, which is allowed."""
        assert RenderSettings(max_depth=0).validate().max_depth == 0

    def test_config_error_is_value_error(self):
        """Callers catching ValueError also see settings errors."""
        assert issubclass(ConfigError, ValueError)


class TestSettingsFiles:
    """Tests for JSON settings files."""

    def test_round_trip(self, tmp_path):
        """Saved settings load back equal."""
        settings = RenderSettings(width=32, height=16, scene="simple_light", clamp=False)
        path = save_settings(settings, tmp_path / "settings.json")
        assert load_settings(path) == settings

    def test_partial_file_keeps_defaults(self, tmp_path):
        """Missing keys fall back to defaults."""
        path = tmp_path / "partial.json"
        path.write_text(json.dumps({"samples": 8}))
        settings = load_settings(path)
        assert settings.samples == 8
        assert settings.width == RenderSettings().width

    def test_missing_file(self, tmp_path):
        """A missing file is a ConfigError."""
        with pytest.raises(ConfigError):
            load_settings(tmp_path / "absent.json")

    def test_bad_json(self, tmp_path):
        """Malformed JSON is a ConfigError."""
        path = tmp_path / "bad.json"
        path.write_text("{not json")
        with pytest.raises(ConfigError):
            load_settings(path)

    def test_not_an_object(self, tmp_path):
        """The top level must be an object."""
        path = tmp_path / "list.json"
        path.write_text("[1, 2]")
        with pytest.raises(ConfigError):
            load_settings(path)

    def test_unknown_keys(self, tmp_path):
        """Unknown keys are reported."""
        path = tmp_path / "extra.json"
        path.write_text(json.dumps({"samples": 8, "exposure": 2}))
        with pytest.raises(ConfigError, match="exposure"):
            load_settings(path)

    @pytest.mark.parametrize("data", [
        {"width": "200"}, {"samples": 2.5}, {"seed": True}, {"use_bvh": 1},
        {"scene": 3}, {"gamma": "2.2"}, {"clamp": None},
    ])
    def test_wrong_types(self, tmp_path, data):
        """A value of the wrong JSON type is a ConfigError naming the key."""
        path = tmp_path / "typed.json"
        path.write_text(json.dumps(data))
        name = next(iter(data))
        with pytest.raises(ConfigError, match=name):
            load_settings(path)

    def test_integer_gamma_becomes_float(self, tmp_path):
        """Whole numbers are accepted where a float is expected."""
        path = tmp_path / "gamma.json"
        path.write_text(json.dumps({"gamma": 2}))
        settings = load_settings(path)
        assert settings.gamma == 2.0
        assert isinstance(settings.gamma, float)
