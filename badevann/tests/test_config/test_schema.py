"""Tests for settings and threshold schema validation."""

import pytest
from pydantic import ValidationError

from badevann.config.defaults import DEFAULT_THRESHOLDS
from badevann.config.schema import Band, OutputFormat, ThresholdConfig, UserSettings


class TestUserSettings:
    def test_defaults(self):
        s = UserSettings()
        assert s.output_format == OutputFormat.LONG
        assert s.default_beach == ""
        assert s.beach_count == 20
        assert s.cache_timeout == 60
        assert s.debug_mode is False

    def test_camel_case_aliases(self):
        s = UserSettings.model_validate({"outputFormat": "iso", "cacheTimeout": 5})
        assert s.output_format == OutputFormat.ISO
        assert s.cache_timeout == 5

    def test_unknown_keys_ignored(self):
        s = UserSettings.model_validate({"colour": "pink", "beachCount": 5})
        assert s.beach_count == 5
        assert "colour" not in s.to_json_dict()

    def test_json_dict_uses_aliases(self):
        assert UserSettings().to_json_dict() == {
            "outputFormat": "long",
            "defaultBeach": "",
            "beachCount": 20,
            "cacheTimeout": 60,
            "debugMode": False,
        }

    def test_negative_timeout_rejected(self):
        with pytest.raises(ValidationError):
            UserSettings.model_validate({"cacheTimeout": -1})

    def test_unknown_output_format_rejected(self):
        with pytest.raises(ValidationError):
            UserSettings.model_validate({"outputFormat": "fancy"})


class TestThresholdConfig:
    def test_builtin_tables_valid(self):
        assert DEFAULT_THRESHOLDS.colors[0].name == "hot"
        assert DEFAULT_THRESHOLDS.colors[-1].min is None

    def test_catch_all_required(self):
        with pytest.raises(ValidationError, match="catch-all"):
            ThresholdConfig(
                colors=[Band(name="hot", min=25, symbol="red")],
                emojis=DEFAULT_THRESHOLDS.emojis,
            )

    def test_descending_bounds_required(self):
        with pytest.raises(ValidationError, match="descending"):
            ThresholdConfig(
                colors=[
                    Band(name="cool", min=15, symbol="cyan"),
                    Band(name="hot", min=25, symbol="red"),
                    Band(name="cold", symbol="blue"),
                ],
                emojis=DEFAULT_THRESHOLDS.emojis,
            )

    def test_extra_fields_rejected(self):
        with pytest.raises(ValidationError, match="Extra inputs are not permitted"):
            Band(name="hot", min=25, symbol="red", colour="pink")
