"""Tests for config loading and dotted-key lookup."""

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from forecastwidget.config.defaults import DEFAULT_CITIES
from forecastwidget.config.loader import get_config_value, load_config
from forecastwidget.config.schema import CityConfig, WidgetConfig
from forecastwidget.models.common import TemperatureUnit


class TestLoadConfig:
    def test_load_from_yaml(self, config_yaml_path: Path):
        config = load_config(config_yaml_path)
        assert config.display.max_days == 5
        assert config.display.default_unit == TemperatureUnit.FAHRENHEIT
        assert config.provider.timeout_seconds == 5.0

    def test_default_cities_injected(self, config_yaml_path: Path):
        config = load_config(config_yaml_path)
        assert len(config.cities) == len(DEFAULT_CITIES)
        assert config.cities[0].slug == "london"

    def test_explicit_cities_not_overridden(self, tmp_path: Path):
        data = {
            "cities": [
                {"name": "Test City", "slug": "test", "latitude": 1.5, "longitude": 2.5}
            ]
        }
        path = tmp_path / "custom.yaml"
        with open(path, "w") as f:
            yaml.dump(data, f)
        config = load_config(path)
        assert len(config.cities) == 1
        assert config.cities[0].slug == "test"

    def test_empty_yaml_uses_defaults(self, tmp_path: Path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        config = load_config(path)
        assert config.display.max_days == 7
        assert config.display.default_unit == TemperatureUnit.CELSIUS
        assert config.provider.product == "civil"
        assert config.provider.output == "json"
        assert len(config.cities) == len(DEFAULT_CITIES)

    def test_missing_file_uses_defaults(self, tmp_path: Path):
        config = load_config(tmp_path / "does-not-exist.yaml")
        assert config.provider.base_url == "https://www.7timer.info/bin/api.pl"
        assert len(config.cities) == len(DEFAULT_CITIES)

    def test_fixtures_config(self, fixtures_dir: Path):
        config = load_config(fixtures_dir / "config_default.yaml")
        assert config.server.port == 9000
        assert config.display.default_unit == TemperatureUnit.FAHRENHEIT

    def test_unknown_key_rejected(self, tmp_path: Path):
        path = tmp_path / "bad.yaml"
        path.write_text("display:\n  cache_minutes: 10\n")
        with pytest.raises(ValidationError):
            load_config(path)


class TestSchema:
    def test_latitude_out_of_range(self):
        with pytest.raises(ValidationError):
            CityConfig(name="X", slug="x", latitude=91.0, longitude=0.0)

    def test_longitude_out_of_range(self):
        with pytest.raises(ValidationError):
            CityConfig(name="X", slug="x", latitude=0.0, longitude=-181.0)

    def test_max_days_bounds(self):
        with pytest.raises(ValidationError):
            WidgetConfig(display={"max_days": 0})

    def test_city_lookup(self, default_config: WidgetConfig):
        assert default_config.city("tokyo").name == "Tokyo"
        assert default_config.city("atlantis") is None


class TestGetConfigValue:
    def test_nested_value(self, default_config: WidgetConfig):
        assert get_config_value(default_config, "display.max_days") == 7

    def test_list_index(self, default_config: WidgetConfig):
        assert get_config_value(default_config, "cities.1.slug") == "new-york"

    def test_missing_key(self, default_config: WidgetConfig):
        with pytest.raises(KeyError):
            get_config_value(default_config, "display.nope")
