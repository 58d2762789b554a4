"""Shared test fixtures."""

import json
from datetime import date
from pathlib import Path

import pytest
import yaml

from forecastwidget.config.defaults import DEFAULT_CITIES
from forecastwidget.config.schema import WidgetConfig

FIXTURE_DIR = Path(__file__).parent / "fixtures"

# A Friday, so weekday and month labels are easy to check by hand.
FIXED_TODAY = date(2026, 10, 16)


@pytest.fixture
def default_config() -> WidgetConfig:
    """Return default WidgetConfig with default cities."""
    return WidgetConfig(cities=DEFAULT_CITIES)


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "display": {"max_days": 5, "default_unit": "F"},
        "provider": {"timeout_seconds": 5.0},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def london_forecast() -> dict:
    with open(FIXTURE_DIR / "seventimer_civil_london.json") as f:
        return json.load(f)


@pytest.fixture
def fixed_today() -> date:
    return FIXED_TODAY
