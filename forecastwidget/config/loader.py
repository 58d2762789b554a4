"""YAML config loader with dotted-key lookup."""

from pathlib import Path
from typing import Any

import yaml

from forecastwidget.config.defaults import DEFAULT_CITIES
from forecastwidget.config.schema import WidgetConfig


def load_config(path: str | Path | None = None) -> WidgetConfig:
    """Load and validate config from a YAML file.

    A missing file yields the defaults. If no cities are specified,
    injects DEFAULT_CITIES.
    """
    raw: dict = {}
    if path is not None and Path(path).exists():
        with open(path) as f:
            raw = yaml.safe_load(f) or {}

    if "cities" not in raw or not raw["cities"]:
        raw["cities"] = [c.model_dump() for c in DEFAULT_CITIES]

    return WidgetConfig(**raw)


def get_config_value(config: WidgetConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'display.max_days'."""
    parts = dotted_key.split(".")
    obj: Any = config
    for part in parts:
        if isinstance(obj, list):
            obj = obj[int(part)]
        elif hasattr(obj, part):
            obj = getattr(obj, part)
        elif isinstance(obj, dict):
            obj = obj[part]
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj
