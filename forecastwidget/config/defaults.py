"""Default city selection with coordinates."""

from forecastwidget.config.schema import CityConfig

DEFAULT_CITIES: list[CityConfig] = [
    CityConfig(name="London", slug="london", latitude=51.5074, longitude=-0.1278),
    CityConfig(name="New York", slug="new-york", latitude=40.7128, longitude=-74.0060),
    CityConfig(name="Tokyo", slug="tokyo", latitude=35.6762, longitude=139.6503),
    CityConfig(name="Sydney", slug="sydney", latitude=-33.8688, longitude=151.2093),
    CityConfig(name="Paris", slug="paris", latitude=48.8566, longitude=2.3522),
    CityConfig(name="Cairo", slug="cairo", latitude=30.0444, longitude=31.2357),
    CityConfig(name="Rio de Janeiro", slug="rio", latitude=-22.9068, longitude=-43.1729),
]
