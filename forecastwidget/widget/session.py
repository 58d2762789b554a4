"""Per-UI-session widget state: active unit and last good forecast."""

import threading
from dataclasses import dataclass, field

from forecastwidget.config.schema import CityConfig
from forecastwidget.models.common import TemperatureUnit
from forecastwidget.models.display import DisplayCard
from forecastwidget.models.forecast import ForecastDay


@dataclass(frozen=True)
class WidgetView:
    """Everything the UI needs to draw one frame."""

    unit: TemperatureUnit
    loading: bool
    error_message: str | None
    city: CityConfig | None
    cards: list[DisplayCard] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "unit": self.unit.value,
            "unit_label": self.unit.label,
            "loading": self.loading,
            "error_message": self.error_message,
            "city": self.city.model_dump() if self.city else None,
            "cards": [c.to_dict() for c in self.cards],
        }


class WidgetSession:
    """Mutable state shared by the fetch and toggle handlers.

    The stored forecast changes only on a successful, non-stale fetch.
    Each fetch takes a request token; only the latest token may complete.
    """

    def __init__(self, unit: TemperatureUnit = TemperatureUnit.CELSIUS):
        self.unit = unit
        self.forecast: list[ForecastDay] | None = None
        self.city: CityConfig | None = None
        self.pending_city: CityConfig | None = None
        self.loading = False
        self.error_message: str | None = None
        self._latest_token = 0
        self._lock = threading.Lock()

    def begin_request(self, city: CityConfig) -> int:
        with self._lock:
            self._latest_token += 1
            self.pending_city = city
            self.loading = True
            self.error_message = None
            return self._latest_token

    def complete(self, token: int, forecast: list[ForecastDay]) -> bool:
        """Store a fetched forecast. Returns False if the token is stale."""
        with self._lock:
            if token != self._latest_token:
                return False
            self.forecast = forecast
            self.city = self.pending_city
            self.loading = False
            return True

    def fail(self, token: int, message: str) -> bool:
        """Record a failure. Returns False if the token is stale."""
        with self._lock:
            if token != self._latest_token:
                return False
            self.error_message = message
            self.loading = False
            return True

    def toggle_unit(self) -> TemperatureUnit:
        with self._lock:
            self.unit = self.unit.toggled()
            return self.unit
