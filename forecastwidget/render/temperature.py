"""Temperature extraction and unit conversion."""

import math

from forecastwidget.models.common import TemperatureUnit
from forecastwidget.models.forecast import ForecastDay, SingleTemperature, TemperatureRange

DEFAULT_HIGH_C = 20.0
DEFAULT_LOW_C = 15.0
# Synthetic low for single-value readings. An approximation, not a
# meteorological rule.
SINGLE_VALUE_SPREAD_C = 5.0


def round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def convert(celsius: float, unit: TemperatureUnit) -> int:
    """Convert a Celsius value to `unit`, rounding after the conversion."""
    if unit is TemperatureUnit.FAHRENHEIT:
        return round_half_away(celsius * 9 / 5 + 32)
    return round_half_away(celsius)


def extract_high_low(day: ForecastDay) -> tuple[float, float]:
    """Return (high, low) in Celsius, before conversion.

    high >= low is not enforced.
    """
    reading = day.temperature
    if isinstance(reading, TemperatureRange):
        high = reading.max if reading.max is not None else DEFAULT_HIGH_C
        low = reading.min if reading.min is not None else DEFAULT_LOW_C
        return high, low
    if isinstance(reading, SingleTemperature):
        return reading.value, reading.value - SINGLE_VALUE_SPREAD_C
    return DEFAULT_HIGH_C, DEFAULT_LOW_C
