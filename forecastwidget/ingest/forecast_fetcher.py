"""Forecast fetcher: retrieves a 7Timer dataseries and types its entries."""

import logging
import math

from forecastwidget.ingest.errors import DecodeError, EmptyDataError
from forecastwidget.ingest.seventimer_client import SevenTimerClient
from forecastwidget.models.forecast import (
    DEFAULT_TIMEPOINT,
    ForecastDay,
    SingleTemperature,
    TemperatureRange,
    TemperatureReading,
)

logger = logging.getLogger(__name__)


class ForecastFetcher:
    def __init__(self, client: SevenTimerClient):
        self.client = client

    def fetch(self, latitude: float, longitude: float) -> list[ForecastDay]:
        """Fetch the forecast series for a coordinate pair.

        Entries come back in source order. Raises a FetchError subclass on
        any failure; nothing is cached and nothing is retried.
        """
        raw = self.client.get_forecast(latitude, longitude)
        days = _extract_forecast_days(raw)
        logger.info(
            "Fetched %d forecast entries for lat=%s lon=%s",
            len(days), latitude, longitude,
        )
        return days


def _extract_forecast_days(raw: dict) -> list[ForecastDay]:
    series = raw.get("dataseries")
    if not series:
        raise EmptyDataError()
    if not isinstance(series, list):
        raise DecodeError("dataseries is not a list")

    days: list[ForecastDay] = []
    for i, entry in enumerate(series):
        if not isinstance(entry, dict):
            raise DecodeError(f"dataseries[{i}] is not an object")
        days.append(parse_forecast_day(entry))
    return days


def parse_forecast_day(entry: dict) -> ForecastDay:
    """Type one dataseries entry without altering its values."""
    weather = entry.get("weather")
    timepoint = entry.get("timepoint")
    return ForecastDay(
        weather=weather if isinstance(weather, str) else "",
        temperature=_parse_temperature(entry.get("temp2m")),
        timepoint=int(timepoint) if _is_number(timepoint) else DEFAULT_TIMEPOINT,
    )


def _parse_temperature(value: object) -> TemperatureReading:
    # temp2m is a bare number in some responses and {max, min} in others
    if _is_number(value):
        return SingleTemperature(value=value)
    if isinstance(value, dict):
        high = value.get("max")
        low = value.get("min")
        return TemperatureRange(
            max=high if _is_number(high) else None,
            min=low if _is_number(low) else None,
        )
    return None


def _is_number(value: object) -> bool:
    # NaN and Infinity parse as floats but are not usable readings
    return (
        isinstance(value, int | float)
        and not isinstance(value, bool)
        and math.isfinite(value)
    )
