"""7Timer! civil forecast data models."""

from dataclasses import dataclass

DEFAULT_TIMEPOINT = 12


@dataclass(frozen=True)
class SingleTemperature:
    """`temp2m` given as a bare number."""

    value: float


@dataclass(frozen=True)
class TemperatureRange:
    """`temp2m` given as a `{max, min}` object. Either side may be missing."""

    max: float | None
    min: float | None


TemperatureReading = SingleTemperature | TemperatureRange | None


@dataclass(frozen=True)
class ForecastDay:
    weather: str
    temperature: TemperatureReading = None
    timepoint: int = DEFAULT_TIMEPOINT
