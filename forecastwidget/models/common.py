"""Common types and helpers shared across models."""

from datetime import UTC, date, datetime
from enum import StrEnum


class TemperatureUnit(StrEnum):
    CELSIUS = "C"
    FAHRENHEIT = "F"

    @property
    def symbol(self) -> str:
        return f"°{self.value}"

    @property
    def label(self) -> str:
        return "Celsius" if self is TemperatureUnit.CELSIUS else "Fahrenheit"

    def toggled(self) -> "TemperatureUnit":
        if self is TemperatureUnit.CELSIUS:
            return TemperatureUnit.FAHRENHEIT
        return TemperatureUnit.CELSIUS


def utc_now() -> datetime:
    return datetime.now(UTC)


def utc_now_iso() -> str:
    return utc_now().isoformat()


def local_today() -> date:
    """Today's date on the local calendar."""
    return datetime.now().astimezone().date()
