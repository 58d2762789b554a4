"""Display records derived from a forecast series."""

from dataclasses import asdict, dataclass

from forecastwidget.models.common import TemperatureUnit


@dataclass(frozen=True)
class DisplayCard:
    date_label: str
    day_icon: str
    night_icon: str
    condition_label: str
    high: int
    low: int
    unit: TemperatureUnit
    featured: bool = False

    @property
    def high_text(self) -> str:
        return f"{self.high}{self.unit.symbol}"

    @property
    def low_text(self) -> str:
        return f"{self.low}{self.unit.symbol}"

    def to_dict(self) -> dict:
        data = asdict(self)
        data["unit"] = self.unit.value
        data["high_text"] = self.high_text
        data["low_text"] = self.low_text
        return data
