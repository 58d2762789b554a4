"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field

from forecastwidget.models.common import TemperatureUnit

SEVENTIMER_BASE_URL = "https://www.7timer.info/bin/api.pl"
DEFAULT_USER_AGENT = "forecastwidget/0.1.0"


class CityConfig(BaseModel):
    model_config = {"extra": "forbid"}

    name: str
    slug: str
    latitude: float = Field(ge=-90.0, le=90.0)
    longitude: float = Field(ge=-180.0, le=180.0)


class ProviderConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = SEVENTIMER_BASE_URL
    product: str = "civil"
    output: str = "json"
    timeout_seconds: float = Field(default=30.0, gt=0.0)
    user_agent: str = DEFAULT_USER_AGENT


class DisplayConfig(BaseModel):
    model_config = {"extra": "forbid"}

    max_days: int = Field(default=7, ge=1, le=16)
    default_unit: TemperatureUnit = TemperatureUnit.CELSIUS


class ServerConfig(BaseModel):
    model_config = {"extra": "forbid"}

    host: str = "127.0.0.1"
    port: int = Field(default=8778, ge=1, le=65535)


class WidgetConfig(BaseModel):
    model_config = {"extra": "forbid"}

    provider: ProviderConfig = ProviderConfig()
    display: DisplayConfig = DisplayConfig()
    server: ServerConfig = ServerConfig()
    cities: list[CityConfig] = []

    def city(self, slug: str) -> CityConfig | None:
        for c in self.cities:
            if c.slug == slug:
                return c
        return None
