"""Interaction handlers: location selection and unit toggle."""

import logging
from collections.abc import Callable
from datetime import date

from forecastwidget.config.schema import CityConfig
from forecastwidget.ingest.errors import FetchError
from forecastwidget.ingest.forecast_fetcher import ForecastFetcher
from forecastwidget.models.common import local_today
from forecastwidget.render.cards import MAX_DAYS, render
from forecastwidget.widget.session import WidgetSession, WidgetView

logger = logging.getLogger(__name__)


def failure_message(reason: str) -> str:
    return f"Failed to fetch weather data: {reason}. Please try again later."


class ForecastWidget:
    def __init__(
        self,
        fetcher: ForecastFetcher,
        session: WidgetSession | None = None,
        max_days: int = MAX_DAYS,
        today: Callable[[], date] = local_today,
    ):
        self.fetcher = fetcher
        self.session = session or WidgetSession()
        self.max_days = max_days
        self.today = today

    def select_location(self, city: CityConfig) -> WidgetView:
        """Fetch and render the forecast for a city.

        Failures are logged and surfaced as an error message; the previously
        stored forecast is kept. A response that arrives after a newer
        selection started is dropped.
        """
        token = self.session.begin_request(city)
        try:
            days = self.fetcher.fetch(city.latitude, city.longitude)
        except FetchError as e:
            logger.error("Forecast fetch for %s failed: %s", city.slug, e.reason)
            self._fail(token, city, e.reason)
        except Exception as e:
            logger.exception("Unexpected error fetching forecast for %s", city.slug)
            self._fail(token, city, str(e) or type(e).__name__)
        else:
            if not self.session.complete(token, days):
                logger.info("Dropping stale forecast response for %s", city.slug)
        return self.view()

    def toggle_unit(self) -> WidgetView:
        """Flip the unit and re-render the stored forecast without fetching."""
        unit = self.session.toggle_unit()
        logger.info("Temperature unit switched to %s", unit.label)
        return self.view()

    def view(self) -> WidgetView:
        s = self.session
        cards = []
        if s.forecast is not None:
            cards = render(s.forecast, s.unit, today=self.today(), max_days=self.max_days)
        return WidgetView(
            unit=s.unit,
            loading=s.loading,
            error_message=s.error_message,
            city=s.city,
            cards=cards,
        )

    def _fail(self, token: int, city: CityConfig, reason: str) -> None:
        if not self.session.fail(token, failure_message(reason)):
            logger.info("Dropping stale fetch failure for %s", city.slug)
