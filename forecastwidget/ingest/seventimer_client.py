"""7Timer! forecast API client. Single request, no retry."""

import logging

import httpx

from forecastwidget.config.schema import DEFAULT_USER_AGENT, SEVENTIMER_BASE_URL
from forecastwidget.ingest.errors import DecodeError, HttpStatusError, TransportError

logger = logging.getLogger(__name__)


class SevenTimerClient:
    def __init__(
        self,
        base_url: str = SEVENTIMER_BASE_URL,
        product: str = "civil",
        output: str = "json",
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 30.0,
    ):
        self.base_url = base_url
        self.product = product
        self.output = output
        self.user_agent = user_agent
        self.timeout = timeout

    def get_forecast(self, latitude: float, longitude: float) -> dict:
        """Fetch the raw forecast document for a coordinate pair.

        Raises TransportError, HttpStatusError or DecodeError.
        """
        params = {
            "lon": longitude,
            "lat": latitude,
            "product": self.product,
            "output": self.output,
        }
        headers = {"User-Agent": self.user_agent, "Accept": "application/json"}

        logger.info("Requesting 7Timer forecast lat=%s lon=%s", latitude, longitude)
        try:
            resp = httpx.get(
                self.base_url,
                params=params,
                headers=headers,
                timeout=self.timeout,
                follow_redirects=True,
            )
        except httpx.RequestError as e:
            logger.error("7Timer request failed: %s", e)
            raise TransportError(str(e) or type(e).__name__) from e

        if not resp.is_success:
            logger.warning("7Timer returned %d for %s", resp.status_code, resp.url)
            raise HttpStatusError(resp.status_code)

        try:
            data = resp.json()
        except ValueError as e:
            raise DecodeError(f"Invalid JSON in forecast response: {e}") from e

        if not isinstance(data, dict):
            raise DecodeError("Forecast response is not a JSON object")
        return data
