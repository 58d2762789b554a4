"""Forecast widget web app: FastAPI backend serving the page and JSON state."""

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, RedirectResponse

from forecastwidget.config.schema import CityConfig, WidgetConfig
from forecastwidget.ingest.forecast_fetcher import ForecastFetcher
from forecastwidget.ingest.seventimer_client import SevenTimerClient
from forecastwidget.models.common import utc_now_iso
from forecastwidget.view.page import forecast_container, render_page
from forecastwidget.widget.controller import ForecastWidget
from forecastwidget.widget.session import WidgetSession


def build_fetcher(config: WidgetConfig) -> ForecastFetcher:
    p = config.provider
    client = SevenTimerClient(
        base_url=p.base_url,
        product=p.product,
        output=p.output,
        user_agent=p.user_agent,
        timeout=p.timeout_seconds,
    )
    return ForecastFetcher(client)


def create_app(
    config: WidgetConfig, fetcher: ForecastFetcher | None = None
) -> FastAPI:
    """Build the app around one widget session."""
    widget = ForecastWidget(
        fetcher or build_fetcher(config),
        session=WidgetSession(unit=config.display.default_unit),
        max_days=config.display.max_days,
    )

    app = FastAPI(title="Forecast Widget", version="0.1.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.state.widget = widget

    def _city_or_404(slug: str) -> CityConfig:
        city = config.city(slug)
        if city is None:
            raise HTTPException(404, f"Unknown city: {slug}")
        return city

    # ── Data endpoints ──────────────────────────────────────────────

    @app.get("/api/cities")
    def get_cities():
        return [c.model_dump() for c in config.cities]

    @app.get("/api/state")
    def get_state():
        return widget.view().to_dict()

    @app.post("/api/forecast/{slug}")
    def select_city(slug: str):
        """Fetch and render a city. Fetch failures come back in the state."""
        city = _city_or_404(slug)
        return widget.select_location(city).to_dict()

    @app.post("/api/unit/toggle")
    def toggle_unit():
        return widget.toggle_unit().to_dict()

    @app.get("/api/health")
    def get_health():
        return {"status": "ok", "timestamp": utc_now_iso()}

    # ── Page ────────────────────────────────────────────────────────

    @app.get("/", response_class=HTMLResponse)
    def serve_page(city: str | None = None):
        if city is not None:
            view = widget.select_location(_city_or_404(city))
        elif widget.session.city is None and config.cities:
            # Initial load shows the first configured city
            view = widget.select_location(config.cities[0])
        else:
            view = widget.view()
        return HTMLResponse(render_page(view, config.cities))

    @app.get("/cards", response_class=HTMLResponse)
    def serve_cards():
        return HTMLResponse(forecast_container(widget.view().cards).to_html())

    @app.post("/unit/toggle")
    def toggle_unit_form():
        widget.toggle_unit()
        return RedirectResponse("/", status_code=303)

    return app
