"""Widget page and card list built from view nodes."""

from forecastwidget.config.schema import CityConfig
from forecastwidget.models.display import DisplayCard
from forecastwidget.view.nodes import ViewNode, el
from forecastwidget.widget.session import WidgetView

PAGE_TITLE = "7-Day Weather Forecast"

_STYLE = """
body { font-family: sans-serif; background: #eef3f8; margin: 2rem; }
.controls { display: flex; gap: 1rem; align-items: center; margin-bottom: 1rem; }
.forecast-container { display: flex; flex-wrap: wrap; gap: 1rem; }
.weather-card { background: #fff; border-radius: 8px; padding: 1rem; min-width: 9rem; text-align: center; }
.weather-card.highlight { border: 2px solid #2a7ae2; }
.weather-icon { font-size: 2rem; margin: 0 0.25rem; }
.condition { font-weight: bold; margin: 0.5rem 0; }
.error-message { color: #b00020; }
.hidden { display: none; }
"""

_SCRIPT = (
    "document.getElementById('citySelect').addEventListener('change', function (e) {"
    " document.getElementById('loading').classList.remove('hidden');"
    " document.getElementById('forecastContainer').classList.add('hidden');"
    " e.target.form.submit(); });"
)


def card_node(card: DisplayCard) -> ViewNode:
    cls = "weather-card highlight" if card.featured else "weather-card"
    return el(
        "div", "",
        el("div", card.date_label, cls="date"),
        el(
            "div", "",
            el("span", card.day_icon, cls="weather-icon", aria_label="Day weather"),
            el("span", card.night_icon, cls="weather-icon", aria_label="Night weather"),
            cls="weather-icons",
        ),
        el("div", card.condition_label, cls="condition"),
        el(
            "div", "",
            el("div", f"H: {card.high_text}", cls="temp-high"),
            el("div", f"L: {card.low_text}", cls="temp-low"),
            cls="temperatures",
        ),
        cls=cls,
    )


def forecast_container(cards: list[DisplayCard], hidden: bool = False) -> ViewNode:
    cls = "forecast-container hidden" if hidden else "forecast-container"
    return el("div", "", *(card_node(c) for c in cards), cls=cls, id="forecastContainer")


def _city_select(cities: list[CityConfig], selected: CityConfig | None) -> ViewNode:
    select = el("select", "", name="city", id="citySelect")
    for c in cities:
        option = el("option", c.name, value=c.slug)
        if selected is not None and c.slug == selected.slug:
            option.attrs["selected"] = "selected"
        select.add(option)
    return el("form", "", el("label", "City ", for_="citySelect"), select, method="get", action="/")


def _unit_toggle(view: WidgetView) -> ViewNode:
    other = view.unit.toggled()
    return el(
        "form", "",
        el("span", f"Using {view.unit.label}", id="temperatureUnit"),
        el("button", f"Switch to {other.symbol}", type="submit", id="tempToggleBtn"),
        method="post", action="/unit/toggle",
    )


def page_node(view: WidgetView, cities: list[CityConfig]) -> ViewNode:
    error_cls = "error-message" if view.error_message else "error-message hidden"
    loading_cls = "loading" if view.loading else "loading hidden"
    body = el(
        "body", "",
        el("h1", PAGE_TITLE),
        el("div", "", _city_select(cities, view.city), _unit_toggle(view), cls="controls"),
        el("div", "Loading forecast...", cls=loading_cls, id="loading"),
        el("div", view.error_message or "", cls=error_cls, id="errorMessage", role="alert"),
        forecast_container(view.cards, hidden=view.loading),
        el("script", _SCRIPT),
    )
    head = el(
        "head", "",
        el("meta", charset="utf-8"),
        el("title", PAGE_TITLE),
        el("style", _STYLE),
    )
    return el("html", "", head, body, lang="en")


def render_page(view: WidgetView, cities: list[CityConfig]) -> str:
    return "<!DOCTYPE html>" + page_node(view, cities).to_html()
