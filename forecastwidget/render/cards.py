"""Forecast renderer: turns a forecast series into display cards."""

from datetime import date, timedelta

from forecastwidget.models.common import TemperatureUnit, local_today
from forecastwidget.models.display import DisplayCard
from forecastwidget.models.forecast import ForecastDay
from forecastwidget.render.conditions import resolve, select_icons
from forecastwidget.render.temperature import convert, extract_high_low

MAX_DAYS = 7

_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def format_date_label(d: date) -> str:
    """Format as e.g. "Tue Jun 3". Locale independent, no zero padding."""
    return f"{_WEEKDAYS[d.weekday()]} {_MONTHS[d.month - 1]} {d.day}"


def date_label_for_index(index: int, today: date | None = None) -> str:
    """Label for the index-th entry, counting calendar days from today.

    The provider sends no explicit dates; entry 0 is assumed to be today and
    each following entry the next calendar day.
    """
    if today is None:
        today = local_today()
    return format_date_label(today + timedelta(days=index))


def render_card(
    day: ForecastDay,
    index: int,
    unit: TemperatureUnit,
    today: date | None = None,
) -> DisplayCard:
    condition = resolve(day.weather)
    display_icon, night_icon = select_icons(day.timepoint, condition)
    high, low = extract_high_low(day)
    return DisplayCard(
        date_label=date_label_for_index(index, today),
        day_icon=display_icon,
        night_icon=night_icon,
        condition_label=condition.name,
        high=convert(high, unit),
        low=convert(low, unit),
        unit=unit,
        featured=index == 0,
    )


def render(
    series: list[ForecastDay],
    unit: TemperatureUnit,
    today: date | None = None,
    max_days: int = MAX_DAYS,
) -> list[DisplayCard]:
    """Render the first `max_days` entries of a series, in order."""
    if today is None:
        today = local_today()
    return [
        render_card(day, i, unit, today)
        for i, day in enumerate(series[:max_days])
    ]
