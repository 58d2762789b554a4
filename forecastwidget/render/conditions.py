"""7Timer civil weather codes mapped to display labels and icons.

Only the base codes are listed; anything else (including the day/night
suffixed variants some products emit) resolves to the "clear" entry.
"""

from dataclasses import dataclass

NIGHT_STARTS_AT = 18
NIGHT_ENDS_AT = 6


@dataclass(frozen=True)
class ConditionEntry:
    code: str
    name: str
    icon: str
    day_icon: str
    night_icon: str


CONDITIONS: dict[str, ConditionEntry] = {
    e.code: e
    for e in (
        ConditionEntry("clear", "CLEAR", "☀️", "☀️", "🌙"),
        ConditionEntry("cloudy", "CLOUDY", "☁️", "☁️", "☁️"),
        ConditionEntry("pcloudy", "PARTLY CLOUDY", "🌤️", "🌤️", "🌙"),
        ConditionEntry("mcloudy", "MOSTLY CLOUDY", "⛅", "⛅", "☁️"),
        ConditionEntry("lightrain", "LIGHT RAIN", "🌦️", "🌦️", "🌧️"),
        ConditionEntry("rain", "RAIN", "🌧️", "🌧️", "🌧️"),
        ConditionEntry("lightsnow", "LIGHT SNOW", "🌨️", "🌨️", "🌨️"),
        ConditionEntry("snow", "SNOW", "❄️", "❄️", "❄️"),
        ConditionEntry("humid", "HUMID", "💧", "💧", "💧"),
        ConditionEntry("oshower", "SHOWERS", "🌦️", "🌦️", "🌧️"),
        ConditionEntry("ishower", "HEAVY RAIN", "🌧️", "🌧️", "🌧️"),
        ConditionEntry("ts", "THUNDERSTORM", "⛈️", "⛈️", "⛈️"),
        ConditionEntry("tsrain", "STORM", "⛈️", "⛈️", "⛈️"),
        ConditionEntry("fog", "FOG", "🌫️", "🌫️", "🌫️"),
        ConditionEntry("windy", "WINDY", "💨", "💨", "💨"),
    )
}

FALLBACK_CONDITION = CONDITIONS["clear"]


def resolve(code: str) -> ConditionEntry:
    return CONDITIONS.get(code, FALLBACK_CONDITION)


def is_night(timepoint: int) -> bool:
    # Both boundaries count as night: 06:00 and 18:00 are night hours.
    return timepoint >= NIGHT_STARTS_AT or timepoint <= NIGHT_ENDS_AT


def select_icons(timepoint: int, condition: ConditionEntry) -> tuple[str, str]:
    """Return (display icon, night icon) for a card.

    The second slot is the upcoming-night icon and never switches to the
    day icon.
    """
    display = condition.night_icon if is_night(timepoint) else condition.day_icon
    return display, condition.night_icon
