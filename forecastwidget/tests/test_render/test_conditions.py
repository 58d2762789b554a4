"""Tests for condition lookup and day/night icon selection."""

import pytest

from forecastwidget.render.conditions import (
    CONDITIONS,
    FALLBACK_CONDITION,
    is_night,
    resolve,
    select_icons,
)

KNOWN_CODES = [
    "clear", "cloudy", "pcloudy", "mcloudy", "lightrain", "rain", "lightsnow",
    "snow", "humid", "oshower", "ishower", "ts", "tsrain", "fog", "windy",
]


class TestResolve:
    def test_table_has_all_codes(self):
        assert sorted(CONDITIONS) == sorted(KNOWN_CODES)

    @pytest.mark.parametrize("code", KNOWN_CODES)
    def test_known_code(self, code: str):
        entry = resolve(code)
        assert entry is CONDITIONS[code]
        assert entry.code == code

    @pytest.mark.parametrize("code", ["", "hail", "CLEAR", "clearday", "tornado"])
    def test_unknown_falls_back_to_clear(self, code: str):
        assert resolve(code) is FALLBACK_CONDITION
        assert resolve(code).name == "CLEAR"

    def test_labels(self):
        assert resolve("pcloudy").name == "PARTLY CLOUDY"
        assert resolve("ishower").name == "HEAVY RAIN"
        assert resolve("tsrain").name == "STORM"


class TestSelectIcons:
    def test_noon_is_day(self):
        clear = resolve("clear")
        assert select_icons(12, clear) == ("☀️", "🌙")

    @pytest.mark.parametrize("hour", [0, 6, 18, 23])
    def test_night_hours(self, hour: int):
        clear = resolve("clear")
        assert select_icons(hour, clear) == ("🌙", "🌙")

    @pytest.mark.parametrize("hour", [7, 12, 17])
    def test_day_hours(self, hour: int):
        assert not is_night(hour)

    def test_boundaries_inclusive(self):
        assert is_night(6)
        assert is_night(18)

    def test_second_slot_always_night_icon(self):
        pcloudy = resolve("pcloudy")
        for hour in range(24):
            assert select_icons(hour, pcloudy)[1] == pcloudy.night_icon

    def test_same_day_and_night_icon(self):
        fog = resolve("fog")
        assert select_icons(12, fog) == ("🌫️", "🌫️")
        assert select_icons(0, fog) == ("🌫️", "🌫️")
