"""
City Weather Domain

Real-time weather, daily forecasts up to 30 days and hourly forecasts up to
168 hours for 200,000+ cities.
https://dev.qweather.com/docs/api/weather/
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..availability import check_horizon
from ..endpoints import QWeatherEndpoint
from ..enums import DayRange, HourRange, Lang, Unit
from ..locations import Coordinate, Location, LocationID
from ..responses import WeatherDaily, WeatherHourly, WeatherNow
from ..results import api_result

if TYPE_CHECKING:
    from ..client import QWeatherClient


WEATHER_NOW = QWeatherEndpoint(
    name="weather_now",
    path="weather/now",
    description="Real-time weather for a city or coordinate.",
    response_model=WeatherNow,
    locations=(LocationID, Coordinate),
    localized=True,
    metric=True,
)

WEATHER_DAILY = QWeatherEndpoint(
    name="weather_daily",
    path="weather/{days}",
    description="Daily forecast for the next 3, 7, 10, 15 or 30 days.",
    response_model=WeatherDaily,
    locations=(LocationID, Coordinate),
    localized=True,
    metric=True,
)

WEATHER_HOURLY = QWeatherEndpoint(
    name="weather_hourly",
    path="weather/{hours}",
    description="Hourly forecast for the next 24, 72 or 168 hours.",
    response_model=WeatherHourly,
    locations=(LocationID, Coordinate),
    localized=True,
    metric=True,
)

WEATHER_ENDPOINTS: list[QWeatherEndpoint] = [WEATHER_NOW, WEATHER_DAILY, WEATHER_HOURLY]


class WeatherApi:
    """City weather endpoints."""

    def __init__(self, qw: QWeatherClient) -> None:
        self._qw = qw

    @api_result
    async def now(
        self,
        location: Location,
        unit: Unit | None = None,
        lang: Lang | None = None,
    ) -> WeatherNow:
        """Temperature, wind, humidity, pressure, precipitation and visibility now."""
        WEATHER_NOW.validate_location(location)
        return await self._qw.fetch(
            WEATHER_NOW, {"location": location.location}, lang=lang, unit=unit
        )

    @api_result
    async def daily(
        self,
        days: DayRange,
        location: Location,
        unit: Unit | None = None,
        lang: Lang | None = None,
    ) -> WeatherDaily:
        """
        Daily forecast.

        The Free plan is limited to 3 and 7 days; Standard may request any range.
        """
        WEATHER_DAILY.validate_location(location)
        check_horizon(WEATHER_DAILY.name, self._qw.plan, days)
        return await self._qw.fetch(
            WEATHER_DAILY,
            {"location": location.location},
            lang=lang,
            unit=unit,
            days=days.value,
        )

    @api_result
    async def hourly(
        self,
        hours: HourRange,
        location: Location,
        unit: Unit | None = None,
        lang: Lang | None = None,
    ) -> WeatherHourly:
        """
        Hourly forecast.

        The Free plan is limited to 24 hours; Standard may request any range.
        """
        WEATHER_HOURLY.validate_location(location)
        check_horizon(WEATHER_HOURLY.name, self._qw.plan, hours)
        return await self._qw.fetch(
            WEATHER_HOURLY,
            {"location": location.location},
            lang=lang,
            unit=unit,
            hours=hours.value,
        )
