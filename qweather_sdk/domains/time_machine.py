"""
Time Machine Domain

Historical weather and air quality for the last 10 days, excluding today.
Standard plan only.
https://dev.qweather.com/docs/api/time-machine/
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..availability import check_plan
from ..dates import validate_date
from ..endpoints import QWeatherEndpoint
from ..enums import Lang, Unit
from ..locations import LocationID
from ..responses import HistoricalAir, HistoricalWeather
from ..results import api_result

if TYPE_CHECKING:
    from ..client import QWeatherClient


HISTORICAL_WEATHER = QWeatherEndpoint(
    name="historical_weather",
    path="historical/weather",
    description="Daily summary and hourly observations for a past date.",
    response_model=HistoricalWeather,
    locations=(LocationID,),
    localized=True,
    metric=True,
)

HISTORICAL_AIR = QWeatherEndpoint(
    name="historical_air",
    path="historical/air",
    description="Hourly air quality for a past date.",
    response_model=HistoricalAir,
    locations=(LocationID,),
    localized=True,
    metric=True,
)

TIME_MACHINE_ENDPOINTS: list[QWeatherEndpoint] = [HISTORICAL_WEATHER, HISTORICAL_AIR]


class TimeMachineApi:
    def __init__(self, qw: QWeatherClient) -> None:
        self._qw = qw

    async def _historical(
        self,
        endpoint: QWeatherEndpoint,
        location: LocationID,
        date: str,
        unit: Unit | None,
        lang: Lang | None,
    ):
        endpoint.validate_location(location)
        check_plan(endpoint.name, self._qw.plan)
        validate_date(date)
        return await self._qw.fetch(
            endpoint,
            {"location": location.location, "date": date},
            lang=lang,
            unit=unit,
        )

    @api_result
    async def weather(
        self,
        location: LocationID,
        date: str,
        unit: Unit | None = None,
        lang: Lang | None = None,
    ) -> HistoricalWeather:
        """``date`` is yyyyMMdd, within the last 10 days."""
        return await self._historical(HISTORICAL_WEATHER, location, date, unit, lang)

    @api_result
    async def air(
        self,
        location: LocationID,
        date: str,
        unit: Unit | None = None,
        lang: Lang | None = None,
    ) -> HistoricalAir:
        """``date`` is yyyyMMdd, within the last 10 days."""
        return await self._historical(HISTORICAL_AIR, location, date, unit, lang)
