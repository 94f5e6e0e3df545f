"""
Air Quality Domain

AQI for 3000+ Chinese cities and 1700+ monitoring stations: real-time data
and a 5-day forecast.
https://dev.qweather.com/docs/api/air/
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..endpoints import QWeatherEndpoint
from ..enums import Lang
from ..locations import Coordinate, Location, LocationID
from ..responses import AirDaily, AirNow
from ..results import api_result

if TYPE_CHECKING:
    from ..client import QWeatherClient


AIR_NOW = QWeatherEndpoint(
    name="air_now",
    path="air/now",
    description="Real-time AQI, pollutants and nearby station readings.",
    response_model=AirNow,
    locations=(LocationID, Coordinate),
    localized=True,
)

AIR_DAILY = QWeatherEndpoint(
    name="air_daily",
    path="air/5d",
    description="AQI forecast for the next 5 days.",
    response_model=AirDaily,
    locations=(LocationID, Coordinate),
    localized=True,
)

AIR_ENDPOINTS: list[QWeatherEndpoint] = [AIR_NOW, AIR_DAILY]


class AirApi:
    def __init__(self, qw: QWeatherClient) -> None:
        self._qw = qw

    @api_result
    async def now(self, location: Location, lang: Lang | None = None) -> AirNow:
        AIR_NOW.validate_location(location)
        return await self._qw.fetch(AIR_NOW, {"location": location.location}, lang=lang)

    @api_result
    async def daily(self, location: Location, lang: Lang | None = None) -> AirDaily:
        AIR_DAILY.validate_location(location)
        return await self._qw.fetch(AIR_DAILY, {"location": location.location}, lang=lang)
