"""
Air Quality (beta) Domain

Global air quality by location and official monitoring station.
Served from the ``airquality/v1`` prefix with the location in the path.
https://dev.qweather.com/docs/api/air-quality/
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..endpoints import ApiBase, QWeatherEndpoint
from ..enums import Lang
from ..locations import LocationID
from ..responses import AirBetaNow, AirBetaStation
from ..results import api_result

if TYPE_CHECKING:
    from ..client import QWeatherClient


AIR_BETA_NOW = QWeatherEndpoint(
    name="air_beta_now",
    path="now/{location_id}",
    description="Real-time air quality indexes and pollutants for a location.",
    response_model=AirBetaNow,
    api=ApiBase.AIR_QUALITY,
    locations=(LocationID,),
    localized=True,
)

AIR_BETA_STATION = QWeatherEndpoint(
    name="air_beta_station",
    path="station/{location_id}",
    description="Pollutant readings from one monitoring station.",
    response_model=AirBetaStation,
    api=ApiBase.AIR_QUALITY,
    locations=(LocationID,),
    localized=True,
)

AIR_BETA_ENDPOINTS: list[QWeatherEndpoint] = [AIR_BETA_NOW, AIR_BETA_STATION]


class AirBetaApi:
    """Experimental: the provider may change these payloads without notice."""

    def __init__(self, qw: QWeatherClient) -> None:
        self._qw = qw

    @api_result
    async def now(self, location: LocationID, lang: Lang | None = None) -> AirBetaNow:
        AIR_BETA_NOW.validate_location(location)
        return await self._qw.fetch(
            AIR_BETA_NOW, lang=lang, location_id=location.location
        )

    @api_result
    async def station(
        self, location: LocationID, lang: Lang | None = None
    ) -> AirBetaStation:
        AIR_BETA_STATION.validate_location(location)
        return await self._qw.fetch(
            AIR_BETA_STATION, lang=lang, location_id=location.location
        )
