"""
Minutely Precipitation Domain

Nowcast of precipitation minute by minute for the next 2 hours, 1 km
resolution, China only.
https://dev.qweather.com/docs/api/minutely/
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..endpoints import QWeatherEndpoint
from ..enums import Lang
from ..locations import Coordinate
from ..responses import RainMinutely
from ..results import api_result

if TYPE_CHECKING:
    from ..client import QWeatherClient


MINUTELY_RAIN = QWeatherEndpoint(
    name="minutely_rain",
    path="minutely/5m",
    description="Precipitation every 5 minutes for the next 2 hours.",
    response_model=RainMinutely,
    locations=(Coordinate,),
    localized=True,
)

MINUTELY_ENDPOINTS: list[QWeatherEndpoint] = [MINUTELY_RAIN]


class MinutelyApi:
    def __init__(self, qw: QWeatherClient) -> None:
        self._qw = qw

    @api_result
    async def rain(self, location: Coordinate, lang: Lang | None = None) -> RainMinutely:
        MINUTELY_RAIN.validate_location(location)
        return await self._qw.fetch(
            MINUTELY_RAIN, {"location": location.location}, lang=lang
        )
