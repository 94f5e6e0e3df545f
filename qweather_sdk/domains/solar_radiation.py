"""
Solar Radiation Domain

Hourly solar radiation forecast (global, direct and diffuse irradiance)
for any coordinate. Standard plan only.
https://dev.qweather.com/docs/api/solar-radiation/
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..availability import check_horizon, check_plan
from ..endpoints import QWeatherEndpoint
from ..enums import HourRange
from ..locations import Coordinate
from ..responses import SolarRadiation
from ..results import api_result

if TYPE_CHECKING:
    from ..client import QWeatherClient


SOLAR_RADIATION = QWeatherEndpoint(
    name="solar_radiation",
    path="solar-radiation/{hours}",
    description="Solar radiation forecast for the next 24 or 72 hours.",
    response_model=SolarRadiation,
    locations=(Coordinate,),
)

SOLAR_RADIATION_ENDPOINTS: list[QWeatherEndpoint] = [SOLAR_RADIATION]


class SolarRadiationApi:
    def __init__(self, qw: QWeatherClient) -> None:
        self._qw = qw

    @api_result
    async def radiation(
        self, location: Coordinate, hours: HourRange = HourRange.HOUR_24
    ) -> SolarRadiation:
        SOLAR_RADIATION.validate_location(location)
        check_plan(SOLAR_RADIATION.name, self._qw.plan)
        check_horizon(SOLAR_RADIATION.name, self._qw.plan, hours)
        return await self._qw.fetch(
            SOLAR_RADIATION, {"location": location.location}, hours=hours.value
        )
