"""
Ocean Domain

Tide tables and tidal currents for coastal stations, up to 10 days ahead.
Stations are found with ``geo.poi_lookup`` using ``POIType.TIDE_STATION``
or ``POIType.CURRENT_STATION``. Standard plan only.
https://dev.qweather.com/docs/api/ocean/
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..availability import check_plan
from ..dates import validate_date
from ..endpoints import QWeatherEndpoint
from ..locations import LocationID
from ..responses import Currents, Tide
from ..results import api_result

if TYPE_CHECKING:
    from ..client import QWeatherClient


OCEAN_TIDE = QWeatherEndpoint(
    name="ocean_tide",
    path="ocean/tide",
    description="Tide table and hourly tide heights for a tide station.",
    response_model=Tide,
    locations=(LocationID,),
)

OCEAN_CURRENTS = QWeatherEndpoint(
    name="ocean_currents",
    path="ocean/currents",
    description="Tidal current table and hourly currents for a station.",
    response_model=Currents,
    locations=(LocationID,),
)

OCEAN_ENDPOINTS: list[QWeatherEndpoint] = [OCEAN_TIDE, OCEAN_CURRENTS]


class OceanApi:
    def __init__(self, qw: QWeatherClient) -> None:
        self._qw = qw

    async def _ocean(self, endpoint: QWeatherEndpoint, location: LocationID, date: str):
        endpoint.validate_location(location)
        check_plan(endpoint.name, self._qw.plan)
        validate_date(date)
        return await self._qw.fetch(
            endpoint, {"location": location.location, "date": date}
        )

    @api_result
    async def tide(self, location: LocationID, date: str) -> Tide:
        """``location`` is a tide station POI ID (e.g. P2951), ``date`` yyyyMMdd."""
        return await self._ocean(OCEAN_TIDE, location, date)

    @api_result
    async def currents(self, location: LocationID, date: str) -> Currents:
        """``location`` is a current station POI ID (e.g. P66981), ``date`` yyyyMMdd."""
        return await self._ocean(OCEAN_CURRENTS, location, date)
