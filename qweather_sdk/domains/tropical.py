"""
Tropical Cyclone Domain

Active storms, their forecast path and their observed track. Storm IDs
come from ``storm_list``; callers list first, then query a storm.
Standard plan only.
https://dev.qweather.com/docs/api/tropical-cyclone/
"""

from __future__ import annotations

import datetime
from typing import TYPE_CHECKING

from ..availability import check_plan
from ..endpoints import QWeatherEndpoint
from ..enums import Basin
from ..errors import OutOfRangeParameter
from ..locations import StormId
from ..responses import StormForecast, StormList, StormTrack
from ..results import api_result

if TYPE_CHECKING:
    from ..client import QWeatherClient


STORM_LIST = QWeatherEndpoint(
    name="storm_list",
    path="tropical/storm-list",
    description="Storms of a basin in a given year.",
    response_model=StormList,
)

STORM_FORECAST = QWeatherEndpoint(
    name="storm_forecast",
    path="tropical/storm-forecast",
    description="Forecast path of an active storm.",
    response_model=StormForecast,
)

STORM_TRACK = QWeatherEndpoint(
    name="storm_track",
    path="tropical/storm-track",
    description="Observed track and current position of a storm.",
    response_model=StormTrack,
)

TROPICAL_ENDPOINTS: list[QWeatherEndpoint] = [STORM_LIST, STORM_FORECAST, STORM_TRACK]

SUPPORTED_BASINS = frozenset({Basin.NP})


def check_storm_year(year: str, today: datetime.date | None = None) -> None:
    """Only the current and previous year are served."""
    current = (today or datetime.date.today()).year
    allowed = {str(current), str(current - 1)}
    if year not in allowed:
        raise OutOfRangeParameter("year", year, f"one of {sorted(allowed)}")


class TropicalApi:
    def __init__(self, qw: QWeatherClient) -> None:
        self._qw = qw

    @api_result
    async def storm_list(self, year: str, basin: Basin = Basin.NP) -> StormList:
        """List storms. ``basin`` only supports NP (North West Pacific)."""
        check_plan(STORM_LIST.name, self._qw.plan)
        if basin not in SUPPORTED_BASINS:
            raise OutOfRangeParameter("basin", basin.value, "NP")
        check_storm_year(year)
        return await self._qw.fetch(STORM_LIST, {"basin": basin, "year": year})

    @api_result
    async def storm_forecast(self, storm: StormId) -> StormForecast:
        check_plan(STORM_FORECAST.name, self._qw.plan)
        return await self._qw.fetch(STORM_FORECAST, {"stormid": storm.id})

    @api_result
    async def storm_track(self, storm: StormId) -> StormTrack:
        check_plan(STORM_TRACK.name, self._qw.plan)
        return await self._qw.fetch(STORM_TRACK, {"stormid": storm.id})
