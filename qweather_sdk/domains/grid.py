"""
Grid Weather Domain

Kilometre-scale gridded weather for any coordinate: real-time conditions,
daily and hourly forecasts.
https://dev.qweather.com/docs/api/grid-weather/
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..availability import check_horizon
from ..endpoints import QWeatherEndpoint
from ..enums import DayRange, HourRange, Lang, Unit
from ..locations import Coordinate
from ..responses import GridDaily, GridHourly, GridNow
from ..results import api_result

if TYPE_CHECKING:
    from ..client import QWeatherClient


GRID_NOW = QWeatherEndpoint(
    name="grid_now",
    path="grid-weather/now",
    description="Real-time gridded weather for a coordinate.",
    response_model=GridNow,
    locations=(Coordinate,),
    localized=True,
    metric=True,
)

GRID_DAILY = QWeatherEndpoint(
    name="grid_daily",
    path="grid-weather/{days}",
    description="Gridded daily forecast for 3 or 7 days.",
    response_model=GridDaily,
    locations=(Coordinate,),
    localized=True,
    metric=True,
)

GRID_HOURLY = QWeatherEndpoint(
    name="grid_hourly",
    path="grid-weather/{hours}",
    description="Gridded hourly forecast for 24 or 72 hours.",
    response_model=GridHourly,
    locations=(Coordinate,),
    localized=True,
    metric=True,
)

GRID_ENDPOINTS: list[QWeatherEndpoint] = [GRID_NOW, GRID_DAILY, GRID_HOURLY]


class GridApi:
    """Grid weather endpoints. Coordinates only."""

    def __init__(self, qw: QWeatherClient) -> None:
        self._qw = qw

    @api_result
    async def now(
        self,
        location: Coordinate,
        unit: Unit | None = None,
        lang: Lang | None = None,
    ) -> GridNow:
        GRID_NOW.validate_location(location)
        return await self._qw.fetch(
            GRID_NOW, {"location": location.location}, lang=lang, unit=unit
        )

    @api_result
    async def daily(
        self,
        days: DayRange,
        location: Coordinate,
        unit: Unit | None = None,
        lang: Lang | None = None,
    ) -> GridDaily:
        """Only 3 and 7 days exist for grid forecasts, on every plan."""
        GRID_DAILY.validate_location(location)
        check_horizon(GRID_DAILY.name, self._qw.plan, days)
        return await self._qw.fetch(
            GRID_DAILY,
            {"location": location.location},
            lang=lang,
            unit=unit,
            days=days.value,
        )

    @api_result
    async def hourly(
        self,
        hours: HourRange,
        location: Coordinate,
        unit: Unit | None = None,
        lang: Lang | None = None,
    ) -> GridHourly:
        """Free: 24 hours. Standard: 24 or 72 hours."""
        GRID_HOURLY.validate_location(location)
        check_horizon(GRID_HOURLY.name, self._qw.plan, hours)
        return await self._qw.fetch(
            GRID_HOURLY,
            {"location": location.location},
            lang=lang,
            unit=unit,
            hours=hours.value,
        )
