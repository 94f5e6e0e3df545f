"""
Weather Warning Domain

Official severe weather warnings issued by meteorological agencies, and
the list of Chinese cities currently under a warning.
https://dev.qweather.com/docs/api/warning/
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..endpoints import QWeatherEndpoint
from ..enums import CountryCode, Lang
from ..locations import Coordinate, Location, LocationID
from ..responses import WarningCityList, WarningNow
from ..results import api_result

if TYPE_CHECKING:
    from ..client import QWeatherClient


WARNING_NOW = QWeatherEndpoint(
    name="warning_now",
    path="warning/now",
    description="Active weather warnings for a location.",
    response_model=WarningNow,
    locations=(LocationID, Coordinate),
    localized=True,
)

WARNING_CITY_LIST = QWeatherEndpoint(
    name="warning_city_list",
    path="warning/list",
    description="Cities with at least one active warning.",
    response_model=WarningCityList,
)

WARNING_ENDPOINTS: list[QWeatherEndpoint] = [WARNING_NOW, WARNING_CITY_LIST]


class WarningApi:
    def __init__(self, qw: QWeatherClient) -> None:
        self._qw = qw

    @api_result
    async def now(self, location: Location, lang: Lang | None = None) -> WarningNow:
        WARNING_NOW.validate_location(location)
        return await self._qw.fetch(
            WARNING_NOW, {"location": location.location}, lang=lang
        )

    @api_result
    async def city_list(self, range: CountryCode = CountryCode.CN) -> WarningCityList:
        """Only China is currently served."""
        return await self._qw.fetch(WARNING_CITY_LIST, {"range": range})
