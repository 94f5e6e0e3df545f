"""
GeoAPI Domain

City search, popular cities and POI search, worldwide. Supports reverse
lookup from coordinates, multiple languages and fuzzy name matching.
Served from the GeoAPI host rather than the plan host.
https://dev.qweather.com/docs/api/geoapi/
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..config import (
    GEO_DEFAULT_RESULTS,
    GEO_MAX_RESULTS,
    GEO_MIN_RESULTS,
    POI_DEFAULT_RADIUS_KM,
    POI_MAX_RADIUS_KM,
    POI_MIN_RADIUS_KM,
)
from ..endpoints import ApiBase, QWeatherEndpoint
from ..enums import CountryCode, Lang, POIType
from ..errors import OutOfRangeParameter
from ..locations import AdministrativeCode, Coordinate, Location, LocationID, Name
from ..responses import GeoLookup, GeoPoi, GeoTop
from ..results import api_result

if TYPE_CHECKING:
    from ..client import QWeatherClient

ANY_LOCATION = (LocationID, AdministrativeCode, Coordinate, Name)

CITY_LOOKUP = QWeatherEndpoint(
    name="geo_city_lookup",
    path="city/lookup",
    description="Search cities by name, ID, adcode or coordinate.",
    response_model=GeoLookup,
    api=ApiBase.GEO,
    locations=ANY_LOCATION,
    localized=True,
)

TOP_CITY = QWeatherEndpoint(
    name="geo_top_city",
    path="city/top",
    description="Most popular cities of a country.",
    response_model=GeoTop,
    api=ApiBase.GEO,
    localized=True,
)

POI_LOOKUP = QWeatherEndpoint(
    name="geo_poi_lookup",
    path="poi/lookup",
    description="Search scenic spots, tide stations and current stations.",
    response_model=GeoPoi,
    api=ApiBase.GEO,
    locations=ANY_LOCATION,
    localized=True,
)

POI_RANGE = QWeatherEndpoint(
    name="geo_poi_range",
    path="poi/range",
    description="POIs within a radius of a coordinate.",
    response_model=GeoPoi,
    api=ApiBase.GEO,
    locations=(Coordinate,),
    localized=True,
)

GEO_ENDPOINTS: list[QWeatherEndpoint] = [CITY_LOOKUP, TOP_CITY, POI_LOOKUP, POI_RANGE]


def check_number(number: int) -> None:
    if not GEO_MIN_RESULTS <= number <= GEO_MAX_RESULTS:
        raise OutOfRangeParameter(
            "number", number, f"{GEO_MIN_RESULTS}-{GEO_MAX_RESULTS}"
        )


def check_radius(radius: int) -> None:
    if not POI_MIN_RADIUS_KM <= radius <= POI_MAX_RADIUS_KM:
        raise OutOfRangeParameter(
            "radius", radius, f"{POI_MIN_RADIUS_KM}-{POI_MAX_RADIUS_KM} km"
        )


class GeoApi:
    """GeoAPI endpoints. ``number`` is the result count, 1-20."""

    def __init__(self, qw: QWeatherClient) -> None:
        self._qw = qw

    @api_result
    async def city_lookup(
        self,
        location: Location,
        adm: str | None = None,
        range: CountryCode = CountryCode.CN,
        number: int = GEO_DEFAULT_RESULTS,
        lang: Lang | None = None,
    ) -> GeoLookup:
        """
        Find cities.

        ``adm`` narrows duplicate names to a superior administrative region,
        for example location=Name("西安"), adm="黑龙江".
        """
        CITY_LOOKUP.validate_location(location)
        check_number(number)
        return await self._qw.fetch(
            CITY_LOOKUP,
            {
                "location": location.location,
                "adm": adm,
                "range": range,
                "number": number,
            },
            lang=lang,
        )

    @api_result
    async def top_city(
        self,
        range: CountryCode = CountryCode.CN,
        number: int = GEO_DEFAULT_RESULTS,
        lang: Lang | None = None,
    ) -> GeoTop:
        check_number(number)
        return await self._qw.fetch(
            TOP_CITY, {"range": range, "number": number}, lang=lang
        )

    @api_result
    async def poi_lookup(
        self,
        location: Location,
        type: POIType,
        city: str | None = None,
        number: int = GEO_DEFAULT_RESULTS,
        lang: Lang | None = None,
    ) -> GeoPoi:
        POI_LOOKUP.validate_location(location)
        check_number(number)
        return await self._qw.fetch(
            POI_LOOKUP,
            {
                "location": location.location,
                "type": type,
                "city": city,
                "number": number,
            },
            lang=lang,
        )

    @api_result
    async def poi_range(
        self,
        location: Coordinate,
        type: POIType,
        radius: int = POI_DEFAULT_RADIUS_KM,
        number: int = GEO_DEFAULT_RESULTS,
        lang: Lang | None = None,
    ) -> GeoPoi:
        """POIs within ``radius`` km (1-50) of ``location``."""
        POI_RANGE.validate_location(location)
        check_number(number)
        check_radius(radius)
        return await self._qw.fetch(
            POI_RANGE,
            {
                "location": location.location,
                "type": type,
                "radius": radius,
                "number": number,
            },
            lang=lang,
        )
