"""
Astronomy Domain

Sunrise/sunset, moonrise/moonset with moon phases, and solar elevation
angle for any place, up to 60 days ahead.
https://dev.qweather.com/docs/api/astronomy/
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..dates import validate_date, validate_time
from ..endpoints import QWeatherEndpoint
from ..enums import Lang
from ..locations import Coordinate, Location, LocationID
from ..responses import Moon, SolarElevationAngle, Sun
from ..results import api_result

if TYPE_CHECKING:
    from ..client import QWeatherClient


SUN = QWeatherEndpoint(
    name="astronomy_sun",
    path="astronomy/sun",
    description="Sunrise and sunset times for a date.",
    response_model=Sun,
    locations=(LocationID, Coordinate),
    localized=True,
)

MOON = QWeatherEndpoint(
    name="astronomy_moon",
    path="astronomy/moon",
    description="Moonrise, moonset and hourly moon phase for a date.",
    response_model=Moon,
    locations=(LocationID, Coordinate),
    localized=True,
)

SOLAR_ELEVATION_ANGLE = QWeatherEndpoint(
    name="astronomy_solar_elevation_angle",
    path="astronomy/solar-elevation-angle",
    description="Solar elevation and azimuth for a coordinate at a given time.",
    response_model=SolarElevationAngle,
    locations=(Coordinate,),
)

ASTRONOMY_ENDPOINTS: list[QWeatherEndpoint] = [SUN, MOON, SOLAR_ELEVATION_ANGLE]


class AstronomyApi:
    def __init__(self, qw: QWeatherClient) -> None:
        self._qw = qw

    @api_result
    async def sun(self, location: Location, date: str, lang: Lang | None = None) -> Sun:
        """``date`` is yyyyMMdd, today up to 60 days ahead."""
        SUN.validate_location(location)
        validate_date(date)
        return await self._qw.fetch(
            SUN, {"location": location.location, "date": date}, lang=lang
        )

    @api_result
    async def moon(self, location: Location, date: str, lang: Lang | None = None) -> Moon:
        """``date`` is yyyyMMdd, today up to 60 days ahead."""
        MOON.validate_location(location)
        validate_date(date)
        return await self._qw.fetch(
            MOON, {"location": location.location, "date": date}, lang=lang
        )

    @api_result
    async def solar_elevation_angle(
        self,
        location: Coordinate,
        date: str,
        time: str,
        tz: str,
        alt: int,
    ) -> SolarElevationAngle:
        """
        Solar elevation angle.

        Args:
            location: Coordinate of the observer.
            date: yyyyMMdd.
            time: HHmm, local to ``tz``.
            tz: UTC offset of ``time``, for example "0800" or "-0530".
            alt: Altitude in metres.
        """
        SOLAR_ELEVATION_ANGLE.validate_location(location)
        validate_date(date)
        validate_time(time)
        return await self._qw.fetch(
            SOLAR_ELEVATION_ANGLE,
            {
                "location": location.location,
                "date": date,
                "time": time,
                "tz": tz,
                "alt": alt,
            },
        )
