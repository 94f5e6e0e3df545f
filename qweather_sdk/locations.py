"""
Location values.

QWeather designates a place in one of four ways. Each variant renders to a
single canonical string that is sent as the ``location`` query parameter.
Endpoints accept only a subset of the variants; that subset is checked at
call time by ``require_location``, never at construction time.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from .errors import InvalidLocationType


@dataclass(frozen=True)
class LocationID:
    """
    Provider-assigned identifier of a city, region or POI.

    Obtain one through GeoAPI city lookup, or from
    https://dev.qweather.com/docs/resource/location-list/
    """

    id: str

    @property
    def location(self) -> str:
        return self.id


@dataclass(frozen=True)
class AdministrativeCode:
    """Chinese administrative division code (adcode)."""

    code: str

    @property
    def location(self) -> str:
        return self.code


_HUNDREDTHS = Decimal("0.01")


def _two_decimals(value: float) -> str:
    # repr gives the shortest decimal form, so 1.005 rounds to 1.01
    return format(Decimal(repr(value)).quantize(_HUNDREDTHS, rounding=ROUND_HALF_UP), "f")


@dataclass(frozen=True)
class Coordinate:
    """Longitude/latitude pair, always rendered with two decimals, ties rounded up."""

    longitude: float
    latitude: float

    @property
    def location(self) -> str:
        return f"{_two_decimals(self.longitude)},{_two_decimals(self.latitude)}"


@dataclass(frozen=True)
class Name:
    """
    Free-text place name.

    GeoAPI matches names fuzzily: at least one Chinese character or two
    latin characters, results ranked by relevance. Ambiguous names can be
    narrowed with the ``adm`` parameter of city lookup.
    """

    text: str

    @property
    def location(self) -> str:
        return self.text


Location = LocationID | AdministrativeCode | Coordinate | Name


@dataclass(frozen=True)
class StormId:
    """Tropical cyclone identifier, as listed by the storm list endpoint."""

    id: str


def require_location(location: Location, *accepted: type) -> None:
    """
    Reject location variants an endpoint does not support.

    Raises:
        InvalidLocationType: If ``location`` is not one of ``accepted``.
    """
    if not isinstance(location, accepted):
        raise InvalidLocationType(type(location).__name__, [t.__name__ for t in accepted])


_COORDINATE_PATTERN = re.compile(r"^\s*(-?\d+(?:\.\d+)?)\s*,\s*(-?\d+(?:\.\d+)?)\s*$")


def location_from_text(text: str) -> LocationID | Coordinate:
    """
    Interpret a raw ``location`` string the way the provider does.

    ``"116.41,39.92"`` becomes a Coordinate (longitude first), anything else
    is taken as a LocationID.
    """
    match = _COORDINATE_PATTERN.match(text)
    if match:
        return Coordinate(longitude=float(match.group(1)), latitude=float(match.group(2)))
    return LocationID(text.strip())
