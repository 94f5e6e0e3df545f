"""
Endpoint definitions for the QWeather client.

This module contains the core types: ApiBase, QWeatherEndpoint.

Endpoint instances live in the domains/ package, one module per API group.
To add a group: create domains/newgroup.py and register it in domains/__init__.py.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING
from urllib.parse import quote

from pydantic import BaseModel

from .config import (
    AIR_QUALITY_API_PREFIX,
    GEO_API_BASE_URL,
    GEO_API_PREFIX,
    WEATHER_API_PREFIX,
)
from .locations import Location, require_location

if TYPE_CHECKING:
    from .client import ClientConfig


class ApiBase(str, Enum):
    """Which host and path prefix an endpoint is served from."""

    WEATHER = "weather"
    AIR_QUALITY = "air_quality"
    GEO = "geo"


@dataclass(frozen=True)
class QWeatherEndpoint:
    """
    Definition of one QWeather endpoint.

    - name: Stable identifier, also the key for availability rules
    - path: Path under the API prefix (may contain {param} placeholders)
    - description: Human-readable description
    - response_model: Pydantic model the payload is decoded into
    - api: Host/prefix family
    - locations: Location variants accepted; empty when the endpoint
      takes no location
    - localized: Whether the endpoint takes ``lang``
    - metric: Whether the endpoint takes ``unit``
    """

    name: str
    path: str
    description: str
    response_model: type[BaseModel]
    api: ApiBase = ApiBase.WEATHER
    locations: tuple[type, ...] = field(default_factory=tuple)
    localized: bool = False
    metric: bool = False

    def build_url(self, config: ClientConfig, **path_params: str) -> str:
        """Absolute URL with path placeholders substituted, each value escaped as one segment."""
        path = self.path.format(
            **{name: quote(str(value), safe="") for name, value in path_params.items()}
        )
        match self.api:
            case ApiBase.WEATHER:
                return f"https://{config.plan.host}/{WEATHER_API_PREFIX}/{path}"
            case ApiBase.AIR_QUALITY:
                return f"https://{config.plan.host}/{AIR_QUALITY_API_PREFIX}/{path}"
            case ApiBase.GEO:
                return f"{GEO_API_BASE_URL.rstrip('/')}/{GEO_API_PREFIX}/{path}"

    def validate_location(self, location: Location) -> None:
        """
        Raises:
            InvalidLocationType: If this endpoint does not accept the variant.
        """
        require_location(location, *self.locations)
