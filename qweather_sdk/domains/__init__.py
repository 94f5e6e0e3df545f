"""
Endpoint Domains

Each domain module holds the endpoint definitions and the API class for
one QWeather product. Adding or removing a product is a single-file
operation plus an entry here and an attribute on ``QWeatherClient``.
"""

from .air import AIR_ENDPOINTS, AirApi
from .air_beta import AIR_BETA_ENDPOINTS, AirBetaApi
from .astronomy import ASTRONOMY_ENDPOINTS, AstronomyApi
from .geo import GEO_ENDPOINTS, GeoApi
from .grid import GRID_ENDPOINTS, GridApi
from .indices import INDICES_ENDPOINTS, IndicesApi
from .minutely import MINUTELY_ENDPOINTS, MinutelyApi
from .ocean import OCEAN_ENDPOINTS, OceanApi
from .solar_radiation import SOLAR_RADIATION_ENDPOINTS, SolarRadiationApi
from .time_machine import TIME_MACHINE_ENDPOINTS, TimeMachineApi
from .tropical import TROPICAL_ENDPOINTS, TropicalApi
from .warning import WARNING_ENDPOINTS, WarningApi
from .weather import WEATHER_ENDPOINTS, WeatherApi

ALL_ENDPOINTS = (
    WEATHER_ENDPOINTS
    + AIR_ENDPOINTS
    + AIR_BETA_ENDPOINTS
    + ASTRONOMY_ENDPOINTS
    + GEO_ENDPOINTS
    + GRID_ENDPOINTS
    + INDICES_ENDPOINTS
    + MINUTELY_ENDPOINTS
    + OCEAN_ENDPOINTS
    + SOLAR_RADIATION_ENDPOINTS
    + TIME_MACHINE_ENDPOINTS
    + TROPICAL_ENDPOINTS
    + WARNING_ENDPOINTS
)

__all__ = [
    # APIs
    "AirApi",
    "AirBetaApi",
    "AstronomyApi",
    "GeoApi",
    "GridApi",
    "IndicesApi",
    "MinutelyApi",
    "OceanApi",
    "SolarRadiationApi",
    "TimeMachineApi",
    "TropicalApi",
    "WarningApi",
    "WeatherApi",
    # Endpoints
    "AIR_ENDPOINTS",
    "AIR_BETA_ENDPOINTS",
    "ASTRONOMY_ENDPOINTS",
    "GEO_ENDPOINTS",
    "GRID_ENDPOINTS",
    "INDICES_ENDPOINTS",
    "MINUTELY_ENDPOINTS",
    "OCEAN_ENDPOINTS",
    "SOLAR_RADIATION_ENDPOINTS",
    "TIME_MACHINE_ENDPOINTS",
    "TROPICAL_ENDPOINTS",
    "WARNING_ENDPOINTS",
    "WEATHER_ENDPOINTS",
    "ALL_ENDPOINTS",
]
