"""
QWeather MCP Server

Exposes a handful of QWeather endpoints as MCP tools so an LLM agent can
ask for weather by city ID or "lon,lat" coordinate.

Configuration comes from QWEATHER_API_KEY and QWEATHER_PLAN. Run with:

    python -m qweather_sdk.server
"""

from __future__ import annotations

import logging
from typing import Any

from mcp.server.fastmcp import FastMCP

from .client import ClientConfig, QWeatherClient
from .config import SERVER_NAME
from .enums import CountryCode, DayRange, HourRange, IndexType, Lang
from .errors import OutOfRangeParameter, ProviderError, QWeatherFailure
from .locations import Name, location_from_text
from .results import ApiResult

LOGGER = logging.getLogger(__name__)

mcp = FastMCP(SERVER_NAME)

_client: QWeatherClient | None = None


def configure(client: QWeatherClient | None) -> None:
    """Use ``client`` for all tool calls. ``None`` resets to the env config."""
    global _client
    _client = client


def get_client() -> QWeatherClient:
    """Lazy-initialize the shared client from the environment."""
    global _client
    if _client is None:
        config = ClientConfig.from_env()
        LOGGER.info("Creating QWeather client for the %s plan", config.plan.value)
        _client = QWeatherClient(config)
    return _client


def error_payload(error: QWeatherFailure) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "category": error.failure_category,
        "message": str(error),
    }
    if isinstance(error, ProviderError):
        payload["code"] = error.code
    return payload


def to_payload(result: ApiResult[Any]) -> dict[str, Any]:
    if result.error is not None:
        return {"error": error_payload(result.error)}
    return result.value.model_dump(mode="json", exclude_none=True)


def _parse(enum_type: type, value: str, name: str) -> Any:
    try:
        return enum_type(value)
    except ValueError as e:
        allowed = ", ".join(str(member.value) for member in enum_type)
        raise OutOfRangeParameter(name, value, f"one of {allowed}") from e


def _lang(lang: str | None) -> Lang | None:
    return _parse(Lang, lang.lower(), "lang") if lang else None


# -----------------------------------------------------------------------------
# Tools
# -----------------------------------------------------------------------------


@mcp.tool()
async def weather_now(location: str, lang: str | None = None) -> dict[str, Any]:
    """Current weather for a LocationID (e.g. 101010100) or "lon,lat"."""
    try:
        language = _lang(lang)
    except QWeatherFailure as e:
        return {"error": error_payload(e)}
    result = await get_client().weather.now(location_from_text(location), lang=language)
    return to_payload(result)


@mcp.tool()
async def weather_daily(
    location: str, days: str = "3d", lang: str | None = None
) -> dict[str, Any]:
    """Daily forecast. ``days`` is one of 3d, 7d, 10d, 15d, 30d."""
    try:
        day_range = _parse(DayRange, days, "days")
        language = _lang(lang)
    except QWeatherFailure as e:
        return {"error": error_payload(e)}
    result = await get_client().weather.daily(
        day_range, location_from_text(location), lang=language
    )
    return to_payload(result)


@mcp.tool()
async def weather_hourly(
    location: str, hours: str = "24h", lang: str | None = None
) -> dict[str, Any]:
    """Hourly forecast. ``hours`` is one of 24h, 72h, 168h."""
    try:
        hour_range = _parse(HourRange, hours, "hours")
        language = _lang(lang)
    except QWeatherFailure as e:
        return {"error": error_payload(e)}
    result = await get_client().weather.hourly(
        hour_range, location_from_text(location), lang=language
    )
    return to_payload(result)


@mcp.tool()
async def air_now(location: str, lang: str | None = None) -> dict[str, Any]:
    """Current air quality with station readings."""
    try:
        language = _lang(lang)
    except QWeatherFailure as e:
        return {"error": error_payload(e)}
    result = await get_client().air.now(location_from_text(location), lang=language)
    return to_payload(result)


@mcp.tool()
async def warning_now(location: str, lang: str | None = None) -> dict[str, Any]:
    """Active severe weather warnings."""
    try:
        language = _lang(lang)
    except QWeatherFailure as e:
        return {"error": error_payload(e)}
    result = await get_client().warning.now(location_from_text(location), lang=language)
    return to_payload(result)


@mcp.tool()
async def city_lookup(
    name: str, country: str = "cn", number: int = 10, lang: str | None = None
) -> dict[str, Any]:
    """Find cities by name. Use the returned ``id`` as the location of other tools."""
    try:
        country_code = _parse(CountryCode, country.lower(), "country")
        language = _lang(lang)
    except QWeatherFailure as e:
        return {"error": error_payload(e)}
    result = await get_client().geo.city_lookup(
        Name(name), range=country_code, number=number, lang=language
    )
    return to_payload(result)


@mcp.tool()
async def indices(
    location: str, types: list[int] | None = None, lang: str | None = None
) -> dict[str, Any]:
    """Today's life indices. ``types`` are index codes 1-16, omit for all."""
    try:
        index_types = [_parse(IndexType, t, "type") for t in types or []]
        language = _lang(lang)
    except QWeatherFailure as e:
        return {"error": error_payload(e)}
    result = await get_client().indices.one_day(
        location_from_text(location), *index_types, lang=language
    )
    return to_payload(result)


@mcp.tool()
async def storm_list(year: str) -> dict[str, Any]:
    """Tropical cyclones in the North West Pacific for this or last year."""
    result = await get_client().tropical.storm_list(year)
    return to_payload(result)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    mcp.run()
