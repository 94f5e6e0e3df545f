"""
QWeather Client

Async client for the QWeather REST API. This is the request orchestrator:
every endpoint call runs the same linear pipeline.

1. Validate locally (location variant, plan, ranges, dates) in the domain
   method. A failure here never reaches the network.
2. Build query parameters (key, lang, unit, endpoint arguments).
3. GET through httpx.
4. Map transport errors, HTTP errors and non-200 envelope codes to typed
   failures.
5. Decode the body into the endpoint's response model.

There is no retry, no cache and no shared mutable state between calls.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from enum import Enum
from typing import Any

import httpx
from pydantic import ValidationError

from .config import (
    API_KEY_ENV,
    HTTP_ERROR_THRESHOLD,
    HTTP_TIMEOUT_SECONDS,
    PLAN_ENV,
    PROVIDER_SUCCESS_CODE,
)
from .domains import (
    AirApi,
    AirBetaApi,
    AstronomyApi,
    GeoApi,
    GridApi,
    IndicesApi,
    MinutelyApi,
    OceanApi,
    SolarRadiationApi,
    TimeMachineApi,
    TropicalApi,
    WarningApi,
    WeatherApi,
)
from .endpoints import QWeatherEndpoint
from .enums import Lang, Plan, Unit
from .errors import (
    ConfigurationError,
    DecodeFailure,
    TransportFailure,
    error_for_status,
)

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClientConfig:
    """
    Client configuration, fixed for the lifetime of a client.

    - plan: Subscription plan, selects the API host and availability rules
    - api_key: Project key, see https://dev.qweather.com/docs/configuration/project-and-key/
    - lang: Default response language
    - unit: Default measurement system
    - timeout: HTTP timeout in seconds
    """

    plan: Plan
    api_key: str
    lang: Lang = Lang.ZH
    unit: Unit = Unit.M
    timeout: float = HTTP_TIMEOUT_SECONDS

    def __post_init__(self) -> None:
        if not self.api_key or not self.api_key.strip():
            raise ConfigurationError("api_key must be a non-empty string")

    @classmethod
    def from_env(cls) -> ClientConfig:
        """
        Build a config from QWEATHER_API_KEY and QWEATHER_PLAN.

        Raises:
            ConfigurationError: If the key is missing or the plan is unknown.
        """
        api_key = os.environ.get(API_KEY_ENV, "")
        if not api_key:
            raise ConfigurationError(f"{API_KEY_ENV} is not set")

        plan_name = os.environ.get(PLAN_ENV, Plan.FREE.value).strip().lower()
        try:
            plan = Plan(plan_name)
        except ValueError as e:
            raise ConfigurationError(
                f"{PLAN_ENV}={plan_name!r} is not one of "
                f"{', '.join(p.value for p in Plan)}",
                cause=e,
            ) from e
        return cls(plan=plan, api_key=api_key)


class QWeatherClient:
    """
    Entry point for all QWeather endpoints.

    Endpoint groups are attributes::

        async with QWeatherClient(ClientConfig(Plan.STANDARD, "<key>")) as qw:
            result = await qw.weather.daily(DayRange.DAY_7, LocationID("101010100"))
            if result.is_success:
                print(result.value.daily[0].tempMax)

    An ``http_client`` may be injected (tests pass one with a mock
    transport) and stays open after ``close()``; otherwise one is created
    lazily and owned by this client.
    """

    def __init__(
        self,
        config: ClientConfig,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.config = config
        self._client = http_client
        self._owns_client = http_client is None

        self.air = AirApi(self)
        self.air_beta = AirBetaApi(self)
        self.astronomy = AstronomyApi(self)
        self.geo = GeoApi(self)
        self.grid = GridApi(self)
        self.indices = IndicesApi(self)
        self.minutely = MinutelyApi(self)
        self.ocean = OceanApi(self)
        self.solar_radiation = SolarRadiationApi(self)
        self.time_machine = TimeMachineApi(self)
        self.tropical = TropicalApi(self)
        self.warning = WarningApi(self)
        self.weather = WeatherApi(self)

    @property
    def plan(self) -> Plan:
        return self.config.plan

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy-initialize HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.config.timeout)
        return self._client

    async def close(self) -> None:
        """Clean up HTTP client, if this instance created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> QWeatherClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    def build_params(
        self,
        endpoint: QWeatherEndpoint,
        params: dict[str, Any],
        *,
        lang: Lang | None = None,
        unit: Unit | None = None,
    ) -> dict[str, str]:
        """
        Query parameters for one call.

        ``None`` values are dropped. Enum members are sent as their wire value.
        """
        query: dict[str, Any] = {"key": self.config.api_key}
        query.update(params)
        if endpoint.localized:
            query["lang"] = lang or self.config.lang
        if endpoint.metric:
            query["unit"] = unit or self.config.unit

        built: dict[str, str] = {}
        for name, value in query.items():
            if value is None:
                continue
            built[name] = str(value.value) if isinstance(value, Enum) else str(value)
        return built

    async def fetch(
        self,
        endpoint: QWeatherEndpoint,
        params: dict[str, Any] | None = None,
        *,
        lang: Lang | None = None,
        unit: Unit | None = None,
        **path_params: str,
    ) -> Any:
        """
        Send a GET for ``endpoint`` and decode the payload.

        Callers run local validation first; this method only builds, sends
        and maps.

        Raises:
            TransportFailure: If httpx could not complete the request.
            ProviderError: On an HTTP error status or a non-200 envelope code.
            DecodeFailure: If the body is not JSON or does not match the model.
        """
        url = endpoint.build_url(self.config, **path_params)
        query = self.build_params(endpoint, params or {}, lang=lang, unit=unit)
        LOGGER.debug("GET %s (%s)", url, endpoint.name)

        try:
            response = await self.client.get(url, params=query)
        except httpx.HTTPError as e:
            LOGGER.info("%s transport failure: %s", endpoint.name, e)
            raise TransportFailure(f"HTTP error: {e!s}", cause=e) from e

        if response.status_code >= HTTP_ERROR_THRESHOLD:
            LOGGER.info("%s returned HTTP %d", endpoint.name, response.status_code)
            raise error_for_status(response.status_code)
        if response.status_code == 204 or not response.content:
            raise error_for_status(204)

        try:
            data = response.json()
        except ValueError as e:
            raise DecodeFailure(f"{endpoint.name}: response is not JSON", cause=e) from e
        if not isinstance(data, dict):
            raise DecodeFailure(f"{endpoint.name}: expected a JSON object")

        code = self._provider_code(endpoint, data)
        if code != PROVIDER_SUCCESS_CODE:
            LOGGER.info("%s returned provider code %d", endpoint.name, code)
            raise error_for_status(code)

        try:
            return endpoint.response_model.model_validate(data)
        except ValidationError as e:
            raise DecodeFailure(
                f"{endpoint.name}: payload does not match {endpoint.response_model.__name__}",
                cause=e,
            ) from e

    @staticmethod
    def _provider_code(endpoint: QWeatherEndpoint, data: dict[str, Any]) -> int:
        raw = data.get("code")
        if raw is None:
            # air quality v1 payloads carry no envelope code
            data["code"] = str(PROVIDER_SUCCESS_CODE)
            return PROVIDER_SUCCESS_CODE
        try:
            return int(raw)
        except (TypeError, ValueError) as e:
            raise DecodeFailure(
                f"{endpoint.name}: status code {raw!r} is not an integer", cause=e
            ) from e
