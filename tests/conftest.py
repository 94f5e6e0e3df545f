"""
Shared test fixtures for the QWeather client tests.

Provides a recording mock transport, canned payloads and a client factory.
"""

from __future__ import annotations

from typing import Any, Callable

import httpx
import pytest

from qweather_sdk.client import ClientConfig, QWeatherClient
from qweather_sdk.enums import Plan

TEST_KEY = "test-key-123"


# -----------------------------------------------------------------------------
# Mock HTTP Transport
# -----------------------------------------------------------------------------


class MockTransport(httpx.AsyncBaseTransport):
    """
    Mock transport that returns predefined responses and records requests.

    Responses are keyed by URL path. A value is either a ``(status, json)``
    tuple or a ready ``httpx.Response``.
    """

    def __init__(self, responses: dict[str, Any]):
        self.responses = responses
        self.requests: list[httpx.Request] = []

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        path = request.url.path
        if path in self.responses:
            response = self.responses[path]
            if isinstance(response, httpx.Response):
                return response
            status, data = response
            return httpx.Response(status, json=data)

        return httpx.Response(404, json={"code": "404"})

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


class FailingTransport(httpx.AsyncBaseTransport):
    """Transport whose every request fails before a response arrives."""

    def __init__(self, error: Exception | None = None):
        self.error = error or httpx.ConnectError("connection refused")
        self.requests: list[httpx.Request] = []

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        raise self.error


# -----------------------------------------------------------------------------
# Test Data
# -----------------------------------------------------------------------------


REFER = {"sources": ["QWeather"], "license": ["QWeather Developers License"]}

WEATHER_NOW_DATA = {
    "code": "200",
    "updateTime": "2024-06-01T10:22+08:00",
    "fxLink": "https://www.qweather.com/weather/beijing-101010100.html",
    "now": {
        "obsTime": "2024-06-01T10:12+08:00",
        "temp": "24",
        "feelsLike": "23",
        "icon": "100",
        "text": "晴",
        "wind360": "180",
        "windDir": "南风",
        "windScale": "2",
        "windSpeed": "9",
        "humidity": "40",
        "precip": "0.0",
        "pressure": "1005",
        "vis": "25",
        "cloud": "10",
        "dew": "10",
    },
    "refer": REFER,
}

DAILY_ITEM = {
    "fxDate": "2024-06-01",
    "sunrise": "04:46",
    "sunset": "19:37",
    "moonrise": "01:34",
    "moonset": "14:48",
    "moonPhase": "残月",
    "moonPhaseIcon": "807",
    "tempMax": "31",
    "tempMin": "18",
    "iconDay": "100",
    "textDay": "晴",
    "iconNight": "150",
    "textNight": "晴",
    "wind360Day": "180",
    "windDirDay": "南风",
    "windScaleDay": "1-3",
    "windSpeedDay": "3",
    "wind360Night": "0",
    "windDirNight": "北风",
    "windScaleNight": "1-3",
    "windSpeedNight": "3",
    "humidity": "35",
    "precip": "0.0",
    "pressure": "1004",
    "vis": "25",
    "cloud": "5",
    "uvIndex": "9",
}

WEATHER_DAILY_DATA = {
    "code": "200",
    "updateTime": "2024-06-01T10:35+08:00",
    "daily": [DAILY_ITEM, {**DAILY_ITEM, "fxDate": "2024-06-02"}],
    "refer": REFER,
}

HOURLY_ITEM = {
    "fxTime": "2024-06-01T11:00+08:00",
    "temp": "25",
    "icon": "100",
    "text": "晴",
    "wind360": "180",
    "windDir": "南风",
    "windScale": "1-3",
    "windSpeed": "9",
    "humidity": "38",
    "pop": "0",
    "precip": "0.0",
    "pressure": "1005",
    "cloud": "5",
    "dew": "9",
}

WEATHER_HOURLY_DATA = {"code": "200", "hourly": [HOURLY_ITEM]}

GRID_NOW_DATA = {
    "code": "200",
    "now": {
        "obsTime": "2024-06-01T02:00+00:00",
        "temp": "24",
        "icon": "150",
        "text": "晴",
        "wind360": "180",
        "windDir": "南风",
        "windScale": "2",
        "windSpeed": "9",
        "humidity": "40",
        "precip": "0.0",
        "pressure": "1005",
    },
}

GRID_DAILY_DATA = {
    "code": "200",
    "daily": [
        {
            key: DAILY_ITEM[key]
            for key in DAILY_ITEM
            if key not in {"sunrise", "sunset", "moonrise", "moonset", "moonPhase",
                           "moonPhaseIcon", "vis", "uvIndex"}
        }
    ],
}

RAIN_MINUTELY_DATA = {
    "code": "200",
    "summary": "95分钟后雨就停了",
    "minutely": [
        {"fxTime": "2024-06-01T10:25+08:00", "precip": "0.15", "type": "rain"},
        {"fxTime": "2024-06-01T10:30+08:00", "precip": "0.23", "type": "rain"},
    ],
}

INDICES_DATA = {
    "code": "200",
    "daily": [
        {
            "date": "2024-06-01",
            "type": "1",
            "name": "运动指数",
            "level": "3",
            "category": "较不宜",
            "text": "天气较好，但考虑天气炎热，推荐您进行室内运动。",
        }
    ],
}

AIR_NOW_ITEM = {
    "pubTime": "2024-06-01T10:00+08:00",
    "aqi": "46",
    "level": "1",
    "category": "优",
    "primary": "NA",
    "pm10": "46",
    "pm2p5": "12",
    "no2": "9",
    "so2": "2",
    "co": "0.3",
    "o3": "128",
}

AIR_NOW_DATA = {
    "code": "200",
    "now": AIR_NOW_ITEM,
    "station": [{**AIR_NOW_ITEM, "id": "P51762", "name": "北京天坛"}],
}

AIR_DAILY_DATA = {
    "code": "200",
    "daily": [
        {"fxDate": "2024-06-01", "aqi": "46", "level": "1", "category": "优", "primary": "NA"}
    ],
}

POLLUTANT = {
    "code": "pm2p5",
    "name": "PM 2.5",
    "fullName": "Fine particulate matter (<2.5µm)",
    "concentration": {"value": "12.0", "unit": "μg/m3"},
    "subIndex": {"value": "17", "category": "Good"},
}

# Air quality v1 payloads carry no envelope code.
AIR_BETA_NOW_DATA = {
    "aqi": [
        {
            "code": "us-epa",
            "name": "AQI (US)",
            "value": "46",
            "level": "1",
            "category": "Good",
            "color": {"red": 0, "green": 228, "blue": 0, "alpha": 1},
            "primaryPollutant": {"code": "o3", "name": "O3", "fullName": "Ozone"},
        }
    ],
    "pollutant": [POLLUTANT],
    "station": [{"id": "P51762", "name": "北京天坛"}],
    "source": ["Ministry of Ecology and Environment"],
}

AIR_BETA_STATION_DATA = {"pollutant": [POLLUTANT], "source": ["MEE"]}

SUN_DATA = {"code": "200", "sunrise": "2024-06-01T04:46+08:00", "sunset": "2024-06-01T19:37+08:00"}

MOON_DATA = {
    "code": "200",
    "moonrise": "2024-06-01T01:34+08:00",
    "moonset": "2024-06-01T14:48+08:00",
    "moonPhase": [
        {
            "fxTime": "2024-06-01T00:00+08:00",
            "value": "0.82",
            "name": "残月",
            "illumination": "30",
            "icon": "807",
        }
    ],
}

SOLAR_ELEVATION_ANGLE_DATA = {
    "code": "200",
    "solarElevationAngle": "89.9",
    "solarAzimuthAngle": "190.9",
    "solarHour": "1200",
    "hourAngle": "-0.01",
}

BEIJING = {
    "name": "北京",
    "id": "101010100",
    "lat": "39.90499",
    "lon": "116.40529",
    "adm2": "北京",
    "adm1": "北京市",
    "country": "中国",
    "tz": "Asia/Shanghai",
    "utcOffset": "+08:00",
    "isDst": "0",
    "type": "city",
    "rank": "10",
    "fxLink": "https://www.qweather.com/weather/beijing-101010100.html",
}

GEO_LOOKUP_DATA = {"code": "200", "location": [BEIJING]}

GEO_TOP_DATA = {"code": "200", "topCityList": [BEIJING]}

GEO_POI_DATA = {
    "code": "200",
    "poi": [
        {
            "name": "景山公园",
            "id": "10101010012A",
            "lat": "39.91999",
            "lon": "116.38999",
            "type": "scenic",
        }
    ],
}

TIDE_DATA = {
    "code": "200",
    "tideTable": [{"fxTime": "2024-06-01T04:38+08:00", "height": "1.32", "type": "H"}],
    "tideHourly": [{"fxTime": "2024-06-01T00:00+08:00", "height": "0.84"}],
}

CURRENTS_DATA = {
    "code": "200",
    "currentsTable": [{"fxTime": "2024-06-01T05:14+08:00", "speedMax": "73", "dir360": "312"}],
    "currentsHourly": [{"fxTime": "2024-06-01T00:00+08:00", "speed": "40", "dir360": "120"}],
}

SOLAR_RADIATION_DATA = {
    "code": "200",
    "radiation": [
        {"fxTime": "2024-06-01T11:00+08:00", "net": "684.1", "diffuse": "166.0", "direct": "518.1"}
    ],
}

HISTORICAL_WEATHER_DATA = {
    "code": "200",
    "weatherDaily": {
        "date": "2024-05-25",
        "sunrise": "04:50",
        "sunset": "19:32",
        "moonPhase": "满月",
        "tempMax": "30",
        "tempMin": "17",
        "humidity": "40",
        "precip": "0.0",
        "pressure": "1003",
    },
    "weatherHourly": [
        {
            "time": "2024-05-25 00:00",
            "temp": "21",
            "icon": "150",
            "text": "晴",
            "precip": "0.0",
            "wind360": "45",
            "windDir": "东北风",
            "windScale": "1",
            "windSpeed": "4",
            "humidity": "52",
            "pressure": "1003",
        }
    ],
}

HISTORICAL_AIR_DATA = {"code": "200", "airHourly": [AIR_NOW_ITEM]}

STORM_LIST_DATA = {
    "code": "200",
    "storm": [
        {"id": "NP_2421", "name": "贝碧嘉", "basin": "NP", "year": "2024", "isActive": "0"}
    ],
}

STORM_POINT = {
    "lat": "31.2",
    "lon": "121.4",
    "type": "TS",
    "pressure": "985",
    "windSpeed": "25",
    "moveSpeed": "15",
    "moveDir": "WNW",
    "move360": "292",
}

STORM_FORECAST_DATA = {
    "code": "200",
    "forecast": [{**STORM_POINT, "fxTime": "2024-09-16T20:00+08:00"}],
}

STORM_TRACK_DATA = {
    "code": "200",
    "isActive": "1",
    "now": {
        **STORM_POINT,
        "pubTime": "2024-09-16T08:00+08:00",
        "windRadius30": {"neRadius": "220", "seRadius": "200", "swRadius": "160", "nwRadius": "180"},
    },
    "track": [{**STORM_POINT, "time": "2024-09-16T08:00+08:00"}],
}

WARNING_NOW_DATA = {
    "code": "200",
    "warning": [
        {
            "id": "10101010020240601090000000",
            "sender": "北京市气象台",
            "pubTime": "2024-06-01T09:00+08:00",
            "title": "北京市气象台发布高温黄色预警",
            "status": "active",
            "level": "",
            "severity": "Moderate",
            "severityColor": "Yellow",
            "type": "1003",
            "typeName": "高温",
            "text": "预计6月1日最高气温将达35℃以上。",
        }
    ],
}

WARNING_CITY_LIST_DATA = {
    "code": "200",
    "warningLocList": [{"locationId": "101010100"}, {"locationId": "101020100"}],
}


# -----------------------------------------------------------------------------
# Fixtures
# -----------------------------------------------------------------------------


ClientFactory = Callable[..., "tuple[QWeatherClient, MockTransport]"]


@pytest.fixture
def make_client() -> ClientFactory:
    """
    Build a client on a mock transport.

    Usage: ``qw, transport = make_client({"/v7/weather/now": (200, DATA)}, plan=Plan.STANDARD)``
    """

    def factory(
        responses: dict[str, Any] | None = None,
        plan: Plan = Plan.FREE,
        **config: Any,
    ) -> tuple[QWeatherClient, MockTransport]:
        transport = MockTransport(responses or {})
        qw = QWeatherClient(
            ClientConfig(plan=plan, api_key=TEST_KEY, **config),
            http_client=httpx.AsyncClient(transport=transport),
        )
        return qw, transport

    return factory
