"""
Centralized configuration for the QWeather client.

All hosts, path prefixes, and constants in one place.
Supports environment variable overrides for deployment flexibility.
"""

from __future__ import annotations

import os

# -----------------------------------------------------------------------------
# API Hosts
# Reference: https://dev.qweather.com/docs/configuration/api-config/
# -----------------------------------------------------------------------------

FREE_API_HOST = os.environ.get("QWEATHER_FREE_HOST", "devapi.qweather.com")

STANDARD_API_HOST = os.environ.get("QWEATHER_STANDARD_HOST", "api.qweather.com")

GEO_API_BASE_URL = os.environ.get(
    "QWEATHER_GEO_BASE_URL",
    "https://geoapi.qweather.com",
)

WEATHER_API_PREFIX = "v7"
AIR_QUALITY_API_PREFIX = "airquality/v1"
GEO_API_PREFIX = "v2"

# -----------------------------------------------------------------------------
# Environment Keys
# -----------------------------------------------------------------------------

API_KEY_ENV = "QWEATHER_API_KEY"
PLAN_ENV = "QWEATHER_PLAN"

# -----------------------------------------------------------------------------
# HTTP Configuration
# -----------------------------------------------------------------------------

HTTP_TIMEOUT_SECONDS = float(os.environ.get("QWEATHER_TIMEOUT_SECONDS", "30.0"))
HTTP_ERROR_THRESHOLD = 400

# Every payload carries a string-encoded status in its "code" field.
PROVIDER_SUCCESS_CODE = 200

# -----------------------------------------------------------------------------
# Request Limits
# -----------------------------------------------------------------------------

GEO_MIN_RESULTS = 1
GEO_MAX_RESULTS = 20
GEO_DEFAULT_RESULTS = 10

POI_MIN_RADIUS_KM = 1
POI_MAX_RADIUS_KM = 50
POI_DEFAULT_RADIUS_KM = 5

# -----------------------------------------------------------------------------
# Documentation Links
# -----------------------------------------------------------------------------

STATUS_CODE_REFERENCE_URL = "https://dev.qweather.com/docs/resource/status-code/"
SUBSCRIPTION_REFERENCE_URL = (
    "https://dev.qweather.com/docs/finance/subscription/#comparison"
)

# -----------------------------------------------------------------------------
# MCP Server Configuration
# -----------------------------------------------------------------------------

SERVER_NAME = "qweather-mcp"
