"""QWeather async client package."""

from .availability import FREE_HORIZONS, check_horizon, check_plan, is_permitted
from .client import ClientConfig, QWeatherClient
from .config import (
    API_KEY_ENV,
    FREE_API_HOST,
    GEO_API_BASE_URL,
    HTTP_TIMEOUT_SECONDS,
    PLAN_ENV,
    SERVER_NAME,
    STANDARD_API_HOST,
)
from .dates import days_in_month, validate_date, validate_time
from .domains import ALL_ENDPOINTS
from .endpoints import ApiBase, QWeatherEndpoint
from .enums import (
    Basin,
    CountryCode,
    DayRange,
    Horizon,
    HourRange,
    IndexType,
    Lang,
    Plan,
    POIType,
    Unit,
)
from .errors import (
    AuthFailed,
    AvailabilityDenied,
    BadRequest,
    ConfigurationError,
    DecodeFailure,
    Forbidden,
    InvalidDateFormat,
    InvalidLocationType,
    InvalidTimeFormat,
    NoData,
    NotFound,
    OutOfRangeParameter,
    ProviderError,
    ProviderStatus,
    QuotaExceeded,
    QWeatherFailure,
    RateLimited,
    ServerError,
    TransportFailure,
    UnknownProviderError,
    ValidationFailure,
    error_for_status,
)
from .locations import (
    AdministrativeCode,
    Coordinate,
    Location,
    LocationID,
    Name,
    StormId,
    location_from_text,
)
from .results import ApiResult, api_result

__all__ = [
    # Client
    "QWeatherClient",
    "ClientConfig",
    "ApiResult",
    "api_result",
    # Endpoints
    "ApiBase",
    "QWeatherEndpoint",
    "ALL_ENDPOINTS",
    # Config
    "API_KEY_ENV",
    "PLAN_ENV",
    "FREE_API_HOST",
    "STANDARD_API_HOST",
    "GEO_API_BASE_URL",
    "HTTP_TIMEOUT_SECONDS",
    "SERVER_NAME",
    # Enums
    "Plan",
    "Lang",
    "Unit",
    "CountryCode",
    "IndexType",
    "POIType",
    "Basin",
    "DayRange",
    "HourRange",
    "Horizon",
    # Locations
    "Location",
    "LocationID",
    "AdministrativeCode",
    "Coordinate",
    "Name",
    "StormId",
    "location_from_text",
    # Validation
    "validate_date",
    "validate_time",
    "days_in_month",
    "is_permitted",
    "check_plan",
    "check_horizon",
    "FREE_HORIZONS",
    # Errors
    "QWeatherFailure",
    "ValidationFailure",
    "InvalidLocationType",
    "InvalidDateFormat",
    "InvalidTimeFormat",
    "AvailabilityDenied",
    "OutOfRangeParameter",
    "ProviderStatus",
    "ProviderError",
    "NoData",
    "BadRequest",
    "AuthFailed",
    "QuotaExceeded",
    "Forbidden",
    "NotFound",
    "RateLimited",
    "ServerError",
    "UnknownProviderError",
    "TransportFailure",
    "DecodeFailure",
    "ConfigurationError",
    "error_for_status",
]
