"""
Client Failure Types

Canonical failure taxonomy for the QWeather client.
Every failure an endpoint call can report is an instance of these types.

Three families:
- Local validation failures, detected before any network I/O.
- Provider failures, decoded from the status code of a response.
- Transport and decode failures, wrapping httpx and pydantic errors.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from .config import STATUS_CODE_REFERENCE_URL, SUBSCRIPTION_REFERENCE_URL
from .enums import DayRange, HourRange, Plan


class QWeatherFailure(Exception):
    """Base class for all client failures."""

    failure_category: str = "unknown"

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


# -----------------------------------------------------------------------------
# Local Validation
# -----------------------------------------------------------------------------


class ValidationFailure(QWeatherFailure):
    """
    The request was rejected locally. No request was sent.

    Recoverable by the caller by supplying corrected input.
    """

    failure_category = "validation_failure"


class InvalidLocationType(ValidationFailure):
    """The endpoint does not accept this location variant."""

    def __init__(self, given: str, accepted: list[str]) -> None:
        super().__init__(
            f"Invalid location type: {given}. Supported: {', '.join(accepted)}."
        )
        self.given = given
        self.accepted = accepted


class InvalidDateFormat(ValidationFailure):
    """A date is not a real calendar date in yyyyMMdd form."""

    def __init__(self, value: str, reason: str) -> None:
        super().__init__(f"Invalid date {value!r}: {reason}")
        self.value = value


class InvalidTimeFormat(ValidationFailure):
    """A time is not a real clock time in HHmm form."""

    def __init__(self, value: str, reason: str) -> None:
        super().__init__(f"Invalid time {value!r}: {reason}")
        self.value = value


class AvailabilityDenied(ValidationFailure):
    """The subscription plan does not cover this endpoint or time range."""

    def __init__(
        self,
        endpoint: str,
        plan: Plan,
        horizon: DayRange | HourRange | None = None,
    ) -> None:
        if horizon is None:
            message = f"{endpoint} is not available on the {plan.value} plan"
        else:
            message = (
                f"{endpoint} does not offer {horizon.value} on the {plan.value} plan"
            )
        super().__init__(f"{message}, see {SUBSCRIPTION_REFERENCE_URL}")
        self.endpoint = endpoint
        self.plan = plan
        self.horizon = horizon


class OutOfRangeParameter(ValidationFailure):
    """A numeric or enumerated argument falls outside what the API accepts."""

    def __init__(self, name: str, value: Any, allowed: str) -> None:
        super().__init__(f"Invalid {name}: {value!r}, expected {allowed}")
        self.name = name
        self.value = value
        self.allowed = allowed


# -----------------------------------------------------------------------------
# Provider Status Codes
# Reference: https://dev.qweather.com/docs/resource/status-code/
# -----------------------------------------------------------------------------


class ProviderStatus(int, Enum):
    """Status codes documented by the provider, other than 200."""

    NO_DATA = 204
    BAD_REQUEST = 400
    AUTH_FAILED = 401
    QUOTA_EXCEEDED = 402
    FORBIDDEN = 403
    NOT_FOUND = 404
    RATE_LIMITED = 429
    SERVER_ERROR = 500

    @property
    def description(self) -> str:
        return STATUS_DESCRIPTIONS[self]


STATUS_DESCRIPTIONS: dict[ProviderStatus, str] = {
    ProviderStatus.NO_DATA: (
        "The request succeeded, but there is no data for the queried region yet."
    ),
    ProviderStatus.BAD_REQUEST: (
        "Bad request: a parameter is malformed or a required parameter is missing."
    ),
    ProviderStatus.AUTH_FAILED: (
        "Authentication failed: wrong key, bad signature, or the key type does "
        "not match this API."
    ),
    ProviderStatus.QUOTA_EXCEEDED: (
        "Request quota exceeded or balance exhausted: top up, upgrade, or wait "
        "for the quota to reset."
    ),
    ProviderStatus.FORBIDDEN: (
        "No permission: the bound package name, bundle ID or domain/IP does not "
        "match, or the data requires an extra subscription."
    ),
    ProviderStatus.NOT_FOUND: "The requested data or region does not exist.",
    ProviderStatus.RATE_LIMITED: (
        "Too many requests per minute (QPM), see "
        "https://dev.qweather.com/docs/resource/glossary/#qpm"
    ),
    ProviderStatus.SERVER_ERROR: (
        "No response or timeout: the API service is unavailable, contact "
        "https://www.qweather.com/contact"
    ),
}


class ProviderError(QWeatherFailure):
    """
    The provider answered with a status other than success.

    Not retried. Callers decide whether RateLimited or ServerError warrant
    another attempt.
    """

    failure_category = "provider_error"
    status: ProviderStatus | None = None

    def __init__(self, code: int | None = None, *, cause: Exception | None = None) -> None:
        if code is None:
            code = int(self.status) if self.status is not None else 0
        self.code = code
        self.description = (
            self.status.description
            if self.status is not None
            else f"Unknown status code {code}."
        )
        super().__init__(
            f"Error code: {code}, message: {self.description} "
            f"Details: {STATUS_CODE_REFERENCE_URL}",
            cause=cause,
        )


class NoData(ProviderError):
    status = ProviderStatus.NO_DATA


class BadRequest(ProviderError):
    status = ProviderStatus.BAD_REQUEST


class AuthFailed(ProviderError):
    status = ProviderStatus.AUTH_FAILED


class QuotaExceeded(ProviderError):
    status = ProviderStatus.QUOTA_EXCEEDED


class Forbidden(ProviderError):
    status = ProviderStatus.FORBIDDEN


class NotFound(ProviderError):
    status = ProviderStatus.NOT_FOUND


class RateLimited(ProviderError):
    status = ProviderStatus.RATE_LIMITED


class ServerError(ProviderError):
    status = ProviderStatus.SERVER_ERROR


class UnknownProviderError(ProviderError):
    """A status code outside the documented set. The raw code is kept."""


_STATUS_ERRORS: dict[int, type[ProviderError]] = {
    error.status.value: error
    for error in (
        NoData,
        BadRequest,
        AuthFailed,
        QuotaExceeded,
        Forbidden,
        NotFound,
        RateLimited,
        ServerError,
    )
}


def error_for_status(code: int) -> ProviderError:
    """Map a provider status code to its error. Pure table lookup."""
    error_type = _STATUS_ERRORS.get(code)
    if error_type is None:
        return UnknownProviderError(code)
    return error_type(code)


# -----------------------------------------------------------------------------
# Transport / Decode / Configuration
# -----------------------------------------------------------------------------


class TransportFailure(QWeatherFailure):
    """Communication with the provider failed at the transport layer."""

    failure_category = "transport_failure"


class DecodeFailure(QWeatherFailure):
    """The response body is not JSON or does not match the expected schema."""

    failure_category = "decode_failure"


class ConfigurationError(QWeatherFailure):
    """
    The client is misconfigured and cannot operate correctly.

    Raised at construction time, never returned through ApiResult.
    """

    failure_category = "configuration_error"
