"""
Result channel for endpoint calls.

Endpoint coroutines raise QWeatherFailure internally; at the public boundary
``api_result`` turns those into ``ApiResult.failure`` so callers can branch
without exception handling. Anything that is not a QWeatherFailure is a
programming error and propagates.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Generic, ParamSpec, TypeVar

from .errors import QWeatherFailure

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")
P = ParamSpec("P")


@dataclass(frozen=True)
class ApiResult(Generic[T]):
    """Either a decoded payload or the failure that prevented it."""

    value: T | None = None
    error: QWeatherFailure | None = None

    @classmethod
    def success(cls, value: T) -> ApiResult[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: QWeatherFailure) -> ApiResult[T]:
        return cls(error=error)

    @property
    def is_success(self) -> bool:
        return self.error is None

    @property
    def is_failure(self) -> bool:
        return self.error is not None

    def get_or_none(self) -> T | None:
        return self.value if self.error is None else None

    def get_or_raise(self) -> T:
        """Return the payload or raise the captured failure."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]


def api_result(
    func: Callable[P, Awaitable[T]],
) -> Callable[P, Awaitable[ApiResult[T]]]:
    """Run an endpoint coroutine and capture its QWeatherFailure, if any."""

    @functools.wraps(func)
    async def wrapper(*args: P.args, **kwargs: P.kwargs) -> ApiResult[T]:
        try:
            value = await func(*args, **kwargs)
        except QWeatherFailure as e:
            LOGGER.debug("%s failed (%s): %s", func.__qualname__, e.failure_category, e)
            return ApiResult.failure(e)
        return ApiResult.success(value)

    return wrapper
