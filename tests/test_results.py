"""Result channel tests: ApiResult and the api_result boundary."""

import pytest

from qweather_sdk.errors import NotFound, QWeatherFailure
from qweather_sdk.results import ApiResult, api_result


class TestApiResult:
    def test_success(self):
        result = ApiResult.success(42)
        assert result.is_success
        assert not result.is_failure
        assert result.get_or_none() == 42
        assert result.get_or_raise() == 42

    def test_failure(self):
        error = NotFound()
        result = ApiResult.failure(error)
        assert result.is_failure
        assert not result.is_success
        assert result.error is error
        assert result.get_or_none() is None

    def test_get_or_raise_reraises_captured_failure(self):
        error = NotFound()
        with pytest.raises(NotFound) as exc_info:
            ApiResult.failure(error).get_or_raise()
        assert exc_info.value is error


class TestApiResultDecorator:
    @pytest.mark.asyncio
    async def test_wraps_return_value(self):
        @api_result
        async def call() -> str:
            return "ok"

        result = await call()
        assert result.value == "ok"

    @pytest.mark.asyncio
    async def test_captures_qweather_failure(self):
        @api_result
        async def call() -> str:
            raise QWeatherFailure("nope")

        result = await call()
        assert result.is_failure
        assert str(result.error) == "nope"

    @pytest.mark.asyncio
    async def test_other_exceptions_propagate(self):
        @api_result
        async def call() -> str:
            raise KeyError("bug")

        with pytest.raises(KeyError):
            await call()

    def test_preserves_metadata(self):
        @api_result
        async def weather_now() -> str:
            """Docstring."""
            return ""

        assert weather_now.__name__ == "weather_now"
        assert weather_now.__doc__ == "Docstring."
