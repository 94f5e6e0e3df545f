"""
Subscription availability tests.

Free plans are limited to 3d, 7d and 24h by default; some endpoints carry
their own range tables or are Standard-only.
"""

import pytest

from qweather_sdk.availability import (
    FREE_HORIZONS,
    HORIZON_RULES,
    STANDARD_ONLY,
    check_horizon,
    check_plan,
    is_permitted,
)
from qweather_sdk.domains import ALL_ENDPOINTS
from qweather_sdk.enums import DayRange, HourRange, Plan
from qweather_sdk.errors import AvailabilityDenied


class TestIsPermitted:
    @pytest.mark.parametrize("horizon", list(DayRange) + list(HourRange))
    def test_standard_permits_everything(self, horizon):
        assert is_permitted(Plan.STANDARD, horizon)

    @pytest.mark.parametrize("horizon", [DayRange.DAY_3, DayRange.DAY_7, HourRange.HOUR_24])
    def test_free_permits_short_ranges(self, horizon):
        assert is_permitted(Plan.FREE, horizon)

    @pytest.mark.parametrize(
        "horizon",
        [DayRange.DAY_10, DayRange.DAY_15, DayRange.DAY_30, HourRange.HOUR_72, HourRange.HOUR_168],
    )
    def test_free_denies_long_ranges(self, horizon):
        assert not is_permitted(Plan.FREE, horizon)

    def test_free_horizons_is_exactly_three(self):
        assert FREE_HORIZONS == {DayRange.DAY_3, DayRange.DAY_7, HourRange.HOUR_24}


class TestCheckHorizon:
    def test_free_daily_30d_denied(self):
        with pytest.raises(AvailabilityDenied) as exc_info:
            check_horizon("weather_daily", Plan.FREE, DayRange.DAY_30)
        error = exc_info.value
        assert error.endpoint == "weather_daily"
        assert error.plan is Plan.FREE
        assert error.horizon is DayRange.DAY_30
        assert "30d" in str(error)
        assert "subscription" in str(error)

    def test_standard_weather_hourly_168h_allowed(self):
        check_horizon("weather_hourly", Plan.STANDARD, HourRange.HOUR_168)

    def test_grid_daily_stops_at_7d_on_standard(self):
        check_horizon("grid_daily", Plan.STANDARD, DayRange.DAY_7)
        with pytest.raises(AvailabilityDenied):
            check_horizon("grid_daily", Plan.STANDARD, DayRange.DAY_10)

    def test_grid_hourly_stops_at_72h_on_standard(self):
        check_horizon("grid_hourly", Plan.STANDARD, HourRange.HOUR_72)
        with pytest.raises(AvailabilityDenied):
            check_horizon("grid_hourly", Plan.STANDARD, HourRange.HOUR_168)

    def test_solar_radiation_never_on_free(self):
        with pytest.raises(AvailabilityDenied):
            check_horizon("solar_radiation", Plan.FREE, HourRange.HOUR_24)

    def test_unlisted_endpoint_falls_back_to_general_rule(self):
        check_horizon("something_else", Plan.STANDARD, DayRange.DAY_30)
        with pytest.raises(AvailabilityDenied):
            check_horizon("something_else", Plan.FREE, HourRange.HOUR_72)

    def test_rules_never_grant_free_more_than_general_rule(self):
        for rules in HORIZON_RULES.values():
            assert rules[Plan.FREE] <= FREE_HORIZONS


class TestCheckPlan:
    @pytest.mark.parametrize("endpoint", sorted(STANDARD_ONLY))
    def test_standard_only_denied_on_free(self, endpoint):
        with pytest.raises(AvailabilityDenied) as exc_info:
            check_plan(endpoint, Plan.FREE)
        assert exc_info.value.horizon is None

    @pytest.mark.parametrize("endpoint", sorted(STANDARD_ONLY))
    def test_standard_only_allowed_on_standard(self, endpoint):
        check_plan(endpoint, Plan.STANDARD)

    def test_open_endpoint_allowed_on_free(self):
        check_plan("weather_now", Plan.FREE)

    def test_rule_keys_are_registered_endpoints(self):
        names = {endpoint.name for endpoint in ALL_ENDPOINTS}
        assert set(HORIZON_RULES) <= names
        assert STANDARD_ONLY <= names
