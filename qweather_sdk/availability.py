"""
Subscription availability rules.

Which endpoints and forecast ranges each plan may request.
Reference: https://dev.qweather.com/docs/finance/subscription/#comparison

All checks run before any request is built.
"""

from __future__ import annotations

from .enums import DayRange, Horizon, HourRange, Plan
from .errors import AvailabilityDenied

ALL_DAY_RANGES: frozenset[Horizon] = frozenset(DayRange)
ALL_HOUR_RANGES: frozenset[Horizon] = frozenset(HourRange)

FREE_HORIZONS: frozenset[Horizon] = frozenset(
    {DayRange.DAY_3, DayRange.DAY_7, HourRange.HOUR_24}
)


def is_permitted(plan: Plan, horizon: Horizon) -> bool:
    """General rule: Standard may request any range, Free only 3d, 7d or 24h."""
    if plan.is_standard():
        return True
    return horizon in FREE_HORIZONS


# -----------------------------------------------------------------------------
# Per-Endpoint Rules
# Keys are endpoint names as registered in the domain modules.
# -----------------------------------------------------------------------------

HORIZON_RULES: dict[str, dict[Plan, frozenset[Horizon]]] = {
    "weather_daily": {
        Plan.FREE: frozenset({DayRange.DAY_3, DayRange.DAY_7}),
        Plan.STANDARD: ALL_DAY_RANGES,
    },
    # City weather: Standard gets every hourly range, including 168h.
    "weather_hourly": {
        Plan.FREE: frozenset({HourRange.HOUR_24}),
        Plan.STANDARD: ALL_HOUR_RANGES,
    },
    "grid_daily": {
        Plan.FREE: frozenset({DayRange.DAY_3, DayRange.DAY_7}),
        Plan.STANDARD: frozenset({DayRange.DAY_3, DayRange.DAY_7}),
    },
    # Grid weather stops at 72h even on Standard.
    "grid_hourly": {
        Plan.FREE: frozenset({HourRange.HOUR_24}),
        Plan.STANDARD: frozenset({HourRange.HOUR_24, HourRange.HOUR_72}),
    },
    "solar_radiation": {
        Plan.FREE: frozenset(),
        Plan.STANDARD: frozenset({HourRange.HOUR_24, HourRange.HOUR_72}),
    },
}

STANDARD_ONLY: frozenset[str] = frozenset(
    {
        "historical_weather",
        "historical_air",
        "ocean_tide",
        "ocean_currents",
        "solar_radiation",
        "storm_list",
        "storm_forecast",
        "storm_track",
    }
)


def check_plan(endpoint: str, plan: Plan) -> None:
    """
    Raises:
        AvailabilityDenied: If ``endpoint`` requires the Standard plan.
    """
    if endpoint in STANDARD_ONLY and not plan.is_standard():
        raise AvailabilityDenied(endpoint, plan)


def check_horizon(endpoint: str, plan: Plan, horizon: Horizon) -> None:
    """
    Apply the endpoint's range table, falling back to ``is_permitted``.

    Raises:
        AvailabilityDenied: If ``plan`` may not request ``horizon`` here.
    """
    rules = HORIZON_RULES.get(endpoint)
    allowed = horizon in rules[plan] if rules is not None else is_permitted(plan, horizon)
    if not allowed:
        raise AvailabilityDenied(endpoint, plan, horizon)
