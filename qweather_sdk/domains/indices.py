"""
Weather Indices Domain

Life indices (car washing, clothing, cold risk, UV, fishing...) for
3000+ Chinese and 150,000 overseas cities.
https://dev.qweather.com/docs/api/indices/
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from ..endpoints import QWeatherEndpoint
from ..enums import IndexType, Lang
from ..locations import Coordinate, Location, LocationID
from ..responses import Indices
from ..results import api_result

if TYPE_CHECKING:
    from ..client import QWeatherClient


INDICES = QWeatherEndpoint(
    name="indices",
    path="indices/{days}",
    description="Weather life indices for today or the next 3 days.",
    response_model=Indices,
    locations=(LocationID, Coordinate),
    localized=True,
)

INDICES_ENDPOINTS: list[QWeatherEndpoint] = [INDICES]


def index_types_param(types: Iterable[IndexType]) -> str:
    """Comma-separated type codes. ALL swallows every other type."""
    selected = list(dict.fromkeys(types)) or [IndexType.ALL]
    if IndexType.ALL in selected:
        selected = [IndexType.ALL]
    return ",".join(str(t.value) for t in selected)


class IndicesApi:
    def __init__(self, qw: QWeatherClient) -> None:
        self._qw = qw

    async def _indices(
        self,
        days: str,
        location: Location,
        types: tuple[IndexType, ...],
        lang: Lang | None,
    ) -> Indices:
        INDICES.validate_location(location)
        return await self._qw.fetch(
            INDICES,
            {"location": location.location, "type": index_types_param(types)},
            lang=lang,
            days=days,
        )

    @api_result
    async def one_day(
        self,
        location: Location,
        *types: IndexType,
        lang: Lang | None = None,
    ) -> Indices:
        """Today's indices. No ``types`` means all of them."""
        return await self._indices("1d", location, types, lang)

    @api_result
    async def three_days(
        self,
        location: Location,
        *types: IndexType,
        lang: Lang | None = None,
    ) -> Indices:
        """Indices for the next 3 days. No ``types`` means all of them."""
        return await self._indices("3d", location, types, lang)
