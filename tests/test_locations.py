"""Location value tests: rendering, variant checks and text parsing."""

import pytest

from qweather_sdk.errors import InvalidLocationType
from qweather_sdk.locations import (
    AdministrativeCode,
    Coordinate,
    LocationID,
    Name,
    StormId,
    location_from_text,
    require_location,
)


class TestRendering:
    def test_location_id(self):
        assert LocationID("101010100").location == "101010100"

    def test_administrative_code(self):
        assert AdministrativeCode("110000").location == "110000"

    def test_name(self):
        assert Name("北京").location == "北京"

    def test_coordinate_two_decimals_longitude_first(self):
        assert Coordinate(longitude=116.41, latitude=39.9).location == "116.41,39.90"

    def test_coordinate_rounds(self):
        assert Coordinate(longitude=116.40529, latitude=39.90499).location == "116.41,39.90"

    def test_coordinate_exact_tie_rounds_up(self):
        assert Coordinate(longitude=116.125, latitude=39.375).location == "116.13,39.38"

    def test_coordinate_decimal_tie_rounds_up(self):
        assert Coordinate(longitude=1.005, latitude=2.675).location == "1.01,2.68"

    def test_coordinate_negative_tie_rounds_away_from_zero(self):
        assert Coordinate(longitude=-73.125, latitude=-33.875).location == "-73.13,-33.88"

    def test_coordinate_whole_numbers_padded(self):
        assert Coordinate(longitude=116, latitude=40).location == "116.00,40.00"

    def test_coordinate_negative(self):
        assert Coordinate(longitude=-122.4194, latitude=37.7749).location == "-122.42,37.77"

    def test_values_are_immutable(self):
        with pytest.raises(AttributeError):
            LocationID("1").id = "2"  # type: ignore[misc]

    def test_storm_id_holds_identifier(self):
        assert StormId("NP_2421").id == "NP_2421"


class TestRequireLocation:
    def test_accepted_variant_passes(self):
        require_location(Coordinate(116.41, 39.9), LocationID, Coordinate)

    def test_rejected_variant_names_both_sides(self):
        with pytest.raises(InvalidLocationType) as exc_info:
            require_location(Name("北京"), LocationID, Coordinate)
        error = exc_info.value
        assert error.given == "Name"
        assert error.accepted == ["LocationID", "Coordinate"]
        assert "Name" in str(error)
        assert "LocationID, Coordinate" in str(error)


class TestLocationFromText:
    def test_coordinate_text(self):
        assert location_from_text("116.41,39.92") == Coordinate(116.41, 39.92)

    def test_coordinate_with_spaces_and_sign(self):
        assert location_from_text(" -73.99 , 40.73 ") == Coordinate(-73.99, 40.73)

    def test_anything_else_is_location_id(self):
        assert location_from_text("101010100") == LocationID("101010100")

    def test_location_id_is_stripped(self):
        assert location_from_text(" 101010100 ") == LocationID("101010100")
