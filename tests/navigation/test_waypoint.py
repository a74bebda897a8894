"""Tests for waypoints and altitude restrictions."""

import pytest

from fms.navigation.constants import NO_RESTRICTION
from fms.navigation.exceptions import NavigationDataError
from fms.navigation.runway_convention import (
    apply_runway_suffix,
    extract_airport_prefix,
    extract_runway_name,
)
from fms.navigation.waypoint import WaypointModel, parse_altitude_restriction


class TestParseAltitudeRestriction:
    """Tests for the restriction string parser."""

    @pytest.mark.parametrize(
        ("restriction", "expected"),
        [
            ("A170+", (17000, NO_RESTRICTION)),
            ("A110-", (NO_RESTRICTION, 11000)),
            ("A80", (8000, 8000)),
            ("A110+|A170-", (11000, 17000)),
            ("a60+|s210", (6000, NO_RESTRICTION)),
            ("S250", (NO_RESTRICTION, NO_RESTRICTION)),
            ("", (NO_RESTRICTION, NO_RESTRICTION)),
        ],
    )
    def test_parse(self, restriction: str, expected: tuple[int | None, int | None]) -> None:
        """Test recognized restriction strings."""
        assert parse_altitude_restriction(restriction) == expected

    @pytest.mark.parametrize("restriction", ["FL180", "A1700+", "A+", "X100"])
    def test_invalid_restriction(self, restriction: str) -> None:
        """Test unknown restriction parts are rejected."""
        with pytest.raises(NavigationDataError):
            parse_altitude_restriction(restriction)


class TestWaypointModel:
    """Tests for WaypointModel."""

    def test_name_is_canonical(self) -> None:
        """Test names are stripped and upper-case."""
        assert WaypointModel(" sea ").name == "SEA"

    def test_unrestricted_by_default(self) -> None:
        """Test a bare waypoint has no altitude restriction."""
        waypoint = WaypointModel("SEA")

        assert waypoint.altitude_minimum is NO_RESTRICTION
        assert waypoint.altitude_maximum is NO_RESTRICTION
        assert waypoint.has_altitude_restriction is False
        assert str(waypoint) == "SEA"

    def test_from_restriction(self) -> None:
        """Test building a waypoint from a restriction string."""
        waypoint = WaypointModel.from_restriction("RADDY", "A110+|A170-")

        assert waypoint.altitude_minimum == 11000
        assert waypoint.altitude_maximum == 17000
        assert waypoint.has_altitude_restriction is True
        assert str(waypoint) == "RADDY (11000-17000ft)"

    def test_str_at_altitude(self) -> None:
        """Test hard altitude formatting."""
        assert str(WaypointModel.from_restriction("HETOR", "A40")) == "HETOR (at 4000ft)"

    def test_reset(self) -> None:
        """Test reset clears the waypoint."""
        waypoint = WaypointModel.from_restriction("GLASR", "A170+")

        waypoint.reset()

        assert waypoint.name == ""
        assert waypoint.has_altitude_restriction is False


class TestRunwayConvention:
    """Tests for runway names embedded in fix names."""

    def test_extract_airport_prefix(self) -> None:
        assert extract_airport_prefix("KSEA16R") == "KSEA"

    def test_extract_runway_name(self) -> None:
        assert extract_runway_name("KSEA16R") == "16R"
        assert extract_runway_name("KSEA") == ""

    def test_apply_runway_suffix(self) -> None:
        """Test the airport is kept and the runway replaced."""
        assert apply_runway_suffix("KSEA34L", "16r") == "KSEA16R"
