"""Tests for route string parsing."""

import pytest

from fms.navigation.constants import LegType
from fms.navigation.exceptions import RouteStringError
from fms.navigation.route_string import (
    build_route_string,
    determine_leg_type,
    ensure_single_segment,
    parse_route_string,
)


class TestParseRouteString:
    """Tests for parse_route_string."""

    def test_parse_direct_fix(self) -> None:
        """Test a bare fix name."""
        parsed = parse_route_string("sea")

        assert parsed.route_string == "SEA"
        assert parsed.entry_or_fix_name == "SEA"
        assert parsed.airway_or_procedure_name is None
        assert parsed.exit_name is None
        assert parsed.leg_type == LegType.DIRECT

    def test_parse_procedure(self) -> None:
        """Test entry, procedure and exit are split."""
        parsed = parse_route_string("ENDER.GLASR9.KSEA16R")

        assert parsed.entry_or_fix_name == "ENDER"
        assert parsed.airway_or_procedure_name == "GLASR9"
        assert parsed.exit_name == "KSEA16R"
        assert parsed.leg_type == LegType.PROCEDURE

    def test_whitespace_is_stripped(self) -> None:
        """Test surrounding whitespace is not part of the route string."""
        assert parse_route_string("  ender.glasr9.ksea16r\n").route_string == "ENDER.GLASR9.KSEA16R"

    def test_two_legs_rejected(self) -> None:
        """Test a multi-leg route string is rejected."""
        with pytest.raises(RouteStringError, match="single fix or single procedure"):
            parse_route_string("SEA..ENDER.GLASR9.KSEA16R")

    def test_too_many_segments_rejected(self) -> None:
        """Test more than three segments are rejected."""
        with pytest.raises(RouteStringError, match="single procedure"):
            parse_route_string("A.B.C.D")

    def test_two_segments_rejected(self) -> None:
        """Test an entry and procedure without an exit is rejected."""
        with pytest.raises(RouteStringError):
            parse_route_string("ENDER.GLASR9")

    @pytest.mark.parametrize("route_string", ["", "   ", "ENDER.GLASR9.", "ENDER..", None, 42])
    def test_invalid_input_rejected(self, route_string: object) -> None:
        """Test empty segments and non-strings are rejected."""
        with pytest.raises(RouteStringError):
            parse_route_string(route_string)  # type: ignore[arg-type]

    def test_route_string_error_is_value_error(self) -> None:
        """Test callers can catch format errors as ValueError."""
        with pytest.raises(ValueError):
            parse_route_string("A.B")


class TestRouteStringHelpers:
    """Tests for the smaller route string helpers."""

    def test_ensure_single_segment_accepts_procedure(self) -> None:
        """Test a single procedure passes validation."""
        ensure_single_segment("ENDER.GLASR9.KSEA16R")

    def test_determine_leg_type(self) -> None:
        """Test every segmented route is a procedure until airways exist."""
        assert determine_leg_type("SEA") == LegType.DIRECT
        assert determine_leg_type("SEA.J1.OED") == LegType.PROCEDURE

    def test_build_route_string(self) -> None:
        """Test joining the three segments."""
        assert build_route_string("ENDER", "GLASR9", "KSEA34R") == "ENDER.GLASR9.KSEA34R"
