"""Route string parsing for single flight plan legs.

A leg route string is either a single fix name ("SEA") or a procedure
segment made of an entry, a procedure name and an exit separated by
dots ("ENDER.GLASR9.KSEA16R"). Strings describing more than one leg
("SEA..ENDER.GLASR9.KSEA16R") must be split by the route before they
reach this module.

Typical usage:
    from fms.navigation.route_string import parse_route_string

    parsed = parse_route_string("ender.glasr9.ksea16r")
    parsed.leg_type  # LegType.PROCEDURE
    parsed.exit_name  # "KSEA16R"
"""

from dataclasses import dataclass

from fms.navigation.constants import (
    MAX_SEGMENT_TOKENS,
    PROCEDURE_OR_AIRWAY_SEGMENT_DIVIDER,
    SEGMENT_SEPARATOR,
    LegType,
)
from fms.navigation.exceptions import RouteStringError


@dataclass(frozen=True)
class ParsedRouteString:
    """A validated single-leg route string.

    Attributes:
        route_string: Canonical (upper-case, stripped) route string.
        entry_or_fix_name: Fix name for direct legs, entry for procedures.
        airway_or_procedure_name: Procedure name, or None for direct legs.
        exit_name: Exit name, or None for direct legs.
        leg_type: Classification of the leg.
    """

    route_string: str
    entry_or_fix_name: str
    airway_or_procedure_name: str | None
    exit_name: str | None
    leg_type: LegType


def normalize_route_string(route_string: str) -> str:
    """Return the canonical form of a route string.

    Args:
        route_string: Raw route string.

    Returns:
        Upper-case route string without surrounding whitespace.

    Raises:
        RouteStringError: If the route string is not a string.
    """
    if not isinstance(route_string, str):
        raise RouteStringError(f"Expected route string but received {route_string!r}")

    return route_string.strip().upper()


def ensure_single_segment(route_string: str) -> None:
    """Verify a route string describes one leg and nothing more.

    Args:
        route_string: Canonical route string.

    Raises:
        RouteStringError: If the string contains a leg separator or too many
            segments.
    """
    if SEGMENT_SEPARATOR in route_string:
        raise RouteStringError(
            f"Expected single fix or single procedure route string, but received '{route_string}'"
        )

    if len(route_string.split(PROCEDURE_OR_AIRWAY_SEGMENT_DIVIDER)) > MAX_SEGMENT_TOKENS:
        raise RouteStringError(
            f"Expected single procedure route string, but received '{route_string}'"
        )


def determine_leg_type(route_string: str) -> LegType:
    """Classify a canonical route string.

    Airway legs are not detected yet: every segmented string is treated as a
    procedure until airway navigation data is modelled.

    Args:
        route_string: Canonical route string.

    Returns:
        DIRECT when the string is a bare fix name, PROCEDURE otherwise.
    """
    if PROCEDURE_OR_AIRWAY_SEGMENT_DIVIDER not in route_string:
        return LegType.DIRECT

    return LegType.PROCEDURE


def parse_route_string(route_string: str) -> ParsedRouteString:
    """Parse and validate a single leg route string.

    Args:
        route_string: Raw route string, e.g. "SEA" or "ENDER.GLASR9.KSEA16R".

    Returns:
        The parsed route string.

    Raises:
        RouteStringError: If the string is empty, describes more than one
            leg, or has a token count other than one or three.
    """
    canonical = normalize_route_string(route_string)
    if not canonical:
        raise RouteStringError("Expected route string but received an empty string")

    ensure_single_segment(canonical)

    tokens = canonical.split(PROCEDURE_OR_AIRWAY_SEGMENT_DIVIDER)
    if len(tokens) not in (1, MAX_SEGMENT_TOKENS):
        raise RouteStringError(
            f"Expected 'FIX' or 'ENTRY.PROCEDURE.EXIT' route string, but received '{canonical}'"
        )

    if any(not token for token in tokens):
        raise RouteStringError(f"Route string '{canonical}' contains an empty segment")

    if len(tokens) == 1:
        return ParsedRouteString(
            route_string=canonical,
            entry_or_fix_name=tokens[0],
            airway_or_procedure_name=None,
            exit_name=None,
            leg_type=determine_leg_type(canonical),
        )

    entry_name, procedure_name, exit_name = tokens
    return ParsedRouteString(
        route_string=canonical,
        entry_or_fix_name=entry_name,
        airway_or_procedure_name=procedure_name,
        exit_name=exit_name,
        leg_type=determine_leg_type(canonical),
    )


def build_route_string(entry_name: str, procedure_name: str, exit_name: str) -> str:
    """Join entry, procedure and exit into a route string.

    Args:
        entry_name: Procedure entry.
        procedure_name: Procedure identifier.
        exit_name: Procedure exit.

    Returns:
        Route string such as "ENDER.GLASR9.KSEA16R".
    """
    return PROCEDURE_OR_AIRWAY_SEGMENT_DIVIDER.join((entry_name, procedure_name, exit_name))
