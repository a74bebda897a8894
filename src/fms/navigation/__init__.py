"""Flight plan legs and the navigation data they are built from.

Typical usage:
    from fms.navigation import LegModel, NavigationLibrary

    library = NavigationLibrary.from_yaml("data/navigation/procedures.yaml")
    leg = LegModel(library, "ENDER.GLASR9.KSEA16R")
"""

from fms.navigation.airway import AirwayModel
from fms.navigation.constants import (
    NO_RESTRICTION,
    PROCEDURE_OR_AIRWAY_SEGMENT_DIVIDER,
    LegType,
    ProcedureType,
)
from fms.navigation.exceptions import (
    AirwayLegNotImplementedError,
    LegError,
    LegExhaustedError,
    NavigationDataError,
    ProcedureNotFoundError,
    ProcedureSegmentError,
    RouteStringError,
    WaypointNameError,
)
from fms.navigation.leg import LegModel
from fms.navigation.navigation_library import NavigationLibrary, NavigationResolver
from fms.navigation.procedure import FixDefinition, ProcedureDefinitionModel
from fms.navigation.route_string import ParsedRouteString, parse_route_string
from fms.navigation.waypoint import WaypointModel

__all__ = [
    # Constants
    "LegType",
    "NO_RESTRICTION",
    "PROCEDURE_OR_AIRWAY_SEGMENT_DIVIDER",
    "ProcedureType",
    # Errors
    "AirwayLegNotImplementedError",
    "LegError",
    "LegExhaustedError",
    "NavigationDataError",
    "ProcedureNotFoundError",
    "ProcedureSegmentError",
    "RouteStringError",
    "WaypointNameError",
    # Models
    "AirwayModel",
    "FixDefinition",
    "LegModel",
    "NavigationLibrary",
    "NavigationResolver",
    "ParsedRouteString",
    "ProcedureDefinitionModel",
    "WaypointModel",
    "parse_route_string",
]
