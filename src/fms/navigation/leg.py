"""Flight plan leg: one route string segment and its waypoints.

A leg is built from a single route string segment, either a direct fix
("SEA") or a procedure with entry and exit ("ENDER.GLASR9.KSEA16R"). It
expands that segment into waypoints through the navigation library, then
tracks progress along them as the aircraft flies the route.

Waypoints ahead of the aircraft are kept in the waypoint collection, with
the current waypoint first. Waypoints that are passed or skipped move, in
order, to the previous waypoint collection and never come back.

Typical usage:
    from fms.navigation.leg import LegModel

    leg = LegModel(navigation_library, "ENDER.GLASR9.KSEA16R")

    # In update loop:
    if aircraft_passed(leg.current_waypoint):
        leg.move_to_next_waypoint()
"""

from fms.airports.runway import Runway
from fms.core.logging_system import get_logger
from fms.navigation.airway import AirwayModel
from fms.navigation.constants import NO_RESTRICTION, LegType, ProcedureType
from fms.navigation.exceptions import (
    AirwayLegNotImplementedError,
    LegError,
    LegExhaustedError,
    ProcedureNotFoundError,
    WaypointNameError,
)
from fms.navigation.navigation_library import NavigationResolver
from fms.navigation.procedure import ProcedureDefinitionModel
from fms.navigation.route_string import (
    ParsedRouteString,
    build_route_string,
    parse_route_string,
)
from fms.navigation.runway_convention import (
    apply_runway_suffix,
    extract_airport_prefix,
    extract_runway_name,
)
from fms.navigation.waypoint import WaypointModel

logger = get_logger(__name__)


class LegModel:
    """A portion of a route containing one or more waypoints.

    Attributes:
        leg_type: Kind of leg, or None once reset.
        route_string: Canonical route string for this leg.
        waypoints: Upcoming waypoints, current waypoint first.
        previous_waypoints: Passed or skipped waypoints, oldest first.

    Examples:
        >>> leg = LegModel(library, "SEA")
        >>> leg.current_waypoint.name
        'SEA'
        >>> leg.move_to_next_waypoint()
        >>> leg.is_complete
        True
    """

    def __init__(self, navigation_library: NavigationResolver, route_string: str) -> None:
        """Initialize the leg from a route string.

        Args:
            navigation_library: Resolver for procedure and airway names.
            route_string: Single leg route string.

        Raises:
            RouteStringError: If the route string is malformed.
            ProcedureNotFoundError: If the named procedure does not exist.
        """
        self._airway_definition: AirwayModel | None = None
        self._leg_type: LegType | None = None
        self._procedure_definition: ProcedureDefinitionModel | None = None
        self._parsed_route: ParsedRouteString | None = None
        self._previous_waypoint_collection: list[WaypointModel] = []
        self._route_string = ""
        self._waypoint_collection: list[WaypointModel] = []

        self.init(navigation_library, route_string)

    # ------------------------------ LIFECYCLE ------------------------------

    def init(self, navigation_library: NavigationResolver, route_string: str) -> "LegModel":
        """Parse the route string and derive the leg's waypoints.

        Can be called again to reuse the instance. Once the route string
        parses, the current waypoints are retired through ``reset`` before
        the new ones are derived. A malformed route string leaves the leg
        as it was, and a failed derivation leaves it blank.

        Args:
            navigation_library: Resolver for procedure and airway names.
            route_string: Single leg route string.

        Returns:
            This leg.

        Raises:
            RouteStringError: If the route string is malformed.
            ProcedureNotFoundError: If the named procedure does not exist.
        """
        parsed = parse_route_string(route_string)

        self.reset()

        self._parsed_route = parsed
        self._route_string = parsed.route_string
        self._leg_type = parsed.leg_type

        if parsed.airway_or_procedure_name is not None:
            self._airway_definition = navigation_library.get_airway(
                parsed.airway_or_procedure_name
            )
            self._procedure_definition = navigation_library.get_procedure(
                parsed.airway_or_procedure_name
            )

        try:
            self._waypoint_collection = self._generate_waypoint_collection(
                parsed.entry_or_fix_name, parsed.exit_name
            )
        except LegError:
            self.reset()
            raise

        logger.debug(
            "Initialized %s leg %s with %d waypoints",
            self._leg_type.value,
            self._route_string,
            len(self._waypoint_collection),
        )
        return self

    def reset(self) -> "LegModel":
        """Retire all waypoints and clear the leg.

        Returns:
            This leg, ready for ``init``.
        """
        self._reset_waypoint_collection()

        self._airway_definition = None
        self._leg_type = None
        self._procedure_definition = None
        self._parsed_route = None
        self._previous_waypoint_collection = []
        self._route_string = ""
        self._waypoint_collection = []

        return self

    def _generate_waypoint_collection(
        self, entry_or_fix_name: str, exit_name: str | None
    ) -> list[WaypointModel]:
        """Generate the waypoints needed to fly this leg.

        Args:
            entry_or_fix_name: Fix name for a direct leg, entry for a procedure.
            exit_name: Procedure exit, ignored for direct legs.

        Returns:
            Waypoints in flying order.

        Raises:
            ProcedureNotFoundError: If this is a procedure leg without a
                resolved procedure.
            AirwayLegNotImplementedError: If this is an airway leg.
        """
        if self._leg_type == LegType.DIRECT:
            return [WaypointModel(entry_or_fix_name)]

        if self._leg_type == LegType.AIRWAY:
            raise AirwayLegNotImplementedError(
                f"Unable to generate waypoints for airway leg '{self._route_string}'"
            )

        if self._procedure_definition is None:
            raise ProcedureNotFoundError(
                "Unable to generate waypoints because the requested procedure "
                f"'{self._route_string}' does not exist"
            )

        return list(
            self._procedure_definition.get_waypoint_models_for_entry_and_exit(
                entry_or_fix_name, exit_name
            )
        )

    def _reset_waypoint_collection(self) -> None:
        """Move all waypoints to the previous collection and reset each of them."""
        self.skip_all_waypoints_in_leg()

        for waypoint in self._previous_waypoint_collection:
            waypoint.reset()

    # ------------------------------ PROPERTIES ------------------------------

    @property
    def current_waypoint(self) -> WaypointModel:
        """The active waypoint, always the first upcoming one.

        Raises:
            LegExhaustedError: If no waypoints remain.
        """
        if not self._waypoint_collection:
            raise LegExhaustedError("Expected the current leg to contain at least one waypoint")

        return self._waypoint_collection[0]

    @property
    def next_waypoint(self) -> WaypointModel | None:
        """The waypoint after the current one, or None."""
        if len(self._waypoint_collection) < 2:
            return None
        return self._waypoint_collection[1]

    @property
    def is_airway_leg(self) -> bool:
        return self._leg_type == LegType.AIRWAY

    @property
    def is_direct_leg(self) -> bool:
        return self._leg_type == LegType.DIRECT

    @property
    def is_procedure_leg(self) -> bool:
        return self._leg_type == LegType.PROCEDURE

    @property
    def is_sid_leg(self) -> bool:
        """Check if this is a SID procedure leg."""
        return (
            self.is_procedure_leg
            and self._procedure_definition is not None
            and self._procedure_definition.procedure_type == ProcedureType.SID
        )

    @property
    def is_star_leg(self) -> bool:
        """Check if this is a STAR procedure leg."""
        return (
            self.is_procedure_leg
            and self._procedure_definition is not None
            and self._procedure_definition.procedure_type == ProcedureType.STAR
        )

    @property
    def is_complete(self) -> bool:
        """Check if every waypoint of the leg has been passed or skipped."""
        return not self._waypoint_collection

    @property
    def leg_type(self) -> LegType | None:
        return self._leg_type

    @property
    def route_string(self) -> str:
        return self._route_string

    @property
    def waypoints(self) -> tuple[WaypointModel, ...]:
        """Snapshot of the upcoming waypoints.

        The tuple is fixed but its waypoints are the leg's own objects, so
        ``reset`` or a re-``init`` clears them in every earlier snapshot too.
        """
        return tuple(self._waypoint_collection)

    @property
    def previous_waypoints(self) -> tuple[WaypointModel, ...]:
        """Snapshot of the passed and skipped waypoints.

        Shares waypoint objects with the leg, like ``waypoints``.
        """
        return tuple(self._previous_waypoint_collection)

    # ------------------------------ PUBLIC ------------------------------

    def has_next_waypoint(self) -> bool:
        """Check if there are waypoints beyond the current one."""
        return len(self._waypoint_collection) > 1

    def has_waypoint(self, waypoint_name: str | None) -> bool:
        """Check if an upcoming waypoint has the given name.

        Waypoints already passed are not considered part of the leg anymore.

        Args:
            waypoint_name: Fix name, case-insensitive.

        Returns:
            True if the waypoint is still ahead in this leg.

        Raises:
            WaypointNameError: If no name is given.
        """
        waypoint_name = self._normalize_waypoint_name(waypoint_name)

        # Plain loop, this runs every update for every aircraft
        for waypoint in self._waypoint_collection:
            if waypoint.name == waypoint_name:
                return True

        return False

    def get_procedure_bottom_altitude(self) -> int | None:
        """Return the lowest altitude minimum among the upcoming waypoints.

        Returns:
            Altitude in feet, or NO_RESTRICTION for non-procedure legs and
            legs without minimum restrictions.
        """
        if not self.is_procedure_leg:
            return NO_RESTRICTION

        minimum_altitudes = [
            waypoint.altitude_minimum
            for waypoint in self._waypoint_collection
            if waypoint.altitude_minimum is not NO_RESTRICTION
        ]
        if not minimum_altitudes:
            return NO_RESTRICTION

        return min(minimum_altitudes)

    def get_procedure_top_altitude(self) -> int | None:
        """Return the highest altitude maximum among the upcoming waypoints.

        Returns:
            Altitude in feet, or NO_RESTRICTION for non-procedure legs and
            legs without maximum restrictions.
        """
        if not self.is_procedure_leg:
            return NO_RESTRICTION

        maximum_altitudes = [
            waypoint.altitude_maximum
            for waypoint in self._waypoint_collection
            if waypoint.altitude_maximum is not NO_RESTRICTION
        ]
        if not maximum_altitudes:
            return NO_RESTRICTION

        return max(maximum_altitudes)

    def skip_all_waypoints_in_leg(self) -> None:
        """Move every upcoming waypoint to the previous waypoint collection."""
        self._previous_waypoint_collection.extend(self._waypoint_collection)
        self._waypoint_collection = []

    def move_to_next_waypoint(self) -> None:
        """Move the current waypoint to the previous waypoint collection.

        The following waypoint becomes the current one.

        Raises:
            LegExhaustedError: If no waypoints remain.
        """
        if not self._waypoint_collection:
            raise LegExhaustedError(
                f"Cannot move to the next waypoint, leg '{self._route_string}' is complete"
            )

        waypoint = self._waypoint_collection.pop(0)
        self._previous_waypoint_collection.append(waypoint)
        logger.debug("Passed %s on leg %s", waypoint.name, self._route_string)

    def skip_to_waypoint_name(self, waypoint_name: str | None) -> bool:
        """Skip every upcoming waypoint before the named one.

        The named waypoint becomes the current waypoint.

        Args:
            waypoint_name: Fix name, case-insensitive.

        Returns:
            True if the waypoint was found, False if it is not ahead in this
            leg (nothing changes in that case).

        Raises:
            WaypointNameError: If no name is given.
        """
        waypoint_index = self._find_index_of_waypoint_name(waypoint_name)
        if waypoint_index is None:
            return False

        waypoints_to_move = self._waypoint_collection[:waypoint_index]
        del self._waypoint_collection[:waypoint_index]
        self._previous_waypoint_collection.extend(waypoints_to_move)

        logger.debug(
            "Skipped %d waypoints to %s on leg %s",
            len(waypoints_to_move),
            self.current_waypoint.name,
            self._route_string,
        )
        return True

    def update_star_leg_for_arrival_runway(self, runway: Runway) -> bool:
        """Make the STAR exit match the arrival runway, if the STAR allows it.

        Args:
            runway: Newly assigned arrival runway.

        Returns:
            True if the waypoints were re-derived for the new runway.
        """
        if not self.is_star_leg or self._parsed_route is None:
            return False

        current_entry_name = self._parsed_route.entry_or_fix_name
        current_exit_name = self._parsed_route.exit_name or ""
        next_runway_name = runway.name.upper()

        if not self._is_runway_at_airport_of(runway, current_exit_name):
            return False

        if extract_runway_name(current_exit_name) == next_runway_name:
            return False

        next_exit_name = apply_runway_suffix(current_exit_name, next_runway_name)
        if not self._procedure_definition.has_exit(next_exit_name):
            logger.debug(
                "Procedure %s has no exit %s, keeping %s",
                self._parsed_route.airway_or_procedure_name,
                next_exit_name,
                current_exit_name,
            )
            return False

        return self._rederive_waypoints_for_runway(current_entry_name, next_exit_name)

    def update_sid_leg_for_departure_runway(self, runway: Runway) -> bool:
        """Make the SID entry match the departure runway, if the SID allows it.

        Args:
            runway: Newly assigned departure runway.

        Returns:
            True if the waypoints were re-derived for the new runway.
        """
        if not self.is_sid_leg or self._parsed_route is None:
            return False

        current_entry_name = self._parsed_route.entry_or_fix_name
        current_exit_name = self._parsed_route.exit_name or ""
        next_runway_name = runway.name.upper()

        if not self._is_runway_at_airport_of(runway, current_entry_name):
            return False

        if extract_runway_name(current_entry_name) == next_runway_name:
            return False

        next_entry_name = apply_runway_suffix(current_entry_name, next_runway_name)
        if not self._procedure_definition.has_entry(next_entry_name):
            logger.debug(
                "Procedure %s has no entry %s, keeping %s",
                self._parsed_route.airway_or_procedure_name,
                next_entry_name,
                current_entry_name,
            )
            return False

        return self._rederive_waypoints_for_runway(next_entry_name, current_exit_name)

    # ------------------------------ PRIVATE ------------------------------

    def _rederive_waypoints_for_runway(self, entry_name: str, exit_name: str) -> bool:
        """Replace the upcoming waypoints with those for a new entry/exit pair.

        Legs that are already being flown keep their waypoints.

        Args:
            entry_name: Procedure entry.
            exit_name: Procedure exit.

        Returns:
            True if the waypoints were replaced.
        """
        if self._previous_waypoint_collection:
            logger.warning(
                "Not changing runway for leg %s, %d waypoints already passed",
                self._route_string,
                len(self._previous_waypoint_collection),
            )
            return False

        waypoint_collection = self._generate_waypoint_collection(entry_name, exit_name)
        parsed = parse_route_string(
            build_route_string(
                entry_name, self._parsed_route.airway_or_procedure_name, exit_name
            )
        )

        previous_route_string = self._route_string
        self._waypoint_collection = waypoint_collection
        self._parsed_route = parsed
        self._route_string = parsed.route_string

        logger.info("Leg %s changed to %s", previous_route_string, self._route_string)
        return True

    @staticmethod
    def _is_runway_at_airport_of(runway: Runway, runway_fix_name: str) -> bool:
        """Check the runway belongs to the airport of a runway fix name.

        Runways without an airport are assumed to be at the leg's airport.
        """
        if not runway.airport_icao:
            return True

        if runway.airport_icao.upper() != extract_airport_prefix(runway_fix_name):
            logger.debug(
                "Runway %s is at %s, not %s",
                runway.name,
                runway.airport_icao,
                extract_airport_prefix(runway_fix_name),
            )
            return False

        return True

    def _find_index_of_waypoint_name(self, waypoint_name: str | None) -> int | None:
        waypoint_name = self._normalize_waypoint_name(waypoint_name)

        for index, waypoint in enumerate(self._waypoint_collection):
            if waypoint.name == waypoint_name:
                return index

        return None

    @staticmethod
    def _normalize_waypoint_name(waypoint_name: str | None) -> str:
        if waypoint_name is None or not str(waypoint_name).strip():
            raise WaypointNameError(f"Expected valid fix name but received '{waypoint_name}'")

        return str(waypoint_name).strip().upper()
