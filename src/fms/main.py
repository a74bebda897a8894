"""Command line entry point for inspecting flight plan legs.

Loads navigation data, builds a leg from a route string and prints its
waypoints, optionally after assigning a new departure or arrival runway.

Typical usage:
    python -m fms.main SEA
    python -m fms.main ENDER.GLASR9.KSEA34R --arrival-runway 16R
    python -m fms.main KSEA16L.BANGR9.ZADON --departure-runway 34C
"""

import argparse
import sys

from fms.airports.runway import Runway
from fms.core.logging_system import get_logger, initialize_logging
from fms.core.resource_path import get_config_path
from fms.navigation.exceptions import LegError
from fms.navigation.leg import LegModel
from fms.navigation.navigation_library import NavigationLibrary
from fms.settings import get_navigation_settings
from fms.version import get_version

logger = get_logger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Args:
        argv: Arguments, defaults to ``sys.argv[1:]``.

    Returns:
        Parsed arguments.
    """
    parser = argparse.ArgumentParser(description="Inspect a flight plan leg")
    parser.add_argument("route", help="Single leg route string, e.g. ENDER.GLASR9.KSEA16R")
    parser.add_argument("--navdata", help="Navigation data YAML file")
    parser.add_argument("--departure-runway", help="Assign a departure runway to a SID leg")
    parser.add_argument("--arrival-runway", help="Assign an arrival runway to a STAR leg")
    parser.add_argument("--log-level", help="Logging level (DEBUG, INFO, ...)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {get_version()}")
    return parser.parse_args(argv)


def format_leg(leg: LegModel) -> str:
    """Render a leg and its upcoming waypoints as text."""
    lines = [f"{leg.route_string} ({leg.leg_type.value if leg.leg_type else 'empty'})"]
    lines.extend(f"  {index + 1}. {waypoint}" for index, waypoint in enumerate(leg.waypoints))

    if leg.is_procedure_leg:
        bottom = leg.get_procedure_bottom_altitude()
        top = leg.get_procedure_top_altitude()
        lines.append(f"  bottom: {bottom if bottom is not None else '-'}"
                     f"  top: {top if top is not None else '-'}")

    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    """Run the command line tool.

    Returns:
        Process exit status.
    """
    args = parse_args(argv)
    settings = get_navigation_settings()

    initialize_logging(get_config_path("logging.yaml"), level=args.log_level or settings.log_level)

    navdata_path = args.navdata or settings.navdata_path

    try:
        library = NavigationLibrary.from_yaml(navdata_path)
        leg = LegModel(library, args.route)

        if args.departure_runway:
            runway = Runway(name=args.departure_runway)
            if not leg.update_sid_leg_for_departure_runway(runway):
                logger.warning("Departure runway %s not applied to %s", runway.name, leg.route_string)

        if args.arrival_runway:
            runway = Runway(name=args.arrival_runway)
            if not leg.update_star_leg_for_arrival_runway(runway):
                logger.warning("Arrival runway %s not applied to %s", runway.name, leg.route_string)

    except LegError as e:
        logger.error("%s", e)
        return 1

    print(format_leg(leg))
    return 0


if __name__ == "__main__":
    sys.exit(main())
