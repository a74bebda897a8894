"""Navigation waypoint used by flight plan legs.

A waypoint is a named fix with optional altitude restrictions. Waypoints
are created fresh for every leg derivation, so a leg may retire them with
``reset()`` without affecting the navigation data they came from.

Restrictions are written the way procedure charts abbreviate them:

    "A170+"          at or above 17,000 ft
    "A110-"          at or below 11,000 ft
    "A80"            at 8,000 ft
    "A110+|A170-"    between 11,000 ft and 17,000 ft
    "A80+|S210"      speed parts are accepted and ignored

Typical usage:
    from fms.navigation.waypoint import WaypointModel

    waypoint = WaypointModel.from_restriction("raddy", "A110+|A170-")
    waypoint.altitude_minimum  # 11000
"""

import re
from dataclasses import dataclass

from fms.navigation.constants import NO_RESTRICTION
from fms.navigation.exceptions import NavigationDataError

RESTRICTION_SEPARATOR = "|"

# A<hundreds of feet>[+|-]
ALTITUDE_RESTRICTION_PATTERN = re.compile(r"^A(\d{1,3})([+-])?$")

# Speed restrictions (S<knots>[+|-]) are valid but not modelled
SPEED_RESTRICTION_PATTERN = re.compile(r"^S(\d{2,3})([+-])?$")


def parse_altitude_restriction(restriction: str) -> tuple[int | None, int | None]:
    """Parse an altitude restriction string.

    Args:
        restriction: Restriction string, e.g. "A110+|A170-".

    Returns:
        Tuple of (minimum altitude ft, maximum altitude ft). Either may be
        ``NO_RESTRICTION``.

    Raises:
        NavigationDataError: If a part of the restriction is not recognized.
    """
    minimum: int | None = NO_RESTRICTION
    maximum: int | None = NO_RESTRICTION

    for part in restriction.upper().split(RESTRICTION_SEPARATOR):
        part = part.strip()
        if not part:
            continue

        match = ALTITUDE_RESTRICTION_PATTERN.match(part)
        if match is None:
            if SPEED_RESTRICTION_PATTERN.match(part):
                continue
            raise NavigationDataError(f"Unrecognized restriction '{part}' in '{restriction}'")

        altitude = int(match.group(1)) * 100
        qualifier = match.group(2)
        if qualifier == "+":
            minimum = altitude
        elif qualifier == "-":
            maximum = altitude
        else:
            minimum = altitude
            maximum = altitude

    return minimum, maximum


@dataclass
class WaypointModel:
    """A fix along a leg.

    Attributes:
        name: Fix identifier (upper-case).
        altitude_minimum: Lowest allowed altitude in feet, or None.
        altitude_maximum: Highest allowed altitude in feet, or None.

    Examples:
        >>> waypoint = WaypointModel("SEA")
        >>> waypoint.has_altitude_restriction
        False
    """

    name: str
    altitude_minimum: int | None = NO_RESTRICTION
    altitude_maximum: int | None = NO_RESTRICTION

    def __post_init__(self) -> None:
        self.name = self.name.strip().upper()

    @classmethod
    def from_restriction(cls, name: str, restriction: str | None = None) -> "WaypointModel":
        """Create a waypoint from a fix name and a restriction string.

        Args:
            name: Fix identifier.
            restriction: Optional restriction string such as "A80+".

        Returns:
            New waypoint.
        """
        if not restriction:
            return cls(name)

        minimum, maximum = parse_altitude_restriction(restriction)
        return cls(name, altitude_minimum=minimum, altitude_maximum=maximum)

    @property
    def has_altitude_restriction(self) -> bool:
        """Check if either altitude bound is set."""
        return self.altitude_minimum is not None or self.altitude_maximum is not None

    def reset(self) -> None:
        """Clear the waypoint once it is retired from its leg."""
        self.name = ""
        self.altitude_minimum = NO_RESTRICTION
        self.altitude_maximum = NO_RESTRICTION

    def __str__(self) -> str:
        """Return the name with any altitude restriction."""
        if self.altitude_minimum is not None and self.altitude_minimum == self.altitude_maximum:
            return f"{self.name} (at {self.altitude_minimum}ft)"
        if self.altitude_minimum is not None and self.altitude_maximum is not None:
            return f"{self.name} ({self.altitude_minimum}-{self.altitude_maximum}ft)"
        if self.altitude_minimum is not None:
            return f"{self.name} (at or above {self.altitude_minimum}ft)"
        if self.altitude_maximum is not None:
            return f"{self.name} (at or below {self.altitude_maximum}ft)"
        return self.name
