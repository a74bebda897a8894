"""Shared navigation constants.

Leg and procedure classifications, the route string divider, and the
sentinel used for waypoints without an altitude restriction.
"""

from enum import Enum
from typing import Final

# Separates entry, procedure (or airway) and exit in a single leg route string
PROCEDURE_OR_AIRWAY_SEGMENT_DIVIDER: Final = "."

# Two dividers in a row separate two legs, never valid inside a single leg
SEGMENT_SEPARATOR: Final = PROCEDURE_OR_AIRWAY_SEGMENT_DIVIDER * 2

MAX_SEGMENT_TOKENS: Final = 3

# Runway entries/exits are named <ICAO><runway>, e.g. "KSEA16R"
AIRPORT_ICAO_LENGTH: Final = 4

# Altitude restriction value for "no restriction"
NO_RESTRICTION: Final = None


class LegType(Enum):
    """Kind of leg, derived from its route string."""

    DIRECT = "direct"
    PROCEDURE = "procedure"
    AIRWAY = "airway"  # Reserved, derivation not implemented


class ProcedureType(Enum):
    """Standard procedure kind."""

    SID = "SID"  # Standard Instrument Departure
    STAR = "STAR"  # Standard Terminal Arrival Route
