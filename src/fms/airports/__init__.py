"""Airport data used by flight planning.

Typical usage:
    from fms.airports import Runway

    runway = Runway(name="16R", airport_icao="KSEA")
"""

from fms.airports.runway import Runway

__all__ = ["Runway"]
