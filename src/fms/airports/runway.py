"""Runway reference used for procedure runway assignment."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Runway:
    """A runway end at an airport.

    A SID or STAR leg only accepts a runway at its own airport. A runway
    without ``airport_icao`` is taken to be at the leg's airport.

    Attributes:
        name: Runway designator (e.g., "16R").
        airport_icao: Parent airport ICAO code (e.g., "KSEA"), if known.
    """

    name: str
    airport_icao: str = ""
