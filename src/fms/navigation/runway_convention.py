"""Helpers for runway names embedded in procedure entries and exits.

SID entries and STAR exits are named after the airport ICAO code followed
by the runway designator, e.g. "KSEA16R" is runway 16R at KSEA. The first
four characters are assumed to be the ICAO code.
"""

from fms.navigation.constants import AIRPORT_ICAO_LENGTH


def extract_airport_prefix(fix_name: str) -> str:
    """Return the airport ICAO part of a runway fix name ("KSEA16R" -> "KSEA")."""
    return fix_name[:AIRPORT_ICAO_LENGTH]


def extract_runway_name(fix_name: str) -> str:
    """Return the runway part of a runway fix name ("KSEA16R" -> "16R")."""
    return fix_name[AIRPORT_ICAO_LENGTH:]


def apply_runway_suffix(fix_name: str, runway_name: str) -> str:
    """Replace the runway of a runway fix name.

    Args:
        fix_name: Current runway fix name, e.g. "KSEA34L".
        runway_name: New runway designator, e.g. "16R".

    Returns:
        Fix name for the same airport and the new runway, e.g. "KSEA16R".
    """
    return f"{extract_airport_prefix(fix_name)}{runway_name.upper()}"
