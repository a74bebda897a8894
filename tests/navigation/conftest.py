"""Shared fixtures for navigation tests."""

from typing import Any

import pytest

from fms.navigation.navigation_library import NavigationLibrary

NAVIGATION_DATA: dict[str, Any] = {
    "procedures": {
        "GLASR9": {
            "name": "Glasr Nine Arrival",
            "type": "STAR",
            "entryPoints": {
                "ENDER": ["ENDER", ["GLASR", "A170+"]],
                "HQM": ["HQM", ["GLASR", "A170+"]],
            },
            "body": [["RADDY", "A110+|A170-"], ["JAWBN", "A100+|S250"]],
            "rwy": {
                "KSEA16L": [["SODOE", "A60+"]],
                "KSEA16R": [["SODOE", "A60+"], ["HETOR", "A40"]],
                "KSEA34R": [["FOURT", "A50+"], ["DANEE", "A40"]],
            },
        },
        "BANGR9": {
            "name": "Bangr Nine Departure",
            "type": "SID",
            "rwy": {
                "KSEA16L": [["MOUNTAIN", "A30+"]],
                "KSEA34C": [["NORTH", "A30+"]],
            },
            "body": [["BANGR", "A120-"]],
            "exitPoints": {
                "ZADON": ["ZADON"],
                "ONETA": [["ONETA", "A150+"]],
            },
        },
    },
    "airways": {
        "J1": ["SEA", "BTG", "OED"],
    },
}


@pytest.fixture
def navigation_data() -> dict[str, Any]:
    """Raw navigation data mapping."""
    return NAVIGATION_DATA


@pytest.fixture
def navigation_library() -> NavigationLibrary:
    """Navigation library loaded with KSEA procedures."""
    library = NavigationLibrary()
    library.load_from_dict(NAVIGATION_DATA)
    return library
