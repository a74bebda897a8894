"""Airway definitions.

Airways are loaded and resolved so that legs can hold a reference to them,
but airway legs cannot be flown yet.
"""

from dataclasses import dataclass
from typing import Any

from fms.navigation.exceptions import NavigationDataError


@dataclass(frozen=True)
class AirwayModel:
    """An airway as an ordered list of fix names.

    Attributes:
        identifier: Airway name (e.g., "J1").
        fix_names: Fixes along the airway, in published order.
    """

    identifier: str
    fix_names: tuple[str, ...]

    @classmethod
    def from_data(cls, identifier: str, data: Any) -> "AirwayModel":
        """Build an airway from a list of fix names.

        Raises:
            NavigationDataError: If the data is not a list of names.
        """
        if not isinstance(data, list) or not all(isinstance(fix, str) for fix in data):
            raise NavigationDataError(f"Airway {identifier} must be a list of fix names")

        return cls(identifier=identifier.upper(), fix_names=tuple(fix.upper() for fix in data))

    # Reserved for airway legs, not used by LegModel yet
    def has_fix(self, fix_name: str) -> bool:
        """Check if the airway passes through the named fix."""
        return fix_name.upper() in self.fix_names
