"""Standard procedure (SID/STAR) definitions.

A procedure is made of three parts: an entry segment, a common body and an
exit segment. Which named segments act as entries and exits depends on the
procedure type:

    SID:  entries are runways ("rwy"), exits are "exitPoints"
    STAR: entries are "entryPoints", exits are runways ("rwy")

Expanding a procedure for an entry/exit pair returns the concatenation of
the entry segment, the body and the exit segment as new ``WaypointModel``
instances.

Typical usage:
    from fms.navigation.procedure import ProcedureDefinitionModel

    star = ProcedureDefinitionModel.from_dict("GLASR9", data)
    waypoints = star.get_waypoint_models_for_entry_and_exit("ENDER", "KSEA16R")
"""

from dataclasses import dataclass, field
from typing import Any

from fms.navigation.constants import ProcedureType
from fms.navigation.exceptions import NavigationDataError, ProcedureSegmentError
from fms.navigation.waypoint import WaypointModel


@dataclass(frozen=True)
class FixDefinition:
    """A fix as written in procedure data.

    Attributes:
        name: Fix identifier.
        restriction: Raw restriction string, or None.
    """

    name: str
    restriction: str | None = None

    def to_waypoint_model(self) -> WaypointModel:
        """Create a new waypoint for this fix."""
        return WaypointModel.from_restriction(self.name, self.restriction)

    @classmethod
    def from_data(cls, data: Any) -> "FixDefinition":
        """Parse a fix given as "NAME" or ["NAME", "RESTRICTION"].

        Args:
            data: Raw fix data.

        Returns:
            Parsed fix definition.

        Raises:
            NavigationDataError: If the fix data has an unexpected shape.
        """
        if isinstance(data, str) and data.strip():
            return cls(name=data.strip().upper())

        if isinstance(data, (list, tuple)) and len(data) == 2 and isinstance(data[0], str):
            restriction = data[1] if data[1] else None
            if restriction is not None and not isinstance(restriction, str):
                raise NavigationDataError(f"Invalid restriction for fix {data[0]!r}: {data[1]!r}")
            return cls(name=data[0].strip().upper(), restriction=restriction)

        raise NavigationDataError(f"Invalid fix definition: {data!r}")


def _parse_segments(data: Any, key: str, identifier: str) -> dict[str, tuple[FixDefinition, ...]]:
    """Parse a mapping of segment name to fix list."""
    if data is None:
        return {}

    if not isinstance(data, dict):
        raise NavigationDataError(f"Procedure {identifier}: '{key}' must be a mapping")

    segments: dict[str, tuple[FixDefinition, ...]] = {}
    for segment_name, fixes in data.items():
        if not isinstance(fixes, list):
            raise NavigationDataError(
                f"Procedure {identifier}: segment '{segment_name}' must be a list of fixes"
            )
        segments[str(segment_name).upper()] = tuple(FixDefinition.from_data(fix) for fix in fixes)

    return segments


@dataclass
class ProcedureDefinitionModel:
    """A SID or STAR as published in navigation data.

    Instances belong to the navigation library and are shared by every leg
    flying the procedure; legs must not modify them.

    Attributes:
        identifier: Procedure name (e.g., "GLASR9").
        procedure_type: SID or STAR.
        entries: Entry segments by name.
        body: Fixes common to every entry/exit pair.
        exits: Exit segments by name.
        name: Human readable name, if known.
    """

    identifier: str
    procedure_type: ProcedureType
    entries: dict[str, tuple[FixDefinition, ...]] = field(default_factory=dict)
    body: tuple[FixDefinition, ...] = ()
    exits: dict[str, tuple[FixDefinition, ...]] = field(default_factory=dict)
    name: str = ""

    @classmethod
    def from_dict(cls, identifier: str, data: dict[str, Any]) -> "ProcedureDefinitionModel":
        """Build a procedure from its navigation data mapping.

        Args:
            identifier: Procedure name.
            data: Mapping with "type", "body" and the entry/exit segments.

        Returns:
            Procedure definition.

        Raises:
            NavigationDataError: If the data is malformed.
        """
        identifier = identifier.upper()
        if not isinstance(data, dict):
            raise NavigationDataError(f"Procedure {identifier} must be a mapping")

        try:
            procedure_type = ProcedureType(str(data.get("type", "")).upper())
        except ValueError as e:
            raise NavigationDataError(
                f"Procedure {identifier} has unknown type {data.get('type')!r}"
            ) from e

        body_data = data.get("body") or []
        if not isinstance(body_data, list):
            raise NavigationDataError(f"Procedure {identifier}: 'body' must be a list of fixes")
        body = tuple(FixDefinition.from_data(fix) for fix in body_data)

        runways = _parse_segments(data.get("rwy"), "rwy", identifier)
        if procedure_type == ProcedureType.SID:
            entries = runways
            exits = _parse_segments(data.get("exitPoints"), "exitPoints", identifier)
        else:
            entries = _parse_segments(data.get("entryPoints"), "entryPoints", identifier)
            exits = runways

        return cls(
            identifier=identifier,
            procedure_type=procedure_type,
            entries=entries,
            body=body,
            exits=exits,
            name=data.get("name", ""),
        )

    def has_entry(self, entry_name: str) -> bool:
        """Check if the procedure can be joined at the named entry."""
        return entry_name.upper() in self.entries

    def has_exit(self, exit_name: str) -> bool:
        """Check if the procedure can be left at the named exit."""
        return exit_name.upper() in self.exits

    def get_waypoint_models_for_entry_and_exit(
        self, entry_name: str, exit_name: str
    ) -> list[WaypointModel]:
        """Expand the procedure for an entry/exit pair.

        Args:
            entry_name: Entry segment name.
            exit_name: Exit segment name.

        Returns:
            New waypoints for the entry segment, body and exit segment, in
            flying order.

        Raises:
            ProcedureSegmentError: If the entry or exit does not exist.
        """
        if not self.has_entry(entry_name):
            raise ProcedureSegmentError(
                f"Procedure {self.identifier} has no entry '{entry_name}'"
            )

        if not self.has_exit(exit_name):
            raise ProcedureSegmentError(f"Procedure {self.identifier} has no exit '{exit_name}'")

        fixes = (
            *self.entries[entry_name.upper()],
            *self.body,
            *self.exits[exit_name.upper()],
        )
        return [fix.to_waypoint_model() for fix in fixes]
