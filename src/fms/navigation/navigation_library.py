"""Navigation library for procedure and airway lookups.

The library owns every procedure and airway definition. Legs hold references
into it but never modify or release them.

Navigation data is read from YAML files of the form:

    procedures:
      GLASR9:
        type: STAR
        entryPoints:
          ENDER: [ENDER, [GLASR, "A170+"]]
        body: [[RADDY, "A110+|A170-"], JAWBN]
        rwy:
          KSEA16R: [SODOE]
    airways:
      J1: [FIXA, FIXB]

Typical usage:
    from fms.navigation.navigation_library import NavigationLibrary

    library = NavigationLibrary.from_yaml("data/navigation/procedures.yaml")
    star = library.get_procedure("GLASR9")
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

import yaml

from fms.core.logging_system import get_logger
from fms.navigation.airway import AirwayModel
from fms.navigation.exceptions import NavigationDataError
from fms.navigation.procedure import ProcedureDefinitionModel

logger = get_logger(__name__)


class NavigationResolver(ABC):
    """Interface legs use to resolve procedure and airway names."""

    @abstractmethod
    def get_procedure(self, procedure_name: str | None) -> ProcedureDefinitionModel | None:
        """Return the named procedure, or None if it is unknown."""

    @abstractmethod
    def get_airway(self, airway_name: str | None) -> AirwayModel | None:
        """Return the named airway, or None if it is unknown."""

    # Reserved for airway legs, not used by LegModel yet
    def has_airway(self, airway_name: str | None) -> bool:
        """Check if the named airway exists."""
        return self.get_airway(airway_name) is not None


class NavigationLibrary(NavigationResolver):
    """In-memory procedure and airway store backed by YAML files.

    Examples:
        >>> library = NavigationLibrary()
        >>> library.load_from_yaml("data/navigation/procedures.yaml")
        >>> library.get_procedure("glasr9").identifier
        'GLASR9'
    """

    def __init__(self) -> None:
        """Initialize an empty library."""
        self._procedures: dict[str, ProcedureDefinitionModel] = {}
        self._airways: dict[str, AirwayModel] = {}

    @classmethod
    def from_yaml(cls, path: str | Path) -> "NavigationLibrary":
        """Create a library and load one navigation data file into it."""
        library = cls()
        library.load_from_yaml(path)
        return library

    @property
    def procedure_names(self) -> list[str]:
        """Sorted names of all loaded procedures."""
        return sorted(self._procedures)

    # Reserved for airway legs, not used by LegModel yet
    @property
    def airway_names(self) -> list[str]:
        """Sorted names of all loaded airways."""
        return sorted(self._airways)

    def add_procedure(self, procedure: ProcedureDefinitionModel) -> None:
        """Register a procedure, replacing any with the same identifier."""
        self._procedures[procedure.identifier.upper()] = procedure

    def add_airway(self, airway: AirwayModel) -> None:
        """Register an airway, replacing any with the same identifier."""
        self._airways[airway.identifier.upper()] = airway

    def get_procedure(self, procedure_name: str | None) -> ProcedureDefinitionModel | None:
        if not procedure_name:
            return None
        return self._procedures.get(procedure_name.upper())

    def get_airway(self, airway_name: str | None) -> AirwayModel | None:
        if not airway_name:
            return None
        return self._airways.get(airway_name.upper())

    def load_from_yaml(self, path: str | Path) -> int:
        """Load procedures and airways from a YAML file.

        Args:
            path: Navigation data file.

        Returns:
            Number of procedures and airways loaded.

        Raises:
            NavigationDataError: If the file cannot be read or is malformed.
        """
        path = Path(path)
        try:
            with open(path, encoding="utf-8") as f:
                data: Any = yaml.safe_load(f) or {}
        except OSError as e:
            raise NavigationDataError(f"Cannot read navigation data {path}: {e}") from e
        except yaml.YAMLError as e:
            raise NavigationDataError(f"Invalid navigation data {path}: {e}") from e

        count = self.load_from_dict(data)
        logger.info("Loaded %d navigation definitions from %s", count, path)
        return count

    def load_from_dict(self, data: dict[str, Any]) -> int:
        """Load procedures and airways from an already parsed mapping.

        Args:
            data: Mapping with optional "procedures" and "airways" sections.

        Returns:
            Number of procedures and airways loaded.

        Raises:
            NavigationDataError: If the data is malformed.
        """
        if not isinstance(data, dict):
            raise NavigationDataError("Navigation data must be a mapping")

        procedures = data.get("procedures") or {}
        airways = data.get("airways") or {}
        if not isinstance(procedures, dict) or not isinstance(airways, dict):
            raise NavigationDataError("'procedures' and 'airways' must be mappings")

        for identifier, procedure_data in procedures.items():
            self.add_procedure(ProcedureDefinitionModel.from_dict(str(identifier), procedure_data))

        for identifier, airway_data in airways.items():
            self.add_airway(AirwayModel.from_data(str(identifier), airway_data))

        logger.debug("Navigation library now holds %d procedures and %d airways",
                     len(self._procedures), len(self._airways))
        return len(procedures) + len(airways)
