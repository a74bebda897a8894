"""Tests for the navigation library."""

from pathlib import Path
from typing import Any

import pytest
import yaml

from fms.navigation.exceptions import NavigationDataError
from fms.navigation.navigation_library import NavigationLibrary


class TestNavigationLibrary:
    """Tests for procedure and airway lookups."""

    def test_get_procedure(self, navigation_library: NavigationLibrary) -> None:
        """Test procedures are found case-insensitively."""
        procedure = navigation_library.get_procedure("glasr9")

        assert procedure is not None
        assert procedure.identifier == "GLASR9"

    def test_get_unknown_procedure(self, navigation_library: NavigationLibrary) -> None:
        assert navigation_library.get_procedure("NOPE1") is None
        assert navigation_library.get_procedure(None) is None

    def test_get_airway(self, navigation_library: NavigationLibrary) -> None:
        """Test airways are resolved but kept separate from procedures."""
        airway = navigation_library.get_airway("J1")

        assert airway is not None
        assert airway.fix_names == ("SEA", "BTG", "OED")
        assert airway.has_fix("btg") is True
        assert navigation_library.has_airway("J1") is True
        assert navigation_library.has_airway("GLASR9") is False
        assert navigation_library.get_procedure("J1") is None

    def test_names(self, navigation_library: NavigationLibrary) -> None:
        assert navigation_library.procedure_names == ["BANGR9", "GLASR9"]
        assert navigation_library.airway_names == ["J1"]

    def test_load_from_yaml(self, tmp_path: Path, navigation_data: dict[str, Any]) -> None:
        """Test loading a navigation data file."""
        navdata_file = tmp_path / "procedures.yaml"
        navdata_file.write_text(yaml.safe_dump(navigation_data), encoding="utf-8")

        library = NavigationLibrary.from_yaml(navdata_file)

        assert library.procedure_names == ["BANGR9", "GLASR9"]
        assert library.get_airway("J1") is not None

    def test_load_empty_yaml(self, tmp_path: Path) -> None:
        """Test an empty file loads nothing."""
        navdata_file = tmp_path / "empty.yaml"
        navdata_file.write_text("", encoding="utf-8")

        assert NavigationLibrary().load_from_yaml(navdata_file) == 0

    def test_load_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(NavigationDataError, match="Cannot read"):
            NavigationLibrary.from_yaml(tmp_path / "missing.yaml")

    def test_load_invalid_yaml(self, tmp_path: Path) -> None:
        navdata_file = tmp_path / "broken.yaml"
        navdata_file.write_text("procedures: [unclosed", encoding="utf-8")

        with pytest.raises(NavigationDataError, match="Invalid navigation data"):
            NavigationLibrary.from_yaml(navdata_file)

    def test_load_non_mapping(self) -> None:
        with pytest.raises(NavigationDataError):
            NavigationLibrary().load_from_dict(["GLASR9"])  # type: ignore[arg-type]

        with pytest.raises(NavigationDataError):
            NavigationLibrary().load_from_dict({"procedures": ["GLASR9"]})

    def test_bundled_navigation_data(self) -> None:
        """Test the bundled sample data loads."""
        navdata_file = Path(__file__).resolve().parents[2] / "data" / "navigation" / "procedures.yaml"

        library = NavigationLibrary.from_yaml(navdata_file)

        assert "GLASR9" in library.procedure_names
        assert "BANGR9" in library.procedure_names
