"""Tests for logging setup."""

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from fms.core.logging_system import get_logger, initialize_logging
from fms.core.resource_path import get_config_path, get_data_path


@pytest.fixture(autouse=True)
def restore_root_logger() -> Iterator[None]:
    """Keep logging changes from leaking into other tests."""
    root = logging.getLogger()
    level = root.level
    handlers = list(root.handlers)
    yield
    root.setLevel(level)
    root.handlers[:] = handlers


class TestLoggingSystem:
    """Tests for get_logger and initialize_logging."""

    def test_get_logger(self) -> None:
        assert get_logger("fms.navigation.leg") is logging.getLogger("fms.navigation.leg")

    def test_yaml_config(self, tmp_path: Path) -> None:
        """Test a dictConfig YAML file is applied."""
        config_file = tmp_path / "logging.yaml"
        config_file.write_text(
            "version: 1\n"
            "disable_existing_loggers: false\n"
            "loggers:\n"
            "  fms.test_yaml:\n"
            "    level: ERROR\n",
            encoding="utf-8",
        )

        assert initialize_logging(config_file) is True
        assert logging.getLogger("fms.test_yaml").level == logging.ERROR

    def test_missing_config_falls_back(self, tmp_path: Path) -> None:
        assert initialize_logging(tmp_path / "missing.yaml") is False

    def test_invalid_config_falls_back(self, tmp_path: Path) -> None:
        config_file = tmp_path / "logging.yaml"
        config_file.write_text("version: 1\nhandlers:\n  bad:\n    class: no.such.Handler\n")

        assert initialize_logging(config_file) is False

    def test_level_override(self) -> None:
        initialize_logging(level="debug")

        assert logging.getLogger().level == logging.DEBUG


class TestResourcePath:
    """Tests for bundled resource lookup."""

    def test_bundled_resources_exist(self) -> None:
        assert get_config_path("logging.yaml").exists()
        assert get_data_path("navigation/procedures.yaml").exists()
