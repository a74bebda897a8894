"""Navigation settings management.

Settings are stored in ~/.fms/settings.json under the "navigation" key.

Typical usage:
    from fms.settings import get_navigation_settings

    settings = get_navigation_settings()
    settings.set_navdata_path("/data/navigation/procedures.yaml")
    settings.save()
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from fms.core.resource_path import get_data_path

logger = logging.getLogger(__name__)

SETTINGS_KEY = "navigation"

DEFAULT_LOG_LEVEL = "INFO"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _default_navdata_path() -> str:
    return str(get_data_path("navigation/procedures.yaml"))


@dataclass
class NavigationSettings:
    """Navigation settings with persistence.

    Attributes:
        navdata_path: YAML file holding procedures and airways.
        log_level: Root logging level.
    """

    navdata_path: str = field(default_factory=_default_navdata_path)
    log_level: str = DEFAULT_LOG_LEVEL
    _settings_path: Path = field(
        default_factory=lambda: Path.home() / ".fms" / "settings.json"
    )
    _dirty: bool = field(default=False, repr=False)

    def set_navdata_path(self, path: str | Path) -> None:
        """Set the navigation data file.

        Args:
            path: Path to a navigation data YAML file.
        """
        self.navdata_path = str(path)
        self._dirty = True

    def set_log_level(self, level: str) -> None:
        """Set the logging level.

        Args:
            level: One of DEBUG, INFO, WARNING, ERROR, CRITICAL.
        """
        level = level.upper()
        if level in LOG_LEVELS:
            self.log_level = level
            self._dirty = True

    def load(self, path: Path | str | None = None) -> bool:
        """Load settings from file.

        Args:
            path: Optional path to settings file.
                 Defaults to ~/.fms/settings.json.

        Returns:
            True if loaded successfully, False otherwise.
        """
        if path is not None:
            self._settings_path = Path(path)

        if not self._settings_path.exists():
            logger.info("No settings file found, using navigation defaults")
            return False

        try:
            with open(self._settings_path, encoding="utf-8") as f:
                data = json.load(f)

            navigation_data = data.get(SETTINGS_KEY, {})
            self.navdata_path = navigation_data.get("navdata_path", _default_navdata_path())
            self.log_level = navigation_data.get("log_level", DEFAULT_LOG_LEVEL)

            self._dirty = False
            logger.info("Loaded navigation settings from %s", self._settings_path)
            return True

        except (OSError, ValueError, AttributeError) as e:
            logger.error("Failed to load navigation settings: %s", e)
            return False

    def save(self, path: Path | str | None = None) -> bool:
        """Save settings to file.

        Other sections of the settings file are preserved.

        Args:
            path: Optional path to settings file.
                 Defaults to ~/.fms/settings.json.

        Returns:
            True if saved successfully, False otherwise.
        """
        if path is not None:
            self._settings_path = Path(path)

        try:
            self._settings_path.parent.mkdir(parents=True, exist_ok=True)

            existing_data: dict[str, Any] = {}
            if self._settings_path.exists():
                with open(self._settings_path, encoding="utf-8") as f:
                    existing_data = json.load(f)

            existing_data[SETTINGS_KEY] = self.to_dict()

            with open(self._settings_path, "w", encoding="utf-8") as f:
                json.dump(existing_data, f, indent=2)

            self._dirty = False
            logger.info("Saved navigation settings to %s", self._settings_path)
            return True

        except (OSError, ValueError) as e:
            logger.error("Failed to save navigation settings: %s", e)
            return False

    @property
    def is_dirty(self) -> bool:
        """Check if settings have unsaved changes."""
        return self._dirty

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "navdata_path": self.navdata_path,
            "log_level": self.log_level,
        }


# Global singleton instance
_global_settings: NavigationSettings | None = None


def get_navigation_settings() -> NavigationSettings:
    """Get the global navigation settings singleton.

    Loads settings from disk on first access.

    Returns:
        NavigationSettings instance.
    """
    global _global_settings
    if _global_settings is None:
        _global_settings = NavigationSettings()
        _global_settings.load()
    return _global_settings


def reset_navigation_settings() -> None:
    """Reset the global navigation settings singleton.

    Forces reload on next access.
    """
    global _global_settings
    _global_settings = None
