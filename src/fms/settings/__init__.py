"""User settings management for the FMS.

Settings persist across sessions in ~/.fms/settings.json.
"""

from fms.settings.navigation_settings import (
    NavigationSettings,
    get_navigation_settings,
    reset_navigation_settings,
)

__all__ = [
    "NavigationSettings",
    "get_navigation_settings",
    "reset_navigation_settings",
]
