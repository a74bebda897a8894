"""Flight management system: flight plan legs and navigation data."""

from fms.version import __version__

__all__ = ["__version__"]
