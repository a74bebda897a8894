"""Exceptions raised by the navigation package."""


class LegError(Exception):
    """Base class for all leg and navigation data errors."""


class RouteStringError(LegError, ValueError):
    """Raised when a route string does not describe exactly one leg."""


class WaypointNameError(LegError, ValueError):
    """Raised when a waypoint lookup is given no name."""


class ProcedureNotFoundError(LegError, LookupError):
    """Raised when a procedure leg names a procedure the library does not know."""


class ProcedureSegmentError(LegError, LookupError):
    """Raised when a procedure is expanded with an entry or exit it does not have."""


class LegExhaustedError(LegError, IndexError):
    """Raised when the current waypoint is needed but none remain in the leg."""


class AirwayLegNotImplementedError(LegError, NotImplementedError):
    """Raised when an airway leg would need to generate waypoints."""


class NavigationDataError(LegError, ValueError):
    """Raised when navigation data cannot be read or is malformed."""
