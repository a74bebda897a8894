"""Core infrastructure shared by the FMS packages."""
