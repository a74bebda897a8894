"""Locate bundled configuration and data files.

Resources live in the ``config/`` and ``data/`` directories at the project
root. The current directory is tried first so a checkout can override them.
"""

from pathlib import Path

# src/fms/core -> project root
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent.parent


def _resolve(directory: str, name: str) -> Path:
    candidates = [
        Path(directory) / name,
        PROJECT_ROOT / directory / name,
    ]
    for candidate in candidates:
        if candidate.exists():
            return candidate
    # Missing resources resolve to the project copy so callers can report it
    return candidates[-1]


def get_config_path(name: str) -> Path:
    """Return the path of a file under ``config/``."""
    return _resolve("config", name)


def get_data_path(name: str) -> Path:
    """Return the path of a file under ``data/``."""
    return _resolve("data", name)
