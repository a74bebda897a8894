"""Logging setup for the FMS.

Loggers are plain ``logging`` loggers. ``initialize_logging`` configures them
from a YAML ``dictConfig`` file, or with a console handler when no file is
available.

Typical usage:
    from fms.core.logging_system import get_logger, initialize_logging

    initialize_logging("config/logging.yaml")
    logger = get_logger(__name__)
"""

import logging
import logging.config
from pathlib import Path
from typing import Any

import yaml

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a module.

    Args:
        name: Logger name, usually ``__name__``.

    Returns:
        Logger instance.
    """
    return logging.getLogger(name)


def initialize_logging(config_path: str | Path | None = None, level: str | None = None) -> bool:
    """Configure logging.

    Args:
        config_path: Optional YAML file holding a ``logging.config.dictConfig``
            mapping.
        level: Optional root level override (e.g., "DEBUG").

    Returns:
        True if the YAML configuration was applied, False if the console
        fallback was used.
    """
    configured = False

    if config_path is not None and Path(config_path).exists():
        try:
            with open(config_path, encoding="utf-8") as f:
                config: dict[str, Any] = yaml.safe_load(f) or {}
            config.setdefault("version", 1)
            logging.config.dictConfig(config)
            configured = True
        except (OSError, yaml.YAMLError, ValueError, TypeError) as e:
            logging.basicConfig(format=DEFAULT_FORMAT)
            logging.getLogger(__name__).error(
                "Failed to load logging config %s: %s", config_path, e
            )

    if not configured:
        logging.basicConfig(format=DEFAULT_FORMAT, level=logging.INFO)

    if level:
        logging.getLogger().setLevel(getattr(logging, level.upper(), logging.INFO))

    return configured
