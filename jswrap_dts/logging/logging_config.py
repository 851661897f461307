"""Logging configuration for jswrap-dts.

Loggers come from Prefect's logger factory, so the generator logs the same
way when it runs inside a Prefect flow. The configuration is a
``logging.config.dictConfig`` mapping read from a YAML file when one is
given, otherwise built in. Diagnostics go to stderr; stdout is reserved for
command output.

Usage:
    >>> from jswrap_dts.logging import get_pipeline_logger, setup_logging
    >>> setup_logging(level="DEBUG")
    >>> logger = get_pipeline_logger(__name__)

Environment variables:
    JSWRAP_DTS_LOGGING_CONFIG: Path to a YAML logging configuration
    JSWRAP_DTS_LOG_LEVEL: Level of the package loggers (default INFO)
"""

import logging.config
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from prefect.logging import get_logger

PACKAGE_LOGGER = "jswrap_dts"
DEFAULT_LEVEL = "INFO"


class LoggingConfig:
    """dictConfig mapping for the generator's loggers.

    A YAML file, named by ``config_path`` or ``JSWRAP_DTS_LOGGING_CONFIG``,
    replaces the built-in mapping entirely.
    """

    def __init__(self, config_path: Optional[Path] = None):
        env_path = os.environ.get("JSWRAP_DTS_LOGGING_CONFIG")
        self.config_path = config_path or (Path(env_path) if env_path else None)
        self._config: Optional[Dict[str, Any]] = None

    def load_config(self) -> Dict[str, Any]:
        """Return the mapping, cached after the first call."""
        if self._config is None:
            if self.config_path and self.config_path.exists():
                with open(self.config_path, "r") as f:
                    self._config = yaml.safe_load(f)
            else:
                self._config = self.default_config(os.environ.get("JSWRAP_DTS_LOG_LEVEL", DEFAULT_LEVEL))
        return self._config

    @staticmethod
    def default_config(level: str) -> Dict[str, Any]:
        """Package loggers at ``level`` on a stderr handler, not propagated to Prefect's handlers."""
        return {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "diagnostic": {"format": "%(levelname)s %(name)s: %(message)s"},
            },
            "handlers": {
                "stderr": {
                    "class": "logging.StreamHandler",
                    "formatter": "diagnostic",
                    "stream": "ext://sys.stderr",
                },
            },
            "loggers": {
                get_logger(PACKAGE_LOGGER).name: {
                    "level": level.upper(),
                    "handlers": ["stderr"],
                    "propagate": False,
                },
            },
        }

    def apply(self) -> None:
        logging.config.dictConfig(self.load_config())


_logging_config: Optional[LoggingConfig] = None


def setup_logging(config_path: Optional[Path] = None, level: Optional[str] = None):
    """Configure logging for jswrap-dts.

    Args:
        config_path: Optional YAML logging configuration. If None, uses
                    ``JSWRAP_DTS_LOGGING_CONFIG`` or the built-in mapping.
        level: Optional level (DEBUG, INFO, WARNING, ...) applied to the
               package loggers after the configuration.
    """
    global _logging_config

    _logging_config = LoggingConfig(config_path)
    _logging_config.apply()

    if level:
        get_logger(PACKAGE_LOGGER).setLevel(level.upper())


def get_pipeline_logger(name: str):
    """Get a Prefect logger, configuring logging on first use.

    Args:
        name: Logger name, typically __name__.
    """
    if _logging_config is None:
        setup_logging()

    return get_logger(name)
