"""Logging infrastructure for jswrap-dts.

Key components:
    get_pipeline_logger: Factory function for creating pipeline loggers
    setup_logging: Initialize logging configuration from YAML
    LoggingConfig: Configuration class for logging settings

Example:
    >>> from jswrap_dts.logging import get_pipeline_logger
    >>>
    >>> logger = get_pipeline_logger(__name__)
    >>> logger.info("Scan started")

Note:
    Never import Python's logging module directly in pipeline code. Always use
    get_pipeline_logger() for consistent configuration.
"""

from .logging_config import LoggingConfig, get_pipeline_logger, setup_logging

__all__ = [
    "LoggingConfig",
    "setup_logging",
    "get_pipeline_logger",
]
