"""Utility modules for logging."""

from lintbaseline.utils.logging import ComponentLogger, get_logger, setup_logging, setup_logging_from_config

__all__ = ["setup_logging", "setup_logging_from_config", "ComponentLogger", "get_logger"]
