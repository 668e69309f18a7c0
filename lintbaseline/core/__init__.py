"""Core module containing configuration."""

from lintbaseline.core.config import (
    BaselineSettings,
    LintBaselineConfig,
    LoggingConfig,
    get_default_config,
    validate_config,
)

__all__ = [
    "LintBaselineConfig",
    "BaselineSettings",
    "LoggingConfig",
    "get_default_config",
    "validate_config",
]
