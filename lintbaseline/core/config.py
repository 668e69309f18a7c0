"""
Hierarchical configuration management for lintbaseline.

Configuration priority (highest to lowest):
1. CLI arguments
2. Environment variables (LINTBASELINE_*)
3. Project config (.lintbaseline.yml)
4. User config (~/.lintbaseline/config.yml)
5. Default values
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

PROJECT_CONFIG_FILE = ".lintbaseline.yml"
DEFAULT_BASELINE_PATH = Path("baseline.xml")


class BaselineSettings(BaseModel):
    """Configuration for the baseline file."""

    enabled: bool = True
    path: Path = DEFAULT_BASELINE_PATH

    @field_validator("path", mode="before")
    @classmethod
    def validate_path(cls, v: Any) -> Path:
        """Ensure path is a non-blank Path."""
        if isinstance(v, str):
            if not v.strip():
                raise ValueError("Baseline path may not be blank or empty")
            return Path(v)
        return v


class LoggingConfig(BaseModel):
    """Configuration for logging."""

    level: str = "INFO"
    file: Optional[Path] = None
    json_format: bool = False
    max_file_size_mb: int = 10
    backup_count: int = 5

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate logging level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v_upper

    @field_validator("file", mode="before")
    @classmethod
    def validate_file(cls, v: Any) -> Optional[Path]:
        """Ensure file is a Path or None."""
        if v is None:
            return None
        if isinstance(v, str):
            return Path(v)
        return v


class LintBaselineConfig(BaseSettings):
    """
    Main configuration model with hierarchical loading.

    Loads configuration from:
    1. Default values (lowest priority)
    2. User config file (~/.lintbaseline/config.yml)
    3. Project config file (.lintbaseline.yml)
    4. Environment variables (LINTBASELINE_*)
    5. CLI arguments (highest priority)
    """

    model_config = SettingsConfigDict(
        env_prefix="LINTBASELINE_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    baseline: BaselineSettings = Field(default_factory=BaselineSettings)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def load(
        cls,
        cli_args: Optional[dict[str, Any]] = None,
        project_path: Optional[Path] = None,
        config_file: Optional[Path] = None,
    ) -> LintBaselineConfig:
        """
        Load configuration from multiple sources with priority.

        Args:
            cli_args: Command-line arguments (highest priority)
            project_path: Directory containing .lintbaseline.yml
            config_file: Explicit config file, used instead of the project config

        Returns:
            Merged configuration
        """
        config_dict: dict[str, Any] = {}
        project_path = project_path or Path.cwd()

        user_config_path = Path.home() / ".lintbaseline" / "config.yml"
        config_dict = _deep_merge(config_dict, _read_yaml(user_config_path))

        project_config_path = config_file or project_path / PROJECT_CONFIG_FILE
        config_dict = _deep_merge(config_dict, _read_yaml(project_config_path))

        # Environment variables are applied by pydantic-settings on instantiation
        # and lose against init kwargs, so file values they override are dropped.
        config_dict = _drop_env_overridden(config_dict, cls.model_config["env_prefix"])

        if cli_args:
            config_dict = _deep_merge(config_dict, _flatten_cli_args(cli_args))

        return cls(**config_dict)

    def to_yaml(self, path: Path) -> None:
        """Write configuration to YAML file."""
        with open(path, "w") as f:
            yaml.dump(self.model_dump(mode="json"), f, default_flow_style=False, sort_keys=False)


def _read_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    with open(path) as f:
        return yaml.safe_load(f) or {}


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """
    Deep merge two dictionaries.

    Args:
        base: Base dictionary
        override: Dictionary with values to override

    Returns:
        Merged dictionary
    """
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _drop_env_overridden(config_dict: dict[str, Any], env_prefix: str) -> dict[str, Any]:
    """Remove file values for which a LINTBASELINE_SECTION__KEY variable is set."""
    result: dict[str, Any] = {}
    for section, values in config_dict.items():
        if not isinstance(values, dict):
            if f"{env_prefix}{section}".upper() not in os.environ:
                result[section] = values
            continue
        result[section] = {
            key: value
            for key, value in values.items()
            if f"{env_prefix}{section}__{key}".upper() not in os.environ
        }
    return result


def _flatten_cli_args(args: dict[str, Any]) -> dict[str, Any]:
    """
    Convert flat CLI arguments to nested config structure.

    Examples:
        {"baseline": "lint/baseline.xml"} -> {"baseline": {"path": Path("lint/baseline.xml")}}
        {"verbose": True} -> {"logging": {"level": "DEBUG"}}
    """
    result: dict[str, Any] = {}

    mappings = {
        "verbose": ("logging", "level", lambda v: "DEBUG" if v else None),
        "quiet": ("logging", "level", lambda v: "ERROR" if v else None),
        "log_file": ("logging", "file", Path),
        "json_logs": ("logging", "json_format", lambda v: True if v else None),
        "baseline": ("baseline", "path", Path),
        "no_baseline": ("baseline", "enabled", lambda v: False if v else None),
    }

    for key, value in args.items():
        if value is None or key not in mappings:
            continue
        section, subkey, transform = mappings[key]
        transformed = transform(value)
        if transformed is not None:
            result.setdefault(section, {})[subkey] = transformed

    return result


def get_default_config() -> LintBaselineConfig:
    """Get configuration with all defaults."""
    return LintBaselineConfig()


def validate_config(config: LintBaselineConfig) -> list[str]:
    """
    Validate configuration and return list of warnings.

    Returns:
        List of warning messages (empty if all valid)
    """
    warnings: list[str] = []

    if not config.baseline.enabled:
        warnings.append("Baseline is disabled, all lint errors will be reported")
    elif config.baseline.path.is_dir():
        warnings.append(f"Baseline path is a directory: {config.baseline.path}")

    if config.baseline.path.suffix and config.baseline.path.suffix.lower() != ".xml":
        warnings.append(f"Baseline path does not have an .xml extension: {config.baseline.path}")

    return warnings
