from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from enum import Enum
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv
from pydantic import ConfigDict, Field, ValidationError, field_validator

from package_builder.core.common.exceptions import ConfigurationError
from package_builder.core.interfaces.model_bases import DomainModel

logger = logging.getLogger(__name__)

ENV_PREFIX = "PACKAGE_BUILDER_"
CONFIG_PATH_ENV = f"{ENV_PREFIX}CONFIG"


def _env_to_int(name: str, default: int, env: Mapping[str, str]) -> int:
    """Return an environment variable parsed as an integer."""
    value = env.get(name)
    if value is None:
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        logger.warning("Ignoring non-integer value %r for %s", value, name)
        return default


def _merge_dicts(d1: dict[str, Any], d2: dict[str, Any]) -> dict[str, Any]:
    for k, v in d2.items():
        if k in d1 and isinstance(d1[k], dict) and isinstance(v, dict):
            _merge_dicts(d1[k], v)
        else:
            d1[k] = v
    return d1


class LogLevel(str, Enum):
    """Log levels for configuration."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    def to_logging_level(self) -> int:
        return int(logging.getLevelName(self.value))


class LoggingConfig(DomainModel):
    """Logging configuration."""

    model_config = ConfigDict(frozen=True)

    level: LogLevel = LogLevel.WARNING
    log_file: str | None = None

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().upper()
        return value


class ConsoleConfig(DomainModel):
    """Console layout used by the help and summary output."""

    model_config = ConfigDict(frozen=True)

    tool_name: str = "package-builder"
    width: int = Field(default=80, ge=20)
    indent: int = Field(default=2, ge=0)
    column_spacing: int = Field(default=4, ge=1)


class AppConfig(DomainModel):
    """Top-level application configuration."""

    model_config = ConfigDict(frozen=True)

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    console: ConsoleConfig = Field(default_factory=ConsoleConfig)

    @classmethod
    def env_overrides(cls, environ: Mapping[str, str]) -> dict[str, Any]:
        """Collect configuration values supplied through environment variables."""
        overrides: dict[str, Any] = {}

        level = environ.get(f"{ENV_PREFIX}LOG_LEVEL")
        if level:
            overrides.setdefault("logging", {})["level"] = level

        log_file = environ.get(f"{ENV_PREFIX}LOG_FILE")
        if log_file:
            overrides.setdefault("logging", {})["log_file"] = log_file

        if f"{ENV_PREFIX}CONSOLE_WIDTH" in environ:
            default_width = ConsoleConfig().width
            overrides.setdefault("console", {})["width"] = _env_to_int(
                f"{ENV_PREFIX}CONSOLE_WIDTH", default_width, environ
            )

        return overrides


def _load_config_file(path: Path) -> dict[str, Any]:
    """Load a YAML configuration file.

    Raises:
        ConfigurationError: If the file is missing, not YAML or malformed
    """
    if not path.exists():
        raise ConfigurationError(
            message="Configuration file not found", details={"path": str(path)}
        )
    if path.suffix.lower() not in (".yaml", ".yml"):
        raise ConfigurationError(
            message=f"Unsupported configuration file format: {path.suffix}. Use YAML (.yaml/.yml).",
            details={"path": str(path)},
        )

    try:
        with path.open(encoding="utf-8") as f:
            file_config = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        mark = getattr(e, "problem_mark", None)
        location = f" at line {mark.line + 1}, column {mark.column + 1}" if mark else ""
        raise ConfigurationError(
            message="Invalid YAML syntax",
            details={"path": str(path), "hint": f"YAML syntax error{location}"},
        ) from e

    if not isinstance(file_config, dict):
        raise ConfigurationError(
            message="Invalid configuration file format",
            details={"path": str(path), "hint": "Top-level must be a mapping"},
        )
    return file_config


def load_config(
    config_path: str | Path | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> AppConfig:
    """
    Load configuration from file and environment.

    Precedence (lowest to highest): defaults, YAML file, environment.

    Args:
        config_path: Optional path to configuration file. Falls back to the
            ``PACKAGE_BUILDER_CONFIG`` environment variable.
        environ: Environment mapping; ``os.environ`` (after loading ``.env``)
            when omitted.

    Returns:
        AppConfig instance
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    config_data: dict[str, Any] = AppConfig().model_dump(mode="json")

    path_value = config_path or environ.get(CONFIG_PATH_ENV)
    if path_value:
        file_config = _load_config_file(Path(path_value))
        _merge_dicts(config_data, file_config)
        logger.debug("Loaded configuration file %s", path_value)

    _merge_dicts(config_data, AppConfig.env_overrides(environ))

    try:
        return AppConfig.model_validate(config_data)
    except ValidationError as exc:
        raise ConfigurationError(
            message="Invalid configuration",
            details={"errors": exc.errors(include_url=False)},
        ) from exc
