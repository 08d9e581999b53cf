# Configuration package

from package_builder.core.config.app_config import (
    AppConfig,
    ConsoleConfig,
    LoggingConfig,
    LogLevel,
    load_config,
)

__all__ = [
    "AppConfig",
    "ConsoleConfig",
    "LogLevel",
    "LoggingConfig",
    "load_config",
]
