"""Configuration for path-nice."""

from pathnice.core.config.loader import (
    CONFIG_ENV_VAR,
    configure_logging,
    detect_format,
    load_app_config,
    load_config,
    reset_app_config_cache,
)
from pathnice.core.config.models import AppConfig, DefaultsConfig, LoggingConfig

__all__ = [
    "CONFIG_ENV_VAR",
    "AppConfig",
    "DefaultsConfig",
    "LoggingConfig",
    "configure_logging",
    "detect_format",
    "load_app_config",
    "load_config",
    "reset_app_config_cache",
]
