"""Configuration loading utilities with JSON and YAML support."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

import yaml

from pathnice.core.config.models import AppConfig
from pathnice.core.utils import logging as logging_utils

logger = logging.getLogger(__name__)

# Environment variable naming the default config file
CONFIG_ENV_VAR = "PATHNICE_CONFIG"
_app_config_cache: AppConfig | None = None


def detect_format(file_path: Path | str) -> str:
    """Detect config file format from extension.

    Args:
        file_path: Path to config file

    Returns:
        Format string: "json" or "yaml"

    Raises:
        ValueError: If format cannot be determined

    Example:
        >>> detect_format("pathnice.json")
        'json'
        >>> detect_format("pathnice.yml")
        'yaml'
    """
    suffix = Path(file_path).suffix.lower()

    if suffix == ".json":
        return "json"
    elif suffix in [".yaml", ".yml"]:
        return "yaml"
    else:
        raise ValueError(f"Unsupported config format: {suffix}")


def load_config(path: str | Path) -> dict[str, Any]:
    """Load and return raw configuration dictionary.

    Args:
        path: Path to config file (.json, .yaml, or .yml)

    Returns:
        Raw configuration dictionary

    Raises:
        FileNotFoundError: If config file does not exist
        ValueError: If format is not supported or file content is invalid
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Config file does not exist: {path}")

    fmt = detect_format(path)
    text = path.read_text(encoding="utf-8")

    if fmt == "json":
        try:
            content = json.loads(text)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e
    else:
        try:
            content = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e
        # safe_load returns None for empty files
        if content is None:
            content = {}

    if not isinstance(content, dict):
        raise ValueError(f"Expected a mapping in {path}, got {type(content).__name__}")
    return content


def load_app_config(path: str | Path | None = None) -> AppConfig:
    """Load and validate library configuration.

    Without ``path`` the file named by ``PATHNICE_CONFIG`` is used, or the
    defaults when it is unset. That default configuration is cached.

    Raises:
        ValidationError: If config is invalid
    """
    global _app_config_cache

    if path is not None:
        return AppConfig.model_validate(load_config(path))

    if _app_config_cache is None:
        env_path = os.environ.get(CONFIG_ENV_VAR)
        if env_path:
            logger.debug(f"Loading config from {CONFIG_ENV_VAR}={env_path}")
            _app_config_cache = AppConfig.model_validate(load_config(env_path))
        else:
            _app_config_cache = AppConfig()
    return _app_config_cache


def reset_app_config_cache() -> None:
    """Forget the cached default configuration."""
    global _app_config_cache
    _app_config_cache = None


def configure_logging(config: AppConfig | None = None) -> None:
    """Configure Python logging from config.

    Args:
        config: AppConfig instance (loads default if None)
    """
    if config is None:
        config = load_app_config()

    logging_utils.configure_logging(
        level=config.logging.level,
        format_string=config.logging.format,
        structured=config.logging.structured,
    )
