#!/usr/bin/env python3
"""Configuration loader with environment-based config support."""

import os
import re
from pathlib import Path
from typing import Any

import yaml

from layered_i18n.core.config_schema import config_to_dict, validate_config
from layered_i18n.core.logging_utils import setup_logger
from layered_i18n.core.merge import merge_pair

logger = setup_logger(__name__)

ENV_VAR = "LAYERED_I18N_ENV"


def load_config(config_path: str | Path = "config/base.yaml") -> dict[str, Any]:
    """Load configuration from YAML files with environment-based overrides.

    Loads the base config and deep-merges the environment-specific config
    from ``envs/{LAYERED_I18N_ENV}.yaml`` next to it (default: dev).

    Args:
        config_path: Path to base config file (default: config/base.yaml)

    Returns:
        Configuration dictionary with environment overrides applied

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If config file is invalid YAML
        pydantic.ValidationError: If the merged config is invalid

    Environment Variables:
        LAYERED_I18N_ENV: Environment name (default: dev)
        STRICT_CONFIG: Set to 0 to skip schema validation
    """
    env = os.getenv(ENV_VAR, "dev")

    config_file = Path(config_path)
    if not config_file.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    config = _read_yaml(config_file)

    env_config_path = config_file.parent / "envs" / f"{env}.yaml"
    if env_config_path.exists():
        logger.info(f"Loading {env} environment config")
        env_config = _read_yaml(env_config_path)
        if env_config:
            config = merge_pair(config, env_config)
    else:
        logger.debug(f"No environment config found for '{env}' (expected: {env_config_path})")

    config = _expand_env_vars(config)

    if os.getenv("STRICT_CONFIG", "1") != "0":
        try:
            config = config_to_dict(validate_config(config))
        except Exception as e:
            logger.error(f"Config validation failed: {e}")
            raise

    return config


def _read_yaml(path: Path) -> dict[str, Any]:
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    return data or {}


def _expand_env_vars(obj: Any) -> Any:
    """Recursively expand ${VAR} environment variables in config.

    Args:
        obj: Config object (dict, list, str, or other)

    Returns:
        Object with environment variables expanded
    """
    if isinstance(obj, dict):
        return {k: _expand_env_vars(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [_expand_env_vars(item) for item in obj]
    elif isinstance(obj, str):

        def replace_env(match):
            var_name = match.group(1) or match.group(2)
            return os.getenv(var_name, match.group(0))  # Keep original if not found

        return re.sub(r"\$\{([^}]+)\}|\$([A-Z_][A-Z0-9_]*)", replace_env, obj)
    else:
        return obj


def get_nested(config: dict, path: str, default: Any = None) -> Any:
    """Get nested config value using dot notation.

    Args:
        config: Configuration dictionary
        path: Dot-separated path (e.g., 'logging.level')
        default: Default value if path not found

    Returns:
        Config value or default

    Examples:
        >>> config = {'logging': {'level': 'INFO'}}
        >>> get_nested(config, 'logging.level')
        'INFO'
        >>> get_nested(config, 'logging.file', default='i18n.log')
        'i18n.log'
    """
    value = config
    for key in path.split("."):
        if isinstance(value, dict) and key in value:
            value = value[key]
        else:
            return default
    return value
