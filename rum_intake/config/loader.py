"""Configuration loader for the intake registry with YAML support and environment overrides.

This module provides functionality to load RegistryConfig from YAML files
with support for environment-specific overrides, and to build a configured
IntakeRegistry from it.
"""

import os
import yaml
from pathlib import Path
from typing import Dict, Any, Optional, Union
import logging

from pydantic import BaseModel, Field, field_validator

from ..registry import IntakeRegistry, ReplayBridgePolicy


logger = logging.getLogger(__name__)

ENVIRONMENT_VARIABLE = "RUM_INTAKE_ENV"
DEFAULT_ENVIRONMENT = "test"
VALID_ENVIRONMENTS = {'production', 'staging', 'development', 'test'}
DEFAULT_CONFIG_PATH = Path(__file__).with_name("intake.yaml")


class ConfigLoadError(Exception):
    """Exception raised when configuration loading fails."""
    pass


class RegistryConfig(BaseModel):
    """Settings for an intake registry."""

    environment: str = Field(default=DEFAULT_ENVIRONMENT, description="Environment name")
    replay_bridge_policy: ReplayBridgePolicy = Field(
        default=ReplayBridgePolicy.ACCEPT,
        description="Handling of replay requests flagged as delivered over the bridge"
    )

    @field_validator('environment')
    @classmethod
    def validate_environment(cls, v):
        if v not in VALID_ENVIRONMENTS:
            raise ValueError(f"Environment must be one of: {VALID_ENVIRONMENTS}")
        return v


def load_registry_config(
    config_path: Optional[Union[str, Path]] = None,
    environment: Optional[str] = None,
    overrides: Optional[Dict[str, Any]] = None
) -> RegistryConfig:
    """Load RegistryConfig from YAML file with environment overrides.

    Args:
        config_path: Path to YAML config file. If None, uses the intake.yaml
            shipped with this package.
        environment: Environment name for override selection. If None, uses ENV var.
        overrides: Additional configuration overrides to apply.

    Returns:
        Configured RegistryConfig instance.

    Raises:
        ConfigLoadError: If configuration loading or validation fails.
    """
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH
    else:
        config_path = Path(config_path)

    if not config_path.exists():
        raise ConfigLoadError(f"Config file not found: {config_path}")

    try:
        with open(config_path, 'r') as f:
            config_data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigLoadError(f"Failed to parse YAML config: {e}")
    except IOError as e:
        raise ConfigLoadError(f"Failed to read config file: {e}")

    if config_data is None:
        config_data = {}
    if not isinstance(config_data, dict):
        raise ConfigLoadError("Config file must contain a YAML dictionary")

    if environment is None:
        environment = os.getenv(ENVIRONMENT_VARIABLE, DEFAULT_ENVIRONMENT)

    environments = config_data.pop("environments", None) or {}
    if not isinstance(environments, dict):
        raise ConfigLoadError("'environments' must be a YAML dictionary keyed by environment name")

    env_overrides = environments.get(environment) or {}
    if not isinstance(env_overrides, dict):
        raise ConfigLoadError(f"Overrides for environment '{environment}' must be a YAML dictionary")
    if env_overrides:
        config_data = _deep_merge(config_data, env_overrides)
        logger.info(f"Applied environment overrides for: {environment}")
    config_data["environment"] = environment

    if overrides:
        if not isinstance(overrides, dict):
            raise ConfigLoadError("Configuration overrides must be a dictionary")
        config_data = _deep_merge(config_data, overrides)
        logger.debug("Applied additional configuration overrides")

    try:
        return RegistryConfig(**config_data)
    except Exception as e:
        raise ConfigLoadError(f"Failed to create RegistryConfig: {e}")


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Deep merge two dictionaries, with override taking precedence."""
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def create_registry(config: Optional[RegistryConfig] = None) -> IntakeRegistry:
    """Create an intake registry from configuration.

    Args:
        config: Registry settings. Defaults to RegistryConfig() when omitted.

    Returns:
        Empty IntakeRegistry configured with the given settings
    """
    if config is None:
        config = RegistryConfig()
    return IntakeRegistry(replay_bridge_policy=config.replay_bridge_policy)
