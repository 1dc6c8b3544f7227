"""Configuration management for the intake registry."""

from .loader import (
    DEFAULT_CONFIG_PATH,
    ConfigLoadError,
    RegistryConfig,
    create_registry,
    load_registry_config,
)

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "ConfigLoadError",
    "RegistryConfig",
    "create_registry",
    "load_registry_config",
]
