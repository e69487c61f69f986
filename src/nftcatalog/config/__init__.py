"""Application configuration helpers."""

from __future__ import annotations

from .catalog import CatalogConfig, get_catalog_config
from .env import optional_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError, UnknownLogLevelError
from .logging import configure_logging, resolve_log_level

__all__ = [
    "CatalogConfig",
    "ConfigurationError",
    "MissingConfigurationError",
    "UnknownLogLevelError",
    "configure_logging",
    "get_catalog_config",
    "optional_env_var",
    "require_env_vars",
    "resolve_log_level",
]
