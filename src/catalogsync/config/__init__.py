"""Application configuration helpers."""

from __future__ import annotations

from .env import optional_env_var, require_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError, UnknownProviderError
from .http import HttpSourceConfig
from .logging import configure_logging
from .providers import PROVIDER_PROFILES, ProviderProfile, get_provider_profile
from .storage import StorageConfig, get_storage_config

__all__ = [
    "PROVIDER_PROFILES",
    "ConfigurationError",
    "HttpSourceConfig",
    "MissingConfigurationError",
    "ProviderProfile",
    "StorageConfig",
    "UnknownProviderError",
    "configure_logging",
    "get_provider_profile",
    "get_storage_config",
    "optional_env_var",
    "require_env_var",
    "require_env_vars",
]
