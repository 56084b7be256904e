"""Configuration error definitions."""

from __future__ import annotations


class ConfigurationError(RuntimeError):
    """Raised when configuration values are invalid."""


class MissingConfigurationError(ConfigurationError):
    """Raised when required configuration values are absent or blank."""


class UnknownProviderError(ConfigurationError):
    """Raised when a provider id has no registered profile."""

    def __init__(self, provider_id: str, *, known: tuple[str, ...] = ()) -> None:
        message = f"Unknown provider: {provider_id}"
        if known:
            message = f"{message} (known: {', '.join(known)})"
        super().__init__(message)
        self.provider_id = provider_id
