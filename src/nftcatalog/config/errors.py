"""Errors raised while assembling catalog configuration."""

from __future__ import annotations


class ConfigurationError(RuntimeError):
    """Base class for configuration problems detected at startup."""


class MissingConfigurationError(ConfigurationError):
    """A required environment variable is absent or blank."""


class UnknownLogLevelError(ConfigurationError):
    """A log level name does not match any ``logging`` level."""

    def __init__(self, level: str) -> None:
        super().__init__(f"Unknown log level: {level}")
        self.level = level
