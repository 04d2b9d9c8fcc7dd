"""Configuration exceptions: unreadable or invalid ownership rules."""

from pathlib import Path
from typing import Any

from .base import CodeownError


class ConfigurationError(CodeownError):
    """Base class for configuration-related errors."""

    pass


class ConfigLoadError(ConfigurationError):
    """Raised when a configuration file exists but cannot be loaded.

    Always fatal: the run aborts before any history is analyzed.
    """

    def __init__(self, path: Path, reason: str):
        super().__init__(
            f"Cannot load configuration: {path}",
            details={"path": str(path), "reason": reason},
        )
        self.path = path
        self.reason = reason


class InvalidConfigError(ConfigurationError):
    """Raised when a configuration value has the wrong type or range."""

    def __init__(self, key: str, value: Any, reason: str):
        super().__init__(
            f"Invalid configuration for {key}: {value!r}",
            details={"key": key, "reason": reason},
        )
        self.key = key
        self.value = value
        self.reason = reason
