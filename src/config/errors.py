"""Exceptions raised while resolving the player configuration."""

from pathlib import Path
from typing import Optional


class ConfigError(Exception):
    """Base exception for configuration resolution errors."""

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.path = path


class IoFailure(ConfigError):
    """Raised when a directory or file cannot be created, read, or written."""

    pass


class EncodeFailure(ConfigError):
    """Raised when the default configuration cannot be serialized."""

    pass


class DecodeFailure(ConfigError):
    """Raised when an existing config file has invalid syntax or field types."""

    pass
