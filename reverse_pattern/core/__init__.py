"""Core configuration, errors and logging."""

from reverse_pattern.core.config import Settings, get_settings
from reverse_pattern.core.errors import (
    ConfigurationError,
    RandomSourceError,
    ReversePatternError,
)
from reverse_pattern.core.logs import configure_logging

__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Errors
    "ReversePatternError",
    "ConfigurationError",
    "RandomSourceError",
    # Logging
    "configure_logging",
]
