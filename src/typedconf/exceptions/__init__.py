"""
Exceptions package for typedconf.

This package contains the exception classes raised by the configuration
accessors and loaders.
"""

from .config_exceptions import (
    ConfigurationError,
    ConfigurationFileNotFoundError,
    ConfigurationTypeMismatchError,
    ConfigurationMissingDefaultError,
    ConfigurationFormatError,
    ConfigurationValueError,
)

__all__ = [
    "ConfigurationError",
    "ConfigurationFileNotFoundError",
    "ConfigurationTypeMismatchError",
    "ConfigurationMissingDefaultError",
    "ConfigurationFormatError",
    "ConfigurationValueError",
]
