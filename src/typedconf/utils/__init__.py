"""
Utilities package for typedconf.

This package contains the configuration store and the logging setup used
by the command line interface.
"""

from .config import ClientConf, ConfigEntry, DeprecatedEntry

__all__ = [
    "ClientConf",
    "ConfigEntry",
    "DeprecatedEntry",
]
