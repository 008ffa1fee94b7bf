"""Typed configuration package.

This package provides a string key/value configuration store with:
- Typed accessors validated against each entry's default value
- Deprecated key warnings and read fallback to old key names
- Duration parsing with unit suffixes
- Properties file loading

Usage:
    from typedconf.utils.config import ClientConf, ConfigEntry

    TIMEOUT = ConfigEntry("client.timeout", "30s")
    conf = ClientConf({"client.timeout": "2m"})
    conf.get_time_as_ms(TIMEOUT)
"""

from .entries import ConfEntry, ConfigEntry, DeprecatedConf, DeprecatedEntry
from .deprecation import DeprecationIndex
from .environment import TEST_MODE, EnvironmentHandler
from .file_operations import FileOperations
from .store import ClientConf
from .time_parser import TIME_SUFFIXES, get_time_as_ms

__all__ = [
    'ClientConf',
    'ConfEntry',
    'ConfigEntry',
    'DeprecatedConf',
    'DeprecatedEntry',
    'DeprecationIndex',
    'EnvironmentHandler',
    'FileOperations',
    'TEST_MODE',
    'TIME_SUFFIXES',
    'get_time_as_ms',
]
