"""
Type-safe configuration store.

``ClientConf`` keeps raw string key/value pairs and exposes typed accessors
validated against the default value of a ``ConfEntry``. Writes of deprecated
keys log a warning, and reads of a canonical key fall back to the value of
its deprecated alternative when the canonical key was never set.

Usage:
    conf = ClientConf({"client.timeout": "2m"})
    conf.get_time_as_ms(ConfigEntry("client.timeout", "30s"))  # 120000
"""

import logging
import re
import threading
from pathlib import Path
from typing import Any, Dict, Iterator, Mapping, Optional, Tuple, TypeVar, Union

from ...exceptions.config_exceptions import (
    ConfigurationFormatError,
    ConfigurationMissingDefaultError,
    ConfigurationTypeMismatchError,
    ConfigurationValueError,
)
from .deprecation import DeprecationIndex, DeprecationTable
from .entries import ConfEntry, types_match, value_type
from .environment import TEST_MODE
from .file_operations import FileOperations
from .time_parser import get_time_as_ms as parse_time_as_ms


logger = logging.getLogger(__name__)

T = TypeVar("T", bound="ClientConf")

INT_RANGE = (-(2 ** 31), 2 ** 31 - 1)
LONG_RANGE = (-(2 ** 63), 2 ** 63 - 1)

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


class ClientConf:
    """
    Base class for type-safe configuration objects.

    Deprecation tables can be passed to the constructor or supplied by a
    subclass overriding ``get_configs_with_alternatives`` and
    ``get_deprecated_configs``. Either way they must not change for the
    lifetime of the instance.
    """

    TEST_MODE = TEST_MODE

    def __init__(
        self,
        properties: Optional[Mapping[Any, Any]] = None,
        configs_with_alternatives: Optional[DeprecationTable] = None,
        deprecated_configs: Optional[DeprecationTable] = None,
    ) -> None:
        """
        Initialize the store.

        Args:
            properties: Initial raw key/value pairs; pairs whose key or value
                is not a string are ignored
            configs_with_alternatives: Canonical key -> deprecation record of
                its old alternative key
            deprecated_configs: Deprecated key -> its deprecation record
        """
        self._config: Dict[str, str] = {}
        self._lock = threading.Lock()
        self._configs_with_alternatives = dict(configs_with_alternatives or {})
        self._deprecated_configs = dict(deprecated_configs or {})
        self._deprecation = DeprecationIndex(
            self.get_configs_with_alternatives,
            self.get_deprecated_configs,
        )

        if properties is not None:
            for key, value in properties.items():
                if isinstance(key, str) and isinstance(value, str):
                    self._deprecation.log_deprecation_warning(key)
                    self._config[key] = value
            logger.debug(f"Seeded configuration with {len(self._config)} entries")

    @classmethod
    def from_file(cls, path: Union[str, Path], **kwargs: Any) -> "ClientConf":
        """
        Create a configuration seeded from a ``key=value`` properties file.

        Args:
            path: Properties file to read
            **kwargs: Remaining constructor arguments

        Raises:
            ConfigurationFileNotFoundError: If the file does not exist
        """
        properties = FileOperations(Path.cwd()).load_properties(path)
        return cls(properties, **kwargs)

    def get_configs_with_alternatives(self) -> DeprecationTable:
        """Return a map from a valid key to the DeprecatedConf of its old key."""
        return self._configs_with_alternatives

    def get_deprecated_configs(self) -> DeprecationTable:
        """Return a map from a deprecated key to its DeprecatedConf."""
        return self._deprecated_configs

    # Raw access

    def get(self, key: Union[str, ConfEntry]) -> Optional[str]:
        """
        Get a raw value by key, or the string value of an entry.

        For a string key, returns the stored value; if absent and the key has a
        deprecated alternative, the alternative's value is returned instead.
        For an entry, see ``get_string``.
        """
        if not isinstance(key, str):
            return self.get_string(key)

        value = self._config.get(key)
        if value is not None:
            return value
        dep_conf = self._deprecation.alternative_for(key)
        if dep_conf is not None:
            return self._config.get(dep_conf.key)
        return None

    def set(self: T, key: Union[str, ConfEntry], value: Any) -> T:
        """
        Store a value, overwriting any previous one.

        With a string key the value must be a string. With an entry the value
        must match the entry's type; ``None`` removes the key.

        Raises:
            ConfigurationTypeMismatchError: If the value has the wrong type
        """
        if not isinstance(key, str):
            return self._set_entry(key, value)

        if not isinstance(value, str):
            raise ConfigurationTypeMismatchError(
                f"Raw value for {key} must be a string.",
                key, str, value_type(value)
            )
        self._deprecation.log_deprecation_warning(key)
        with self._lock:
            self._config[key] = value
        return self

    def set_if_missing(self: T, key: str, value: str) -> T:
        """Store ``value`` only if ``key`` has no value yet."""
        if not isinstance(value, str):
            raise ConfigurationTypeMismatchError(
                f"Raw value for {key} must be a string.",
                key, str, value_type(value)
            )
        with self._lock:
            if key in self._config:
                return self
            self._config[key] = value
        self._deprecation.log_deprecation_warning(key)
        return self

    def set_all(self: T, other: "ClientConf") -> T:
        """Copy every key/value pair of ``other`` into this configuration."""
        for key, value in other:
            self.set(key, value)
        return self

    def remove(self: T, key: str) -> T:
        """Remove ``key`` if present."""
        with self._lock:
            self._config.pop(key, None)
        return self

    # Typed access

    def get_string(self, entry: ConfEntry) -> Optional[str]:
        """Return the value of a string entry, falling back to its default."""
        value = self._get_typed(entry, str)
        return value if value is not None else entry.default

    def get_boolean(self, entry: ConfEntry) -> bool:
        """Return the value of a boolean entry; only "true" (any case) is True."""
        value = self._get_typed(entry, bool)
        if value is not None:
            return value.lower() == "true"
        return entry.default

    def get_int(self, entry: ConfEntry) -> int:
        """Return the value of an integer entry as a signed 32-bit number."""
        value = self._get_typed(entry, int)
        if value is not None:
            return self._parse_integer(entry.key, value, INT_RANGE)
        return entry.default

    def get_long(self, entry: ConfEntry) -> int:
        """Return the value of an integer entry as a signed 64-bit number."""
        value = self._get_typed(entry, int)
        if value is not None:
            return self._parse_integer(entry.key, value, LONG_RANGE)
        return entry.default

    def get_time_as_ms(self, entry: ConfEntry) -> int:
        """
        Return the value of a duration entry in milliseconds.

        Raises:
            ConfigurationMissingDefaultError: If the entry has no value and no default
            ConfigurationFormatError: If the duration text is malformed
            ConfigurationValueError: If the duration is negative
        """
        time = self._get_typed(entry, str)
        if time is None:
            if entry.default is None:
                raise ConfigurationMissingDefaultError(
                    f"ConfEntry {entry.key} doesn't have a default value, "
                    f"cannot convert to time value.",
                    entry.key
                )
            time = entry.default
        return parse_time_as_ms(time)

    get_duration_ms = get_time_as_ms

    # Iteration

    def iterate(self) -> Iterator[Tuple[str, str]]:
        """
        Iterate over the (key, value) pairs.

        The pairs are copied under the store lock when iteration starts, so
        writes made while iterating are not seen. Iterating the live dict
        would raise RuntimeError under concurrent writers.
        """
        with self._lock:
            items = list(self._config.items())
        return iter(items)

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        return self.iterate()

    def __contains__(self, key: object) -> bool:
        return key in self._config

    def __len__(self) -> int:
        return len(self._config)

    def to_dict(self) -> Dict[str, str]:
        """Return a detached copy of the raw key/value pairs."""
        return dict(self.iterate())

    # Internals

    def _set_entry(self: T, entry: ConfEntry, value: Any) -> T:
        if not types_match(value, entry.default):
            raise ConfigurationTypeMismatchError(
                f"Value doesn't match configuration entry type for {entry.key}.",
                entry.key, value_type(entry.default), value_type(value)
            )
        if value is None:
            return self.remove(entry.key)

        self._deprecation.log_deprecation_warning(entry.key)
        with self._lock:
            self._config[entry.key] = self._to_raw(value)
        return self

    def _get_typed(self, entry: ConfEntry, requested_type: type) -> Optional[str]:
        declared_type = value_type(entry.default)
        if declared_type is not requested_type:
            raise ConfigurationTypeMismatchError(
                f"Invalid type conversion requested for {entry.key}.",
                entry.key, declared_type, requested_type
            )
        return self.get(entry.key)

    @staticmethod
    def _to_raw(value: Any) -> str:
        if isinstance(value, bool):
            return "true" if value else "false"
        return str(value)

    @staticmethod
    def _parse_integer(key: str, value: str, bounds: Tuple[int, int]) -> int:
        if not _INTEGER_PATTERN.fullmatch(value):
            raise ConfigurationFormatError(
                f"Invalid integer value for {key}: {value}", value
            )
        number = int(value)
        low, high = bounds
        if not low <= number <= high:
            raise ConfigurationValueError(
                f"Value for {key} out of range [{low}, {high}]: {value}", number
            )
        return number
