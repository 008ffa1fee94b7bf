"""
Configuration entry descriptors.

A ``ConfEntry`` names a key and carries a default value whose runtime type
(``bool``, ``int`` or ``str``; ``None`` counts as ``str``) is the type every
typed read and write of that key must use. A ``DeprecatedConf`` describes a
key scheduled for removal.

Applications normally declare their entries as module-level constants:

    TIMEOUT = ConfigEntry("client.timeout", "30s")
    RETRIES = ConfigEntry("client.retries", 3)
"""

from dataclasses import dataclass
from typing import Any, Optional, Protocol, Union, runtime_checkable


DefaultValue = Union[bool, int, str, None]

SUPPORTED_TYPES = (bool, int, str)


@runtime_checkable
class ConfEntry(Protocol):
    """A configuration key together with its typed default."""

    @property
    def key(self) -> str:
        """The key in the configuration file."""
        ...

    @property
    def default(self) -> DefaultValue:
        """The default value, which also defines the type of the entry."""
        ...


@runtime_checkable
class DeprecatedConf(Protocol):
    """A configuration key that has been deprecated."""

    @property
    def key(self) -> str:
        ...

    @property
    def version(self) -> str:
        """The version in which the key was deprecated."""
        ...

    @property
    def deprecation_message(self) -> str:
        """Message included in the warning for keys without alternatives."""
        ...


@dataclass(frozen=True)
class ConfigEntry:
    """Plain ``ConfEntry`` implementation."""
    key: str
    default: DefaultValue = None

    def __post_init__(self) -> None:
        if self.default is not None and not isinstance(self.default, SUPPORTED_TYPES):
            raise TypeError(
                f"Unsupported default type {type(self.default).__name__} for {self.key}"
            )


@dataclass(frozen=True)
class DeprecatedEntry:
    """Plain ``DeprecatedConf`` implementation."""
    key: str
    version: str
    deprecation_message: str = ""


def value_type(value: Any) -> type:
    """Return the configuration type of a value, classifying ``None`` as ``str``."""
    if value is None:
        return str
    # bool is a subclass of int
    if isinstance(value, bool):
        return bool
    if isinstance(value, int):
        return int
    if isinstance(value, str):
        return str
    return type(value)


def types_match(value: Any, expected: Optional[Any]) -> bool:
    """Check whether ``value`` may be stored under an entry defaulting to ``expected``."""
    return value is None or value_type(value) is value_type(expected)
