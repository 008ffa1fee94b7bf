"""
Deprecated configuration key handling.

Two tables describe deprecations:

- configs with alternatives: canonical key -> ``DeprecatedConf`` naming the
  old key that used to hold the same setting
- deprecated configs: deprecated key -> ``DeprecatedConf`` for keys that are
  going away without a replacement

The reverse view of the first table (old key -> canonical key) is derived
lazily the first time a warning check needs it and never changes afterwards.
"""

import logging
import threading
from types import MappingProxyType
from typing import Callable, Mapping, NamedTuple, Optional

from .entries import DeprecatedConf


logger = logging.getLogger(__name__)

DeprecationTable = Mapping[str, DeprecatedConf]


class ConfPair(NamedTuple):
    """Canonical key paired with the deprecation record of its old key."""
    new_key: str
    dep_conf: DeprecatedConf


class DeprecationIndex:
    """
    Lookup structure for deprecated keys.

    The table sources are zero-argument callables so that a configuration
    class can hand over bound accessor methods; they must return the same
    content for the lifetime of the index.
    """

    def __init__(
        self,
        configs_with_alternatives: Callable[[], DeprecationTable],
        deprecated_configs: Callable[[], DeprecationTable],
    ) -> None:
        self._configs_with_alternatives = configs_with_alternatives
        self._deprecated_configs = deprecated_configs
        self._lock = threading.Lock()
        self._alt_to_new_key: Optional[Mapping[str, ConfPair]] = None

    def alternative_keys(self) -> Mapping[str, ConfPair]:
        """Return the read-only map from old key to its canonical replacement."""
        alt_keys = self._alt_to_new_key
        if alt_keys is None:
            with self._lock:
                alt_keys = self._alt_to_new_key
                if alt_keys is None:
                    alt_keys = self._build_alternative_keys()
                    self._alt_to_new_key = alt_keys
        return alt_keys

    def _build_alternative_keys(self) -> Mapping[str, ConfPair]:
        configs = {}
        for new_key, dep_conf in self._configs_with_alternatives().items():
            configs[dep_conf.key] = ConfPair(new_key, dep_conf)
        logger.debug(f"Built deprecation index with {len(configs)} alternative keys")
        return MappingProxyType(configs)

    def alternative_for(self, key: str) -> Optional[DeprecatedConf]:
        """Return the deprecation record of the old key aliased to canonical ``key``."""
        return self._configs_with_alternatives().get(key)

    def deprecation_warning(self, key: str) -> Optional[str]:
        """
        Build the warning text for writing ``key``.

        Args:
            key: Configuration key being written

        Returns:
            Warning message, or None if the key is not deprecated
        """
        alt_conf = self.alternative_keys().get(key)
        if alt_conf is not None:
            return (
                f"The configuration key {key} has been deprecated as of "
                f"{alt_conf.dep_conf.version} and may be removed in the future. "
                f"Please use the new key {alt_conf.new_key} instead."
            )

        dep_conf = self._deprecated_configs().get(key)
        if dep_conf is not None:
            return (
                f"The configuration key {dep_conf.key} has been deprecated as of "
                f"{dep_conf.version} and may be removed in the future. "
                f"{dep_conf.deprecation_message}"
            )

        return None

    def log_deprecation_warning(self, key: str) -> bool:
        """Log a warning if ``key`` is deprecated. Returns whether one was logged."""
        message = self.deprecation_warning(key)
        if message is None:
            return False
        logger.warning(message)
        return True
