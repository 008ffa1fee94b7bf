"""
Duration string parsing.

Durations are written as an integer followed by an optional unit suffix,
e.g. ``500``, ``250ms``, ``30s``, ``2m``, ``1h``. Values without a suffix
are milliseconds.
"""

import re
from typing import Dict, Optional

from ...exceptions.config_exceptions import (
    ConfigurationFormatError,
    ConfigurationValueError,
)

# Microseconds per unit.
TIME_SUFFIXES: Dict[str, int] = {
    "us": 1,
    "ms": 1000,
    "s": 1000 * 1000,
    "m": 60 * 1000 * 1000,
    "min": 60 * 1000 * 1000,
    "h": 60 * 60 * 1000 * 1000,
    "d": 24 * 60 * 60 * 1000 * 1000,
}

_TIME_PATTERN = re.compile(r"(-?[0-9]+)([a-z]+)?")

LONG_MIN = -(2 ** 63)
LONG_MAX = 2 ** 63 - 1


def get_time_as_ms(time: Optional[str]) -> int:
    """
    Convert a duration string to milliseconds.

    Args:
        time: Duration text such as ``"30s"`` or ``"2min"``

    Returns:
        Duration in milliseconds, capped at ``LONG_MAX``

    Raises:
        ConfigurationFormatError: If the text is blank, malformed, outside the
            signed 64-bit range or has an unknown unit suffix
        ConfigurationValueError: If the parsed value is negative
    """
    if time is None or not time.strip():
        raise ConfigurationFormatError(f"Invalid time string: {time}", time)

    match = _TIME_PATTERN.fullmatch(time.strip().lower())
    if match is None:
        raise ConfigurationFormatError(f"Invalid time string: {time}", time)

    value = int(match.group(1))
    if not LONG_MIN <= value <= LONG_MAX:
        raise ConfigurationFormatError(f"Invalid time string: {time}", time)
    suffix = match.group(2)

    if suffix is not None and suffix not in TIME_SUFFIXES:
        raise ConfigurationFormatError(f'Invalid suffix: "{suffix}"', time)

    if value < 0:
        raise ConfigurationValueError(f"Invalid value: {value}", value)

    if suffix is None:
        return value
    return min(value * TIME_SUFFIXES[suffix] // TIME_SUFFIXES["ms"], LONG_MAX)
