"""
Environment variable handling for configuration management.

The process-wide test mode flag is read once, when this module is first
imported, from the ``TYPEDCONF_TEST`` environment variable. Consumers branch
on it to relax timeouts and similar limits in test runs.
"""

import logging
import os
from typing import Any, Optional

from ...exceptions.config_exceptions import ConfigurationError


logger = logging.getLogger(__name__)

TEST_MODE_ENV_VAR = "TYPEDCONF_TEST"


def parse_boolean(value: Optional[str]) -> bool:
    """Parse a boolean the classic way: only "true", in any case, is True."""
    return value is not None and value.lower() == "true"


TEST_MODE: bool = parse_boolean(os.getenv(TEST_MODE_ENV_VAR))


class EnvironmentHandler:
    """
    Environment variable lookup and string conversion helpers.
    """

    def __init__(self) -> None:
        self.logger = logger

    def convert_env_value(self, value: str, target_type: str = 'string') -> Any:
        """
        Convert environment variable string to appropriate Python type.

        Args:
            value: Environment variable value (always string)
            target_type: Target type ('string', 'boolean', 'integer')

        Returns:
            Converted value

        Raises:
            ConfigurationError: If conversion fails
        """
        if not value:
            return None

        try:
            if target_type == 'boolean':
                return value.lower() in ('true', '1', 'yes', 'on', 'enabled')
            elif target_type == 'integer':
                return int(value)
            elif target_type == 'string':
                return value
            else:
                raise ConfigurationError(f"Unsupported target type: {target_type}")
        except ValueError as e:
            raise ConfigurationError(
                f"Failed to convert environment variable value '{value}' to {target_type}: {e}"
            ) from e

    def get_env_var(
        self,
        var_name: str,
        default: Any = None,
        target_type: str = 'string'
    ) -> Any:
        """
        Get an environment variable converted to ``target_type``.

        Args:
            var_name: Environment variable name
            default: Value returned when the variable is unset
            target_type: Target type ('string', 'boolean', 'integer')

        Returns:
            Converted value or default
        """
        value = os.getenv(var_name)
        if value is None:
            return default
        self.logger.debug(f"Read environment variable {var_name}")
        return self.convert_env_value(value, target_type)
