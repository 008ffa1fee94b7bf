"""
File operations for configuration management.

Loads ``key=value`` properties files into plain dictionaries that can seed a
``ClientConf``. Files are parsed with python-dotenv; interpolation of
``${VAR}`` references is disabled so values are taken literally.
"""

import logging
from pathlib import Path
from typing import Dict, Union

from dotenv import dotenv_values

from ...exceptions.config_exceptions import (
    ConfigurationError,
    ConfigurationFileNotFoundError,
)


logger = logging.getLogger(__name__)


class FileOperations:
    """
    File operations for configuration management.

    Handles path resolution and properties file loading.
    """

    def __init__(self, project_root: Union[str, Path]) -> None:
        """
        Initialize file operations.

        Args:
            project_root: Directory relative paths are resolved against
        """
        self.project_root = Path(project_root)
        self.logger = logger

    def resolve_path(self, path: Union[str, Path]) -> Path:
        """
        Resolve a path relative to the project root.

        Args:
            path: Path to resolve (can be relative or absolute)

        Returns:
            Resolved absolute path
        """
        path_obj = Path(path)
        if path_obj.is_absolute():
            return path_obj
        return (self.project_root / path_obj).resolve()

    def load_properties(self, file_path: Union[str, Path]) -> Dict[str, str]:
        """
        Load and parse a properties file.

        Keys declared without a value are skipped.

        Args:
            file_path: Path to the properties file

        Returns:
            Mapping of keys to raw string values

        Raises:
            ConfigurationFileNotFoundError: If file doesn't exist
            ConfigurationError: If the file cannot be read
        """
        resolved_path = self.resolve_path(file_path)

        self.logger.debug(f"Attempting to load properties file: {resolved_path}")

        if not resolved_path.is_file():
            error_msg = f"Properties file not found: {resolved_path}"
            self.logger.error(error_msg)
            raise ConfigurationFileNotFoundError(error_msg, str(resolved_path))

        try:
            values = dotenv_values(resolved_path, interpolate=False, encoding='utf-8')
        except (OSError, UnicodeDecodeError) as e:
            error_msg = f"Error reading properties file {resolved_path}: {e}"
            self.logger.error(error_msg)
            raise ConfigurationError(error_msg, str(resolved_path)) from e

        properties = {key: value for key, value in values.items() if value is not None}
        self.logger.debug(f"Loaded {len(properties)} properties from {resolved_path}")
        return properties
