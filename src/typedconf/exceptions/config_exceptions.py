"""
Configuration-related exceptions for typedconf.

Custom exception classes raised by the typed configuration accessors,
the duration parser and the properties file loader. Every error is a
synchronous validation failure and is raised before the store is mutated.
"""

from typing import List, Optional


class ConfigurationError(Exception):
    """Base exception for configuration-related errors."""

    def __init__(
        self,
        message: str,
        config_file: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ) -> None:
        """
        Initialize configuration error.

        Args:
            message: Error description
            config_file: Configuration file path that caused the error
            suggestions: List of suggested fixes
        """
        super().__init__(message)
        self.config_file = config_file
        self.suggestions = suggestions or []

    def __str__(self) -> str:
        """Return formatted error message with suggestions."""
        msg = super().__str__()

        if self.config_file:
            msg = f"{msg}\nConfig file: {self.config_file}"

        if self.suggestions:
            msg += "\n\nSuggestions:"
            for i, suggestion in enumerate(self.suggestions, 1):
                msg += f"\n  {i}. {suggestion}"

        return msg


class ConfigurationFileNotFoundError(ConfigurationError):
    """Exception raised when a properties file is not found."""

    def __init__(
        self,
        message: str,
        config_file: Optional[str] = None
    ) -> None:
        suggestions = [
            "Check if the properties file exists at the specified path",
            "Verify file permissions allow reading",
        ]
        super().__init__(message, config_file, suggestions)


class ConfigurationTypeMismatchError(ConfigurationError):
    """
    Exception raised when a typed accessor or setter disagrees with the
    type declared by the entry's default value.
    """

    def __init__(
        self,
        message: str,
        key: Optional[str] = None,
        expected_type: Optional[type] = None,
        actual_type: Optional[type] = None
    ) -> None:
        """
        Initialize type mismatch error.

        Args:
            message: Error description
            key: Configuration key being accessed
            expected_type: Type declared by the entry's default value
            actual_type: Type that was requested or supplied
        """
        suggestions = []
        if expected_type is not None:
            suggestions.append(
                f"Use the accessor matching the declared type ({expected_type.__name__})"
            )
        super().__init__(message, None, suggestions)
        self.key = key
        self.expected_type = expected_type
        self.actual_type = actual_type


class ConfigurationMissingDefaultError(ConfigurationError):
    """Exception raised when a duration entry has neither a value nor a default."""

    def __init__(self, message: str, key: Optional[str] = None) -> None:
        suggestions = []
        if key:
            suggestions.append(f"Set {key} explicitly or declare a default duration")
        super().__init__(message, None, suggestions)
        self.key = key


class ConfigurationFormatError(ConfigurationError):
    """Exception raised when a value does not match the expected syntax."""

    def __init__(self, message: str, value: Optional[str] = None) -> None:
        """
        Initialize format error.

        Args:
            message: Error description
            value: The offending raw text
        """
        super().__init__(message)
        self.value = value


class ConfigurationValueError(ConfigurationError):
    """Exception raised when a value is well-formed but out of range."""

    def __init__(self, message: str, value: Optional[object] = None) -> None:
        super().__init__(message)
        self.value = value
