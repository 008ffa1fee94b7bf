"""
Unit tests for properties file loading and environment handling.
"""

import importlib
import os
from pathlib import Path
from unittest.mock import patch

import pytest

from typedconf.utils.config import ClientConf, ConfigEntry, DeprecatedEntry
from typedconf.utils.config import environment
from typedconf.utils.config.environment import EnvironmentHandler, parse_boolean
from typedconf.utils.config.file_operations import FileOperations
from typedconf.exceptions.config_exceptions import (
    ConfigurationError,
    ConfigurationFileNotFoundError,
)


class TestFileOperations:
    """Test FileOperations path handling and loading."""

    def test_resolve_relative_path(self, tmp_path):
        """Test relative paths resolve against the project root."""
        file_ops = FileOperations(tmp_path)
        assert file_ops.resolve_path("conf/a.properties") == (
            tmp_path / "conf" / "a.properties"
        ).resolve()

    def test_resolve_absolute_path(self, tmp_path):
        """Test absolute paths are returned unchanged."""
        absolute = tmp_path / "a.properties"
        assert FileOperations(Path("/elsewhere")).resolve_path(absolute) == absolute

    def test_load_properties(self, tmp_path, properties_file):
        """Test loading key=value pairs with comments."""
        properties = FileOperations(tmp_path).load_properties(properties_file.name)
        assert properties == {
            "client.name": "reporting",
            "client.pool.size": "8",
            "timeout": "2m",
            "client.proxy": "http://proxy:${PORT}",
        }

    def test_keys_without_value_are_skipped(self, tmp_path):
        """Test bare keys do not produce entries."""
        path = tmp_path / "bare.properties"
        path.write_text("client.flag\nclient.name=svc\n")
        assert FileOperations(tmp_path).load_properties(path) == {"client.name": "svc"}

    def test_missing_file(self, tmp_path):
        """Test a missing file raises ConfigurationFileNotFoundError."""
        with pytest.raises(ConfigurationFileNotFoundError) as exc_info:
            FileOperations(tmp_path).load_properties("absent.properties")
        assert exc_info.value.config_file.endswith("absent.properties")

    def test_directory_is_not_a_file(self, tmp_path):
        """Test a directory path is rejected."""
        with pytest.raises(ConfigurationFileNotFoundError):
            FileOperations(tmp_path).load_properties(tmp_path)

    def test_read_error(self, tmp_path, properties_file):
        """Test OS errors while reading are wrapped."""
        with patch(
            'typedconf.utils.config.file_operations.dotenv_values',
            side_effect=PermissionError("denied"),
        ):
            with pytest.raises(ConfigurationError) as exc_info:
                FileOperations(tmp_path).load_properties(properties_file)
        assert isinstance(exc_info.value.__cause__, PermissionError)


class TestClientConfFromFile:
    """Test seeding a store from a properties file."""

    def test_from_file(self, properties_file):
        """Test typed access to file values."""
        conf = ClientConf.from_file(properties_file)
        assert conf.get_int(ConfigEntry("client.pool.size", 1)) == 8
        assert conf.get_time_as_ms(ConfigEntry("timeout", "30s")) == 120000

    def test_from_file_with_tables(self, tmp_path):
        """Test deprecation tables are passed through."""
        path = tmp_path / "old.properties"
        path.write_text("client.connect.timeout=45s\n")
        with patch('typedconf.utils.config.deprecation.logger') as mock_logger:
            conf = ClientConf.from_file(
                path,
                configs_with_alternatives={
                    "client.http.timeout": DeprecatedEntry("client.connect.timeout", "0.5"),
                },
            )
        mock_logger.warning.assert_called_once()
        assert conf.get_time_as_ms(ConfigEntry("client.http.timeout", "10s")) == 45000


class TestEnvironment:
    """Test environment variable handling."""

    def setup_method(self):
        """Set up test fixtures."""
        self.handler = EnvironmentHandler()

    def test_parse_boolean(self):
        """Test the classic boolean parse."""
        assert parse_boolean("true") is True
        assert parse_boolean("TrUe") is True
        assert parse_boolean("1") is False
        assert parse_boolean("") is False
        assert parse_boolean(None) is False

    def test_test_mode_read_at_import(self):
        """Test TEST_MODE reflects the environment when the module loads."""
        try:
            with patch.dict(os.environ, {"TYPEDCONF_TEST": "TRUE"}):
                importlib.reload(environment)
                assert environment.TEST_MODE is True
            with patch.dict(os.environ, {"TYPEDCONF_TEST": "no"}):
                importlib.reload(environment)
                assert environment.TEST_MODE is False
        finally:
            importlib.reload(environment)

    def test_test_mode_on_client_conf(self):
        """Test the flag is exposed on the store class."""
        assert isinstance(ClientConf.TEST_MODE, bool)

    def test_convert_env_value(self):
        """Test conversion to supported target types."""
        assert self.handler.convert_env_value("on", 'boolean') is True
        assert self.handler.convert_env_value("off", 'boolean') is False
        assert self.handler.convert_env_value("42", 'integer') == 42
        assert self.handler.convert_env_value("text") == "text"
        assert self.handler.convert_env_value("") is None

    def test_convert_env_value_errors(self):
        """Test failed and unsupported conversions."""
        with pytest.raises(ConfigurationError):
            self.handler.convert_env_value("abc", 'integer')
        with pytest.raises(ConfigurationError):
            self.handler.convert_env_value("abc", 'json')

    def test_get_env_var(self):
        """Test reading with default and conversion."""
        with patch.dict(os.environ, {"TYPEDCONF_SAMPLE": "7"}):
            assert self.handler.get_env_var("TYPEDCONF_SAMPLE", target_type='integer') == 7
        with patch.dict(os.environ, {}, clear=True):
            assert self.handler.get_env_var("TYPEDCONF_SAMPLE", "fallback") == "fallback"
