"""Tests for environment variable expansion utilities."""

import os
from unittest.mock import patch

from src.config.utils.env_expansion import expand_config_env_vars, expand_env_vars


class TestEnvironmentVariableExpansion:
    """Test environment variable expansion functionality."""

    def test_expand_simple_env_var(self):
        """Test expansion of simple environment variable."""
        with patch.dict(os.environ, {"TEST_VAR": "/test/path"}):
            result = expand_env_vars("$TEST_VAR")
            assert result == "/test/path"

    def test_expand_braced_env_var(self):
        """Test expansion of braced environment variable."""
        with patch.dict(os.environ, {"TEST_VAR": "/test/path"}):
            result = expand_env_vars("${TEST_VAR}")
            assert result == "/test/path"

    def test_expand_env_var_with_subpath(self):
        """Test expansion of environment variable with subpath."""
        with patch.dict(os.environ, {"TEST_VAR": "/test/path"}):
            result = expand_env_vars("$TEST_VAR/subdir")
            assert result == "/test/path/subdir"

    def test_expand_braced_env_var_with_subpath(self):
        """Test expansion of braced environment variable with subpath."""
        with patch.dict(os.environ, {"TEST_VAR": "/test/path"}):
            result = expand_env_vars("${TEST_VAR}/subdir")
            assert result == "/test/path/subdir"

    def test_expand_nonexistent_env_var(self):
        """Test expansion of non-existent environment variable."""
        result = expand_env_vars("$NONEXISTENT_VAR")
        assert result == "$NONEXISTENT_VAR"

    def test_default_used_when_unset(self):
        """Test ${VAR:default} falls back to the default."""
        result = expand_env_vars("${NONEXISTENT_VAR:WARNING}")
        assert result == "WARNING"

    def test_default_ignored_when_set(self):
        """Test ${VAR:default} prefers the environment."""
        with patch.dict(os.environ, {"TEST_LEVEL": "DEBUG"}):
            result = expand_env_vars("${TEST_LEVEL:WARNING}")
            assert result == "DEBUG"

    def test_empty_default(self):
        """Test an empty default expands to an empty string."""
        assert expand_env_vars("a${NONEXISTENT_VAR:}b") == "ab"

    def test_expand_dict_values(self):
        """Test expansion of environment variables in dictionary values."""
        with patch.dict(os.environ, {"TEST_VAR": "/test/path"}):
            config = {"path": "$TEST_VAR/config", "other": "normal_value"}
            result = expand_env_vars(config)
            assert result == {"path": "/test/path/config", "other": "normal_value"}

    def test_expand_nested_dict_values(self):
        """Test expansion of environment variables in nested dictionary values."""
        with patch.dict(os.environ, {"TEST_VAR": "/test/path"}):
            config = {
                "logging": {"file_path": "$TEST_VAR/patterns.log"},
                "other": "value",
            }
            result = expand_env_vars(config)
            assert result == {
                "logging": {"file_path": "/test/path/patterns.log"},
                "other": "value",
            }

    def test_expand_list_values(self):
        """Test expansion of environment variables in list values."""
        with patch.dict(os.environ, {"TEST_VAR": "/test/path"}):
            config = ["$TEST_VAR/file1", "$TEST_VAR/file2", "normal_value"]
            result = expand_env_vars(config)
            assert result == ["/test/path/file1", "/test/path/file2", "normal_value"]

    def test_expand_non_string_values(self):
        """Test that non-string values are returned unchanged."""
        config = {"number": 42, "boolean": True, "none": None}
        result = expand_env_vars(config)
        assert result == config

    def test_expand_config_env_vars(self):
        """Test the main configuration expansion function."""
        with patch.dict(os.environ, {"PATTERNS_LOG_DIR": "/var/log/patterns"}):
            config = {
                "logging": {
                    "level": "${PATTERNS_LOG_LEVEL:WARNING}",
                    "file_path": "${PATTERNS_LOG_DIR:logs}/patterns.log",
                },
                "demo": {"singleton_delay_ms": 1000},
            }
            result = expand_config_env_vars(config)
            assert result == {
                "logging": {
                    "level": "WARNING",
                    "file_path": "/var/log/patterns/patterns.log",
                },
                "demo": {"singleton_delay_ms": 1000},
            }
