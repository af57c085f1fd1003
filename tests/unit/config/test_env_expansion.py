"""Tests for environment variable expansion utilities."""

import os
from unittest.mock import patch

from pattern_catalog.config.utils.env_expansion import expand_env_vars


class TestEnvironmentVariableExpansion:
    """Test environment variable expansion functionality."""

    def test_expand_simple_env_var(self):
        """Test expansion of simple environment variable."""
        with patch.dict(os.environ, {"TEST_VAR": "/test/path"}):
            assert expand_env_vars("$TEST_VAR") == "/test/path"

    def test_expand_braced_env_var_with_subpath(self):
        """Test expansion of braced environment variable with subpath."""
        with patch.dict(os.environ, {"TEST_VAR": "/test/path"}):
            assert expand_env_vars("${TEST_VAR}/subdir") == "/test/path/subdir"

    def test_expand_default_when_unset(self):
        """Test that ${VAR:default} falls back to the default."""
        with patch.dict(os.environ, {}, clear=True):
            assert expand_env_vars("${LOG_LEVEL:INFO}") == "INFO"

    def test_expand_default_ignored_when_set(self):
        """Test that a set variable wins over its default."""
        with patch.dict(os.environ, {"LOG_LEVEL": "DEBUG"}):
            assert expand_env_vars("${LOG_LEVEL:INFO}") == "DEBUG"

    def test_expand_nonexistent_env_var(self):
        """Test expansion of non-existent environment variable."""
        with patch.dict(os.environ, {}, clear=True):
            assert expand_env_vars("$NONEXISTENT_VAR") == "$NONEXISTENT_VAR"

    def test_expand_nested_values(self):
        """Test expansion of environment variables in nested dicts and lists."""
        with patch.dict(os.environ, {"TEST_VAR": "/test/path"}):
            config = {
                "logging": {"file_path": "$TEST_VAR/catalog.log"},
                "catalog": {"categories": ["$TEST_VAR", "structural"]},
                "other": 5,
            }
            assert expand_env_vars(config) == {
                "logging": {"file_path": "/test/path/catalog.log"},
                "catalog": {"categories": ["/test/path", "structural"]},
                "other": 5,
            }
