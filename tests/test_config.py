"""
Tests for userhub.config module.
"""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from userhub.config import UserHubConfig, load_config
from userhub.version import __version__


class TestUserHubConfig:
    """Tests for UserHubConfig class."""

    def test_config_creation_with_kwargs(self):
        """Test creating config with keyword arguments."""
        config = UserHubConfig(base_url="https://api.userhub.example")
        assert config.base_url == "https://api.userhub.example"
        assert config.timeout == 30.0
        assert config.verify_ssl is True
        assert config.debug is False
        assert config.proxy is None
        assert config.user_agent == f"userhub-python/{__version__}"

    def test_config_with_all_options(self):
        """Test creating config with all options."""
        config = UserHubConfig(
            base_url="http://localhost:8080",
            timeout=2.5,
            verify_ssl=False,
            user_agent="my-app/1.0",
            debug=True,
            proxy="http://proxy.internal:3128",
        )
        assert config.timeout == 2.5
        assert config.verify_ssl is False
        assert config.user_agent == "my-app/1.0"
        assert config.debug is True
        assert config.proxy == "http://proxy.internal:3128"

    def test_config_url_strips_trailing_slash(self):
        """Test the base URL loses its trailing slash."""
        config = UserHubConfig(base_url="https://api.userhub.example/")
        assert config.base_url == "https://api.userhub.example"

    def test_config_url_validation_invalid(self):
        """Test URL validation with invalid URLs."""
        invalid_urls = [
            "ftp://api.userhub.example",
            "api.userhub.example",  # Missing protocol
            "",
        ]
        for url in invalid_urls:
            with pytest.raises(ValidationError):
                UserHubConfig(base_url=url)

    def test_config_timeout_must_be_positive(self):
        """Test zero and negative timeouts are rejected."""
        for timeout in (0, -1):
            with pytest.raises(ValidationError):
                UserHubConfig(base_url="https://api.userhub.example", timeout=timeout)

    @patch.dict(os.environ, {
        "USERHUB_BASE_URL": "https://env.userhub.example",
        "USERHUB_TIMEOUT": "12",
        "USERHUB_DEBUG": "true",
    })
    def test_config_from_environment(self):
        """Test loading config from environment variables."""
        config = UserHubConfig()
        assert config.base_url == "https://env.userhub.example"
        assert config.timeout == 12.0
        assert config.debug is True

    @patch.dict(os.environ, {}, clear=True)
    def test_config_missing_base_url(self, tmp_path, monkeypatch):
        """Test missing base URL raises a validation error."""
        monkeypatch.chdir(tmp_path)
        with pytest.raises(ValidationError):
            UserHubConfig()


class TestLoadConfig:
    """Tests for load_config function."""

    def test_load_config_with_kwargs(self):
        """Test load_config with keyword arguments."""
        config = load_config(base_url="https://api.userhub.example", timeout=3)
        assert config.base_url == "https://api.userhub.example"
        assert config.timeout == 3.0

    @patch.dict(os.environ, {"USERHUB_BASE_URL": "https://env.userhub.example"})
    def test_load_config_kwargs_override_env(self):
        """Test keyword arguments take priority over the environment."""
        config = load_config(base_url="https://kwargs.userhub.example")
        assert config.base_url == "https://kwargs.userhub.example"
