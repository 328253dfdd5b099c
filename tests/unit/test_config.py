"""
Unit tests for produce_gateway.core.config
"""
import os
from dataclasses import FrozenInstanceError
from unittest.mock import patch

import pytest

from produce_gateway.core.config import (
    DEFAULT_GEMINI_API_BASE,
    DEFAULT_GEMINI_MODEL,
    DEFAULT_IMAGE_URL,
    Settings,
)
from produce_gateway.domain.errors import ConfigurationError

_CONFIG_VARS = (
    "GEMINI_API_KEY", "GOOGLE_API_KEY", "GEMINI_MODEL", "GEMINI_API_BASE", "PORT",
    "DEFAULT_IMAGE_URL", "MAX_BODY_BYTES", "IMAGE_MAX_BYTES", "UPSTREAM_TIMEOUT_SECONDS",
)


@pytest.fixture
def clean_env():
    env = {k: v for k, v in os.environ.items() if k not in _CONFIG_VARS}
    with patch.dict(os.environ, env, clear=True):
        yield


class TestSettingsFromEnv:
    """Tests for Settings.from_env"""

    def test_defaults(self, clean_env):
        settings = Settings.from_env()
        assert settings.gemini_api_key == ""
        assert settings.gemini_model == DEFAULT_GEMINI_MODEL
        assert settings.gemini_api_base == DEFAULT_GEMINI_API_BASE
        assert settings.default_image_url == DEFAULT_IMAGE_URL
        assert settings.port == 8787
        assert settings.max_body_bytes == 15 * 1024 * 1024
        assert settings.image_max_bytes is None
        assert settings.upstream_timeout_seconds is None

    def test_reads_overrides(self, clean_env):
        with patch.dict(os.environ, {
            "GEMINI_API_KEY": "abc",
            "GEMINI_MODEL": "gemini-x",
            "GEMINI_API_BASE": "https://proxy.test/v1beta/",
            "PORT": "9000",
            "IMAGE_MAX_BYTES": "1024",
            "UPSTREAM_TIMEOUT_SECONDS": "12.5",
        }):
            settings = Settings.from_env()
        assert settings.gemini_api_key == "abc"
        assert settings.gemini_model == "gemini-x"
        assert settings.gemini_api_base == "https://proxy.test/v1beta"
        assert settings.port == 9000
        assert settings.image_max_bytes == 1024
        assert settings.upstream_timeout_seconds == 12.5

    def test_google_api_key_fallback(self, clean_env):
        with patch.dict(os.environ, {"GOOGLE_API_KEY": "from-google"}):
            assert Settings.from_env().gemini_api_key == "from-google"

    def test_gemini_key_wins(self, clean_env):
        with patch.dict(os.environ, {"GOOGLE_API_KEY": "g", "GEMINI_API_KEY": "k"}):
            assert Settings.from_env().gemini_api_key == "k"


class TestSettingsValidate:
    """Tests for Settings.validate"""

    def test_missing_key_raises(self):
        with pytest.raises(ConfigurationError, match="GEMINI_API_KEY"):
            Settings().validate()

    def test_present_key_passes(self):
        Settings(gemini_api_key="k").validate()

    def test_settings_are_immutable(self):
        settings = Settings(gemini_api_key="k")
        with pytest.raises(FrozenInstanceError):
            settings.gemini_api_key = "other"
