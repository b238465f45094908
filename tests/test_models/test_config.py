"""Tests for configuration models."""

import json

import pytest
from pydantic import ValidationError

from uvforecast.models.config import DEFAULT_BASE_URL, ApiConfig, Config, Settings


class TestApiConfig:
    """Tests for ApiConfig model."""

    def test_defaults(self):
        """Test default endpoint and no timeout."""
        api = ApiConfig()
        assert api.base_url == DEFAULT_BASE_URL
        assert api.timeout_seconds is None
        assert api.info_url == ""

    def test_trailing_slash_stripped(self):
        """Test that a trailing slash is removed from the base URL."""
        api = ApiConfig(base_url="https://uv.example.com/api/")
        assert api.base_url == "https://uv.example.com/api"

    def test_invalid_url_scheme(self):
        """Test that non-http/https URLs are rejected."""
        with pytest.raises(ValidationError) as exc_info:
            ApiConfig(base_url="ftp://uv.example.com/api")
        assert "http or https" in str(exc_info.value)

    def test_invalid_url_no_host(self):
        """Test that URLs without host are rejected."""
        with pytest.raises(ValidationError) as exc_info:
            ApiConfig(base_url="https://")
        assert "Invalid URL" in str(exc_info.value)

    def test_non_positive_timeout_rejected(self):
        """Test that a zero or negative timeout is rejected."""
        with pytest.raises(ValidationError):
            ApiConfig(timeout_seconds=0)
        with pytest.raises(ValidationError):
            ApiConfig(timeout_seconds=-1.5)

    def test_info_url_must_be_http(self):
        """Test that the info link must be an http(s) URL."""
        with pytest.raises(ValidationError):
            ApiConfig(info_url="/about")
        assert ApiConfig(info_url="https://uv.example.com").info_url == "https://uv.example.com"

    def test_info_url_quotes_encoded(self):
        """Test that characters unsafe in status bar markup are percent-encoded."""
        api = ApiConfig(info_url="https://uv.example.com/it's [v2]?q=a b")
        assert api.info_url == "https://uv.example.com/it%27s%20%5Bv2%5D?q=a%20b"

    def test_info_url_existing_escapes_kept(self):
        api = ApiConfig(info_url="https://uv.example.com/a%20b?x=1&y=2")
        assert api.info_url == "https://uv.example.com/a%20b?x=1&y=2"


class TestSettings:
    """Tests for Settings model."""

    def test_defaults(self):
        """Test default settings."""
        settings = Settings()
        assert settings.routing is True
        assert settings.midnight_as_twelve is False
        assert settings.app_origin == ""
        assert settings.log_level == "INFO"

    def test_invalid_log_level(self):
        """Test that invalid log levels are rejected."""
        with pytest.raises(ValidationError):
            Settings(log_level="TRACE")

    def test_app_origin_normalized(self):
        assert Settings(app_origin="https://uv.example.com/").app_origin == "https://uv.example.com"

    @pytest.mark.parametrize(
        "origin", ["uv.example.com", "ftp://uv.example.com", "https://uv.example.com/app"]
    )
    def test_invalid_app_origin(self, origin):
        with pytest.raises(ValidationError):
            Settings(app_origin=origin)


class TestConfig:
    """Tests for main Config model."""

    def test_default_config(self):
        """Test creating default config."""
        config = Config()
        assert config.api.base_url == DEFAULT_BASE_URL
        assert config.settings.routing is True

    def test_load_from_file(self, sample_config_file):
        """Test loading config from file."""
        config = Config.load(sample_config_file)
        assert config.api.base_url == "https://uv.example.com/api/hourly"
        assert config.api.timeout_seconds == 10
        assert config.api.info_url == "https://uv.example.com/about"
        assert config.settings.log_level == "INFO"

    def test_load_nonexistent_file(self, temp_dir):
        """Test loading from nonexistent file raises error."""
        with pytest.raises(FileNotFoundError):
            Config.load(temp_dir / "nonexistent.json")

    def test_load_or_default_with_file(self, sample_config_file):
        """Test load_or_default with existing file."""
        config = Config.load_or_default(sample_config_file)
        assert config.api.timeout_seconds == 10

    def test_load_or_default_without_file(self, temp_dir):
        """Test load_or_default returns default when file missing."""
        config = Config.load_or_default(temp_dir / "nonexistent.json")
        assert config == Config()

    def test_load_invalid_file(self, temp_dir):
        """Test that an invalid config file is not silently replaced by defaults."""
        config_path = temp_dir / "config.json"
        config_path.write_text(json.dumps({"api": {"base_url": "not a url"}}))
        with pytest.raises(ValidationError):
            Config.load_or_default(config_path)

    def test_simple_variant(self):
        """Test selecting the variant without routing."""
        config = Config.model_validate({"settings": {"routing": False}})
        assert config.settings.routing is False
