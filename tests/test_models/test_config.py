"""Tests for configuration models."""

import pytest
from pydantic import ValidationError

from weather_app.models.config import (
    API_KEY_ENV_VAR,
    DEFAULT_BASE_URL,
    Config,
    Settings,
    WeatherConfig,
)


class TestWeatherConfig:
    """Tests for WeatherConfig model."""

    def test_defaults(self):
        """Test default values are applied."""
        config = WeatherConfig()
        assert config.api_key == ""
        assert config.default_city == "Gomel"
        assert config.lang == "ru"
        assert config.base_url == DEFAULT_BASE_URL
        assert config.timeout_seconds == 5.0

    def test_default_city_is_stripped(self):
        """Test surrounding whitespace is removed from the default city."""
        config = WeatherConfig(default_city="  Minsk ")
        assert config.default_city == "Minsk"

    def test_blank_default_city_rejected(self):
        """Test that a whitespace-only default city is rejected."""
        with pytest.raises(ValidationError) as exc_info:
            WeatherConfig(default_city="   ")
        assert "cannot be blank" in str(exc_info.value)

    def test_invalid_url_scheme(self):
        """Test that non-http/https URLs are rejected."""
        with pytest.raises(ValidationError) as exc_info:
            WeatherConfig(base_url="ftp://example.com/weather")
        assert "http or https" in str(exc_info.value)

    def test_invalid_url_no_host(self):
        """Test that URLs without host are rejected."""
        with pytest.raises(ValidationError) as exc_info:
            WeatherConfig(base_url="https://")
        assert "Invalid URL" in str(exc_info.value)

    @pytest.mark.parametrize("timeout", [0, -1.5])
    def test_non_positive_timeout_rejected(self, timeout):
        """Test that the timeout must be positive."""
        with pytest.raises(ValidationError):
            WeatherConfig(timeout_seconds=timeout)


class TestSettings:
    """Tests for Settings model."""

    def test_default_log_level(self):
        assert Settings().log_level == "INFO"

    def test_invalid_log_level(self):
        """Test that unknown log levels are rejected."""
        with pytest.raises(ValidationError):
            Settings(log_level="TRACE")


class TestConfig:
    """Tests for the main Config model."""

    def test_load_from_file(self, sample_config_file):
        """Test loading configuration from a JSON file."""
        config = Config.load(sample_config_file)
        assert config.weather.api_key == "file-key"
        assert config.weather.default_city == "Minsk"
        assert config.weather.lang == "en"
        assert config.weather.timeout_seconds == 10.0
        assert config.settings.log_level == "DEBUG"

    def test_load_missing_file(self, temp_dir):
        """Test that loading a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            Config.load(temp_dir / "missing.json")

    def test_load_or_default_missing_file(self, temp_dir):
        """Test that a missing file falls back to defaults."""
        config = Config.load_or_default(temp_dir / "missing.json")
        assert config.weather.default_city == "Gomel"
        assert config.settings.log_level == "INFO"

    def test_load_invalid_data(self, temp_dir):
        """Test that invalid values in the file raise ValidationError."""
        path = temp_dir / "config.json"
        path.write_text('{"weather": {"timeout_seconds": "soon"}}')
        with pytest.raises(ValidationError):
            Config.load(path)

    def test_partial_file_uses_defaults(self, temp_dir):
        """Test that sections missing from the file get defaults."""
        path = temp_dir / "config.json"
        path.write_text('{"weather": {"api_key": "abc"}}')
        config = Config.load(path)
        assert config.weather.api_key == "abc"
        assert config.weather.default_city == "Gomel"
        assert config.settings.log_level == "INFO"

    def test_env_override_replaces_api_key(self, sample_config_file):
        """Test the environment variable wins over the file."""
        config = Config.load(sample_config_file).with_env_overrides({API_KEY_ENV_VAR: "env-key"})
        assert config.weather.api_key == "env-key"
        assert config.weather.default_city == "Minsk"

    def test_env_override_blank_is_ignored(self, sample_config_file):
        """Test that an empty environment variable keeps the file value."""
        config = Config.load(sample_config_file).with_env_overrides({API_KEY_ENV_VAR: "  "})
        assert config.weather.api_key == "file-key"

    def test_env_override_reads_os_environ(self, monkeypatch):
        """Test that os.environ is used by default."""
        monkeypatch.setenv(API_KEY_ENV_VAR, "from-os")
        assert Config().with_env_overrides().weather.api_key == "from-os"
