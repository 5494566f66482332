"""Configuration models using Pydantic for validation."""

import json
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Literal
from urllib.parse import urlparse

from pydantic import BaseModel, Field, field_validator

DEFAULT_BASE_URL = "https://api.openweathermap.org/data/2.5/weather"
API_KEY_ENV_VAR = "OPENWEATHER_API_KEY"


class WeatherConfig(BaseModel):
    """Weather API configuration."""

    api_key: str = ""
    default_city: str = "Gomel"
    lang: str = "ru"
    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float = Field(default=5.0, gt=0)

    @field_validator("default_city")
    @classmethod
    def validate_default_city(cls, v: str) -> str:
        """Default city must not be blank."""
        v = v.strip()
        if not v:
            raise ValueError("default_city cannot be blank")
        return v

    @field_validator("base_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Validate that URL is a valid HTTP/HTTPS URL."""
        try:
            parsed = urlparse(v)
            if parsed.scheme not in ("http", "https"):
                raise ValueError(f"URL must use http or https scheme, got '{parsed.scheme}'")
            if not parsed.netloc:
                raise ValueError("URL must have a valid host")
        except Exception as e:
            raise ValueError(f"Invalid URL '{v}': {e}")
        return v


class Settings(BaseModel):
    """General application settings."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"


class Config(BaseModel):
    """Main configuration model."""

    weather: WeatherConfig = Field(default_factory=WeatherConfig)
    settings: Settings = Field(default_factory=Settings)

    @classmethod
    def load(cls, path: Path | str = "config.json") -> "Config":
        """Load configuration from a JSON file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, encoding="utf-8") as f:
            data = json.load(f)

        return cls.model_validate(data)

    @classmethod
    def load_or_default(cls, path: Path | str = "config.json") -> "Config":
        """Load configuration or return default if file doesn't exist."""
        try:
            return cls.load(path)
        except FileNotFoundError:
            return cls()

    def with_env_overrides(self, environ: Mapping[str, str] | None = None) -> "Config":
        """Return a copy with the API key taken from the environment, if set."""
        environ = os.environ if environ is None else environ
        api_key = environ.get(API_KEY_ENV_VAR, "").strip()
        if not api_key:
            return self
        weather = self.weather.model_copy(update={"api_key": api_key})
        return self.model_copy(update={"weather": weather})
