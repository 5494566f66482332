"""Pytest configuration and fixtures."""

import json
import tempfile
from pathlib import Path

import httpx
import pytest

from weather_app.services.weather_service import WeatherService


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_config_data():
    """Sample configuration data for testing."""
    return {
        "weather": {
            "api_key": "file-key",
            "default_city": "Minsk",
            "lang": "en",
            "timeout_seconds": 10.0,
        },
        "settings": {
            "log_level": "DEBUG",
        },
    }


@pytest.fixture
def sample_config_file(temp_dir, sample_config_data):
    """Create a sample config file for testing."""
    config_path = temp_dir / "config.json"
    with open(config_path, "w") as f:
        json.dump(sample_config_data, f)
    return config_path


@pytest.fixture
def gomel_payload():
    """Successful upstream response for Gomel."""
    return {
        "coord": {"lon": 30.98, "lat": 52.43},
        "name": "Gomel",
        "main": {"temp": 5.0, "feels_like": 2.0, "humidity": 80, "pressure": 1012},
        "weather": [{"id": 800, "main": "Clear", "description": "clear sky", "icon": "01d"}],
    }


@pytest.fixture
def make_service():
    """Build a WeatherService whose HTTP client is served by ``handler``.

    The returned service records every request in ``service.requests``.
    """

    def factory(handler) -> WeatherService:
        requests: list[httpx.Request] = []

        def recording_handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return handler(request)

        client = httpx.AsyncClient(transport=httpx.MockTransport(recording_handler))
        service = WeatherService(api_key="test-key", client=client)
        service.requests = requests
        return service

    return factory
