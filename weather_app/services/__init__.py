"""Services for fetching and decoding weather data."""

from .icons import emoji_for, icon_url
from .weather_service import (
    CityNotFoundError,
    DecodeError,
    FetchError,
    SchemaMismatchError,
    TransportError,
    WeatherError,
    WeatherService,
    decode_weather,
)

__all__ = [
    "CityNotFoundError",
    "DecodeError",
    "FetchError",
    "SchemaMismatchError",
    "TransportError",
    "WeatherError",
    "WeatherService",
    "decode_weather",
    "emoji_for",
    "icon_url",
]
