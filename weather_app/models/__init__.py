"""Data models for the weather app."""

from .config import Config, Settings, WeatherConfig
from .view_state import Failure, Idle, Loading, Success, ViewState
from .weather import Condition, MainReading, WeatherQuery, WeatherRecord

__all__ = [
    "Condition",
    "Config",
    "Failure",
    "Idle",
    "Loading",
    "MainReading",
    "Settings",
    "Success",
    "ViewState",
    "WeatherConfig",
    "WeatherQuery",
    "WeatherRecord",
]
