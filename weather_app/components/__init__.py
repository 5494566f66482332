"""UI components for the weather app."""

from .search_bar import SearchBar
from .status_bar import StatusBar
from .weather_panel import WeatherPanel

__all__ = ["SearchBar", "StatusBar", "WeatherPanel"]
