"""Textual application wiring the search bar, controller and panels."""

import logging

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import VerticalScroll
from textual.widgets import Label

from .components import SearchBar, StatusBar, WeatherPanel
from .controller import WeatherController
from .models.config import Config
from .models.view_state import Success, ViewState
from .services.weather_service import WeatherService

logger = logging.getLogger(__name__)


class WeatherApp(App):
    """Single-screen weather lookup."""

    TITLE = "Простая погода"

    CSS = """
    #main {
        padding: 1 3;
    }

    #title {
        width: 100%;
        content-align: center middle;
        color: $primary;
        text-style: bold;
        padding: 0 0 1 0;
    }
    """

    BINDINGS = [
        Binding("r", "refresh", "Обновить", show=True),
        Binding("q", "quit", "Выход", show=True),
    ]

    def __init__(
        self,
        config: Config | None = None,
        service: WeatherService | None = None,
    ) -> None:
        super().__init__()
        self._config = config or Config()
        self.service = service or WeatherService.from_config(self._config.weather)
        self.controller = WeatherController(self.service)
        self.controller.subscribe(self._on_state_change)

    def compose(self) -> ComposeResult:
        with VerticalScroll(id="main"):
            yield Label(self.TITLE, id="title")
            yield SearchBar(self._config.weather.default_city)
            yield WeatherPanel()
        yield StatusBar()

    def on_mount(self) -> None:
        """Load the default city on startup."""
        self.query_one(SearchBar).submit()

    async def on_unmount(self) -> None:
        await self.service.aclose()

    def on_search_bar_city_submitted(self, event: SearchBar.CitySubmitted) -> None:
        query = self.controller.submit(event.city)
        if query is None:
            return
        # A new lookup cancels whatever lookup is still in flight.
        self.run_worker(self.controller.load(query), exclusive=True, group="weather")

    def action_refresh(self) -> None:
        """Repeat the last lookup."""
        self.query_one(SearchBar).resubmit()

    def _on_state_change(self, state: ViewState) -> None:
        self.query_one(WeatherPanel).show_state(state, self.controller.last_record)
        if isinstance(state, Success):
            self.query_one(StatusBar).set_last_refresh(state.record.location_name)
