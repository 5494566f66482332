"""Weather panel: loading indicator, error card and result card."""

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Label, LoadingIndicator, Static

from ..models.view_state import Failure, Loading, ViewState
from ..models.weather import WeatherRecord
from ..services.icons import emoji_for

# Upper bounds (inclusive, °C) for each temperature colour; anything warmer is red.
TEMP_COLORS: tuple[tuple[float, str], ...] = (
    (0, "blue"),
    (10, "cyan"),
    (20, "green"),
    (30, "yellow"),
)
HOT_COLOR = "red"


def escape_markup(text: str) -> str:
    """Escape markup in upstream text. Only an opening bracket starts a tag."""
    return text.replace("[", r"\[")


def temp_color(temp: float) -> str:
    """Colour name for a temperature in °C."""
    for upper, color in TEMP_COLORS:
        if temp <= upper:
            return color
    return HOT_COLOR


class WeatherPanel(Static):
    """Panel rendering the current view state.

    The last successful record stays on screen while a new lookup is loading
    and after it fails; only the next success replaces it.
    """

    DEFAULT_CSS = """
    WeatherPanel {
        height: auto;
    }

    WeatherPanel #weather-loading {
        height: auto;
        display: none;
    }

    WeatherPanel #weather-loading.visible {
        display: block;
    }

    WeatherPanel LoadingIndicator {
        height: 3;
    }

    WeatherPanel #weather-error {
        height: auto;
        border: solid $error;
        background: $error 10%;
        padding: 0 1;
        display: none;
    }

    WeatherPanel #weather-error.visible {
        display: block;
    }

    WeatherPanel #error-title {
        color: $error;
        text-style: bold;
    }

    WeatherPanel #weather-result {
        height: auto;
        border: solid $primary;
        padding: 1 2;
        align-horizontal: center;
        display: none;
    }

    WeatherPanel #weather-result.visible {
        display: block;
    }

    WeatherPanel #weather-details {
        height: auto;
    }

    WeatherPanel .detail {
        width: 1fr;
        content-align: center middle;
    }
    """

    def compose(self) -> ComposeResult:
        with Vertical(id="weather-loading"):
            yield LoadingIndicator()
            yield Label("Загрузка...", id="loading-text")
        with Vertical(id="weather-error"):
            yield Label("Ошибка", id="error-title")
            yield Label("", id="error-message")
        with Vertical(id="weather-result"):
            yield Label("", id="weather-location")
            yield Label("", id="weather-temp")
            yield Label("", id="weather-description")
            with Horizontal(id="weather-details"):
                yield Label("", id="weather-feels-like", classes="detail")
                yield Label("", id="weather-humidity", classes="detail")
            yield Label("", id="weather-emoji")

    def show_state(self, state: ViewState, record: WeatherRecord | None = None) -> None:
        """Render ``state`` with ``record`` as the last known result."""
        self.query_one("#weather-loading").set_class(isinstance(state, Loading), "visible")

        error_box = self.query_one("#weather-error")
        if isinstance(state, Failure):
            self.query_one("#error-message", Label).update(escape_markup(state.message))
            error_box.add_class("visible")
        else:
            self.query_one("#error-message", Label).update("")
            error_box.remove_class("visible")

        if record is not None:
            self.update_weather(record)

    def update_weather(self, record: WeatherRecord) -> None:
        """Fill the result card from ``record``."""
        location = escape_markup(record.location_name)
        self.query_one("#weather-location", Label).update(f"[bold]{location}[/bold]")
        self.query_one("#weather-temp", Label).update(
            f"[{temp_color(record.temperature_c)}]{record.temperature_display}[/]"
        )
        description = escape_markup(record.description)
        self.query_one("#weather-description", Label).update(f"[dim]{description}[/dim]")
        self.query_one("#weather-feels-like", Label).update(
            f"[dim]Ощущается[/dim]\n{record.feels_like_display}"
        )
        self.query_one("#weather-humidity", Label).update(
            f"[dim]Влажность[/dim]\n{record.humidity_display}"
        )
        code = record.icon_code
        self.query_one("#weather-emoji", Label).update(emoji_for(code) if code is not None else "")
        self.query_one("#weather-result").add_class("visible")
