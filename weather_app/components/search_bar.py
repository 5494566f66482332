"""Search bar: city input plus the submit button."""

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.message import Message
from textual.widgets import Button, Input


class SearchBar(Vertical):
    """City input that posts CitySubmitted on Enter or button press."""

    class CitySubmitted(Message):
        """Message sent when the user asks for a city's weather."""

        def __init__(self, city: str) -> None:
            super().__init__()
            self.city = city

    DEFAULT_CSS = """
    SearchBar {
        height: auto;
        padding: 0 0 1 0;
    }

    SearchBar #city-input {
        width: 100%;
    }

    SearchBar #btn-search {
        width: 100%;
        margin-top: 1;
    }
    """

    def __init__(self, city: str = "") -> None:
        super().__init__()
        self._initial_city = city
        self.last_submitted: str | None = None

    def compose(self) -> ComposeResult:
        yield Input(
            value=self._initial_city,
            placeholder="Введите город",
            id="city-input",
        )
        yield Button("Узнать погоду", id="btn-search", variant="primary")

    @property
    def city(self) -> str:
        """Current text of the input."""
        return self.query_one("#city-input", Input).value

    def submit(self) -> bool:
        """Post the current city if it is not blank. Returns whether it was sent."""
        city = self.city.strip()
        if not city:
            return False
        self.last_submitted = city
        self.post_message(self.CitySubmitted(city))
        return True

    def resubmit(self) -> bool:
        """Post the last submitted city again."""
        if self.last_submitted is None:
            return False
        self.post_message(self.CitySubmitted(self.last_submitted))
        return True

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self.submit()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "btn-search":
            event.stop()
            self.submit()
