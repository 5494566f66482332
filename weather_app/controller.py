"""State machine driving the weather screen.

Transitions::

    any state --submit(city)--> Loading
    Loading   --load ok-------> Success(record)
    Loading   --not found-----> Failure("Город не найден")
    Loading   --other error---> Failure("Ошибка: <details>")

Only the most recent submission may leave ``Loading``; results of superseded
queries are dropped.
"""

import logging
from collections.abc import Callable

from .models.view_state import Failure, Idle, Loading, Success, ViewState
from .models.weather import WeatherQuery, WeatherRecord
from .services.weather_service import (
    CityNotFoundError,
    WeatherError,
    WeatherService,
)

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Город не найден"
ERROR_PREFIX = "Ошибка: "

StateListener = Callable[[ViewState], None]


def failure_message(error: WeatherError) -> str:
    """User-facing text for a failed lookup."""
    if isinstance(error, CityNotFoundError):
        return NOT_FOUND_MESSAGE
    return f"{ERROR_PREFIX}{error}"


class WeatherController:
    """Owns the ViewState and the last successfully decoded record."""

    def __init__(self, service: WeatherService):
        self.service = service
        self.state: ViewState = Idle()
        self.last_record: WeatherRecord | None = None
        self.last_city: str | None = None
        self._submissions = 0
        self._listeners: list[StateListener] = []

    def subscribe(self, listener: StateListener) -> None:
        """Call ``listener`` with the new state after every transition."""
        self._listeners.append(listener)

    def _transition(self, state: ViewState) -> None:
        logger.debug(f"View state -> {state.kind}")
        self.state = state
        if isinstance(state, Success):
            self.last_record = state.record
        for listener in self._listeners:
            listener(state)

    def submit(self, city: str) -> WeatherQuery | None:
        """Start a new lookup, or return None for blank input.

        Blank input leaves the state untouched and issues no request.
        """
        if not city.strip():
            logger.debug("Ignoring blank city submission")
            return None

        self._submissions += 1
        query = WeatherQuery(city=city, number=self._submissions)
        self.last_city = query.city
        self._transition(Loading(city=query.city))
        return query

    def is_current(self, query: WeatherQuery) -> bool:
        """Whether ``query`` is still the latest submission."""
        return query.number == self._submissions

    async def load(self, query: WeatherQuery) -> ViewState:
        """Fetch and decode weather for ``query`` and settle the state."""
        try:
            record = await self.service.fetch_weather(query.city)
            state: ViewState = Success(record=record)
        except WeatherError as e:
            state = Failure(message=failure_message(e))

        if not self.is_current(query):
            logger.debug(f"Dropping result for superseded query '{query.city}'")
            return self.state

        self._transition(state)
        return state

    async def refresh(self, city: str) -> ViewState:
        """Submit ``city`` and wait for the lookup to finish."""
        query = self.submit(city)
        if query is None:
            return self.state
        return await self.load(query)
