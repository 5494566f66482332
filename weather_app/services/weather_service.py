"""Weather service using the OpenWeatherMap current-weather API."""

import logging

import httpx
from pydantic import ValidationError

from ..models.config import DEFAULT_BASE_URL, WeatherConfig
from ..models.weather import WeatherRecord

logger = logging.getLogger(__name__)

# Temperatures come back in °C; no conversion happens locally.
UNITS = "metric"


class WeatherError(Exception):
    """Base class for everything that can go wrong during a lookup."""


class FetchError(WeatherError):
    """The HTTP round trip did not produce a usable body."""


class CityNotFoundError(FetchError):
    """Upstream answered with a non-success status.

    Every status is treated the same way; ``status_code`` is kept for logging.
    """

    def __init__(self, city: str, status_code: int):
        super().__init__(f"No weather for '{city}' (HTTP {status_code})")
        self.city = city
        self.status_code = status_code


class TransportError(FetchError):
    """The request itself failed (DNS, timeout, connection reset, bad URL)."""


class DecodeError(WeatherError):
    """The body could not be turned into a WeatherRecord."""


class SchemaMismatchError(DecodeError):
    """Malformed JSON, missing fields or wrong types."""


def _error_text(error: Exception) -> str:
    """Return the error message, or its type name when the message is empty."""
    return str(error) or type(error).__name__


def decode_weather(raw: str | bytes) -> WeatherRecord:
    """Parse a response body into a WeatherRecord.

    Raises:
        SchemaMismatchError: If the body is not JSON of the expected shape.
    """
    try:
        return WeatherRecord.model_validate_json(raw)
    except ValidationError as e:
        raise SchemaMismatchError(str(e)) from e


class WeatherService:
    """Service to fetch current weather from OpenWeatherMap.

    One ``httpx.AsyncClient`` is shared across requests. Pass ``client`` to
    supply your own (it is then not closed by ``aclose``).
    """

    def __init__(
        self,
        api_key: str = "",
        lang: str = "ru",
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 5.0,
        client: httpx.AsyncClient | None = None,
    ):
        self.api_key = api_key
        self.lang = lang
        self.base_url = base_url
        self.timeout = timeout
        self._owns_client = client is None
        self._client = client if client is not None else httpx.AsyncClient(timeout=timeout)

    @classmethod
    def from_config(
        cls, config: WeatherConfig, client: httpx.AsyncClient | None = None
    ) -> "WeatherService":
        """Build a service from the ``weather`` section of the config."""
        return cls(
            api_key=config.api_key,
            lang=config.lang,
            base_url=config.base_url,
            timeout=config.timeout_seconds,
            client=client,
        )

    async def __aenter__(self) -> "WeatherService":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the shared HTTP client if this service created it."""
        if self._owns_client:
            await self._client.aclose()

    def build_params(self, city: str, api_key: str | None = None) -> dict[str, str]:
        """Query parameters for a lookup of ``city``."""
        return {
            "q": city,
            "appid": self.api_key if api_key is None else api_key,
            "units": UNITS,
            "lang": self.lang,
        }

    async def fetch(self, city: str, api_key: str | None = None) -> str:
        """Fetch the raw response body for ``city``.

        Raises:
            CityNotFoundError: On any non-success HTTP status.
            TransportError: If the request could not be completed.
        """
        params = self.build_params(city, api_key)
        logger.debug(f"Fetching weather for {city}")

        try:
            response = await self._client.get(self.base_url, params=params)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error(f"Error fetching weather for {city}: {_error_text(e)}")
            raise TransportError(_error_text(e)) from e

        if not response.is_success:
            logger.warning(f"Weather lookup for {city} failed: HTTP {response.status_code}")
            raise CityNotFoundError(city, response.status_code)

        return response.text

    def decode(self, raw: str | bytes) -> WeatherRecord:
        """Decode a response body, logging schema problems."""
        try:
            return decode_weather(raw)
        except SchemaMismatchError as e:
            logger.error(f"Error parsing weather response: {e}")
            raise

    async def fetch_weather(self, city: str) -> WeatherRecord:
        """Fetch and decode current weather for ``city``."""
        raw = await self.fetch(city)
        record = self.decode(raw)
        logger.info(f"Weather for {record.location_name}: {record.temperature_display}")
        return record
