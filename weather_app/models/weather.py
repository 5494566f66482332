"""Weather data models for the OpenWeatherMap current-weather response."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Condition(BaseModel):
    """A single weather descriptor, e.g. "clear sky" with icon "01d"."""

    model_config = ConfigDict(frozen=True, strict=True)

    description: str
    icon: str


class MainReading(BaseModel):
    """The ``main`` block: temperatures in °C and relative humidity."""

    model_config = ConfigDict(frozen=True, strict=True)

    temp: float
    feels_like: float
    humidity: int = Field(..., ge=0, le=100)


class WeatherRecord(BaseModel):
    """Current weather for one location.

    Field names follow the upstream wire format (``name``, ``main``,
    ``weather``) through aliases; unknown fields are ignored.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    location_name: str = Field(..., alias="name")
    main: MainReading
    conditions: list[Condition] = Field(..., alias="weather")

    @property
    def temperature_c(self) -> float:
        return self.main.temp

    @property
    def feels_like_c(self) -> float:
        return self.main.feels_like

    @property
    def humidity_pct(self) -> int:
        return self.main.humidity

    @property
    def primary_condition(self) -> Condition | None:
        """First condition, the only one that gets displayed."""
        return self.conditions[0] if self.conditions else None

    @property
    def description(self) -> str:
        condition = self.primary_condition
        return condition.description if condition else ""

    @property
    def icon_code(self) -> str | None:
        condition = self.primary_condition
        return condition.icon if condition else None

    @property
    def temperature_display(self) -> str:
        """Temperature truncated to whole degrees, e.g. '5°C'."""
        return f"{int(self.temperature_c)}°C"

    @property
    def feels_like_display(self) -> str:
        return f"{int(self.feels_like_c)}°C"

    @property
    def humidity_display(self) -> str:
        return f"{self.humidity_pct}%"


class WeatherQuery(BaseModel):
    """A single submitted lookup."""

    model_config = ConfigDict(frozen=True)

    city: str = Field(..., min_length=1)
    number: int = 0

    @field_validator("city")
    @classmethod
    def validate_city(cls, v: str) -> str:
        """Strip whitespace and reject blank names."""
        v = v.strip()
        if not v:
            raise ValueError("City name cannot be blank")
        return v
