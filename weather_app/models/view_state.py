"""View state variants: Idle, Loading, Success and Failure."""

from typing import Literal

from pydantic import BaseModel, ConfigDict

from .weather import WeatherRecord


class Idle(BaseModel):
    """Nothing requested yet."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["idle"] = "idle"


class Loading(BaseModel):
    """A request for ``city`` is in flight."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["loading"] = "loading"
    city: str


class Success(BaseModel):
    """The latest request returned a decoded record."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["success"] = "success"
    record: WeatherRecord


class Failure(BaseModel):
    """The latest request failed; ``message`` is what the user sees."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["failure"] = "failure"
    message: str


ViewState = Idle | Loading | Success | Failure
