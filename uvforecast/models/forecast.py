"""Forecast data models.

Every model here is frozen: state changes replace values, they never
mutate them.
"""

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr


class HourForecast(BaseModel):
    """UV index for a single hour."""

    model_config = ConfigDict(frozen=True)

    year: int
    month: int
    day: int
    hour: int
    uv: int


class RawHourRecord(BaseModel):
    """One element of the ``hourly`` array as sent by the API."""

    model_config = ConfigDict(frozen=True)

    datetime: StrictStr
    uv: StrictInt


class ForecastResponse(BaseModel):
    """Response body of the UV forecast endpoint."""

    model_config = ConfigDict(frozen=True)

    hourly: list[RawHourRecord]


class Idle(BaseModel):
    """No request has been made."""

    model_config = ConfigDict(frozen=True)

    status: Literal["idle"] = "idle"


class Loading(BaseModel):
    """A request is in flight."""

    model_config = ConfigDict(frozen=True)

    status: Literal["loading"] = "loading"


class Failure(BaseModel):
    """The request failed or the response was malformed."""

    model_config = ConfigDict(frozen=True)

    status: Literal["failure"] = "failure"


class Success(BaseModel):
    """The forecast was fetched and parsed."""

    model_config = ConfigDict(frozen=True)

    status: Literal["success"] = "success"
    entries: tuple[HourForecast, ...] = ()


ForecastState = Annotated[Idle | Loading | Failure | Success, Field(discriminator="status")]


class Model(BaseModel):
    """Application state, replaced wholesale on every event."""

    model_config = ConfigDict(frozen=True)

    active_postal_code: str = ""
    pending_input: str = ""
    forecast_state: ForecastState = Field(default_factory=Idle)
    request_id: int = 0


class FetchRequest(BaseModel):
    """One outbound forecast request."""

    model_config = ConfigDict(frozen=True)

    postal_code: str
    request_id: int
