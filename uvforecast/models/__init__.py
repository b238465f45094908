"""Data models for the UV forecast client."""

from .config import ApiConfig, Config, Settings
from .forecast import (
    Failure,
    FetchRequest,
    ForecastResponse,
    ForecastState,
    HourForecast,
    Idle,
    Loading,
    Model,
    RawHourRecord,
    Success,
)

__all__ = [
    "ApiConfig",
    "Config",
    "Failure",
    "FetchRequest",
    "ForecastResponse",
    "ForecastState",
    "HourForecast",
    "Idle",
    "Loading",
    "Model",
    "RawHourRecord",
    "Settings",
    "Success",
]
