"""UV forecast service: one GET per postal code, decoded into HourForecast rows."""

import logging
from datetime import datetime
from typing import Any

import httpx
from pydantic import ValidationError

from ..models.config import ApiConfig
from ..models.forecast import ForecastResponse, HourForecast

logger = logging.getLogger(__name__)

# Stand-in for a datetime string that could not be parsed
ZERO_TIMESTAMP = (0, 1, 1, 0)


class ForecastError(Exception):
    """Base error for a forecast request that produced no data."""


class TransportError(ForecastError):
    """Network or HTTP-layer failure."""


class DecodeError(ForecastError):
    """Response body does not have the expected shape."""


def parse_hour(value: str) -> tuple[int, int, int, int]:
    """Split an ISO-8601 string into (year, month, day, hour).

    The components are taken as written; no timezone conversion happens.
    Unparseable input yields ZERO_TIMESTAMP instead of raising.
    """
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        logger.debug(f"Unparseable forecast datetime {value!r}, using zero timestamp")
        return ZERO_TIMESTAMP
    return parsed.year, parsed.month, parsed.day, parsed.hour


def parse_response(data: Any) -> list[HourForecast]:
    """Decode a response body into hour forecasts, preserving order.

    Raises:
        DecodeError: If ``hourly`` is missing or not a list, or any record
            lacks ``datetime``/``uv`` or carries the wrong type.
    """
    try:
        response = ForecastResponse.model_validate(data)
    except ValidationError as e:
        raise DecodeError(f"Unexpected forecast response: {e.error_count()} error(s)") from e

    entries = []
    for record in response.hourly:
        year, month, day, hour = parse_hour(record.datetime)
        entries.append(HourForecast(year=year, month=month, day=day, hour=hour, uv=record.uv))
    return entries


class UVService:
    """Fetches hourly UV forecasts from the configured endpoint."""

    def __init__(self, config: ApiConfig | None = None):
        self.config = config or ApiConfig()

    def forecast_url(self, postal_code: str) -> str:
        """Return the request URL for a postal code."""
        return f"{self.config.base_url}/{postal_code}"

    async def fetch_forecast(self, postal_code: str) -> list[HourForecast]:
        """Fetch and parse the forecast for a postal code.

        Raises:
            TransportError: On connection failures and non-2xx responses.
            DecodeError: When the body is not JSON or has the wrong shape.
        """
        url = self.forecast_url(postal_code)
        logger.debug(f"Fetching UV forecast from {url}")

        try:
            async with httpx.AsyncClient(timeout=self.config.timeout_seconds) as client:
                response = await client.get(url)
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.warning(f"HTTP {status} fetching UV forecast for {postal_code}")
            raise TransportError(f"HTTP {status}") from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            # InvalidURL is not an HTTPError
            logger.warning(f"Error fetching UV forecast for {postal_code}: {e!r}")
            raise TransportError(str(e) or type(e).__name__) from e

        try:
            data = response.json()
        except ValueError as e:
            logger.warning(f"UV forecast for {postal_code} is not valid JSON")
            raise DecodeError("Response is not valid JSON") from e

        try:
            entries = parse_response(data)
        except DecodeError as e:
            logger.warning(f"Error parsing UV forecast for {postal_code}: {e}")
            raise

        logger.info(f"Fetched {len(entries)} UV forecast hours for {postal_code}")
        return entries
