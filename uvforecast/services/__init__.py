"""Services for fetching forecasts and routing."""

from .router import Link, Router, parse_route, route_path
from .uv_service import DecodeError, ForecastError, TransportError, UVService

__all__ = [
    "DecodeError",
    "ForecastError",
    "Link",
    "Router",
    "TransportError",
    "UVService",
    "parse_route",
    "route_path",
]
