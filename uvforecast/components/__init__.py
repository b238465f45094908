"""UI components for the UV forecast client."""

from .forecast_panel import ForecastPanel, ForecastView, format_hour, render_forecast
from .search_bar import SearchBar
from .status_bar import StatusBar

__all__ = ["ForecastPanel", "ForecastView", "SearchBar", "StatusBar", "format_hour", "render_forecast"]
