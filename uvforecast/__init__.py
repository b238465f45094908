"""UV Forecast - hourly UV-index forecast for a postal code, in the terminal."""

__version__ = "0.1.0"
