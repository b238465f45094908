"""Configuration models using Pydantic for validation."""

from pathlib import Path
from typing import Literal
from urllib.parse import quote, urlparse

from pydantic import BaseModel, Field, field_validator

DEFAULT_BASE_URL = "http://localhost:8000/uv/hourly"


class ApiConfig(BaseModel):
    """Remote UV forecast endpoint."""

    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float | None = None  # None waits indefinitely
    info_url: str = ""  # shown as an external "Data source" link when set

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Validate that the base URL is a valid HTTP/HTTPS URL."""
        try:
            parsed = urlparse(v)
            if parsed.scheme not in ("http", "https"):
                raise ValueError(f"URL must use http or https scheme, got '{parsed.scheme}'")
            if not parsed.netloc:
                raise ValueError("URL must have a valid host")
        except Exception as e:
            raise ValueError(f"Invalid URL '{v}': {e}")
        return v.rstrip("/")

    @field_validator("info_url")
    @classmethod
    def validate_info_url(cls, v: str) -> str:
        """Validate that a configured info URL is absolute HTTP/HTTPS.

        Quotes, brackets, backslashes and whitespace are percent-encoded so
        the URL can sit inside a click action in the status bar markup.
        """
        if v and urlparse(v).scheme not in ("http", "https"):
            raise ValueError(f"Info URL must use http or https scheme: '{v}'")
        return quote(v, safe=":/?#@!$&()*+,;=%~")

    @field_validator("timeout_seconds")
    @classmethod
    def validate_timeout(cls, v: float | None) -> float | None:
        """Validate that a configured timeout is positive."""
        if v is not None and v <= 0:
            raise ValueError(f"Timeout must be positive, got {v}")
        return v


class Settings(BaseModel):
    """General application settings."""

    routing: bool = True  # False selects the variant without URL routing
    midnight_as_twelve: bool = False
    app_origin: str = ""  # absolute links on this origin stay inside the app
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    @field_validator("app_origin")
    @classmethod
    def validate_app_origin(cls, v: str) -> str:
        """Validate that a configured origin is scheme and host only."""
        if not v:
            return v
        parsed = urlparse(v)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError(f"App origin must be an http or https URL with a host: '{v}'")
        if parsed.path not in ("", "/"):
            raise ValueError(f"App origin must not have a path: '{v}'")
        return f"{parsed.scheme}://{parsed.netloc}"


class Config(BaseModel):
    """Main configuration model."""

    api: ApiConfig = Field(default_factory=ApiConfig)
    settings: Settings = Field(default_factory=Settings)

    @classmethod
    def load(cls, path: Path | str = "config.json") -> "Config":
        """Load configuration from a JSON file."""
        import json

        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            data = json.load(f)

        return cls.model_validate(data)

    @classmethod
    def load_or_default(cls, path: Path | str = "config.json") -> "Config":
        """Load configuration or return default if file doesn't exist."""
        try:
            return cls.load(path)
        except FileNotFoundError:
            return cls()
