"""Pytest configuration and fixtures."""

import json
import tempfile
from pathlib import Path

import pytest

from uvforecast.models.config import ApiConfig
from uvforecast.services.uv_service import UVService

BASE_URL = "https://uv.example.com/api/hourly"


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_config_data():
    """Sample configuration data for testing."""
    return {
        "api": {
            "base_url": BASE_URL,
            "timeout_seconds": 10,
            "info_url": "https://uv.example.com/about",
        },
        "settings": {
            "routing": True,
            "midnight_as_twelve": False,
            "log_level": "INFO",
        },
    }


@pytest.fixture
def sample_config_file(temp_dir, sample_config_data):
    """Create a sample config file for testing."""
    config_path = temp_dir / "config.json"
    with open(config_path, "w") as f:
        json.dump(sample_config_data, f)
    return config_path


@pytest.fixture
def hourly_payload():
    """A valid forecast body with three hours."""
    return {
        "hourly": [
            {"datetime": "2024-06-01T13:00:00Z", "uv": 7},
            {"datetime": "2024-06-01T14:00:00Z", "uv": 5},
            {"datetime": "2024-06-01T15:00:00Z", "uv": 3},
        ]
    }


@pytest.fixture
def service():
    """UV service pointed at the mocked endpoint."""
    return UVService(ApiConfig(base_url=BASE_URL))
