"""
Tests for application settings.
"""

import pytest
from pydantic import ValidationError

from trip.config import Settings


class TestElevationProviderUrl:

    def test_not_configured(self):
        assert Settings(elevation_provider_host=None).elevation_provider_url is None

    def test_defaults(self):
        settings = Settings(elevation_provider_host="elevation.example.com")
        assert settings.elevation_provider_url == "https://elevation.example.com/api/v1/lookup"

    def test_port_and_protocol_colon(self):
        settings = Settings(
            elevation_provider_protocol="HTTP:",
            elevation_provider_host="localhost",
            elevation_provider_port=8080,
            elevation_provider_path="lookup",
        )
        assert settings.elevation_provider_url == "http://localhost:8080/lookup"

    def test_method_uppercased(self):
        assert Settings(elevation_provider_method="get").elevation_provider_method == "GET"


class TestEnvironment:

    def test_read_from_env(self, monkeypatch):
        monkeypatch.setenv("ELEVATION_DATASET_DIR", "/srv/elevation")
        monkeypatch.setenv("ELEVATION_TILE_CACHE_MS", "60000")
        settings = Settings()
        assert settings.elevation_dataset_dir == "/srv/elevation"
        assert settings.elevation_tile_cache_ms == 60000

    def test_flat_speed_must_be_positive(self):
        with pytest.raises(ValidationError):
            Settings(average_flat_speed_kph=0)
