# tests/conftest.py

import httpx
import pytest

GEOCODER_URL = "https://geocoder.test/search"
ZONE_URL = "https://electricitymaps.test/carbon-intensity/latest"
LOGIN_URL = "https://watttime.test/login"
REGION_URL = "https://watttime.test/v3/region-from-loc"

HEADER_LINE = (
    "cloud_provider,cloud_region,location,location_override,location_source,"
    "location_type,latitude,longitude,electricity_maps_zone,watt_time_region\n"
)


@pytest.fixture(autouse=True)
def mock_settings_env_vars(monkeypatch):
    """
    Pytest fixture to mock environment variables for the config module.

    This fixture runs automatically for every test (`autouse=True`). It uses
    monkeypatch to set environment variables, ensuring that credentials,
    endpoints and pacing are predictable and isolated from the actual
    environment. No test ever reaches a real provider.
    """
    monkeypatch.setenv("ELECTRICITY_MAPS_API_KEY", "test-api-key")
    monkeypatch.setenv("WATT_TIME_USER", "test-user")
    monkeypatch.setenv("WATT_TIME_PASSWORD", "test-password")
    monkeypatch.setenv("INTER_ROW_DELAY", "0")
    monkeypatch.setenv("NOMINATIM_SEARCH_URL", GEOCODER_URL)
    monkeypatch.setenv("ELECTRICITY_MAPS_ZONE_URL", ZONE_URL)
    monkeypatch.setenv("WATT_TIME_LOGIN_URL", LOGIN_URL)
    monkeypatch.setenv("WATT_TIME_REGION_URL", REGION_URL)


@pytest.fixture
def http_client():
    """
    Yields a plain httpx.Client; respx intercepts its requests in the tests.
    """
    client = httpx.Client()
    yield client
    client.close()


@pytest.fixture
def write_table(tmp_path):
    """
    Returns a helper that writes CSV data lines under the standard header and
    returns the file path.
    """

    def _write(*lines: str, name: str = "regions.csv"):
        path = tmp_path / name
        path.write_text(HEADER_LINE + "".join(line + "\n" for line in lines), encoding="utf-8")
        return path

    return _write
