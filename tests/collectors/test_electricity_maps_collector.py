# tests/collectors/test_electricity_maps_collector.py

import httpx
import pytest
import respx
from httpx import Response

from carbonregions.collectors.electricity_maps_collector import ElectricityMapsCollector
from carbonregions.core.exceptions import ParseError, ProviderError, TransportError
from carbonregions.models.lookup import LookupStatus
from conftest import ZONE_URL

# A sample successful API response for mocking
MOCK_API_RESPONSE = {
    "zone": "US-MIDA-PJM",
    "carbonIntensity": 402,
    "datetime": "2025-08-16T16:00:00.000Z",
}


@pytest.fixture
def collector(http_client):
    return ElectricityMapsCollector(http_client, "test-api-key", zone_url=ZONE_URL)


@respx.mock
def test_lookup_success(collector):
    """
    Tests that the collector calls the API with the coordinates and auth
    header and returns the zone.
    """
    # Arrange
    route = respx.get(ZONE_URL).mock(return_value=Response(200, json=MOCK_API_RESPONSE))

    # Act
    result = collector.lookup(39.0438, -77.4874)

    # Assert
    assert result.status == LookupStatus.FOUND
    assert result.code == "US-MIDA-PJM"
    request = route.calls.last.request
    assert request.headers["auth-token"] == "test-api-key"
    assert request.url.params["lat"] == "39.043800"
    assert request.url.params["lon"] == "-77.487400"


@respx.mock
def test_lookup_not_found_is_no_coverage(collector):
    """
    Tests that a 404 is a valid "no coverage" result rather than an error.
    """
    respx.get(ZONE_URL).mock(return_value=Response(404, json={"error": "No zone found"}))

    result = collector.lookup(0.0, 0.0)

    assert result.status == LookupStatus.NO_COVERAGE
    assert collector.get_zone(0.0, 0.0) == ""


@respx.mock
def test_lookup_server_error_is_failure(collector):
    respx.get(ZONE_URL).mock(return_value=Response(500))

    result = collector.lookup(48.85, 2.35)

    assert result.status == LookupStatus.FAILURE
    assert result.status_code == 500
    with pytest.raises(ProviderError):
        collector.get_zone(48.85, 2.35)


@respx.mock
def test_lookup_missing_zone_field(collector):
    respx.get(ZONE_URL).mock(return_value=Response(200, json={"carbonIntensity": 30}))

    assert collector.get_zone(48.85, 2.35) == ""


@respx.mock
def test_lookup_malformed_json(collector):
    respx.get(ZONE_URL).mock(return_value=Response(200, text="not json"))

    with pytest.raises(ParseError):
        collector.lookup(48.85, 2.35)


@respx.mock
def test_lookup_network_error(collector):
    respx.get(ZONE_URL).mock(side_effect=httpx.ConnectTimeout("timed out"))

    with pytest.raises(TransportError):
        collector.lookup(48.85, 2.35)
