# src/carbonregions/collectors/electricity_maps_collector.py
import logging

import httpx

from ..core.config import config
from ..models.lookup import LookupResult
from .base_collector import BaseCollector

logger = logging.getLogger(__name__)


class ElectricityMapsCollector(BaseCollector):
    """
    Resolves coordinates to an Electricity Maps zone code.
    """

    name = "electricity_maps"

    def __init__(self, client: httpx.Client, api_key: str, zone_url: str = None):
        super().__init__(client)
        self.zone_url = zone_url or config.ELECTRICITY_MAPS_ZONE_URL
        self.headers = {"auth-token": api_key}

    def lookup(self, latitude: float, longitude: float) -> LookupResult:
        """
        Queries the zone covering the given coordinates.

        A 404 means Electricity Maps has no coverage there and is returned as
        NO_COVERAGE. Any other non-200 status is a FAILURE.
        """
        params = {"lat": f"{latitude:f}", "lon": f"{longitude:f}"}
        logger.debug("Fetching Electricity Maps zone for %s", params)

        response = self._get(self.zone_url, params=params, headers=self.headers)

        if response.status_code == httpx.codes.NOT_FOUND:
            return LookupResult.no_coverage(self.name)
        if response.status_code != httpx.codes.OK:
            return LookupResult.failure(self.name, status_code=response.status_code)

        data = self._json_object(response)
        return LookupResult.found(self.name, data.get("zone") or "")

    def get_zone(self, latitude: float, longitude: float) -> str:
        """Returns the zone code, or an empty string when there is no coverage."""
        return self.lookup(latitude, longitude).code_or_raise()
