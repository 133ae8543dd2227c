import logging
from typing import Tuple

import httpx

from ..core.config import config
from ..core.exceptions import ParseError, ProviderError
from .base_collector import BaseCollector

logger = logging.getLogger(__name__)

UNRESOLVED = (0.0, 0.0)


class NominatimCollector(BaseCollector):
    """
    Geocodes free-text place names through the OpenStreetMap Nominatim search API.
    """

    name = "nominatim"

    def __init__(self, client: httpx.Client, search_url: str = None):
        super().__init__(client)
        self.search_url = search_url or config.NOMINATIM_SEARCH_URL

    def geocode(self, location_type: str, location: str) -> Tuple[float, float]:
        """
        Returns the (latitude, longitude) of the single candidate matching the
        query, or (0.0, 0.0) when the geocoder finds zero or several candidates.

        `location_type` is the structured query field ("city", "state", ...).
        An empty type falls back to the free-form `q` field.
        """
        params = {location_type or "q": location, "format": "json", "limit": "1"}
        logger.debug("Geocoding %s", params)

        response = self._get(self.search_url, params=params)
        if response.status_code != httpx.codes.OK:
            raise ProviderError(self.name, status_code=response.status_code)

        places = self._json(response)
        if not isinstance(places, list):
            raise ParseError(f"{self.name}: expected a JSON array, got {type(places).__name__}")

        if len(places) != 1:
            logger.warning(
                "Geocoder returned %d candidates for %s='%s'; leaving coordinates unresolved.",
                len(places),
                location_type,
                location,
            )
            return UNRESOLVED

        place = places[0]
        try:
            return float(place["lat"]), float(place["lon"])
        except (KeyError, TypeError, ValueError) as e:
            raise ParseError(f"{self.name}: invalid coordinates in {place!r}: {e}") from e
