# src/carbonregions/collectors/watttime_collector.py
import logging

import httpx

from ..core.config import DEFAULT_SIGNAL_TYPE, config
from ..core.exceptions import ParseError, ProviderError
from ..models.lookup import LookupResult
from .base_collector import BaseCollector

logger = logging.getLogger(__name__)


class WattTimeCollector(BaseCollector):
    """
    Resolves coordinates to a WattTime region code.

    WattTime requires a bearer token, obtained once per run with `login`.
    """

    name = "watttime"

    def __init__(
        self,
        client: httpx.Client,
        token: str = None,
        region_url: str = None,
        login_url: str = None,
        signal_type: str = DEFAULT_SIGNAL_TYPE,
    ):
        super().__init__(client)
        self.region_url = region_url or config.WATT_TIME_REGION_URL
        self.login_url = login_url or config.WATT_TIME_LOGIN_URL
        self.signal_type = signal_type
        self.token = token

    def login(self, username: str, password: str) -> str:
        """
        Exchanges a username and password for a bearer token using basic auth.
        The token is kept on the collector for subsequent lookups.
        """
        logger.info("Logging in to WattTime as %s", username)
        response = self._get(self.login_url, auth=httpx.BasicAuth(username, password))
        if response.status_code != httpx.codes.OK:
            raise ProviderError(self.name, status_code=response.status_code)

        token = self._json_object(response).get("token")
        if not token:
            raise ParseError(f"{self.name}: login response did not contain a token")

        self.token = token
        return token

    def lookup(self, latitude: float, longitude: float, signal_type: str = None) -> LookupResult:
        """
        Queries the region covering the given coordinates.

        A 404 means WattTime has no coverage there and is returned as
        NO_COVERAGE. Any other non-200 status is a FAILURE.
        """
        if not self.token:
            raise ProviderError(self.name, reason="no access token, call login() first")

        params = {
            "latitude": f"{latitude:f}",
            "longitude": f"{longitude:f}",
            "signal_type": signal_type or self.signal_type,
        }
        logger.debug("Fetching WattTime region for %s", params)

        response = self._get(self.region_url, params=params, headers={"Authorization": f"Bearer {self.token}"})

        if response.status_code == httpx.codes.NOT_FOUND:
            return LookupResult.no_coverage(self.name)
        if response.status_code != httpx.codes.OK:
            return LookupResult.failure(self.name, status_code=response.status_code)

        data = self._json_object(response)
        return LookupResult.found(self.name, data.get("region") or "")

    def get_region(self, latitude: float, longitude: float) -> str:
        """Returns the region code, or an empty string when there is no coverage."""
        return self.lookup(latitude, longitude).code_or_raise()
