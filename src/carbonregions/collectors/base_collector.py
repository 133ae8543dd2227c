# src/carbonregions/collectors/base_collector.py
"""
This module defines the base class shared by every outbound HTTP client.
Keeping the request and decode steps in one place gives all providers the
same error taxonomy: transport failures raise TransportError and unreadable
bodies raise ParseError.
"""

import logging
from typing import Any, Optional

import httpx

from ..core.exceptions import ParseError, TransportError

logger = logging.getLogger(__name__)


class BaseCollector:
    """
    Base class for the geocoder and the carbon data provider clients.
    """

    name: str = "provider"

    def __init__(self, client: httpx.Client):
        self.client = client

    def _get(
        self,
        url: str,
        params: Optional[dict] = None,
        headers: Optional[dict] = None,
        auth=None,
    ) -> httpx.Response:
        try:
            return self.client.get(url, params=params, headers=headers, auth=auth)
        except httpx.HTTPError as e:
            raise TransportError(f"{self.name}: request to {url} failed: {e}") from e

    def _json(self, response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise ParseError(f"{self.name}: malformed JSON response: {e}") from e

    def _json_object(self, response: httpx.Response) -> dict:
        data = self._json(response)
        if not isinstance(data, dict):
            raise ParseError(f"{self.name}: expected a JSON object, got {type(data).__name__}")
        return data
