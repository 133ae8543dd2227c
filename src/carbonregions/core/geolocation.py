# src/carbonregions/core/geolocation.py
"""
Resolves the coordinates of a cloud region.

Coordinates already present in the table are authoritative. Otherwise the
location text is geocoded, after choosing between the override and the
provider's own location string.
"""

import logging
from typing import Tuple

from ..collectors.nominatim_collector import UNRESOLVED, NominatimCollector
from ..models.region import AWS_CLOUD_PROVIDER
from .exceptions import ParseError

logger = logging.getLogger(__name__)


def parse_aws_location(location: str) -> str:
    """
    Extracts the human-readable name from an AWS location string.

    "US East (N. Virginia)" -> "N. Virginia". Only the first group counts:
    "Asia Pacific (Osaka) (Local)" -> "Osaka". Text without an opening
    parenthesis has nothing to extract and yields "".
    """
    parts = location.split("(")
    if len(parts) < 2:
        return ""
    name = parts[1].rstrip()
    if name.endswith(")"):
        name = name[:-1]
    return name


def geocoding_text(cloud_provider: str, location: str, location_override: str) -> str:
    """
    Returns the text to geocode for a region: the override when present,
    otherwise the location (normalized first for AWS).
    """
    if location_override:
        return location_override
    if cloud_provider == AWS_CLOUD_PROVIDER:
        return parse_aws_location(location)
    return location


def parse_coordinates(latitude: str, longitude: str) -> Tuple[float, float]:
    try:
        return float(latitude), float(longitude)
    except ValueError as e:
        raise ParseError(f"invalid coordinates ({latitude!r}, {longitude!r}): {e}") from e


class GeolocationResolver:
    """Turns a region's location fields into (latitude, longitude)."""

    def __init__(self, geocoder: NominatimCollector):
        self.geocoder = geocoder

    def resolve(
        self,
        cloud_provider: str,
        location: str,
        location_override: str,
        location_type: str,
        latitude: str = "",
        longitude: str = "",
    ) -> Tuple[float, float]:
        if latitude != "" and longitude != "":
            return parse_coordinates(latitude, longitude)

        text = geocoding_text(cloud_provider, location, location_override)
        if not text:
            logger.warning(
                "No geocodable location in '%s' (provider: %s); leaving coordinates unresolved.",
                location,
                cloud_provider,
            )
            return UNRESOLVED

        return self.geocoder.geocode(location_type, text)
