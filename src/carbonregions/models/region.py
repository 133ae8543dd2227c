# src/carbonregions/models/region.py
"""
Pydantic model for one row of the cloud region table, plus the helpers that
convert it to and from the ordered CSV fields.
"""

from typing import List

from pydantic import BaseModel, Field

HEADER = [
    "cloud_provider",
    "cloud_region",
    "location",
    "location_override",
    "location_source",
    "location_type",
    "latitude",
    "longitude",
    "electricity_maps_zone",
    "watt_time_region",
]

FIELD_COUNT = len(HEADER)

AWS_CLOUD_PROVIDER = "Amazon Web Services"


class CloudRegion(BaseModel):
    """
    A cloud provider region and the grid identifiers derived from its location.

    Attributes:
        cloud_provider: Name of the cloud provider (e.g., "Amazon Web Services")
        cloud_region: The provider's region identifier (e.g., "us-east-1")
        location: Human-readable location text (e.g., "US East (N. Virginia)")
        location_override: Optional replacement for `location` when geocoding
        location_source: Provenance tag, passed through unchanged
        location_type: Geocoder query field for the location (e.g., "city", "state")
        latitude: Decimal degrees, 0.0 when unresolved
        longitude: Decimal degrees, 0.0 when unresolved
        electricity_maps_zone: Electricity Maps zone code, empty until resolved
        watt_time_region: WattTime region code, empty until resolved
    """

    cloud_provider: str = Field(..., description="Cloud provider name")
    cloud_region: str = Field(..., description="Cloud region identifier")
    location: str = Field("", description="Human-readable location")
    location_override: str = Field("", description="Replacement location used for geocoding")
    location_source: str = Field("", description="Where the location came from")
    location_type: str = Field("", description="Geocoder query field")
    latitude: float = Field(0.0, description="Latitude in decimal degrees")
    longitude: float = Field(0.0, description="Longitude in decimal degrees")
    electricity_maps_zone: str = Field("", description="Electricity Maps zone code")
    watt_time_region: str = Field("", description="WattTime region code")

    @classmethod
    def from_row(cls, row: List[str], latitude: float, longitude: float) -> "CloudRegion":
        """
        Builds a region from the 10 ordered CSV fields. The coordinate columns
        are text in the table, so the caller passes the resolved values.
        """
        if len(row) != FIELD_COUNT:
            raise ValueError(f"expected {FIELD_COUNT} fields, got {len(row)}")

        values = dict(zip(HEADER, row))
        values.update(latitude=latitude, longitude=longitude)
        return cls(**values)

    def to_row(self) -> List[str]:
        """Serializes the region into the 10 ordered CSV fields."""
        return [
            self.cloud_provider,
            self.cloud_region,
            self.location,
            self.location_override,
            self.location_source,
            self.location_type,
            f"{self.latitude:.6f}",
            f"{self.longitude:.6f}",
            self.electricity_maps_zone,
            self.watt_time_region,
        ]
