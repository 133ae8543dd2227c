from .electricity_maps_collector import ElectricityMapsCollector
from .nominatim_collector import NominatimCollector
from .watttime_collector import WattTimeCollector

__all__ = [
    "ElectricityMapsCollector",
    "NominatimCollector",
    "WattTimeCollector",
]
