# src/carbonregions/core/factory.py
"""
Factory function to wire the enrichment pipeline from configuration.
"""

import logging

from ..collectors.electricity_maps_collector import ElectricityMapsCollector
from ..collectors.nominatim_collector import NominatimCollector
from ..collectors.watttime_collector import WattTimeCollector
from ..utils.http_client import get_http_client
from .config import Config, PipelineSettings
from .exceptions import ConfigurationError
from .geolocation import GeolocationResolver
from .processor import EnrichmentPipeline

logger = logging.getLogger(__name__)


def get_pipeline(settings: PipelineSettings = None, cfg: Config = None) -> EnrichmentPipeline:
    """
    Builds an EnrichmentPipeline whose collectors share one HTTP client.

    Configuration is read when this is called, not at import, so tests and
    the CLI see the current environment.
    """
    cfg = cfg or Config()
    try:
        cfg.validate_instance()
        settings = settings or PipelineSettings.from_config(cfg)
    except ValueError as e:
        raise ConfigurationError(str(e)) from e

    client = get_http_client()
    geocoder = NominatimCollector(client, search_url=cfg.NOMINATIM_SEARCH_URL)
    electricity_maps = ElectricityMapsCollector(client, settings.api_key, zone_url=cfg.ELECTRICITY_MAPS_ZONE_URL)
    watttime = WattTimeCollector(
        client,
        region_url=cfg.WATT_TIME_REGION_URL,
        login_url=cfg.WATT_TIME_LOGIN_URL,
        signal_type=settings.signal_type,
    )

    logger.debug("Pipeline configured with an inter-row delay of %ss", settings.inter_row_delay)
    return EnrichmentPipeline(
        settings=settings,
        resolver=GeolocationResolver(geocoder),
        electricity_maps_collector=electricity_maps,
        watttime_collector=watttime,
        client=client,
    )
