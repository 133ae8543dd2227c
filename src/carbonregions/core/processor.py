# src/carbonregions/core/processor.py
import logging
import time
from pathlib import Path
from typing import Callable, Iterable, List, Optional, TextIO, Union

import httpx

from ..collectors.electricity_maps_collector import ElectricityMapsCollector
from ..collectors.watttime_collector import WattTimeCollector
from ..data.region_loader import load_regions
from ..exporters.csv_exporter import CSVExporter
from ..models.region import CloudRegion
from .config import (
    ELECTRICITY_MAPS_API_KEY_ENV_VAR,
    WATT_TIME_PASSWORD_ENV_VAR,
    WATT_TIME_USER_ENV_VAR,
    PipelineSettings,
)
from .exceptions import ConfigurationError
from .geolocation import GeolocationResolver

logger = logging.getLogger(__name__)


class EnrichmentPipeline:
    """
    Fills in the Electricity Maps zone and WattTime region of every cloud region.

    A run has three strictly sequential phases: bootstrap (credentials and
    WattTime login), load (read the table, geocoding rows without
    coordinates) and enrich & emit (look up missing codes row by row, then
    write the whole table). The first error aborts the run before anything
    is written.
    """

    def __init__(
        self,
        settings: PipelineSettings,
        resolver: GeolocationResolver,
        electricity_maps_collector: ElectricityMapsCollector,
        watttime_collector: WattTimeCollector,
        exporter: Optional[CSVExporter] = None,
        client: Optional[httpx.Client] = None,
        sleep: Optional[Callable[[float], None]] = None,
    ):
        self.settings = settings
        self.resolver = resolver
        self.electricity_maps_collector = electricity_maps_collector
        self.watttime_collector = watttime_collector
        self.exporter = exporter or CSVExporter()
        self.client = client
        self.sleep = sleep or time.sleep
        self.lookup_count = 0

    def bootstrap(self) -> str:
        """
        Checks that every credential is present and logs in to WattTime.
        Returns the bearer token.
        """
        required = (
            (ELECTRICITY_MAPS_API_KEY_ENV_VAR, self.settings.api_key),
            (WATT_TIME_USER_ENV_VAR, self.settings.watt_time_user),
            (WATT_TIME_PASSWORD_ENV_VAR, self.settings.watt_time_password),
        )
        for env_var, value in required:
            if not value:
                raise ConfigurationError(f"{env_var} env var must be set")

        logger.info("--- Bootstrap: obtaining WattTime access token ---")
        return self.watttime_collector.login(self.settings.watt_time_user, self.settings.watt_time_password)

    def load(self, source: Union[str, Path, TextIO]) -> List[CloudRegion]:
        logger.info("--- Load: reading regions ---")
        return load_regions(source, self.resolver)

    def enrich(self, regions: List[CloudRegion]) -> List[CloudRegion]:
        """
        Looks up the codes that are still empty, in place and in order.

        Populated codes are never overwritten, so a finished table fed back in
        triggers no lookups. The pipeline pauses after every row, whether or
        not a lookup happened, to stay under the providers' rate limits.
        """
        logger.info(f"--- Enrich: processing {len(regions)} regions ---")
        for region in regions:
            if not region.electricity_maps_zone:
                self.lookup_count += 1
                region.electricity_maps_zone = self.electricity_maps_collector.get_zone(
                    region.latitude, region.longitude
                )
                if not region.electricity_maps_zone:
                    logger.warning(
                        "No Electricity Maps coverage for %s/%s at (%f, %f).",
                        region.cloud_provider,
                        region.cloud_region,
                        region.latitude,
                        region.longitude,
                    )

            if not region.watt_time_region:
                self.lookup_count += 1
                region.watt_time_region = self.watttime_collector.get_region(region.latitude, region.longitude)
                if not region.watt_time_region:
                    logger.warning(
                        "No WattTime coverage for %s/%s at (%f, %f).",
                        region.cloud_provider,
                        region.cloud_region,
                        region.latitude,
                        region.longitude,
                    )

            logger.info(
                "Region %s/%s -> zone '%s', region '%s'",
                region.cloud_provider,
                region.cloud_region,
                region.electricity_maps_zone,
                region.watt_time_region,
            )

            self.sleep(self.settings.inter_row_delay)

        return regions

    def emit(self, regions: Iterable[CloudRegion], target: Optional[Union[str, Path, TextIO]] = None) -> int:
        logger.info("--- Emit: writing regions ---")
        return self.exporter.export(regions, target)

    def run(
        self,
        source: Union[str, Path, TextIO],
        target: Optional[Union[str, Path, TextIO]] = None,
    ) -> List[CloudRegion]:
        """
        Runs bootstrap, load and enrich & emit. Returns the enriched regions.
        """
        self.bootstrap()
        regions = self.enrich(self.load(source))
        written = self.emit(regions, target)
        logger.info(f"Wrote {written} regions ({self.lookup_count} lookups).")
        return regions

    def close(self):
        if self.client is not None:
            self.client.close()
