# src/carbonregions/data/region_loader.py

"""
Reads the cloud region table.

The file is UTF-8 CSV: a header row followed by rows of exactly ten fields in
the order of `models.region.HEADER`. Rows with any other field count are
skipped. Coordinates missing from a row are resolved while loading.
"""

import csv
import logging
from pathlib import Path
from typing import Iterable, Iterator, List, TextIO, Union

from ..core.geolocation import GeolocationResolver
from ..models.region import FIELD_COUNT, CloudRegion

logger = logging.getLogger(__name__)


def iter_rows(fh: TextIO) -> Iterator[List[str]]:
    """
    Yields the well-formed data rows of an open CSV file, skipping the header.
    """
    reader = csv.reader(fh)
    if next(reader, None) is None:
        logger.warning("Input table is empty.")
        return

    skipped = 0
    for row in reader:
        if not row:
            continue
        if len(row) != FIELD_COUNT:
            skipped += 1
            logger.warning(
                "Skipping malformed row on line %d: expected %d fields, got %d.",
                reader.line_num,
                FIELD_COUNT,
                len(row),
            )
            continue
        yield row

    if skipped:
        logger.warning(f"Skipped {skipped} malformed row(s).")


def build_region(row: List[str], resolver: GeolocationResolver) -> CloudRegion:
    cloud_provider, _, location, location_override, _, location_type, latitude, longitude, _, _ = row

    lat, lon = resolver.resolve(
        cloud_provider,
        location,
        location_override,
        location_type,
        latitude=latitude,
        longitude=longitude,
    )

    return CloudRegion.from_row(row, lat, lon)


def load_regions(source: Union[str, Path, Iterable[str]], resolver: GeolocationResolver) -> List[CloudRegion]:
    """
    Loads every well-formed row of the table into a CloudRegion, in file order.

    `source` is a path or an already open text stream.
    """
    if isinstance(source, (str, Path)):
        with open(source, "r", encoding="utf-8", newline="") as fh:
            return load_regions(fh, resolver)

    regions = [build_region(row, resolver) for row in iter_rows(source)]
    logger.info(f"Loaded {len(regions)} regions.")
    return regions
