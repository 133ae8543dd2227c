# tests/exporters/test_csv_exporter.py

import io

from carbonregions.exporters.csv_exporter import CSVExporter
from carbonregions.models.region import CloudRegion

EXPECTED_HEADER = (
    "cloud_provider,cloud_region,location,location_override,location_source,"
    "location_type,latitude,longitude,electricity_maps_zone,watt_time_region"
)


def _region(**overrides):
    values = dict(
        cloud_provider="Amazon Web Services",
        cloud_region="us-east-1",
        location="US East (N. Virginia)",
        location_source="manual",
        location_type="city",
        latitude=37.5,
        longitude=-78.6,
        electricity_maps_zone="US-VA",
        watt_time_region="PJM_DC",
    )
    values.update(overrides)
    return CloudRegion(**values)


def test_csv_exporter_empty_data():
    exporter = CSVExporter()
    out = io.StringIO()

    written = exporter.export([], out)

    assert written == 0
    assert out.getvalue() == EXPECTED_HEADER + "\n"


def test_csv_exporter_quotes_fields_with_commas():
    exporter = CSVExporter()
    out = io.StringIO()

    exporter.export([_region(location="Asia Pacific (Seoul, South Korea)")], out)

    lines = out.getvalue().splitlines()
    assert lines[1] == (
        'Amazon Web Services,us-east-1,"Asia Pacific (Seoul, South Korea)",,manual,city,'
        "37.500000,-78.600000,US-VA,PJM_DC"
    )


def test_csv_exporter_preserves_order():
    exporter = CSVExporter()
    out = io.StringIO()

    exporter.export([_region(cloud_region=name) for name in ("b", "a", "c")], out)

    rows = out.getvalue().splitlines()[1:]
    assert [row.split(",")[1] for row in rows] == ["b", "a", "c"]


def test_csv_exporter_to_path(tmp_path):
    exporter = CSVExporter()
    out = tmp_path / "nested" / "regions.csv"

    written = exporter.export([_region()], out)

    assert written == 1
    content = out.read_text(encoding="utf-8")
    assert content.startswith(EXPECTED_HEADER)
    assert "US-VA,PJM_DC" in content


def test_csv_exporter_defaults_to_stdout(capsys):
    CSVExporter().export([_region()])

    assert capsys.readouterr().out.startswith(EXPECTED_HEADER)
