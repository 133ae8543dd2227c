"""Exporters package for the enriched region table."""

from .csv_exporter import CSVExporter

__all__ = ["CSVExporter"]
