"""
carbonregions

Enriches cloud-provider compute regions with the grid identifiers used by
Electricity Maps and WattTime.
"""

__version__ = "0.1.0"
