"""Read and calc functions for industry data sources.

Read functions load a raw source into tables; calc functions turn those
tables into unit- and provenance-annotated outputs for the host framework.
"""

from industry_sources.library.sources.andrew2019 import read_andrew2019
from industry_sources.library.sources.cement import calc_cement_production
from industry_sources.library.sources.country_groups import read_country_groups
from industry_sources.library.sources.regions import (
    IEA_WEIO_REGION_MODIFICATIONS,
    RegionModification,
    region_modifications_frame,
    split_country_groups,
    split_region_values,
    validate_region_modifications,
)
from industry_sources.library.sources.registry import (
    get_source_reader,
    get_source_readers,
    read_active_sources,
)
from industry_sources.library.sources.results import CalculationOutput, MadratMule
from industry_sources.library.sources.sheets import read_region_sheets
from industry_sources.library.sources.weio import read_iea_weio_2014

__all__ = [
    "IEA_WEIO_REGION_MODIFICATIONS",
    "CalculationOutput",
    "MadratMule",
    "RegionModification",
    "calc_cement_production",
    "get_source_reader",
    "get_source_readers",
    "read_active_sources",
    "read_andrew2019",
    "read_country_groups",
    "read_iea_weio_2014",
    "read_region_sheets",
    "region_modifications_frame",
    "split_country_groups",
    "split_region_values",
    "validate_region_modifications",
]
