"""
Utility functions for the industry-sources library.

"""

from industry_sources.library.utils.data.config import load_data_sources_config

from .dataframes import (
    TimeseriesDataFrame,
    convert_country_name_to_iso3c,
    ensure_string_year_columns,
    get_year_columns,
    require_columns,
    resolve_project_path,
    split_delimited_column,
)
from .excel import CellRange, parse_cell_range, slice_cell_range
from .units import convert_timeseries_unit, get_default_unit_registry

__all__ = [
    "CellRange",
    "TimeseriesDataFrame",
    "convert_country_name_to_iso3c",
    "convert_timeseries_unit",
    "ensure_string_year_columns",
    "get_default_unit_registry",
    "get_year_columns",
    "load_data_sources_config",
    "parse_cell_range",
    "require_columns",
    "resolve_project_path",
    "slice_cell_range",
    "split_delimited_column",
]
