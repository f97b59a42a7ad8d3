"""DataFrame utilities for the industry-sources library.

This module provides utilities for working with source tables including:
- Type definitions (TimeseriesDataFrame)
- Year column handling (ensure_string_year_columns, get_year_columns)
- Path resolution (resolve_project_path)
- Data processing (country codes, delimited list columns)
"""

from __future__ import annotations

from pathlib import Path

import country_converter as coco
import pandas as pd
from pyprojroot import here

from industry_sources.library.error_messages import format_error
from industry_sources.library.exceptions import DataLoadingError

__all__ = [
    # Type definition
    "TimeseriesDataFrame",
    # Year column utilities
    "ensure_string_year_columns",
    "get_year_columns",
    # Path handling
    "resolve_project_path",
    # Data processing
    "convert_country_name_to_iso3c",
    "require_columns",
    "split_delimited_column",
]

_COUNTRY_CONVERTER = coco.CountryConverter()


# ============================================================================
# Type Definitions
# ============================================================================

TimeseriesDataFrame = pd.DataFrame
"""A pandas DataFrame that contains timeseries data.

The columns should always be the time points (years), with rows indexed by
country and unit. Values should be numeric, with NaN for missing data.

Example:

                    1928  2018
iso3c  unit
USA    kt           10    15
CHN    kt           800   1000
...
"""


# ============================================================================
# Year Column Utilities
# ============================================================================


def ensure_string_year_columns(df: TimeseriesDataFrame) -> TimeseriesDataFrame:
    """Coerce numeric-looking year column labels to strings.

    Source tables often store years as ints (or floats after a pivot). We want
    these to be strings so that merges are not problematic.

    Parameters
    ----------
    df
        TimeseriesDataFrame that may contain year columns stored as ints or other types.

    Returns
    -------
    TimeseriesDataFrame
        Copy of ``df`` whose year columns are strings.
    """
    rename_map: dict = {}
    for col in df.columns:
        col_str = str(col)
        if isinstance(col, float) and col.is_integer():
            col_str = str(int(col))
        if col_str.isdigit() and col != col_str:
            rename_map[col] = col_str

    if not rename_map:
        return df.copy()

    return df.rename(columns=rename_map)


def get_year_columns(df: TimeseriesDataFrame) -> list[str]:
    """Return the labels of columns that look like years, as strings."""
    return [str(col) for col in df.columns if str(col).isdigit()]


# ============================================================================
# Path Handling
# ============================================================================


def resolve_project_path(path_str: str | Path) -> Path:
    """Resolve a path relative to the project root.

    Absolute paths are returned unchanged. Relative paths are resolved against
    the project root found by ``pyprojroot``, falling back to the current
    working directory when no project root can be found.
    """
    path = Path(path_str)
    if path.is_absolute():
        return path
    try:
        return here() / path
    except RuntimeError:
        return path


# ============================================================================
# Data Processing Utilities
# ============================================================================


def require_columns(
    df: pd.DataFrame,
    columns: list[str],
    dataset_name: str,
    path: Path | str = "the source file",
) -> None:
    """Raise DataLoadingError if any of ``columns`` is missing from ``df``."""
    missing = [col for col in columns if col not in df.columns]
    if missing:
        raise DataLoadingError(
            format_error(
                "missing_columns",
                dataset_name=dataset_name,
                expected=columns,
                found=list(df.columns),
                missing=missing,
                path=path,
            )
        )


def split_delimited_column(
    df: pd.DataFrame,
    column: str,
    new_column: str,
    delimiter: str = ", ",
) -> pd.DataFrame:
    """
    Turn a column of delimiter-joined lists into one row per list element.

    The delimiter is matched literally, never as a regular expression.

    Parameters
    ----------
    df
        DataFrame holding the delimited column
    column
        Name of the column with delimiter-joined values (e.g. "USA, CAN, MEX")
    new_column
        Name of the column holding the individual values in the result
    delimiter
        Literal separator between values

    Returns
    -------
    pd.DataFrame
        ``df`` without ``column``, with ``new_column`` appended and one row per
        element. Rows keep their original relative order.
    """
    result = df.assign(
        **{new_column: df[column].str.split(delimiter, regex=False)}
    ).drop(columns=column)
    result = result.explode(new_column, ignore_index=True)
    return result


def convert_country_name_to_iso3c(country_name: str | float | None) -> str | None:
    """Convert a source country label to ISO3C."""
    if pd.isna(country_name):
        return None

    country_name_str = str(country_name).strip()

    iso3c = _COUNTRY_CONVERTER.convert(
        names=country_name_str,
        to="ISO3",
        not_found=None,
    )
    if iso3c is None or iso3c == country_name_str or len(str(iso3c)) != 3:
        return None
    return iso3c
