"""
Pipeline validation functions for the industry-sources library.

"""

from __future__ import annotations

import pandas as pd

from industry_sources.library.error_messages import format_error
from industry_sources.library.exceptions import (
    CountryGroupIntegrityError,
    DataProcessingError,
    OutputValidationError,
)
from industry_sources.library.utils.dataframes import (
    TimeseriesDataFrame,
    get_year_columns,
)


def validate_index_structure(
    df: TimeseriesDataFrame,
    dataset_name_for_error_msg: str,
    expected_index_names: list[str] | None = None,
) -> None:
    """
    Validate that TimeseriesDataFrame has expected index structure.

    Parameters
    ----------
    df : TimeseriesDataFrame
        TimeseriesDataFrame to validate
    dataset_name_for_error_msg : str
        Name of the dataset for error messages
    expected_index_names : list[str], optional
        Expected index level names (default: ['iso3c'])

    Raises
    ------
    DataProcessingError
        If index structure does not match expected
    """
    expected_index_names = expected_index_names or ["iso3c"]

    if isinstance(df.index, pd.MultiIndex):
        actual_index_names = list(df.index.names)
    else:
        actual_index_names = [df.index.name] if df.index.name else ["index"]

    if actual_index_names != expected_index_names:
        raise DataProcessingError(
            format_error(
                "index_structure_mismatch",
                dataset_name=dataset_name_for_error_msg,
                expected=expected_index_names,
                actual=actual_index_names,
            )
        )


def validate_has_year_columns(
    df: TimeseriesDataFrame, dataset_name_for_error_msg: str
) -> None:
    """
    Validate that TimeseriesDataFrame has at least one year column.

    Parameters
    ----------
    df : TimeseriesDataFrame
        TimeseriesDataFrame to validate
    dataset_name_for_error_msg : str
        Name of the dataset for error messages

    Raises
    ------
    DataProcessingError
        If no year columns are found
    """
    if not get_year_columns(df):
        raise DataProcessingError(
            format_error(
                "year_columns_missing",
                dataset_name=dataset_name_for_error_msg,
                found_columns=list(df.columns),
            )
        )


def validate_not_empty(df: pd.DataFrame, dataset_name_for_error_msg: str) -> None:
    """Raise DataProcessingError if ``df`` has no rows."""
    if df.empty:
        raise DataProcessingError(
            format_error("empty_dataframe", dataset_name=dataset_name_for_error_msg)
        )


def validate_no_null_values(
    df: pd.DataFrame, dataset_name_for_error_msg: str
) -> None:
    """
    Validate that a result table contains no null values.

    Raises
    ------
    OutputValidationError
        If any cell is null
    """
    null_count = int(df.isna().sum().sum())
    if null_count:
        raise OutputValidationError(
            f"{dataset_name_for_error_msg} contains {null_count} null value(s)"
        )


def validate_unique_country_assignment(
    country_groups: pd.DataFrame,
    region_column: str = "IEA region",
    country_column: str = "iso3c",
) -> None:
    """
    Verify that every country code belongs to exactly one region.

    Parameters
    ----------
    country_groups
        Relation with one row per (region, country code)
    region_column
        Name of the region column
    country_column
        Name of the country code column

    Raises
    ------
    CountryGroupIntegrityError
        If any country code appears in more than one region
    """
    counts = country_groups.groupby(country_column)[region_column].transform("size")
    duplicated = country_groups[counts > 1]
    if duplicated.empty:
        return

    regions_by_country = duplicated.groupby(country_column, sort=True)[
        region_column
    ].agg(lambda regions: ", ".join(map(str, regions)))
    lines = "\n".join(
        f"    {country}: {regions}" for country, regions in regions_by_country.items()
    )
    raise CountryGroupIntegrityError(
        format_error(
            "duplicate_country_groups",
            count=len(regions_by_country),
            duplicates=lines,
        )
    )
