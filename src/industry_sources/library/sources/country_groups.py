"""Reading of region to country mappings."""

from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd

from industry_sources.library.exceptions import DataLoadingError
from industry_sources.library.utils import require_columns, split_delimited_column

logger = logging.getLogger(__name__)

REGION_COLUMN = "IEA region"
COUNTRIES_COLUMN = "Countries"
ISO3C_COLUMN = "iso3c"


def read_country_groups(
    path: Path,
    region_column: str = REGION_COLUMN,
    countries_column: str = COUNTRIES_COLUMN,
    delimiter: str = ", ",
) -> pd.DataFrame:
    """Read a region to country-list table into one row per (region, country).

    Args:
        path: CSV file with one row per region and a column of
            ``delimiter``-joined ISO3 codes, e.g. ``"USA, CAN, MEX"``
        region_column: Name of the region column
        countries_column: Name of the column holding the joined country codes
        delimiter: Literal separator between country codes

    Returns
    -------
        DataFrame with columns ``[region_column, "iso3c"]``
    """
    path = Path(path)
    if not path.exists():
        raise DataLoadingError(f"Country groups file not found: {path}")

    raw = pd.read_csv(path, dtype=str)
    require_columns(raw, [region_column, countries_column], "country groups", path)

    raw = raw[[region_column, countries_column]]
    empty = raw[countries_column].isna()
    if empty.any():
        logger.warning(
            "Dropping %d region(s) without countries from %s: %s",
            int(empty.sum()),
            path.name,
            raw.loc[empty, region_column].tolist(),
        )
        raw = raw[~empty]

    country_groups = split_delimited_column(
        raw, countries_column, ISO3C_COLUMN, delimiter=delimiter
    )
    logger.info(
        "Read %d countries in %d regions from %s",
        len(country_groups),
        country_groups[region_column].nunique(),
        path.name,
    )
    return country_groups
