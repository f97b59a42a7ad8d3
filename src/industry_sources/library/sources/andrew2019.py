"""Reading of the Andrew (2019) cement production data."""

from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd

from industry_sources.library.config.models import CementSourceConfig
from industry_sources.library.exceptions import ConfigurationError, DataLoadingError
from industry_sources.library.utils import (
    TimeseriesDataFrame,
    convert_country_name_to_iso3c,
    ensure_string_year_columns,
    require_columns,
    resolve_project_path,
)
from industry_sources.library.validation import validate_not_empty

logger = logging.getLogger(__name__)


def read_andrew2019(
    path: Path | str | None = None,
    config: CementSourceConfig | None = None,
) -> TimeseriesDataFrame:
    """Read annual cement production per country.

    The CSV has one year column and one column per country, named by
    country name. Columns that do not map to an ISO3 code (e.g. regional or
    global totals) are dropped. Columns mapping to the same ISO3 code are
    summed.

    Args:
        path: Path to the CSV file. Defaults to ``config.path``, relative to
            the project root.
        config: Source configuration with the year column name and the unit
            of the values (default: ``"Year"`` and ``"kt"``)

    Returns
    -------
        TimeseriesDataFrame indexed by ``["iso3c", "unit"]`` with string year
        columns. Missing values are kept as NaN.
    """
    if path is None:
        if config is None:
            raise ConfigurationError("Either path or config must be given")
        path = resolve_project_path(config.path)
    path = Path(path)
    year_column = config.year_column if config else "Year"
    source_unit = config.source_unit if config else "kt"

    if not path.exists():
        raise DataLoadingError(f"Cement production file not found: {path}")

    raw = pd.read_csv(path)
    require_columns(raw, [year_column], "cement production", path)
    raw = raw.dropna(subset=[year_column]).set_index(year_column)

    iso3c_by_column = {
        column: convert_country_name_to_iso3c(column) for column in raw.columns
    }
    unmapped = [column for column, iso3c in iso3c_by_column.items() if iso3c is None]
    if unmapped:
        logger.warning(
            "Dropping %d column(s) without ISO3 code from %s: %s",
            len(unmapped),
            path.name,
            unmapped,
        )
    raw = raw.drop(columns=unmapped)
    validate_not_empty(raw.T, f"countries in {path.name}")

    production = (
        raw.apply(pd.to_numeric, errors="coerce")
        .T.groupby(lambda column: iso3c_by_column[column])
        .sum(min_count=1)
    )
    production.columns = production.columns.astype(int)
    production = ensure_string_year_columns(production)
    production.index = pd.MultiIndex.from_tuples(
        [(iso3c, source_unit) for iso3c in production.index], names=["iso3c", "unit"]
    )

    logger.info(
        "Read cement production for %d countries from %s",
        len(production),
        path.name,
    )
    return production
