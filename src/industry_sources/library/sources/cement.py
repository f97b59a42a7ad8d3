"""Calculation of annual cement production from Andrew (2019)."""

from __future__ import annotations

import logging

from industry_sources.library.sources.results import CalculationOutput
from industry_sources.library.utils import TimeseriesDataFrame, convert_timeseries_unit
from industry_sources.library.validation import (
    validate_has_year_columns,
    validate_index_structure,
)

logger = logging.getLogger(__name__)

CEMENT_PRODUCTION_UNIT = "tonnes (t)"

CEMENT_PRODUCTION_DESCRIPTION = " ".join(
    [
        "Annual Cement Production as from",
        "Andrew, R.M., 2019. Global CO2 emissions from cement production, 1928-2018.",
        "Earth System Science Data 11, 1675-1710. https://doi.org/10.5194/essd-11-1675-2019.",
        "Data reported on https://zenodo.org/records/11207133.",
        "Accessed: 24.02.2025.",
    ]
)


def calc_cement_production(x: TimeseriesDataFrame) -> CalculationOutput:
    """
    Calculate global cement production per country in tonnes.

    Parameters
    ----------
    x
        Cement production as returned by
        :func:`~industry_sources.library.sources.andrew2019.read_andrew2019`,
        indexed by ``["iso3c", "unit"]`` with year columns, in thousand tonnes

    Returns
    -------
    CalculationOutput
        Production in tonnes without missing values, no weight, and the
        citation of the source as description

    Notes
    -----
    Missing values are set to zero. This is a placeholder until a better
    imputation (e.g. interpolation) is agreed with the consumers of the data.
    """
    validate_index_structure(
        x, "cement production", expected_index_names=["iso3c", "unit"]
    )
    validate_has_year_columns(x, "cement production")

    n_missing = int(x.isna().sum().sum())
    if n_missing:
        logger.debug("Setting %d missing cement production value(s) to 0", n_missing)
    x = x.fillna(0.0)

    x = convert_timeseries_unit(x, "t")

    return CalculationOutput(
        x,
        weight=None,
        unit=CEMENT_PRODUCTION_UNIT,
        description=CEMENT_PRODUCTION_DESCRIPTION,
    )
