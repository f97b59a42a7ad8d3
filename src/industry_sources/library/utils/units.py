"""
Unit conversion and registry utilities for source data.

This module provides:
- A configured Pint registry with the mass and magnitude units used by the sources
- Unit conversion of TimeseriesDataFrames with a unit index level
"""

from __future__ import annotations

import functools
import logging
from typing import TYPE_CHECKING

import pint
from pandas_openscm.unit_conversion import convert_unit

from industry_sources.library.exceptions import DataProcessingError

if TYPE_CHECKING:
    from industry_sources.library.utils.dataframes import TimeseriesDataFrame

logger = logging.getLogger(__name__)


# ============================================================================
# Unit Registry
# ============================================================================


@functools.cache
def get_default_unit_registry() -> pint.UnitRegistry:
    """
    Get the default unit registry to use throughout the codebase.

    The registry is Pint's default registry extended with:
    - Magnitude units (thousand, million, billion)
    - Mass units in tonnes (kt, Mt, Gt)

    ``kt`` is a knot in Pint's default definitions, so it is redefined here as
    a kilotonne.

    Returns
    -------
    :
        Configured unit registry
    """
    ur = pint.UnitRegistry(on_redefinition="ignore")

    # Magnitude units used in source tables
    ur.define("thousand = 1000")
    ur.define("million = thousand * 1000")
    ur.define("billion = million * 1000")

    # Mass units used in source tables
    ur.define("kt = 1000 * t")
    ur.define("Mt = 1000 * kt")
    ur.define("Gt = 1000 * Mt")

    return ur


# ============================================================================
# Unit Conversion
# ============================================================================


def convert_timeseries_unit(
    df: TimeseriesDataFrame,
    target_unit: str,
    unit_level: str = "unit",
    ur: pint.UnitRegistry | None = None,
) -> TimeseriesDataFrame:
    """
    Convert every row of a TimeseriesDataFrame to ``target_unit``.

    Parameters
    ----------
    df
        TimeseriesDataFrame with a ``unit_level`` index level
    target_unit
        Target unit to convert to
    unit_level
        Name of the level containing units (default: "unit")
    ur
        Unit registry to use (defaults to :func:`get_default_unit_registry`)

    Returns
    -------
    :
        DataFrame with converted values and the unit level set to ``target_unit``

    Raises
    ------
    DataProcessingError
        If the DataFrame has no unit level or a unit cannot be converted
    """
    if ur is None:
        ur = get_default_unit_registry()

    if unit_level not in df.index.names:
        raise DataProcessingError(
            f"Index level '{unit_level}' not found, index levels are "
            f"{list(df.index.names)}"
        )

    source_units = df.index.get_level_values(unit_level).unique().tolist()
    logger.debug("Converting units from %s to %s", source_units, target_unit)

    try:
        return convert_unit(df, target_unit, unit_level=unit_level, ur=ur)
    except (pint.errors.DimensionalityError, pint.errors.UndefinedUnitError) as e:
        raise DataProcessingError(
            f"Cannot convert units {source_units} to {target_unit}: {e}"
        ) from e


__all__ = [
    "convert_timeseries_unit",
    "get_default_unit_registry",
]
