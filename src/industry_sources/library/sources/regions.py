"""
Splitting of aggregate regions into sub-regions and their complements.

Reporting regions often contain named sub-regions, e.g. "OECD Americas"
contains the "United States". To use both without double counting, each such
superset is replaced by its complement, "OECD Americas w/o United States":

- the complement's countries are the superset's countries minus those of its
  sub-regions
- the complement's values are the superset's values minus the sum of the
  sub-regions' values

Regions that are not listed as a superset are passed through unchanged.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable, Sequence

import pandas as pd
from attrs import field, frozen

from industry_sources.library.error_messages import format_error
from industry_sources.library.exceptions import ConfigurationError
from industry_sources.library.validation import validate_unique_country_assignment

logger = logging.getLogger(__name__)


def _to_tuple(subsets: str | Iterable[str]) -> tuple[str, ...]:
    if isinstance(subsets, str):
        return (subsets,)
    return tuple(subsets)


def _non_empty(instance, attribute, value) -> None:
    if not value:
        raise ConfigurationError(f"{attribute.name} must not be empty")


@frozen
class RegionModification:
    """A superset region and the sub-regions to split off from it.

    Attributes
    ----------
    superset
        Name of the aggregate region
    subsets
        Names of the sub-regions contained in ``superset``
    """

    superset: str = field(validator=_non_empty)
    subsets: tuple[str, ...] = field(converter=_to_tuple, validator=_non_empty)

    @property
    def region(self) -> str:
        """Name of the complement region, e.g. ``"OECD Americas w/o United States"``."""
        return f"{self.superset} w/o {', '.join(self.subsets)}"


IEA_WEIO_REGION_MODIFICATIONS: tuple[RegionModification, ...] = (
    RegionModification("OECD Americas", ("United States",)),
    RegionModification("OECD Europe", ("European Union",)),
    RegionModification("OECD Asia Oceania", ("Japan",)),
    RegionModification("E. Europe/Eurasia", ("Russia",)),
    RegionModification("Non-OECD Asia", ("China", "India", "Southeast Asia")),
    RegionModification("Latin America", ("Brazil",)),
)
"""Sub-regions reported separately in the IEA World Energy Investment Outlook 2014."""


def validate_region_modifications(
    modifications: Sequence[RegionModification],
) -> None:
    """
    Check that complement labels are unique and distinct from input regions.

    Raises
    ------
    ConfigurationError
        If two modifications produce the same label, or a label equals the name
        of a superset or subset region
    """
    labels = Counter(modification.region for modification in modifications)
    input_regions = {modification.superset for modification in modifications}
    for modification in modifications:
        input_regions.update(modification.subsets)

    collisions = sorted(
        label for label, count in labels.items() if count > 1 or label in input_regions
    )
    if collisions:
        raise ConfigurationError(
            format_error("region_label_collision", labels=collisions)
        )


def region_modifications_frame(
    modifications: Sequence[RegionModification],
    region_column: str = "IEA region",
) -> pd.DataFrame:
    """
    Tabulate modifications with one row per (complement, superset, subset).

    Returns
    -------
    pd.DataFrame
        Columns ``[region_column, "superset", "subset"]``
    """
    validate_region_modifications(modifications)
    return pd.DataFrame(
        [
            (modification.region, modification.superset, subset)
            for modification in modifications
            for subset in modification.subsets
        ],
        columns=[region_column, "superset", "subset"],
    )


def _warn_missing_supersets(
    regions: pd.Series, modifications: pd.DataFrame, dataset_name: str
) -> None:
    missing = sorted(set(modifications["superset"]) - set(regions))
    if missing:
        logger.warning(
            "Superset region(s) not found in %s, no complement derived: %s",
            dataset_name,
            missing,
        )


def split_country_groups(
    country_groups: pd.DataFrame,
    modifications: Sequence[RegionModification] = IEA_WEIO_REGION_MODIFICATIONS,
    region_column: str = "IEA region",
    country_column: str = "iso3c",
) -> pd.DataFrame:
    """
    Replace superset regions by their complements in a country mapping.

    Parameters
    ----------
    country_groups
        Relation with one row per (region, country)
    modifications
        Supersets and the sub-regions to remove from them
    region_column
        Name of the region column
    country_column
        Name of the country code column

    Returns
    -------
    pd.DataFrame
        Regions that are not supersets, unchanged and in their original order,
        followed by the complement regions in the order of ``modifications``.

    Raises
    ------
    CountryGroupIntegrityError
        If a country ends up in more than one region
    """
    mods = region_modifications_frame(modifications, region_column)
    _warn_missing_supersets(country_groups[region_column], mods, "country groups")

    members = country_groups[[region_column, country_column]]
    passthrough = members[~members[region_column].isin(mods["superset"])]

    superset_members = (
        mods[[region_column, "superset"]]
        .drop_duplicates()
        .merge(
            members.rename(columns={region_column: "superset"}),
            on="superset",
            how="inner",
        )[[region_column, country_column]]
    )
    subset_members = (
        mods[[region_column, "subset"]]
        .merge(
            members.rename(columns={region_column: "subset"}),
            on="subset",
            how="inner",
        )[[region_column, country_column]]
        .drop_duplicates()
    )

    # anti join: drop (complement, country) pairs present in a subset
    flagged = superset_members.merge(
        subset_members, on=[region_column, country_column], how="left", indicator=True
    )
    complements = flagged.loc[
        flagged["_merge"] == "left_only", [region_column, country_column]
    ]

    result = pd.concat([passthrough, complements], ignore_index=True)
    validate_unique_country_assignment(result, region_column, country_column)

    logger.info(
        "Derived %d complement region(s) with %d countries",
        complements[region_column].nunique(),
        len(complements),
    )
    return result


def _sum_keeping_nan(values: pd.Series) -> float:
    return values.sum(skipna=False)


def split_region_values(
    data: pd.DataFrame,
    modifications: Sequence[RegionModification] = IEA_WEIO_REGION_MODIFICATIONS,
    region_column: str = "IEA region",
    name_column: str = "name",
    value_column: str = "value",
) -> pd.DataFrame:
    """
    Replace superset regions by their complements in a value table.

    The complement's value for each metric is the superset's value plus the
    negated sum of its sub-regions' values. Both are stacked and summed, so a
    sub-region without a row for a metric contributes nothing. A missing value
    (NaN) in the superset or any of its sub-regions makes the complement's
    value for that metric NaN.

    Parameters
    ----------
    data
        Table with one row per (region, metric)
    modifications
        Supersets and the sub-regions to subtract from them
    region_column
        Name of the region column
    name_column
        Name of the metric column
    value_column
        Name of the value column

    Returns
    -------
    pd.DataFrame
        Regions that are not supersets, unchanged and in their original order,
        followed by the complement regions in the order of ``modifications``.
    """
    mods = region_modifications_frame(modifications, region_column)
    _warn_missing_supersets(data[region_column], mods, "region values")

    keys = [region_column, name_column]
    values = data[[region_column, name_column, value_column]]
    passthrough = values[~values[region_column].isin(mods["superset"])]

    superset_values = (
        mods[[region_column, "superset"]]
        .drop_duplicates()
        .merge(
            values.rename(columns={region_column: "superset"}),
            on="superset",
            how="inner",
        )[[region_column, name_column, value_column]]
    )
    subset_values = (
        mods[[region_column, "subset"]]
        .merge(
            values.rename(columns={region_column: "subset"}),
            on="subset",
            how="inner",
        )
        .groupby(keys, as_index=False, sort=False)[value_column]
        .agg(_sum_keeping_nan)
    )
    subset_values[value_column] = subset_values[value_column] * -1

    complements = (
        pd.concat([superset_values, subset_values], ignore_index=True)
        .groupby(keys, as_index=False, sort=False)[value_column]
        .agg(_sum_keeping_nan)
    )
    complements[value_column] = complements[value_column].astype(float)

    return pd.concat([passthrough, complements], ignore_index=True)
