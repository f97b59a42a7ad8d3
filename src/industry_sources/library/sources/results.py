"""
Result containers handed to the host modelling framework.

Read functions return either plain tables or a :class:`MadratMule` when a
source yields several related tables at once. Calc functions return a
:class:`CalculationOutput`, which carries the unit and provenance of the data
alongside the values.
"""

from __future__ import annotations

from collections.abc import Mapping

import pandas as pd
from attrs import define, field, frozen

from industry_sources.library.exceptions import OutputValidationError
from industry_sources.library.utils import TimeseriesDataFrame
from industry_sources.library.validation import validate_no_null_values


def _as_dict(tables: Mapping[str, pd.DataFrame]) -> dict[str, pd.DataFrame]:
    return dict(tables)


@frozen(eq=False)
class MadratMule:
    """Marker for a pre-digested bundle of tables.

    The host pipeline passes single tables through its standard interface;
    a mule lets a read function hand over several tables at once, to be
    unpacked again by the calc function that consumes them.

    Attributes
    ----------
    tables
        Mapping of table name to DataFrame, e.g. ``{"data": ..., "country_groups": ...}``
    """

    tables: dict[str, pd.DataFrame] = field(converter=_as_dict)

    def __getitem__(self, key: str) -> pd.DataFrame:
        return self.tables[key]

    def __contains__(self, key: object) -> bool:
        return key in self.tables

    def keys(self):
        return self.tables.keys()

    def unwrap(self) -> dict[str, pd.DataFrame]:
        """Return the bundled tables as a new dict."""
        return dict(self.tables)


@define
class CalculationOutput:
    """Container for calc results with validation.

    Attributes
    ----------
    x
        The calculated values
    weight
        Weights for aggregating ``x`` to coarser regions; ``None`` means
        aggregation is an unweighted sum
    unit
        Human-readable unit label, e.g. ``"tonnes (t)"``
    description
        Provenance of the data, including the citation of the source
    """

    x: TimeseriesDataFrame
    weight: TimeseriesDataFrame | None = None
    unit: str = field(default="", kw_only=True)
    description: str = field(default="", kw_only=True)

    def __attrs_post_init__(self):
        """Initialize and validate the result."""
        self.validate()

    def validate(self) -> None:
        """Check that values are complete and unit and description are set."""
        validate_no_null_values(self.x, "Calculation output")
        if not self.unit:
            raise OutputValidationError("Calculation output has no unit")
        if not self.description:
            raise OutputValidationError("Calculation output has no description")
