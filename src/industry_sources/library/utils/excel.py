"""
Spreadsheet helpers for the industry-sources library.

Cell references use A1 notation and are translated into zero-based positions
of a sheet parsed with ``header=None``.
"""

from __future__ import annotations

from typing import NamedTuple

import pandas as pd
from openpyxl.utils.cell import range_boundaries

from industry_sources.library.error_messages import format_error
from industry_sources.library.exceptions import ConfigurationError, DataLoadingError


class CellRange(NamedTuple):
    """Zero-based, end-exclusive row and column bounds of an A1 range."""

    first_row: int
    last_row: int
    first_col: int
    last_col: int

    @property
    def n_rows(self) -> int:
        return self.last_row - self.first_row

    @property
    def n_cols(self) -> int:
        return self.last_col - self.first_col


def parse_cell_range(reference: str) -> CellRange:
    """
    Parse an A1 reference such as ``"C2"`` or ``"C39:F40"``.

    Raises
    ------
    ConfigurationError
        If the reference is not a bounded cell or cell range
    """
    try:
        min_col, min_row, max_col, max_row = range_boundaries(reference)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid cell reference '{reference}': {e}") from e

    if None in (min_col, min_row, max_col, max_row):
        raise ConfigurationError(
            f"Cell reference '{reference}' must name bounded rows and columns"
        )

    return CellRange(
        first_row=min_row - 1,
        last_row=max_row,
        first_col=min_col - 1,
        last_col=max_col,
    )


def slice_cell_range(
    sheet: pd.DataFrame,
    reference: str,
    *,
    sheet_name: str,
    path: object,
) -> pd.DataFrame:
    """
    Return the block of ``sheet`` covered by ``reference``.

    ``sheet`` must have been parsed with ``header=None`` so that positions match
    spreadsheet rows and columns.

    Raises
    ------
    DataLoadingError
        If the sheet does not extend over the whole range
    """
    cell_range = parse_cell_range(reference)
    n_rows, n_columns = sheet.shape
    if cell_range.last_row > n_rows or cell_range.last_col > n_columns:
        raise DataLoadingError(
            format_error(
                "sheet_range_unreadable",
                cell_range=reference,
                sheet=sheet_name,
                path=path,
                n_rows=n_rows,
                n_columns=n_columns,
            )
        )
    return sheet.iloc[
        cell_range.first_row : cell_range.last_row,
        cell_range.first_col : cell_range.last_col,
    ]
