"""Reading of per-region values from multi-sheet workbooks."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

import pandas as pd

from industry_sources.library.error_messages import format_error
from industry_sources.library.exceptions import DataLoadingError
from industry_sources.library.utils import slice_cell_range

logger = logging.getLogger(__name__)


def read_region_sheets(
    path: Path,
    excluded_sheets: Iterable[str] = ("Contents",),
    label_cell: str = "C2",
    value_range: str = "C39:F40",
    region_column: str = "IEA region",
) -> pd.DataFrame:
    """
    Read one block of metric values from every regional sheet of a workbook.

    Each sheet holds the data of one region. The region label is read from
    ``label_cell``; ``value_range`` holds one metric per row, with the metric
    name in its first column and the value in its last column. Columns in
    between are skipped.

    Parameters
    ----------
    path
        Workbook to read (``.xls`` or ``.xlsx``)
    excluded_sheets
        Sheets that do not hold regional data
    label_cell
        A1 reference of the region label
    value_range
        A1 reference of the metric block
    region_column
        Name of the region column in the result

    Returns
    -------
    pd.DataFrame
        Columns ``[region_column, "name", "value"]`` with one row per sheet and
        metric, in sheet order. ``value`` is float64, with NaN for empty cells.

    Raises
    ------
    DataLoadingError
        If the workbook does not exist or no sheet is left after exclusions.
        Also if a sheet does not cover the configured cells, has an empty
        label cell or has text in the value column.
    """
    path = Path(path)
    if not path.exists():
        raise DataLoadingError(f"Workbook not found: {path}")

    excluded = set(excluded_sheets)
    frames = []
    with pd.ExcelFile(path) as workbook:
        sheet_names = [name for name in workbook.sheet_names if name not in excluded]
        for sheet_name in sheet_names:
            sheet = workbook.parse(sheet_name, header=None)

            label = slice_cell_range(
                sheet, label_cell, sheet_name=sheet_name, path=path
            ).iat[0, 0]
            if pd.isna(label) or not str(label).strip():
                raise DataLoadingError(
                    format_error(
                        "region_label_missing",
                        cell=label_cell,
                        sheet=sheet_name,
                        path=path,
                    )
                )
            label = str(label).strip()

            block = slice_cell_range(
                sheet, value_range, sheet_name=sheet_name, path=path
            )
            try:
                values = pd.to_numeric(block.iloc[:, -1]).astype(float)
            except (TypeError, ValueError) as e:
                raise DataLoadingError(
                    format_error(
                        "non_numeric_values",
                        cell_range=value_range,
                        sheet=sheet_name,
                        path=path,
                        values=block.iloc[:, -1].tolist(),
                    )
                ) from e

            frame = pd.DataFrame(
                {
                    region_column: label,
                    "name": block.iloc[:, 0].astype(str).to_numpy(),
                    "value": values.to_numpy(),
                }
            )
            logger.debug(
                "Sheet '%s': %d value(s) for region '%s'", sheet_name, len(frame), label
            )
            frames.append(frame)

    if not frames:
        raise DataLoadingError(
            format_error("empty_dataframe", dataset_name=f"sheets of {path.name}")
        )

    result = pd.concat(frames, ignore_index=True)
    logger.info(
        "Read %d value(s) for %d region(s) from %s",
        len(result),
        len(frames),
        path.name,
    )
    return result
