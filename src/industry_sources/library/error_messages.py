"""
Error message templates for industry data sources.

Messages follow WHAT/CAUSE/FIX structure.
"""

from __future__ import annotations

from difflib import get_close_matches

ERROR_MESSAGES = {
    "empty_dataframe": """
Empty DataFrame provided for {dataset_name}.

WHAT HAPPENED:
  The DataFrame contains no data (zero rows).

LIKELY CAUSE:
  - Source file is empty or missing
  - Every sheet of the workbook was excluded
  - Filtering removed all rows

HOW TO FIX:
  Check your data source:
  >>> print(f"Rows: {{len(df)}}, Columns: {{len(df.columns)}}")
  >>> print(df.head())
""",
    "index_structure_mismatch": """
Data structure error in {dataset_name}.

WHAT HAPPENED:
  The data has the wrong index structure.
  Expected: {expected} (country code and unit columns as index)
  Got: {actual} (current structure)

LIKELY CAUSE:
  The CSV was loaded without setting the index columns.

HOW TO FIX:
  After loading your data, set the index:
  >>> df = df.set_index({expected})
""",
    "year_columns_missing": """
Year columns not detected in {dataset_name}.

WHAT HAPPENED:
  No columns recognized as year columns.
  Found columns: {found_columns}

LIKELY CAUSE:
  The source table was not pivoted to wide format, or the year column
  was used as the index.

HOW TO FIX:
  Pivot years into columns and convert them to strings:
  >>> from industry_sources.library.utils import ensure_string_year_columns
  >>> df = ensure_string_year_columns(df)
""",
    "missing_columns": """
Required columns missing from {dataset_name}.

WHAT HAPPENED:
  Expected columns: {expected}
  Found columns: {found}
  Missing: {missing}

LIKELY CAUSE:
  The source file layout changed, or a different file was supplied.

HOW TO FIX:
  Check the header row of {path}.
  Column names are matched exactly, including case and spaces.
""",
    "duplicate_country_groups": """
Duplicate countries in country groups.

WHAT HAPPENED:
  {count} country code(s) are assigned to more than one region:
{duplicates}

LIKELY CAUSE:
  - The region mapping file changed upstream
  - A region modification removes the wrong sub-regions
  - A sub-region lists countries that are not members of its superset

HOW TO FIX:
  Inspect the regions listed above in the country groups file and the
  region modification table. Every country must end up in exactly one region.
""",
    "region_label_collision": """
Derived region labels are not unique.

WHAT HAPPENED:
  The region modification table produces the label(s) {labels}
  more than once, or a derived label equals an existing region name.

LIKELY CAUSE:
  The same superset/subset combination is listed twice.

HOW TO FIX:
  Remove the duplicate entries from the region modification table.
""",
    "sheet_range_unreadable": """
Could not read range {cell_range} on sheet '{sheet}' of {path}.

WHAT HAPPENED:
  The sheet has {n_rows} rows and {n_columns} columns, which does not
  cover the requested range.

LIKELY CAUSE:
  The workbook layout differs from the published edition, or a sheet that
  does not hold regional data was not excluded.

HOW TO FIX:
  1. Add the sheet to ``excluded_sheets``
  2. Or adjust ``label_cell`` / ``value_range`` in the source configuration
""",
    "region_label_missing": """
No region label on sheet '{sheet}' of {path}.

WHAT HAPPENED:
  Cell {cell} is empty.

LIKELY CAUSE:
  The workbook layout differs from the published edition, or a sheet that
  does not hold regional data was not excluded.

HOW TO FIX:
  1. Add the sheet to ``excluded_sheets``
  2. Or point ``label_cell`` at the cell holding the region name
""",
    "non_numeric_values": """
Non-numeric values in range {cell_range} on sheet '{sheet}' of {path}.

WHAT HAPPENED:
  The last column of the range must hold numbers.
  Found: {values}

LIKELY CAUSE:
  The source marks unavailable data with text (e.g. "n.a."), or
  ``value_range`` does not end at the value column.

HOW TO FIX:
  1. Clear the text cells in the workbook so they are read as missing
  2. Or adjust ``value_range`` in the source configuration
""",
    "invalid_source": """
Data source '{source}' not recognized.

WHAT HAPPENED:
  The requested source is not configured.

HOW TO FIX:
  {suggestion}
""",
}


def format_error(key: str, **kwargs) -> str:
    """
    Format an error message with the given parameters.

    Parameters
    ----------
    key
        The error message key from ERROR_MESSAGES
    **kwargs
        Parameters to format into the message template

    Returns
    -------
    str
        The formatted error message
    """
    template = ERROR_MESSAGES.get(key)
    if template is None:
        return f"Unknown error: {key}"
    return template.format(**kwargs).strip()


def suggest_similar(
    value: str, valid_options: list[str], max_suggestions: int = 3
) -> str:
    """
    Suggest similar valid options for typos.

    Parameters
    ----------
    value
        The invalid value that was provided
    valid_options
        List of valid options to match against
    max_suggestions
        Maximum number of suggestions to return (default: 3)

    Returns
    -------
    str
        A formatted suggestion message
    """
    matches = get_close_matches(value, valid_options, n=max_suggestions, cutoff=0.6)
    if matches:
        return f"Did you mean: {', '.join(matches)}?"
    return f"Valid options: {', '.join(valid_options)}"
