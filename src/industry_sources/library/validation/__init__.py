"""
Validation for the industry-sources library.

"""

from .pipeline_validation import (
    validate_has_year_columns,
    validate_index_structure,
    validate_no_null_values,
    validate_not_empty,
    validate_unique_country_assignment,
)

__all__ = [
    "validate_has_year_columns",
    "validate_index_structure",
    "validate_no_null_values",
    "validate_not_empty",
    "validate_unique_country_assignment",
]
