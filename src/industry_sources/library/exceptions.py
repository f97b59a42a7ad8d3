"""
Exceptions that are used throughout the industry-sources library.

"""

from __future__ import annotations


class IndustrySourcesError(Exception):
    """Base exception for industry-sources library."""

    pass


class ConfigurationError(IndustrySourcesError):
    """Raised when configuration is invalid or missing."""

    pass


class DataError(IndustrySourcesError):
    """Base exception for data-related errors."""

    pass


class DataLoadingError(DataError):
    """Raised when data files cannot be loaded."""

    pass


class DataProcessingError(DataError):
    """Raised when data doesn't meet requirements."""

    pass


class CountryGroupIntegrityError(DataProcessingError):
    """
    Raised when a country is assigned to more than one region.

    The country group tables are curated, so a duplicate assignment after
    region splitting points to an upstream data or schema change.
    """

    pass


class ValidationError(IndustrySourcesError):
    """Base exception for validation errors."""

    pass


class OutputValidationError(ValidationError):
    """
    Raised when output validation fails.

    Output validation includes checking that no unexpected null values exist
    and that units and descriptions are attached.
    """

    pass
