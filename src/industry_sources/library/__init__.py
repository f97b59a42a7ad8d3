"""
Main components for the industry-sources library.

Nothing is exported from this module, users should import from specific submodules:
- industry_sources.library.sources (read/calc functions for each data source)
- industry_sources.library.utils (utility functions)
- industry_sources.library.validation (validation functions)
"""

from __future__ import annotations
