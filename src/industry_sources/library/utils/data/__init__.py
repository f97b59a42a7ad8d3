"""
Data configuration utilities for the industry-sources library.

"""

from industry_sources.library.utils.data.config import load_data_sources_config

__all__ = ["load_data_sources_config"]
