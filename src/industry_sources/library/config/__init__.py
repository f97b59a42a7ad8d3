"""Configuration models and utilities for industry data sources."""

from industry_sources.library.config.models import (
    CementSourceConfig,
    DataSourcesConfig,
    WEIOSourceConfig,
)

__all__ = [
    "CementSourceConfig",
    "DataSourcesConfig",
    "WEIOSourceConfig",
]
