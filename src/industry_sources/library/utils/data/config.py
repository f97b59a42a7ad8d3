"""
Configuration loading utilities.

This module reads the data source configuration from YAML and validates it
with the Pydantic models in :mod:`industry_sources.library.config.models`.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import yaml

from industry_sources.library.exceptions import ConfigurationError, DataLoadingError

if TYPE_CHECKING:
    from industry_sources.library.config.models import DataSourcesConfig

DEFAULT_CONFIG_PATH = Path("conf") / "data_sources" / "data_sources.yaml"


def load_data_sources_config(config_path: Path | None = None) -> DataSourcesConfig:
    """
    Load and validate the data source configuration.

    Parameters
    ----------
    config_path : Path | None, optional
        Path to the YAML config file. If None, uses
        ``conf/data_sources/data_sources.yaml`` under the project root.

    Returns
    -------
    DataSourcesConfig
        Validated configuration

    Raises
    ------
    DataLoadingError
        If the config file is not found
    ConfigurationError
        If the file does not hold a mapping
    """
    if config_path is None:
        from pyprojroot import here

        config_path = here() / DEFAULT_CONFIG_PATH

    if not config_path.exists():
        raise DataLoadingError(f"Config file not found: {config_path}")

    with open(config_path) as f:
        raw_config = yaml.safe_load(f)

    if raw_config is None:
        raw_config = {}
    if not isinstance(raw_config, dict):
        raise ConfigurationError(
            f"Config file {config_path} must contain a mapping, "
            f"got {type(raw_config).__name__}"
        )

    from industry_sources.library.config.models import DataSourcesConfig

    return DataSourcesConfig.model_validate(raw_config)
