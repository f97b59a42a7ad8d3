"""
Source reader registry and lookup functions.

This module maps the source keys of the data source configuration to their
read functions, and reads every source listed in ``active_sources``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable

from industry_sources.library.config.models import DataSourcesConfig
from industry_sources.library.error_messages import format_error, suggest_similar
from industry_sources.library.exceptions import ConfigurationError
from industry_sources.library.sources.andrew2019 import read_andrew2019
from industry_sources.library.sources.weio import read_iea_weio_2014
from industry_sources.library.utils import load_data_sources_config

logger = logging.getLogger(__name__)


def _read_weio_2014(config: DataSourcesConfig) -> Any:
    return read_iea_weio_2014(config=config.weio_2014)


def _read_andrew_2019(config: DataSourcesConfig) -> Any:
    return read_andrew2019(config=config.andrew_2019)


def get_source_readers() -> dict[str, Callable[[DataSourcesConfig], Any]]:
    """
    Get the source reader registry.

    Returns
    -------
    dict[str, Callable]
        Dictionary mapping configuration keys to functions that take the full
        :class:`DataSourcesConfig` and read that source
    """
    return {
        "weio_2014": _read_weio_2014,
        "andrew_2019": _read_andrew_2019,
    }


def get_source_reader(source: str) -> Callable[[DataSourcesConfig], Any]:
    """
    Get the reader for a source key.

    Raises
    ------
    ConfigurationError
        If the source key is not registered
    """
    readers = get_source_readers()
    if source not in readers:
        raise ConfigurationError(
            format_error(
                "invalid_source",
                source=source,
                suggestion=suggest_similar(source, list(readers)),
            )
        )
    return readers[source]


def read_active_sources(
    config: DataSourcesConfig | None = None,
    config_path: Path | None = None,
) -> dict[str, Any]:
    """
    Read every source listed in ``active_sources``.

    Parameters
    ----------
    config
        Data source configuration. If None, it is loaded with
        :func:`~industry_sources.library.utils.load_data_sources_config`
        from ``config_path``.
    config_path
        YAML file to load the configuration from when ``config`` is None.
        Defaults to ``conf/data_sources/data_sources.yaml`` under the project
        root.

    Returns
    -------
    dict[str, Any]
        Read results keyed by source, in the order of ``active_sources``
    """
    if config is None:
        config = load_data_sources_config(config_path)

    results = {}
    for source in config.active_sources:
        logger.info("Reading source %s", source)
        results[source] = get_source_reader(source)(config)
    return results
