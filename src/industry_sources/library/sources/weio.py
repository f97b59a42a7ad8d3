"""IEA World Energy Investment Outlook (2014).

Projected 2014-20 average annual investments into industry energy efficiency,
from the `IEA World Energy Investment Outlook (2014)
<http://www.iea.org/publications/freepublications/publication/weo-2014-special-report---investment.html>`_.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from industry_sources.library.config.models import WEIOSourceConfig
from industry_sources.library.sources.country_groups import read_country_groups
from industry_sources.library.sources.regions import (
    IEA_WEIO_REGION_MODIFICATIONS,
    RegionModification,
    split_country_groups,
    split_region_values,
)
from industry_sources.library.sources.results import MadratMule
from industry_sources.library.sources.sheets import read_region_sheets
from industry_sources.library.utils import resolve_project_path

logger = logging.getLogger(__name__)


def read_iea_weio_2014(
    source_dir: Path | str | None = None,
    config: WEIOSourceConfig | None = None,
    modifications: Sequence[RegionModification] = IEA_WEIO_REGION_MODIFICATIONS,
) -> MadratMule:
    """Read the IEA WEIO 2014 industry efficiency investments.

    Superset regions with separately reported sub-regions are replaced by
    their complements, e.g. "OECD Americas" is split into "United States"
    and "OECD Americas w/o United States".

    Args:
        source_dir: Directory holding the country groups CSV and the Annex A
            workbook. Defaults to ``config.path`` (relative to the
            project root) or, without a config, the current directory.
        config: File names and cell references; defaults are those of the
            published edition
        modifications: Supersets to split

    Returns
    -------
        MadratMule with the tables ``data`` (``IEA region``, ``name``,
        ``value``; 2014-20 average annual investments into ``Energy intensive``
        and ``Non-energy intensive`` industry in $bn 2012) and
        ``country_groups`` (``IEA region``, ``iso3c``)
    """
    if source_dir is None:
        source_dir = resolve_project_path(config.path) if config else Path(".")
    source_dir = Path(source_dir)
    config = config or WEIOSourceConfig()

    country_groups = read_country_groups(source_dir / config.country_groups_file)
    data = read_region_sheets(
        source_dir / config.data_file,
        excluded_sheets=config.excluded_sheets,
        label_cell=config.label_cell,
        value_range=config.value_range,
    )

    country_groups = split_country_groups(country_groups, modifications)
    data = split_region_values(data, modifications)

    logger.info(
        "WEIO 2014: %d value(s) for %d region(s)",
        len(data),
        data["IEA region"].nunique(),
    )
    return MadratMule({"data": data, "country_groups": country_groups})
