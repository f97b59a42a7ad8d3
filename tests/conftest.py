"""
Common fixtures for pytest unit and integration tests for the industry-sources library.

"""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pandas as pd
import pytest
from openpyxl import Workbook

from industry_sources.library.config import WEIOSourceConfig
from industry_sources.library.utils.dataframes import ensure_string_year_columns

# Region to country mapping covering every superset/subset of the WEIO 2014
# modification table plus regions that are passed through unchanged
WEIO_COUNTRY_GROUPS = {
    "OECD Americas": ["USA", "CAN", "MEX"],
    "United States": ["USA"],
    "OECD Europe": ["DEU", "FRA", "NOR"],
    "European Union": ["DEU", "FRA"],
    "OECD Asia Oceania": ["JPN", "AUS", "KOR"],
    "Japan": ["JPN"],
    "E. Europe/Eurasia": ["RUS", "UKR", "KAZ"],
    "Russia": ["RUS"],
    "Non-OECD Asia": ["CHN", "IND", "IDN", "THA", "PAK"],
    "China": ["CHN"],
    "India": ["IND"],
    "Southeast Asia": ["IDN", "THA"],
    "Latin America": ["BRA", "ARG"],
    "Brazil": ["BRA"],
    "Africa": ["NGA", "ZAF"],
    "Middle East": ["SAU"],
}

WEIO_METRICS = ["Energy intensive", "Non-energy intensive"]

# Annex A layout saved in the legacy .xls format of the published workbook:
# a Contents sheet followed by one sheet per region
WEIO_XLS_SAMPLE = Path(__file__).parent / "data" / "weio_annex_a_sample.xls"
WEIO_XLS_SAMPLE_VALUES = {
    "OECD Americas": [100.0, 40.0],
    "United States": [60.0, 25.0],
    "Africa": [10.0, 3.5],
}

# Investments per region and metric, supersets exceed the sum of their subsets
WEIO_VALUES = {
    "OECD Americas": [100.0, 40.0],
    "United States": [60.0, 25.0],
    "OECD Europe": [80.0, 30.0],
    "European Union": [70.0, 20.0],
    "OECD Asia Oceania": [50.0, 12.0],
    "Japan": [20.0, 5.0],
    "E. Europe/Eurasia": [30.0, 9.0],
    "Russia": [18.0, 4.5],
    "Non-OECD Asia": [200.0, 75.0],
    "China": [120.0, 40.0],
    "India": [30.0, 10.0],
    "Southeast Asia": [25.0, 15.0],
    "Latin America": [35.0, 11.0],
    "Brazil": [15.0, 6.0],
    "Africa": [10.0, 3.0],
    "Middle East": [12.0, 2.5],
}


def write_country_groups_csv(path, country_groups: dict[str, list[str]]):
    """Write a country groups CSV in the IEA WEO layout."""
    pd.DataFrame(
        {
            "IEA region": list(country_groups),
            "Countries": [", ".join(codes) for codes in country_groups.values()],
        }
    ).to_csv(path, index=False)
    return path


def write_region_workbook(
    path,
    values: dict[str, list[float]],
    metrics: list[str] = WEIO_METRICS,
    contents_sheet: bool = True,
):
    """
    Write a workbook with one sheet per region in the WEIO Annex A layout.

    The region label goes to C2 and the metrics to C39:F40, with the name in
    column C, filler text in columns D and E and the value in column F.
    """
    workbook = Workbook()
    first_sheet = workbook.active
    if contents_sheet:
        first_sheet.title = "Contents"
        first_sheet["A1"] = "World Energy Investment Outlook 2014, Annex A"
    else:
        workbook.remove(first_sheet)

    for i, (region, region_values) in enumerate(values.items()):
        sheet = workbook.create_sheet(title=f"Region{i + 1}")
        sheet["A1"] = "World Energy Investment Outlook 2014"
        sheet["C2"] = region
        sheet["C38"] = "Industry"
        for row, (metric, value) in enumerate(zip(metrics, region_values), start=39):
            sheet[f"C{row}"] = metric
            sheet[f"D{row}"] = "2014-20"
            sheet[f"E{row}"] = "$bn"
            sheet[f"F{row}"] = value

    workbook.save(path)
    return path


@pytest.fixture
def country_groups_csv(tmp_path):
    """CSV with the WEIO test country groups."""
    return write_country_groups_csv(
        tmp_path / "IEA_WEO_country_groups.csv", WEIO_COUNTRY_GROUPS
    )


@pytest.fixture
def region_workbook(tmp_path):
    """Workbook with the WEIO test values and a Contents sheet."""
    return write_region_workbook(tmp_path / "WEIO2014AnnexA.xlsx", WEIO_VALUES)


@pytest.fixture
def weio_config():
    """Source configuration pointing at the xlsx test workbook."""
    return WEIOSourceConfig(data_file="WEIO2014AnnexA.xlsx")


@pytest.fixture
def weio_source_dir(tmp_path, country_groups_csv, region_workbook):
    """Directory holding both WEIO 2014 source files."""
    return tmp_path


@pytest.fixture
def country_groups():
    """Country group relation for the WEIO test regions."""
    return pd.DataFrame(
        [
            (region, iso3c)
            for region, codes in WEIO_COUNTRY_GROUPS.items()
            for iso3c in codes
        ],
        columns=["IEA region", "iso3c"],
    )


@pytest.fixture
def region_values():
    """Region value table for the WEIO test regions."""
    return pd.DataFrame(
        [
            (region, metric, value)
            for region, region_values in WEIO_VALUES.items()
            for metric, value in zip(WEIO_METRICS, region_values)
        ],
        columns=["IEA region", "name", "value"],
    )


@pytest.fixture
def cement_production_kt():
    """Cement production in kt with missing values."""
    df = pd.DataFrame(
        {
            2016: [120.5, 2400.0, np.nan],
            2017: [np.nan, 2350.25, 31.0],
            2018: [125.0, np.nan, 33.5],
        },
        index=pd.MultiIndex.from_tuples(
            [("DEU", "kt"), ("CHN", "kt"), ("NOR", "kt")], names=["iso3c", "unit"]
        ),
    )
    return ensure_string_year_columns(df)
