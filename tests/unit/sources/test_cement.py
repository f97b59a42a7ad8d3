"""
Tests for the cement production calculation and the Andrew (2019) reader.

"""

from __future__ import annotations

import numpy as np
import pandas as pd
import pytest

from industry_sources.library.config import CementSourceConfig
from industry_sources.library.exceptions import (
    ConfigurationError,
    DataLoadingError,
    DataProcessingError,
    OutputValidationError,
)
from industry_sources.library.sources.andrew2019 import read_andrew2019
from industry_sources.library.sources.cement import (
    CEMENT_PRODUCTION_DESCRIPTION,
    CEMENT_PRODUCTION_UNIT,
    calc_cement_production,
)
from industry_sources.library.sources.results import CalculationOutput


class TestCalcCementProduction:
    """Tests for calc_cement_production."""

    def test_output_bundle(self, cement_production_kt):
        """Test the unit, weight and description attached to the result."""
        result = calc_cement_production(cement_production_kt)

        assert isinstance(result, CalculationOutput)
        assert result.weight is None
        assert result.unit == "tonnes (t)" == CEMENT_PRODUCTION_UNIT
        assert result.description == CEMENT_PRODUCTION_DESCRIPTION
        assert result.description.startswith(
            "Annual Cement Production as from Andrew, R.M., 2019."
        )
        assert "https://doi.org/10.5194/essd-11-1675-2019." in result.description

    def test_no_missing_values(self, cement_production_kt):
        """Test that missing values are filled."""
        result = calc_cement_production(cement_production_kt)

        assert not result.x.isna().any().any()

    def test_missing_values_become_zero(self, cement_production_kt):
        """Test that missing values are set to exactly zero."""
        result = calc_cement_production(cement_production_kt)

        assert result.x.loc[("DEU", "t"), "2017"] == 0.0
        assert result.x.loc[("CHN", "t"), "2018"] == 0.0
        assert result.x.loc[("NOR", "t"), "2016"] == 0.0

    def test_values_converted_to_tonnes(self, cement_production_kt):
        """Test that every reported value is multiplied by 1000."""
        result = calc_cement_production(cement_production_kt)

        for (iso3c, _), row in cement_production_kt.iterrows():
            for year, value in row.items():
                if pd.isna(value):
                    continue
                assert result.x.loc[(iso3c, "t"), year] == pytest.approx(
                    value * 1000, rel=1e-12
                )

    def test_unit_level_updated(self, cement_production_kt):
        """Test that the unit index level reflects the conversion."""
        result = calc_cement_production(cement_production_kt)

        assert list(result.x.index.names) == ["iso3c", "unit"]
        assert set(result.x.index.get_level_values("unit")) == {"t"}

    def test_input_not_modified(self, cement_production_kt):
        """Test that the input table is left untouched."""
        original = cement_production_kt.copy()
        calc_cement_production(cement_production_kt)
        pd.testing.assert_frame_equal(cement_production_kt, original)

    def test_wrong_index_raises(self, cement_production_kt):
        """Test that a table without unit level is rejected."""
        with pytest.raises(DataProcessingError, match="Data structure error"):
            calc_cement_production(cement_production_kt.droplevel("unit"))


class TestCalculationOutput:
    """Tests for the calculation output container."""

    def test_rejects_null_values(self, cement_production_kt):
        """Test that outputs with nulls are rejected."""
        with pytest.raises(OutputValidationError, match="null value"):
            CalculationOutput(
                cement_production_kt, unit="kt", description="Cement production"
            )

    def test_requires_unit(self, cement_production_kt):
        """Test that outputs without unit are rejected."""
        with pytest.raises(OutputValidationError, match="no unit"):
            CalculationOutput(
                cement_production_kt.fillna(0), description="Cement production"
            )


class TestReadAndrew2019:
    """Tests for read_andrew2019."""

    @pytest.fixture
    def andrew_csv(self, tmp_path):
        path = tmp_path / "cement_production.csv"
        pd.DataFrame(
            {
                "Year": [2016, 2017, 2018],
                "Germany": [32700.0, 34000.0, np.nan],
                "China": [2410000.0, 2330000.0, 2370000.0],
                "Global": [4130000.0, 4120000.0, 4050000.0],
            }
        ).to_csv(path, index=False)
        return path

    def test_timeseries_structure(self, andrew_csv):
        """Test the index and year columns of the result."""
        result = read_andrew2019(andrew_csv)

        assert list(result.index.names) == ["iso3c", "unit"]
        assert list(result.columns) == ["2016", "2017", "2018"]
        assert set(result.index.get_level_values("unit")) == {"kt"}

    def test_country_names_converted(self, andrew_csv, caplog):
        """Test that country names become ISO3 codes and totals are dropped."""
        with caplog.at_level("WARNING"):
            result = read_andrew2019(andrew_csv)

        assert set(result.index.get_level_values("iso3c")) == {"DEU", "CHN"}
        assert "Global" in caplog.text

    def test_values_and_missing_kept(self, andrew_csv):
        """Test that values are read verbatim and gaps stay NaN."""
        result = read_andrew2019(andrew_csv)

        assert result.loc[("CHN", "kt"), "2017"] == 2330000.0
        assert np.isnan(result.loc[("DEU", "kt"), "2018"])

    def test_feeds_calc(self, andrew_csv):
        """Test that the reader output is accepted by the calc function."""
        result = calc_cement_production(read_andrew2019(andrew_csv))

        assert result.x.loc[("DEU", "t"), "2016"] == pytest.approx(32700.0 * 1000)
        assert result.x.loc[("DEU", "t"), "2018"] == 0.0

    def test_config(self, andrew_csv, tmp_path):
        """Test reading with a source configuration."""
        renamed = tmp_path / "renamed.csv"
        pd.read_csv(andrew_csv).rename(columns={"Year": "year"}).to_csv(
            renamed, index=False
        )
        config = CementSourceConfig(path=str(renamed), year_column="year")

        result = read_andrew2019(config=config)

        assert list(result.columns) == ["2016", "2017", "2018"]

    def test_requires_path_or_config(self):
        """Test that a call without source is rejected."""
        with pytest.raises(ConfigurationError):
            read_andrew2019()

    def test_missing_year_column_raises(self, tmp_path):
        """Test that a file without year column is reported."""
        path = tmp_path / "cement.csv"
        pd.DataFrame({"Germany": [1.0]}).to_csv(path, index=False)

        with pytest.raises(DataLoadingError, match="Year"):
            read_andrew2019(path)
