"""Pydantic models for data source configuration validation."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator, model_validator

from industry_sources.library.error_messages import format_error, suggest_similar
from industry_sources.library.exceptions import ConfigurationError
from industry_sources.library.utils.excel import parse_cell_range


class WEIOSourceConfig(BaseModel):
    """Configuration for the IEA World Energy Investment Outlook 2014 source."""

    path: str = Field(".", description="Directory holding the source files")
    country_groups_file: str = Field(
        "IEA_WEO_country_groups.csv",
        description="CSV mapping IEA regions to comma-separated ISO3 codes",
    )
    data_file: str = Field(
        "WEIO2014AnnexA.xls", description="Workbook with one sheet per IEA region"
    )
    excluded_sheets: list[str] = Field(
        default_factory=lambda: ["Contents"],
        description="Sheets that do not hold regional data",
    )
    label_cell: str = Field("C2", description="Cell holding the region label")
    value_range: str = Field(
        "C39:F40",
        description="Block of metric rows; first column is the name, last the value",
    )

    @field_validator("label_cell")
    @classmethod
    def validate_label_cell(cls, v: str) -> str:
        """Validate that the label reference is a single cell."""
        cell_range = parse_cell_range(v)
        if cell_range.n_rows != 1 or cell_range.n_cols != 1:
            raise ConfigurationError(f"label_cell must be a single cell, got '{v}'")
        return v

    @field_validator("value_range")
    @classmethod
    def validate_value_range(cls, v: str) -> str:
        """Validate that the value block spans a name and a value column."""
        cell_range = parse_cell_range(v)
        if cell_range.n_cols < 2:
            raise ConfigurationError(
                f"value_range must span at least two columns (name and value), got '{v}'"
            )
        return v


class CementSourceConfig(BaseModel):
    """Configuration for the Andrew (2019) cement production source."""

    path: str = Field(..., description="Path to the cement production CSV")
    source_unit: str = Field("kt", description="Unit of the values in the CSV")
    year_column: str = Field("Year", description="Name of the year column")


class DataSourcesConfig(BaseModel):
    """Top-level configuration for all data sources."""

    weio_2014: WEIOSourceConfig = Field(
        default_factory=WEIOSourceConfig,
        description="IEA World Energy Investment Outlook 2014",
    )
    andrew_2019: CementSourceConfig | None = Field(
        None, description="Andrew (2019) cement production"
    )
    active_sources: list[str] = Field(
        default_factory=list, description="Sources to read, by configuration key"
    )

    @model_validator(mode="after")
    def validate_active_sources(self) -> DataSourcesConfig:
        """Validate that active sources exist in available sources."""
        available = [
            name
            for name in ("weio_2014", "andrew_2019")
            if getattr(self, name) is not None
        ]
        for source in self.active_sources:
            if source not in available:
                raise ConfigurationError(
                    format_error(
                        "invalid_source",
                        source=source,
                        suggestion=suggest_similar(source, available),
                    )
                )
        return self
