"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class ColumnsConfig(BaseSettings):
    """Header names the roster import looks up by exact match."""

    model_config = {"env_prefix": "ROSTERLENS_COLUMNS_"}

    manager_header: str = "Leidinggevende"
    percentage_header: str = "Parttime (%)"
    # Checked in order; the first header present in the sheet wins.
    presence_headers: list[str] = Field(
        default_factory=lambda: ["Aanwezig", "Present", "Participation"]
    )
    presence_default: str = "nee"  # used when no presence column exists

    @property
    def required_headers(self) -> list[str]:
        return [self.manager_header, self.percentage_header]


class ImportConfig(BaseSettings):
    """Accepted containers and structure sniffing limits."""

    model_config = {"env_prefix": "ROSTERLENS_IMPORT_"}

    formats: list[Literal["xlsx", "xls"]] = Field(default_factory=lambda: ["xlsx", "xls"])
    type_sample_rows: int = 9
    sample_rows: int = 4


class ExportConfig(BaseSettings):
    """Re-export workbook layout."""

    model_config = {"env_prefix": "ROSTERLENS_EXPORT_"}

    filename: str = "employee_analysis.xlsx"
    employees_sheet: str = "Employees"
    statistics_sheet: str = "Statistics"
    highlight_absent: bool = True
    absent_fill: str = "FECACA"  # light red, ARGB without alpha


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "ROSTERLENS_"}

    environment: Literal["dev", "test", "prod"] = "dev"
    log_level: str = "INFO"
    log_file: Optional[str] = None

    columns: ColumnsConfig = ColumnsConfig()
    imports: ImportConfig = ImportConfig()
    export: ExportConfig = ExportConfig()
