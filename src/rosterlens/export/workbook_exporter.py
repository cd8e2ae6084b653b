"""WorkbookExporter writes records and statistics back to an .xlsx.

The Employees sheet comes first and reuses the import header names for
manager, part-time and presence, so an exported file re-imports through
the same pipeline.
"""

from __future__ import annotations

import io
from pathlib import Path
from typing import Iterable, Mapping

from loguru import logger
from openpyxl import Workbook
from openpyxl.styles import Font, PatternFill

from rosterlens.core.config import AppSettings
from rosterlens.models.employee_record import EmployeeRecord
from rosterlens.models.manager_stats import ManagerStats

STATISTICS_HEADERS = ["Product Owner", "Total Employees", "Present", "Absent", "Avg. Part-time %"]


def employee_headers(settings: AppSettings) -> list[str]:
    columns = settings.columns
    presence = "Present" if "Present" in columns.presence_headers else columns.presence_headers[0]
    return ["Name", "Function", columns.manager_header, columns.percentage_header, presence]


def build_workbook(
    records: Iterable[EmployeeRecord],
    stats: Mapping[str, ManagerStats],
    settings: AppSettings | None = None,
) -> Workbook:
    """Two-sheet workbook: one row per employee, one row per manager."""
    if settings is None:
        settings = AppSettings()
    export = settings.export
    bold = Font(bold=True)
    absent_fill = PatternFill(start_color=export.absent_fill, end_color=export.absent_fill, fill_type="solid")

    wb = Workbook()
    employees = wb.active
    employees.title = export.employees_sheet
    employees.append(employee_headers(settings))
    for cell in employees[1]:
        cell.font = bold

    for record in records:
        employees.append([
            record.name,
            record.function,
            record.manager,
            record.part_time_percentage,
            record.present_label,
        ])
        if export.highlight_absent and not record.is_present:
            for cell in employees[employees.max_row]:
                cell.fill = absent_fill

    statistics = wb.create_sheet(export.statistics_sheet)
    statistics.append(STATISTICS_HEADERS)
    for cell in statistics[1]:
        cell.font = bold
    for manager, stat in stats.items():
        statistics.append([
            manager,
            stat.total_employees,
            stat.present_employees,
            stat.absent_employees,
            stat.avg_part_time_percentage,
        ])
        statistics.cell(row=statistics.max_row, column=5).number_format = "0.00"

    return wb


def export_workbook(
    records: Iterable[EmployeeRecord],
    stats: Mapping[str, ManagerStats],
    settings: AppSettings | None = None,
) -> bytes:
    """Serialize the analysis to .xlsx bytes."""
    buffer = io.BytesIO()
    build_workbook(records, stats, settings).save(buffer)
    data = buffer.getvalue()
    logger.debug(f"Exported workbook: {len(stats)} managers, {len(data)} bytes")
    return data


def write_workbook(
    directory: str | Path,
    records: Iterable[EmployeeRecord],
    stats: Mapping[str, ManagerStats],
    settings: AppSettings | None = None,
) -> Path:
    """Write the export into ``directory`` under the configured filename."""
    if settings is None:
        settings = AppSettings()
    path = Path(directory) / settings.export.filename
    path.write_bytes(export_workbook(records, stats, settings))
    logger.info(f"Wrote {path}")
    return path
