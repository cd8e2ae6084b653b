"""SchemaSniffer reports a workbook's shape and per-column value kinds."""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from loguru import logger

from rosterlens.core.config import AppSettings
from rosterlens.core.types import Header, RawRow
from rosterlens.models.structure_report import StructureReport
from rosterlens.models.workbook import DecodedWorkbook


def value_kind(value: Any) -> str:
    """Primitive kind of a cell: boolean, number, text or other."""
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float, Decimal)):
        return "number"
    if isinstance(value, str):
        return "text"
    return "other"


def infer_column_types(headers: list[Header], rows: list[RawRow], sample_size: int) -> dict[str, str]:
    """Map each named header to the "/"-joined kinds seen in the first rows.

    Blank cells are not observations; a header with none gets no entry.
    """
    sample = rows[:sample_size]
    column_types: dict[str, str] = {}
    for idx, header in enumerate(headers):
        if not header:
            continue
        kinds: list[str] = []
        for row in sample:
            value = row[idx] if idx < len(row) else None
            if value is None:
                continue
            kind = value_kind(value)
            if kind not in kinds:
                kinds.append(kind)
        if kinds:
            column_types[header] = "/".join(kinds)
    return column_types


def sniff_structure(
    workbook: DecodedWorkbook,
    file_name: str = "",
    file_size: int = 0,
    settings: AppSettings | None = None,
) -> StructureReport:
    """Build the structure report for an uploaded workbook. Never raises."""
    if settings is None:
        settings = AppSettings()

    column_types = infer_column_types(
        workbook.headers, workbook.rows, settings.imports.type_sample_rows,
    )
    report = StructureReport(
        file_name=file_name,
        file_size_bytes=file_size,
        sheet_names=workbook.sheet_names,
        active_sheet=workbook.active_sheet,
        row_count=workbook.row_count,
        column_count=workbook.column_count,
        headers=workbook.headers,
        column_types=column_types,
        sample_rows=workbook.rows[: settings.imports.sample_rows],
    )
    logger.debug(
        f"Sniffed {file_name or '<bytes>'}: {report.row_count} rows, "
        f"{report.column_count} columns, types={column_types}"
    )
    return report
