"""Shared test doubles: canned decoders and an in-memory workbook builder."""

from __future__ import annotations

import io
from typing import Any

from openpyxl import Workbook

from rosterlens.ingest.memory_decoder import FailingWorkbookDecoder, MemoryWorkbookDecoder

ROSTER_HEADERS = [
    "ID", "Name", "Function", "Type", "EmpType", "Start", "End", "Team", "Location",
    "Employer", "Leidinggevende", "Parttime (%)", "Aanwezig",
]


def roster_row(
    emp_id: int,
    name: str,
    manager: str | None,
    part_time: Any,
    present: Any,
    start: Any = None,
) -> list[Any]:
    """One row in ROSTER_HEADERS layout."""
    return [
        emp_id, name, "Developer", "Vast", "Intern", start, None, "Core", "Utrecht",
        "Acme BV", manager, part_time, present,
    ]


def xlsx_bytes(headers: list[Any], rows: list[list[Any]], sheet_names: list[str] | None = None) -> bytes:
    """Serialize a header row plus data rows into .xlsx bytes (first sheet)."""
    wb = Workbook()
    ws = wb.active
    names = sheet_names or ["Sheet1"]
    ws.title = names[0]
    ws.append(headers)
    for row in rows:
        ws.append(row)
    for extra in names[1:]:
        wb.create_sheet(extra)
    buffer = io.BytesIO()
    wb.save(buffer)
    return buffer.getvalue()


__all__ = [
    "FailingWorkbookDecoder", "MemoryWorkbookDecoder", "ROSTER_HEADERS", "roster_row", "xlsx_bytes",
]
