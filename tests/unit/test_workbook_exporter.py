"""Tests for the two-sheet re-export."""

from __future__ import annotations

import io

from openpyxl import load_workbook

from rosterlens.analysis.aggregator import aggregate_by_manager
from rosterlens.core.config import AppSettings, ExportConfig
from rosterlens.export.workbook_exporter import STATISTICS_HEADERS, export_workbook, write_workbook
from rosterlens.ingest.record_normalizer import normalize_records


def _load(data: bytes):
    return load_workbook(io.BytesIO(data))


def _export(headers, rows, settings):
    records = normalize_records(headers, rows, settings)
    stats = aggregate_by_manager(records)
    return records, stats, export_workbook(records, stats, settings)


def test_sheet_layout(headers, rows, settings):
    records, stats, data = _export(headers, rows, settings)
    wb = _load(data)
    assert wb.sheetnames == ["Employees", "Statistics"]

    employees = list(wb["Employees"].iter_rows(values_only=True))
    assert employees[0] == ("Name", "Function", "Leidinggevende", "Parttime (%)", "Present")
    assert employees[1] == ("Anna", "Developer", "Alice", 50, "Yes")
    assert employees[4] == ("Daan", "Developer", "Bob", "60", "No")
    assert len(employees) == len(records) + 1

    statistics = list(wb["Statistics"].iter_rows(values_only=True))
    assert list(statistics[0]) == STATISTICS_HEADERS
    assert statistics[1] == ("Alice", 2, 1, 1, 75.0)
    assert statistics[2] == ("Bob", 2, 1, 1, 70.0)
    assert len(statistics) == len(stats) + 1


def test_absent_rows_are_highlighted(headers, rows, settings):
    _, _, data = _export(headers, rows, settings)
    sheet = _load(data)["Employees"]
    assert sheet.cell(row=3, column=1).fill.fgColor.rgb.endswith("FECACA")  # Bram, nee
    assert sheet.cell(row=2, column=1).fill.fill_type is None  # Anna, ja


def test_highlighting_can_be_disabled(headers, rows):
    settings = AppSettings(export=ExportConfig(highlight_absent=False))
    _, _, data = _export(headers, rows, settings)
    sheet = _load(data)["Employees"]
    assert sheet.cell(row=3, column=1).fill.fill_type is None


def test_export_is_deterministic(headers, rows, settings):
    _, _, first = _export(headers, rows, settings)
    _, _, second = _export(headers, rows, settings)
    values = lambda data: [list(ws.iter_rows(values_only=True)) for ws in _load(data)]
    assert values(first) == values(second)


def test_write_workbook_uses_configured_filename(tmp_path, headers, rows, settings):
    records = normalize_records(headers, rows, settings)
    path = write_workbook(tmp_path, records, aggregate_by_manager(records), settings)
    assert path == tmp_path / "employee_analysis.xlsx"
    assert _load(path.read_bytes()).sheetnames == ["Employees", "Statistics"]
