"""Tests for structure sniffing and column type inference."""

from __future__ import annotations

from datetime import datetime

from rosterlens.ingest.schema_sniffer import infer_column_types, sniff_structure, value_kind
from rosterlens.models.workbook import DecodedWorkbook


def _workbook(headers, rows) -> DecodedWorkbook:
    return DecodedWorkbook(
        sheet_names=["Roster", "Notes"],
        active_sheet="Roster",
        row_count=len(rows) + 1,
        column_count=len(headers),
        headers=headers,
        rows=rows,
    )


def test_value_kind():
    assert value_kind(True) == "boolean"
    assert value_kind(3) == "number"
    assert value_kind(2.5) == "number"
    assert value_kind("x") == "text"
    assert value_kind(datetime(2024, 1, 1)) == "other"


def test_mixed_column_reports_kinds_in_first_seen_order():
    types = infer_column_types(["Parttime (%)"], [[50], ["60"], [70]], sample_size=9)
    assert types == {"Parttime (%)": "number/text"}


def test_blank_column_and_unnamed_header_have_no_signature():
    headers = ["ID", "Empty", None]
    rows = [[1, None, "x"], [2, None, "y"]]
    types = infer_column_types(headers, rows, sample_size=9)
    assert types == {"ID": "number"}


def test_only_the_first_rows_are_examined():
    rows = [[i] for i in range(9)] + [["late text"]]
    assert infer_column_types(["ID"], rows, sample_size=9) == {"ID": "number"}


def test_sniff_structure_report(settings):
    headers = ["ID", "Name", "Aanwezig", "Start", "Blank"]
    rows = [
        [i, f"Emp {i}", i % 2 == 0, datetime(2020, 1, i + 1), None]
        for i in range(6)
    ]
    report = sniff_structure(_workbook(headers, rows), "roster.xlsx", 2048, settings)

    assert report.file_name == "roster.xlsx"
    assert report.file_size_label == "2.00 KB"
    assert report.sheet_names == ["Roster", "Notes"]
    assert report.active_sheet == "Roster"
    assert report.row_count == 7
    assert report.column_count == 5
    assert report.headers == headers
    assert report.type_of("ID") == "number"
    assert report.type_of("Name") == "text"
    assert report.type_of("Aanwezig") == "boolean"
    assert report.type_of("Start") == "other"
    assert report.type_of("Blank") == "unknown"
    assert report.sample_rows == rows[:4]


def test_sniff_structure_without_data_rows(settings):
    report = sniff_structure(_workbook(["ID"], []), settings=settings)
    assert report.column_types == {}
    assert report.sample_rows == []
