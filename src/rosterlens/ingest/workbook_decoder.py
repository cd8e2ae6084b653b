"""Workbook decoders turning raw spreadsheet bytes into a DecodedWorkbook.

Zip-based containers (.xlsx, .xlsm) go through openpyxl, binary OLE2
(.xls) through xlrd. Only the first sheet is decoded; its first row is the
header row, everything below it within the used range is data.
"""

from __future__ import annotations

import io
from typing import Any

import openpyxl
import xlrd
from loguru import logger

from rosterlens.core.exceptions import DecodeFailure
from rosterlens.core.protocols import IWorkbookDecoder
from rosterlens.core.types import Header, RawRow
from rosterlens.models.workbook import DecodedWorkbook

ZIP_MAGIC = b"PK\x03\x04"
OLE2_MAGIC = b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1"


def _header_text(value: Any) -> Header:
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


def _split(grid: list[RawRow], width: int) -> tuple[list[Header], list[RawRow]]:
    padded = [list(row) + [None] * (width - len(row)) for row in grid]
    if not padded:
        return [], []
    return [_header_text(v) for v in padded[0]], padded[1:]


class OpenpyxlDecoder:
    """IWorkbookDecoder for .xlsx / .xlsm via openpyxl."""

    def supports(self, data: bytes) -> bool:
        return data.startswith(ZIP_MAGIC)

    def decode(self, data: bytes) -> DecodedWorkbook:
        try:
            wb = openpyxl.load_workbook(io.BytesIO(data), data_only=True)
        except Exception as exc:
            raise DecodeFailure() from exc

        try:
            sheet_names = list(wb.sheetnames)
            ws = wb[sheet_names[0]]
            row_count = ws.max_row
            column_count = ws.max_column
            grid = [
                list(row)
                for row in ws.iter_rows(
                    min_row=1, max_row=row_count,
                    min_col=1, max_col=column_count,
                    values_only=True,
                )
            ]
        finally:
            wb.close()

        headers, rows = _split(grid, column_count)
        logger.debug(f"openpyxl decoded sheet {sheet_names[0]!r}: {row_count}x{column_count}")
        return DecodedWorkbook(
            sheet_names=sheet_names,
            active_sheet=sheet_names[0],
            row_count=row_count,
            column_count=column_count,
            headers=headers,
            rows=rows,
        )


class XlrdDecoder:
    """IWorkbookDecoder for legacy .xls via xlrd."""

    def supports(self, data: bytes) -> bool:
        return data.startswith(OLE2_MAGIC)

    def decode(self, data: bytes) -> DecodedWorkbook:
        try:
            book = xlrd.open_workbook(file_contents=data)
        except Exception as exc:
            raise DecodeFailure() from exc

        sheet_names = book.sheet_names()
        ws = book.sheet_by_index(0)
        grid = [
            [self._cell_value(ws.cell(r, c), book.datemode) for c in range(ws.ncols)]
            for r in range(ws.nrows)
        ]
        headers, rows = _split(grid, ws.ncols)
        logger.debug(f"xlrd decoded sheet {ws.name!r}: {ws.nrows}x{ws.ncols}")
        return DecodedWorkbook(
            sheet_names=sheet_names,
            active_sheet=sheet_names[0],
            row_count=ws.nrows,
            column_count=ws.ncols,
            headers=headers,
            rows=rows,
        )

    @staticmethod
    def _cell_value(cell: Any, datemode: int) -> Any:
        if cell.ctype in (xlrd.XL_CELL_EMPTY, xlrd.XL_CELL_BLANK, xlrd.XL_CELL_ERROR):
            return None
        if cell.ctype == xlrd.XL_CELL_BOOLEAN:
            return bool(cell.value)
        if cell.ctype == xlrd.XL_CELL_DATE:
            return xlrd.xldate.xldate_as_datetime(cell.value, datemode)
        if cell.ctype == xlrd.XL_CELL_NUMBER and float(cell.value).is_integer():
            return int(cell.value)
        return cell.value


class WorkbookDecoder:
    """Picks the container decoder from the file's magic bytes."""

    def __init__(self, decoders: list[IWorkbookDecoder] | None = None) -> None:
        self._decoders = decoders if decoders is not None else [OpenpyxlDecoder(), XlrdDecoder()]

    def supports(self, data: bytes) -> bool:
        return any(d.supports(data) for d in self._decoders)

    def decode(self, data: bytes) -> DecodedWorkbook:
        for decoder in self._decoders:
            if decoder.supports(data):
                return decoder.decode(data)
        raise DecodeFailure()
