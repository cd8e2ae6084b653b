"""Pluggable workbook decoders behind the IWorkbookDecoder protocol."""

from __future__ import annotations

from rosterlens.core.config import AppSettings
from rosterlens.ingest.workbook_decoder import OpenpyxlDecoder, WorkbookDecoder, XlrdDecoder

_DECODERS = {"xlsx": OpenpyxlDecoder, "xls": XlrdDecoder}


def create_decoder(settings: AppSettings | None = None) -> WorkbookDecoder:
    """Create a wired-up decoder for the container formats in settings.

    "xlsx" covers the zip/XML family (.xlsx, .xlsm), "xls" the OLE2 format.
    """
    if settings is None:
        settings = AppSettings()

    return WorkbookDecoder([_DECODERS[fmt]() for fmt in settings.imports.formats])
