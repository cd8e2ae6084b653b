"""Decoded workbook handed from the decoder to the sniffer and normalizer."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, Field


class DecodedWorkbook(BaseModel):
    """First sheet of a workbook as a header row plus positional data rows."""

    sheet_names: list[str] = Field(default_factory=list)
    active_sheet: str = ""
    row_count: int = 0  # declared used range, header included
    column_count: int = 0
    headers: list[Optional[str]] = Field(default_factory=list)
    rows: list[list[Any]] = Field(default_factory=list)

    @property
    def data_row_count(self) -> int:
        return len(self.rows)
