"""In-memory decoders for unit tests."""

from __future__ import annotations

from typing import Any, Optional

from rosterlens.core.exceptions import DecodeFailure
from rosterlens.models.workbook import DecodedWorkbook


class MemoryWorkbookDecoder:
    """IWorkbookDecoder that ignores the bytes and serves a fixed grid."""

    def __init__(
        self,
        headers: list[Optional[str]] | None = None,
        rows: list[list[Any]] | None = None,
        sheet_names: list[str] | None = None,
    ) -> None:
        self._headers = list(headers or [])
        self._rows = [list(r) for r in rows or []]
        self._sheet_names = sheet_names or ["Sheet1"]
        self.decoded: list[bytes] = []

    def supports(self, data: bytes) -> bool:
        return True

    def decode(self, data: bytes) -> DecodedWorkbook:
        self.decoded.append(data)
        return DecodedWorkbook(
            sheet_names=self._sheet_names,
            active_sheet=self._sheet_names[0],
            row_count=len(self._rows) + 1,
            column_count=len(self._headers),
            headers=self._headers,
            rows=self._rows,
        )


class FailingWorkbookDecoder:
    """IWorkbookDecoder that rejects every payload."""

    def supports(self, data: bytes) -> bool:
        return True

    def decode(self, data: bytes) -> DecodedWorkbook:
        raise DecodeFailure()
