"""Structure report produced by the schema sniffer."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, Field

UNKNOWN_TYPE = "unknown"


class StructureReport(BaseModel):
    """What the uploaded file looks like before any normalization."""

    file_name: str = ""
    file_size_bytes: int = 0
    sheet_names: list[str] = Field(default_factory=list)
    active_sheet: str = ""
    row_count: int = 0
    column_count: int = 0
    headers: list[Optional[str]] = Field(default_factory=list)
    column_types: dict[str, str] = Field(default_factory=dict)
    sample_rows: list[list[Any]] = Field(default_factory=list)

    @property
    def file_size_label(self) -> str:
        return f"{self.file_size_bytes / 1024:.2f} KB"

    def type_of(self, header: str) -> str:
        """Type signature for ``header``, or "unknown" when nothing was observed."""
        return self.column_types.get(header, UNKNOWN_TYPE)
