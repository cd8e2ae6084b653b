"""Positional layout of the roster's non-critical columns."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field


class FieldPosition(BaseModel):
    """Mapping from a zero-based sheet column to an EmployeeRecord field."""

    position: int
    target_field: str
    data_type: Literal["text", "date"] = "text"


def _default_positions() -> list[FieldPosition]:
    return [
        FieldPosition(position=0, target_field="id"),
        FieldPosition(position=1, target_field="name"),
        FieldPosition(position=2, target_field="function"),
        FieldPosition(position=3, target_field="employment_type"),
        FieldPosition(position=4, target_field="employee_type"),
        FieldPosition(position=5, target_field="start_date", data_type="date"),
        FieldPosition(position=6, target_field="end_date", data_type="date"),
        FieldPosition(position=9, target_field="employer"),
    ]


class RowMapping(BaseModel):
    """Every positional field in one table; layout changes are one edit here."""

    positions: list[FieldPosition] = Field(default_factory=_default_positions)

    def cell(self, row: list[Any], position: int) -> Any:
        """Cell at ``position``, or None when the row is shorter."""
        return row[position] if 0 <= position < len(row) else None


DEFAULT_ROW_MAPPING = RowMapping()
