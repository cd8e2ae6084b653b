"""RecordNormalizer maps decoded rows to EmployeeRecords."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, Optional

from loguru import logger
from openpyxl.utils.datetime import from_excel
from pydantic import BaseModel

from rosterlens.core.config import AppSettings, ColumnsConfig
from rosterlens.core.exceptions import MissingColumns
from rosterlens.core.types import Header, RawRow
from rosterlens.models.employee_record import EmployeeRecord
from rosterlens.models.row_mapping import DEFAULT_ROW_MAPPING, RowMapping


class ColumnLocation(BaseModel):
    """Positions of the header-located columns."""

    manager: int
    percentage: int
    presence: Optional[int] = None


def locate_columns(headers: list[Header], columns: ColumnsConfig | None = None) -> ColumnLocation:
    """Find the required and presence columns by exact header match.

    Raises:
        MissingColumns: If any required header is absent.
    """
    if columns is None:
        columns = ColumnsConfig()

    def index_of(name: str) -> int:
        return headers.index(name) if name in headers else -1

    manager_idx = index_of(columns.manager_header)
    percentage_idx = index_of(columns.percentage_header)
    missing = [
        name for name, idx in (
            (columns.manager_header, manager_idx),
            (columns.percentage_header, percentage_idx),
        ) if idx == -1
    ]
    if missing:
        raise MissingColumns(missing, columns.required_headers)

    presence_idx = next(
        (idx for idx in map(index_of, columns.presence_headers) if idx != -1), None,
    )
    return ColumnLocation(manager=manager_idx, percentage=percentage_idx, presence=presence_idx)


def display_text(value: Any) -> str | None:
    """Render a cell as display text; integral floats lose their ".0"."""
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, datetime):
        return value.date().isoformat() if value.time() == datetime.min.time() else value.isoformat()
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def as_date(value: Any) -> date | None:
    """Date cell, Excel serial number or ISO text to a date; else None."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, bool) or not value:
        return None
    if isinstance(value, (int, float)):
        if value < 1:  # fractions of a day are times, not dates
            return None
        try:
            return from_excel(value).date()
        except (ValueError, OverflowError):
            return None
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value.strip()).date()
        except ValueError:
            return None
    return None


def _positional_fields(row: RawRow, mapping: RowMapping) -> dict[str, Any]:
    fields: dict[str, Any] = {}
    for entry in mapping.positions:
        value = mapping.cell(row, entry.position)
        fields[entry.target_field] = as_date(value) if entry.data_type == "date" else display_text(value)
    return fields


def normalize_records(
    headers: list[Header],
    rows: list[RawRow],
    settings: AppSettings | None = None,
    mapping: RowMapping = DEFAULT_ROW_MAPPING,
) -> list[EmployeeRecord]:
    """One EmployeeRecord per data row; no row is dropped.

    Raises:
        MissingColumns: If the manager or part-time header is absent.
    """
    if settings is None:
        settings = AppSettings()

    location = locate_columns(headers, settings.columns)
    logger.debug(
        f"Located manager={location.manager}, percentage={location.percentage}, "
        f"presence={location.presence}"
    )

    records: list[EmployeeRecord] = []
    for row in rows:
        if location.presence is None:
            present = settings.columns.presence_default
        else:
            present = mapping.cell(row, location.presence)
        records.append(EmployeeRecord(
            **_positional_fields(row, mapping),
            manager=display_text(mapping.cell(row, location.manager)),
            part_time_percentage=mapping.cell(row, location.percentage),
            present=present,
        ))
    logger.debug(f"Normalized {len(records)} records")
    return records
