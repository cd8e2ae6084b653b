"""Employee Record, the normalized row every later stage operates on.

Display fields are extracted by position through the RowMapping table;
manager, part-time percentage and presence are located by header name.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Optional

from pydantic import BaseModel

from rosterlens.core.presence import classify_presence, coerce_percentage, presence_label


class EmployeeRecord(BaseModel):
    """Single employee row in normalized form."""

    # --- Positional display fields ---
    id: Optional[str] = None
    name: Optional[str] = None
    function: Optional[str] = None
    employment_type: Optional[str] = None
    employee_type: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    employer: Optional[str] = None

    # --- Header-located fields ---
    manager: Optional[str] = None
    part_time_percentage: Any = None  # raw number or text, coerced on use
    present: Any = "nee"  # raw participation indicator

    @property
    def has_manager(self) -> bool:
        return bool(self.manager)

    @property
    def is_present(self) -> bool:
        return classify_presence(self.present)

    @property
    def present_label(self) -> str:
        return presence_label(self.present)

    @property
    def part_time_value(self) -> float:
        return coerce_percentage(self.part_time_percentage)
