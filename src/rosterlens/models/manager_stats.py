"""Aggregate models: per-manager statistics and roster-wide totals."""

from __future__ import annotations

from pydantic import BaseModel


class ManagerStats(BaseModel):
    """Counters for one manager group."""

    manager: str
    total_employees: int = 0
    present_employees: int = 0
    absent_employees: int = 0
    total_part_time_percentage: float = 0.0
    avg_part_time_percentage: float = 0.0  # filled once after the fold

    @property
    def avg_part_time_label(self) -> str:
        return f"{self.avg_part_time_percentage:.2f}"

    @property
    def is_balanced(self) -> bool:
        return self.present_employees + self.absent_employees == self.total_employees


class RosterTotals(BaseModel):
    """Totals across all manager groups."""

    total_employees: int = 0
    present_employees: int = 0
    absent_employees: int = 0
    avg_part_time_percentage: float = 0.0  # employee-weighted
    present_share: float = 0.0  # percent of employees
    absent_share: float = 0.0
    non_participating: int = 0  # every absent record, managed or not
