"""Aggregator folds EmployeeRecords into per-manager statistics."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable

from loguru import logger

from rosterlens.core.types import ManagerName
from rosterlens.models.employee_record import EmployeeRecord
from rosterlens.models.manager_stats import ManagerStats, RosterTotals


def round_half_up(value: float, places: int) -> float:
    """Round an exact half away from zero, as fixed-point display does."""
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def aggregate_by_manager(records: Iterable[EmployeeRecord]) -> dict[ManagerName, ManagerStats]:
    """Group records by exact manager string, in first-encountered order.

    Records without a manager are skipped. Averages are computed once,
    after every record has been folded in.
    """
    stats: dict[ManagerName, ManagerStats] = {}
    skipped = 0
    for record in records:
        if not record.has_manager:
            skipped += 1
            continue
        group = stats.get(record.manager)
        if group is None:
            group = stats[record.manager] = ManagerStats(manager=record.manager)

        group.total_employees += 1
        if record.is_present:
            group.present_employees += 1
        else:
            group.absent_employees += 1
        group.total_part_time_percentage += record.part_time_value

    for group in stats.values():
        group.avg_part_time_percentage = round_half_up(
            group.total_part_time_percentage / group.total_employees, 2,
        )

    logger.debug(f"Aggregated {len(stats)} managers, skipped {skipped} records without manager")
    return stats


def summarize(stats: dict[ManagerName, ManagerStats], records: Iterable[EmployeeRecord] = ()) -> RosterTotals:
    """Roster-wide totals; ``records`` feeds the non-participating count."""
    groups = list(stats.values())
    total = sum(g.total_employees for g in groups)
    present = sum(g.present_employees for g in groups)
    absent = sum(g.absent_employees for g in groups)
    if total == 0:
        weighted_avg = present_share = absent_share = 0.0
    else:
        weighted_avg = round_half_up(
            sum(g.avg_part_time_percentage * g.total_employees for g in groups) / total, 2,
        )
        present_share = round_half_up(present / total * 100, 1)
        absent_share = round_half_up(absent / total * 100, 1)

    return RosterTotals(
        total_employees=total,
        present_employees=present,
        absent_employees=absent,
        avg_part_time_percentage=weighted_avg,
        present_share=present_share,
        absent_share=absent_share,
        non_participating=sum(1 for r in records if not r.is_present),
    )
