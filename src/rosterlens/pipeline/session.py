"""AnalysisSession is the explicit state object for one user's uploads.

Every load starts from a blank session; a failed load leaves no partial
results behind. Repeated loads are last-write-wins.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from loguru import logger

from rosterlens.core.exceptions import RosterLensError, SessionNotReady
from rosterlens.export.workbook_exporter import export_workbook, write_workbook
from rosterlens.models.employee_record import EmployeeRecord
from rosterlens.models.manager_stats import ManagerStats, RosterTotals
from rosterlens.models.session import SessionError, SessionStatus
from rosterlens.models.structure_report import StructureReport
from rosterlens.pipeline.analyzer import Source, WorkbookAnalyzer


class AnalysisSession:
    """Holds the structure report, records and statistics of the last upload."""

    def __init__(self, analyzer: WorkbookAnalyzer | None = None) -> None:
        self._analyzer = analyzer or WorkbookAnalyzer()
        self.reset()

    def reset(self) -> None:
        """Discard all results and return to the upload state."""
        self.status = SessionStatus.EMPTY
        self.file_name = ""
        self.structure: Optional[StructureReport] = None
        self.records: list[EmployeeRecord] = []
        self.stats: dict[str, ManagerStats] = {}
        self.totals = RosterTotals()
        self.error: Optional[SessionError] = None

    def load(self, source: Source, file_name: str | None = None) -> SessionStatus:
        """Analyze a new upload, replacing whatever the session held."""
        self.reset()
        if file_name is None:
            file_name = self._analyzer.source_name(source)
        try:
            result = self._analyzer.analyze_source(source, file_name)
        except RosterLensError as exc:
            self.status = SessionStatus.FAILED
            self.file_name = file_name
            self.error = SessionError(kind=exc.kind, message=str(exc), file_name=self.file_name)
            logger.warning(f"Upload {self.file_name or '<bytes>'} failed ({exc.kind}): {exc}")
            return self.status

        self.file_name = result.structure.file_name
        self.structure = result.structure
        self.records = result.records
        self.stats = result.stats
        self.totals = result.totals
        self.status = SessionStatus.LOADED
        return self.status

    @property
    def is_loaded(self) -> bool:
        return self.status == SessionStatus.LOADED

    @property
    def non_participating(self) -> int:
        return self.totals.non_participating

    @staticmethod
    def highlighted(record: EmployeeRecord) -> bool:
        """Whether the employee row is flagged as not participating."""
        return not record.is_present

    def _require_loaded(self) -> None:
        if not self.is_loaded:
            raise SessionNotReady(f"No analysis loaded (session is {self.status})")

    def export(self) -> bytes:
        self._require_loaded()
        return export_workbook(self.records, self.stats, self._analyzer.settings)

    def save_export(self, directory: str | Path) -> Path:
        self._require_loaded()
        return write_workbook(directory, self.records, self.stats, self._analyzer.settings)
