"""WorkbookAnalyzer: decode, sniff, normalize and aggregate one upload."""

from __future__ import annotations

from pathlib import Path
from typing import BinaryIO, Union

from loguru import logger
from pydantic import BaseModel, Field

from rosterlens.analysis.aggregator import aggregate_by_manager, summarize
from rosterlens.core.config import AppSettings
from rosterlens.core.exceptions import ReadFailure
from rosterlens.core.protocols import IWorkbookDecoder
from rosterlens.ingest import create_decoder
from rosterlens.ingest.record_normalizer import normalize_records
from rosterlens.ingest.schema_sniffer import sniff_structure
from rosterlens.models.employee_record import EmployeeRecord
from rosterlens.models.manager_stats import ManagerStats, RosterTotals
from rosterlens.models.structure_report import StructureReport

Source = Union[bytes, bytearray, str, Path, BinaryIO]


class AnalysisResult(BaseModel):
    """Everything derived from one uploaded workbook."""

    structure: StructureReport
    records: list[EmployeeRecord] = Field(default_factory=list)
    stats: dict[str, ManagerStats] = Field(default_factory=dict)
    totals: RosterTotals = RosterTotals()


class WorkbookAnalyzer:
    """Runs the synchronous import pipeline.

    The decoder and settings are injected at construction time; both
    default to the production wiring.
    """

    def __init__(
        self,
        *,
        settings: AppSettings | None = None,
        decoder: IWorkbookDecoder | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._decoder = decoder or create_decoder(self._settings)

    @property
    def settings(self) -> AppSettings:
        return self._settings

    @staticmethod
    def read_source(source: Source) -> bytes:
        """Raw bytes from bytes, a path or a binary file object.

        Raises:
            ReadFailure: On any I/O error, with the OS message verbatim.
        """
        if isinstance(source, (bytes, bytearray)):
            return bytes(source)
        try:
            if isinstance(source, (str, Path)):
                return Path(source).read_bytes()
            return source.read()
        except OSError as exc:
            raise ReadFailure(str(exc)) from exc

    def analyze(self, data: bytes, file_name: str = "") -> AnalysisResult:
        """Run every stage over ``data``.

        Raises:
            DecodeFailure: If the bytes are not a supported workbook.
            MissingColumns: If a required header is absent.
        """
        workbook = self._decoder.decode(data)
        structure = sniff_structure(workbook, file_name, len(data), self._settings)
        records = normalize_records(workbook.headers, workbook.rows, self._settings)
        stats = aggregate_by_manager(records)
        totals = summarize(stats, records)
        logger.info(
            f"Analyzed {file_name or '<bytes>'}: {len(records)} records, "
            f"{len(stats)} managers, {totals.non_participating} non-participating"
        )
        return AnalysisResult(structure=structure, records=records, stats=stats, totals=totals)

    @staticmethod
    def source_name(source: Source) -> str:
        """Base file name of a path or named file object; "" for raw bytes."""
        if isinstance(source, (str, Path)):
            return Path(source).name
        return Path(str(getattr(source, "name", ""))).name

    def analyze_source(self, source: Source, file_name: str | None = None) -> AnalysisResult:
        if file_name is None:
            file_name = self.source_name(source)
        return self.analyze(self.read_source(source), file_name)
