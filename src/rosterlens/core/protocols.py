"""Protocol interfaces for rosterlens collaborators.

Stages depend on these Protocols, not on a concrete spreadsheet library,
so tests can hand in canned workbooks.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from rosterlens.models.workbook import DecodedWorkbook


# ---------------------------------------------------------------------------
# Workbook Decoder
# ---------------------------------------------------------------------------

@runtime_checkable
class IWorkbookDecoder(Protocol):
    """Turns raw spreadsheet bytes into the first sheet's header and rows."""

    def decode(self, data: bytes) -> DecodedWorkbook: ...

    def supports(self, data: bytes) -> bool: ...
