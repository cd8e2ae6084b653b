"""rosterlens exception hierarchy."""

from __future__ import annotations


class RosterLensError(Exception):
    """Base exception for all rosterlens errors."""

    kind = "error"


class ReadFailure(RosterLensError):
    """The uploaded bytes could not be read at all."""

    kind = "read"


class DecodeFailure(RosterLensError):
    """Bytes were read but are not a supported spreadsheet."""

    kind = "decode"

    def __init__(self, message: str = "Failed to process the Excel file. Please check the format.") -> None:
        super().__init__(message)


class MissingColumns(RosterLensError):
    """The workbook decoded but lacks one or more required headers."""

    kind = "missing_columns"

    def __init__(self, missing: list[str], required: list[str]) -> None:
        self.missing = list(missing)
        self.required = list(required)
        named = ", ".join(f'"{name}"' for name in self.missing)
        expected = " and ".join(f'"{name}"' for name in self.required)
        super().__init__(
            f"Required columns missing: {named}. "
            f"Please check that your file has {expected} columns."
        )


class SessionNotReady(RosterLensError):
    """An operation needs loaded analysis results but the session has none."""

    kind = "not_ready"
