"""Session status and error payload models."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel


class SessionStatus(StrEnum):
    """Lifecycle state of an AnalysisSession."""

    EMPTY = "empty"
    LOADED = "loaded"
    FAILED = "failed"


class SessionError(BaseModel):
    """Terminal error for the current upload."""

    kind: str  # read, decode, missing_columns
    message: str
    file_name: str = ""
