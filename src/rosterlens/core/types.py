"""Type aliases used across rosterlens."""

from __future__ import annotations

from datetime import date, datetime, time
from typing import Union

CellValue = Union[bool, int, float, str, datetime, date, time, None]
RawRow = list[CellValue]
Header = Union[str, None]
ManagerName = str
