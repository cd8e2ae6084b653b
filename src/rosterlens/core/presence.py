"""Presence classification and part-time coercion.

``classify_presence`` is the one predicate behind display highlighting,
aggregation counts and the exported Yes/No label.
"""

from __future__ import annotations

import math
import re
from decimal import Decimal
from typing import Any

PRESENT_VALUES = frozenset({"ja", "yes", "y", "true", "1"})

_LEADING_NUMBER = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def classify_presence(value: Any) -> bool:
    """True when ``value`` means the employee participates.

    Booleans map to themselves, other numbers to ``value != 0``, text to
    membership of PRESENT_VALUES after trimming and lower-casing. Blank,
    unrecognised and any other value is absent.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float, Decimal)):
        return value != 0
    if isinstance(value, str):
        return value.strip().lower() in PRESENT_VALUES
    return False


def presence_label(value: Any) -> str:
    return "Yes" if classify_presence(value) else "No"


def coerce_percentage(value: Any) -> float:
    """Part-time percentage as float; anything non-numeric contributes 0."""
    if isinstance(value, bool) or value is None:
        return 0.0
    if isinstance(value, (int, float, Decimal)):
        number = float(value)
    elif isinstance(value, str):
        match = _LEADING_NUMBER.match(value.strip())
        if match is None:
            return 0.0
        number = float(match.group(0))
    else:
        return 0.0
    return number if math.isfinite(number) else 0.0
