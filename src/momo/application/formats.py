"""Format checks shared by the config and request validators."""

from __future__ import annotations

import math
import re
from typing import Any

_UUID_V4_RE = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}",
    re.IGNORECASE,
)

_NUMBER_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def is_present(value: Any) -> bool:
    """Return True if ``value`` is neither ``None`` nor an empty string."""
    return value is not None and value != ""


def is_uuid_v4(value: Any) -> bool:
    """Return True if ``value`` is a UUID v4 in canonical 8-4-4-4-12 form."""
    return isinstance(value, str) and _UUID_V4_RE.fullmatch(value) is not None


def is_numeric(value: Any) -> bool:
    """Return True if ``value`` is a finite number or text representing one.

    Surrounding whitespace is ignored; ``nan`` and ``inf`` are rejected, as
    are booleans.
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, float):
        return math.isfinite(value)
    if not isinstance(value, str):
        return False
    return _NUMBER_RE.fullmatch(value.strip()) is not None
