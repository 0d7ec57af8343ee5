"""Lenient numeric coercion for text typed into form inputs.

Text is read up to the longest numeric prefix, so ``"12.5kg"`` is 12.5 and
``"5 units"`` is 5. Input without a numeric prefix gives the default.
"""

from __future__ import annotations

import math
import re
from typing import Any

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def coerce_float(value: Any, default: float = 0.0) -> float:
    """Parse ``value`` as a float, falling back to ``default`` when it cannot be read."""
    if isinstance(value, bool) or value is None:
        return default
    if isinstance(value, (int, float)):
        result = float(value)
    else:
        match = _FLOAT_PREFIX.match(str(value))
        if match is None:
            return default
        result = float(match.group(1))
    if math.isnan(result) or math.isinf(result):
        return default
    return result


def coerce_int(value: Any, default: int = 0) -> int:
    """Parse ``value`` as an integer from its leading digits.

    ``"7.8"`` gives 7 and ``"1e3"`` gives 1; junk gives ``default``.
    """
    if isinstance(value, bool) or value is None:
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return default
        return int(value)
    match = _INT_PREFIX.match(str(value))
    if match is None:
        return default
    return int(match.group(1))


def coerce_optional_int(value: Any) -> int | None:
    """Blank means "not set"; anything else goes through ``coerce_int``."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    return coerce_int(value)
