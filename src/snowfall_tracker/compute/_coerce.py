"""Lenient integer coercion for indexes and years coming from UI events."""

from __future__ import annotations

import math
import numbers


def as_int(value: object) -> int | None:
    """Coerce integral numbers (including 2023.0 and numpy ints) to int.

    Strings, bools, NaN/inf and fractional floats give None.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, numbers.Real):
        value = float(value)
        if math.isfinite(value) and value.is_integer():
            return int(value)
    return None
