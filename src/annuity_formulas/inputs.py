# Requires Python 3.12+
# Uses native type hints: list[x], tuple[x, y], X | None (PEP 585, PEP 604)
from __future__ import annotations

import math
from enum import IntEnum

import numpy as np

__version__ = "0.1.0"


# =============================================================================
# Argument Normalization ("empty cell = 0")
# =============================================================================
#
# Spreadsheet financial functions treat an empty cell as zero. Every formula in
# this package runs its arguments through the helpers below before doing any
# arithmetic, so that None, "", False or a non-numeric value behave like 0.
#
# Floats keep NaN and +/-Infinity as given. Integer parameters (period counts)
# are truncated toward zero. A NaN count becomes 0 and an infinite count
# becomes NaN.
# =============================================================================

class PaymentTiming(IntEnum):
    """When payments are due within each period."""
    END = 0     # ordinary annuity
    BEGIN = 1   # annuity-due


def to_number(value: object) -> np.float64:
    """
    Coerce a spreadsheet-style argument to a float64.

    Args:
        value: Anything a caller may pass for a numeric cell.

    Returns:
        float64 value; 0.0 for None, empty strings, False and non-numeric values.

    Example:
        >>> [float(to_number(v)) for v in (None, "12.5", "abc")]
        [0.0, 12.5, 0.0]
    """
    if value is None or value is False:
        return np.float64(0.0)
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return np.float64(0.0)
    try:
        return np.float64(float(value))
    except OverflowError:
        # integers beyond float range
        return np.float64(np.inf if value > 0 else -np.inf)
    except (TypeError, ValueError):
        return np.float64(0.0)


def to_integer(value: object) -> int | np.float64:
    """
    Coerce a period-count argument to an int, truncating toward zero.

    NaN counts as an empty cell and becomes 0. An infinite count has no integer
    value and comes back as NaN, so the formulas that use it return NaN.
    """
    number = to_number(value)
    if math.isnan(number):
        return 0
    if math.isinf(number):
        return np.float64(np.nan)
    return math.trunc(number)


def to_raw_number(value: object) -> np.float64:
    """
    Convert a value as passed, without the zero default.

    Absent or non-numeric values become NaN instead of 0.0. Only the rate-zero
    branch of ``pv`` reads its future value this way.
    """
    if value is None or isinstance(value, str) and not value.strip():
        return np.float64(np.nan)
    try:
        return np.float64(float(value))
    except (TypeError, ValueError):
        return np.float64(np.nan)


def is_beginning(payment_timing: object) -> bool:
    """True when payments fall at the beginning of each period (any nonzero timing)."""
    timing = to_number(payment_timing)
    return bool(timing) and not math.isnan(timing)
