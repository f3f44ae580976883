# Requires Python 3.12+
# Uses native type hints: list[x], tuple[x, y], X | None (PEP 585, PEP 604)
from __future__ import annotations

import math

import numpy as np
from scipy.optimize import brentq

from .inputs import is_beginning, to_number

__version__ = "0.1.0"

DEFAULT_BRACKET: tuple[float, float] = (-0.99, 1.0)
DEFAULT_TOLERANCE: float = 1e-12
DEFAULT_MAX_ITERATIONS: int = 100


# =============================================================================
# RATE: Implied Periodic Rate
# =============================================================================

def _tvm_balance(
        r: float,
        n: float,
        payment: float,
        start_amount: float,
        future_value: float,
        t: int
) -> float:
    """Time-value-of-money identity; zero at the implied rate."""
    if r == 0:
        return start_amount + payment * n + future_value
    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        qn = np.float64(1 + r) ** n
        return float(start_amount * qn + payment * (1 + r * t) * (qn - 1) / r + future_value)


def rate(
        periods: float,
        payment: float,
        start_amount: float,
        future_value: float = 0,
        payment_timing: int = 0,
        bracket: tuple[float, float] = DEFAULT_BRACKET,
        tolerance: float = DEFAULT_TOLERANCE,
        max_iterations: int = DEFAULT_MAX_ITERATIONS
) -> float:
    """
    Calculate the interest rate per period of an annuity.

    Spreadsheet equivalent: RATE(nper, pmt, pv, [fv], [type])

    No closed form exists, so the rate is the root of

        f(r) = S₀·(1+r)ⁿ + P·(1 + r·t)·((1+r)ⁿ - 1)/r + FV

    (with limit S₀ + P·n + FV at r = 0), found with Brent's method inside
    ``bracket``. Unlike the spreadsheet there is no guess argument; widen or
    narrow the bracket instead.

    Args:
        periods: Number of payment periods
        payment: Payment made each period
        start_amount: Balance at the start (present value)
        future_value: Balance to attain after the last payment (default 0)
        payment_timing: 0 = end of period, nonzero = beginning of period
        bracket: (lower, upper) rates that must enclose the root
        tolerance: Absolute tolerance on the rate
        max_iterations: Maximum solver iterations

    Returns:
        Interest rate per period as decimal

    Raises:
        ValueError: If no rate in the bracket satisfies the inputs, or the
            solver does not converge

    Example:
        >>> round(rate(48, -200, 8000), 8)
        0.00770147
    """
    n = to_number(periods)
    p = to_number(payment)
    s0 = to_number(start_amount)
    f = to_number(future_value)
    t = 1 if is_beginning(payment_timing) else 0

    lower, upper = bracket
    if not lower < upper:
        raise ValueError(f"bracket must be increasing, got {bracket}")

    def objective(r: float) -> float:
        value = _tvm_balance(r, n, p, s0, f, t)
        if not math.isfinite(value):
            raise ValueError(f"time value identity is not finite at rate {r}")
        return value

    try:
        return float(brentq(objective, lower, upper, xtol=tolerance, maxiter=max_iterations))
    except (ValueError, RuntimeError) as e:
        # brentq raises ValueError when f(lower) and f(upper) share a sign and
        # RuntimeError when it fails to converge within maxiter
        raise ValueError(
            f"Could not find a rate for the given cash flows. "
            f"periods: {n}, payment: {p}, start_amount: {s0}, future_value: {f}, "
            f"bracket: {bracket}. Original error: {e}"
        ) from e
