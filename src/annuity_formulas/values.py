# Requires Python 3.12+
# Uses native type hints: list[x], tuple[x, y], X | None (PEP 585, PEP 604)
from __future__ import annotations

import numpy as np

from .inputs import is_beginning, to_number, to_raw_number

__version__ = "0.1.0"


# =============================================================================
# Present and Future Values
# =============================================================================
#
# With discount factor v = 1/(1+r), the present value of n level payments P is
#
#     P·(v + v² + ... + vⁿ) = P·v·(1 - vⁿ)/(1 - v)       (payments at period end)
#     P·(1 + v + ... + vⁿ⁻¹) = P·(1 - vⁿ)/(1 - v)         (payments at period start)
#
# and a terminal balance FV is worth FV·vⁿ today. Results follow the
# spreadsheet sign convention: receiving payments has a negative present value.
# =============================================================================

def pv(
        rate: float,
        periods: float,
        payment: float = 0,
        future_value: float = 0,
        payment_timing: int = 0
) -> float:
    """
    Calculate the present value of a loan or an investment based on a constant
    interest rate.

    Spreadsheet equivalent: PV(rate, nper, pmt, [fv], [type])

    Args:
        rate: Interest rate per period as decimal
        periods: Number of payment periods (may be fractional)
        payment: Payment made each period (default 0)
        future_value: Balance to attain after the last payment (default 0)
        payment_timing: 0 = end of period, nonzero = beginning of period

    Returns:
        Present value. For rate zero this is payment·periods + future_value,
        where future_value is read as passed: None or a non-numeric value
        gives nan in that branch.

    Example:
        >>> round(pv(0.01, 12, 100), 8)
        -1125.50774735
    """
    r = to_number(rate)
    n = to_number(periods)
    p = to_number(payment)
    f = to_number(future_value)

    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        if r == 0:
            return float(p * n + to_raw_number(future_value))

        q = 1 / (1 + r)
        qn = q ** n

        res = p * (1 - qn) / (q - 1) * (1 if is_beginning(payment_timing) else q)
        return float(res - f * qn)


def fv(
        rate: float,
        periods: float,
        payment: float = 0,
        start_amount: float = 0,
        payment_timing: int = 0
) -> float:
    """
    Calculate the future value of an investment based on periodic, constant
    payments and a constant interest rate.

    Spreadsheet equivalent: FV(rate, nper, pmt, [pv], [type])

    Formula:
        FV = -(S₀·qⁿ + P·(1 + r·t)·(qⁿ - 1)/r)      q = 1 + r, t = 1 for annuity-due

    This is the inverse of pv: pv(rate, n, P, fv(rate, n, P, S₀)) == S₀.

    Args:
        rate: Interest rate per period as decimal
        periods: Number of payment periods (may be fractional)
        payment: Payment made each period (default 0)
        start_amount: Balance at the start (present value, default 0)
        payment_timing: 0 = end of period, nonzero = beginning of period

    Returns:
        Future value

    Example:
        >>> round(fv(0.005, 10, -200, -500, 1), 6)
        2581.403374
    """
    r = to_number(rate)
    n = to_number(periods)
    p = to_number(payment)
    s0 = to_number(start_amount)

    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        if r == 0:
            return float(-(s0 + p * n))

        t = 1 if is_beginning(payment_timing) else 0
        qn = (1 + r) ** n
        return float(-(s0 * qn + p * (1 + r * t) * (qn - 1) / r))


def nper(
        rate: float,
        payment: float,
        start_amount: float = 0,
        future_value: float = 0,
        payment_timing: int = 0
) -> float:
    """
    Calculate the number of periods for an investment based on periodic,
    constant payments and a constant interest rate.

    Spreadsheet equivalent: NPER(rate, pmt, pv, [fv], [type])

    Setting the future value identity to zero and solving for n:

        z = P·(1 + r·t)/r
        n = ln((z - FV) / (z + S₀)) / ln(1 + r)

    For rate zero the balance falls linearly: n = -(S₀ + FV)/P.

    Args:
        rate: Interest rate per period as decimal
        payment: Payment made each period
        start_amount: Balance at the start (present value, default 0)
        future_value: Balance to attain after the last payment (default 0)
        payment_timing: 0 = end of period, nonzero = beginning of period

    Returns:
        Number of periods (fractional). +/-inf or nan when no number of
        periods can reach the future value.
    """
    r = to_number(rate)
    p = to_number(payment)
    s0 = to_number(start_amount)
    f = to_number(future_value)

    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        if r == 0:
            return float(-(s0 + f) / p)

        t = 1 if is_beginning(payment_timing) else 0
        z = p * (1 + r * t) / r
        return float(np.log((z - f) / (z + s0)) / np.log(1 + r))
