# Requires Python 3.12+
# Uses native type hints: list[x], tuple[x, y], X | None (PEP 585, PEP 604)
from __future__ import annotations

import warnings

import numpy as np

from .inputs import is_beginning, to_integer, to_number

__version__ = "0.1.0"


class PeriodOutOfRangeError(ValueError):
    """Raised by ppmt/ipmt when the queried period lies outside [1, periods]."""

    def __init__(self, function: str, period: object, periods: int) -> None:
        self.function = function
        self.period = period
        self.periods = periods
        super().__init__(
            f"{function} Error: the period should be between 1 and periods ({periods}), got {period}"
        )


def _warn_zero_periods() -> None:
    warnings.warn("periods is zero, payment is undefined (returning inf/nan)", UserWarning, stacklevel=3)


# =============================================================================
# PMT: Level Payment
# =============================================================================

def pmt(
        rate: float,
        periods: int,
        start_amount: float,
        future_value: float = 0,
        payment_timing: int = 0
) -> float:
    """
    Calculate the level payment for a loan based on constant payments and a
    constant interest rate.

    Spreadsheet equivalent: PMT(rate, nper, pv, [fv], [type])

    DERIVATION:
    -----------
    With growth factor q = 1 + r, a balance S₀ compounded over n periods while
    paying P at the end of each period ends at:

        Sₙ = S₀·qⁿ + P·(qⁿ - 1)/r

    Requiring Sₙ = -FV (the final balance is settled by a last payment of the
    same sign as P) and solving for P:

        P = (S₀·qⁿ + FV)·r / (1 - qⁿ)

    When payments fall at the beginning of each period every payment earns one
    extra period of interest, so the annuity-due payment is P / q.

    SIGN CONVENTION:
    ----------------
    Cash paid out is negative. A positive loan amount yields a negative payment.
    The future value carries the sign of the payments: pass fv=-500 to leave a
    balance of 500 outstanding after the last payment.

    Args:
        rate: Interest rate per period as decimal (e.g., 0.01 for 1%)
        periods: Number of payment periods (truncated to an integer)
        start_amount: Loan balance at the start (present value)
        future_value: Balance to attain after the last payment (default 0)
        payment_timing: 0 = end of period, nonzero = beginning of period

    Returns:
        Periodic payment. When rate or periods is zero the payment is the
        straight-line -(fv + start_amount) / periods, which is +/-inf or nan
        for periods = 0.

    Warns:
        UserWarning: If periods is zero

    Example:
        >>> round(pmt(0.01, 12, 1000), 8)
        -88.84878868
    """
    n = to_integer(periods)
    r = to_number(rate)
    s0 = to_number(start_amount)
    sn = to_number(future_value)

    if n == 0:
        _warn_zero_periods()
    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        if r == 0 or n == 0:
            return float(-(sn + s0) / n)

        q = 1 + r
        qn = q ** n
        p = (s0 * qn + sn) * r / (1 - qn)

        return float(p / q if is_beginning(payment_timing) else p)


# =============================================================================
# PPMT / IPMT: Single-Period Decomposition
# =============================================================================
#
# For period i (0-indexed) the balance carried into the period is the start
# amount compounded i times less the compounded payments already made. The
# principal portion of the level payment therefore grows geometrically:
#
#     PRINCIPALᵢ = qⁱ·(S₀·r/qt + P)        qt = q for annuity-due, else 1
#     INTERESTᵢ  = P - PRINCIPALᵢ
#
# The first annuity-due payment is made before any interest accrues, so it is
# entirely principal.
# =============================================================================

def _period_index(function: str, period: object, n: int) -> int:
    """Return the 0-based period index, validating it against n when n is nonzero."""
    i = to_integer(period) - 1
    if n and (i < 0 or i >= n):
        raise PeriodOutOfRangeError(function, period, n)
    return i


def ppmt(
        rate: float,
        period: int,
        periods: int,
        start_amount: float,
        future_value: float = 0,
        payment_timing: int = 0
) -> float:
    """
    Calculate the principal portion of the payment for a given period.

    Spreadsheet equivalent: PPMT(rate, per, nper, pv, [fv], [type])

    Args:
        rate: Interest rate per period as decimal
        period: Period to query, 1-based, in the range 1 to periods
        periods: Number of payment periods
        start_amount: Loan balance at the start (present value)
        future_value: Balance to attain after the last payment (default 0)
        payment_timing: 0 = end of period, nonzero = beginning of period

    Returns:
        Principal paid in the given period. With rate or periods zero every
        period repays the same -(fv + start_amount) / periods.

    Raises:
        PeriodOutOfRangeError: If periods is nonzero and period is not in [1, periods]

    Warns:
        UserWarning: If periods is zero

    Example:
        >>> round(ppmt(0.01, 1, 12, 1000), 8)
        -78.84878868
    """
    n = to_integer(periods)
    i = _period_index("PPMT", period, n)

    r = to_number(rate)
    s0 = to_number(start_amount)
    sn = to_number(future_value)

    if n == 0:
        _warn_zero_periods()
    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        if r == 0 or n == 0:
            return float(-(sn + s0) / n)

        beginning = is_beginning(payment_timing)
        q = 1 + r
        qt = q if beginning else 1
        qn = q ** n
        qi = q ** i
        p = (s0 * qn + sn) * r / (1 - qn) / qt

        if i == 0 and beginning:
            return float(p)
        return float(qi * (s0 * r / qt + p))


def ipmt(
        rate: float,
        period: int,
        periods: int,
        start_amount: float,
        future_value: float = 0,
        payment_timing: int = 0
) -> float:
    """
    Calculate the interest portion of the payment for a given period.

    Spreadsheet equivalent: IPMT(rate, per, nper, pv, [fv], [type])

    Computed as the level payment minus the principal portion, so that
    ppmt + ipmt == pmt holds exactly for matching inputs.

    Args:
        rate: Interest rate per period as decimal
        period: Period to query, 1-based, in the range 1 to periods
        periods: Number of payment periods
        start_amount: Loan balance at the start (present value)
        future_value: Balance to attain after the last payment (default 0)
        payment_timing: 0 = end of period, nonzero = beginning of period

    Returns:
        Interest paid in the given period; nan when periods is zero, 0.0 when
        rate is zero.

    Raises:
        PeriodOutOfRangeError: If periods is nonzero and period is not in [1, periods]

    Warns:
        UserWarning: If periods is zero
    """
    n = to_integer(periods)
    if not n:
        _warn_zero_periods()
        return float('nan')
    i = _period_index("IPMT", period, n)

    r = to_number(rate)
    if r == 0:
        return 0.0

    s0 = to_number(start_amount)
    sn = to_number(future_value)

    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        beginning = is_beginning(payment_timing)
        q = 1 + r
        qt = q if beginning else 1
        qn = q ** n
        qi = q ** i
        p = (s0 * qn + sn) * r / (1 - qn) / qt

        if i == 0 and beginning:
            return 0.0
        return float(p - qi * (s0 * r / qt + p))


# =============================================================================
# CUMPRINC / CUMIPMT: Period Ranges
# =============================================================================

def cumprinc(
        rate: float,
        periods: int,
        start_amount: float,
        start_period: int = 1,
        end_period: int | None = None,
        future_value: float = 0,
        payment_timing: int = 0
) -> float:
    """
    Calculate the cumulative principal paid between start_period and end_period
    (inclusive).

    Spreadsheet equivalent: CUMPRINC(rate, nper, pv, start_period, end_period, type)

    Summing the geometric principal series PRINCIPALₖ = qᵏ·(S₀·r/qt + P) for
    k = i..j-1 (i = start_period - 1, j = end_period) gives the closed form:

        S₀·(qʲ/qt - qⁱ/qti) + P/r·(qʲ - qⁱ)

    where qti = 1 when the range starts at the first period, since the first
    annuity-due payment is pure principal.

    The period bounds are not validated: periods outside 1..periods extrapolate
    the same series.

    Args:
        rate: Interest rate per period as decimal
        periods: Number of payment periods
        start_amount: Loan balance at the start (present value)
        start_period: First period in the range, 1-based (default 1; 0/None -> 1)
        end_period: Last period in the range (default None -> periods; 0 -> periods)
        future_value: Balance to attain after the last payment (default 0).
            The spreadsheet CUMPRINC has no fv argument; 0 reproduces it.
        payment_timing: 0 = end of period, nonzero = beginning of period

    Returns:
        Cumulative principal over the range (negative for a positive loan)

    Warns:
        UserWarning: If periods is zero

    Example:
        >>> round(cumprinc(0.0075, 360, 125000, 13, 24), 7)
        -934.1071234
    """
    r = to_number(rate)
    n = to_integer(periods)
    s0 = to_number(start_amount)
    i = (to_integer(start_period) or 1) - 1
    j = to_integer(end_period) or n
    sn = to_number(future_value)

    if n == 0:
        _warn_zero_periods()
    return _cumprinc(r, n, s0, i, j, sn, is_beginning(payment_timing))


def _cumprinc(r, n, s0, i, j, sn, beginning):
    """Closed-form principal over periods i+1..j on already normalized arguments."""
    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        if r == 0 or n == 0:
            return float(-(sn + s0) / n * (j - i))

        q = 1 + r
        qt = q if beginning else 1
        qti = qt if i else 1
        qn = q ** n
        qi = q ** i
        qj = q ** j
        p_ = (s0 * qn + sn) / (1 - qn) / qt

        return float(s0 * (qj / qt - qi / qti) + p_ * (qj - qi))


def cumipmt(
        rate: float,
        periods: int,
        start_amount: float,
        start_period: int = 1,
        end_period: int | None = None,
        future_value: float = 0,
        payment_timing: int = 0
) -> float:
    """
    Calculate the cumulative interest paid between start_period and end_period
    (inclusive).

    Spreadsheet equivalent: CUMIPMT(rate, nper, pv, start_period, end_period, type)

    Every payment in the range is the same level payment, so the interest is
    the total paid over the range less the principal from cumprinc. Arguments
    and defaults are those of cumprinc; bounds are not validated.

    Returns:
        Cumulative interest over the range; 0.0 when rate is zero, nan when
        periods is zero.

    Warns:
        UserWarning: If periods is zero (once, from pmt)
    """
    r = to_number(rate)
    n = to_integer(periods)
    s0 = to_number(start_amount)
    i = (to_integer(start_period) or 1) - 1
    j = to_integer(end_period) or n
    sn = to_number(future_value)

    payment = pmt(rate, periods, start_amount, future_value, payment_timing)
    principal = _cumprinc(r, n, s0, i, j, sn, is_beginning(payment_timing))

    with np.errstate(invalid='ignore'):
        return float(np.float64(payment) * (j - i) - principal)
