# Requires Python 3.12+
"""
Annuity Formulas — spreadsheet-compatible loan and annuity functions.

Closed-form PMT, PPMT, IPMT, PV, CUMPRINC and companions, sharing one
amortization model built on the growth factor q = 1 + rate.
"""

from __future__ import annotations

__version__ = "0.1.0"

# Argument normalization
from annuity_formulas.inputs import (
    PaymentTiming,
    to_number,
    to_integer,
    is_beginning,
)

# Payments (PMT, PPMT, IPMT, CUMPRINC, CUMIPMT)
from annuity_formulas.payments import (
    PeriodOutOfRangeError,
    pmt,
    ppmt,
    ipmt,
    cumprinc,
    cumipmt,
)

# Values (PV, FV, NPER)
from annuity_formulas.values import (
    pv,
    fv,
    nper,
)

# Rates (RATE)
from annuity_formulas.rates import rate

# Examples (reference cases)
from annuity_formulas.examples import (
    ExampleSource,
    ReferenceCase,
    REFERENCE_CASES,
)

__all__ = [
    "__version__",
    # Inputs
    "PaymentTiming",
    "to_number",
    "to_integer",
    "is_beginning",
    # Payments
    "PeriodOutOfRangeError",
    "pmt",
    "ppmt",
    "ipmt",
    "cumprinc",
    "cumipmt",
    # Values
    "pv",
    "fv",
    "nper",
    # Rates
    "rate",
    # Examples
    "ExampleSource",
    "ReferenceCase",
    "REFERENCE_CASES",
]
