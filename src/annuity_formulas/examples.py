"""
Annuity Formulas - Reference Examples

Spreadsheet parity values for every public formula. Each case records the
arguments in library order, the value a spreadsheet returns (rounded as
published), and how many decimal places the comparison should use.

Structure:
  (1) ExampleSource - where a value comes from
  (2) ReferenceCase - one call and its expected result
  (3) REFERENCE_CASES - all cases, grouped by function

Sources:
  - WORKED: values computed for the library's own worked examples (8 decimals)
  - OFFICE_DOCS: examples from the spreadsheet function documentation
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Tuple

from annuity_formulas.payments import pmt, ppmt, ipmt, cumprinc, cumipmt
from annuity_formulas.values import pv, fv, nper
from annuity_formulas.rates import rate


# =============================================================================
# ENUMS
# =============================================================================

class ExampleSource(Enum):
    """Origin of an expected value."""
    WORKED = "WORKED"
    OFFICE_DOCS = "OFFICE_DOCS"


FUNCTIONS: Dict[str, Callable[..., float]] = {
    "pmt": pmt,
    "ppmt": ppmt,
    "ipmt": ipmt,
    "cumprinc": cumprinc,
    "cumipmt": cumipmt,
    "pv": pv,
    "fv": fv,
    "nper": nper,
    "rate": rate,
}


# =============================================================================
# REFERENCE CASE
# =============================================================================

@dataclass(frozen=True)
class ReferenceCase:
    """A single formula call with its published result."""
    function: str                        # key into FUNCTIONS
    args: Tuple[float, ...]              # positional arguments in library order
    expected: float                      # spreadsheet result, rounded to `places`
    places: int = 8                      # decimal places for comparison
    source: ExampleSource = ExampleSource.WORKED

    @property
    def label(self) -> str:
        """Call as it would be written, e.g. pmt(0.01, 12, 1000)."""
        return f"{self.function}({', '.join(repr(a) for a in self.args)})"

    def evaluate(self) -> float:
        return FUNCTIONS[self.function](*self.args)


# =============================================================================
# CASES
# =============================================================================

# Loan of 1000 over 12 periods at 1% is the running example.
PMT_CASES = (
    ReferenceCase("pmt", (0.01, 12, 1000), -88.84878868),
    ReferenceCase("pmt", (0.01, 12, 1000, 0, 1), -87.96909770),
    ReferenceCase("pmt", (0.01, 6, 1000, -500), -91.27418336),
    ReferenceCase("pmt", (0.01, 6, 1000, -500, 1), -90.37047857),
    ReferenceCase("pmt", (0, 5, 1000), -200.0),
    ReferenceCase("pmt", (0, 5, 1000, 0, 1), -200.0),
    ReferenceCase("pmt", (0, 5, 1000, -500), -100.0),
    ReferenceCase("pmt", (0, 5, 1000, -500, 1), -100.0),
)

PPMT_CASES = (
    ReferenceCase("ppmt", (0.01, 1, 12, 1000), -78.84878868),
    ReferenceCase("ppmt", (0.01, 6, 12, 1000), -82.87086934),
    ReferenceCase("ppmt", (0, 6, 10, 1000), -100.0),
    ReferenceCase("ppmt", (0.01, 12, 12, 1000), -87.9690977),
    ReferenceCase("ppmt", (0.01, 1, 12, 1000, -500), -39.42439434),
    ReferenceCase("ppmt", (0.01, 6, 12, 1000, -500), -41.43543467),
    ReferenceCase("ppmt", (0, 6, 10, 1000, -500), -50.0),
    ReferenceCase("ppmt", (0.01, 12, 12, 1000, -500), -43.98454885),
    ReferenceCase("ppmt", (0.01, 1, 12, 1000, 0, 1), -87.9690977),
    ReferenceCase("ppmt", (0.01, 6, 12, 1000, 0, 1), -82.05036568),
    ReferenceCase("ppmt", (0, 6, 10, 1000, 0, 1), -100.0),
    ReferenceCase("ppmt", (0.01, 12, 12, 1000, 0, 1), -87.09811654),
    ReferenceCase("ppmt", (0.01, 1, 12, 1000, -500, 1), -48.9350439),
    ReferenceCase("ppmt", (0.01, 6, 12, 1000, -500, 1), -41.02518284),
    ReferenceCase("ppmt", (0, 6, 10, 1000, -500, 1), -50.0),
    ReferenceCase("ppmt", (0.01, 12, 12, 1000, -500, 1), -43.54905827),
)

IPMT_CASES = (
    ReferenceCase("ipmt", (0.01, 1, 12, 1000), -10.0),
    ReferenceCase("ipmt", (0.01, 6, 12, 1000), -5.97791934),
    ReferenceCase("ipmt", (0, 6, 12, 1000), 0.0),
    ReferenceCase("ipmt", (0.01, 12, 12, 1000), -0.87969098),
    ReferenceCase("ipmt", (0.01, 1, 12, 1000, -500), -10.0),
    ReferenceCase("ipmt", (0.01, 6, 12, 1000, -500), -7.98895967),
    ReferenceCase("ipmt", (0, 6, 12, 1000, -500), 0.0),
    ReferenceCase("ipmt", (0.01, 12, 12, 1000, -500), -5.43984549),
    ReferenceCase("ipmt", (0.01, 1, 12, 1000, 0, 1), 0.0),
    ReferenceCase("ipmt", (0.01, 6, 12, 1000, 0, 1), -5.91873202),
    ReferenceCase("ipmt", (0, 6, 12, 1000, 0, 1), 0.0),
    ReferenceCase("ipmt", (0.01, 12, 12, 1000, 0, 1), -0.87098117),
    ReferenceCase("ipmt", (0.01, 1, 12, 1000, -500, 1), 0.0),
    ReferenceCase("ipmt", (0.01, 6, 12, 1000, -500, 1), -7.90986106),
    ReferenceCase("ipmt", (0, 6, 12, 1000, -500, 1), 0.0),
    ReferenceCase("ipmt", (0.01, 12, 12, 1000, -500, 1), -5.38598563),
)

PV_CASES = (
    ReferenceCase("pv", (0.01, 1, 100), -99.00990099),
    ReferenceCase("pv", (0.01, 12, 100), -1125.50774735),
    ReferenceCase("pv", (0.01, 12, 100, 0, 1), -1136.76282482),
    ReferenceCase("pv", (0.01, 12, 100, 1000), -2012.95697261),
)

# 30-year mortgage of 125000 at 9% annual (0.75% monthly), second year
CUMULATIVE_CASES = (
    ReferenceCase("cumprinc", (0.0075, 360, 125000, 13, 24), -934.1071234,
                  places=5, source=ExampleSource.OFFICE_DOCS),
    ReferenceCase("cumipmt", (0.0075, 360, 125000, 13, 24), -11135.23213,
                  places=4, source=ExampleSource.OFFICE_DOCS),
    ReferenceCase("cumipmt", (0.0075, 360, 125000, 1, 1), -937.5,
                  places=6, source=ExampleSource.OFFICE_DOCS),
)

FV_CASES = (
    ReferenceCase("fv", (0.005, 10, -200, -500, 1), 2581.403374,
                  places=5, source=ExampleSource.OFFICE_DOCS),
)

NPER_CASES = (
    ReferenceCase("nper", (0.01, -100, -1000, 10000, 1), 59.6738657,
                  places=6, source=ExampleSource.OFFICE_DOCS),
    ReferenceCase("nper", (0.01, -100, -1000, 10000), 60.0821229,
                  places=6, source=ExampleSource.OFFICE_DOCS),
    ReferenceCase("nper", (0.01, -100, -1000), -9.57859404,
                  places=6, source=ExampleSource.OFFICE_DOCS),
)

RATE_CASES = (
    ReferenceCase("rate", (48, -200, 8000), 0.00770147,
                  places=7, source=ExampleSource.OFFICE_DOCS),
)

REFERENCE_CASES: Tuple[ReferenceCase, ...] = (
    PMT_CASES + PPMT_CASES + IPMT_CASES + PV_CASES
    + CUMULATIVE_CASES + FV_CASES + NPER_CASES + RATE_CASES
)
