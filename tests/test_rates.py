"""
Unit tests for the implied rate solver.

Version: 0.1.0
Status: Active
"""

import unittest

from annuity_formulas.rates import rate, DEFAULT_BRACKET
from annuity_formulas.payments import pmt


class TestRate(unittest.TestCase):
    """RATE: periodic rate recovered by root finding."""

    def test_reference_value(self):
        # 8000 borrowed, repaid with 48 monthly payments of 200
        self.assertAlmostEqual(rate(48, -200, 8000), 0.00770147, places=7)

    def test_recovers_rate_from_pmt(self):
        scenarios = [
            (0.01, 12, 1000, 0, 0),
            (0.01, 12, 1000, 0, 1),
            (0.005, 360, 250000, 0, 0),
            (0.02, 24, 5000, -1000, 0),
            (0.0125, 60, 30000, -5000, 1),
        ]
        for r, n, s0, sn, t in scenarios:
            with self.subTest(rate=r, periods=n, start_amount=s0, future_value=sn, payment_timing=t):
                payment = pmt(r, n, s0, sn, t)
                self.assertAlmostEqual(rate(n, payment, s0, sn, t), r, places=10)

    def test_zero_rate(self):
        self.assertAlmostEqual(rate(10, -100, 1000), 0.0, places=10)

    def test_no_sign_change_raises(self):
        # Payments and balance of the same sign cannot net to zero
        with self.assertRaisesRegex(ValueError, "Could not find a rate"):
            rate(12, 100, 1000)

    def test_custom_bracket(self):
        self.assertAlmostEqual(rate(48, -200, 8000, bracket=(0.0, 0.05)), 0.00770147, places=7)
        with self.assertRaises(ValueError):
            rate(48, -200, 8000, bracket=(0.01, 0.05))

    def test_bracket_must_increase(self):
        with self.assertRaisesRegex(ValueError, "bracket must be increasing"):
            rate(48, -200, 8000, bracket=(1.0, -0.5))

    def test_default_bracket(self):
        lower, upper = DEFAULT_BRACKET
        self.assertLess(lower, 0.0)
        self.assertGreater(upper, 0.0)


if __name__ == '__main__':
    unittest.main(verbosity=2)
