from __future__ import annotations

import math


def monthly_payment(principal: float, annual_rate_pct: float, term_years: float) -> float:
    """Fully amortizing payment M = L*r*(1+r)^n / ((1+r)^n - 1) with r monthly and n in months."""
    monthly_rate = annual_rate_pct / 100.0 / 12.0
    term_months = term_years * 12
    if term_months <= 0 or principal <= 0:
        return 0.0
    if 1 + monthly_rate <= 0:
        # A rate at or below -1200% has no meaningful annuity
        return 0.0
    try:
        factor = (1 + monthly_rate) ** term_months
    except OverflowError:
        # factor / (factor - 1) tends to 1 for very long terms
        return principal * monthly_rate
    if not math.isfinite(factor):
        return principal * monthly_rate
    if factor == 1:
        return principal / term_months
    return principal * monthly_rate * factor / (factor - 1)


def lifetime_payments(payment: float, term_years: float) -> float:
    """Total paid when the same payment is made every month of the term."""
    return payment * 12 * max(term_years, 0.0)
