from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional

from home_calculator.core.formatting import format_currency
from home_calculator.core.scenarios import default_inputs

_NON_NUMERIC = re.compile(r"[^0-9.]")

DEFAULTS = default_inputs()


@dataclass(frozen=True)
class InputConfig:
    name: str
    label: str
    sublabel: Optional[str] = None
    placeholder: Optional[str] = None
    step: Optional[float] = None
    is_currency: bool = False


PROPERTY_INPUTS: List[InputConfig] = [
    InputConfig(
        "purchase_price",
        "Purchase Price",
        sublabel=f"Default: ${DEFAULTS.purchase_price}",
        placeholder=f"e.g., {DEFAULTS.purchase_price}",
        is_currency=True,
    ),
    InputConfig(
        "down_payment",
        "Down Payment",
        sublabel=f"Default: ${DEFAULTS.down_payment}",
        placeholder=f"e.g., {DEFAULTS.down_payment}",
        is_currency=True,
    ),
    InputConfig("interest_rate", "Interest Rate (%)", sublabel=f"Default: {DEFAULTS.interest_rate}%", step=0.1),
    InputConfig("loan_term", "Loan Term (years)", sublabel=f"Default: {DEFAULTS.loan_term} years"),
    InputConfig("property_tax", "Property Tax Rate (%)", sublabel=f"Default: {DEFAULTS.property_tax}%", step=0.1),
    InputConfig(
        "home_insurance", "Home Insurance (% of price)", sublabel=f"Default: {DEFAULTS.home_insurance}%", step=0.1
    ),
    InputConfig(
        "hoa_fees", "HOA Fees ($/month)", sublabel=f"Default: ${DEFAULTS.hoa_fees}", placeholder="0", is_currency=True
    ),
    InputConfig(
        "maintenance_annual",
        "Maintenance ($/year)",
        sublabel=f"e.g. HVAC, filters - Default: ${DEFAULTS.maintenance_annual}",
        placeholder=f"Default: {DEFAULTS.maintenance_annual}",
        is_currency=True,
    ),
    InputConfig(
        "renovations_annual",
        "Renovations ($/year)",
        sublabel=f"e.g. Roof, expansions - Default: ${DEFAULTS.renovations_annual}",
        placeholder=f"Default: {DEFAULTS.renovations_annual}",
        is_currency=True,
    ),
    InputConfig("utilities", "Utilities ($/month)", sublabel=f"Default: ${DEFAULTS.utilities}", is_currency=True),
]

FINANCE_INPUTS: List[InputConfig] = [
    InputConfig(
        "annual_income",
        "Annual Gross Income ($)",
        sublabel=f"Default: ${DEFAULTS.annual_income}",
        placeholder="e.g., 100000",
        is_currency=True,
    ),
    InputConfig(
        "monthly_debts",
        "Other Monthly Debts",
        sublabel=f"Car, Student Loans, etc - Default: ${DEFAULTS.monthly_debts}",
        placeholder="0",
        is_currency=True,
    ),
    InputConfig(
        "emergency_fund",
        "Emergency Fund ($)",
        sublabel=f"Default: ${DEFAULTS.emergency_fund}",
        placeholder="0",
        is_currency=True,
    ),
    InputConfig(
        "desired_monthly_housing",
        "Desired Monthly Housing ($)",
        sublabel=f"Default: ${DEFAULTS.desired_monthly_housing}",
        placeholder="e.g., 4000",
        is_currency=True,
    ),
    InputConfig("safety_multiplier", "Safety Multiplier (%)", sublabel="e.g., 10", placeholder="e.g., 10"),
]


def strip_to_numeric(text: str) -> str:
    """Drop everything but digits and the decimal point, so '$1,200' is stored as '1200'."""
    return _NON_NUMERIC.sub("", text or "")


def format_currency_input(value: str) -> str:
    if not value:
        return ""
    try:
        return format_currency(float(value))
    except ValueError:
        return value
