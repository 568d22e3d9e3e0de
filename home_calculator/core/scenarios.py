from __future__ import annotations

from .inputs import CalculatorInputs


def default_inputs() -> CalculatorInputs:
    """Provide a reasonable starting point for the UI."""
    return CalculatorInputs(
        purchase_price="450000",
        down_payment="100000",
        interest_rate="5.3",
        loan_term="15",
        property_tax="1.1",
        home_insurance="0.9",
        hoa_fees="90",
        maintenance_annual="2500",
        renovations_annual="3500",
        utilities="300",
        annual_income="160000",
        monthly_debts="0",
        emergency_fund="18000",
        desired_monthly_housing="4000",
        safety_multiplier="10",
    )
