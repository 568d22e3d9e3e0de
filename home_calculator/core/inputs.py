from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional

# camelCase keys the browser form may send, mapped to field names
_FORM_KEYS = {
    "purchasePrice": "purchase_price",
    "downPayment": "down_payment",
    "interestRate": "interest_rate",
    "loanTerm": "loan_term",
    "propertyTax": "property_tax",
    "homeInsurance": "home_insurance",
    "hoaFees": "hoa_fees",
    "maintenanceAnnual": "maintenance_annual",
    "renovationsAnnual": "renovations_annual",
    "annualIncome": "annual_income",
    "monthlyDebts": "monthly_debts",
    "emergencyFund": "emergency_fund",
    "desiredMonthlyHousing": "desired_monthly_housing",
    "safetyMultiplier": "safety_multiplier",
}


@dataclass(frozen=True)
class CalculatorInputs:
    """Raw form values, kept as text so the user can edit them freely."""

    purchase_price: str = ""
    down_payment: str = ""
    interest_rate: str = ""  # annual %
    loan_term: str = ""  # years
    property_tax: str = ""  # annual % of price
    home_insurance: str = ""  # annual % of price
    hoa_fees: str = ""  # monthly
    maintenance_annual: str = ""
    renovations_annual: str = ""
    utilities: str = ""  # monthly
    annual_income: str = ""
    monthly_debts: str = ""
    emergency_fund: str = ""
    desired_monthly_housing: str = ""
    safety_multiplier: str = ""  # % markup on every cost

    @classmethod
    def from_mapping(cls, values: Optional[Mapping[str, Any]]) -> "CalculatorInputs":
        if values is None:
            return cls()
        known = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in values.items():
            name = _FORM_KEYS.get(key, key)
            if name in known:
                kwargs[name] = "" if value is None else str(value)
        return cls(**kwargs)

    def to_dict(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True)
class ParsedInputs:
    purchase_price: float
    down_payment: float
    interest_rate: float
    loan_term: float
    property_tax: float
    home_insurance: float
    hoa_fees: float
    maintenance_annual: float
    renovations_annual: float
    utilities: float
    annual_income: float
    monthly_debts: float
    emergency_fund: float
    desired_monthly_housing: float
    safety_multiplier: float

    @property
    def loan_principal(self) -> float:
        return max(self.purchase_price - self.down_payment, 0.0)

    @property
    def monthly_income(self) -> float:
        return self.annual_income / 12.0

    def has_required(self) -> bool:
        return self.purchase_price != 0 and self.down_payment != 0 and self.annual_income != 0
