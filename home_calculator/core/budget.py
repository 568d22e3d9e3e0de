from __future__ import annotations

from dataclasses import dataclass, fields

from .inputs import ParsedInputs
from .mortgage import lifetime_payments, monthly_payment


@dataclass(frozen=True)
class CostBreakdown:
    mortgage: float = 0.0
    tax: float = 0.0
    insurance: float = 0.0
    hoa: float = 0.0
    maintenance: float = 0.0
    renovations: float = 0.0
    utilities: float = 0.0

    @property
    def total(self) -> float:
        return sum(self.as_dict().values())

    def scaled(self, factor: float) -> "CostBreakdown":
        return CostBreakdown(**{name: value * factor for name, value in self.as_dict().items()})

    def as_dict(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self)}


def safety_factor(multiplier_pct: float) -> float:
    """Markup applied to every cost to model a stress-tested budget."""
    return 1 + multiplier_pct / 100.0


def monthly_costs(parsed: ParsedInputs) -> CostBreakdown:
    """Seven monthly housing cost components, after the safety markup."""
    price = parsed.purchase_price
    base = CostBreakdown(
        mortgage=monthly_payment(parsed.loan_principal, parsed.interest_rate, parsed.loan_term),
        tax=price * parsed.property_tax / 100 / 12,
        insurance=price * parsed.home_insurance / 100 / 12,
        hoa=parsed.hoa_fees,
        maintenance=parsed.maintenance_annual / 12,
        renovations=parsed.renovations_annual / 12,
        utilities=parsed.utilities,
    )
    return base.scaled(safety_factor(parsed.safety_multiplier))


def lifetime_costs(monthly: CostBreakdown, term_years: float) -> CostBreakdown:
    return CostBreakdown(**{name: lifetime_payments(value, term_years) for name, value in monthly.as_dict().items()})
